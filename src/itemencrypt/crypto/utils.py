"""Base64url encoding/decoding utilities for ItemEncrypt."""

import base64
import re

from ..errors import Base64URLDecodeError

_FORBIDDEN_CHARS = re.compile(r"[+/=]")
_BASE64URL_CHARS = re.compile(r"[A-Za-z0-9_-]*")


def to_base64url(data: bytes) -> str:
    """Encode bytes to URL-safe base64 without padding.

    Args:
        data: The bytes to encode.

    Returns:
        URL-safe base64 string without padding.
    """
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def from_base64url(s: str) -> bytes:
    """Decode an unpadded URL-safe base64 string to bytes.

    Args:
        s: The base64url string to decode.

    Returns:
        The decoded bytes.

    Raises:
        Base64URLDecodeError: If the string contains padding, standard
            base64 characters, or anything outside the base64url alphabet.
    """
    if _FORBIDDEN_CHARS.search(s):
        raise Base64URLDecodeError("Base64URL string contains forbidden characters (+, / or =)")
    if not _BASE64URL_CHARS.fullmatch(s):
        raise Base64URLDecodeError("Base64URL string contains non-Base64URL characters")
    if len(s) % 4 == 1:
        raise Base64URLDecodeError("Base64URL string has an impossible length")

    # Add padding if needed
    padding = 4 - (len(s) % 4)
    if padding != 4:
        s += "=" * padding
    return base64.urlsafe_b64decode(s)
