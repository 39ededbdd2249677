"""Password normalization, salt treatment and key stretching for ItemEncrypt."""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.hmac import HMAC
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from ..errors import InvalidSchemeError

_HASH_ALGORITHMS: dict[str, type[hashes.HashAlgorithm]] = {
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
}

# Unicode Zs, Zl and Zp separators plus the C0/C1 line and tab controls.
# U+001C to U+001F are not trimmed.
_PASSWORD_WHITESPACE = (
    "\t\n\v\f\r\x85"
    " \xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def hash_algorithm(name: str) -> hashes.HashAlgorithm:
    """Look up a hash algorithm by its scheme identifier.

    Args:
        name: Algorithm identifier such as ``"sha256"``.

    Returns:
        A fresh hash algorithm instance.

    Raises:
        InvalidSchemeError: If the identifier is not supported.
    """
    try:
        return _HASH_ALGORITHMS[name]()
    except KeyError:
        raise InvalidSchemeError(f"Unsupported HMAC algorithm: {name}") from None


def normalize_password(password: str) -> str:
    """Trim surrounding whitespace and apply Unicode NFKD normalization.

    Args:
        password: The raw password string from the user.

    Returns:
        The normalized password.
    """
    return unicodedata.normalize("NFKD", password.strip(_PASSWORD_WHITESPACE))


def treat_seed(seed: bytes, keywords: Iterable[str], algorithm: str) -> bytes:
    """Derive a treated salt from a seed and contextual keywords.

    Each keyword is fed, in order, into one running HMAC keyed by the seed.

    Args:
        seed: Raw entropy used as the HMAC key.
        keywords: Contextual strings (account ID, email address, ...).
        algorithm: HMAC algorithm identifier.

    Returns:
        The HMAC digest.
    """
    hasher = HMAC(seed, hash_algorithm(algorithm))
    for keyword in keywords:
        hasher.update(keyword.encode("utf-8"))
    return hasher.finalize()


def derive_key(password: str, salt: bytes, algorithm: str, length: int, iterations: int) -> bytes:
    """Stretch a password into key material using PBKDF2-HMAC.

    Args:
        password: The already normalized password.
        salt: The treated salt.
        algorithm: Hash algorithm identifier used by PBKDF2.
        length: Number of key bytes to produce.
        iterations: PBKDF2 iteration count.

    Returns:
        The derived key bytes.
    """
    kdf = PBKDF2HMAC(
        algorithm=hash_algorithm(algorithm),
        length=length,
        salt=salt,
        iterations=iterations,
    )
    return kdf.derive(password.encode("utf-8"))
