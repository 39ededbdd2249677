"""Error hierarchy for ItemEncrypt."""

from __future__ import annotations


class ItemEncryptError(Exception):
    """Base exception for all ItemEncrypt errors."""

    pass


class ImproperKeyError(ItemEncryptError):
    """Key material or serialized key data is not valid for its scheme."""

    pass


class BadFormatDataError(ImproperKeyError):
    """Serialized key data does not start with a known version tag."""

    pass


class _SizeMismatchError(ImproperKeyError):
    """A key component has the wrong length for its scheme.

    Attributes:
        expected: The length the scheme requires, in bytes.
        actual: The length that was supplied, in bytes.
    """

    component = "component"

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Invalid {self.component} size: {actual} bytes, expected {expected}")


class InitializationVectorSizeError(_SizeMismatchError):
    """Initialization vector length does not match the scheme."""

    component = "initialization vector"


class SaltSizeError(_SizeMismatchError):
    """Treated salt length does not match the scheme."""

    component = "salt"


class SeedSizeError(_SizeMismatchError):
    """Seed length does not match the scheme."""

    component = "seed"


class InvalidSchemeError(ItemEncryptError):
    """Scheme configuration is internally inconsistent."""

    pass


class Base64URLDecodeError(ItemEncryptError, ValueError):
    """Text is not valid unpadded base64url."""

    pass
