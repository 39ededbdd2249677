"""ItemEncrypt Python SDK.

Password-derived symmetric encryption keys with a compact, versioned binary
serialization.

Example:
    ```python
    from itemencrypt import EncryptionKey, Scheme

    key = EncryptionKey.from_password(
        "correct horse battery staple",
        ["alice@example.com"],
        Scheme.default(),
    )

    # Persist the key somewhere secure...
    blob = key.raw_data

    # ...and restore it later
    restored = EncryptionKey.from_raw_data(blob)
    assert restored == key
    ```
"""

from .constants import DEFAULT_FORMAT_TAG, V1_PBKDF2_ITERATIONS, V2_PBKDF2_ITERATIONS
from .errors import (
    BadFormatDataError,
    Base64URLDecodeError,
    ImproperKeyError,
    InitializationVectorSizeError,
    InvalidSchemeError,
    ItemEncryptError,
    SaltSizeError,
    SeedSizeError,
)
from .key import EncryptionKey
from .scheme import Format, Scheme

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "EncryptionKey",
    "Format",
    "Scheme",
    # Constants
    "DEFAULT_FORMAT_TAG",
    "V1_PBKDF2_ITERATIONS",
    "V2_PBKDF2_ITERATIONS",
    # Errors
    "ItemEncryptError",
    "ImproperKeyError",
    "BadFormatDataError",
    "InitializationVectorSizeError",
    "SaltSizeError",
    "SeedSizeError",
    "InvalidSchemeError",
    "Base64URLDecodeError",
    # Version
    "__version__",
]
