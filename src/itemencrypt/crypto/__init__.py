"""Cryptographic operations for ItemEncrypt."""

from .constants import VERSION_TAG_SIZE
from .entropy import RandomBytes, random_bytes
from .kdf import derive_key, hash_algorithm, normalize_password, treat_seed
from .utils import from_base64url, to_base64url
from .validation import validate_initialization_vector, validate_salt, validate_seed

__all__ = [
    "VERSION_TAG_SIZE",
    "RandomBytes",
    "derive_key",
    "from_base64url",
    "hash_algorithm",
    "normalize_password",
    "random_bytes",
    "to_base64url",
    "treat_seed",
    "validate_initialization_vector",
    "validate_salt",
    "validate_seed",
]
