"""Versioned encryption schemes for ItemEncrypt."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, nonmember

from .constants import DEFAULT_FORMAT_TAG, V1_PBKDF2_ITERATIONS, V2_PBKDF2_ITERATIONS
from .crypto.constants import AES_KEY_SIZE, VERSION_TAG_SIZE
from .crypto.kdf import derive_key, hash_algorithm
from .errors import InvalidSchemeError

logger = logging.getLogger("itemencrypt")


class Format(Enum):
    """Fixed-width version tag that leads every serialized key."""

    V1 = b"IE\x00\x01"
    V2 = b"IE\x00\x02"

    # Width of every tag, in bytes
    DATA_SIZE = nonmember(VERSION_TAG_SIZE)

    def encode(self) -> bytes:
        """Return the tag bytes."""
        return self.value

    @classmethod
    def decode(cls, data: bytes) -> Format | None:
        """Decode a version tag.

        Args:
            data: Exactly ``Format.DATA_SIZE`` bytes.

        Returns:
            The matching format, or None if the bytes are not a known tag.
        """
        if len(data) != VERSION_TAG_SIZE:
            return None
        try:
            return cls(bytes(data))
        except ValueError:
            return None


@dataclass(frozen=True)
class Scheme:
    """Algorithm and size configuration bound to one version tag.

    Attributes:
        format: The version tag identifying this scheme on the wire.
        hmac_algorithm: Hash used for seed treatment and key stretching.
        seed_size: Required seed length in bytes.
        initialization_vector_size: Required IV length in bytes.
        stretched_salt_size: Required treated salt length in bytes. Must equal
            the HMAC digest size, since the treated salt is an HMAC digest.
        key_size: Length of the derived key in bytes.
        iterations: PBKDF2 iteration count.
    """

    format: Format
    hmac_algorithm: str
    seed_size: int
    initialization_vector_size: int
    stretched_salt_size: int
    key_size: int
    iterations: int

    def __post_init__(self) -> None:
        digest_size = hash_algorithm(self.hmac_algorithm).digest_size

        for name in ("seed_size", "initialization_vector_size"):
            if getattr(self, name) < 0:
                raise InvalidSchemeError(f"Scheme {name} must not be negative")
        if self.key_size < 1:
            raise InvalidSchemeError("Scheme key_size must be positive")
        if self.iterations < 1:
            raise InvalidSchemeError("Scheme iterations must be positive")

        # Seed treatment always yields a full digest
        if self.stretched_salt_size != digest_size:
            raise InvalidSchemeError(
                f"Scheme stretched_salt_size {self.stretched_salt_size} does not match "
                f"{self.hmac_algorithm} digest size {digest_size}"
            )

    @property
    def version(self) -> Format:
        """The version tag of this scheme."""
        return self.format

    @classmethod
    def for_format(cls, format: Format) -> Scheme:
        """Return the registered scheme for a version tag."""
        return _SCHEMES[format]

    @classmethod
    def default(cls) -> Scheme:
        """Return the scheme used when none is specified."""
        return _SCHEMES[Format(DEFAULT_FORMAT_TAG)]

    def derive_key(self, password: str, salt: bytes) -> bytes:
        """Derive key material from a normalized password and treated salt.

        Args:
            password: The normalized password.
            salt: The treated salt, already validated against this scheme.

        Returns:
            ``key_size`` bytes of key material.
        """
        logger.debug("Deriving %s key with %d iterations", self.format.name, self.iterations)
        return derive_key(
            password,
            salt,
            algorithm=self.hmac_algorithm,
            length=self.key_size,
            iterations=self.iterations,
        )


_SCHEMES: dict[Format, Scheme] = {
    Format.V1: Scheme(
        format=Format.V1,
        hmac_algorithm="sha256",
        seed_size=16,
        initialization_vector_size=16,
        stretched_salt_size=32,
        key_size=AES_KEY_SIZE,
        iterations=V1_PBKDF2_ITERATIONS,
    ),
    Format.V2: Scheme(
        format=Format.V2,
        hmac_algorithm="sha512",
        seed_size=32,
        initialization_vector_size=12,
        stretched_salt_size=64,
        key_size=AES_KEY_SIZE,
        iterations=V2_PBKDF2_ITERATIONS,
    ),
}
