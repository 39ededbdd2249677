"""EncryptionKey - semantic representation of a derived symmetric key."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from .crypto.entropy import RandomBytes
from .crypto.entropy import random_bytes as system_random_bytes
from .crypto.kdf import normalize_password, treat_seed
from .crypto.utils import from_base64url, to_base64url
from .crypto.validation import (
    validate_initialization_vector,
    validate_salt,
    validate_seed,
)
from .errors import BadFormatDataError, InitializationVectorSizeError, SaltSizeError
from .scheme import Format, Scheme

logger = logging.getLogger("itemencrypt")


@dataclass(frozen=True)
class EncryptionKey:
    """A symmetric key derived from a password, with the data needed to re-derive it.

    Build keys with ``from_password``, ``from_seed``, ``from_salt`` or
    ``from_raw_data``. The dataclass constructor is reserved for those
    classmethods and for parsing; it checks component sizes but does not
    derive anything, so ``key_data`` must never be supplied to it directly.

    Two keys are equal (and hash equally) when scheme, IV, salt, key bytes and
    context all match. Keys that differ only by ``context`` are distinct.

    Example:
        ```python
        key = EncryptionKey.from_password("hunter2", ["alice@example.com"])
        blob = key.raw_data
        assert EncryptionKey.from_raw_data(blob) == key
        ```

    Attributes:
        scheme: The encryption scheme this key uses.
        key_data: The derived key bytes.
        initialization_vector: The IV stored alongside the key.
        salt: The treated salt the key was derived with.
        context: Optional label such as an account ID or email address.
    """

    scheme: Scheme
    key_data: bytes = field(repr=False)
    initialization_vector: bytes
    salt: bytes
    context: str | None = None

    def __post_init__(self) -> None:
        for name in ("key_data", "initialization_vector", "salt"):
            object.__setattr__(self, name, bytes(getattr(self, name)))
        validate_salt(self.salt, self.scheme)
        validate_initialization_vector(self.initialization_vector, self.scheme)

    # Construction

    @classmethod
    def from_password(
        cls,
        password: str,
        additional_keywords: Sequence[str] = (),
        scheme: Scheme | None = None,
        *,
        context: str | None = None,
        random_bytes: RandomBytes = system_random_bytes,
    ) -> EncryptionKey:
        """Derive a new key from a password using a fresh random seed and IV.

        The same inputs will NOT produce the same key twice. Use ``from_seed``
        or ``from_salt`` when the result must be reproducible.

        Args:
            password: The raw password string from the user.
            additional_keywords: Contextual strings to bind to the key.
            scheme: The scheme to derive with. Defaults to ``Scheme.default()``.
            context: Optional label stored on the key.
            random_bytes: Source of random bytes, called once for the seed
                and once for the IV.

        Returns:
            The derived key.
        """
        scheme = scheme or Scheme.default()
        seed = random_bytes(scheme.seed_size)
        iv = random_bytes(scheme.initialization_vector_size)

        # Sizes come from the validated scheme, so this only raises when a
        # custom random source returns the wrong number of bytes.
        return cls.from_seed(
            password,
            additional_keywords,
            seed=seed,
            iv=iv,
            scheme=scheme,
            context=context,
        )

    @classmethod
    def from_seed(
        cls,
        untreated_password: str,
        additional_keywords: Sequence[str] = (),
        *,
        seed: bytes,
        iv: bytes,
        scheme: Scheme | None = None,
        context: str | None = None,
    ) -> EncryptionKey:
        """Derive a key from a password, a seed and contextual keywords.

        The seed is used as an HMAC key over ``additional_keywords`` (in
        order) to produce the treated salt, then ``from_salt`` is called.

        Args:
            untreated_password: The raw password string from the user.
            additional_keywords: Contextual strings to bind to the key.
            seed: Raw entropy; must be ``scheme.seed_size`` bytes.
            iv: Initialization vector; must be
                ``scheme.initialization_vector_size`` bytes.
            scheme: The scheme to derive with. Defaults to ``Scheme.default()``.
            context: Optional label stored on the key.

        Returns:
            The derived key.

        Raises:
            SeedSizeError: If the seed is the wrong size.
            SaltSizeError: If the scheme's HMAC output is the wrong size.
            InitializationVectorSizeError: If the IV is the wrong size.
        """
        scheme = scheme or Scheme.default()
        validate_seed(seed, scheme)

        treated_salt = treat_seed(seed, additional_keywords, scheme.hmac_algorithm)

        return cls.from_salt(
            untreated_password,
            treated_salt=treated_salt,
            iv=iv,
            scheme=scheme,
            context=context,
        )

    @classmethod
    def from_salt(
        cls,
        untreated_password: str,
        *,
        treated_salt: bytes,
        iv: bytes,
        scheme: Scheme | None = None,
        context: str | None = None,
    ) -> EncryptionKey:
        """Derive a key from a password, a treated salt and an IV.

        The password is stripped of surrounding whitespace and NFKD-normalized
        here, and only here, so every entry point yields identical key bytes
        for the same logical password.

        Args:
            untreated_password: The raw password string from the user.
            treated_salt: Salt produced by seed treatment; must be
                ``scheme.stretched_salt_size`` bytes.
            iv: Initialization vector; must be
                ``scheme.initialization_vector_size`` bytes.
            scheme: The scheme to derive with. Defaults to ``Scheme.default()``.
            context: Optional label stored on the key.

        Returns:
            The derived key.

        Raises:
            SaltSizeError: If the salt is the wrong size.
            InitializationVectorSizeError: If the IV is the wrong size.
        """
        scheme = scheme or Scheme.default()
        treated_password = normalize_password(untreated_password)

        validate_salt(treated_salt, scheme)
        validate_initialization_vector(iv, scheme)

        return cls(
            scheme=scheme,
            key_data=scheme.derive_key(treated_password, bytes(treated_salt)),
            initialization_vector=iv,
            salt=treated_salt,
            context=context,
        )

    @classmethod
    def from_raw_data(cls, data: bytes) -> EncryptionKey:
        """Rebuild a key from its ``raw_data`` serialization.

        The key bytes are restored verbatim, not re-derived. The returned key
        has no context, since context is not serialized.

        Args:
            data: Bytes laid out as version tag + key + IV + salt.

        Returns:
            The parsed key.

        Raises:
            BadFormatDataError: If the data does not start with a known tag.
            SaltSizeError: If the data is too short to hold the salt.
            InitializationVectorSizeError: If the data is too short to hold the IV.
        """
        data = bytes(data)

        # Version is the only fixed-width field, so it is read first
        version = Format.decode(data[: Format.DATA_SIZE])
        if version is None:
            logger.debug("Unrecognized key version tag in %d bytes of key data", len(data))
            raise BadFormatDataError("Key data does not start with a known version tag")
        scheme = Scheme.for_format(version)
        remainder = data[Format.DATA_SIZE :]

        # Salt and IV widths depend on the scheme, so they are taken from the end
        salt_start = len(remainder) - scheme.stretched_salt_size
        if salt_start < 0:
            logger.debug("Key data too short for a %s salt", version.name)
            raise SaltSizeError(expected=scheme.stretched_salt_size, actual=len(remainder))
        salt = remainder[salt_start:]
        remainder = remainder[:salt_start]

        iv_start = len(remainder) - scheme.initialization_vector_size
        if iv_start < 0:
            logger.debug("Key data too short for a %s initialization vector", version.name)
            raise InitializationVectorSizeError(
                expected=scheme.initialization_vector_size, actual=len(remainder)
            )
        iv = remainder[iv_start:]

        return cls(
            scheme=scheme,
            key_data=remainder[:iv_start],
            initialization_vector=iv,
            salt=salt,
        )

    @classmethod
    def from_base64url(cls, text: str) -> EncryptionKey:
        """Rebuild a key from the text produced by ``to_base64url``.

        Raises:
            Base64URLDecodeError: If the text is not unpadded base64url.
            ImproperKeyError: If the decoded bytes are not a valid key.
        """
        return cls.from_raw_data(from_base64url(text.strip()))

    # Serialization

    @property
    def raw_data(self) -> bytes:
        """The key as version tag + key bytes + IV + salt.

        This may be stored wherever you like, but keep it somewhere secure.
        """
        return (
            self.scheme.version.encode() + self.key_data + self.initialization_vector + self.salt
        )

    def to_base64url(self) -> str:
        """Return ``raw_data`` as unpadded URL-safe base64."""
        return to_base64url(self.raw_data)

    def with_context(self, context: str | None) -> EncryptionKey:
        """Return a copy of this key carrying a different label."""
        return dataclasses.replace(self, context=context)
