"""Key component size validation for ItemEncrypt.

Every check runs before any derivation work, so a failed construction never
yields a partially built key.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..errors import InitializationVectorSizeError, SaltSizeError, SeedSizeError

if TYPE_CHECKING:
    from ..scheme import Scheme

logger = logging.getLogger("itemencrypt")


def validate_seed(seed: bytes, scheme: Scheme) -> None:
    """Check that a seed matches ``scheme.seed_size``.

    Raises:
        SeedSizeError: If the length is wrong.
    """
    if len(seed) != scheme.seed_size:
        logger.debug(
            "Incoming seed was the wrong size <%d> for the encryption scheme <%d>",
            len(seed),
            scheme.seed_size,
        )
        raise SeedSizeError(expected=scheme.seed_size, actual=len(seed))


def validate_salt(salt: bytes, scheme: Scheme) -> None:
    """Check that a treated salt matches ``scheme.stretched_salt_size``.

    Raises:
        SaltSizeError: If the length is wrong.
    """
    if len(salt) != scheme.stretched_salt_size:
        logger.debug(
            "Incoming salt was the wrong size <%d> for the encryption scheme <%d>",
            len(salt),
            scheme.stretched_salt_size,
        )
        raise SaltSizeError(expected=scheme.stretched_salt_size, actual=len(salt))


def validate_initialization_vector(iv: bytes, scheme: Scheme) -> None:
    """Check that an IV matches ``scheme.initialization_vector_size``.

    Raises:
        InitializationVectorSizeError: If the length is wrong.
    """
    if len(iv) != scheme.initialization_vector_size:
        logger.debug(
            "Incoming IV was the wrong size <%d> for the encryption scheme <%d>",
            len(iv),
            scheme.initialization_vector_size,
        )
        raise InitializationVectorSizeError(
            expected=scheme.initialization_vector_size, actual=len(iv)
        )
