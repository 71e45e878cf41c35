"""Password-based key derivation for SealBox (PBKDF2-HMAC-SHA256)."""
from __future__ import annotations

import logging
from typing import Optional

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from sealbox.core.exceptions import KeyDerivationError

from .rng import RandomSource, resolve

logger = logging.getLogger(__name__)

SALT_LENGTH = 16
KEY_LENGTH = 32  # AES-256
# Part of the file format: not stored in the envelope, so it can never change.
PBKDF2_ITERATIONS = 100_000


def generate_salt(rng: Optional[RandomSource] = None) -> bytes:
    """Return a fresh random salt of ``SALT_LENGTH`` bytes."""
    return resolve(rng).random_bytes(SALT_LENGTH)


def derive_key(password: bytes | str, salt: bytes, key_len: int = KEY_LENGTH) -> bytes:
    """
    Derive a symmetric key from ``password`` and ``salt``.

    Deterministic: the same password and salt always give the same key,
    which is what lets Open re-derive the key Seal used. String passwords
    are UTF-8 encoded first, so ``"pw"`` and ``b"pw"`` give the same key.
    An empty password is accepted.

    Raises:
        KeyDerivationError: salt is not ``SALT_LENGTH`` bytes or ``key_len``
            is not a positive integer.
    """
    if isinstance(password, str):
        password = password.encode("utf-8")

    if not isinstance(salt, (bytes, bytearray)):
        raise KeyDerivationError(f"salt must be bytes, got {type(salt).__name__}")
    if len(salt) != SALT_LENGTH:
        raise KeyDerivationError(f"salt must be {SALT_LENGTH} bytes, got {len(salt)}")
    if key_len <= 0:
        raise KeyDerivationError(f"key length must be positive, got {key_len}")

    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=key_len,
        salt=bytes(salt),
        iterations=PBKDF2_ITERATIONS,
    )
    key = kdf.derive(bytes(password))
    logger.debug("derived %d-byte key (pbkdf2-sha256, %d iterations)", key_len, PBKDF2_ITERATIONS)
    return key
