"""AES-256-GCM seal/open for whole in-memory buffers.

No associated data and no chunking: the returned ciphertext is
``encrypted(plaintext) || tag`` with a 16-byte tag, exactly what
:class:`cryptography.hazmat.primitives.ciphers.aead.AESGCM` produces.
"""
from __future__ import annotations

import logging
from typing import Optional

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from sealbox.core.exceptions import AuthenticationFailureError

from .kdf import KEY_LENGTH
from .rng import RandomSource, resolve

logger = logging.getLogger(__name__)

NONCE_LENGTH = 12
TAG_LENGTH = 16


def generate_nonce(rng: Optional[RandomSource] = None) -> bytes:
    """Return a fresh random 96-bit nonce."""
    return resolve(rng).random_bytes(NONCE_LENGTH)


def _check_inputs(key: bytes, nonce: bytes) -> None:
    if len(key) != KEY_LENGTH:
        raise ValueError(f"key must be {KEY_LENGTH} bytes, got {len(key)}")
    if len(nonce) != NONCE_LENGTH:
        raise ValueError(f"nonce must be {NONCE_LENGTH} bytes, got {len(nonce)}")


def seal(key: bytes, nonce: bytes, plaintext: bytes) -> bytes:
    """Encrypt ``plaintext`` and append the authentication tag."""
    _check_inputs(key, nonce)
    ct = AESGCM(key).encrypt(nonce, plaintext, None)
    logger.debug("sealed %d plaintext bytes into %d ciphertext bytes", len(plaintext), len(ct))
    return ct


def open(key: bytes, nonce: bytes, ciphertext: bytes) -> bytes:
    """
    Verify and decrypt ``ciphertext`` (which must end with the tag).

    Either the full plaintext comes back or AuthenticationFailureError is
    raised; GCM verifies the tag before releasing any output.
    """
    _check_inputs(key, nonce)
    if len(ciphertext) < TAG_LENGTH:
        raise AuthenticationFailureError("authentication failed: ciphertext too short to carry a tag")
    try:
        pt = AESGCM(key).decrypt(nonce, ciphertext, None)
    except InvalidTag as exc:
        raise AuthenticationFailureError(
            "authentication failed: wrong password or corrupted data"
        ) from exc
    logger.debug("opened %d ciphertext bytes", len(ciphertext))
    return pt
