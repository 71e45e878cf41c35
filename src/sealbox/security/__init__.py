"""Security helpers: KDF, AEAD and envelope codec for SealBox.

This package provides the three leaf pieces of the seal/open pipeline:
- PBKDF2-HMAC-SHA256 key derivation from a password and salt
- AES-256-GCM authenticated encryption of whole buffers
- the fixed 28-byte (nonce, salt) header that prefixes every sealed file

Orchestration of the pieces lives in :mod:`sealbox.core.sealer`.
"""

from .kdf import generate_salt, derive_key
from .aead import generate_nonce
from .envelope import Envelope, encode_header, decode_header, header_length
from .rng import RandomSource, OsRandom

__all__ = [
    "generate_salt",
    "derive_key",
    "generate_nonce",
    "Envelope",
    "encode_header",
    "decode_header",
    "header_length",
    "RandomSource",
    "OsRandom",
]
