"""Envelope codec: the fixed header that prefixes every sealed file.

Layout (raw bytes, no magic, no length fields):
- 12 bytes: AES-GCM nonce
- 16 bytes: PBKDF2 salt
- rest:     ciphertext || 16-byte GCM tag

The header is not self-describing, so its size is taken from ``_HEADER``
everywhere: encode, decode and the split in Open all read the same Struct.
"""
from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Tuple

from sealbox.core.exceptions import MalformedEnvelopeError

from .aead import NONCE_LENGTH
from .kdf import SALT_LENGTH

_HEADER = struct.Struct(f"{NONCE_LENGTH}s{SALT_LENGTH}s")


def header_length() -> int:
    return _HEADER.size


def encode_header(nonce: bytes, salt: bytes) -> bytes:
    # struct pads or truncates "Ns" fields silently, so sizes are checked here
    if len(nonce) != NONCE_LENGTH:
        raise ValueError(f"nonce must be {NONCE_LENGTH} bytes, got {len(nonce)}")
    if len(salt) != SALT_LENGTH:
        raise ValueError(f"salt must be {SALT_LENGTH} bytes, got {len(salt)}")
    return _HEADER.pack(bytes(nonce), bytes(salt))


def decode_header(header: bytes) -> Tuple[bytes, bytes]:
    """Return ``(nonce, salt)`` from exactly ``header_length()`` bytes."""
    if len(header) != _HEADER.size:
        raise MalformedEnvelopeError(
            f"malformed envelope: header must be {_HEADER.size} bytes, got {len(header)}"
        )
    try:
        nonce, salt = _HEADER.unpack(bytes(header))
    except struct.error as exc:
        raise MalformedEnvelopeError(f"malformed envelope: {exc}") from exc
    return nonce, salt


@dataclass(frozen=True)
class Envelope:
    """One sealed payload: header fields plus ciphertext (tag included)."""

    nonce: bytes
    salt: bytes
    ciphertext: bytes

    def to_bytes(self) -> bytes:
        return encode_header(self.nonce, self.salt) + self.ciphertext

    @classmethod
    def from_bytes(cls, data: bytes) -> "Envelope":
        """
        Split ``data`` into header and ciphertext and decode the header.

        Raises MalformedEnvelopeError when ``data`` is shorter than the
        header. A body shorter than the tag is left for the AEAD layer to
        reject, so truncated-but-headered input fails authentication.
        """
        n = header_length()
        if len(data) < n:
            raise MalformedEnvelopeError(
                f"malformed envelope: {len(data)} bytes is shorter than the {n}-byte header"
            )
        nonce, salt = decode_header(data[:n])
        return cls(nonce=nonce, salt=salt, ciphertext=bytes(data[n:]))
