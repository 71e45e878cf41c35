"""
Seal / Open pipeline for password-protected files.

Seal:  salt, nonce <- rng ; key <- pbkdf2(password, salt) ;
       ct <- aes-gcm(key, nonce, plaintext) ; out = nonce || salt || ct
Open:  split at header_length() ; nonce, salt <- header ;
       key <- pbkdf2(password, salt) ; plaintext <- aes-gcm-open(key, nonce, ct)

The byte-level functions do no I/O. The *_file variants wrap them with
:mod:`sealbox.core.fileio` and are what the CLI calls.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..security import aead
from ..security.envelope import Envelope
from ..security.kdf import derive_key, generate_salt
from ..security.rng import RandomSource, resolve
from .fileio import read_file_bytes, write_file_bytes

logger = logging.getLogger(__name__)


def seal_bytes(plaintext: bytes, password: bytes | str, rng: Optional[RandomSource] = None) -> bytes:
    """
    Encrypt ``plaintext`` under ``password`` and return the envelope bytes.

    Salt and nonce are drawn separately from ``rng`` (the OS CSPRNG when
    None), so two calls with the same inputs give different envelopes.
    """
    source = resolve(rng)
    salt = generate_salt(source)
    nonce = aead.generate_nonce(source)

    key = derive_key(password, salt)
    ciphertext = aead.seal(key, nonce, plaintext)

    envelope = Envelope(nonce=nonce, salt=salt, ciphertext=ciphertext)
    return envelope.to_bytes()


def open_bytes(data: bytes, password: bytes | str) -> bytes:
    """
    Decrypt envelope bytes produced by :func:`seal_bytes`.

    Raises:
        MalformedEnvelopeError: ``data`` is shorter than the header.
        AuthenticationFailureError: wrong password, or the data was altered.
    """
    envelope = Envelope.from_bytes(data)
    key = derive_key(password, envelope.salt)
    return aead.open(key, envelope.nonce, envelope.ciphertext)


def seal_file(input_path, output_path, password: bytes | str, rng: Optional[RandomSource] = None) -> Path:
    plaintext = read_file_bytes(input_path)
    sealed = seal_bytes(plaintext, password, rng=rng)
    out = write_file_bytes(output_path, sealed)
    logger.info("sealed %s -> %s (%d bytes)", input_path, out, len(sealed))
    return out


def open_file(input_path, output_path, password: bytes | str) -> Path:
    # Nothing is written unless the envelope authenticates.
    sealed = read_file_bytes(input_path)
    plaintext = open_bytes(sealed, password)
    out = write_file_bytes(output_path, plaintext)
    logger.info("opened %s -> %s (%d bytes)", input_path, out, len(plaintext))
    return out
