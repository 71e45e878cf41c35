"""Randomness sources used for salts and nonces.

Seal takes the source as an argument; when None it falls back to
:class:`OsRandom`. Tests pass a deterministic source to pin the envelope
layout down byte for byte.
"""
from __future__ import annotations

import os
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    def random_bytes(self, length: int) -> bytes:
        ...


class OsRandom:
    """Reads straight from the OS CSPRNG on every call; nothing is cached."""

    def random_bytes(self, length: int) -> bytes:
        if length < 0:
            raise ValueError("length must be non-negative")
        return os.urandom(length)


_default_source = OsRandom()


def resolve(rng: Optional[RandomSource]) -> RandomSource:
    """Return ``rng`` or the process-wide OS source when it is None."""
    return _default_source if rng is None else rng
