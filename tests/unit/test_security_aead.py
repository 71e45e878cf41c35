"""
Unit tests for the AES-256-GCM engine.
"""

import pytest
from sealbox.core.exceptions import AuthenticationFailureError
from sealbox.security import aead


# ==============================================================================
# Fixtures
# ==============================================================================

@pytest.fixture
def key():
    return bytes(range(32))


@pytest.fixture
def nonce():
    return bytes(range(100, 112))


# ==============================================================================
# Tests: Known answers (McGrew-Viega GCM test cases 13 and 14, 256-bit zero key)
# ==============================================================================

def test_seal_empty_known_answer():
    ct = aead.seal(b"\x00" * 32, b"\x00" * 12, b"")
    assert ct == bytes.fromhex("530f8afbc74536b9a963b4f1c4cb738b")


def test_seal_one_block_known_answer():
    ct = aead.seal(b"\x00" * 32, b"\x00" * 12, b"\x00" * 16)
    assert ct == bytes.fromhex(
        "cea7403d4d606b6e074ec5d3baf39d18" "d0d1c8a799996bf0265b98b5d48ab919"
    )


# ==============================================================================
# Tests: Seal / Open
# ==============================================================================

def test_seal_appends_tag(key, nonce):
    ct = aead.seal(key, nonce, b"hello")
    assert len(ct) == 5 + aead.TAG_LENGTH


def test_open_roundtrip(key, nonce):
    msg = b"attack at dawn" * 100
    assert aead.open(key, nonce, aead.seal(key, nonce, msg)) == msg


def test_open_empty_plaintext(key, nonce):
    assert aead.open(key, nonce, aead.seal(key, nonce, b"")) == b""


def test_open_wrong_key_fails(key, nonce):
    ct = aead.seal(key, nonce, b"secret")
    other = bytes(31) + b"\x01"
    with pytest.raises(AuthenticationFailureError, match="authentication failed"):
        aead.open(other, nonce, ct)


def test_open_wrong_nonce_fails(key, nonce):
    ct = aead.seal(key, nonce, b"secret")
    with pytest.raises(AuthenticationFailureError):
        aead.open(key, b"\x00" * 12, ct)


def test_every_single_bit_flip_is_detected(key, nonce):
    ct = aead.seal(key, nonce, b"hello")
    for i in range(len(ct)):
        for bit in range(8):
            tampered = bytearray(ct)
            tampered[i] ^= 1 << bit
            with pytest.raises(AuthenticationFailureError):
                aead.open(key, nonce, bytes(tampered))


def test_open_too_short_for_tag(key, nonce):
    with pytest.raises(AuthenticationFailureError, match="too short"):
        aead.open(key, nonce, b"\x00" * 15)


def test_open_wraps_invalid_tag(key, nonce):
    """The cryptography exception is chained, not leaked."""
    with pytest.raises(AuthenticationFailureError) as excinfo:
        aead.open(key, nonce, b"\x00" * 32)
    assert type(excinfo.value.__cause__).__name__ == "InvalidTag"


# ==============================================================================
# Tests: Input validation
# ==============================================================================

@pytest.mark.parametrize("bad_key", [b"", b"\x00" * 16, b"\x00" * 24, b"\x00" * 33])
def test_rejects_wrong_key_length(bad_key, nonce):
    with pytest.raises(ValueError, match="key must be 32 bytes"):
        aead.seal(bad_key, nonce, b"x")
    with pytest.raises(ValueError, match="key must be 32 bytes"):
        aead.open(bad_key, nonce, b"\x00" * 20)


@pytest.mark.parametrize("bad_nonce", [b"", b"\x00" * 8, b"\x00" * 16])
def test_rejects_wrong_nonce_length(key, bad_nonce):
    with pytest.raises(ValueError, match="nonce must be 12 bytes"):
        aead.seal(key, bad_nonce, b"x")


def test_generate_nonce_length_and_freshness():
    a = aead.generate_nonce()
    b = aead.generate_nonce()
    assert len(a) == len(b) == 12
    assert a != b
