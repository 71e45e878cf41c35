"""Read-only view of the envelope format parameters.

Nothing here is user-configurable: every value is fixed by the file
format. The constants live in the modules that use them; this module only
gathers them for display (``sealbox info``).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .security.aead import NONCE_LENGTH, TAG_LENGTH
from .security.envelope import header_length
from .security.kdf import KEY_LENGTH, PBKDF2_ITERATIONS, SALT_LENGTH


@dataclass(frozen=True)
class FormatConfig:
    cipher: str = "AES-256-GCM"
    kdf: str = "PBKDF2-HMAC-SHA256"
    kdf_iterations: int = PBKDF2_ITERATIONS
    key_length: int = KEY_LENGTH
    nonce_length: int = NONCE_LENGTH
    salt_length: int = SALT_LENGTH
    tag_length: int = TAG_LENGTH
    header_length: int = field(default_factory=header_length)

    def describe(self) -> str:
        return "\n".join(
            [
                f"cipher:       {self.cipher} ({self.key_length}-byte key, {self.tag_length}-byte tag)",
                f"kdf:          {self.kdf}, {self.kdf_iterations:,} iterations",
                f"header:       {self.header_length} bytes "
                f"(nonce @0 x{self.nonce_length}, salt @{self.nonce_length} x{self.salt_length})",
                f"ciphertext:   offset {self.header_length}, plaintext length + {self.tag_length}",
            ]
        )


FORMAT = FormatConfig()
