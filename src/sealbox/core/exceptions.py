"""
Exceptions for SealBox
Everything raised on purpose derives from SealBoxError so the CLI has a single catcher
"""

from pathlib import Path
from typing import Optional


class SealBoxError(Exception):
    # general container for errors
    pass


class FileIOError(SealBoxError):
    # raised when an input can't be read or an output can't be written

    def __init__(self, path, operation: str, cause: Optional[BaseException] = None):
        self.path = Path(path)
        self.operation = operation
        self.cause = cause
        detail = f": {cause.strerror or cause}" if isinstance(cause, OSError) else ""
        super().__init__(f"could not {operation} file {str(self.path)!r}{detail}")


class KeyDerivationError(SealBoxError):
    # raised when the KDF is handed inputs it can't work with (bad salt / key length)
    pass


class DecryptionError(SealBoxError):
    # common base for everything that makes an envelope unopenable
    pass


class MalformedEnvelopeError(DecryptionError):
    # raised when the envelope is truncated or the header doesn't decode
    pass


class AuthenticationFailureError(DecryptionError):
    # raised on a GCM tag mismatch; wrong password and tampered data look the same here
    pass


class PasswordError(SealBoxError):
    # raised when no usable password could be read from the prompt
    pass


class PasswordMismatchError(PasswordError):
    # raised when the confirmation prompt doesn't match the first entry
    pass
