"""SealBox: password-based file encryption (PBKDF2-HMAC-SHA256 + AES-256-GCM)."""

__version__ = "0.1.0"
