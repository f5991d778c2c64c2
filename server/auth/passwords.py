"""Password hashing using PBKDF2-SHA256 (stdlib, zero dependencies)."""

from __future__ import annotations

import hashlib
import hmac
import os

_ITERATIONS = 600_000  # OWASP recommended minimum for PBKDF2-SHA256
_SALT_LENGTH = 16


def _derive(password: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode(), salt, iterations)


def hash_password(password: str, *, iterations: int = _ITERATIONS) -> str:
    """Hash a password. Returns 'pbkdf2_sha256$iterations$salt_hex$hash_hex'."""
    salt = os.urandom(_SALT_LENGTH)
    dk = _derive(password, salt, iterations)
    return f"pbkdf2_sha256${iterations}${salt.hex()}${dk.hex()}"


def verify_password(password: str, stored: str) -> bool:
    """Verify a password against a stored hash."""
    try:
        scheme, iterations, salt_hex, hash_hex = stored.split("$")
        if scheme != "pbkdf2_sha256":
            return False
        dk = _derive(password, bytes.fromhex(salt_hex), int(iterations))
        expected = bytes.fromhex(hash_hex)
    except (ValueError, AttributeError):
        return False
    return hmac.compare_digest(dk, expected)
