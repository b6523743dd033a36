"""
Credential and reset-token primitives.

Passwords are stored as bcrypt hashes. Reset secrets are handed to the user
once and only their SHA-256 fingerprint is persisted.
"""

import hashlib
import secrets
from typing import Optional

import bcrypt

from config import ApplicationConfig

RESET_SECRET_BYTES = 32  # 256 bits


def generate_reset_secret() -> str:
    """Generate a one-time reset secret (64 hex chars, URL path safe)."""
    return secrets.token_hex(RESET_SECRET_BYTES)


def fingerprint_token(raw_token: str) -> str:
    """SHA-256 hex digest of a raw reset secret."""
    return hashlib.sha256(raw_token.encode("utf-8")).hexdigest()


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """Hash a password with bcrypt and a fresh salt."""
    salt = bcrypt.gensalt(rounds or ApplicationConfig.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def normalize_email(value) -> str:
    """
    Normalize a claimed email address for lookups.

    Anything that is not a string normalizes to an empty string.
    """
    if not isinstance(value, str):
        return ""
    return value.strip().lower()
