# =============================================================================
# app/auth/passwords.py - Password Hashing (bcrypt)
# =============================================================================
# Passwords are stored as salted bcrypt hashes. Both functions are CPU-bound
# by design; call them from a worker thread, not the event loop.
# =============================================================================

import logging

import bcrypt

logger = logging.getLogger(__name__)

# bcrypt only reads the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


def hash_password(password: str, rounds: int = 10) -> str:
    """Hashes a password using bcrypt. Returns the hash as a string."""
    if not password:
        raise ValueError("Password cannot be empty.")
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    """Validates a plaintext password against its bcrypt hash."""
    if not password or not hashed_password:
        return False
    try:
        return bcrypt.checkpw(_encode(password), hashed_password.encode("utf-8"))
    except (ValueError, TypeError) as bcrypt_err:
        logger.warning(f"Password verification error (malformed hash?): {bcrypt_err}")
        return False
