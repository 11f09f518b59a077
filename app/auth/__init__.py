# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Password hashing and session tokens.
#
# Usage:
#   from app.auth import TokenSigner, hash_password, verify_password
#
# Routes live in app.auth.routes and are mounted by app.main.
# =============================================================================

from app.auth.passwords import hash_password, verify_password
from app.auth.tokens import InvalidTokenError, TokenSigner

__all__ = [
    "hash_password",
    "verify_password",
    "InvalidTokenError",
    "TokenSigner",
]
