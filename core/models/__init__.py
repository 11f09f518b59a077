# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - user.py: User record plus register/login/book request and response schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .user import (
    BookRequest,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    UserRecord,
)

__all__ = [
    "BookRequest",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "RegisterRequest",
    "UserRecord",
]
