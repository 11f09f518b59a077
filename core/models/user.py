# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the API contract for the user operations:
# - UserRecord: A stored user as returned by the store
# - RegisterRequest / LoginRequest / BookRequest: Request bodies
# - LoginResponse / MessageResponse: Response bodies
#
# The wire format uses camelCase (entryNo, registeredEvents); Python code
# uses snake_case through field aliases.
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class UserRecord(BaseModel):
    """
    A stored user.

    The password field holds the bcrypt hash, never the plaintext.
    """

    id: str
    name: str | None = None
    entry_no: str
    password: str = Field(..., repr=False)
    registered_events: list[int] = Field(default_factory=list)


class RegisterRequest(BaseModel):
    """
    Body of POST /api/register.

    Fields are optional at the schema level so that a missing field is
    reported as "All fields required" by the service, not as a schema error.

    Example:
        {"name": "Alice", "entryNo": "E1", "password": "pw"}
    """

    name: str | None = None
    entry_no: str | None = Field(default=None, alias="entryNo")
    password: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class LoginRequest(BaseModel):
    """Body of POST /api/login."""

    entry_no: str | None = Field(default=None, alias="entryNo")
    password: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class BookRequest(BaseModel):
    """
    Body of POST /api/book.

    Both fields are left untyped: the token is checked before anything else,
    so a malformed token must reach the service instead of failing schema
    validation. The service then checks eventId.
    """

    token: Any = None
    event_id: Any = Field(default=None, alias="eventId")

    model_config = ConfigDict(populate_by_name=True)


class LoginResponse(BaseModel):
    """
    Successful login.

    Example:
        {"token": "eyJhbGciOi...", "name": "Alice", "registeredEvents": [7]}
    """

    token: str
    name: str | None = None
    registered_events: list[int] = Field(default_factory=list, alias="registeredEvents")

    model_config = ConfigDict(populate_by_name=True)


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str
