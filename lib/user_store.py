# =============================================================================
# lib/user_store.py - User Store Interface
# =============================================================================
# Defines the contract every user store implements, plus the errors they raise.
#
# Stores return plain dicts with these keys:
#   id, name, entry_no, password, registered_events
#
# A store is constructed once at startup and handed to the request handlers,
# so tests can swap in InMemoryUserStore without touching a database.
# =============================================================================

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class UserStoreError(Exception):
    """
    Error during a user store operation.

    Provides actionable error messages following the principle:
    "Errors should tell HOW to fix, not just WHAT failed."
    """

    def __init__(
        self,
        message: str,
        code: str = "USER_STORE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class DuplicateEntryError(UserStoreError):
    """Raised when an insert collides with an existing entry number."""

    def __init__(self, entry_no: str):
        super().__init__(
            message=f"Entry number already registered: {entry_no}",
            code="DUPLICATE_ENTRY_NO",
            suggestion="Log in with the existing account or pick another entry number",
            details={"entry_no": entry_no},
        )


class UserStore(ABC):
    """Persistent collection of user records."""

    @abstractmethod
    def ping(self) -> None:
        """
        Check that the backing database is reachable.

        Raises:
            UserStoreError: If the database cannot be reached
        """

    @abstractmethod
    def insert_user(self, name: str, entry_no: str, password_hash: str) -> dict[str, Any]:
        """
        Insert a new user with an empty set of registered events.

        Returns:
            The stored record, including its generated id

        Raises:
            DuplicateEntryError: If entry_no is already taken
            UserStoreError: If the insert fails for any other reason
        """

    @abstractmethod
    def find_by_entry_no(self, entry_no: str) -> dict[str, Any] | None:
        """Return the record with this entry number, or None."""

    @abstractmethod
    def add_registered_event(self, user_id: str, event_id: int) -> bool:
        """
        Atomically add event_id to the user's registered events.

        Adding an event that is already present is a no-op.

        Returns:
            True if the user exists, False otherwise
        """
