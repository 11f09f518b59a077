# =============================================================================
# lib/supabase_client.py - Supabase User Store
# =============================================================================
# This module stores user records in a Supabase (PostgreSQL) table through the
# PostgREST API. The table and the book_event function are created by
# supabase/migrations/001_users.sql.
#
# - Entry number uniqueness comes from the table's UNIQUE constraint
#   (PostgreSQL error 23505 on a duplicate insert).
# - Booking calls the book_event function, a single UPDATE that appends the
#   event only when it is not already present, so concurrent bookings for
#   the same user cannot lose updates.
#
# Usage:
#   from lib.supabase_client import SupabaseUserStore
#   store = SupabaseUserStore.from_settings(settings)
#   store.ping()
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from supabase import create_client, Client

from lib.user_store import DuplicateEntryError, UserStore, UserStoreError

# Set up logging for this module
logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"

# PostgREST code for "no rows" on .single()
NO_ROWS = "PGRST116"

USER_COLUMNS = "id, name, entry_no, password, registered_events"


class SupabaseUserStore(UserStore):
    """
    User store backed by a Supabase table.

    Wraps a single Supabase client which is created once and reused for the
    lifetime of the process.

    Example:
        store = SupabaseUserStore.from_settings(settings)
        user = store.insert_user("Alice", "E1", password_hash)
        store.add_registered_event(user["id"], 7)
    """

    def __init__(self, client: Client, table: str = "users"):
        self._client = client
        self._table = table

    @classmethod
    def from_settings(cls, settings: Any) -> "SupabaseUserStore":
        """
        Create a store from application settings.

        Uses the service_role key, which bypasses Row Level Security (RLS).
        This is appropriate for server-side operations.

        Raises:
            UserStoreError: If client creation fails
        """
        if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_KEY:
            raise UserStoreError(
                message="Supabase credentials are not configured",
                code="CLIENT_NOT_CONFIGURED",
                suggestion="Set SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file",
            )

        try:
            client = create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_KEY)
        except Exception as e:
            raise UserStoreError(
                message=f"Failed to create Supabase client: {e}",
                code="CLIENT_INIT_FAILED",
                suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file",
            ) from e

        logger.info("Supabase client initialized successfully")
        return cls(client, table=settings.USERS_TABLE)

    # -------------------------------------------------------------------------
    # Connectivity
    # -------------------------------------------------------------------------

    def ping(self) -> None:
        try:
            self._client.table(self._table).select("id").limit(1).execute()
        except Exception as e:
            raise UserStoreError(
                message=f"Database unreachable: {e}",
                code="PING_FAILED",
                suggestion="Check that the Supabase project is running and the users table exists",
            ) from e

    # -------------------------------------------------------------------------
    # User Operations
    # -------------------------------------------------------------------------

    def insert_user(self, name: str, entry_no: str, password_hash: str) -> dict[str, Any]:
        data = {
            "name": name,
            "entry_no": entry_no,
            "password": password_hash,
            "registered_events": [],
        }

        try:
            response = (
                self._client.table(self._table)
                .insert(data)
                .execute()
            )
        except Exception as e:
            if UNIQUE_VIOLATION in str(e):
                raise DuplicateEntryError(entry_no) from e
            raise UserStoreError(
                message=f"Failed to insert user: {e}",
                code="INSERT_USER_FAILED",
                details={"entry_no": entry_no},
            ) from e

        if not response.data:
            raise UserStoreError(
                message="Insert returned no data",
                code="INSERT_NO_DATA",
                details={"entry_no": entry_no},
            )

        return response.data[0]

    def find_by_entry_no(self, entry_no: str) -> dict[str, Any] | None:
        try:
            response = (
                self._client.table(self._table)
                .select(USER_COLUMNS)
                .eq("entry_no", entry_no)
                .single()
                .execute()
            )
        except Exception as e:
            if NO_ROWS in str(e):
                return None
            raise UserStoreError(
                message=f"Failed to fetch user: {e}",
                code="FETCH_USER_FAILED",
                details={"entry_no": entry_no},
            ) from e

        return response.data

    def add_registered_event(self, user_id: str, event_id: int) -> bool:
        try:
            response = self._client.rpc(
                "book_event",
                {"p_user_id": user_id, "p_event_id": event_id},
            ).execute()
        except Exception as e:
            raise UserStoreError(
                message=f"Failed to book event: {e}",
                code="BOOK_EVENT_FAILED",
                details={"user_id": user_id, "event_id": event_id},
            ) from e

        logger.debug(f"book_event({user_id}, {event_id}) -> {response.data}")
        return bool(response.data)
