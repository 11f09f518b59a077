# =============================================================================
# lib/memory_store.py - In-Process User Store
# =============================================================================
# Keeps user records in a dict guarded by a lock. Used by the test suite and
# for local development with STORE_BACKEND=memory. Data is lost on restart.
# =============================================================================

from __future__ import annotations

import copy
import logging
import threading
from typing import Any
from uuid import uuid4

from lib.user_store import DuplicateEntryError, UserStore

logger = logging.getLogger(__name__)


class InMemoryUserStore(UserStore):
    """
    Dict-backed user store.

    Records are keyed by id, with a second index on entry_no that plays the
    role of the database's unique constraint. Every public method holds the
    lock, so concurrent bookings cannot lose updates.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: dict[str, dict[str, Any]] = {}
        self._ids_by_entry_no: dict[str, str] = {}

    def ping(self) -> None:
        return None

    def insert_user(self, name: str, entry_no: str, password_hash: str) -> dict[str, Any]:
        with self._lock:
            if entry_no in self._ids_by_entry_no:
                raise DuplicateEntryError(entry_no)

            user = {
                "id": str(uuid4()),
                "name": name,
                "entry_no": entry_no,
                "password": password_hash,
                "registered_events": [],
            }
            self._users[user["id"]] = user
            self._ids_by_entry_no[entry_no] = user["id"]

        logger.debug(f"Inserted user {user['id']} ({len(self._users)} total)")
        return copy.deepcopy(user)

    def find_by_entry_no(self, entry_no: str) -> dict[str, Any] | None:
        with self._lock:
            user_id = self._ids_by_entry_no.get(entry_no)
            if user_id is None:
                return None
            return copy.deepcopy(self._users[user_id])

    def add_registered_event(self, user_id: str, event_id: int) -> bool:
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return False
            if event_id not in user["registered_events"]:
                user["registered_events"].append(event_id)
            return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
