# =============================================================================
# lib/ - User Store Implementations
# =============================================================================
# This package contains the persistence layer:
# - user_store.py: UserStore interface and store errors
# - supabase_client.py: Supabase-backed store (production)
# - memory_store.py: In-process store (tests, local development)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.user_store import UserStore, UserStoreError, DuplicateEntryError
from lib.memory_store import InMemoryUserStore
from lib.supabase_client import SupabaseUserStore

__all__ = [
    "UserStore",
    "UserStoreError",
    "DuplicateEntryError",
    "InMemoryUserStore",
    "SupabaseUserStore",
]
