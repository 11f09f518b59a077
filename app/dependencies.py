# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The user store lives on app.state, set either by create_app() (tests pass
# an InMemoryUserStore) or by the startup lifespan from settings.
# =============================================================================

import asyncio
import functools
import logging
from typing import Annotated, Any, Callable, TypeVar

from fastapi import Depends, Request

from app.config import Settings
from app.exceptions import ServerError
from core.services.user_service import UserService
from lib.memory_store import InMemoryUserStore
from lib.supabase_client import SupabaseUserStore
from lib.user_store import UserStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


def build_user_store(settings: Settings) -> UserStore:
    """
    Create the user store selected by STORE_BACKEND.

    Raises:
        UserStoreError: If the Supabase client cannot be created
    """
    if settings.STORE_BACKEND == "memory":
        logger.warning("Using in-memory user store; data will not survive a restart")
        return InMemoryUserStore()
    return SupabaseUserStore.from_settings(settings)


async def run_in_worker(func: Callable[..., T], *args: Any) -> T:
    """Run a blocking call in the default thread pool executor."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, functools.partial(func, *args))


def get_user_service(request: Request) -> UserService:
    """
    Build a UserService around the application's store.

    Raises:
        ServerError: If no store could be created at startup
    """
    state = request.app.state
    if state.user_store is None:
        logger.error("User store unavailable; check database configuration")
        raise ServerError()
    return UserService(state.user_store, state.token_signer, state.bcrypt_rounds)


# Type alias for dependency injection
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
