# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up test environment variables before any imports
# - Builds the app around an InMemoryUserStore so no database is needed
# - Provides a controllable clock for token expiry tests
# =============================================================================

import os
import time

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-session-tokens")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.auth.tokens import TokenSigner
from app.main import create_app
from core.services.user_service import UserService
from lib.memory_store import InMemoryUserStore

TEST_SECRET = "test-secret-key-for-session-tokens"


class FakeClock:
    """Callable returning a settable UNIX time."""

    def __init__(self, now: float | None = None):
        self.now = time.time() if now is None else now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def clock():
    """Clock starting at the real current time."""
    return FakeClock()


@pytest.fixture
def store():
    """Empty in-memory user store."""
    return InMemoryUserStore()


@pytest.fixture
def signer(clock):
    """Token signer with a 24 hour window and a controllable clock."""
    return TokenSigner(TEST_SECRET, algorithm="HS256", expires_seconds=24 * 3600, clock=clock)


@pytest.fixture
def service(store, signer):
    """UserService over the in-memory store, with cheap bcrypt rounds."""
    return UserService(store, signer, bcrypt_rounds=4)


@pytest.fixture
def client(store, signer):
    """TestClient for an app wired to the in-memory store."""
    return TestClient(create_app(user_store=store, token_signer=signer))


@pytest.fixture
def alice():
    """Registration payload for the example user."""
    return {"name": "Alice", "entryNo": "E1", "password": "pw"}


@pytest.fixture
def alice_token(client, alice):
    """Register Alice and return a fresh session token."""
    assert client.post("/api/register", json=alice).status_code == 201
    response = client.post(
        "/api/login",
        json={"entryNo": alice["entryNo"], "password": alice["password"]},
    )
    assert response.status_code == 200
    return response.json()["token"]
