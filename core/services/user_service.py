# =============================================================================
# core/services/user_service.py - Registration, Login and Booking Logic
# =============================================================================
# Handles the three user operations and translates store errors into API
# errors. Separates HTTP concerns from database/business logic.
#
# Each operation does at most one store read and one store write. Methods are
# synchronous; bcrypt work makes them CPU-heavy, so routes run them in a
# worker thread.
# =============================================================================

import logging
from typing import Any

from app.auth.passwords import hash_password, verify_password
from app.auth.tokens import InvalidTokenError, TokenSigner
from app.exceptions import (
    DuplicateEntryNoError,
    InvalidCredentialsError,
    InvalidRequestError,
    MissingFieldsError,
    ServerError,
    UnauthorizedError,
)
from core.models.user import LoginResponse, UserRecord
from lib.user_store import DuplicateEntryError, UserStore, UserStoreError

logger = logging.getLogger(__name__)

# Event ids are stored as PostgreSQL bigint
EVENT_ID_MIN = -(2 ** 63)
EVENT_ID_MAX = 2 ** 63 - 1


def parse_event_id(value: Any) -> int:
    """
    Validate a booking's event id.

    Accepts integers and integer strings such as "7". Booleans, floats and
    anything else are rejected.

    Raises:
        InvalidRequestError: If the value is missing or not a usable integer
    """
    if value is None:
        raise InvalidRequestError("Event ID required", code="MISSING_EVENT_ID")

    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise InvalidRequestError(code="INVALID_EVENT_ID")

    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRequestError(code="INVALID_EVENT_ID")

    if not EVENT_ID_MIN <= value <= EVENT_ID_MAX:
        raise InvalidRequestError(code="EVENT_ID_OUT_OF_RANGE")

    return value


class UserService:
    """
    Service for user registration, login and event booking.

    Provides a clean interface between API routes and the user store.

    Example:
        service = UserService(InMemoryUserStore(), TokenSigner("secret..."))
        service.register("Alice", "E1", "pw")
        login = service.login("E1", "pw")
        service.book(login.token, 7)
    """

    def __init__(self, store: UserStore, signer: TokenSigner, bcrypt_rounds: int = 10):
        self.store = store
        self.signer = signer
        self.bcrypt_rounds = bcrypt_rounds

    def register(
        self,
        name: str | None,
        entry_no: str | None,
        password: str | None,
    ) -> UserRecord:
        """
        Create a new user.

        Raises:
            MissingFieldsError: If any field is absent or empty
            DuplicateEntryNoError: If entry_no is already registered
            ServerError: If the store fails
        """
        if not name or not entry_no or not password:
            raise MissingFieldsError()

        password_hash = hash_password(password, rounds=self.bcrypt_rounds)

        try:
            user = self.store.insert_user(name, entry_no, password_hash)
        except DuplicateEntryError:
            logger.info(f"Registration rejected, entry number taken: {entry_no}")
            raise DuplicateEntryNoError()
        except UserStoreError as e:
            logger.error(f"Failed to register {entry_no}: {e}")
            raise ServerError() from e

        logger.info(f"Registered user {user['id']} ({entry_no})")
        return UserRecord(**user)

    def login(self, entry_no: str | None, password: str | None) -> LoginResponse:
        """
        Check credentials and issue a session token.

        Unknown entry numbers and wrong passwords raise the same error.

        Raises:
            InvalidCredentialsError: If the credentials don't match a user
            ServerError: If the store fails
        """
        if not entry_no or not password:
            raise InvalidCredentialsError()

        try:
            found = self.store.find_by_entry_no(entry_no)
        except UserStoreError as e:
            logger.error(f"Failed to look up {entry_no}: {e}")
            raise ServerError() from e

        if found is None:
            logger.info(f"Failed login for {entry_no}")
            raise InvalidCredentialsError()

        user = UserRecord(**found)
        if not verify_password(password, user.password):
            logger.info(f"Failed login for {entry_no}")
            raise InvalidCredentialsError()

        token = self.signer.issue(user.id)
        logger.debug(f"Issued session token for user {user.id}")

        return LoginResponse(
            token=token,
            name=user.name,
            registered_events=user.registered_events,
        )

    def book(self, token: Any, event_id: Any) -> None:
        """
        Add event_id to the token holder's registered events.

        Booking an event twice is a no-op. The event id is not checked
        against any list of known events.

        Raises:
            UnauthorizedError: If the token is invalid or expired, or its
                user no longer exists
            InvalidRequestError: If event_id is missing, not an integer, or
                outside the signed 64-bit range
            ServerError: If the store fails
        """
        try:
            user_id = self.signer.verify(token)
        except InvalidTokenError:
            raise UnauthorizedError()

        event_id = parse_event_id(event_id)

        try:
            found = self.store.add_registered_event(user_id, event_id)
        except UserStoreError as e:
            logger.error(f"Failed to book event {event_id} for {user_id}: {e}")
            raise ServerError() from e

        if not found:
            logger.warning(f"Valid token for unknown user {user_id}")
            raise UnauthorizedError()

        logger.info(f"User {user_id} booked event {event_id}")
