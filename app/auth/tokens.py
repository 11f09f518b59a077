# =============================================================================
# app/auth/tokens.py - Session Tokens (JWT)
# =============================================================================
# Issues and verifies the signed, time-limited tokens handed out at login.
# The payload carries the user's internal id under the "id" claim.
#
# Secret, algorithm and lifetime come from settings so they can be rotated
# without code changes.
# =============================================================================

import logging
import time
from typing import Callable

from jose import jwt, JWTError, ExpiredSignatureError

logger = logging.getLogger(__name__)


class InvalidTokenError(Exception):
    """Raised when a token fails signature, structure or expiry checks."""


class TokenSigner:
    """
    Signs and verifies session tokens.

    Args:
        secret: Signing key
        algorithm: JWT algorithm, e.g. "HS256"
        expires_seconds: Validity window from the moment of issue
        clock: Returns the current UNIX time; replaceable in tests
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_seconds: int = 24 * 3600,
        clock: Callable[[], float] = time.time,
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_seconds = expires_seconds
        self._clock = clock

    @classmethod
    def from_settings(cls, settings) -> "TokenSigner":
        return cls(
            secret=settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
            expires_seconds=settings.jwt_expire_seconds,
        )

    def issue(self, user_id: str) -> str:
        """Create a token for user_id valid for expires_seconds."""
        now = int(self._clock())
        claims = {
            "id": user_id,
            "iat": now,
            "exp": now + self.expires_seconds,
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def verify(self, token: str | None) -> str:
        """
        Verify a token and return the user id it carries.

        Raises:
            InvalidTokenError: If the token is missing, malformed, wrongly
                signed, expired, or has no usable "id" claim
        """
        if not token or not isinstance(token, str):
            raise InvalidTokenError("missing token")

        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except ExpiredSignatureError as e:
            logger.info("Session token has expired")
            raise InvalidTokenError("expired") from e
        except JWTError as e:
            logger.warning(f"Session token validation failed: {e}")
            raise InvalidTokenError(str(e)) from e

        user_id = payload.get("id")
        if not user_id or not isinstance(user_id, str):
            logger.warning("Session token missing 'id' claim")
            raise InvalidTokenError("missing id claim")

        return user_id
