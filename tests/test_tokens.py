# =============================================================================
# tests/test_tokens.py - Session Token Tests
# =============================================================================

import time

import pytest
from jose import jwt

from app.auth.tokens import InvalidTokenError, TokenSigner
from app.config import Settings

SECRET = "unit-test-secret-of-good-length"


class TestTokenSigner:
    """Tests for TokenSigner."""

    def test_issue_then_verify(self):
        signer = TokenSigner(SECRET)

        assert signer.verify(signer.issue("user-1")) == "user-1"

    def test_payload_claims(self):
        signer = TokenSigner(SECRET, expires_seconds=3600, clock=lambda: 1_000_000)

        claims = jwt.get_unverified_claims(signer.issue("user-1"))

        assert claims["id"] == "user-1"
        assert claims["iat"] == 1_000_000
        assert claims["exp"] == 1_000_000 + 3600

    def test_default_window_is_24_hours(self):
        signer = TokenSigner(SECRET, clock=lambda: 0)

        claims = jwt.get_unverified_claims(signer.issue("u"))

        assert claims["exp"] == 24 * 3600

    def test_expired_token(self):
        issued_long_ago = TokenSigner(SECRET, clock=lambda: time.time() - 25 * 3600)
        token = issued_long_ago.issue("user-1")

        with pytest.raises(InvalidTokenError):
            TokenSigner(SECRET).verify(token)

    def test_token_within_window(self):
        issued_recently = TokenSigner(SECRET, clock=lambda: time.time() - 23 * 3600)

        assert TokenSigner(SECRET).verify(issued_recently.issue("user-1")) == "user-1"

    def test_wrong_secret(self):
        token = TokenSigner("some-other-secret-value").issue("user-1")

        with pytest.raises(InvalidTokenError):
            TokenSigner(SECRET).verify(token)

    def test_tampered_payload(self):
        token = TokenSigner(SECRET).issue("user-1")
        header, _, signature = token.split(".")
        forged_payload = jwt.encode({"id": "user-2"}, "x").split(".")[1]

        with pytest.raises(InvalidTokenError):
            TokenSigner(SECRET).verify(f"{header}.{forged_payload}.{signature}")

    @pytest.mark.parametrize("token", [None, "", "abc", "a.b.c", 123])
    def test_malformed(self, token):
        with pytest.raises(InvalidTokenError):
            TokenSigner(SECRET).verify(token)

    def test_missing_id_claim(self):
        token = jwt.encode({"exp": int(time.time()) + 60}, SECRET, algorithm="HS256")

        with pytest.raises(InvalidTokenError):
            TokenSigner(SECRET).verify(token)

    def test_algorithm_is_configurable(self):
        signer = TokenSigner(SECRET, algorithm="HS512")
        token = signer.issue("user-1")

        assert jwt.get_unverified_header(token)["alg"] == "HS512"
        assert signer.verify(token) == "user-1"
        with pytest.raises(InvalidTokenError):
            TokenSigner(SECRET, algorithm="HS256").verify(token)

    def test_from_settings(self):
        settings = Settings(JWT_SECRET=SECRET, JWT_ALGORITHM="HS384", JWT_EXPIRE_HOURS=2)

        signer = TokenSigner.from_settings(settings)

        assert signer.secret == SECRET
        assert signer.algorithm == "HS384"
        assert signer.expires_seconds == 7200
