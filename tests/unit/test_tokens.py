"""Unit tests for SessionTokenService."""
import pytest
from jose import jwt

from photolib.errors import InvalidTokenError, UnauthorizedError
from photolib.services.tokens import SessionTokenService


class TestSessionTokens:

    def test_issue_and_verify(self):
        tokens = SessionTokenService("secret")
        assert tokens.verify(tokens.issue("alice")) == "alice"

    def test_expiry_is_two_hours(self):
        tokens = SessionTokenService("secret")
        claims = jwt.get_unverified_claims(tokens.issue("alice"))
        assert claims["username"] == "alice"
        assert isinstance(claims["exp"], int)

        import time
        assert abs(claims["exp"] - (time.time() + 7200)) < 5

    def test_expired_token_rejected(self):
        tokens = SessionTokenService("secret", ttl_seconds=-60)
        with pytest.raises(InvalidTokenError):
            tokens.verify(tokens.issue("alice"))

    def test_wrong_secret_rejected(self):
        token = SessionTokenService("secret-a").issue("alice")
        with pytest.raises(InvalidTokenError):
            SessionTokenService("secret-b").verify(token)

    def test_garbage_rejected(self):
        with pytest.raises(InvalidTokenError):
            SessionTokenService("secret").verify("not.a.token")

    def test_missing_username_rejected(self):
        token = jwt.encode({"sub": "alice"}, "secret", algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            SessionTokenService("secret").verify(token)

    def test_invalid_token_is_unauthorized(self):
        """InvalidTokenError maps to 401 like other authorization failures."""
        assert issubclass(InvalidTokenError, UnauthorizedError)
        assert InvalidTokenError.status_code == 401

    def test_empty_secret_refused(self):
        with pytest.raises(ValueError):
            SessionTokenService("")
