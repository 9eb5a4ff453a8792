"""Signed, expiring session tokens (HS256 JWT).

Tokens are stateless: there is no revocation list, the expiry claim is
the only bound on a token's lifetime.
"""
import time

from jose import JWTError, jwt

from ..config import TOKEN_ALGORITHM, TOKEN_TTL_SECONDS
from ..errors import InvalidTokenError


class SessionTokenService:
    """Issues and verifies session tokens binding a username.

    Examples:
        >>> tokens = SessionTokenService("secret")
        >>> token = tokens.issue("alice")
        >>> tokens.verify(token)
        'alice'
    """

    def __init__(self, secret: str, ttl_seconds: int = TOKEN_TTL_SECONDS):
        if not secret:
            raise ValueError("SessionTokenService requires a non-empty secret")
        self._secret = secret
        self.ttl_seconds = ttl_seconds

    def issue(self, username: str) -> str:
        """Create a token for username, expiring ttl_seconds from now."""
        claims = {
            "username": username,
            "exp": int(time.time()) + self.ttl_seconds,
        }
        return jwt.encode(claims, self._secret, algorithm=TOKEN_ALGORITHM)

    def verify(self, token: str) -> str:
        """Verify signature and expiry and return the embedded username.

        Raises:
            InvalidTokenError: Bad signature, expired, or no username claim
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[TOKEN_ALGORITHM])
        except JWTError as e:
            raise InvalidTokenError(f"Invalid session token: {e}")

        username = payload.get("username")
        if not isinstance(username, str):
            raise InvalidTokenError("Invalid session token: missing username")
        return username
