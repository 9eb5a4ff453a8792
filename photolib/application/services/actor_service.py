"""Actor resolution - turns an Authorization header into an Actor.

Resolution never rejects a request. It only decides who is asking;
authorization happens in the services that receive the Actor.
"""
import hmac
import logging
from typing import Optional

from ...errors import InvalidTokenError
from ...infrastructure.repositories import UserRepository
from ...models import ADMIN_ACTOR, Actor, SafeUser
from ...services.tokens import SessionTokenService

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def has_library_access(library_id: str, actor: Actor) -> bool:
    """True iff actor is admin or is a member of the library."""
    if actor is None:
        return False
    return actor.admin_access or library_id in actor.library_access


def is_admin(actor: Actor) -> bool:
    return actor is not None and actor.admin_access


class ActorResolver:
    """Resolves credentials to an Actor.

    Credentials:
    - ``Bearer <token>``: session token naming an existing user
    - exact admin secret: synthetic admin, only when a secret is configured

    Anything else, including a bad or expired token, resolves to
    anonymous (None).
    """

    def __init__(
        self,
        user_repository: UserRepository,
        token_service: SessionTokenService,
        admin_secret: str = ""
    ):
        self.user_repo = user_repository
        self.token_service = token_service
        self._admin_secret = admin_secret

    async def resolve(self, authorization: Optional[str]) -> Actor:
        """Resolve an Authorization header value to an Actor.

        Args:
            authorization: Raw header value, or None

        Returns:
            SafeUser for a user or the admin, None for anonymous
        """
        if not authorization:
            return None

        if authorization.startswith(BEARER_PREFIX):
            return await self._resolve_token(authorization[len(BEARER_PREFIX):])

        if self._admin_secret and hmac.compare_digest(
            authorization.encode("utf-8"), self._admin_secret.encode("utf-8")
        ):
            logger.debug("Resolved admin secret")
            return ADMIN_ACTOR.model_copy(deep=True)

        return None

    async def _resolve_token(self, token: str) -> Actor:
        try:
            username = self.token_service.verify(token)
        except InvalidTokenError as e:
            logger.warning("Session token rejected: %s", e.message)
            return None

        user = await self.user_repo.get(username)
        if user is None:
            logger.debug("Session token names a missing user")
            return None

        return SafeUser.model_validate(user.model_dump(exclude={"password"}))
