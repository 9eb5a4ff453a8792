"""User service - user creation, lookup and login."""
import logging
import re

from ...config import USERNAME_PATTERN
from ...errors import ConflictError, NotFoundError, UnauthorizedError, ValidationError
from ...infrastructure.repositories import UserRepository
from ...models import Actor, CreateUserInput, LoginResult, SafeUser, User, utc_timestamp
from ...services.credentials import CredentialCodec
from ...services.tokens import SessionTokenService
from ..redaction import safe_user
from .actor_service import is_admin

logger = logging.getLogger(__name__)

_USERNAME_RE = re.compile(USERNAME_PATTERN)


class UserService:
    """Service for user operations.

    Responsibilities:
    - Admin-only user creation
    - Self-only user lookup
    - Password login issuing session tokens

    Login tells "no such user" (404) apart from "wrong password" (401).
    """

    def __init__(
        self,
        user_repository: UserRepository,
        token_service: SessionTokenService
    ):
        self.user_repo = user_repository
        self.token_service = token_service

    async def create_user(self, actor: Actor, data: CreateUserInput) -> SafeUser:
        """Create a user. Only an admin actor may do this.

        Raises:
            UnauthorizedError: Actor is not admin
            ValidationError: Username is too short or has invalid characters
            ConflictError: Username already taken
        """
        if not is_admin(actor):
            raise UnauthorizedError("Unauthorized to create user")

        if len(data.username) < 2 or not _USERNAME_RE.fullmatch(data.username):
            raise ValidationError(f'Invalid username "{data.username}"')

        if await self.user_repo.exists(data.username):
            raise ConflictError(f'User with username "{data.username}" already exists')

        user = User(
            username=data.username,
            password=CredentialCodec.hash(data.password),
            library_access=list(data.library_access),
            admin_access=data.admin_access,
            created_by=actor.username,
            timestamp=utc_timestamp(),
        )
        await self.user_repo.save(user)
        logger.info("User created by %s", actor.username)
        return safe_user(user, actor)

    async def get_user(self, actor: Actor, username: str) -> SafeUser:
        """Get a user. Users can only read themselves."""
        user = await self.user_repo.get(username)
        if user is None:
            raise NotFoundError(f'User "{username}" not found')

        if actor is None or actor.username != user.username:
            raise UnauthorizedError(f'Unauthorized to access user "{user.username}"')

        return safe_user(user, actor)

    async def login(self, username: str, password: str) -> LoginResult:
        """Verify a password and issue a session token.

        Raises:
            NotFoundError: No such user
            UnauthorizedError: Wrong password
            FormatError: Stored hash is corrupt
        """
        user = await self.user_repo.get(username)
        if user is None:
            raise NotFoundError(f'User "{username}" not found')

        if not CredentialCodec.verify(password, user.password):
            logger.warning("Login failed: incorrect password")
            raise UnauthorizedError("Incorrect password")

        token = self.token_service.issue(user.username)
        self_view = SafeUser.model_validate(user.model_dump(exclude={"password"}))
        return LoginResult(token=token, user=safe_user(user, self_view))
