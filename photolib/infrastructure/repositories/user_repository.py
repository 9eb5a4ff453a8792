"""User repository - user documents keyed by username."""
from ...models import User
from .base import DocumentRepository


class UserRepository(DocumentRepository[User]):
    """Repository for user documents.

    Examples:
        >>> repo = UserRepository(store)
        >>> await repo.save(user)
        >>> user = await repo.get("alice")
    """
    key_prefix = "user"
    model = User

    async def save(self, user: User) -> None:
        """Replace the stored user with ``user``."""
        await self._put(user.username, user)
