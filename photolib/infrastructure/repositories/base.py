"""Base repository for JSON documents in the key/value store."""
from typing import Generic, Optional, Protocol, TypeVar

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


class KeyValueProtocol(Protocol):
    """Protocol for the key/value store."""

    async def get(self, key: str) -> Optional[dict]: ...
    async def put(self, key: str, document: dict) -> None: ...


class DocumentRepository(Generic[ModelT]):
    """Base repository class.

    Subclasses set ``key_prefix`` and ``model``; a document for id ``x``
    lives under ``{key_prefix}-{x}``.

    Example:
        class LibraryRepository(DocumentRepository[Library]):
            key_prefix = "library"
            model = Library
    """
    key_prefix: str = ""
    model: type[ModelT]

    def __init__(self, store: KeyValueProtocol):
        """Initialize repository with the key/value store.

        Args:
            store: Key/value store (KeyValueStore or compatible)
        """
        self._store = store

    def _key(self, entity_id: str) -> str:
        return f"{self.key_prefix}-{entity_id}"

    async def get(self, entity_id: str) -> Optional[ModelT]:
        """Load and parse the document, or None if absent."""
        document = await self._store.get(self._key(entity_id))
        if document is None:
            return None
        return self.model.model_validate(document)

    async def exists(self, entity_id: str) -> bool:
        return await self._store.get(self._key(entity_id)) is not None

    async def _put(self, entity_id: str, entity: ModelT) -> None:
        """Persist the entire document under its key."""
        await self._store.put(
            self._key(entity_id),
            entity.model_dump(mode="json", exclude_none=True)
        )
