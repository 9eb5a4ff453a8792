"""Library repository - library documents with nested albums and photos."""
from ...models import Library
from .base import DocumentRepository


class LibraryRepository(DocumentRepository[Library]):
    """Repository for library documents.

    A library is read and written as a whole; there is no version check,
    so concurrent writers to one library id can overwrite each other.
    """
    key_prefix = "library"
    model = Library

    async def save(self, library: Library) -> None:
        """Persist the full library document."""
        await self._put(library.id, library)
