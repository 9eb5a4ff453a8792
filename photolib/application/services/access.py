"""Shared library loading and access checks for library-scoped services."""
import re

from ...config import LIBRARY_ID_PATTERN
from ...errors import NotFoundError, UnauthorizedError, ValidationError
from ...infrastructure.repositories import LibraryRepository
from ...models import Actor, Library
from .actor_service import has_library_access

_LIBRARY_ID_RE = re.compile(LIBRARY_ID_PATTERN)


def validate_library_id(library_id: str | None) -> str:
    """Return library_id, or raise ValidationError if it is missing or malformed."""
    if not library_id or not _LIBRARY_ID_RE.fullmatch(library_id):
        raise ValidationError('Expected a valid "library" search parameter')
    return library_id


async def load_library(library_repo: LibraryRepository, library_id: str | None) -> Library:
    """Validate the id and load the library document.

    Raises:
        ValidationError: Missing or malformed id
        NotFoundError: No library under that id
    """
    library_id = validate_library_id(library_id)
    library = await library_repo.get(library_id)
    if library is None:
        raise NotFoundError(f'Library "{library_id}" not found')
    return library


def require_library_access(library: Library, actor: Actor) -> None:
    """Raise UnauthorizedError unless actor may modify the library."""
    if not has_library_access(library.id, actor):
        raise UnauthorizedError(f'Unauthorized to access library "{library.id}"')
