"""Library service - libraries and the albums inside them.

Every mutation is a read-modify-write of the whole library document:

    load -> authorize -> mutate in memory -> save

There is no version check. Two concurrent writers to the same library
can race, and the later save wins over the earlier one.
"""
import logging
from typing import Optional

from ...errors import ConflictError, NotFoundError, UnauthorizedError
from ...infrastructure.repositories import LibraryRepository
from ...models import (
    Actor,
    Album,
    CreateAlbumInput,
    Library,
    PatchAlbumInput,
    Photo,
    SafeAlbum,
    SafeLibrary,
    utc_timestamp,
)
from ...services.ids import generate_id
from ..redaction import safe_album, safe_library
from .access import load_library, require_library_access, validate_library_id
from .actor_service import has_library_access, is_admin
from .photo_service import PhotoService

logger = logging.getLogger(__name__)


class LibraryService:
    """Service for libraries and albums.

    Responsibilities:
    - Create libraries (admin only)
    - Read a library with visibility filtering and redaction
    - Create / patch / delete albums
    - Remove stored objects of photos dropped from an album
    """

    def __init__(
        self,
        library_repository: LibraryRepository,
        photo_service: PhotoService
    ):
        self.library_repo = library_repository
        self.photo_service = photo_service

    # ========================================================================
    # Libraries
    # ========================================================================

    async def create_library(self, actor: Actor, library_id: str) -> SafeLibrary:
        """Create an empty library.

        Raises:
            UnauthorizedError: Actor is not admin
            ValidationError: Malformed id
            ConflictError: A library with this id exists
        """
        if not is_admin(actor):
            raise UnauthorizedError("Unauthorized to create library")

        library_id = validate_library_id(library_id)

        if await self.library_repo.exists(library_id):
            raise ConflictError(f'Library "{library_id}" already exists')

        library = Library(
            id=library_id,
            created_by=actor.username,
            timestamp=utc_timestamp(),
            albums=[],
        )
        await self.library_repo.save(library)
        logger.info("Library %s created", library_id)
        return safe_library(library, actor)

    async def get_library(self, actor: Actor, library_id: Optional[str]) -> SafeLibrary:
        """Read a library as seen by actor.

        Without library access, non-public albums are removed from the
        list before field redaction. The result carries ``authorized``.
        """
        library = await load_library(self.library_repo, library_id)
        authorized = has_library_access(library.id, actor)
        if not authorized:
            library = library.model_copy(
                update={"albums": [a for a in library.albums if a.public]}
            )
        return safe_library(library, actor, authorized=authorized)

    # ========================================================================
    # Albums
    # ========================================================================

    async def create_album(
        self,
        actor: Actor,
        library_id: Optional[str],
        data: CreateAlbumInput
    ) -> SafeAlbum:
        """Append a new, empty album to the library.

        Raises:
            ConflictError: An album with the same name exists (case-sensitive)
        """
        library = await load_library(self.library_repo, library_id)
        require_library_access(library, actor)

        if any(a.name == data.name for a in library.albums):
            raise ConflictError(f'Album with name "{data.name}" already exists')

        album = Album(
            id=generate_id(),
            name=data.name,
            public=data.public if data.public is not None else False,
            created_by=actor.username,
            timestamp=utc_timestamp(),
            photos=[],
        )
        library.albums.append(album)
        await self.library_repo.save(library)
        logger.info("Album %s created in library %s", album.id, library.id)
        return safe_album(album, actor)

    async def patch_album(
        self,
        actor: Actor,
        library_id: Optional[str],
        album_id: str,
        data: PatchAlbumInput
    ) -> SafeAlbum:
        """Apply a partial update to an album.

        - name: replaced when non-empty
        - photos: replaces the whole list. Photos missing from the new list
          are deleted from object storage and stop being the cover. Every
          photo in the new list is re-stamped with the actor and the
          current time, even when only its position changed.
        - cover: set when it names a photo in the resulting list,
          cleared by an explicit null, otherwise ignored
        - public: replaced when present

        Raises:
            NotFoundError: Library or album does not exist
            UnauthorizedError: Actor lacks library access
            ConflictError: New name is taken by another album
        """
        library = await load_library(self.library_repo, library_id)
        require_library_access(library, actor)

        album = self._find_album(library, album_id)

        if data.name:
            if any(a.name == data.name and a.id != album.id for a in library.albums):
                raise ConflictError(f'Album with name "{data.name}" already exists')
            album.name = data.name

        deleted_photos: list[Photo] = []
        if data.photos is not None:
            kept_ids = {p.id for p in data.photos}
            deleted_photos = [p for p in album.photos if p.id not in kept_ids]
            album.photos = self._merge_photos(album.photos, data, actor)
            for photo in deleted_photos:
                if album.cover == photo.id:
                    album.cover = None

        if data.cover and any(p.id == data.cover for p in album.photos):
            album.cover = data.cover
        elif data.clears_cover:
            album.cover = None

        if data.public is not None:
            album.public = data.public

        await self.library_repo.save(library)

        # Objects go after the document: a failure here leaves orphaned
        # objects, never a photo record without its objects.
        for photo in deleted_photos:
            await self.photo_service.delete_objects(photo.id)

        return safe_album(album, actor)

    async def delete_album(
        self,
        actor: Actor,
        library_id: Optional[str],
        album_id: str
    ) -> None:
        """Remove an album from the library.

        The album's photo objects stay in object storage.
        """
        library = await load_library(self.library_repo, library_id)
        require_library_access(library, actor)

        album = self._find_album(library, album_id)
        library.albums = [a for a in library.albums if a.id != album.id]
        await self.library_repo.save(library)
        logger.info("Album %s deleted from library %s", album_id, library.id)

    # ========================================================================
    # Helpers
    # ========================================================================

    @staticmethod
    def _find_album(library: Library, album_id: str) -> Album:
        for album in library.albums:
            if album.id == album_id:
                return album
        raise NotFoundError(f'Album "{album_id}" not found')

    @staticmethod
    def _merge_photos(
        current: list[Photo],
        data: PatchAlbumInput,
        actor: Actor
    ) -> list[Photo]:
        """Build the new photo list: old fields, overridden by submitted ones."""
        by_id = {p.id: p for p in current}
        now = utc_timestamp()
        merged = []
        for entry in data.photos:
            previous = by_id.get(entry.id)
            fields = previous.model_dump() if previous else {}
            fields.update(entry.model_dump(exclude_unset=True))
            fields["uploaded_by"] = actor.username
            fields["timestamp"] = now
            merged.append(Photo.model_validate(fields))
        return merged
