"""Photo service - variant upload and delivery.

A photo's binary content lives in object storage under three keys
derived from its id. The Photo record returned by an upload is not
attached to any album; callers attach it by patching the album's photo
list. Until they do, the uploaded objects are unreferenced.
"""
import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional

from ...config import DEFAULT_PHOTO_CONTENT_TYPE, PHOTO_CACHE_CONTROL
from ...errors import NotFoundError, ValidationError
from ...infrastructure.repositories import LibraryRepository
from ...infrastructure.storage import ObjectStorage
from ...infrastructure.storage.base import FileNotFoundError as StorageFileNotFoundError
from ...models import Actor, Photo, SafePhoto, utc_timestamp
from ...services.ids import generate_id
from ..redaction import safe_photo
from .access import load_library, require_library_access

logger = logging.getLogger(__name__)

PHOTO_SIZES = ("original", "thumbnail", "preview")


def object_key(photo_id: str, size: Optional[str]) -> Optional[str]:
    """Map a photo id and size to its object storage key.

    Returns None for an unknown size.
    """
    if size == "original":
        return photo_id
    if size == "thumbnail":
        return f"thumb_{photo_id}"
    if size == "preview":
        return f"preview_{photo_id}"
    return None


def object_keys(photo_id: str) -> list[str]:
    """All object storage keys owned by a photo."""
    return [object_key(photo_id, size) for size in PHOTO_SIZES]


@dataclass
class PhotoPart:
    """One binary part of a photo upload."""
    content: bytes
    content_type: Optional[str] = None
    filename: Optional[str] = None


@dataclass
class PhotoDownload:
    """Object body plus response headers for serving a photo variant."""
    body: bytes
    media_type: str
    headers: dict[str, str] = field(default_factory=dict)


class PhotoService:
    """Service for photo variants.

    Responsibilities:
    - Store original/thumbnail/preview for a new photo
    - Serve a single variant with long-lived cache headers
    """

    def __init__(
        self,
        library_repository: LibraryRepository,
        storage: ObjectStorage
    ):
        self.library_repo = library_repository
        self.storage = storage

    async def create_photo(
        self,
        actor: Actor,
        library_id: Optional[str],
        parts: Mapping[str, object]
    ) -> SafePhoto:
        """Store the three variants of a new photo.

        Args:
            actor: Requesting actor, must have library access
            library_id: Library the upload is made for
            parts: Multipart body; needs PhotoPart values for every size

        Returns:
            Safe view of the new Photo record

        Raises:
            ValidationError: Bad library id, or a size part missing / not binary
            NotFoundError: Library does not exist
            UnauthorizedError: Actor lacks library access
        """
        library = await load_library(self.library_repo, library_id)
        require_library_access(library, actor)

        # Check every part before writing anything.
        for size in PHOTO_SIZES:
            if not isinstance(parts.get(size), PhotoPart):
                raise ValidationError(f'Expected "{size}" to be a File')

        photo_id = generate_id()
        for size in PHOTO_SIZES:
            part = parts[size]
            await self.storage.upload(
                object_key(photo_id, size),
                part.content,
                content_type=part.content_type
            )

        photo = Photo(
            id=photo_id,
            uploaded_by=actor.username,
            timestamp=utc_timestamp(),
        )
        logger.info("Photo %s uploaded to library %s", photo_id, library.id)
        return safe_photo(photo, actor)

    async def fetch_photo(self, photo_id: str, size: Optional[str]) -> PhotoDownload:
        """Fetch one variant of a photo.

        Raises:
            ValidationError: size is not original, thumbnail or preview
            NotFoundError: No such object
        """
        key = object_key(photo_id, size)
        if key is None:
            raise ValidationError('Expected a valid "size" search parameter')

        try:
            stored = await self.storage.download(key)
        except StorageFileNotFoundError:
            raise NotFoundError("Photo not found")

        media_type = stored.content_type or DEFAULT_PHOTO_CONTENT_TYPE
        headers = {
            "Cache-Control": PHOTO_CACHE_CONTROL,
            "Content-Type": media_type,
            "Content-Length": str(stored.size),
        }
        if stored.etag:
            headers["ETag"] = stored.etag

        return PhotoDownload(body=stored.body, media_type=media_type, headers=headers)

    async def delete_objects(self, photo_id: str) -> None:
        """Delete every stored variant of a photo."""
        await self.storage.delete_batch(object_keys(photo_id))
        logger.info("Photo %s objects deleted", photo_id)
