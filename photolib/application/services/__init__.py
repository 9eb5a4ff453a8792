"""Application services - business logic layer."""

from .actor_service import ActorResolver, has_library_access
from .user_service import UserService
from .library_service import LibraryService
from .photo_service import PhotoService, PhotoPart, PhotoDownload

__all__ = [
    "ActorResolver",
    "has_library_access",
    "UserService",
    "LibraryService",
    "PhotoService",
    "PhotoPart",
    "PhotoDownload",
]
