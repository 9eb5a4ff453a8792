"""Application layer - business logic services.

This layer contains application services that orchestrate domain operations.
Services are independent of HTTP/FastAPI and can be tested in isolation.
"""

from .services.actor_service import ActorResolver, has_library_access
from .services.user_service import UserService
from .services.library_service import LibraryService
from .services.photo_service import PhotoService

__all__ = [
    "ActorResolver",
    "has_library_access",
    "UserService",
    "LibraryService",
    "PhotoService",
]
