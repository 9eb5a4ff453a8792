# Repository Pattern Implementation
"""
Repositories map entities to key/value documents.

Layout:
    user-{username}    -> User JSON
    library-{id}       -> Library JSON (albums and photos inline)
"""
from .base import DocumentRepository
from .user_repository import UserRepository
from .library_repository import LibraryRepository

__all__ = [
    "DocumentRepository",
    "UserRepository",
    "LibraryRepository",
]
