"""Entities, their actor-scoped safe views, and request bodies.

Stored entities (User, Library, Album, Photo) and safe views
(SafeUser, SafeLibrary, SafeAlbum, SafePhoto) are distinct types. Safe
views make every redactable field optional and are serialized with
``exclude_none=True``, so a stripped field is absent from the JSON.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


# =============================================================================
# Stored entities
# =============================================================================

class Photo(BaseModel):
    id: str
    author: Optional[str] = None
    uploaded_by: str
    timestamp: str


class Album(BaseModel):
    id: str
    name: str
    cover: Optional[str] = None
    public: bool = False
    created_by: str
    timestamp: str
    photos: list[Photo] = Field(default_factory=list)


class Library(BaseModel):
    id: str
    created_by: str
    timestamp: str
    albums: list[Album] = Field(default_factory=list)


class User(BaseModel):
    username: str
    password: str
    library_access: list[str] = Field(default_factory=list)
    admin_access: bool = False
    created_by: Optional[str] = None
    timestamp: Optional[str] = None


# =============================================================================
# Safe views
# =============================================================================

class SafePhoto(BaseModel):
    id: str
    author: Optional[str] = None
    uploaded_by: Optional[str] = None
    timestamp: Optional[str] = None


class SafeAlbum(BaseModel):
    id: str
    name: str
    cover: Optional[str] = None
    public: bool = False
    created_by: Optional[str] = None
    timestamp: Optional[str] = None
    photos: list[SafePhoto] = Field(default_factory=list)


class SafeLibrary(BaseModel):
    id: str
    created_by: Optional[str] = None
    timestamp: Optional[str] = None
    albums: list[SafeAlbum] = Field(default_factory=list)
    # Set only by the read path: whether the caller has library access.
    authorized: Optional[bool] = None


class SafeUser(BaseModel):
    """User without its password hash.

    Also the shape of an authenticated Actor: a resolved user, or the
    synthetic admin (see ``ADMIN_ACTOR``).
    """
    username: str
    library_access: list[str] = Field(default_factory=list)
    admin_access: bool = False
    created_by: Optional[str] = None
    timestamp: Optional[str] = None


# None means anonymous.
Actor = Optional[SafeUser]

ADMIN_ACTOR = SafeUser(username="admin", admin_access=True, library_access=[])


# =============================================================================
# Request bodies
# =============================================================================

class CreateUserInput(BaseModel):
    username: str
    password: str
    library_access: list[str] = Field(default_factory=list)
    admin_access: bool = False


class LoginInput(BaseModel):
    username: str
    password: str


class LoginResult(BaseModel):
    token: str
    user: SafeUser


class CreateLibraryInput(BaseModel):
    id: str


class CreateAlbumInput(BaseModel):
    name: str
    public: Optional[bool] = None


class PhotoEntryInput(BaseModel):
    id: str
    author: Optional[str] = None


class PatchAlbumInput(BaseModel):
    """Partial album update.

    Every field is optional. ``cover`` distinguishes "not sent" from an
    explicit ``null`` through ``model_fields_set``.
    """
    name: Optional[str] = None
    public: Optional[bool] = None
    cover: Optional[str] = None
    photos: Optional[list[PhotoEntryInput]] = None

    @property
    def clears_cover(self) -> bool:
        return "cover" in self.model_fields_set and self.cover is None


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix."""
    return (
        datetime.now(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )
