"""Actor-scoped safe views.

Every function returns a new object and leaves its input untouched.
Each also accepts an already redacted view, so applying a function
twice gives the same result as applying it once.

Rules for a non-admin actor:
- User: created_by and timestamp stripped (password is always stripped)
- Library: created_by and timestamp stripped, albums redacted
- Album: created_by and timestamp stripped, photos redacted
- Photo: uploaded_by and timestamp stripped

id, name, public and cover are never stripped.
"""
from typing import Optional, Union

from ..models import (
    Actor,
    Album,
    Library,
    Photo,
    SafeAlbum,
    SafeLibrary,
    SafePhoto,
    SafeUser,
    User,
)
from .services.actor_service import is_admin


def safe_user(user: Union[User, SafeUser], actor: Actor) -> SafeUser:
    view = SafeUser.model_validate(user.model_dump(exclude={"password"}))
    if not is_admin(actor):
        view = view.model_copy(update={"created_by": None, "timestamp": None})
    return view


def safe_photo(photo: Union[Photo, SafePhoto], actor: Actor) -> SafePhoto:
    view = SafePhoto.model_validate(photo.model_dump())
    if not is_admin(actor):
        view = view.model_copy(update={"uploaded_by": None, "timestamp": None})
    return view


def safe_album(album: Union[Album, SafeAlbum], actor: Actor) -> SafeAlbum:
    view = SafeAlbum.model_validate(album.model_dump())
    if not is_admin(actor):
        view = view.model_copy(update={
            "created_by": None,
            "timestamp": None,
            "photos": [safe_photo(p, actor) for p in view.photos],
        })
    return view


def safe_library(
    library: Union[Library, SafeLibrary],
    actor: Actor,
    authorized: Optional[bool] = None
) -> SafeLibrary:
    """Safe view of a library.

    Albums go through safe_album for outsiders and for members alike;
    only an admin sees album and photo provenance. Dropping non-public
    albums is the read path's job (LibraryService.get_library).
    """
    view = SafeLibrary.model_validate(library.model_dump())
    update = {}
    if authorized is not None:
        update["authorized"] = authorized
    if not is_admin(actor):
        update["created_by"] = None
        update["timestamp"] = None
        update["albums"] = [safe_album(a, actor) for a in view.albums]
    return view.model_copy(update=update)
