"""HTTP routes, mounted under /api.

- users: user creation, lookup, login
- libraries: library creation and read
- albums: album create/patch/delete
- photos: variant upload and delivery
"""
from fastapi import APIRouter

from . import users, libraries, albums, photos

router = APIRouter(prefix="/api")

router.include_router(users.router)
router.include_router(libraries.router)
router.include_router(albums.router)
router.include_router(photos.router)

__all__ = ["router"]
