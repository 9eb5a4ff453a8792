"""Shared FastAPI dependencies.

Services are built per request on top of the store and object storage
opened by the application lifespan.
"""
from fastapi import Request

from .application.services import LibraryService, PhotoService, UserService
from .infrastructure.repositories import LibraryRepository, UserRepository
from .models import Actor


def get_actor(request: Request) -> Actor:
    """Get the actor resolved by ActorMiddleware (None when anonymous)."""
    return getattr(request.state, "actor", None)


def get_user_service(request: Request) -> UserService:
    state = request.app.state
    return UserService(
        user_repository=UserRepository(state.store),
        token_service=state.token_service
    )


def get_photo_service(request: Request) -> PhotoService:
    state = request.app.state
    return PhotoService(
        library_repository=LibraryRepository(state.store),
        storage=state.storage
    )


def get_library_service(request: Request) -> LibraryService:
    state = request.app.state
    return LibraryService(
        library_repository=LibraryRepository(state.store),
        photo_service=get_photo_service(request)
    )
