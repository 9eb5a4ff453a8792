"""Library routes."""
from typing import Optional

from fastapi import APIRouter, Depends

from ..application.services import LibraryService
from ..dependencies import get_actor, get_library_service
from ..models import Actor, CreateLibraryInput, SafeLibrary

router = APIRouter()


@router.post("/library", response_model=SafeLibrary, response_model_exclude_none=True)
async def create_library(
    data: CreateLibraryInput,
    actor: Actor = Depends(get_actor),
    service: LibraryService = Depends(get_library_service)
):
    """Create an empty library (admin only)."""
    return await service.create_library(actor, data.id)


@router.get("/library", response_model=SafeLibrary, response_model_exclude_none=True)
async def get_library(
    library: Optional[str] = None,
    actor: Actor = Depends(get_actor),
    service: LibraryService = Depends(get_library_service)
):
    """Get a library with the albums the caller may see."""
    return await service.get_library(actor, library)
