"""Album routes - create, patch (rename, photos, cover, visibility), delete."""
from typing import Optional

from fastapi import APIRouter, Depends, Response

from ..application.services import LibraryService
from ..dependencies import get_actor, get_library_service
from ..models import Actor, CreateAlbumInput, PatchAlbumInput, SafeAlbum

router = APIRouter()


@router.post("/album", response_model=SafeAlbum, response_model_exclude_none=True)
async def create_album(
    data: CreateAlbumInput,
    library: Optional[str] = None,
    actor: Actor = Depends(get_actor),
    service: LibraryService = Depends(get_library_service)
):
    return await service.create_album(actor, library, data)


@router.patch("/album/{album_id}", response_model=SafeAlbum, response_model_exclude_none=True)
async def patch_album(
    album_id: str,
    data: PatchAlbumInput,
    library: Optional[str] = None,
    actor: Actor = Depends(get_actor),
    service: LibraryService = Depends(get_library_service)
):
    """Partially update an album. Reordering is a patch with a permuted photo list."""
    return await service.patch_album(actor, library, album_id, data)


@router.delete("/album/{album_id}", status_code=204)
async def delete_album(
    album_id: str,
    library: Optional[str] = None,
    actor: Actor = Depends(get_actor),
    service: LibraryService = Depends(get_library_service)
):
    await service.delete_album(actor, library, album_id)
    return Response(status_code=204)
