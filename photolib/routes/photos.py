"""Photo routes - multipart upload of three variants, variant delivery."""
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response
from starlette.datastructures import UploadFile

from ..application.services import PhotoPart, PhotoService
from ..dependencies import get_actor, get_photo_service
from ..models import Actor, SafePhoto

router = APIRouter()


async def _read_parts(request: Request) -> dict[str, object]:
    """Turn the multipart form into PhotoPart values; text fields stay as-is."""
    form = await request.form()
    parts: dict[str, object] = {}
    for name, value in form.multi_items():
        if isinstance(value, UploadFile):
            parts[name] = PhotoPart(
                content=await value.read(),
                content_type=value.content_type,
                filename=value.filename
            )
        else:
            parts[name] = value
    return parts


@router.post("/photo", response_model=SafePhoto, response_model_exclude_none=True)
async def create_photo(
    request: Request,
    library: Optional[str] = None,
    actor: Actor = Depends(get_actor),
    service: PhotoService = Depends(get_photo_service)
):
    """Upload original, thumbnail and preview for a new photo.

    The photo is not added to any album; patch the album afterwards.
    """
    parts = await _read_parts(request)
    return await service.create_photo(actor, library, parts)


@router.get("/photo/{photo_id}")
async def get_photo(
    photo_id: str,
    size: Optional[str] = None,
    service: PhotoService = Depends(get_photo_service)
):
    """Serve one variant with immutable cache headers."""
    download = await service.fetch_photo(photo_id, size)
    return Response(
        content=download.body,
        media_type=download.media_type,
        headers=download.headers
    )
