"""Form endpoints for the shop's image library."""
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, File, Form, UploadFile

from app.models import ImageResource, OperationResult
from app.services.media_gateway import MediaGateway, get_media_gateway

router = APIRouter()
logger = logging.getLogger(__name__)

GALLERY_PATH = "/"


# ---------------------------------------------------------------------------
# Gallery page
# ---------------------------------------------------------------------------


@router.get(GALLERY_PATH)
async def gallery(gateway: MediaGateway = Depends(get_media_gateway)):
    """Render the gallery, served from the page cache until a mutation drops it."""
    page = gateway.page_cache.get(GALLERY_PATH)
    if page is None:
        generation = gateway.page_cache.generation(GALLERY_PATH)
        listing = await gateway.retrieve_all()
        images = [ImageResource.model_validate(r) for r in listing.get("resources", [])]
        page = {"images": [image.model_dump() for image in images]}
        gateway.page_cache.store(GALLERY_PATH, page, generation)
        logger.debug("Rendered gallery with %d images", len(images))
    return page


# ---------------------------------------------------------------------------
# CRUD
# ---------------------------------------------------------------------------


@router.post("/images", response_model=OperationResult)
async def create_image(
    file: UploadFile = File(...),
    gateway: MediaGateway = Depends(get_media_gateway),
):
    data = await file.read()
    return await gateway.create(data, file.filename or None, file.content_type or "application/octet-stream")


@router.get("/images")
async def list_images(gateway: MediaGateway = Depends(get_media_gateway)) -> dict[str, Any]:
    return await gateway.retrieve_all()


@router.put("/images", response_model=OperationResult)
async def update_image(
    public_id: str = Form(...),
    file: UploadFile = File(...),
    gateway: MediaGateway = Depends(get_media_gateway),
):
    data = await file.read()
    return await gateway.update(public_id, data, file.content_type or "application/octet-stream")


@router.delete("/images", response_model=OperationResult)
async def delete_image(
    public_id: str = Form(...),
    gateway: MediaGateway = Depends(get_media_gateway),
):
    return await gateway.delete(public_id)
