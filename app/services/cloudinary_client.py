"""Cloudinary media API wrapper.

The Cloudinary SDK is blocking, so every call is handed to the FastAPI
threadpool; the caller's coroutine only suspends while the request is in
flight.  Errors raised by the SDK (``cloudinary.exceptions.Error`` and
transport errors) are propagated untouched.
"""
from __future__ import annotations

import logging
from typing import Any, Protocol

import cloudinary
import cloudinary.api
import cloudinary.uploader
from fastapi.concurrency import run_in_threadpool

from app.config import Settings

logger = logging.getLogger(__name__)


class MediaClient(Protocol):
    """The three remote calls the gateway depends on."""

    async def upload(self, file_uri: str, **options: Any) -> dict[str, Any]: ...

    async def resources(self, **query: Any) -> dict[str, Any]: ...

    async def destroy(self, public_id: str) -> dict[str, Any]: ...


class CloudinaryClient:  # pylint: disable=too-few-public-methods
    """Minimal async client for the Cloudinary upload and admin APIs."""

    def __init__(self, settings: Settings) -> None:
        credentials = {
            "cloud_name": settings.cloudinary_cloud_name,
            "api_key": settings.cloudinary_api_key,
            "api_secret": settings.cloudinary_api_secret,
        }
        # Unset values must not clobber what the SDK parsed from CLOUDINARY_URL
        cloudinary.config(secure=True, **{k: v for k, v in credentials.items() if v})
        if not settings.cloudinary_cloud_name:  # pragma: no cover
            logger.warning("CLOUDINARY_CLOUD_NAME is not set; relying on CLOUDINARY_URL.")

    async def upload(self, file_uri: str, **options: Any) -> dict[str, Any]:
        logger.debug("Cloudinary upload public_id=%s folder=%s", options.get("public_id"), options.get("folder"))
        return await run_in_threadpool(cloudinary.uploader.upload, file_uri, **options)

    async def resources(self, **query: Any) -> dict[str, Any]:
        logger.debug("Cloudinary resources %s", query)
        result = await run_in_threadpool(cloudinary.api.resources, **query)
        # The admin API returns a Response dict subclass carrying rate-limit headers
        return dict(result)

    async def destroy(self, public_id: str) -> dict[str, Any]:
        logger.debug("Cloudinary destroy public_id=%s", public_id)
        return await run_in_threadpool(cloudinary.uploader.destroy, public_id)
