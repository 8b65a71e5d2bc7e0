"""Media library gateway.

Uploads, lists, replaces and deletes shop images held by the remote media
store.  Files are sent inline as data URIs:

    data:{mime};base64,{payload}

New uploads land under the configured folder with the original filename as
their public_id; replacements reuse an existing public_id so the remote
resource is overwritten in place.  Every successful mutation drops the
cached render of the gallery page.
"""
from __future__ import annotations

import base64
import logging
from functools import lru_cache
from typing import Any

from app.config import Settings, get_settings
from app.models import OperationResult, UploadOptions
from app.services.cloudinary_client import CloudinaryClient, MediaClient
from app.services.page_cache import PageCache

logger = logging.getLogger(__name__)


class MediaGateway:
    """Thin action layer over the remote media store."""

    def __init__(self, client: MediaClient, page_cache: PageCache, settings: Settings) -> None:
        self._client = client
        self.page_cache = page_cache
        self._settings = settings

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def create(self, file: bytes, filename: str | None, mime_type: str) -> OperationResult:
        """Upload a new image named after *filename* into the media folder.

        Without a filename the remote store assigns the public_id.
        """

        file_uri = build_file_uri(mime_type, "base64", get_base64_data(file))
        options = self._transform_options(folder=self._settings.media_folder, public_id=filename)
        return await self._transform_and_upload(file_uri, options, verb="uploaded to")

    async def retrieve_all(self) -> dict[str, Any]:
        """Return the raw remote listing of the media folder.

        Remote errors are not caught here; the caller's error boundary
        handles them.
        """

        return await self._client.resources(
            max_results=self._settings.max_results,
            type="upload",
            prefix=self._settings.media_folder,
        )

    async def update(self, public_id: str, file: bytes, mime_type: str) -> OperationResult:
        """Overwrite the image stored under *public_id* with new bytes."""

        file_uri = build_file_uri(mime_type, "base64", get_base64_data(file))
        options = self._transform_options(public_id=public_id)
        return await self._transform_and_upload(file_uri, options, verb="updated at")

    async def delete(self, public_id: str) -> OperationResult:
        try:
            await self._client.destroy(public_id)
        except Exception as exc:
            logger.warning("Delete of %s failed: %s", public_id, exc)
            return OperationResult.error(str(exc))

        self.page_cache.revalidate_path(self._settings.revalidate_path)
        logger.info("Deleted image %s", public_id)
        return OperationResult.success(f"Image deleted from {public_id}")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _transform_options(self, *, folder: str | None = None, public_id: str | None = None) -> UploadOptions:
        return UploadOptions(
            invalidate=True,
            folder=folder,
            public_id=public_id,
            aspect_ratio=self._settings.image_aspect_ratio,
            width=self._settings.image_width,
            crop=self._settings.image_crop,
            gravity=self._settings.image_gravity,
        )

    async def _transform_and_upload(self, file_uri: str, options: UploadOptions, *, verb: str) -> OperationResult:
        try:
            result = await self._client.upload(file_uri, **options.to_remote())
        except Exception as exc:
            logger.warning("Upload of %s failed: %s", options.public_id, exc)
            return OperationResult.error(str(exc))

        # Invalidation is unguarded: once the upload succeeded, its errors propagate
        self.page_cache.revalidate_path(self._settings.revalidate_path)
        logger.info("Image %s %s", verb, result.get("public_id"))
        return OperationResult.success(f"Image {verb} {result.get('public_id')}")


# ------------------------------------------------------------------
# Helper functions
# ------------------------------------------------------------------

def get_base64_data(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def build_file_uri(mime: str, encoding: str, data: str) -> str:
    return f"data:{mime};{encoding},{data}"


@lru_cache()
def get_media_gateway() -> MediaGateway:
    """Return the process-wide gateway bound to the real Cloudinary client."""

    settings = get_settings()
    return MediaGateway(CloudinaryClient(settings), PageCache(), settings)
