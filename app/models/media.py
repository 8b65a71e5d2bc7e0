from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class UploadOptions(BaseModel):
    """Options forwarded verbatim to the remote upload call."""

    invalidate: bool = True  # purge the remote CDN copy as well
    folder: str | None = None
    public_id: str | None = None
    aspect_ratio: str
    width: int = Field(..., ge=1)
    crop: str
    gravity: str

    def to_remote(self) -> dict:
        # Updates carry a full public_id and must not be re-prefixed with a folder
        return self.model_dump(exclude_none=True)


class OperationResult(BaseModel):
    """Uniform outcome of every mutating media operation."""

    kind: Literal["success", "error"]
    message: str

    @classmethod
    def success(cls, message: str) -> "OperationResult":
        return cls(kind="success", message=message)

    @classmethod
    def error(cls, message: str) -> "OperationResult":
        return cls(kind="error", message=message)

    @property
    def ok(self) -> bool:
        return self.kind == "success"


class ImageResource(BaseModel):
    """A resource as listed by the remote store; unknown fields are kept as-is."""

    model_config = ConfigDict(extra="allow")

    public_id: str
