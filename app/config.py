from __future__ import annotations

from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from a .env file if present (local dev only)
load_dotenv()


class Settings(BaseSettings):
    """Application configuration loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Cloudinary credentials (the SDK also honours CLOUDINARY_URL on its own)
    cloudinary_cloud_name: Optional[str] = Field(default=None, validation_alias="CLOUDINARY_CLOUD_NAME")
    cloudinary_api_key: Optional[str] = Field(default=None, validation_alias="CLOUDINARY_API_KEY")
    cloudinary_api_secret: Optional[str] = Field(default=None, validation_alias="CLOUDINARY_API_SECRET")

    # Media library
    media_folder: str = Field("tienda", validation_alias="MEDIA_FOLDER", description="Folder every upload lands in and listings are scoped to.")
    max_results: int = Field(500, ge=1, le=500, validation_alias="MEDIA_MAX_RESULTS")

    # Remote transformation applied on upload
    image_aspect_ratio: str = Field("1.62", validation_alias="IMAGE_ASPECT_RATIO")
    image_width: int = Field(600, ge=1, validation_alias="IMAGE_WIDTH")
    image_crop: str = Field("fill", validation_alias="IMAGE_CROP")
    image_gravity: str = Field("center", validation_alias="IMAGE_GRAVITY")

    # Page whose cached render is dropped after every mutation
    revalidate_path: str = Field("/", validation_alias="REVALIDATE_PATH")

    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")


@lru_cache()
def get_settings() -> Settings:  # pragma: no cover
    """Return a cached Settings instance so it is only parsed once."""

    return Settings()
