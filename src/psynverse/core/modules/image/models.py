from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field


class UploadedImage(BaseModel):
    """Image stored on the external image host."""

    url: str = Field(..., description="Public https URL of the image")
    public_id: str = Field(..., description="Identifier of the image on the image host")
    width: int | None = Field(None, description="Width in pixels")
    height: int | None = Field(None, description="Height in pixels")


@dataclass(frozen=True)
class CloudinaryCredentials:
    cloud_name: str
    api_key: str
    api_secret: str


class LocalImageFile(BaseModel):
    """Locally stored image resolved for download."""

    file_path: Path = Field(..., description="Absolute path to file on disk")
    media_type: str = Field(..., description="MIME type")
