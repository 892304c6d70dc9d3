"""Helpers for image uploads and locally served images."""

import mimetypes
import re
from io import BytesIO
from pathlib import Path
from urllib.parse import unquote, urlparse

from PIL import Image
from pillow_heif import register_heif_opener  # type: ignore[import-untyped]

from psynverse.core.modules.image.models import CloudinaryCredentials
from psynverse.errors import ConfigurationError

register_heif_opener()

BASE_FOLDER = "psynverse"


def resolve_folder(folder: str | None) -> str:
    """Map a requested sub-folder onto the image host folder tree.

    Only word characters, hyphens and slashes survive; empty segments are dropped, so
    the result always stays under the base folder.
    """
    if not folder:
        return BASE_FOLDER
    sanitized = re.sub(r"[^\w\-/]", "", folder)
    segments = [segment.strip() for segment in sanitized.split("/")]
    normalized = "/".join(segment for segment in segments if segment)
    return f"{BASE_FOLDER}/{normalized}" if normalized else BASE_FOLDER


def is_valid_image(content: bytes) -> bool:
    """Check if bytes hold an image that PIL can open."""
    try:
        with Image.open(BytesIO(content)) as img:
            img.verify()
    except Exception:
        return False
    else:
        return True


def parse_cloudinary_url(url: str) -> CloudinaryCredentials:
    """Split ``cloudinary://<api_key>:<api_secret>@<cloud_name>`` into credentials."""
    parsed = urlparse(url)
    if parsed.scheme != "cloudinary" or not parsed.hostname or not parsed.username or not parsed.password:
        raise ConfigurationError("PSYNVERSE_CLOUDINARY_URL must look like cloudinary://<api_key>:<api_secret>@<cloud_name>")
    return CloudinaryCredentials(
        cloud_name=parsed.hostname,
        api_key=unquote(parsed.username),
        api_secret=unquote(parsed.password),
    )


def safe_image_path(base_dir: str, filename: str) -> Path | None:
    """Resolve a user-supplied filename inside ``base_dir``.

    Directory components are stripped and hidden names rejected; None means the name
    cannot refer to a file in the directory.
    """
    name = Path(filename.replace("\\", "/")).name
    if not name or name.startswith("."):
        return None
    base = Path(base_dir).resolve()
    path = (base / name).resolve()
    if path.parent != base:
        return None
    return path


def guess_media_type(path: Path) -> str:
    media_type, _ = mimetypes.guess_type(path.name)
    return media_type or "application/octet-stream"
