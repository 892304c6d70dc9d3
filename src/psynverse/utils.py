import re
from datetime import UTC, datetime


def sanitize_slug(value: str) -> str:
    """Normalize arbitrary input into a canonical slug. An empty result means the input had no usable characters."""
    slug = value.lower().strip()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


def now() -> datetime:
    return datetime.now(UTC)
