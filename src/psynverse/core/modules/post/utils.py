from typing import Any

WORDS_PER_MINUTE = 200


def normalize_tags(value: Any) -> list[str]:
    """Accept a list of tags or a comma-separated string; trim each tag and drop empty ones."""
    if not value:
        return []
    if isinstance(value, str):
        parts: list[Any] = value.split(",")
    elif isinstance(value, (list, tuple)):
        parts = list(value)
    else:
        raise ValueError("tags must be a list or a comma-separated string")
    return [tag for tag in (str(part).strip() for part in parts) if tag]


def reading_minutes(content: str) -> int:
    """Estimated reading time, never below one minute."""
    return max(1, round(len(content.split()) / WORDS_PER_MINUTE))
