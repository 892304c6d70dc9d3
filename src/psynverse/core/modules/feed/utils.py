from datetime import UTC, datetime
from email.utils import format_datetime


def rfc2822_date(value: str) -> str | None:
    """Format an ISO date for RSS; None when the value does not parse."""
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return format_datetime(parsed.astimezone(UTC), usegmt=True)


def join_url(base: str, path: str) -> str:
    return f"{base.rstrip('/')}{path}"
