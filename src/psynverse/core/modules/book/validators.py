from urllib.parse import urlparse
from uuid import uuid4

from psynverse.core.modules.book.models import Book, BookInput
from psynverse.errors import ValidationError


def is_valid_https_url(value: str) -> bool:
    """Check that a value is an absolute https URL with a host."""
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    return parsed.scheme == "https" and bool(parsed.hostname)


def validate_image_url(value: str) -> str:
    image = value.strip()
    if not image or not is_valid_https_url(image):
        raise ValidationError("A valid https image URL is required")
    return image


def normalize_book(book: BookInput) -> Book:
    """Trim every field; empty optional fields become None and an empty link becomes '#'."""
    book_id = book.id.strip() or uuid4().hex
    image = book.image.strip()
    note = book.note.strip()
    return Book(
        id=book_id,
        title=book.title.strip(),
        author=book.author.strip(),
        link=book.link.strip() or "#",
        image=validate_image_url(image) if image else None,
        note=note or None,
    )
