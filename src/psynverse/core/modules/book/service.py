from typing import Any

import structlog
from pymongo import ReplaceOne
from pymongo.asynchronous.database import AsyncDatabase

from psynverse.core.core import Service
from psynverse.core.modules.book.models import Book, BookInput
from psynverse.core.modules.book.validators import normalize_book, validate_image_url
from psynverse.core.modules.settings.models import SiteSettings
from psynverse.core.ordering import apply_order
from psynverse.errors import NotFoundError, ValidationError
from psynverse.utils import now

logger = structlog.get_logger(__name__)


class BookService(Service):
    """Book collection that the admin replaces wholesale."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("books")

    async def list_books(self, settings: SiteSettings) -> list[Book]:
        """All books in curated order, unordered ones appended in collection order."""
        books = await Book.list_cursor(self._collection.find())
        return apply_order(books, settings.book_order, key=lambda b: b.id)

    async def save_books(self, inputs: list[BookInput]) -> tuple[list[Book], list[str]]:
        """Make the stored collection exactly ``inputs``, in that order.

        Every submitted book is upserted, stored books missing from the submission are
        deleted and the book order becomes the submitted id sequence.
        """
        books = [normalize_book(book) for book in inputs]
        ids = [book.id for book in books]
        if len(set(ids)) != len(ids):
            raise ValidationError("Book ids must be unique")

        if books:
            await self._collection.bulk_write([ReplaceOne({"_id": book.id}, book.to_mongo(), upsert=True) for book in books])
        result = await self._collection.delete_many({"_id": {"$nin": ids}})

        book_order = await self.core.services.settings.set_book_order(ids)
        logger.info("books_saved", count=len(books), deleted=result.deleted_count)
        return books, book_order

    async def update_book_image(self, book_id: str, image: str) -> str:
        """Point a single book at a new cover image URL."""
        book_id = book_id.strip()
        if not book_id:
            raise ValidationError("Book id is required")
        image = validate_image_url(image)

        result = await self._collection.update_one({"_id": book_id}, {"$set": {"image": image, "updatedAt": now()}})
        if result.matched_count == 0:
            raise NotFoundError("Book not found")

        logger.info("book_image_updated", book_id=book_id)
        return image
