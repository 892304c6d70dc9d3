from collections.abc import Awaitable, Callable
from typing import Any

import structlog
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import DuplicateKeyError

from psynverse.core.core import Service
from psynverse.core.modules.settings.models import SETTINGS_ID, SiteSettings
from psynverse.core.modules.settings.utils import dedupe_order, keep_known, place_in_order, remove_from_order
from psynverse.errors import ConflictError

logger = structlog.get_logger(__name__)

MAX_UPDATE_ATTEMPTS = 5

SlugLoader = Callable[[], Awaitable[set[str]]]


class SettingsService(Service):
    """Reads and writes the singleton display-order record."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("settings")

    async def get_settings(self) -> SiteSettings:
        """Load the settings record, or empty defaults when it was never written."""
        doc = await self._collection.find_one({"_id": SETTINGS_ID})
        if doc is None:
            return SiteSettings()
        return SiteSettings.model_validate(doc)

    async def update_settings(self, mutate: Callable[[SiteSettings], Awaitable[SiteSettings]]) -> SiteSettings:
        """Apply ``mutate`` to the stored settings with compare-and-set on the version.

        A concurrent writer makes the conditional update miss; the whole read-mutate-write
        cycle is then repeated against the fresh record. ``mutate`` runs after the settings read of
        each attempt, so anything it loads is at least as fresh as the version it writes against.
        """
        for attempt in range(1, MAX_UPDATE_ATTEMPTS + 1):
            current = await self.get_settings()
            updated = await mutate(current.model_copy(deep=True))

            # Records written before versioning have no version field at all
            version_filter: Any = current.version if current.version else {"$exists": False}
            try:
                await self._collection.update_one(
                    {"_id": SETTINGS_ID, "version": version_filter},
                    {
                        "$set": {"blogOrder": updated.blog_order, "bookOrder": updated.book_order},
                        "$inc": {"version": 1},
                    },
                    upsert=True,
                )
            except DuplicateKeyError:
                logger.debug("settings_write_conflict", attempt=attempt, version=current.version)
                continue
            return updated.model_copy(update={"version": current.version + 1})

        raise ConflictError("Settings were changed concurrently, please retry")

    async def _update_blog_order(
        self, change: Callable[[list[str]], list[str]], existing: SlugLoader | None = None
    ) -> list[str]:
        async def mutate(settings: SiteSettings) -> SiteSettings:
            order = change(settings.blog_order)
            if existing is not None:
                order = keep_known(order, await existing())
            return settings.model_copy(update={"blog_order": order})

        settings = await self.update_settings(mutate)
        return settings.blog_order

    async def set_blog_order(self, blog_order: list[str], existing: SlugLoader | None = None) -> list[str]:
        """Replace the blog order; with ``existing`` slugs of deleted posts are dropped on every attempt."""
        return await self._update_blog_order(lambda _: dedupe_order(blog_order), existing)

    async def set_book_order(self, book_order: list[str]) -> list[str]:
        order = dedupe_order(book_order)

        async def mutate(settings: SiteSettings) -> SiteSettings:
            return settings.model_copy(update={"book_order": order})

        await self.update_settings(mutate)
        return order

    async def place_post(self, slug: str, previous_slug: str | None = None, existing: SlugLoader | None = None) -> list[str]:
        """Record a saved post in the blog order, taking over the previous slug's position."""
        return await self._update_blog_order(lambda order: place_in_order(order, slug, previous_slug), existing)

    async def remove_post(self, slug: str, existing: SlugLoader | None = None) -> list[str]:
        return await self._update_blog_order(lambda order: remove_from_order(order, slug), existing)
