from typing import Any

import structlog
from pymongo.asynchronous.database import AsyncDatabase

from psynverse.core.core import Service
from psynverse.core.modules.post.models import Post, PostInput
from psynverse.core.modules.post.validators import normalize_post_input
from psynverse.core.modules.settings.models import SiteSettings
from psynverse.core.ordering import apply_order
from psynverse.errors import ConflictError, NotFoundError, ValidationError
from psynverse.utils import now, sanitize_slug

logger = structlog.get_logger(__name__)


class PostService(Service):
    """Slug-keyed blog posts, kept in sync with the curated blog order."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("posts")

    async def on_start(self) -> None:
        """Create indexes for the public listing."""
        await self._collection.create_index([("published", 1), ("date", -1)])

    async def _find(self, slug: str) -> Post | None:
        doc = await self._collection.find_one({"_id": slug})
        return Post.model_validate(doc) if doc else None

    async def get_post(self, slug: str, include_drafts: bool = False) -> Post:
        """Get a post by (unsanitized) slug; drafts are visible to the admin only."""
        sanitized = sanitize_slug(slug)
        post = await self._find(sanitized) if sanitized else None
        if post is None or (not post.published and not include_drafts):
            raise NotFoundError("Post not found")
        return post

    async def list_posts(self, settings: SiteSettings, include_drafts: bool = False) -> list[Post]:
        """All posts in curated order, unordered ones appended newest first."""
        query: dict[str, Any] = {} if include_drafts else {"published": {"$ne": False}}
        posts = await Post.list_cursor(self._collection.find(query))
        return apply_order(posts, settings.blog_order, key=lambda p: p.slug, recency=lambda p: p.date)

    async def list_slugs(self) -> set[str]:
        return {doc["_id"] async for doc in self._collection.find({}, {"_id": 1})}

    async def upsert_post(self, data: PostInput, original_slug: str | None = None) -> tuple[Post, list[str]]:
        """Create, update or rename a post and return it with the updated blog order.

        ``original_slug`` names the post being edited; without it the call creates a post and
        refuses to overwrite an existing one. An ``original_slug`` with no usable characters edits
        the target slug in place. A rename writes the new document before deleting the old one.
        """
        normalized = normalize_post_input(data)
        target_slug = normalized.slug
        creating = not (original_slug and original_slug.strip())
        current_slug = sanitize_slug(original_slug or "") or target_slug
        renaming = current_slug != target_slug

        existing_target = await self._find(target_slug)
        if existing_target is not None and (renaming or creating):
            raise ConflictError("A post with this slug already exists.")

        existing_current = await self._find(current_slug) if renaming else existing_target
        if renaming and existing_current is None:
            raise NotFoundError("Post not found")

        timestamp = now()
        previous = existing_target or existing_current
        post = Post(
            id=target_slug,
            **normalized.model_dump(),
            created_at=previous.created_at if previous else timestamp,
            updated_at=timestamp,
        )

        await self._collection.replace_one({"_id": target_slug}, post.to_mongo(), upsert=True)
        if renaming:
            await self._collection.delete_one({"_id": current_slug})
            logger.info("post_renamed", old_slug=current_slug, slug=target_slug)
        else:
            logger.info("post_saved", slug=target_slug, created=previous is None)

        blog_order = await self.core.services.settings.place_post(
            target_slug, current_slug if renaming else None, existing=self.list_slugs
        )
        return post, blog_order

    async def delete_post(self, slug: str) -> list[str]:
        """Delete a post and drop it from the blog order."""
        sanitized = sanitize_slug(slug)
        if not sanitized:
            raise ValidationError("Invalid slug")

        result = await self._collection.delete_one({"_id": sanitized})
        if result.deleted_count == 0:
            raise NotFoundError("Post not found")

        logger.info("post_deleted", slug=sanitized)
        return await self.core.services.settings.remove_post(sanitized, existing=self.list_slugs)

    async def reorder_posts(self, order: list[str]) -> list[str]:
        """Replace the blog order; entries are sanitized and unknown slugs dropped."""
        cleaned = [slug for slug in (sanitize_slug(str(entry)) for entry in order) if slug]
        blog_order = await self.core.services.settings.set_blog_order(cleaned, existing=self.list_slugs)
        logger.info("blog_order_saved", count=len(blog_order))
        return blog_order
