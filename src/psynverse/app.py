from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from psynverse.config import Config
from psynverse.core.core import Core
from psynverse.core.modules.book.models import Book, BookInput
from psynverse.core.modules.image.models import LocalImageFile, UploadedImage
from psynverse.core.modules.post.models import Post, PostInput
from psynverse.core.modules.session.models import SessionPayload, SessionToken


class App:
    """Facade for all application operations, validates the admin session before delegating to Core."""

    def __init__(self, config: Config) -> None:
        self._core = Core(config)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    @property
    def config(self) -> Config:
        return self._core.config

    # === Session ===
    def login(self, username: str, password: str) -> SessionToken:
        """Check admin credentials and issue a session token."""
        return self._core.services.session.login(username, password)

    def get_session(self, token: str | None) -> SessionPayload:
        """Get the payload of a valid session token."""
        return self._core.services.session.ensure_authenticated(token)

    # === Public read surface ===
    async def get_published_posts(self) -> list[Post]:
        """Published posts in display order."""
        settings = await self._core.services.settings.get_settings()
        return await self._core.services.post.list_posts(settings)

    async def get_published_post(self, slug: str) -> Post:
        return await self._core.services.post.get_post(slug)

    async def get_books(self) -> list[Book]:
        """Books in display order."""
        settings = await self._core.services.settings.get_settings()
        return await self._core.services.book.list_books(settings)

    def get_book_image(self, filename: str) -> LocalImageFile:
        return self._core.services.image.get_book_image(filename)

    async def get_rss(self) -> str:
        return await self._core.services.feed.render_rss()

    async def get_sitemap(self) -> str:
        return await self._core.services.feed.render_sitemap()

    # === Admin: posts ===
    async def get_all_posts(self, token: str | None) -> list[Post]:
        """All posts including drafts (admin only)."""
        self.get_session(token)
        settings = await self._core.services.settings.get_settings()
        return await self._core.services.post.list_posts(settings, include_drafts=True)

    async def get_admin_post(self, token: str | None, slug: str) -> Post:
        """Get a post by slug, drafts included (admin only)."""
        self.get_session(token)
        return await self._core.services.post.get_post(slug, include_drafts=True)

    async def save_post(self, token: str | None, post: PostInput, original_slug: str | None = None) -> tuple[Post, list[str]]:
        """Create, update or rename a post (admin only)."""
        self.get_session(token)
        return await self._core.services.post.upsert_post(post, original_slug)

    async def delete_post(self, token: str | None, slug: str) -> list[str]:
        """Delete a post (admin only)."""
        self.get_session(token)
        return await self._core.services.post.delete_post(slug)

    async def save_blog_order(self, token: str | None, blog_order: list[str]) -> list[str]:
        """Replace the curated post order (admin only)."""
        self.get_session(token)
        return await self._core.services.post.reorder_posts(blog_order)

    # === Admin: books ===
    async def get_admin_books(self, token: str | None) -> list[Book]:
        self.get_session(token)
        return await self.get_books()

    async def save_books(self, token: str | None, books: list[BookInput]) -> tuple[list[Book], list[str]]:
        """Replace the whole book collection (admin only)."""
        self.get_session(token)
        return await self._core.services.book.save_books(books)

    async def update_book_image(self, token: str | None, book_id: str, image: str) -> str:
        """Set a book's cover image URL (admin only)."""
        self.get_session(token)
        return await self._core.services.book.update_book_image(book_id, image)

    # === Admin: images ===
    async def upload_image(
        self, token: str | None, content: bytes, content_type: str | None, folder: str | None = None
    ) -> UploadedImage:
        """Upload an image to the image host (admin only)."""
        self.get_session(token)
        return await self._core.services.image.upload_image(content, content_type, folder)
