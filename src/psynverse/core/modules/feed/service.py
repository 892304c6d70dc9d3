import structlog
from liquid import Environment
from pydantic import BaseModel

from psynverse.core.core import Service
from psynverse.core.modules.feed.models import RssChannel, RssContext, RssItem, SitemapContext, SitemapUrl
from psynverse.core.modules.feed.templates import RSS_TEMPLATE, SITEMAP_TEMPLATE
from psynverse.core.modules.feed.utils import join_url, rfc2822_date
from psynverse.core.modules.post.models import Post

logger = structlog.get_logger(__name__)

STATIC_PATHS = ("", "/blog", "/books")


def render_template(template: str, context: BaseModel) -> str:
    """Render a Liquid template with a typed context."""
    try:
        env = Environment()
        tmpl = env.from_string(template)
        return tmpl.render(**context.model_dump(mode="json"))
    except Exception as e:
        logger.exception("template_render_failed", error=str(e), template=template[:100])
        raise ValueError(f"Failed to render template: {e}") from e


class FeedService(Service):
    """RSS feed and sitemap built from the ordered published posts."""

    async def _published_posts(self) -> list[Post]:
        settings = await self.core.services.settings.get_settings()
        return await self.core.services.post.list_posts(settings)

    async def render_rss(self) -> str:
        config = self.core.config
        posts = await self._published_posts()
        context = RssContext(
            channel=RssChannel(title=config.site_name, link=config.site_url, description=config.site_tagline),
            items=[
                RssItem(
                    title=post.title,
                    link=join_url(config.site_url, f"/blog/{post.slug}"),
                    description=post.excerpt,
                    pub_date=rfc2822_date(post.date),
                    categories=post.tags,
                )
                for post in posts
            ],
        )
        return render_template(RSS_TEMPLATE, context)

    async def render_sitemap(self) -> str:
        site_url = self.core.config.site_url
        posts = await self._published_posts()
        urls = [SitemapUrl(loc=join_url(site_url, path)) for path in STATIC_PATHS]
        urls.extend(
            SitemapUrl(loc=join_url(site_url, f"/blog/{post.slug}"), lastmod=post.updated_at.date().isoformat())
            for post in posts
        )
        return render_template(SITEMAP_TEMPLATE, SitemapContext(urls=urls))
