"""Template contexts for syndication documents."""

from pydantic import BaseModel, Field


class RssChannel(BaseModel):
    title: str
    link: str
    description: str


class RssItem(BaseModel):
    title: str
    link: str
    description: str
    pub_date: str | None = None  # RFC 2822
    categories: list[str] = Field(default_factory=list)


class RssContext(BaseModel):
    channel: RssChannel
    items: list[RssItem]


class SitemapUrl(BaseModel):
    loc: str
    lastmod: str | None = None  # W3C date


class SitemapContext(BaseModel):
    urls: list[SitemapUrl]
