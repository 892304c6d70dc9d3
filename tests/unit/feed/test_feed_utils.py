"""Tests for feed formatting helpers and template rendering."""

import pytest

from psynverse.core.modules.feed.models import RssChannel, RssContext, RssItem, SitemapContext, SitemapUrl
from psynverse.core.modules.feed.service import render_template
from psynverse.core.modules.feed.templates import RSS_TEMPLATE, SITEMAP_TEMPLATE
from psynverse.core.modules.feed.utils import join_url, rfc2822_date


class TestRfc2822Date:
    def test_plain_date_is_midnight_utc(self):
        assert rfc2822_date("2025-01-10") == "Fri, 10 Jan 2025 00:00:00 GMT"

    def test_offset_converted_to_utc(self):
        assert rfc2822_date("2025-01-10T02:30:00+02:00") == "Fri, 10 Jan 2025 00:30:00 GMT"

    @pytest.mark.parametrize("value", ["", "yesterday", "2025-13-45"])
    def test_unparsable(self, value):
        assert rfc2822_date(value) is None


def test_join_url():
    assert join_url("https://example.org/", "/blog/x") == "https://example.org/blog/x"
    assert join_url("https://example.org", "") == "https://example.org"


class TestRenderTemplate:
    """Tests for the RSS and sitemap templates."""

    def test_rss_escapes_text(self):
        context = RssContext(
            channel=RssChannel(title="Mind & Page", link="https://example.org", description="<notes>"),
            items=[RssItem(title="Fear & Hope", link="https://example.org/blog/fear", description="a < b")],
        )
        xml = render_template(RSS_TEMPLATE, context)
        assert "<title>Mind &amp; Page</title>" in xml
        assert "<description>&lt;notes&gt;</description>" in xml
        assert "<title>Fear &amp; Hope</title>" in xml
        assert "<description>a &lt; b</description>" in xml

    def test_rss_optional_item_parts(self):
        context = RssContext(
            channel=RssChannel(title="t", link="l", description="d"),
            items=[
                RssItem(title="dated", link="l1", description="d", pub_date="Fri, 10 Jan 2025 00:00:00 GMT", categories=["sleep"]),
                RssItem(title="undated", link="l2", description="d"),
            ],
        )
        xml = render_template(RSS_TEMPLATE, context)
        assert xml.count("<item>") == 2
        assert xml.count("<pubDate>") == 1
        assert "<category>sleep</category>" in xml

    def test_sitemap(self):
        context = SitemapContext(urls=[SitemapUrl(loc="https://example.org"), SitemapUrl(loc="https://example.org/blog/a", lastmod="2025-01-10")])
        xml = render_template(SITEMAP_TEMPLATE, context)
        assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        assert xml.count("<url>") == 2
        assert "<lastmod>2025-01-10</lastmod>" in xml

    def test_broken_template(self):
        with pytest.raises(ValueError, match="Failed to render template"):
            render_template("{% for x in %}", SitemapContext(urls=[]))
