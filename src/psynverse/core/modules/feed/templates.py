"""Liquid templates for syndication documents."""

RSS_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>{{ channel.title | escape }}</title>
    <link>{{ channel.link | escape }}</link>
    <description>{{ channel.description | escape }}</description>
    {%- for item in items %}
    <item>
      <title>{{ item.title | escape }}</title>
      <link>{{ item.link | escape }}</link>
      <guid isPermaLink="true">{{ item.link | escape }}</guid>
      <description>{{ item.description | escape }}</description>
      {%- if item.pub_date %}
      <pubDate>{{ item.pub_date }}</pubDate>
      {%- endif %}
      {%- for tag in item.categories %}
      <category>{{ tag | escape }}</category>
      {%- endfor %}
    </item>
    {%- endfor %}
  </channel>
</rss>
"""

SITEMAP_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
  {%- for entry in urls %}
  <url>
    <loc>{{ entry.loc | escape }}</loc>
    {%- if entry.lastmod %}
    <lastmod>{{ entry.lastmod }}</lastmod>
    {%- endif %}
  </url>
  {%- endfor %}
</urlset>
"""
