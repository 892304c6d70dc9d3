"""Tests for the RSS, sitemap and health endpoints."""


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_rss(admin_client):
    admin_client.post(
        "/api/admin/posts", json={"post": {"title": "Calm <Mind>", "date": "2025-01-10", "excerpt": "Breathe & rest"}}
    )

    response = admin_client.get("/rss.xml")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/rss+xml")
    assert "<title>Calm &lt;Mind&gt;</title>" in response.text
    assert "<link>https://example.org/blog/calm-mind</link>" in response.text
    assert "<description>Breathe &amp; rest</description>" in response.text


def test_sitemap(client):
    response = client.get("/sitemap.xml")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/xml")
    assert "<loc>https://example.org/books</loc>" in response.text
