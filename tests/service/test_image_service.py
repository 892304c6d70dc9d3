"""Tests for image uploads and local book image lookup."""

import pytest
from cloudinary.exceptions import Error as CloudinaryError

from psynverse.errors import ConfigurationError, NotFoundError, PayloadTooLargeError, UpstreamError, ValidationError


@pytest.fixture
def uploads(monkeypatch):
    """Capture calls to the Cloudinary uploader."""
    calls = []

    def fake_upload(file, **options):
        calls.append({"content": file.read(), **options})
        return {
            "secure_url": "https://res.cloudinary.com/demo-cloud/image/upload/v1/psynverse/books/abc.png",
            "public_id": "psynverse/books/abc",
            "width": 4,
            "height": 3,
        }

    monkeypatch.setattr("cloudinary.uploader.upload", fake_upload)
    return calls


class TestUploadImage:
    async def test_upload(self, services, uploads, png_bytes):
        image = await services.image.upload_image(png_bytes, "image/png", folder="books")

        assert image.url.startswith("https://res.cloudinary.com/")
        assert image.public_id == "psynverse/books/abc"
        assert (image.width, image.height) == (4, 3)
        assert uploads[0]["content"] == png_bytes
        assert uploads[0]["folder"] == "psynverse/books"
        assert uploads[0]["cloud_name"] == "demo-cloud"
        assert uploads[0]["api_key"] == "api-key"
        assert uploads[0]["api_secret"] == "api-secret"

    async def test_non_image_content_type(self, services, uploads, png_bytes):
        with pytest.raises(ValidationError):
            await services.image.upload_image(png_bytes, "application/pdf")
        assert uploads == []

    async def test_too_large(self, services, uploads, config):
        """Test that the size cap is checked before the bytes are decoded."""
        content = b"\0" * (config.max_upload_bytes + 1)
        with pytest.raises(PayloadTooLargeError):
            await services.image.upload_image(content, "image/png")
        assert uploads == []

    async def test_unreadable_image(self, services, uploads):
        with pytest.raises(ValidationError):
            await services.image.upload_image(b"GIF89a but not really", "image/gif")
        assert uploads == []

    async def test_upstream_failure(self, services, monkeypatch, png_bytes):
        def failing_upload(file, **options):
            raise CloudinaryError("Invalid Signature")

        monkeypatch.setattr("cloudinary.uploader.upload", failing_upload)
        with pytest.raises(UpstreamError):
            await services.image.upload_image(png_bytes, "image/png")

    async def test_response_without_url(self, services, monkeypatch, png_bytes):
        monkeypatch.setattr("cloudinary.uploader.upload", lambda file, **options: {"public_id": "x"})
        with pytest.raises(UpstreamError):
            await services.image.upload_image(png_bytes, "image/png")

    async def test_not_configured(self, services, config, png_bytes):
        config.cloudinary_url = None
        with pytest.raises(ConfigurationError):
            await services.image.upload_image(png_bytes, "image/png")


class TestGetBookImage:
    def test_existing_file(self, services, config, png_bytes, tmp_path):
        images = tmp_path / "book-images"
        images.mkdir()
        (images / "cover.png").write_bytes(png_bytes)

        image = services.image.get_book_image("cover.png")

        assert image.file_path == (images / "cover.png").resolve()
        assert image.media_type == "image/png"

    @pytest.mark.parametrize("filename", ["missing.png", "../conftest.py", ".hidden.png"])
    def test_not_found(self, services, filename):
        with pytest.raises(NotFoundError):
            services.image.get_book_image(filename)
