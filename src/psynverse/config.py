from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str  # mongodb://host:port/<database>
    host: str
    port: int
    debug: bool  # Also drops the secure flag from the session cookie
    session_secret: str = ""  # HMAC key for session tokens, startup fails when empty
    admin_user: str = "admin"
    admin_password: str | None = None  # Login answers 500 until this is set
    cloudinary_url: str | None = None  # cloudinary://<api_key>:<api_secret>@<cloud_name>
    site_url: str = "https://psynverse.local"
    site_name: str = "Psynverse"
    site_tagline: str = "Psychology • Journaling • Healing"
    book_images_path: str = "data/book-images"  # Directory with locally stored book covers
    cors_origins: list[str] = []
    max_upload_bytes: int = 5 * 1024 * 1024

    model_config = {
        "env_file": [".env"],
        "env_prefix": "PSYNVERSE_",
        "extra": "ignore",
    }
