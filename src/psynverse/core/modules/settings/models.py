"""Site-wide display order settings."""

from typing import Any

from pydantic import Field, field_validator

from psynverse.core.db import MongoModel

SETTINGS_ID = "site"


class SiteSettings(MongoModel):
    """Singleton record with the admin-curated display order of posts and books.

    ``version`` increases on every write and guards concurrent read-modify-write cycles.
    """

    id: str = Field(default=SETTINGS_ID, alias="_id", serialization_alias="id")
    blog_order: list[str] = Field(default_factory=list, description="Post slugs in display order")
    book_order: list[str] = Field(default_factory=list, description="Book ids in display order")
    version: int = Field(default=0, description="Write counter for optimistic concurrency")

    @field_validator("blog_order", "book_order", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value
