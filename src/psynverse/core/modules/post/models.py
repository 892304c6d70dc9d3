"""Blog post models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel

from psynverse.core.db import MongoModel
from psynverse.core.modules.post.utils import normalize_tags, reading_minutes
from psynverse.utils import now


class PostInput(BaseModel):
    """Untrusted post fields as submitted by the admin editor.

    Everything is optional here; ``normalize_post_input`` decides what is acceptable.
    """

    title: str | None = None
    slug: str | None = None
    date: str | None = None
    excerpt: str | None = None
    tags: list[str] = Field(default_factory=list, description="List of tags or a comma-separated string")
    cover_image: str | None = None
    content: str | None = None
    published: bool | None = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value: Any) -> list[str]:
        return normalize_tags(value)


class NormalizedPost(BaseModel):
    """Post fields after trimming and validation; slug is canonical."""

    slug: str
    title: str
    date: str
    excerpt: str
    tags: list[str]
    content: str
    cover_image: str | None
    published: bool

    model_config = ConfigDict(frozen=True)


class Post(MongoModel):
    """Blog post stored under its slug.

    Renaming a post writes a new document under the new slug and removes the old one;
    ``created_at`` is carried over.
    """

    slug: str
    title: str
    date: str  # ISO date, also the recency key for unordered posts
    excerpt: str
    tags: list[str] = Field(default_factory=list)
    cover_image: str | None = None
    content: str = ""
    published: bool = True
    created_at: datetime = Field(default_factory=now)
    updated_at: datetime = Field(default_factory=now)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def reading_minutes(self) -> int:
        return reading_minutes(self.content)

    def to_mongo(self) -> dict[str, Any]:
        data = super().to_mongo()
        data.pop("readingMinutes", None)
        return data
