"""Curated book list models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from psynverse.core.db import MongoModel
from psynverse.utils import now


class BookInput(BaseModel):
    """Book entry as submitted by the admin; a missing id gets generated on save."""

    id: str = ""
    title: str = ""
    author: str = ""
    link: str = ""
    image: str = ""
    note: str = ""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    @field_validator("id", "title", "author", "link", "image", "note", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class Book(MongoModel):
    """Book stored under its opaque id."""

    title: str
    author: str
    link: str
    image: str | None = None
    note: str | None = None
    updated_at: datetime = Field(default_factory=now, exclude=True)

    def to_mongo(self) -> dict[str, Any]:
        data = super().to_mongo()
        data["updatedAt"] = self.updated_at
        return data
