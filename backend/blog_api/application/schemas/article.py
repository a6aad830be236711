"""Pydantic DTOs (Data Transfer Objects) for the blog Article feature.

Field names are snake_case in Python and camelCase on the wire
(``metaTitle``, ``createdAt`` ...). Either spelling is accepted on input.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ArticleCreate(BaseModel):
    """Schema for creating a new article.

    Required fields and length limits are checked by the service, so missing
    or over-long values are reported as a single validation error.
    """

    model_config = _CAMEL_CONFIG

    title: str | None = Field(None, examples=["Planning a Summer Wedding Menu"])
    category: str | None = Field(None, examples=["Weddings"])
    content: str | None = Field(None, examples=["<p>Seasonal produce makes all the difference.</p>"])
    meta_title: str | None = None
    meta_description: str | None = None


class ArticleUpdate(BaseModel):
    """Schema for updating an existing article — all fields optional."""

    model_config = _CAMEL_CONFIG

    title: str | None = None
    category: str | None = None
    content: str | None = None
    meta_title: str | None = None
    meta_description: str | None = None


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    title: str
    category: str
    content: str
    slug: str
    meta_title: str
    meta_description: str
    created_at: datetime
    updated_at: datetime


class MessageResponse(BaseModel):
    """Acknowledgment body for write operations that return no record."""

    message: str = Field(..., examples=["Blog updated successfully"])
