from datetime import datetime
from typing import List, Optional

from pydantic import Field, StrictBool, field_validator, model_validator

from folio.schemas.base import APIModel
from folio.utils.content import SLUG_PATTERN

# Columns that are NOT NULL; an explicit null in a patch is rejected.
_NON_NULLABLE = ("title", "slug", "content", "published", "tags")


def _require_text(value: Optional[str]) -> Optional[str]:
    if value is not None and not value.strip():
        raise ValueError("must not be blank")
    return value


class PostBase(APIModel):
    """
    Propiedades compartidas de un post.
    """
    title: str = Field(min_length=1, max_length=255)
    slug: str = Field(min_length=1, max_length=255, pattern=SLUG_PATTERN)
    excerpt: Optional[str] = None
    content: str = Field(min_length=1)
    featured_image_url: Optional[str] = None
    published: bool = False
    tags: List[str] = []
    meta_title: Optional[str] = Field(default=None, max_length=70)
    meta_description: Optional[str] = Field(default=None, max_length=160)

    check_text = field_validator("title", "content")(_require_text)


class PostCreate(PostBase):
    """
    Body for creating a post. readingTime and publishedAt are derived, never accepted.
    """
    pass


class PostUpdate(APIModel):
    """
    Partial update: only the keys present in the request are applied.
    """
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    slug: Optional[str] = Field(default=None, min_length=1, max_length=255, pattern=SLUG_PATTERN)
    excerpt: Optional[str] = None
    content: Optional[str] = Field(default=None, min_length=1)
    featured_image_url: Optional[str] = None
    published: Optional[bool] = None
    tags: Optional[List[str]] = None
    meta_title: Optional[str] = Field(default=None, max_length=70)
    meta_description: Optional[str] = Field(default=None, max_length=160)

    check_text = field_validator("title", "content")(_require_text)

    @model_validator(mode="after")
    def _reject_null_required(self):
        for name in _NON_NULLABLE:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} may not be null")
        return self


class PostPublish(APIModel):
    """
    Body of the publish toggle.
    """
    published: StrictBool


class Post(PostBase):
    """
    Post as returned by the API.
    """
    id: str
    author_id: Optional[str] = None
    reading_time: str
    created_at: datetime
    updated_at: datetime
    published_at: Optional[datetime] = None
