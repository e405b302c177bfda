from datetime import datetime
from typing import Optional

from pydantic import Field

from folio.schemas.base import APIModel


class AuthorProfileUpsert(APIModel):
    """
    Body of PUT /api/author. Fields left out keep their stored value.
    """
    display_name: str = Field(min_length=1, max_length=255)
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    location: Optional[str] = Field(default=None, max_length=255)
    website: Optional[str] = None
    twitter: Optional[str] = Field(default=None, max_length=255)
    linkedin: Optional[str] = Field(default=None, max_length=255)
    github: Optional[str] = Field(default=None, max_length=255)


class AuthorProfile(AuthorProfileUpsert):
    id: str
    user_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime
