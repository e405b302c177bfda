from datetime import datetime
from typing import Optional

from pydantic import Field, computed_field

from folio.schemas.base import APIModel


class ImageCreate(APIModel):
    filename: str = Field(min_length=1)
    mime_type: str = Field(min_length=1)
    data: str = Field(min_length=1)


class Image(APIModel):
    """
    Image metadata; the bytes are served by GET /api/images/{id}.
    """
    id: str
    filename: str
    mime_type: str
    uploaded_by: Optional[str] = None
    created_at: datetime

    @computed_field
    @property
    def url(self) -> str:
        return f"/api/images/{self.id}"
