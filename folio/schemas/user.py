from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from folio.schemas.base import APIModel


class UserIdentity(BaseModel):
    """
    Principal as asserted by the identity provider.
    """
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None


class User(APIModel):
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime
