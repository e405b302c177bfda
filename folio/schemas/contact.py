from datetime import datetime

from pydantic import EmailStr, Field

from folio.schemas.base import APIModel


class ContactMessageCreate(APIModel):
    name: str = Field(min_length=2, max_length=255)
    email: EmailStr
    subject: str = Field(min_length=5, max_length=255)
    message: str = Field(min_length=20)


class ContactMessage(ContactMessageCreate):
    id: str
    read: bool
    created_at: datetime


class ContactSubmitted(APIModel):
    message: str
    id: str
