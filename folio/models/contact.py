import uuid

from sqlalchemy import Boolean, Column, String, Text, TIMESTAMP, false

from folio.db.base import Base
from folio.utils.dates import utcnow


class ContactMessage(Base):
    __tablename__ = 'contact_messages'
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    subject = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    read = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow, nullable=False, index=True)
