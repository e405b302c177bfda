import uuid

from sqlalchemy import Column, ForeignKey, String, Text, TIMESTAMP

from folio.db.base import Base
from folio.utils.dates import utcnow


class Image(Base):
    """Uploaded image kept as base64 text. Rows are never updated."""
    __tablename__ = 'images'
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    filename = Column(String(255), nullable=False)
    mime_type = Column(String(100), nullable=False)
    data = Column(Text, nullable=False)
    uploaded_by = Column(String(255), ForeignKey('users.id', ondelete='SET NULL'), nullable=True)
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow, nullable=False, index=True)
