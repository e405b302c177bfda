# folio/models/blog.py
import uuid

from sqlalchemy import (
    JSON, Boolean, CheckConstraint, Column, ForeignKey, Integer, String, Text,
    false,
    TIMESTAMP,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from folio.db.base import Base
from folio.utils.dates import utcnow


def generate_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    """Local mirror of an identity-provider principal."""
    __tablename__ = 'users'
    id = Column(String(255), primary_key=True)
    email = Column(String(255), unique=True, nullable=True)
    first_name = Column(String(255))
    last_name = Column(String(255))
    profile_image_url = Column(String(1000))
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(TIMESTAMP(timezone=True), default=utcnow, nullable=False)
    posts = relationship("BlogPost", back_populates="author")


class AuthorProfile(Base):
    __tablename__ = 'author_profile'
    # singleton_key is pinned to 1 so the table can never hold a second row.
    __table_args__ = (
        CheckConstraint('singleton_key = 1', name='ck_author_profile_singleton'),
    )
    id = Column(String(36), primary_key=True, default=generate_id)
    singleton_key = Column(Integer, nullable=False, unique=True, default=1, server_default='1')
    user_id = Column(String(255), ForeignKey('users.id', ondelete='SET NULL'), nullable=True)
    display_name = Column(String(255), nullable=False)
    bio = Column(Text)
    avatar_url = Column(String(1000))
    location = Column(String(255))
    website = Column(String(1000))
    twitter = Column(String(255))
    linkedin = Column(String(255))
    github = Column(String(255))
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(TIMESTAMP(timezone=True), default=utcnow, nullable=False)


class BlogPost(Base):
    __tablename__ = 'blog_posts'
    id = Column(String(36), primary_key=True, default=generate_id)
    title = Column(String(255), nullable=False)
    slug = Column(String(255), unique=True, nullable=False, index=True)
    excerpt = Column(Text)
    content = Column(Text, nullable=False)
    featured_image_url = Column(String(1000))
    published = Column(Boolean, nullable=False, default=False, server_default=false())
    author_id = Column(String(255), ForeignKey('users.id', ondelete='SET NULL'), nullable=True)
    tags = Column(JSON().with_variant(JSONB, 'postgresql'), nullable=False, default=list)
    meta_title = Column(String(70))
    meta_description = Column(String(160))
    reading_time = Column(String(20), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow, nullable=False, index=True)
    updated_at = Column(TIMESTAMP(timezone=True), default=utcnow, nullable=False)
    published_at = Column(TIMESTAMP(timezone=True), nullable=True, index=True)
    author = relationship("User", back_populates="posts")
