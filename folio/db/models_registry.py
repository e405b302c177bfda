# folio/db/models_registry.py
# Imports every model so Base.metadata is complete for create_all and Alembic.

from folio.db.base import Base
from folio.models.blog import AuthorProfile, BlogPost, User
from folio.models.contact import ContactMessage
from folio.models.image import Image

__all__ = ["Base", "User", "AuthorProfile", "BlogPost", "Image", "ContactMessage"]
