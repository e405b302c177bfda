import logging
from typing import Optional

from sqlalchemy.orm import Session

from folio.crud import crud_author
from folio.models.blog import AuthorProfile
from folio.schemas.author import AuthorProfileUpsert

logger = logging.getLogger(__name__)


class ProfileService:
    """
    The author's public profile. There is at most one.
    """

    def __init__(self, db: Session):
        self.db = db

    def get(self) -> Optional[AuthorProfile]:
        return crud_author.get_author_profile(self.db)

    def upsert(self, profile_in: AuthorProfileUpsert, user_id: Optional[str] = None) -> AuthorProfile:
        values = profile_in.model_dump(exclude_unset=True)
        if user_id is not None:
            values["user_id"] = user_id
        profile = crud_author.upsert_author_profile(self.db, values)
        logger.info("Author profile upserted", extra={"user_id": user_id})
        return profile
