"""
Publication rules for blog posts.

The crud layer only persists rows. This service decides every derived field:
reading time, the first-publish stamp and the update timestamp.
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from folio.core.exceptions import ConflictError, NotFoundError
from folio.crud import crud_post
from folio.models.blog import BlogPost
from folio.schemas.post import PostCreate, PostUpdate
from folio.utils.content import calculate_reading_time
from folio.utils.dates import utcnow

logger = logging.getLogger(__name__)


class PostService:
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[BlogPost]:
        return crud_post.get_posts(self.db)

    def list_published(self, limit: Optional[int] = None) -> List[BlogPost]:
        return crud_post.get_published_posts(self.db, limit=limit)

    def get_by_id(self, post_id: str) -> BlogPost:
        post = crud_post.get_post(self.db, post_id)
        if post is None:
            raise NotFoundError("Post not found")
        return post

    def get_by_slug(self, slug: str, published_only: bool = True) -> BlogPost:
        """
        Look a post up by slug. Drafts are reported as missing unless
        `published_only` is False, so slugs cannot be probed for drafts.
        """
        post = crud_post.get_post_by_slug(self.db, slug)
        if post is None or (published_only and not post.published):
            raise NotFoundError("Post not found")
        return post

    def create(self, post_in: PostCreate, author_id: Optional[str] = None) -> BlogPost:
        if crud_post.get_post_by_slug(self.db, post_in.slug) is not None:
            raise ConflictError("A post with this slug already exists")

        now = utcnow()
        values = post_in.model_dump()
        values.update(
            author_id=author_id,
            reading_time=calculate_reading_time(post_in.content),
            created_at=now,
            updated_at=now,
            published_at=now if post_in.published else None,
        )
        post = crud_post.create_post(self.db, values)
        logger.info(
            f"Post created: {post.slug}",
            extra={"post_id": post.id, "user_id": author_id},
        )
        return post

    def update(self, post_id: str, patch: PostUpdate) -> BlogPost:
        """
        Apply only the fields present in `patch`.

        publishedAt is stamped the first time the post goes live and is never
        moved by later unpublish/republish cycles.
        """
        post = self.get_by_id(post_id)
        values = patch.model_dump(exclude_unset=True)

        if "slug" in values and values["slug"] != post.slug:
            if crud_post.get_post_by_slug(self.db, values["slug"]) is not None:
                raise ConflictError("A post with this slug already exists")

        if "content" in values:
            values["reading_time"] = calculate_reading_time(values["content"])

        now = utcnow()
        first_publish = (
            values.get("published") is True
            and not post.published
            and post.published_at is None
        )
        if first_publish:
            values["published_at"] = now
        values["updated_at"] = now

        post = crud_post.update_post(self.db, post, values)
        if first_publish:
            logger.info(f"Post published for the first time: {post.slug}", extra={"post_id": post.id})
        return post

    def set_published(self, post_id: str, published: bool) -> BlogPost:
        return self.update(post_id, PostUpdate(published=published))

    def delete(self, post_id: str) -> None:
        """
        Hard delete. Unknown ids are not an error.
        """
        deleted = crud_post.delete_post(self.db, post_id)
        if deleted:
            logger.info("Post deleted", extra={"post_id": post_id})
