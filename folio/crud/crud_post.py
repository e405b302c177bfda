from typing import Any, Dict, List, Optional

from sqlalchemy import desc
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from folio.core.exceptions import ConflictError, StorageError
from folio.crud.base import commit
from folio.models.blog import BlogPost


def get_post(db: Session, post_id: str) -> Optional[BlogPost]:
    """
    Obtiene un post por su ID.
    """
    return db.query(BlogPost).filter(BlogPost.id == post_id).first()


def get_post_by_slug(db: Session, slug: str) -> Optional[BlogPost]:
    """
    Obtiene un post por su slug.
    """
    return db.query(BlogPost).filter(BlogPost.slug == slug).first()


def get_posts(db: Session) -> List[BlogPost]:
    """
    Every post, drafts included, newest first.
    """
    return db.query(BlogPost).order_by(desc(BlogPost.created_at)).all()


def get_published_posts(db: Session, limit: Optional[int] = None) -> List[BlogPost]:
    """
    Published posts ordered by publish date, newest first; rows without a
    publish date sort last.
    """
    query = (
        db.query(BlogPost)
        .filter(BlogPost.published.is_(True))
        .order_by(BlogPost.published_at.desc().nullslast(), desc(BlogPost.created_at))
    )
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def _commit_post(db: Session, post_id: Optional[str], slug: str, operation: str) -> None:
    try:
        commit(db, operation)
    except IntegrityError as exc:
        # Another writer may have taken the slug between our check and the write.
        holder = get_post_by_slug(db, slug)
        if holder is not None and holder.id != post_id:
            raise ConflictError("A post with this slug already exists") from exc
        raise StorageError(f"Integrity failure during {operation}") from exc


def create_post(db: Session, values: Dict[str, Any]) -> BlogPost:
    """
    Inserts a post with the given column values.
    """
    db_post = BlogPost(**values)
    db.add(db_post)
    _commit_post(db, None, values["slug"], "create_post")
    db.refresh(db_post)
    return db_post


def update_post(db: Session, db_post: BlogPost, values: Dict[str, Any]) -> BlogPost:
    """
    Writes the given column values onto an existing post.
    """
    for field, value in values.items():
        setattr(db_post, field, value)
    post_id, slug = db_post.id, values.get("slug", db_post.slug)
    db.add(db_post)
    _commit_post(db, post_id, slug, "update_post")
    db.refresh(db_post)
    return db_post


def delete_post(db: Session, post_id: str) -> int:
    """
    Hard-deletes a post by id and returns the number of rows removed.
    """
    deleted = db.query(BlogPost).filter(BlogPost.id == post_id).delete()
    commit(db, "delete_post")
    return deleted
