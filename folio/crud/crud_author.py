from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from folio.crud.base import commit
from folio.db.upsert import dialect_insert
from folio.models.blog import AuthorProfile, generate_id
from folio.utils.dates import utcnow

SINGLETON_KEY = 1


def get_author_profile(db: Session) -> Optional[AuthorProfile]:
    return db.query(AuthorProfile).filter(AuthorProfile.singleton_key == SINGLETON_KEY).first()


def upsert_author_profile(db: Session, values: Dict[str, Any]) -> AuthorProfile:
    """
    Single-statement upsert of the profile row.

    Inserts the singleton when absent; otherwise only the keys in `values`
    overwrite the stored row. Two concurrent callers both land on the same row
    because the conflict target is the unique singleton_key.
    """
    now = utcnow()
    table = AuthorProfile.__table__
    stmt = dialect_insert(db, table).values(
        id=generate_id(),
        singleton_key=SINGLETON_KEY,
        created_at=now,
        updated_at=now,
        **values,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[table.c.singleton_key],
        set_={**values, "updated_at": now},
    )
    db.execute(stmt)
    commit(db, "upsert_author_profile")
    profile = get_author_profile(db)
    db.refresh(profile)
    return profile
