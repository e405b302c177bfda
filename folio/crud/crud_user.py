from typing import Optional

from sqlalchemy.orm import Session

from folio.crud.base import commit
from folio.db.upsert import dialect_insert
from folio.models.blog import User
from folio.schemas.user import UserIdentity
from folio.utils.dates import utcnow


def get_user(db: Session, user_id: str) -> Optional[User]:
    """
    Obtiene un usuario por su ID.
    """
    return db.query(User).filter(User.id == user_id).first()


def upsert_user(db: Session, identity: UserIdentity) -> User:
    """
    Mirror an identity-provider principal: insert, or overwrite on id conflict.
    """
    now = utcnow()
    values = identity.model_dump()
    stmt = dialect_insert(db, User.__table__).values(**values, created_at=now, updated_at=now)
    stmt = stmt.on_conflict_do_update(
        index_elements=[User.__table__.c.id],
        set_={**{k: v for k, v in values.items() if k != "id"}, "updated_at": now},
    )
    db.execute(stmt)
    commit(db, "upsert_user")
    user = get_user(db, identity.id)
    db.refresh(user)
    return user
