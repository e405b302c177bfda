import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from folio.core.exceptions import StorageError

logger = logging.getLogger(__name__)


def commit(db: Session, operation: str) -> None:
    """
    Commit the unit of work, rolling back on failure.

    IntegrityError is re-raised untouched so callers can translate constraint
    violations; every other database error becomes a StorageError.
    """
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception(f"Storage failure during {operation}")
        raise StorageError(f"Storage failure during {operation}") from exc
