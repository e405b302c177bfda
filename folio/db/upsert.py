from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from folio.core.exceptions import StorageError


def dialect_insert(db: Session, table):
    """
    Dialect-specific INSERT that supports ON CONFLICT DO UPDATE.
    """
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        return postgresql.insert(table)
    if dialect == "sqlite":
        return sqlite.insert(table)
    raise StorageError(f"Atomic upsert is not supported on dialect {dialect!r}")
