import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import utcnow
from app.errors import StorageError

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(db: Session, action: str):
    """
    Roll back and re-raise any SQLAlchemy failure as a StorageError.

    Usage:
        with storage_errors(db, "create project"):
            db.add(project)
            db.commit()
    """
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageError(f"Failed to {action}") from e


# Assigned by the server, never taken from a caller
SERVER_FIELDS = frozenset({"id", "created_at", "updated_at", "singleton"})


def writable(fields: dict) -> dict:
    return {k: v for k, v in fields.items() if k not in SERVER_FIELDS}


def apply_fields(row, fields: dict, touch: bool = True):
    """Assign only the supplied keys onto `row`. Omitted fields keep their stored values."""
    for key, value in writable(fields).items():
        setattr(row, key, value)
    if touch:
        row.updated_at = utcnow()
    return row


def delete_row(db: Session, model, row_id: str, action: str) -> bool:
    with storage_errors(db, action):
        row = db.query(model).filter(model.id == row_id).first()
        if not row:
            return False
        db.delete(row)
        db.commit()
    logger.info("deleted %s id=%s", model.__tablename__, row_id)
    return True


def get_row(db: Session, model, row_id: str, action: str):
    with storage_errors(db, action):
        return db.query(model).filter(model.id == row_id).first()
