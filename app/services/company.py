import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.company import CompanyInfo
from app.errors import StorageError
from app.services.common import apply_fields, storage_errors, writable

logger = logging.getLogger(__name__)


def get_company_info(db: Session) -> CompanyInfo | None:
    with storage_errors(db, "fetch company info"):
        return db.query(CompanyInfo).first()


def _upsert(db: Session, fields: dict) -> CompanyInfo:
    # Row lock on dialects that support it (no-op on SQLite)
    info = db.query(CompanyInfo).with_for_update().first()
    if info is None:
        # First write: the caller has to supply every required field
        info = CompanyInfo(**writable(fields), singleton=True)
        db.add(info)
        created = True
    else:
        apply_fields(info, fields)
        created = False
    db.commit()
    db.refresh(info)
    logger.info("%s company info id=%s", "created" if created else "updated", info.id)
    return info


def update_company_info(db: Session, fields: dict) -> CompanyInfo:
    """
    Update the single company info row, creating it if it doesn't exist yet.

    Two concurrent first writes both see an empty table; the unique
    `singleton` column makes the second insert fail, and that caller retries
    once, which then finds the row and updates it.
    """
    try:
        return _upsert(db, fields)
    except IntegrityError as e:
        db.rollback()
        # No row means the insert itself was bad (e.g. a missing required field)
        with storage_errors(db, "update company info"):
            exists = db.query(CompanyInfo).first() is not None
        if not exists:
            raise StorageError("Failed to update company info") from e
        logger.warning("company info insert conflicted, retrying as update")
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageError("Failed to update company info") from e

    with storage_errors(db, "update company info"):
        return _upsert(db, fields)
