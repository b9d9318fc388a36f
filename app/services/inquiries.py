import logging

from sqlalchemy.orm import Session

from app.models.inquiry import Inquiry
from app.services.common import apply_fields, delete_row, get_row, storage_errors, writable

logger = logging.getLogger(__name__)


def get_all_inquiries(db: Session) -> list[Inquiry]:
    """Newest inquiries first."""
    with storage_errors(db, "fetch inquiries"):
        return db.query(Inquiry).order_by(Inquiry.created_at.desc()).all()


def get_inquiry_by_id(db: Session, inquiry_id: str) -> Inquiry | None:
    return get_row(db, Inquiry, inquiry_id, "fetch inquiry")


def create_inquiry(db: Session, fields: dict) -> Inquiry:
    # Every inquiry starts as "new", callers can't pick a status up front
    fields = {k: v for k, v in writable(fields).items() if k != "status"}
    inquiry = Inquiry(**fields, status="new")
    with storage_errors(db, "create inquiry"):
        db.add(inquiry)
        db.commit()
        db.refresh(inquiry)
    logger.info("created inquiry id=%s service=%s", inquiry.id, inquiry.service)
    return inquiry


def update_inquiry_status(db: Session, inquiry_id: str, status: str) -> Inquiry | None:
    with storage_errors(db, "update inquiry status"):
        inquiry = db.query(Inquiry).filter(Inquiry.id == inquiry_id).first()
        if not inquiry:
            return None
        # Inquiries have no updated_at column
        apply_fields(inquiry, {"status": status}, touch=False)
        db.commit()
        db.refresh(inquiry)
    logger.info("inquiry id=%s status=%s", inquiry_id, status)
    return inquiry


def delete_inquiry(db: Session, inquiry_id: str) -> bool:
    return delete_row(db, Inquiry, inquiry_id, "delete inquiry")
