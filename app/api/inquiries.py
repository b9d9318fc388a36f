import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.api.common import CamelModel, UTCDateTime
from app.database import get_db
from app.errors import StorageError
from app.services import inquiries as storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/inquiries", tags=["inquiries"])


class InquiryCreate(CamelModel):
    name: str
    email: str
    phone: Optional[str] = None
    company: Optional[str] = None
    service: str
    budget: Optional[str] = None
    message: str


class InquiryStatusUpdate(BaseModel):
    status: Optional[str] = None


class InquiryResponse(CamelModel):
    id: str
    name: str
    email: str
    phone: Optional[str] = None
    company: Optional[str] = None
    service: str
    budget: Optional[str] = None
    message: str
    status: str
    created_at: UTCDateTime


@router.get("", response_model=List[InquiryResponse])
def get_inquiries(db: Session = Depends(get_db)):
    try:
        return storage.get_all_inquiries(db)
    except StorageError:
        logger.exception("Error in get_inquiries")
        raise HTTPException(status_code=500, detail="Failed to fetch inquiries")


@router.get("/{inquiry_id}", response_model=InquiryResponse)
def get_inquiry(inquiry_id: str, db: Session = Depends(get_db)):
    try:
        inquiry = storage.get_inquiry_by_id(db, inquiry_id)
    except StorageError:
        logger.exception("Error in get_inquiry")
        raise HTTPException(status_code=500, detail="Failed to fetch inquiry")

    if not inquiry:
        raise HTTPException(status_code=404, detail="Inquiry not found")
    return inquiry


@router.post("", response_model=InquiryResponse, status_code=status.HTTP_201_CREATED)
def create_inquiry(data: InquiryCreate, db: Session = Depends(get_db)):
    """Public contact form. Status always starts as "new"."""
    try:
        return storage.create_inquiry(db, data.model_dump())
    except StorageError:
        logger.exception("Error in create_inquiry")
        raise HTTPException(status_code=500, detail="Failed to create inquiry")


@router.patch("/{inquiry_id}/status", response_model=InquiryResponse)
def update_inquiry_status(inquiry_id: str, data: InquiryStatusUpdate, db: Session = Depends(get_db)):
    if not data.status:
        raise HTTPException(status_code=400, detail="Status is required")

    try:
        inquiry = storage.update_inquiry_status(db, inquiry_id, data.status)
    except StorageError:
        logger.exception("Error in update_inquiry_status")
        raise HTTPException(status_code=500, detail="Failed to update inquiry status")

    if not inquiry:
        raise HTTPException(status_code=404, detail="Inquiry not found")
    return inquiry


@router.delete("/{inquiry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_inquiry(inquiry_id: str, db: Session = Depends(get_db)):
    try:
        deleted = storage.delete_inquiry(db, inquiry_id)
    except StorageError:
        logger.exception("Error in delete_inquiry")
        raise HTTPException(status_code=500, detail="Failed to delete inquiry")

    if not deleted:
        raise HTTPException(status_code=404, detail="Inquiry not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
