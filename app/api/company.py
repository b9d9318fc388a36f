import logging
from typing import ClassVar, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic.alias_generators import to_camel
from sqlalchemy.orm import Session

from app.api.common import CamelModel, PartialModel, UTCDateTime
from app.database import get_db
from app.errors import StorageError
from app.services import company as storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/company", tags=["company"])


class CompanyInfoUpdate(PartialModel):
    """
    Partial update of the company profile.

    The first PUT creates the row, so it has to carry every required field;
    the database rejects an incomplete first write.
    """

    nullable_fields: ClassVar[frozenset] = frozenset({"logo_url"})

    company_name: Optional[str] = None
    tagline: Optional[str] = None
    description: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    logo_url: Optional[str] = None
    social_media: Optional[Dict[str, Optional[str]]] = None
    working_hours: Optional[str] = None
    founded_year: Optional[int] = None
    team_size: Optional[str] = None
    projects_completed: Optional[int] = None
    years_experience: Optional[int] = None


# Everything except the nullable logo_url
REQUIRED_ON_CREATE = [
    name for name in CompanyInfoUpdate.model_fields if name not in CompanyInfoUpdate.nullable_fields
]


class CompanyInfoResponse(CamelModel):
    id: str
    company_name: str
    tagline: str
    description: str
    email: str
    phone: str
    address: str
    logo_url: Optional[str] = None
    social_media: Dict[str, Optional[str]]
    working_hours: str
    founded_year: int
    team_size: str
    projects_completed: int
    years_experience: int
    updated_at: UTCDateTime


@router.get("", response_model=CompanyInfoResponse)
def get_company_info(db: Session = Depends(get_db)):
    try:
        info = storage.get_company_info(db)
    except StorageError:
        logger.exception("Error in get_company_info")
        raise HTTPException(status_code=500, detail="Failed to fetch company info")

    if not info:
        raise HTTPException(status_code=404, detail="Company info not found")
    return info


@router.put("", response_model=CompanyInfoResponse)
def update_company_info(data: CompanyInfoUpdate, db: Session = Depends(get_db)):
    fields = data.changes()
    try:
        if storage.get_company_info(db) is None:
            missing = [name for name in REQUIRED_ON_CREATE if fields.get(name) is None]
            if missing:
                raise HTTPException(
                    status_code=400,
                    detail="Company info does not exist yet, missing: " + ", ".join(to_camel(name) for name in missing),
                )
        return storage.update_company_info(db, fields)
    except StorageError:
        logger.exception("Error in update_company_info")
        raise HTTPException(status_code=500, detail="Failed to update company info")
