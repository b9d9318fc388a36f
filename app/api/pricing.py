import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.api.common import CamelModel, PartialModel, UTCDateTime
from app.database import get_db
from app.errors import StorageError
from app.services import pricing as storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pricing", tags=["pricing"])


class PricingPlanCreate(CamelModel):
    name: str
    description: str
    price: int
    currency: str = "IDR"
    duration: str
    features: List[str]
    popular: bool = False
    order: int = 0
    active: bool = True


class PricingPlanUpdate(PartialModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[int] = None
    currency: Optional[str] = None
    duration: Optional[str] = None
    features: Optional[List[str]] = None
    popular: Optional[bool] = None
    order: Optional[int] = None
    active: Optional[bool] = None


class PricingPlanResponse(CamelModel):
    id: str
    name: str
    description: str
    price: int
    currency: str
    duration: str
    features: List[str]
    popular: bool
    order: int
    active: bool
    created_at: UTCDateTime
    updated_at: UTCDateTime


@router.get("", response_model=List[PricingPlanResponse])
def get_pricing_plans(active: bool = False, db: Session = Depends(get_db)):
    """Highest `order` first. `?active=true` hides retired plans"""
    try:
        return storage.get_all_pricing_plans(db, active_only=active)
    except StorageError:
        logger.exception("Error in get_pricing_plans")
        raise HTTPException(status_code=500, detail="Failed to fetch pricing plans")


@router.get("/{plan_id}", response_model=PricingPlanResponse)
def get_pricing_plan(plan_id: str, db: Session = Depends(get_db)):
    try:
        plan = storage.get_pricing_plan_by_id(db, plan_id)
    except StorageError:
        logger.exception("Error in get_pricing_plan")
        raise HTTPException(status_code=500, detail="Failed to fetch pricing plan")

    if not plan:
        raise HTTPException(status_code=404, detail="Pricing plan not found")
    return plan


@router.post("", response_model=PricingPlanResponse, status_code=status.HTTP_201_CREATED)
def create_pricing_plan(data: PricingPlanCreate, db: Session = Depends(get_db)):
    try:
        return storage.create_pricing_plan(db, data.model_dump())
    except StorageError:
        logger.exception("Error in create_pricing_plan")
        raise HTTPException(status_code=500, detail="Failed to create pricing plan")


@router.put("/{plan_id}", response_model=PricingPlanResponse)
def update_pricing_plan(plan_id: str, data: PricingPlanUpdate, db: Session = Depends(get_db)):
    try:
        plan = storage.update_pricing_plan(db, plan_id, data.changes())
    except StorageError:
        logger.exception("Error in update_pricing_plan")
        raise HTTPException(status_code=500, detail="Failed to update pricing plan")

    if not plan:
        raise HTTPException(status_code=404, detail="Pricing plan not found")
    return plan


@router.delete("/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pricing_plan(plan_id: str, db: Session = Depends(get_db)):
    try:
        deleted = storage.delete_pricing_plan(db, plan_id)
    except StorageError:
        logger.exception("Error in delete_pricing_plan")
        raise HTTPException(status_code=500, detail="Failed to delete pricing plan")

    if not deleted:
        raise HTTPException(status_code=404, detail="Pricing plan not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
