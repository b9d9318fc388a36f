import logging

from sqlalchemy.orm import Session

from app.models.pricing import PricingPlan
from app.services.common import apply_fields, delete_row, get_row, storage_errors, writable

logger = logging.getLogger(__name__)


def get_all_pricing_plans(db: Session, active_only: bool = False) -> list[PricingPlan]:
    with storage_errors(db, "fetch pricing plans"):
        query = db.query(PricingPlan)
        if active_only:
            query = query.filter(PricingPlan.active == True)  # noqa: E712
        return query.order_by(PricingPlan.order.desc()).all()


def get_pricing_plan_by_id(db: Session, plan_id: str) -> PricingPlan | None:
    return get_row(db, PricingPlan, plan_id, "fetch pricing plan")


def create_pricing_plan(db: Session, fields: dict) -> PricingPlan:
    plan = PricingPlan(**writable(fields))
    with storage_errors(db, "create pricing plan"):
        db.add(plan)
        db.commit()
        db.refresh(plan)
    logger.info("created pricing plan id=%s", plan.id)
    return plan


def update_pricing_plan(db: Session, plan_id: str, fields: dict) -> PricingPlan | None:
    with storage_errors(db, "update pricing plan"):
        plan = db.query(PricingPlan).filter(PricingPlan.id == plan_id).first()
        if not plan:
            return None
        apply_fields(plan, fields)
        db.commit()
        db.refresh(plan)
    logger.info("updated pricing plan id=%s fields=%s", plan_id, sorted(fields))
    return plan


def delete_pricing_plan(db: Session, plan_id: str) -> bool:
    return delete_row(db, PricingPlan, plan_id, "delete pricing plan")
