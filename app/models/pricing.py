from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, JSON

from app.database import Base, generate_id, utcnow


class PricingPlan(Base):
    __tablename__ = "pricing_plans"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Integer, nullable=False)  # whole units of `currency`, no minor units
    currency = Column(String(3), nullable=False, default="IDR")
    duration = Column(Text, nullable=False)  # e.g. "one-time", "monthly"
    features = Column(JSON, nullable=False, default=list)
    popular = Column(Boolean, nullable=False, default=False)
    order = Column(Integer, nullable=False, default=0)
    active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
