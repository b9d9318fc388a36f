from sqlalchemy import Column, String, Text, DateTime

from app.database import Base, generate_id, utcnow


class Inquiry(Base):
    __tablename__ = "inquiries"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(Text, nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50))
    company = Column(Text)
    service = Column(Text, nullable=False)
    budget = Column(Text)
    message = Column(Text, nullable=False)
    status = Column(String(50), nullable=False, default="new")  # new, contacted, closed, ...
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
