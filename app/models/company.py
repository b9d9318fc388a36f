from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, JSON

from app.database import Base, generate_id, utcnow


class CompanyInfo(Base):
    __tablename__ = "company_info"

    id = Column(String(36), primary_key=True, default=generate_id)
    # Always True. The unique constraint keeps the table at one row
    singleton = Column(Boolean, nullable=False, unique=True, default=True)

    company_name = Column(Text, nullable=False)
    tagline = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    address = Column(Text, nullable=False)
    logo_url = Column(Text)
    social_media = Column(JSON, nullable=False, default=dict)  # {"github": "https://...", ...}
    working_hours = Column(Text, nullable=False)
    founded_year = Column(Integer, nullable=False)
    team_size = Column(String(50), nullable=False)  # free text like "10-20"
    projects_completed = Column(Integer, nullable=False)
    years_experience = Column(Integer, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
