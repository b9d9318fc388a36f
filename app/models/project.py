from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, JSON

from app.database import Base, generate_id, utcnow


class Project(Base):
    __tablename__ = "projects"

    id = Column(String(36), primary_key=True, default=generate_id)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    long_description = Column(Text)
    category = Column(Text, nullable=False)
    image_url = Column(Text, nullable=False)
    technologies = Column(JSON, nullable=False, default=list)
    live_url = Column(Text)
    github_url = Column(Text)
    featured = Column(Boolean, nullable=False, default=False, index=True)
    order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
