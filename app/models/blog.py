from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, JSON

from app.database import Base, generate_id, utcnow


class BlogPost(Base):
    __tablename__ = "blog_posts"

    id = Column(String(36), primary_key=True, default=generate_id)
    title = Column(Text, nullable=False)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    excerpt = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    cover_image = Column(Text, nullable=False)
    author = Column(String(100), nullable=False, default="Team")
    category = Column(String(50), nullable=False)
    tags = Column(JSON, nullable=False, default=list)
    published = Column(Boolean, nullable=False, default=True, index=True)
    read_time = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
