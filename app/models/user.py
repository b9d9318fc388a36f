from sqlalchemy import Column, String, Text, DateTime

from app.database import Base, generate_id, utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_id)
    username = Column(String(150), unique=True, index=True, nullable=False)
    password = Column(Text, nullable=False)  # bcrypt hash, never plain text
    role = Column(String(50), nullable=False, default="admin")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
