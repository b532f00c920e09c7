"""User model."""
from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from app.db.session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Uniqueness lives in the schema; a conflicting insert is the "already exists" signal
    username = Column(String(50), unique=True, nullable=False, index=True)
    member_since = Column(DateTime, default=datetime.utcnow)

    posts = relationship("Post", back_populates="user")
