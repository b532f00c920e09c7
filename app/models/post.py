"""Post model."""
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from app.db.session import Base


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False, default="")
    content = Column(Text, nullable=False, default="")
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    timestamp = Column(DateTime, default=datetime.utcnow, index=True)
    likes = Column(Integer, nullable=False, default=0)

    user = relationship("User", back_populates="posts")

    @property
    def username(self) -> str | None:
        """Author's display name, resolved from the loaded author row."""
        return self.user.username if self.user else None
