"""User model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from blog_api.database import Base
from blog_api.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and post ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)

    # Relationships
    posts = relationship("Post", back_populates="author", cascade="all, delete-orphan")
