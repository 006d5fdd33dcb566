"""
Presentation model - a slide deck owned by a single user.
"""
import uuid
from sqlalchemy import Column, String, Text, Integer, DateTime, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from slidedeck.db.base import Base


class Presentation(Base):
    """
    A deck owned by exactly one user.

    slide_count is a cached value for quick listing. It is bumped when a slide
    is created and is not recomputed by any other mutation.
    """
    __tablename__ = "presentations"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    theme = Column(String(50), nullable=True)  # e.g. "minimal", "corporate", "playful"
    aspect_ratio = Column(String(20), nullable=True)  # e.g. "16:9", "4:3"
    slide_count = Column(Integer, nullable=True, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    owner = relationship("User", back_populates="presentations")
    slides = relationship(
        "Slide",
        back_populates="presentation",
        cascade="all, delete-orphan",
    )
