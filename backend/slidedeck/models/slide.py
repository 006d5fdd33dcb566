import uuid
from sqlalchemy import Column, String, Text, Integer, DateTime, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from slidedeck.db.base import Base


class Slide(Base):
    """One ordered page within a presentation."""

    __tablename__ = "slides"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    presentation_id = Column(
        String(36),
        ForeignKey("presentations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    order_index = Column(Integer, nullable=False)  # not unique, not contiguous
    layout_type = Column(String(50), nullable=True)  # "title", "title-and-body", "two-column", ...
    title = Column(String, nullable=True)
    content = Column(Text, nullable=True)  # main body text / bullet text
    notes = Column(Text, nullable=True)  # speaker notes
    raw_data = Column(Text, nullable=True)  # JSON string for advanced layout/config
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    presentation = relationship("Presentation", back_populates="slides")
