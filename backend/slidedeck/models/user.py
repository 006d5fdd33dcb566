import uuid
from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from slidedeck.db.base import Base


class User(Base):
    """
    Local record of an account managed by the sign-in service.

    Rows are keyed by the token subject; credentials are not stored here.
    """
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(String, unique=True, nullable=False)
    display_name = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    presentations = relationship("Presentation", back_populates="owner")
