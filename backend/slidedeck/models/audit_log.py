"""
Audit Log model for tracking user actions.
"""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, String
from sqlalchemy.sql import func

from slidedeck.db.base import Base


class AuditLog(Base):
    __tablename__ = "audit_logs"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.id"), nullable=True)
    action = Column(
        String, nullable=False
    )  # e.g., "create_presentation", "update_slide", "delete_slide"
    target_type = Column(String, nullable=True)  # e.g., "presentation", "slide"
    target_id = Column(String, nullable=True)  # ID of the affected resource
    details = Column(String, nullable=True)  # JSON-encoded additional details
    ip_address = Column(String, nullable=True)
    user_agent = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
