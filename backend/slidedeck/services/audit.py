"""
Audit trail for presentation and slide mutations.

Each successful write action records who changed what, from where, in the
audit_logs table.
"""
import logging
from typing import Optional
import json

from fastapi import Request
from sqlalchemy.orm import Session

from slidedeck.models.audit_log import AuditLog

logger = logging.getLogger(__name__)


class AuditAction:
    """Constants for audit actions."""

    # Presentations
    CREATE_PRESENTATION = "create_presentation"
    UPDATE_PRESENTATION = "update_presentation"

    # Slides
    CREATE_SLIDE = "create_slide"
    UPDATE_SLIDE = "update_slide"
    DELETE_SLIDE = "delete_slide"


class TargetType:
    """Constants for audit target types."""

    PRESENTATION = "presentation"
    SLIDE = "slide"


def get_client_info(request: Request) -> tuple[Optional[str], Optional[str]]:
    """
    Return (ip_address, user_agent) for a request.

    Proxy headers win over the socket peer: the first X-Forwarded-For hop,
    then X-Real-IP.
    """
    headers = request.headers
    forwarded = headers.get("X-Forwarded-For", "").split(",")[0].strip()
    ip_address = forwarded or headers.get("X-Real-IP", "").strip() or None
    if ip_address is None and request.client:
        ip_address = request.client.host

    return ip_address, headers.get("User-Agent")


def log_action(
    db: Session,
    action: str,
    user_id: Optional[str] = None,
    target_type: Optional[str] = None,
    target_id: Optional[str] = None,
    details: Optional[dict] = None,
    ip_address: Optional[str] = None,
    user_agent: Optional[str] = None,
) -> AuditLog:
    """
    Persist one audit entry and commit it.

    Call after the audited change has been committed so a failed action
    leaves no entry behind.
    """
    entry = AuditLog(
        user_id=user_id,
        action=action,
        target_type=target_type,
        target_id=target_id,
        details=json.dumps(details, ensure_ascii=False) if details else None,
        ip_address=ip_address,
        user_agent=user_agent,
    )
    db.add(entry)
    db.commit()
    db.refresh(entry)
    logger.debug(f"Audit: {action} {target_type}={target_id} by {user_id}")
    return entry
