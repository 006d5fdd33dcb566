"""
Health check endpoints for system status and database connectivity.
"""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from slidedeck.core.config import settings
from slidedeck.core.deps import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check():
    """
    Basic health check endpoint.

    Returns:
        Simple status message indicating the API is running
    """
    return {
        "status": "ok",
        "service": settings.PROJECT_NAME,
    }


@router.get("/db")
def database_health_check(db: Session = Depends(get_db)):
    """
    Check database connectivity.

    Returns:
        Database status and, when unreachable, the error message
    """
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning(f"Database health check failed: {e}")
        return {"status": "unhealthy", "error": str(e)}

    return {"status": "healthy"}
