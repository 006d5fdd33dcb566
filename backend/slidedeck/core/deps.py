"""
Common dependencies for FastAPI endpoints.
"""
from typing import Generator, Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from slidedeck.core.exceptions import NotFoundError, UnauthorizedError
from slidedeck.db.session import SessionLocal
from slidedeck.models.presentation import Presentation
from slidedeck.models.user import User
from slidedeck.services.auth import decode_access_token, get_user_by_id

# HTTP Bearer token security scheme. Missing credentials are reported as
# UNAUTHORIZED by get_current_user rather than by the scheme itself.
security = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency.

    Yields a database session and ensures it's closed after the request.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    """
    Get the current authenticated user from JWT token.

    Args:
        credentials: Bearer token from Authorization header
        db: Database session

    Returns:
        Authenticated User object

    Raises:
        UnauthorizedError: If the token is missing or invalid, or the user is gone
    """
    if credentials is None:
        raise UnauthorizedError()

    token_data = decode_access_token(credentials.credentials)
    if token_data is None or token_data.user_id is None:
        raise UnauthorizedError("認証情報が無効です")

    user = get_user_by_id(db, token_data.user_id)
    if user is None:
        raise UnauthorizedError("認証情報が無効です")

    return user


def get_owned_presentation(
    db: Session,
    presentation_id: str,
    user_id: str,
    lock: bool = False,
) -> Presentation:
    """
    Fetch a presentation owned by the given user.

    A presentation that exists but belongs to someone else is reported exactly
    like one that does not exist.

    Args:
        db: Database session
        presentation_id: Presentation to look up
        user_id: Expected owner
        lock: Take a row lock (SELECT ... FOR UPDATE) for the rest of the transaction

    Raises:
        NotFoundError: If no such presentation is owned by the user
    """
    query = db.query(Presentation).filter(
        Presentation.id == presentation_id,
        Presentation.user_id == user_id,
    )
    if lock:
        query = query.with_for_update()

    presentation = query.first()
    if not presentation:
        raise NotFoundError("プレゼンテーションが見つかりません")

    return presentation
