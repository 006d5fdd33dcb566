"""
Bearer token handling.

Accounts and sign-in live in a separate service that shares the signing key
with this API. Here tokens are only decoded and mapped to a stored user;
create_access_token exists for that service's contract and for tests.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from sqlalchemy.orm import Session

from slidedeck.core.config import settings
from slidedeck.models.user import User
from slidedeck.schemas.auth import TokenData


def create_access_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    """Sign a token whose subject is the user's id."""
    lifetime = expires_delta or timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)
    claims = {
        "sub": user.id,
        "username": user.username,
        "exp": datetime.now(timezone.utc) + lifetime,
    }
    return jwt.encode(claims, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[TokenData]:
    """Return the token's claims, or None when it is malformed, forged or expired."""
    try:
        claims = jwt.decode(
            token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM]
        )
    except JWTError:
        return None

    if not claims.get("sub"):
        return None
    return TokenData(user_id=claims["sub"], username=claims.get("username"))


def get_user_by_id(db: Session, user_id: str) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()
