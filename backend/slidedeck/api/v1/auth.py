"""
Identity endpoint for clients holding a bearer token.
"""
from fastapi import APIRouter, Depends

from slidedeck.core.deps import get_current_user
from slidedeck.models.user import User
from slidedeck.schemas.auth import UserOut

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me", response_model=UserOut)
def me(current_user: User = Depends(get_current_user)):
    """Return the user the bearer token belongs to."""
    return current_user
