from typing import Optional

from pydantic import BaseModel


class TokenData(BaseModel):
    """Claims read from a bearer token issued by the sign-in service."""

    user_id: str
    username: Optional[str] = None


class UserOut(BaseModel):
    """ユーザー情報レスポンス"""

    id: str
    username: str
    display_name: str

    class Config:
        from_attributes = True
