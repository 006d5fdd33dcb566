from typing import Optional
from datetime import datetime

from pydantic import Field, StrictInt, field_validator, model_validator

from slidedeck.schemas.common import CamelModel, ListData, not_null


class PresentationCreate(CamelModel):
    """プレゼンテーション作成リクエスト"""
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    theme: Optional[str] = None
    aspect_ratio: Optional[str] = None

    @field_validator("description", "theme", "aspect_ratio", mode="before")
    @classmethod
    def reject_null(cls, v):
        return not_null(v)


class PresentationUpdate(CamelModel):
    """
    プレゼンテーション更新リクエスト

    Only keys present in the request body are applied; null is rejected.
    """
    id: str = Field(..., min_length=1)
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    theme: Optional[str] = None
    aspect_ratio: Optional[str] = None
    slide_count: Optional[StrictInt] = None

    @field_validator(
        "title", "description", "theme", "aspect_ratio", "slide_count", mode="before"
    )
    @classmethod
    def reject_null(cls, v):
        return not_null(v)

    @model_validator(mode="after")
    def require_one_field(self):
        if not self.changes():
            raise ValueError("At least one field must be provided to update.")
        return self

    def changes(self) -> dict:
        """Supplied mutable fields, keyed by attribute name."""
        return {
            name: getattr(self, name) for name in self.model_fields_set if name != "id"
        }


class PresentationOut(CamelModel):
    """プレゼンテーション情報レスポンス"""
    id: str
    user_id: str
    title: str
    description: Optional[str] = None
    theme: Optional[str] = None
    aspect_ratio: Optional[str] = None
    slide_count: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class PresentationData(CamelModel):
    presentation: PresentationOut


PresentationListData = ListData[PresentationOut]
