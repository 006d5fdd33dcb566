from typing import Optional
from datetime import datetime

from pydantic import Field, StrictInt, field_validator, model_validator

from slidedeck.schemas.common import CamelModel, ListData, not_null

SLIDE_FIELDS = ("order_index", "layout_type", "title", "content", "notes", "raw_data")


class SlideCreate(CamelModel):
    """スライド作成リクエスト"""
    presentation_id: str = Field(..., min_length=1)
    order_index: Optional[StrictInt] = None
    layout_type: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    notes: Optional[str] = None
    raw_data: Optional[str] = None

    @field_validator(*SLIDE_FIELDS, mode="before")
    @classmethod
    def reject_null(cls, v):
        return not_null(v)


class SlideUpdate(CamelModel):
    """
    スライド更新リクエスト

    Only keys present in the request body are applied; null is rejected.
    """
    id: str = Field(..., min_length=1)
    presentation_id: str = Field(..., min_length=1)
    order_index: Optional[StrictInt] = None
    layout_type: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    notes: Optional[str] = None
    raw_data: Optional[str] = None

    @field_validator(*SLIDE_FIELDS, mode="before")
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
            name: getattr(self, name)
            for name in self.model_fields_set
            if name in SLIDE_FIELDS
        }


class SlideRef(CamelModel):
    """スライド削除リクエスト"""
    id: str = Field(..., min_length=1)
    presentation_id: str = Field(..., min_length=1)


class SlideListRequest(CamelModel):
    """スライド一覧リクエスト"""
    presentation_id: str = Field(..., min_length=1)


class SlideOut(CamelModel):
    """スライド情報レスポンス"""
    id: str
    presentation_id: str
    order_index: int
    layout_type: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    notes: Optional[str] = None
    raw_data: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class SlideData(CamelModel):
    slide: SlideOut


SlideListData = ListData[SlideOut]
