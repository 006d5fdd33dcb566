"""
Common schema definitions for shared functionality across the API.

This module provides the camelCase base model and the response envelopes
every action returns.
"""

from typing import Generic, List, TypeVar

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

# Generic type for enveloped payloads
T = TypeVar("T")


def not_null(value):
    """Reject an explicit null; optional fields must be omitted instead."""
    if value is None:
        raise ValueError("null is not allowed, omit the field instead")
    return value


class CamelModel(BaseModel):
    """
    Base model exposing snake_case attributes as camelCase JSON keys.

    Both spellings are accepted on input.
    """

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class ListData(CamelModel, Generic[T]):
    """Unpaginated list payload."""

    items: List[T] = Field(..., description="All matching items")
    total: int = Field(..., ge=0, description="Number of items returned")


class ActionResponse(CamelModel, Generic[T]):
    """
    Success envelope returned by every action that yields data.

    Errors never use this envelope; they are rendered by the exception
    handlers in ``slidedeck.core.exceptions``.
    """

    success: bool = True
    data: T

    class Config:
        json_schema_extra = {
            "example": {"success": True, "data": {"items": [], "total": 0}}
        }


class ActionAck(CamelModel):
    """Success envelope for actions without a payload."""

    success: bool = True
