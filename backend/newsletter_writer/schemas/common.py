"""
Shared schema pieces: camelCase wire names and the success envelope.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for every action payload; accepts camelCase or snake_case keys."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class SuccessResponse(BaseModel):
    """Bare acknowledgment for actions that return no data"""
    success: bool = True


def require_any_field(model: BaseModel, fields: frozenset) -> BaseModel:
    """
    Reject an update that supplies none of the mutable ``fields``.

    Counts keys the caller actually sent, so an explicit null still
    counts as a supplied value.
    """
    if not model.model_fields_set & fields:
        raise ValueError("At least one field must be provided to update.")
    return model


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Timestamps leave the API as UTC; SQLite hands them back naive."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
