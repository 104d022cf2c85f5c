"""
Block action payloads.
"""
from pydantic import Field, field_validator, model_validator
from typing import Optional, List
from datetime import datetime

from .common import CamelModel, as_utc, require_any_field


class BlockCreate(CamelModel):
    """Create a content block inside an issue"""
    issue_id: str = Field(..., min_length=1)
    order_index: Optional[int] = Field(None, description="Defaults to 1; never renumbered")
    block_type: Optional[str] = Field(None, description="header, text, cta, image, quote, ...")
    heading: Optional[str] = None
    body: Optional[str] = None
    cta_label: Optional[str] = None
    cta_url: Optional[str] = None
    image_url: Optional[str] = None
    meta_json: Optional[str] = Field(None, description="Extra block config, stored as given")


BLOCK_MUTABLE_FIELDS = frozenset({
    "order_index",
    "block_type",
    "heading",
    "body",
    "cta_label",
    "cta_url",
    "image_url",
    "meta_json",
})


class BlockUpdate(CamelModel):
    """Patch a block; issue_id pins the parent it must live under"""
    id: str = Field(..., min_length=1)
    issue_id: str = Field(..., min_length=1)
    order_index: int = None
    block_type: Optional[str] = None
    heading: Optional[str] = None
    body: Optional[str] = None
    cta_label: Optional[str] = None
    cta_url: Optional[str] = None
    image_url: Optional[str] = None
    meta_json: Optional[str] = None

    @model_validator(mode="after")
    def check_has_changes(self):
        return require_any_field(self, BLOCK_MUTABLE_FIELDS)


class BlockLookup(CamelModel):
    id: str = Field(..., min_length=1)
    issue_id: str = Field(..., min_length=1)


class BlockListRequest(CamelModel):
    issue_id: str = Field(..., min_length=1)


class BlockResponse(CamelModel):
    """Response schema for a block"""
    id: str
    issue_id: str
    order_index: int
    block_type: Optional[str] = None
    heading: Optional[str] = None
    body: Optional[str] = None
    cta_label: Optional[str] = None
    cta_url: Optional[str] = None
    image_url: Optional[str] = None
    meta_json: Optional[str] = None
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def created_at_in_utc(cls, value):
        return as_utc(value)


class BlockData(CamelModel):
    block: BlockResponse


class BlockEnvelope(CamelModel):
    success: bool = True
    data: BlockData


class BlockListResponse(CamelModel):
    items: List[BlockResponse]
    total: int


class BlockListEnvelope(CamelModel):
    success: bool = True
    data: BlockListResponse
