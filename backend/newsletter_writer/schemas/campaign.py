"""
Campaign action payloads.
"""
from pydantic import Field, field_validator, model_validator
from typing import Optional, List
from datetime import datetime

from .common import CamelModel, as_utc, require_any_field


class CampaignCreate(CamelModel):
    """Create a new campaign"""
    name: str = Field(..., min_length=1, description="Campaign name, e.g. 'Weekly Dev Tips'")
    description: Optional[str] = None
    audience_description: Optional[str] = None
    sender_name: Optional[str] = None
    sender_email: Optional[str] = None
    default_language: Optional[str] = None


CAMPAIGN_MUTABLE_FIELDS = frozenset({
    "name",
    "description",
    "audience_description",
    "sender_name",
    "sender_email",
    "default_language",
})


class CampaignUpdate(CamelModel):
    """Patch an existing campaign; omitted keys are left untouched"""
    id: str = Field(..., min_length=1)
    # Absent means "keep"; null is rejected because the column is required
    name: str = Field(None, min_length=1)
    description: Optional[str] = None
    audience_description: Optional[str] = None
    sender_name: Optional[str] = None
    sender_email: Optional[str] = None
    default_language: Optional[str] = None

    @model_validator(mode="after")
    def check_has_changes(self):
        return require_any_field(self, CAMPAIGN_MUTABLE_FIELDS)


class CampaignLookup(CamelModel):
    id: str = Field(..., min_length=1)


class CampaignResponse(CamelModel):
    """Response schema for a campaign"""
    id: str
    user_id: str
    name: str
    description: Optional[str] = None
    audience_description: Optional[str] = None
    sender_name: Optional[str] = None
    sender_email: Optional[str] = None
    default_language: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def timestamps_in_utc(cls, value):
        return as_utc(value)


class CampaignData(CamelModel):
    campaign: CampaignResponse


class CampaignEnvelope(CamelModel):
    success: bool = True
    data: CampaignData


class CampaignListResponse(CamelModel):
    items: List[CampaignResponse]
    total: int


class CampaignListEnvelope(CamelModel):
    success: bool = True
    data: CampaignListResponse
