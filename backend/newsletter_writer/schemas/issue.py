"""
Issue action payloads.
"""
from pydantic import Field, field_validator, model_validator
from typing import Optional, List
from datetime import datetime

from .common import CamelModel, as_utc, require_any_field
from .block import BlockResponse


class IssueCreate(CamelModel):
    """Create a new issue under a campaign"""
    campaign_id: str = Field(..., min_length=1)
    issue_number: Optional[int] = Field(None, description="e.g. 1, 2, 3...")
    subject_line: str = Field(..., min_length=1)
    preheader_text: Optional[str] = Field(None, description="Short preview line")
    status: Optional[str] = Field(None, description="Free-form: draft, ready, sent")
    scheduled_at: Optional[datetime] = None
    sent_at: Optional[datetime] = None


ISSUE_MUTABLE_FIELDS = frozenset({
    "issue_number",
    "subject_line",
    "preheader_text",
    "status",
    "scheduled_at",
    "sent_at",
})


class IssueUpdate(CamelModel):
    """Patch an issue; campaign_id pins the parent it must live under"""
    id: str = Field(..., min_length=1)
    campaign_id: str = Field(..., min_length=1)
    issue_number: Optional[int] = None
    subject_line: str = None
    preheader_text: Optional[str] = None
    status: Optional[str] = None
    scheduled_at: Optional[datetime] = None
    sent_at: Optional[datetime] = None

    @model_validator(mode="after")
    def check_has_changes(self):
        return require_any_field(self, ISSUE_MUTABLE_FIELDS)


class IssueLookup(CamelModel):
    id: str = Field(..., min_length=1)
    campaign_id: str = Field(..., min_length=1)


class IssueListRequest(CamelModel):
    campaign_id: str = Field(..., min_length=1)


class IssueResponse(CamelModel):
    """Response schema for an issue"""
    id: str
    campaign_id: str
    user_id: str
    issue_number: Optional[int] = None
    subject_line: str
    preheader_text: Optional[str] = None
    status: Optional[str] = None
    scheduled_at: Optional[datetime] = None
    sent_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    @field_validator("scheduled_at", "sent_at", "created_at", "updated_at")
    @classmethod
    def timestamps_in_utc(cls, value):
        return as_utc(value)


class IssueData(CamelModel):
    issue: IssueResponse


class IssueEnvelope(CamelModel):
    success: bool = True
    data: IssueData


class IssueDetailData(CamelModel):
    issue: IssueResponse
    blocks: List[BlockResponse]


class IssueDetailEnvelope(CamelModel):
    success: bool = True
    data: IssueDetailData


class IssueListResponse(CamelModel):
    items: List[IssueResponse]
    total: int


class IssueListEnvelope(CamelModel):
    success: bool = True
    data: IssueListResponse
