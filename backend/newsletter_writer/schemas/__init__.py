"""
Pydantic schemas organized by domain.
"""

from .common import (
    CamelModel,
    SuccessResponse,
)

from .auth import (
    Token,
    UserLogin,
    UserResponse,
)

from .campaign import (
    CampaignCreate,
    CampaignUpdate,
    CampaignLookup,
    CampaignResponse,
    CampaignData,
    CampaignEnvelope,
    CampaignListResponse,
    CampaignListEnvelope,
)

from .block import (
    BlockCreate,
    BlockUpdate,
    BlockLookup,
    BlockListRequest,
    BlockResponse,
    BlockData,
    BlockEnvelope,
    BlockListResponse,
    BlockListEnvelope,
)

from .issue import (
    IssueCreate,
    IssueUpdate,
    IssueLookup,
    IssueListRequest,
    IssueResponse,
    IssueData,
    IssueEnvelope,
    IssueDetailData,
    IssueDetailEnvelope,
    IssueListResponse,
    IssueListEnvelope,
)

__all__ = [
    "CamelModel",
    "SuccessResponse",
    "Token",
    "UserLogin",
    "UserResponse",
    "CampaignCreate",
    "CampaignUpdate",
    "CampaignLookup",
    "CampaignResponse",
    "CampaignData",
    "CampaignEnvelope",
    "CampaignListResponse",
    "CampaignListEnvelope",
    "BlockCreate",
    "BlockUpdate",
    "BlockLookup",
    "BlockListRequest",
    "BlockResponse",
    "BlockData",
    "BlockEnvelope",
    "BlockListResponse",
    "BlockListEnvelope",
    "IssueCreate",
    "IssueUpdate",
    "IssueLookup",
    "IssueListRequest",
    "IssueResponse",
    "IssueData",
    "IssueEnvelope",
    "IssueDetailData",
    "IssueDetailEnvelope",
    "IssueListResponse",
    "IssueListEnvelope",
]
