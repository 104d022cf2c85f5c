"""
Issue actions.
Access: owner of the parent campaign. Every action names the campaign the
issue is expected to live under.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from newsletter_writer.database import get_db
from newsletter_writer.models import User, NewsletterIssue, NewsletterBlock
from newsletter_writer.schemas import (
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
    BlockResponse,
    SuccessResponse,
)
from newsletter_writer.auth import get_current_user
from newsletter_writer.authorization import get_owned_campaign, get_issue_in_campaign, owner_of
from newsletter_writer.utils import generate_id, utcnow

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/actions", tags=["issues"])


def issue_envelope(issue: NewsletterIssue) -> IssueEnvelope:
    return IssueEnvelope(data=IssueData(issue=IssueResponse.model_validate(issue)))


@router.post("/createIssue", response_model=IssueEnvelope)
def create_issue(
    issue_data: IssueCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Create an issue under an owned campaign."""
    campaign = get_owned_campaign(issue_data.campaign_id, current_user.id, db)
    now = utcnow()

    issue = NewsletterIssue(
        id=generate_id(),
        campaign_id=campaign.id,
        user_id=owner_of(campaign),
        issue_number=issue_data.issue_number,
        subject_line=issue_data.subject_line,
        preheader_text=issue_data.preheader_text,
        status=issue_data.status,
        scheduled_at=issue_data.scheduled_at,
        sent_at=issue_data.sent_at,
        created_at=now,
        updated_at=now,
    )

    db.add(issue)
    db.commit()
    db.refresh(issue)

    logger.info(f"Created issue {issue.id} in campaign {campaign.id}")
    return issue_envelope(issue)


@router.post("/updateIssue", response_model=IssueEnvelope)
def update_issue(
    issue_data: IssueUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Apply the supplied fields to an issue under an owned campaign."""
    issue, _ = get_issue_in_campaign(
        issue_data.id, issue_data.campaign_id, current_user.id, db
    )

    update_data = issue_data.model_dump(exclude_unset=True, exclude={"id", "campaign_id"})
    for field, value in update_data.items():
        setattr(issue, field, value)
    issue.updated_at = utcnow()

    db.commit()
    db.refresh(issue)

    logger.info(f"Updated issue {issue.id}: {sorted(update_data)}")
    return issue_envelope(issue)


@router.post("/listIssues", response_model=IssueListEnvelope)
def list_issues(
    list_request: IssueListRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """List the caller's issues under one campaign."""
    get_owned_campaign(list_request.campaign_id, current_user.id, db)

    issues = db.query(NewsletterIssue).filter(
        NewsletterIssue.campaign_id == list_request.campaign_id,
        NewsletterIssue.user_id == current_user.id,
    ).order_by(NewsletterIssue.created_at).all()

    return IssueListEnvelope(
        data=IssueListResponse(
            items=[IssueResponse.model_validate(issue) for issue in issues],
            total=len(issues),
        )
    )


@router.post("/getIssue", response_model=IssueDetailEnvelope)
def get_issue(
    lookup: IssueLookup,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Fetch one issue with its blocks in display order."""
    issue, _ = get_issue_in_campaign(lookup.id, lookup.campaign_id, current_user.id, db)

    blocks = db.query(NewsletterBlock).filter(
        NewsletterBlock.issue_id == issue.id
    ).order_by(NewsletterBlock.order_index, NewsletterBlock.created_at).all()

    return IssueDetailEnvelope(
        data=IssueDetailData(
            issue=IssueResponse.model_validate(issue),
            blocks=[BlockResponse.model_validate(block) for block in blocks],
        )
    )


@router.post("/deleteIssue", response_model=SuccessResponse)
def delete_issue(
    lookup: IssueLookup,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Delete an issue and its blocks."""
    issue, _ = get_issue_in_campaign(lookup.id, lookup.campaign_id, current_user.id, db)
    db.delete(issue)
    db.commit()

    logger.info(f"Deleted issue {lookup.id} from campaign {lookup.campaign_id}")
    return SuccessResponse()
