"""
Ownership checks for campaigns, issues and blocks.

Access is never stored on a row. It is re-derived on every request by
walking the parent chain Block -> Issue -> Campaign -> user. A row that
does not exist and a row owned by someone else both raise NOT_FOUND, so
callers cannot probe for other users' ids.
"""
import logging
from typing import Tuple

from sqlalchemy.orm import Session

from newsletter_writer.errors import ActionError
from newsletter_writer.models import NewsletterCampaign, NewsletterIssue

logger = logging.getLogger(__name__)


def owner_of(entity) -> str:
    """
    Return the id of the user who owns ``entity``.

    Follows parent references only (``block.issue``, ``issue.campaign``)
    and never writes, so it works equally on ORM rows and on plain
    objects with the same attributes. An issue's own user_id copy is
    ignored in favour of its campaign's.

    Raises:
        TypeError: if the entity is not part of an ownership chain
    """
    if hasattr(entity, "issue"):
        return owner_of(entity.issue)
    if hasattr(entity, "campaign"):
        return owner_of(entity.campaign)
    if hasattr(entity, "user_id"):
        return entity.user_id
    raise TypeError(f"{type(entity).__name__} has no owner")


def get_owned_campaign(campaign_id: str, user_id: str, db: Session) -> NewsletterCampaign:
    """
    Fetch a campaign by id, scoped to its owner.

    Raises:
        ActionError: NOT_FOUND if no campaign with that id belongs to the user
    """
    campaign = db.query(NewsletterCampaign).filter(
        NewsletterCampaign.id == campaign_id,
        NewsletterCampaign.user_id == user_id,
    ).first()

    if not campaign:
        logger.warning(f"Campaign {campaign_id} not found for user {user_id}")
        raise ActionError("NOT_FOUND", "Campaign not found.")

    return campaign


def get_owned_issue(issue_id: str, user_id: str, db: Session) -> NewsletterIssue:
    """
    Fetch an issue by id, scoped to its owner.

    Raises:
        ActionError: NOT_FOUND if no issue with that id belongs to the user
    """
    issue = db.query(NewsletterIssue).filter(
        NewsletterIssue.id == issue_id,
        NewsletterIssue.user_id == user_id,
    ).first()

    if not issue:
        logger.warning(f"Issue {issue_id} not found for user {user_id}")
        raise ActionError("NOT_FOUND", "Newsletter issue not found.")

    return issue


def get_owned_issue_chain(
    issue_id: str, user_id: str, db: Session
) -> Tuple[NewsletterIssue, NewsletterCampaign]:
    """
    Resolve an issue and then its campaign, both scoped to the user.

    The issue row already carries user_id; the campaign lookup confirms
    the chain still ends at the same owner.
    """
    issue = get_owned_issue(issue_id, user_id, db)
    campaign = get_owned_campaign(issue.campaign_id, user_id, db)
    return issue, campaign


def get_issue_in_campaign(
    issue_id: str, campaign_id: str, user_id: str, db: Session
) -> Tuple[NewsletterIssue, NewsletterCampaign]:
    """
    Resolve an owned campaign, then an issue that sits directly under it.

    Raises:
        ActionError: NOT_FOUND if either link of the chain is missing
    """
    campaign = get_owned_campaign(campaign_id, user_id, db)
    issue = db.query(NewsletterIssue).filter(
        NewsletterIssue.id == issue_id,
        NewsletterIssue.campaign_id == campaign_id,
        NewsletterIssue.user_id == user_id,
    ).first()

    if not issue:
        logger.warning(f"Issue {issue_id} not found in campaign {campaign_id}")
        raise ActionError("NOT_FOUND", "Issue not found.")

    return issue, campaign
