"""
Campaign actions.
Access: the campaign's owner only.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from newsletter_writer.database import get_db
from newsletter_writer.models import User, NewsletterCampaign
from newsletter_writer.schemas import (
    CampaignCreate,
    CampaignUpdate,
    CampaignLookup,
    CampaignResponse,
    CampaignData,
    CampaignEnvelope,
    CampaignListResponse,
    CampaignListEnvelope,
    SuccessResponse,
)
from newsletter_writer.auth import get_current_user
from newsletter_writer.authorization import get_owned_campaign
from newsletter_writer.utils import generate_id, utcnow

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/actions", tags=["campaigns"])


def campaign_envelope(campaign: NewsletterCampaign) -> CampaignEnvelope:
    return CampaignEnvelope(
        data=CampaignData(campaign=CampaignResponse.model_validate(campaign))
    )


@router.post("/createCampaign", response_model=CampaignEnvelope)
def create_campaign(
    campaign_data: CampaignCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Create a new campaign owned by the caller."""
    now = utcnow()
    campaign = NewsletterCampaign(
        id=generate_id(),
        user_id=current_user.id,
        name=campaign_data.name,
        description=campaign_data.description,
        audience_description=campaign_data.audience_description,
        sender_name=campaign_data.sender_name,
        sender_email=campaign_data.sender_email,
        default_language=campaign_data.default_language,
        created_at=now,
        updated_at=now,
    )

    db.add(campaign)
    db.commit()
    db.refresh(campaign)

    logger.info(f"Created campaign {campaign.id} for user {current_user.id}")
    return campaign_envelope(campaign)


@router.post("/updateCampaign", response_model=CampaignEnvelope)
def update_campaign(
    campaign_data: CampaignUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Apply the supplied fields to an owned campaign."""
    campaign = get_owned_campaign(campaign_data.id, current_user.id, db)

    update_data = campaign_data.model_dump(exclude_unset=True, exclude={"id"})
    for field, value in update_data.items():
        setattr(campaign, field, value)
    campaign.updated_at = utcnow()

    db.commit()
    db.refresh(campaign)

    logger.info(f"Updated campaign {campaign.id}: {sorted(update_data)}")
    return campaign_envelope(campaign)


@router.post("/listCampaigns", response_model=CampaignListEnvelope)
def list_campaigns(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """List every campaign the caller owns."""
    campaigns = db.query(NewsletterCampaign).filter(
        NewsletterCampaign.user_id == current_user.id
    ).order_by(NewsletterCampaign.created_at).all()

    return CampaignListEnvelope(
        data=CampaignListResponse(
            items=[CampaignResponse.model_validate(c) for c in campaigns],
            total=len(campaigns),
        )
    )


@router.post("/getCampaign", response_model=CampaignEnvelope)
def get_campaign(
    lookup: CampaignLookup,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    campaign = get_owned_campaign(lookup.id, current_user.id, db)
    return campaign_envelope(campaign)


@router.post("/deleteCampaign", response_model=SuccessResponse)
def delete_campaign(
    lookup: CampaignLookup,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Delete an owned campaign together with its issues and their blocks."""
    campaign = get_owned_campaign(lookup.id, current_user.id, db)
    db.delete(campaign)
    db.commit()

    logger.info(f"Deleted campaign {lookup.id}")
    return SuccessResponse()
