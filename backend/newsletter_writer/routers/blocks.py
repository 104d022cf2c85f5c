"""
Block actions.
Access: every action resolves the issue and then its campaign, both scoped
to the caller, before touching a block.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from newsletter_writer.database import get_db
from newsletter_writer.errors import ActionError
from newsletter_writer.models import User, NewsletterBlock
from newsletter_writer.schemas import (
    BlockCreate,
    BlockUpdate,
    BlockLookup,
    BlockListRequest,
    BlockResponse,
    BlockData,
    BlockEnvelope,
    BlockListResponse,
    BlockListEnvelope,
    SuccessResponse,
)
from newsletter_writer.auth import get_current_user
from newsletter_writer.authorization import get_owned_issue_chain
from newsletter_writer.utils import generate_id, utcnow

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/actions", tags=["blocks"])

DEFAULT_ORDER_INDEX = 1


def block_envelope(block: NewsletterBlock) -> BlockEnvelope:
    return BlockEnvelope(data=BlockData(block=BlockResponse.model_validate(block)))


@router.post("/createBlock", response_model=BlockEnvelope)
def create_block(
    block_data: BlockCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Add a block to an owned issue. order_index is stored as given."""
    issue, _ = get_owned_issue_chain(block_data.issue_id, current_user.id, db)

    order_index = block_data.order_index
    if order_index is None:
        order_index = DEFAULT_ORDER_INDEX

    block = NewsletterBlock(
        id=generate_id(),
        issue_id=issue.id,
        order_index=order_index,
        block_type=block_data.block_type,
        heading=block_data.heading,
        body=block_data.body,
        cta_label=block_data.cta_label,
        cta_url=block_data.cta_url,
        image_url=block_data.image_url,
        meta_json=block_data.meta_json,
        created_at=utcnow(),
    )

    db.add(block)
    db.commit()
    db.refresh(block)

    logger.info(f"Created block {block.id} in issue {issue.id}")
    return block_envelope(block)


@router.post("/updateBlock", response_model=BlockEnvelope)
def update_block(
    block_data: BlockUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Apply the supplied fields to a block. Blocks carry no updated_at."""
    get_owned_issue_chain(block_data.issue_id, current_user.id, db)

    block = db.query(NewsletterBlock).filter(
        NewsletterBlock.id == block_data.id,
        NewsletterBlock.issue_id == block_data.issue_id,
    ).first()
    if not block:
        raise ActionError("NOT_FOUND", "Block not found.")

    update_data = block_data.model_dump(exclude_unset=True, exclude={"id", "issue_id"})
    for field, value in update_data.items():
        setattr(block, field, value)

    db.commit()
    db.refresh(block)

    logger.info(f"Updated block {block.id}: {sorted(update_data)}")
    return block_envelope(block)


@router.post("/deleteBlock", response_model=SuccessResponse)
def delete_block(
    lookup: BlockLookup,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Delete one block; an absent or foreign block is NOT_FOUND."""
    get_owned_issue_chain(lookup.issue_id, current_user.id, db)

    deleted = db.query(NewsletterBlock).filter(
        NewsletterBlock.id == lookup.id,
        NewsletterBlock.issue_id == lookup.issue_id,
    ).delete(synchronize_session=False)

    if deleted == 0:
        db.rollback()
        raise ActionError("NOT_FOUND", "Block not found.")

    db.commit()

    logger.info(f"Deleted block {lookup.id} from issue {lookup.issue_id}")
    return SuccessResponse()


@router.post("/listBlocks", response_model=BlockListEnvelope)
def list_blocks(
    list_request: BlockListRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """List an issue's blocks by order_index, then creation time."""
    get_owned_issue_chain(list_request.issue_id, current_user.id, db)

    blocks = db.query(NewsletterBlock).filter(
        NewsletterBlock.issue_id == list_request.issue_id
    ).order_by(NewsletterBlock.order_index, NewsletterBlock.created_at).all()

    return BlockListEnvelope(
        data=BlockListResponse(
            items=[BlockResponse.model_validate(block) for block in blocks],
            total=len(blocks),
        )
    )
