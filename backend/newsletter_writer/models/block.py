"""
Ordered content unit (header, text, cta, image, quote, ...) inside an issue.
"""
from sqlalchemy import Column, String, DateTime, Text, Integer, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from newsletter_writer.database import Base
from newsletter_writer.utils import generate_id


class NewsletterBlock(Base):
    __tablename__ = "newsletter_blocks"

    id = Column(String(36), primary_key=True, default=generate_id)
    issue_id = Column(
        String(36),
        ForeignKey('newsletter_issues.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    # Caller-assigned; neither unique nor contiguous
    order_index = Column(Integer, nullable=False, default=1)
    block_type = Column(String(50), nullable=True)
    heading = Column(Text, nullable=True)
    body = Column(Text, nullable=True)
    cta_label = Column(String(255), nullable=True)
    cta_url = Column(Text, nullable=True)
    image_url = Column(Text, nullable=True)
    meta_json = Column(Text, nullable=True)  # opaque, never parsed
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # Relationships
    issue = relationship("NewsletterIssue", back_populates="blocks")

    def __repr__(self):
        return f"<NewsletterBlock(id={self.id}, issue_id={self.issue_id}, order_index={self.order_index})>"
