from sqlalchemy import Column, String, DateTime, Integer, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from newsletter_writer.database import Base
from newsletter_writer.utils import generate_id


class NewsletterIssue(Base):
    __tablename__ = "newsletter_issues"

    id = Column(String(36), primary_key=True, default=generate_id)
    campaign_id = Column(
        String(36),
        ForeignKey('newsletter_campaigns.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    # Copy of the campaign owner, for owner-scoped queries without a join
    user_id = Column(String(36), nullable=False, index=True)
    issue_number = Column(Integer, nullable=True)
    subject_line = Column(String(255), nullable=False)
    preheader_text = Column(String(255), nullable=True)  # short preview line
    # Free-form: "draft", "ready", "sent", ... Nothing acts on it.
    status = Column(String(50), nullable=True)
    scheduled_at = Column(DateTime(timezone=True), nullable=True)
    sent_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # Relationships
    campaign = relationship("NewsletterCampaign", back_populates="issues")
    blocks = relationship(
        "NewsletterBlock",
        back_populates="issue",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<NewsletterIssue(id={self.id}, subject_line={self.subject_line}, campaign_id={self.campaign_id})>"
