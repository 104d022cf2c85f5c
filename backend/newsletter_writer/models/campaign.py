"""
Top-level newsletter grouping, one per audience or brand.
"""
from sqlalchemy import Column, String, DateTime, Text, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from newsletter_writer.database import Base
from newsletter_writer.utils import generate_id


class NewsletterCampaign(Base):
    __tablename__ = "newsletter_campaigns"

    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    name = Column(String(255), nullable=False)  # e.g. "Weekly Dev Tips"
    description = Column(Text, nullable=True)
    audience_description = Column(Text, nullable=True)
    sender_name = Column(String(255), nullable=True)
    sender_email = Column(String(255), nullable=True)
    default_language = Column(String(50), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # Relationships
    owner = relationship("User", back_populates="campaigns")
    issues = relationship(
        "NewsletterIssue",
        back_populates="campaign",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<NewsletterCampaign(id={self.id}, name={self.name}, user_id={self.user_id})>"
