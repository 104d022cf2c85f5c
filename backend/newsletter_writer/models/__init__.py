from newsletter_writer.models.user import User
from newsletter_writer.models.campaign import NewsletterCampaign
from newsletter_writer.models.issue import NewsletterIssue
from newsletter_writer.models.block import NewsletterBlock

__all__ = [
    "User",
    "NewsletterCampaign",
    "NewsletterIssue",
    "NewsletterBlock",
]
