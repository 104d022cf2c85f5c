"""
Small helpers shared by config, routers and scripts.
"""
from datetime import datetime, timezone
from typing import Optional
from urllib.parse import urlparse
import uuid


def extract_origin(url: str | None) -> Optional[str]:
    """Return the origin (scheme + host [+ port]) from a URL-like string."""
    if not url:
        return None
    parsed = urlparse(url.strip())
    if parsed.scheme and parsed.netloc:
        return f"{parsed.scheme}://{parsed.netloc}"
    return None


def generate_id() -> str:
    """Random UUID4 rendered as a string primary key."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
