"""
Utility helpers shared across routers/services.
"""

from datetime import datetime, timezone
from typing import Optional
import uuid


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """
    Format a moment as ISO-8601 UTC with milliseconds and a trailing Z,
    e.g. "2024-05-01T10:00:00.000Z".
    """
    moment = (moment or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def new_id() -> str:
    return str(uuid.uuid4())
