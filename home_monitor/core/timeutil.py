from datetime import datetime, timezone
from typing import Optional
import time


def utcnow() -> datetime:
    """Naive UTC timestamp, matching the TIMESTAMP columns"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def unix_now() -> int:
    return int(time.time())


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Mark a naive UTC timestamp read from the database as UTC"""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
