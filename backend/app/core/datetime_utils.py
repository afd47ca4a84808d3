"""
Datetime utilities for timezone-aware operations
"""
from datetime import datetime, timezone
from typing import Optional


def local_now() -> datetime:
    """Current time in the server's local timezone"""
    return datetime.now().astimezone()


def ensure_local(dt: Optional[datetime] = None) -> datetime:
    """Return dt as an aware local datetime, treating naive values as local time"""
    if dt is None:
        return local_now()
    return dt.astimezone()


def to_rfc3339_utc(dt: datetime) -> str:
    """Format an aware datetime as RFC 3339 in UTC with a trailing Z"""
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
