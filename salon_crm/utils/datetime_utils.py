"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
All datetime operations use the timezone configured in salon_crm.core.config.

Functions:
- now(): Returns timezone-aware datetime object
- ensure_aware(): Attach the application timezone to naive datetimes
- to_iso(): Convert datetime object to ISO 8601 string
- to_storage() / from_storage(): Convert to and from the naive UTC values MongoDB stores
"""
import logging
import zoneinfo
from datetime import datetime, tzinfo, timezone as dt_timezone
from typing import Optional

from salon_crm.core.config import get_settings

logger = logging.getLogger(__name__)


def _get_app_timezone() -> tzinfo:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    tz_str = get_settings().timezone

    if tz_str.upper() == "UTC":
        return dt_timezone.utc

    try:
        return zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Invalid timezone '{tz_str}', falling back to UTC")
        return dt_timezone.utc


def now() -> datetime:
    """
    Get current datetime with application-configured timezone.

    Returns:
        timezone-aware datetime object
    """
    return datetime.now(_get_app_timezone())


def ensure_aware(dt: Optional[datetime]) -> Optional[datetime]:
    """Attach the application timezone to a naive datetime."""
    if dt is None or dt.tzinfo is not None:
        return dt
    return dt.replace(tzinfo=_get_app_timezone())


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string.
    If datetime is naive, assumes application timezone.

    Args:
        dt: datetime object (timezone-aware or naive)

    Returns:
        ISO 8601 formatted string, or None if dt is None
    """
    if dt is None:
        return None

    dt = ensure_aware(dt)

    # Format with timezone offset, or 'Z' if UTC
    if dt.utcoffset() == dt_timezone.utc.utcoffset(None):
        return dt.replace(microsecond=0, tzinfo=dt_timezone.utc).isoformat().replace("+00:00", "Z")
    return dt.replace(microsecond=0).isoformat()


def to_storage(dt: Optional[datetime]) -> Optional[datetime]:
    """Convert a datetime to the naive UTC value MongoDB stores."""
    if dt is None:
        return None
    return ensure_aware(dt).astimezone(dt_timezone.utc).replace(tzinfo=None)


def from_storage(dt: Optional[datetime]) -> Optional[datetime]:
    """Convert a stored (naive UTC) datetime back to an aware one."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt
