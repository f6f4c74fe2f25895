"""Timestamp utilities for GeoSentiment.

Record timestamps arrive as loosely formatted strings from CSV uploads and
feeds. Route them through parse_timestamp() before comparing or bucketing.
"""

from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone
from typing import Optional

from dateutil import parser as dateutil_parser


def parse_timestamp(raw: str) -> Optional[datetime]:
    """Parse a timestamp string into a timezone-aware UTC datetime.

    Naive values are taken to be UTC.

    Args:
        raw: Timestamp string in any format dateutil understands.

    Returns:
        Aware datetime in UTC, or None if the value is empty or unparseable.
    """
    if not raw or not str(raw).strip():
        return None
    try:
        parsed = dateutil_parser.parse(str(raw).strip())
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        # Offsets near year 1 or 9999 overflow the UTC conversion
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError, TypeError):
        return None


def to_iso(value: datetime) -> str:
    """Format an aware datetime as an ISO 8601 UTC instant with millisecond precision."""
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def normalize_timestamp(raw: str) -> Optional[str]:
    """Normalize a timestamp string to ISO 8601 UTC, or None when unparseable."""
    parsed = parse_timestamp(raw)
    return to_iso(parsed) if parsed is not None else None


def day_key(raw: str) -> Optional[str]:
    """Truncate a timestamp to its UTC calendar day (YYYY-MM-DD).

    Returns:
        ISO date string, or None if the timestamp is unparseable.
    """
    parsed = parse_timestamp(raw)
    return parsed.date().isoformat() if parsed is not None else None


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def random_recent_timestamp(
    days: int,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> str:
    """Return an ISO timestamp at a random minute within the last ``days`` days.

    Args:
        days: Size of the lookback window in days.
        rng: Random source (a seeded instance makes the result reproducible).
        now: Reference instant (defaults to the current UTC time).
    """
    rng = rng or random.Random()
    now = now or utc_now()
    offset = timedelta(
        days=rng.randrange(max(days, 1)),
        hours=rng.randrange(24),
        minutes=rng.randrange(60),
    )
    return to_iso(now - offset)
