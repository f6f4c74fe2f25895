"""Record filtering for GeoSentiment dashboards.

Applies the dashboard's filter criteria (date range, sentiment, dominant
emotion, source, keyword) to a collection of annotated records.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from geosentiment.models.records import AnnotatedRecord, RecordFilter
from geosentiment.utils.date_utils import parse_timestamp

logger = logging.getLogger(__name__)

_ANY = "all"


def _is_active(value: Optional[str]) -> bool:
    return bool(value) and value != _ANY


def matches_keyword(record: AnnotatedRecord, keyword: str) -> bool:
    """Case-insensitive substring match against the text or any keyword."""
    needle = keyword.lower()
    if needle in record.text.lower():
        return True
    return any(needle in k.lower() for k in record.keywords)


def filter_records(
    records: Iterable[AnnotatedRecord],
    criteria: Optional[RecordFilter] = None,
) -> List[AnnotatedRecord]:
    """Return the records matching every active criterion, in input order.

    Date bounds are inclusive and independent; when either is set, records
    with unparseable timestamps are excluded. An unparseable bound is ignored.

    Args:
        records: Annotated records.
        criteria: Filter criteria ("all"/None/"" disables a criterion).

    Returns:
        Filtered list (a new list; records are not copied).
    """
    criteria = criteria or RecordFilter()
    start = parse_timestamp(criteria.start) if criteria.start else None
    end = parse_timestamp(criteria.end) if criteria.end else None
    if criteria.start and start is None:
        logger.warning("Ignoring unparseable start bound %r", criteria.start)
    if criteria.end and end is None:
        logger.warning("Ignoring unparseable end bound %r", criteria.end)

    result: List[AnnotatedRecord] = []
    for record in records:
        if start is not None or end is not None:
            ts = parse_timestamp(record.timestamp)
            if ts is None:
                continue
            if start is not None and ts < start:
                continue
            if end is not None and ts > end:
                continue
        if _is_active(criteria.sentiment) and record.sentiment.label != criteria.sentiment:
            continue
        if _is_active(criteria.emotion) and record.emotions.dominant() != criteria.emotion:
            continue
        if _is_active(criteria.source) and record.source != criteria.source:
            continue
        if criteria.keyword and not matches_keyword(record, criteria.keyword):
            continue
        result.append(record)
    return result
