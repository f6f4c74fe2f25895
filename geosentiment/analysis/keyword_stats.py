"""Keyword explorer statistics for GeoSentiment.

For every keyword mentioned across a record collection: how often, with which
sentiment, and in which records.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from config.defaults import KEYWORD_EXPLORER_LIMIT
from geosentiment.models.aggregates import KeywordStats
from geosentiment.models.records import AnnotatedRecord, SentimentLabel

logger = logging.getLogger(__name__)

SORT_BY_FREQUENCY = "frequency"
SORT_BY_SENTIMENT = "sentiment"


def _dominant_label(counts: Dict[str, int]) -> str:
    # First label (positive, negative, neutral) reaching the max wins
    best = SentimentLabel.ALL[0]
    for label in SentimentLabel.ALL[1:]:
        if counts[label] > counts[best]:
            best = label
    return best


def analyze_keywords(
    records: Iterable[AnnotatedRecord],
    sort_by: str = SORT_BY_FREQUENCY,
    sentiment_filter: str = "all",
    limit: int = KEYWORD_EXPLORER_LIMIT,
) -> List[KeywordStats]:
    """Compute per-keyword mention statistics.

    Args:
        records: Annotated records.
        sort_by: "frequency" (count desc) or "sentiment" (avg_sentiment desc).
        sentiment_filter: Keep only keywords whose dominant sentiment matches ("all" keeps all).
        limit: Maximum number of keywords returned.

    Returns:
        KeywordStats list, sorted and truncated. Ties keep first-seen order.

    Raises:
        ValueError: If sort_by is not a supported ordering.
    """
    if sort_by not in (SORT_BY_FREQUENCY, SORT_BY_SENTIMENT):
        raise ValueError(f"Unsupported keyword ordering: {sort_by!r}")

    counts: Dict[str, Dict[str, int]] = {}
    record_ids: Dict[str, List[str]] = {}
    for record in records:
        for keyword in record.keywords:
            if keyword not in counts:
                counts[keyword] = {label: 0 for label in SentimentLabel.ALL}
                record_ids[keyword] = []
            label = record.sentiment.label
            if label in counts[keyword]:
                counts[keyword][label] += 1
            record_ids[keyword].append(record.id)

    stats: List[KeywordStats] = []
    for keyword, by_label in counts.items():
        total = len(record_ids[keyword])
        stats.append(
            KeywordStats(
                keyword=keyword,
                count=total,
                sentiment_counts=dict(by_label),
                avg_sentiment=(
                    by_label[SentimentLabel.POSITIVE] - by_label[SentimentLabel.NEGATIVE]
                ) / total,
                dominant_sentiment=_dominant_label(by_label),
                record_ids=record_ids[keyword],
            )
        )

    if sentiment_filter and sentiment_filter != "all":
        stats = [s for s in stats if s.dominant_sentiment == sentiment_filter]

    if sort_by == SORT_BY_FREQUENCY:
        stats.sort(key=lambda s: s.count, reverse=True)
    else:
        stats.sort(key=lambda s: s.avg_sentiment, reverse=True)

    return stats[:limit]
