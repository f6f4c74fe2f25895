"""Daily timeline aggregation for GeoSentiment.

Buckets annotated records by UTC calendar day and computes a
confidence-weighted sentiment score and mean emotion vector per day.
Pure functions, no I/O.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from geosentiment.models.aggregates import TimelinePoint
from geosentiment.models.records import AnnotatedRecord, Emotion, EmotionScores, SentimentLabel
from geosentiment.utils.date_utils import day_key

logger = logging.getLogger(__name__)

_POLARITY_VALUE: Dict[str, float] = {
    SentimentLabel.POSITIVE: 1.0,
    SentimentLabel.NEUTRAL: 0.0,
    SentimentLabel.NEGATIVE: -1.0,
}


def polarity_value(label: str) -> float:
    """+1 / 0 / -1 for positive / neutral / negative; unknown labels count as neutral."""
    return _POLARITY_VALUE.get(label, 0.0)


def weighted_sentiment(records: List[AnnotatedRecord]) -> float:
    """Mean of confidence x polarity over the records, in [-1, 1]."""
    if not records:
        return 0.0
    total = sum(r.sentiment.confidence * polarity_value(r.sentiment.label) for r in records)
    return total / len(records)


def mean_emotions(records: List[AnnotatedRecord]) -> EmotionScores:
    """Arithmetic mean of each emotion dimension."""
    if not records:
        return EmotionScores()
    n = len(records)
    return EmotionScores(**{
        emotion: sum(r.emotions.get(emotion) for r in records) / n
        for emotion in Emotion.ALL
    })


def build_timeline(records: Iterable[AnnotatedRecord]) -> List[TimelinePoint]:
    """Build one TimelinePoint per calendar day present in the records.

    Records whose timestamp is missing or unparseable are skipped with a warning.

    Args:
        records: Annotated records.

    Returns:
        Timeline points sorted ascending by day, one per distinct day.
    """
    by_day: Dict[str, List[AnnotatedRecord]] = {}
    for record in records:
        day = day_key(record.timestamp)
        if day is None:
            logger.warning(
                "Timeline: skipping record %s with invalid timestamp %r",
                record.id,
                record.timestamp,
            )
            continue
        by_day.setdefault(day, []).append(record)

    return [
        TimelinePoint(
            date=day,
            sentiment_score=weighted_sentiment(items),
            emotion_scores=mean_emotions(items),
            post_count=len(items),
        )
        for day, items in sorted(by_day.items())
    ]
