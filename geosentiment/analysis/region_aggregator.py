"""Per-region aggregation for GeoSentiment.

Groups annotated records by their "city, country" key and summarizes each
group. Results are recomputed from scratch on every call.
"""

from __future__ import annotations

import logging
from collections import Counter, defaultdict
from typing import Dict, Iterable, List

from config.defaults import TRENDING_KEYWORDS_PER_REGION
from geosentiment.models.aggregates import RegionSummary, SentimentDistribution
from geosentiment.models.records import (
    AnnotatedRecord,
    Emotion,
    SentimentLabel,
    dominant_emotion,
)

logger = logging.getLogger(__name__)


def group_by_region(records: Iterable[AnnotatedRecord]) -> Dict[str, List[AnnotatedRecord]]:
    """Group records by region key in first-seen order.

    Records missing a city or a country are excluded.
    """
    groups: Dict[str, List[AnnotatedRecord]] = {}
    skipped = 0
    for record in records:
        key = record.location.region_key if record.location else ""
        if not key:
            skipped += 1
            continue
        groups.setdefault(key, []).append(record)
    if skipped:
        logger.debug("Region aggregation: %d records without city/country excluded", skipped)
    return groups


def sentiment_distribution(records: List[AnnotatedRecord]) -> SentimentDistribution:
    """Fraction of records per sentiment label (all zero for an empty list)."""
    if not records:
        return SentimentDistribution()
    counts = Counter(r.sentiment.label for r in records)
    n = len(records)
    return SentimentDistribution(
        positive=counts[SentimentLabel.POSITIVE] / n,
        negative=counts[SentimentLabel.NEGATIVE] / n,
        neutral=counts[SentimentLabel.NEUTRAL] / n,
    )


def summed_emotions(records: List[AnnotatedRecord]) -> Dict[str, float]:
    totals: Dict[str, float] = defaultdict(float)
    for record in records:
        for emotion in Emotion.ALL:
            totals[emotion] += record.emotions.get(emotion)
    return dict(totals)


def trending_keywords(records: List[AnnotatedRecord], top_n: int) -> List[str]:
    """Top keywords by mention count; ties keep first-counted order."""
    counts: Counter = Counter()
    for record in records:
        counts.update(record.keywords)
    # Counter.most_common is stable for equal counts (insertion order)
    return [keyword for keyword, _ in counts.most_common(top_n)]


def summarize_region(
    region: str,
    records: List[AnnotatedRecord],
    top_keywords: int = TRENDING_KEYWORDS_PER_REGION,
) -> RegionSummary:
    """Summarize one region's records."""
    return RegionSummary(
        region=region,
        sentiment_distribution=sentiment_distribution(records),
        dominant_emotion=dominant_emotion(summed_emotions(records)),
        total_posts=len(records),
        trending_keywords=trending_keywords(records, top_keywords),
    )


def aggregate_regions(
    records: Iterable[AnnotatedRecord],
    top_keywords: int = TRENDING_KEYWORDS_PER_REGION,
) -> List[RegionSummary]:
    """Build one RegionSummary per distinct "city, country" key.

    The dominant emotion is the argmax of the summed (not averaged) emotion
    vectors, ties going to the earliest category in joy, sadness, anger,
    fear, surprise order.

    Args:
        records: Annotated records (records without city/country are ignored).
        top_keywords: Number of trending keywords per region.

    Returns:
        Region summaries sorted by total_posts descending (ties keep first-seen order).
    """
    groups = group_by_region(records)
    summaries = [summarize_region(region, items, top_keywords) for region, items in groups.items()]
    summaries.sort(key=lambda s: s.total_posts, reverse=True)
    logger.debug("Region aggregation: %d regions", len(summaries))
    return summaries
