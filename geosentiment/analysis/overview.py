"""Collection-wide overview statistics and plain-language insights.

compute_overview() summarizes an annotated record collection (counts,
confidence, sources, event types, time span, standout regions);
generate_insights() turns the summary into dashboard sentences.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from typing import Iterable, List, Optional

from geosentiment.models.aggregates import OverviewStats, RegionSummary
from geosentiment.models.records import AnnotatedRecord, SentimentLabel
from geosentiment.utils.date_utils import parse_timestamp

logger = logging.getLogger(__name__)

# Average-confidence bands used by the insight text
HIGH_CONFIDENCE = 0.8
LOW_CONFIDENCE = 0.5


def compute_overview(
    records: Iterable[AnnotatedRecord],
    regions: Optional[List[RegionSummary]] = None,
) -> OverviewStats:
    """Compute overview statistics for a record collection.

    Args:
        records: Annotated records.
        regions: Region summaries for the same records (optional).

    Returns:
        OverviewStats; an empty collection yields zeroed counters.
    """
    records = list(records)
    stats = OverviewStats(
        sentiment_counts={label: 0 for label in SentimentLabel.ALL},
    )
    if not records:
        return stats

    stats.total_posts = len(records)
    for record in records:
        if record.sentiment.label in stats.sentiment_counts:
            stats.sentiment_counts[record.sentiment.label] += 1
    stats.avg_confidence = sum(r.sentiment.confidence for r in records) / len(records)
    stats.source_counts = dict(Counter(r.source for r in records))
    stats.event_type_counts = dict(Counter(r.event_type for r in records if r.event_type))

    # First label reaching the max wins
    dominant = SentimentLabel.ALL[0]
    for label in SentimentLabel.ALL[1:]:
        if stats.sentiment_counts[label] > stats.sentiment_counts[dominant]:
            dominant = label
    stats.dominant_sentiment = dominant

    instants = sorted(ts for ts in (parse_timestamp(r.timestamp) for r in records) if ts)
    if len(instants) > 1:
        span_seconds = (instants[-1] - instants[0]).total_seconds()
        stats.span_days = math.ceil(span_seconds / 86400)
        stats.posts_per_day = stats.total_posts / max(stats.span_days, 1)

    if regions:
        stats.region_count = len(regions)
        stats.most_active_region = max(regions, key=lambda r: r.total_posts)
        stats.most_positive_region = max(
            regions, key=lambda r: r.sentiment_distribution.positive
        )
    return stats


def generate_insights(stats: OverviewStats) -> List[str]:
    """Produce dashboard insight sentences from overview statistics."""
    if stats.total_posts == 0:
        return ["No data available for analysis. Upload a dataset to see insights."]

    insights: List[str] = []
    dominant = stats.dominant_sentiment or SentimentLabel.NEUTRAL
    share = round(stats.sentiment_counts.get(dominant, 0) / stats.total_posts * 100)
    insights.append(f"Overall sentiment is {dominant} ({share}% of posts)")

    if stats.avg_confidence > HIGH_CONFIDENCE:
        insights.append(
            f"High confidence analysis with {round(stats.avg_confidence * 100)}% average confidence"
        )
    elif stats.avg_confidence < LOW_CONFIDENCE:
        insights.append(
            f"Mixed signals detected - sentiment confidence is {round(stats.avg_confidence * 100)}%"
        )

    if stats.most_active_region is not None:
        region = stats.most_active_region
        insights.append(
            f"{region.region} has the highest activity with {region.total_posts} posts"
        )
    if stats.most_positive_region is not None:
        region = stats.most_positive_region
        insights.append(
            f"{region.region} shows the most positive sentiment "
            f"({round(region.sentiment_distribution.positive * 100)}%)"
        )

    if stats.event_type_counts:
        event_type, count = Counter(stats.event_type_counts).most_common(1)[0]
        insights.append(f"{event_type} events dominate the conversation ({count} posts)")

    if stats.span_days > 0:
        insights.append(
            f"Data spans {stats.span_days} days with "
            f"{round(stats.posts_per_day)} average posts per day"
        )
    return insights
