"""Aggregate data models for GeoSentiment.

Outputs of the region, timeline, keyword and overview aggregations. All are
recomputed from scratch from a collection of AnnotatedRecord values.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from geosentiment.models.records import EmotionScores


@dataclass
class SentimentDistribution:
    """Fractions of records per sentiment label; sums to 1.0 for a non-empty group."""

    positive: float = 0.0
    negative: float = 0.0
    neutral: float = 0.0


@dataclass
class RegionSummary:
    """Per-region ("city, country") sentiment and emotion summary."""

    region: str
    sentiment_distribution: SentimentDistribution
    dominant_emotion: str
    total_posts: int
    trending_keywords: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


@dataclass
class TimelinePoint:
    """One calendar day of confidence-weighted sentiment and mean emotions."""

    date: str                      # ISO YYYY-MM-DD
    sentiment_score: float         # In [-1, 1]
    emotion_scores: EmotionScores
    post_count: int

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


@dataclass
class KeywordStats:
    """Mention statistics for one keyword across a record collection."""

    keyword: str
    count: int
    sentiment_counts: Dict[str, int]
    avg_sentiment: float           # (positive - negative) / count, in [-1, 1]
    dominant_sentiment: str
    record_ids: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


@dataclass
class OverviewStats:
    """Collection-wide counters shown on the dashboard summary."""

    total_posts: int = 0
    sentiment_counts: Dict[str, int] = field(default_factory=dict)
    avg_confidence: float = 0.0
    source_counts: Dict[str, int] = field(default_factory=dict)
    event_type_counts: Dict[str, int] = field(default_factory=dict)
    dominant_sentiment: Optional[str] = None
    span_days: int = 0
    posts_per_day: float = 0.0
    region_count: int = 0
    most_active_region: Optional[RegionSummary] = None
    most_positive_region: Optional[RegionSummary] = None

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)
