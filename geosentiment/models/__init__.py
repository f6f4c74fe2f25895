"""GeoSentiment data models package.

All annotation inputs, outputs and aggregates are typed dataclasses.
Analysis code returns these types, never raw dicts.
"""

from geosentiment.models.aggregates import (
    KeywordStats,
    OverviewStats,
    RegionSummary,
    SentimentDistribution,
    TimelinePoint,
)
from geosentiment.models.records import (
    AnnotatedRecord,
    Emotion,
    EmotionScores,
    EventType,
    Location,
    RawRecord,
    RecordFilter,
    SentimentLabel,
    SentimentResult,
    Source,
    dominant_emotion,
)

__all__ = [
    # records
    "AnnotatedRecord",
    "Emotion",
    "EmotionScores",
    "EventType",
    "Location",
    "RawRecord",
    "RecordFilter",
    "SentimentLabel",
    "SentimentResult",
    "Source",
    "dominant_emotion",
    # aggregates
    "KeywordStats",
    "OverviewStats",
    "RegionSummary",
    "SentimentDistribution",
    "TimelinePoint",
]
