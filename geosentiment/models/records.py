"""Record data models for GeoSentiment.

Defines the raw ingress record, the per-record annotation results, and the
fully annotated record consumed by the aggregators. Categorical values are
plain string constants so records serialize to JSON without conversion.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


class SentimentLabel:
    """Polarity labels produced by the sentiment scorer."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"

    ALL: Tuple[str, ...] = (POSITIVE, NEGATIVE, NEUTRAL)


class Emotion:
    """The five emotion categories, in canonical order.

    The order of ALL is the tie-break order for every dominant-emotion argmax:
    the first category reaching the maximum wins.
    """

    JOY = "joy"
    SADNESS = "sadness"
    ANGER = "anger"
    FEAR = "fear"
    SURPRISE = "surprise"

    ALL: Tuple[str, ...] = (JOY, SADNESS, ANGER, FEAR, SURPRISE)


class EventType:
    """Event categories, in classification priority order (GENERAL is the fallback)."""

    POLITICS = "politics"
    SPORTS = "sports"
    DISASTER = "disaster"
    ENTERTAINMENT = "entertainment"
    GENERAL = "general"

    ALL: Tuple[str, ...] = (POLITICS, SPORTS, DISASTER, ENTERTAINMENT, GENERAL)


class Source:
    """Record origins."""

    TWITTER = "twitter"
    NEWS = "news"
    UPLOAD = "upload"

    ALL: Tuple[str, ...] = (TWITTER, NEWS, UPLOAD)


@dataclass
class Location:
    """Geographic position of a record. city/country are optional labels."""

    lat: float
    lng: float
    city: Optional[str] = None
    country: Optional[str] = None

    @property
    def region_key(self) -> str:
        """Return the "city, country" grouping key, or "" when either label is missing."""
        city = (self.city or "").strip()
        country = (self.country or "").strip()
        if not city or not country:
            return ""
        return f"{city}, {country}"


@dataclass
class RawRecord:
    """A single input record as supplied by ingestion (CSV, live feed, demo data)."""

    text: str
    timestamp: str      # ISO 8601 instant, defaulted upstream when invalid
    location: Location
    source: str = Source.UPLOAD

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RawRecord":
        """Build a record from the ingress shape {text, timestamp, location: {lat, lng, ...}, source}."""
        loc = data.get("location") or {}
        return cls(
            text=data.get("text") or "",
            timestamp=data.get("timestamp") or "",
            location=Location(
                lat=float(loc.get("lat", 0.0)),
                lng=float(loc.get("lng", 0.0)),
                city=loc.get("city"),
                country=loc.get("country"),
            ),
            source=data.get("source") or Source.UPLOAD,
        )


@dataclass
class SentimentResult:
    """Polarity label with a score in [0, 1] (0.5 = balanced) and a confidence in [0.3, 1]."""

    label: str
    score: float
    confidence: float


@dataclass
class EmotionScores:
    """Independently scored emotion intensities, each in [0, 1]."""

    joy: float = 0.0
    sadness: float = 0.0
    anger: float = 0.0
    fear: float = 0.0
    surprise: float = 0.0

    def get(self, emotion: str) -> float:
        if emotion not in Emotion.ALL:
            raise KeyError(f"Unknown emotion category: {emotion!r}")
        return getattr(self, emotion)

    def as_dict(self) -> Dict[str, float]:
        """Return the scores keyed by category, in canonical order."""
        return {emotion: getattr(self, emotion) for emotion in Emotion.ALL}

    def dominant(self) -> str:
        """Return the highest-scoring category; ties go to the earliest in Emotion.ALL."""
        return dominant_emotion(self.as_dict())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EmotionScores":
        return cls(**{emotion: float(data.get(emotion, 0.0)) for emotion in Emotion.ALL})


def dominant_emotion(totals: Dict[str, float]) -> str:
    """Deterministic argmax over emotion totals in canonical category order.

    Args:
        totals: Mapping of emotion category to score (missing categories count as 0).

    Returns:
        The first category in Emotion.ALL whose score equals the maximum.
    """
    best = Emotion.ALL[0]
    best_value = totals.get(best, 0.0)
    for emotion in Emotion.ALL[1:]:
        value = totals.get(emotion, 0.0)
        if value > best_value:
            best, best_value = emotion, value
    return best


@dataclass
class AnnotatedRecord:
    """A raw record plus every annotation produced by the record annotator."""

    id: str
    text: str
    timestamp: str
    location: Location
    source: str
    sentiment: SentimentResult
    emotions: EmotionScores
    keywords: List[str] = field(default_factory=list)
    event_type: str = EventType.GENERAL

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnnotatedRecord":
        """Rebuild a record from its to_dict() form (e.g. after a JSON round trip)."""
        loc = data.get("location") or {}
        sent = data.get("sentiment") or {}
        return cls(
            id=str(data["id"]),
            text=data.get("text", ""),
            timestamp=data.get("timestamp", ""),
            location=Location(
                lat=float(loc.get("lat", 0.0)),
                lng=float(loc.get("lng", 0.0)),
                city=loc.get("city"),
                country=loc.get("country"),
            ),
            source=data.get("source", Source.UPLOAD),
            sentiment=SentimentResult(
                label=sent.get("label", SentimentLabel.NEUTRAL),
                score=float(sent.get("score", 0.5)),
                confidence=float(sent.get("confidence", 0.3)),
            ),
            emotions=EmotionScores.from_dict(data.get("emotions") or {}),
            keywords=list(data.get("keywords") or []),
            event_type=data.get("event_type", EventType.GENERAL),
        )


@dataclass
class RecordFilter:
    """Dashboard filter criteria. "all" (or None/empty) disables a criterion."""

    start: Optional[str] = None        # ISO 8601 instant, inclusive
    end: Optional[str] = None          # ISO 8601 instant, inclusive
    sentiment: str = "all"
    emotion: str = "all"
    source: str = "all"
    keyword: str = ""
