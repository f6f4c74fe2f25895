"""Rule-based event classification for GeoSentiment.

Text and its extracted keywords are tested against one word-set pattern per
category in fixed priority order: politics, sports, disaster, entertainment.
The first category that matches wins; anything else is "general".
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional, Pattern, Sequence, Tuple

from geosentiment.models.records import EventType

logger = logging.getLogger(__name__)


def _word_pattern(terms: Iterable[str]) -> Pattern[str]:
    return re.compile(r"\b(" + "|".join(re.escape(t) for t in terms) + r")\b")


# Checked in order; earlier categories take precedence
DEFAULT_EVENT_PATTERNS: Tuple[Tuple[str, Pattern[str]], ...] = (
    (EventType.POLITICS, _word_pattern([
        "election", "vote", "politic", "government", "president", "minister",
        "parliament", "congress", "senate", "democracy", "campaign", "ballot",
        "candidate", "policy", "legislation", "reform", "debate", "summit",
        "treaty", "diplomatic", "sanctions", "referendum",
    ])),
    (EventType.SPORTS, _word_pattern([
        "game", "match", "sport", "football", "cricket", "basketball", "olympics",
        "championship", "tournament", "league", "team", "player", "coach",
        "stadium", "score", "goal", "victory", "defeat", "athlete", "competition",
        "world cup", "super bowl",
    ])),
    (EventType.DISASTER, _word_pattern([
        "earthquake", "flood", "fire", "disaster", "emergency", "hurricane",
        "tsunami", "tornado", "cyclone", "storm", "evacuation", "rescue", "damage",
        "destruction", "casualties", "relief", "aid", "crisis", "catastrophe",
        "natural disaster",
    ])),
    (EventType.ENTERTAINMENT, _word_pattern([
        "music", "concert", "celebrity", "actor", "singer", "entertainment",
        "film", "album", "show", "performance", "theater", "cinema", "festival",
        "award", "oscar", "grammy", "premiere", "release", "streaming", "netflix",
    ])),
)


class EventClassifier:
    """Classify text into one event category using ordered word-set patterns."""

    def __init__(
        self,
        patterns: Sequence[Tuple[str, Pattern[str]]] = DEFAULT_EVENT_PATTERNS,
    ) -> None:
        self.patterns = tuple(patterns)

    def classify(self, text: str, keywords: Optional[List[str]] = None) -> str:
        """Return the first matching category for text plus keywords, else "general".

        Args:
            text: Free text (None is treated as empty).
            keywords: Keywords extracted from the same text.
        """
        combined = f"{text or ''} {' '.join(keywords or [])}".lower()
        for category, pattern in self.patterns:
            if pattern.search(combined):
                return category
        return EventType.GENERAL


_DEFAULT_CLASSIFIER = EventClassifier()


def classify_event(text: str, keywords: Optional[List[str]] = None) -> str:
    """Classify with the default patterns."""
    return _DEFAULT_CLASSIFIER.classify(text, keywords)
