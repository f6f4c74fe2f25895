"""GeoSentiment — AnnotatorConfig and environment-based configuration loading.

All runtime configuration flows through AnnotatorConfig. Scoring constants come
from config.defaults; a handful of operational settings may be overridden from
environment variables (or a .env file).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from config.defaults import (
    ANNOTATOR_MAX_WORKERS,
    DEFAULT_LOG_LEVEL,
    DIMINISHER_MULTIPLIER,
    EMOTION_DENSITY,
    EMOTION_FALLBACK_VALUE,
    EMOTION_GAIN,
    EVIDENCE_DENSITY,
    EXCLAMATION_BONUS,
    INTENSIFIER_MULTIPLIER,
    KEYWORD_EXPLORER_LIMIT,
    MAX_KEYWORDS,
    MAX_TEXT_LENGTH,
    MIN_KEYWORD_LENGTH,
    MIN_TEXT_LENGTH,
    MODIFIER_WINDOW,
    NEGATION_WINDOW,
    NEUTRAL_CONFIDENCE_DAMPING,
    NEUTRAL_CONFIDENCE_FLOOR,
    OUTPUT_ROOT,
    POLARIZED_CONFIDENCE_FLOOR,
    QUESTION_BONUS,
    RANDOM_TIMESTAMP_DAYS,
    TOP_FREQUENCY_WORDS,
    TRENDING_KEYWORDS_PER_REGION,
)

# Load .env file if present; silently skip if missing
load_dotenv()


def _env_int(key: str, default: int) -> int:
    try:
        return int(os.getenv(key, default))
    except (TypeError, ValueError):
        return default


@dataclass
class ModifierWeights:
    """Windows and multipliers for negation and intensity modifiers."""

    intensifier: float = INTENSIFIER_MULTIPLIER
    diminisher: float = DIMINISHER_MULTIPLIER
    negation_window: int = NEGATION_WINDOW
    modifier_window: int = MODIFIER_WINDOW

    def __post_init__(self) -> None:
        if self.intensifier <= 0 or self.diminisher <= 0:
            raise ValueError(
                f"Modifier multipliers must be positive, got "
                f"intensifier={self.intensifier}, diminisher={self.diminisher}"
            )
        if self.negation_window < 0 or self.modifier_window < 0:
            raise ValueError(
                f"Modifier windows must be >= 0, got "
                f"negation_window={self.negation_window}, modifier_window={self.modifier_window}"
            )


@dataclass
class AnnotatorConfig:
    """Single configuration object threaded through annotation and aggregation.

    Scorers read their thresholds from here; ingestion and the CLI read the
    operational settings (text limits, worker count, output paths).
    """

    # ── Modifiers ──────────────────────────────────────────────────────────────
    modifiers: ModifierWeights = field(default_factory=ModifierWeights)

    # ── Sentiment ──────────────────────────────────────────────────────────────
    exclamation_bonus: float = EXCLAMATION_BONUS
    question_bonus: float = QUESTION_BONUS
    evidence_density: float = EVIDENCE_DENSITY
    polarized_confidence_floor: float = POLARIZED_CONFIDENCE_FLOOR
    neutral_confidence_floor: float = NEUTRAL_CONFIDENCE_FLOOR
    neutral_confidence_damping: float = NEUTRAL_CONFIDENCE_DAMPING

    # ── Emotions ───────────────────────────────────────────────────────────────
    emotion_density: float = EMOTION_DENSITY
    emotion_gain: float = EMOTION_GAIN
    emotion_fallback_value: float = EMOTION_FALLBACK_VALUE

    # ── Keywords ───────────────────────────────────────────────────────────────
    max_keywords: int = MAX_KEYWORDS
    top_frequency_words: int = TOP_FREQUENCY_WORDS
    min_keyword_length: int = MIN_KEYWORD_LENGTH

    # ── Aggregation ────────────────────────────────────────────────────────────
    trending_keywords_per_region: int = TRENDING_KEYWORDS_PER_REGION
    keyword_explorer_limit: int = KEYWORD_EXPLORER_LIMIT

    # ── Ingestion ──────────────────────────────────────────────────────────────
    max_text_length: int = field(
        default_factory=lambda: _env_int("MAX_TEXT_LENGTH", MAX_TEXT_LENGTH)
    )
    min_text_length: int = MIN_TEXT_LENGTH
    random_timestamp_days: int = RANDOM_TIMESTAMP_DAYS
    max_workers: int = field(
        default_factory=lambda: _env_int("ANNOTATOR_MAX_WORKERS", ANNOTATOR_MAX_WORKERS)
    )

    # ── Output and logging ─────────────────────────────────────────────────────
    output_root: str = field(default_factory=lambda: os.getenv("OUTPUT_ROOT", OUTPUT_ROOT))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL))

    def __post_init__(self) -> None:
        if self.max_keywords < 1:
            raise ValueError(f"max_keywords must be >= 1, got {self.max_keywords}")
        if self.evidence_density <= 0 or self.emotion_density <= 0:
            raise ValueError("evidence_density and emotion_density must be positive")
        # Sequential is the floor
        if self.max_workers < 1:
            self.max_workers = 1
