"""GeoSentiment configuration package."""

from config.defaults import (
    DEFAULT_LOG_LEVEL,
    INTENSIFIER_MULTIPLIER,
    DIMINISHER_MULTIPLIER,
    MAX_KEYWORDS,
    MAX_TEXT_LENGTH,
    MODIFIER_WINDOW,
    NEGATION_WINDOW,
    OUTPUT_ROOT,
    TRENDING_KEYWORDS_PER_REGION,
)
from config.settings import AnnotatorConfig, ModifierWeights

__all__ = [
    "AnnotatorConfig",
    "ModifierWeights",
    "NEGATION_WINDOW",
    "MODIFIER_WINDOW",
    "INTENSIFIER_MULTIPLIER",
    "DIMINISHER_MULTIPLIER",
    "MAX_KEYWORDS",
    "TRENDING_KEYWORDS_PER_REGION",
    "MAX_TEXT_LENGTH",
    "OUTPUT_ROOT",
    "DEFAULT_LOG_LEVEL",
]
