"""Five-category emotion scoring for GeoSentiment.

Each emotion (joy, sadness, anger, fear, surprise) is scored independently
from its keyword set, so the vector does not sum to 1. Negated matches are
dropped rather than flipped: an emotion has no natural opposite.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from config.settings import AnnotatorConfig
from geosentiment.analysis.lexicon import DEFAULT_LEXICON, Lexicon
from geosentiment.analysis.modifiers import is_negated, modifier_multiplier
from geosentiment.models.records import Emotion, EmotionScores
from geosentiment.utils.text import tokenize

logger = logging.getLogger(__name__)


class EmotionScorer:
    """Score text against the per-emotion keyword sets of an injected lexicon."""

    def __init__(
        self,
        lexicon: Lexicon = DEFAULT_LEXICON,
        config: Optional[AnnotatorConfig] = None,
    ) -> None:
        self.lexicon = lexicon
        self.config = config or AnnotatorConfig()

    def raw_score(self, tokens: List[str], emotion: str) -> float:
        """Sum of modifier multipliers over non-negated matches for one category."""
        cfg = self.config
        total = 0.0
        for i, token in enumerate(tokens):
            if not self.lexicon.is_emotion_word(emotion, token):
                continue
            if is_negated(tokens, i, self.lexicon, cfg.modifiers.negation_window):
                continue
            total += modifier_multiplier(tokens, i, self.lexicon, cfg.modifiers)
        return total

    def score(self, text: str) -> EmotionScores:
        """Score a single text into a five-dimensional emotion vector.

        When no emotion keyword matches but the text contains a sentiment word,
        a fallback of joy (positive word present) or sadness (otherwise) is
        assigned so that every opinionated text has a dominant emotion.

        Args:
            text: Free text (None is treated as empty).

        Returns:
            EmotionScores with every value in [0, 1].
        """
        cfg = self.config
        text = text or ""
        tokens = tokenize(text)
        norm = max(len(tokens) * cfg.emotion_density, 1.0)

        values: Dict[str, float] = {}
        for emotion in Emotion.ALL:
            base = self.raw_score(tokens, emotion) / norm
            values[emotion] = min(base * cfg.emotion_gain, 1.0)

        if max(values.values()) == 0:
            fallback = self._fallback_emotion(text)
            if fallback is not None:
                logger.debug("No emotion keywords matched, falling back to %s", fallback)
                values[fallback] = cfg.emotion_fallback_value

        return EmotionScores(**values)

    def _fallback_emotion(self, text: str) -> Optional[str]:
        """Pick joy/sadness from sentiment words found anywhere in the lowercased text.

        Matching is by substring, so a sentiment word embedded in a longer word
        also counts.
        """
        lowered = text.lower()
        if any(word in lowered for word in self.lexicon.positive):
            return Emotion.JOY
        if any(word in lowered for word in self.lexicon.negative):
            return Emotion.SADNESS
        return None


_DEFAULT_SCORER = EmotionScorer()


def analyze_emotions(text: str) -> EmotionScores:
    """Score emotions with the default lexicon and configuration."""
    return _DEFAULT_SCORER.score(text)
