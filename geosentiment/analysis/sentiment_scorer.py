"""Lexicon-based sentiment scoring for GeoSentiment.

Scores free text into a polarity label, a [0, 1] score centred on 0.5 and a
confidence value. Negation flips a match's polarity rather than dropping it;
intensifiers, diminishers and '!!'/'??' emphasis scale each match.

Confidence never drops below a floor (0.4 polarized, 0.3 neutral) so that
downstream displays always have a non-zero value to render.
"""

from __future__ import annotations

import logging
from typing import Optional

from config.settings import AnnotatorConfig
from geosentiment.analysis.lexicon import DEFAULT_LEXICON, Lexicon
from geosentiment.analysis.modifiers import is_negated, modifier_multiplier
from geosentiment.models.records import SentimentLabel, SentimentResult
from geosentiment.utils.text import count_exclamation_runs, count_question_runs, tokenize

logger = logging.getLogger(__name__)


class SentimentScorer:
    """Score text polarity against an injected lexicon.

    Instances hold only immutable configuration and are safe to share
    across threads.
    """

    def __init__(
        self,
        lexicon: Lexicon = DEFAULT_LEXICON,
        config: Optional[AnnotatorConfig] = None,
    ) -> None:
        self.lexicon = lexicon
        self.config = config or AnnotatorConfig()

    def emphasis_bonus(self, text: str) -> float:
        """Bonus added to every match's multiplier for '!!' and '??' runs in the text."""
        cfg = self.config
        return (
            count_exclamation_runs(text) * cfg.exclamation_bonus
            + count_question_runs(text) * cfg.question_bonus
        )

    def score(self, text: str) -> SentimentResult:
        """Score a single text.

        Args:
            text: Free text (None or whitespace-only yields the neutral default).

        Returns:
            SentimentResult with label, score in [0, 1] and confidence in [0.3, 1].
        """
        cfg = self.config
        text = text or ""
        tokens = tokenize(text)
        bonus = self.emphasis_bonus(text)

        positive = 0.0
        negative = 0.0
        for i, token in enumerate(tokens):
            in_positive = self.lexicon.is_positive(token)
            if not in_positive and not self.lexicon.is_negative(token):
                continue
            weight = modifier_multiplier(tokens, i, self.lexicon, cfg.modifiers) + bonus
            negated = is_negated(tokens, i, self.lexicon, cfg.modifiers.negation_window)
            # Negation flips polarity
            if in_positive != negated:
                positive += weight
            else:
                negative += weight

        total = positive + negative
        confidence = min(total / max(len(tokens) * cfg.evidence_density, 1.0), 1.0)

        if positive > negative:
            strength = (positive - negative) / max(total, 1.0)
            return SentimentResult(
                label=SentimentLabel.POSITIVE,
                score=0.5 + 0.5 * strength,
                confidence=max(cfg.polarized_confidence_floor, confidence),
            )
        if negative > positive:
            strength = (negative - positive) / max(total, 1.0)
            return SentimentResult(
                label=SentimentLabel.NEGATIVE,
                score=0.5 - 0.5 * strength,
                confidence=max(cfg.polarized_confidence_floor, confidence),
            )
        return SentimentResult(
            label=SentimentLabel.NEUTRAL,
            score=0.5,
            confidence=max(
                cfg.neutral_confidence_floor,
                confidence * cfg.neutral_confidence_damping,
            ),
        )


_DEFAULT_SCORER = SentimentScorer()


def analyze_sentiment(text: str) -> SentimentResult:
    """Score text with the default lexicon and configuration."""
    return _DEFAULT_SCORER.score(text)
