"""Negation and intensity modifier rules shared by the sentiment and emotion scorers.

Both rules look back over a fixed window of preceding tokens. Pure functions.
"""

from __future__ import annotations

from typing import List, Optional

from config.settings import ModifierWeights
from geosentiment.analysis.lexicon import Lexicon


def is_negated(tokens: List[str], index: int, lexicon: Lexicon, window: int) -> bool:
    """Return True if a negator appears within ``window`` tokens before ``index``."""
    for j in range(max(0, index - window), index):
        if tokens[j] in lexicon.negators:
            return True
    return False


def modifier_multiplier(
    tokens: List[str],
    index: int,
    lexicon: Lexicon,
    weights: Optional[ModifierWeights] = None,
) -> float:
    """Return the intensity multiplier for the token at ``index``.

    The preceding ``weights.modifier_window`` tokens are scanned oldest first;
    the first intensifier or diminisher found decides the multiplier.

    Returns:
        weights.intensifier, weights.diminisher, or 1.0 when no modifier precedes.
    """
    weights = weights or ModifierWeights()
    for j in range(max(0, index - weights.modifier_window), index):
        if tokens[j] in lexicon.intensifiers:
            return weights.intensifier
        if tokens[j] in lexicon.diminishers:
            return weights.diminisher
    return 1.0
