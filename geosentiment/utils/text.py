"""Text processing utilities for GeoSentiment.

Tokenization and normalization shared by the scorers and the ingestion layer.
All functions are stateless with no I/O or external calls.
"""

from __future__ import annotations

import re
import unicodedata
from typing import List

# Any run of non-word characters separates tokens
_NON_WORD = re.compile(r"\W+")

# Two or more consecutive '!' / '?' count as one emphasis run
_EXCLAMATION_RUN = re.compile(r"!{2,}")
_QUESTION_RUN = re.compile(r"\?{2,}")


def tokenize(text: str) -> List[str]:
    """Split text into lowercase word tokens on non-word boundaries.

    Args:
        text: Free text (None is treated as empty).

    Returns:
        List of non-empty lowercase tokens, in order.
    """
    if not text:
        return []
    return [token for token in _NON_WORD.split(text.lower()) if token]


def count_exclamation_runs(text: str) -> int:
    """Count runs of two or more exclamation marks."""
    return len(_EXCLAMATION_RUN.findall(text or ""))


def count_question_runs(text: str) -> int:
    """Count runs of two or more question marks."""
    return len(_QUESTION_RUN.findall(text or ""))


def normalize_text(text: str) -> str:
    """Normalize Unicode text to NFC form, strip control characters and extra whitespace.

    Args:
        text: Input string.

    Returns:
        Normalized plain text string.
    """
    text = unicodedata.normalize("NFC", text)
    # Remove control characters (except newlines and tabs)
    text = re.sub(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]", "", text)
    text = re.sub(r"\s+", " ", text).strip()
    return text
