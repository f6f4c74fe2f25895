"""Keyword extraction for GeoSentiment.

Hashtags and @mentions always qualify; remaining words are ranked by
frequency, then by length. Ties beyond (frequency, length) keep first-seen
order, which callers must not rely on.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from typing import List, Optional

from config.settings import AnnotatorConfig
from geosentiment.analysis.lexicon import DEFAULT_LEXICON, Lexicon

logger = logging.getLogger(__name__)

_HASHTAG = re.compile(r"#\w+")
_MENTION = re.compile(r"@\w+")

# Everything except word characters, whitespace, '#' and '@'
_PUNCTUATION = re.compile(r"[^\w\s#@]")
_NUMERIC = re.compile(r"^\d+$")


class KeywordExtractor:
    """Extract up to ``config.max_keywords`` salient lowercase terms from text."""

    def __init__(
        self,
        lexicon: Lexicon = DEFAULT_LEXICON,
        config: Optional[AnnotatorConfig] = None,
    ) -> None:
        self.lexicon = lexicon
        self.config = config or AnnotatorConfig()

    def candidate_words(self, text: str) -> List[str]:
        """Lowercased words surviving the length, stop-word and numeric filters."""
        cfg = self.config
        words = _PUNCTUATION.sub(" ", text.lower()).split()
        return [
            w for w in words
            if len(w) >= cfg.min_keyword_length
            and w not in self.lexicon.stop_words
            and not _NUMERIC.match(w)
        ]

    def ranked_words(self, text: str) -> List[str]:
        """Top words by (frequency desc, length desc)."""
        counts = Counter(self.candidate_words(text))
        ranked = sorted(counts.items(), key=lambda item: (-item[1], -len(item[0])))
        return [word for word, _ in ranked[: self.config.top_frequency_words]]

    def extract(self, text: str) -> List[str]:
        """Extract keywords from a single text.

        Args:
            text: Free text (None is treated as empty).

        Returns:
            Hashtags, then mentions, then frequency-ranked words; deduplicated
            in first-seen order and truncated to max_keywords.
        """
        text = text or ""
        hashtags = [tag.lower() for tag in _HASHTAG.findall(text)]
        mentions = [mention.lower() for mention in _MENTION.findall(text)]

        keywords: List[str] = []
        seen = set()
        for keyword in hashtags + mentions + self.ranked_words(text):
            if keyword not in seen:
                seen.add(keyword)
                keywords.append(keyword)
        return keywords[: self.config.max_keywords]


_DEFAULT_EXTRACTOR = KeywordExtractor()


def extract_keywords(text: str) -> List[str]:
    """Extract keywords with the default lexicon and configuration."""
    return _DEFAULT_EXTRACTOR.extract(text)
