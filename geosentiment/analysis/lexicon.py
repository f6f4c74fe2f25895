"""Word lists for GeoSentiment scoring.

The Lexicon is immutable configuration data: scorers receive one at
construction and only ever test membership. DEFAULT_LEXICON carries the
stock English word lists.

Entries containing spaces or apostrophes ("kind of", "don't") are kept for
completeness, but the tokenizer splits on non-word characters, so only
single-token entries can ever match during a token scan.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping

from geosentiment.models.records import Emotion

_POSITIVE_WORDS: FrozenSet[str] = frozenset({
    "good", "great", "awesome", "amazing", "excellent", "fantastic", "wonderful",
    "love", "happy", "joy", "celebrate", "success", "win", "victory", "beautiful",
    "perfect", "brilliant", "outstanding", "superb", "delighted", "thrilled",
    "excited", "pleased", "satisfied", "grateful", "blessed", "fortunate",
    "incredible", "spectacular", "magnificent", "marvelous", "phenomenal",
    "impressive", "remarkable", "extraordinary", "fabulous", "terrific",
    "splendid", "divine", "glorious", "heavenly", "blissful", "ecstatic",
    "elated", "euphoric", "overjoyed", "cheerful", "optimistic", "hopeful",
    "promoted", "wedding", "graduation", "birthday", "vacation", "paradise",
    "championship", "milestone", "achievement", "dreams", "treasure",
})

_NEGATIVE_WORDS: FrozenSet[str] = frozenset({
    "bad", "terrible", "awful", "horrible", "hate", "angry", "sad", "disappointed",
    "frustrated", "disaster", "crisis", "problem", "fail", "loss", "defeat",
    "worried", "concerned", "upset", "disgusted", "furious", "devastated",
    "miserable", "depressed", "anxious", "stressed", "annoyed", "irritated",
    "outraged", "appalled", "shocked", "horrified", "disgusting", "revolting",
    "pathetic", "useless", "worthless", "hopeless", "tragic", "catastrophic",
    "dreadful", "atrocious", "abysmal", "deplorable", "despicable", "vile",
    "wretched", "grim", "bleak", "dire", "ominous", "sinister",
    "heartbroken", "grieving", "demolished", "shattered", "corruption",
    "discrimination", "injustice", "layoffs", "recession", "crime",
})

_INTENSIFIERS: FrozenSet[str] = frozenset({
    "very", "extremely", "incredibly", "absolutely", "totally", "completely",
    "utterly", "quite", "really", "truly", "deeply", "highly", "tremendously",
    "enormously", "exceptionally",
})

_DIMINISHERS: FrozenSet[str] = frozenset({
    "slightly", "somewhat", "rather", "fairly", "pretty", "kind of", "sort of",
    "a little", "a bit", "moderately",
})

_NEGATORS: FrozenSet[str] = frozenset({
    "not", "no", "never", "nothing", "nobody", "nowhere", "neither", "nor", "none",
    "don't", "doesn't", "didn't", "won't", "wouldn't", "can't", "couldn't",
    "shouldn't", "mustn't",
})

_EMOTION_WORDS = {
    Emotion.JOY: frozenset({
        "happy", "joy", "celebrate", "excited", "delighted", "thrilled", "ecstatic",
        "cheerful", "elated", "euphoric", "blissful", "overjoyed", "gleeful", "jubilant",
        "exuberant", "promoted", "wedding", "graduation", "birthday", "vacation",
        "paradise", "championship", "milestone", "achievement", "dreams", "treasure",
        "amazing", "wonderful", "fantastic", "incredible", "perfect", "brilliant",
    }),
    Emotion.SADNESS: frozenset({
        "sad", "cry", "depressed", "disappointed", "grief", "sorrow", "heartbroken",
        "melancholy", "gloomy", "despondent", "dejected", "downcast", "mournful",
        "sorrowful", "lost", "beloved", "passed", "away", "grieving", "memories",
        "ended", "empty", "demolished", "distance", "failed", "shattered", "closed",
        "rainy", "overwhelms", "heavy", "miss", "forever",
    }),
    Emotion.ANGER: frozenset({
        "angry", "mad", "furious", "rage", "hate", "annoyed", "irritated", "outraged",
        "livid", "irate", "incensed", "enraged", "infuriated", "aggravated", "resentful",
        "traffic", "terrible", "rude", "unacceptable", "lies", "corruption", "loud",
        "respect", "overcharged", "destruction", "discrimination", "injustice",
        "boil", "fed up", "outrageous", "unbelievable",
    }),
    Emotion.FEAR: frozenset({
        "scared", "afraid", "terrified", "worried", "anxious", "panic", "frightened",
        "nervous", "apprehensive", "alarmed", "concerned", "uneasy", "distressed",
        "petrified", "earthquake", "warning", "safety", "layoffs", "financial",
        "security", "strange", "noise", "medical", "test", "dark", "alley",
        "recession", "climate", "crime", "rates", "racing",
    }),
    Emotion.SURPRISE: frozenset({
        "surprised", "shocked", "amazed", "astonished", "stunned", "incredible",
        "unbelievable", "unexpected", "startled", "bewildered", "flabbergasted",
        "dumbfounded", "lottery", "cannot", "believe", "visit", "pregnant",
        "promotion", "nowhere", "discovered", "hidden", "talent", "messaged",
        "twenty", "years", "odds", "package", "treasure", "meteor", "shower",
    }),
}

_STOP_WORDS: FrozenSet[str] = frozenset({
    "the", "and", "for", "are", "but", "not", "you", "all", "can", "had", "was",
    "one", "our", "out", "day", "get", "has", "him", "his", "how", "its", "may",
    "new", "now", "old", "see", "two", "who", "boy", "did", "does", "let", "put",
    "say", "she", "too", "use", "this", "that", "with", "have", "from", "they",
    "know", "want", "been", "good", "much", "some", "time", "very", "when", "come",
    "here", "just", "like", "long", "make", "many", "over", "such", "take", "than",
    "them", "well", "were",
})


def _frozen(words: Iterable[str]) -> FrozenSet[str]:
    return frozenset(w.lower() for w in words)


@dataclass(frozen=True)
class Lexicon:
    """Set-backed word lists for sentiment, emotion and keyword scoring."""

    positive: FrozenSet[str] = _POSITIVE_WORDS
    negative: FrozenSet[str] = _NEGATIVE_WORDS
    intensifiers: FrozenSet[str] = _INTENSIFIERS
    diminishers: FrozenSet[str] = _DIMINISHERS
    negators: FrozenSet[str] = _NEGATORS
    stop_words: FrozenSet[str] = _STOP_WORDS
    emotions: Mapping[str, FrozenSet[str]] = field(
        default_factory=lambda: MappingProxyType(dict(_EMOTION_WORDS))
    )

    def __post_init__(self) -> None:
        missing = [e for e in Emotion.ALL if e not in self.emotions]
        if missing:
            raise ValueError(f"Lexicon is missing emotion categories: {missing}")
        # Normalize caller-supplied lists to lowercase frozensets
        for name in ("positive", "negative", "intensifiers", "diminishers",
                     "negators", "stop_words"):
            object.__setattr__(self, name, _frozen(getattr(self, name)))
        object.__setattr__(
            self,
            "emotions",
            MappingProxyType({e: _frozen(self.emotions[e]) for e in Emotion.ALL}),
        )

    def is_positive(self, word: str) -> bool:
        return word in self.positive

    def is_negative(self, word: str) -> bool:
        return word in self.negative

    def is_emotion_word(self, emotion: str, word: str) -> bool:
        """Return True if word belongs to the given emotion category."""
        return word in self.emotions[emotion]


DEFAULT_LEXICON = Lexicon()
