"""GeoSentiment — All default threshold values and configuration constants.

All tuneable values live here. Never hard-code magic numbers in source files.
Import constants from this module; override via AnnotatorConfig at runtime.
"""

# ── Negation and modifier windows ──────────────────────────────────────────────
# Number of preceding tokens scanned for a negation marker
NEGATION_WINDOW: int = 3

# Number of preceding tokens scanned for an intensifier or diminisher
MODIFIER_WINDOW: int = 2

# Multiplier applied when an intensifier precedes a lexicon match
INTENSIFIER_MULTIPLIER: float = 1.5

# Multiplier applied when a diminisher precedes a lexicon match
DIMINISHER_MULTIPLIER: float = 0.7

# ── Punctuation emphasis ───────────────────────────────────────────────────────
# Bonus added to every sentiment match per run of two or more '!'
EXCLAMATION_BONUS: float = 0.2

# Bonus added to every sentiment match per run of two or more '?'
QUESTION_BONUS: float = 0.1

# ── Sentiment confidence ───────────────────────────────────────────────────────
# Fraction of tokens expected to carry sentiment for full confidence
EVIDENCE_DENSITY: float = 0.3

# Confidence floor for a positive or negative label
POLARIZED_CONFIDENCE_FLOOR: float = 0.4

# Confidence floor for a neutral label
NEUTRAL_CONFIDENCE_FLOOR: float = 0.3

# Damping applied to the raw confidence of a neutral label
NEUTRAL_CONFIDENCE_DAMPING: float = 0.8

# ── Emotion scoring ────────────────────────────────────────────────────────────
# Fraction of tokens used to normalize raw emotion scores
EMOTION_DENSITY: float = 0.1

# Gain applied to the normalized emotion score before clamping to 1.0
EMOTION_GAIN: float = 1.5

# Default value assigned to joy/sadness when no emotion keyword matched
EMOTION_FALLBACK_VALUE: float = 0.4

# ── Keyword extraction ─────────────────────────────────────────────────────────
# Maximum keywords kept per record
MAX_KEYWORDS: int = 8

# Number of frequency-ranked words considered before deduplication
TOP_FREQUENCY_WORDS: int = 10

# Words shorter than this are discarded
MIN_KEYWORD_LENGTH: int = 3

# ── Aggregation ────────────────────────────────────────────────────────────────
# Trending keywords kept per region
TRENDING_KEYWORDS_PER_REGION: int = 5

# Keywords returned by the keyword explorer
KEYWORD_EXPLORER_LIMIT: int = 50

# ── Ingestion ──────────────────────────────────────────────────────────────────
# Input text is truncated to this many characters before annotation
MAX_TEXT_LENGTH: int = 500

# Shortest text (in characters) accepted from a CSV row
MIN_TEXT_LENGTH: int = 3

# Missing timestamps are spread over this many days before now
RANDOM_TIMESTAMP_DAYS: int = 30

# Worker threads used for batch annotation (1 = sequential)
ANNOTATOR_MAX_WORKERS: int = 1

# ── Output and logging ─────────────────────────────────────────────────────────
OUTPUT_ROOT: str = "outputs/runs"
DEFAULT_LOG_LEVEL: str = "INFO"
