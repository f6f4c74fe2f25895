"""GeoSentiment analysis package.

Pure analytical functions over the typed models in geosentiment.models; no I/O.
"""

from geosentiment.analysis.emotion_scorer import EmotionScorer, analyze_emotions
from geosentiment.analysis.event_classifier import EventClassifier, classify_event
from geosentiment.analysis.keyword_extractor import KeywordExtractor, extract_keywords
from geosentiment.analysis.keyword_stats import analyze_keywords
from geosentiment.analysis.lexicon import DEFAULT_LEXICON, Lexicon
from geosentiment.analysis.overview import compute_overview, generate_insights
from geosentiment.analysis.record_filter import filter_records
from geosentiment.analysis.region_aggregator import aggregate_regions
from geosentiment.analysis.sentiment_scorer import SentimentScorer, analyze_sentiment
from geosentiment.analysis.timeline_aggregator import build_timeline

__all__ = [
    "DEFAULT_LEXICON",
    "Lexicon",
    "SentimentScorer",
    "analyze_sentiment",
    "EmotionScorer",
    "analyze_emotions",
    "KeywordExtractor",
    "extract_keywords",
    "EventClassifier",
    "classify_event",
    "aggregate_regions",
    "build_timeline",
    "filter_records",
    "analyze_keywords",
    "compute_overview",
    "generate_insights",
]
