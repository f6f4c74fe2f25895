"""GeoSentiment — text annotation and geographic/temporal aggregation engine.

Public API surface:
    - AnnotatorConfig: Runtime configuration
    - annotate_record / annotate_records: Raw record -> AnnotatedRecord
    - aggregate_regions / build_timeline: Per-region and per-day aggregates
"""

__version__ = "1.0.0"
__author__ = "GeoSentiment Contributors"

from config.settings import AnnotatorConfig
from geosentiment.analysis.region_aggregator import aggregate_regions
from geosentiment.analysis.timeline_aggregator import build_timeline
from geosentiment.annotator import RecordAnnotator, annotate_record, annotate_records

__all__ = [
    "__version__",
    "AnnotatorConfig",
    "RecordAnnotator",
    "annotate_record",
    "annotate_records",
    "aggregate_regions",
    "build_timeline",
]
