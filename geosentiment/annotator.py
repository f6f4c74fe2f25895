"""Record annotation for GeoSentiment.

RecordAnnotator runs the sentiment, emotion, keyword and event scorers over
one raw record and returns an AnnotatedRecord. annotate_records() applies it
to a batch, skipping (and logging) records whose annotation fails.

Usage:
    from geosentiment.annotator import annotate_records

    annotated = annotate_records(raw_records)
"""

from __future__ import annotations

import logging
import uuid
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Iterable, List, Optional, Union

from config.settings import AnnotatorConfig
from geosentiment.analysis.emotion_scorer import EmotionScorer
from geosentiment.analysis.event_classifier import EventClassifier
from geosentiment.analysis.keyword_extractor import KeywordExtractor
from geosentiment.analysis.lexicon import DEFAULT_LEXICON, Lexicon
from geosentiment.analysis.sentiment_scorer import SentimentScorer
from geosentiment.models.records import AnnotatedRecord, Location, RawRecord
from geosentiment.utils.logging_utils import get_batch_logger

logger = logging.getLogger(__name__)

RawInput = Union[RawRecord, Dict[str, Any]]


def _new_record_id() -> str:
    return f"rec-{uuid.uuid4().hex}"


class RecordAnnotator:
    """Orchestrates the four scorers over single records.

    All scorers share one lexicon and one configuration. The annotator holds
    no mutable state and can be used from several threads at once.
    """

    def __init__(
        self,
        config: Optional[AnnotatorConfig] = None,
        lexicon: Lexicon = DEFAULT_LEXICON,
    ) -> None:
        self.config = config or AnnotatorConfig()
        self.lexicon = lexicon
        self.sentiment_scorer = SentimentScorer(lexicon, self.config)
        self.emotion_scorer = EmotionScorer(lexicon, self.config)
        self.keyword_extractor = KeywordExtractor(lexicon, self.config)
        self.event_classifier = EventClassifier()

    def annotate(self, raw: RawInput) -> AnnotatedRecord:
        """Annotate one record.

        Timestamp, location and source are copied through unchanged; the id
        is freshly generated. Any scorer failure propagates to the caller.

        Args:
            raw: RawRecord or an ingress dict of the same shape.

        Returns:
            Fully annotated record.
        """
        if isinstance(raw, dict):
            raw = RawRecord.from_dict(raw)

        text = raw.text
        keywords = self.keyword_extractor.extract(text)
        return AnnotatedRecord(
            id=_new_record_id(),
            text=text,
            timestamp=raw.timestamp,
            location=Location(
                lat=raw.location.lat,
                lng=raw.location.lng,
                city=raw.location.city,
                country=raw.location.country,
            ),
            source=raw.source,
            sentiment=self.sentiment_scorer.score(text),
            emotions=self.emotion_scorer.score(text),
            keywords=keywords,
            event_type=self.event_classifier.classify(text, keywords),
        )

    def annotate_batch(
        self,
        raw_records: Iterable[RawInput],
        batch_id: Optional[str] = None,
    ) -> List[AnnotatedRecord]:
        """Annotate many records, preserving input order.

        Records that fail are logged and skipped; the batch never aborts.
        With ``config.max_workers > 1`` records are annotated on a thread pool.

        Args:
            raw_records: Records to annotate.
            batch_id: Identifier prefixed to log messages (generated if omitted).

        Returns:
            Annotated records for every input that succeeded.
        """
        batch_id = batch_id or f"batch-{uuid.uuid4().hex[:8]}"
        log = get_batch_logger(__name__, batch_id)
        records = list(raw_records)
        log.info("Annotating %d records (workers=%d)", len(records), self.config.max_workers)

        if self.config.max_workers > 1 and len(records) > 1:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                outcomes = list(executor.map(self._annotate_safely, records))
        else:
            outcomes = [self._annotate_safely(raw) for raw in records]

        annotated: List[AnnotatedRecord] = []
        for index, outcome in enumerate(outcomes):
            if isinstance(outcome, Exception):
                log.warning("Skipping record %d: %s", index, outcome)
                continue
            annotated.append(outcome)

        log.info("Annotated %d/%d records", len(annotated), len(records))
        return annotated

    def _annotate_safely(self, raw: RawInput) -> Union[AnnotatedRecord, Exception]:
        try:
            return self.annotate(raw)
        except Exception as exc:
            return exc


def annotate_record(raw: RawInput, config: Optional[AnnotatorConfig] = None) -> AnnotatedRecord:
    """Annotate a single record with the default lexicon."""
    return RecordAnnotator(config).annotate(raw)


def annotate_records(
    raw_records: Iterable[RawInput],
    config: Optional[AnnotatorConfig] = None,
    batch_id: Optional[str] = None,
) -> List[AnnotatedRecord]:
    """Annotate a batch of records with the default lexicon, skipping failures."""
    return RecordAnnotator(config).annotate_batch(raw_records, batch_id=batch_id)
