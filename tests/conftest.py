"""Shared pytest fixtures for GeoSentiment tests.

Conventions:
- Fixture data lives in tests/fixtures/ as static JSON/CSV files
- Randomness (defaulted timestamps, random cities) always goes through a seeded rng
- No network access and no writes outside tmp_path
"""

from __future__ import annotations

import json
import random
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

import pytest

_FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ── Raw fixture data loaders ─────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    return _FIXTURES_DIR


@pytest.fixture(scope="session")
def posts_raw() -> List[Dict[str, Any]]:
    """Eight ingress-shaped records over 2024-03-01..04 (Paris x2, Tokyo, New York x3, London, no city)."""
    with open(_FIXTURES_DIR / "sample_posts.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture(scope="session")
def posts_csv_text() -> str:
    """Uploaded CSV with good rows, a short-text row, a short row and bad timestamps/coordinates."""
    return (_FIXTURES_DIR / "sample_posts.csv").read_text(encoding="utf-8")


# ── Model object fixtures ────────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def sample_raw_records(posts_raw):
    """RawRecord list built from sample_posts.json."""
    from geosentiment.models.records import RawRecord

    return [RawRecord.from_dict(item) for item in posts_raw]


@pytest.fixture(scope="session")
def sample_annotated_records(sample_raw_records):
    """AnnotatedRecord list produced by the default annotator."""
    from geosentiment.annotator import annotate_records

    return annotate_records(sample_raw_records, batch_id="test-fixture")


@pytest.fixture
def make_record():
    """Factory for hand-built AnnotatedRecord values with controlled annotations."""
    from geosentiment.models.records import (
        AnnotatedRecord,
        EmotionScores,
        Location,
        SentimentResult,
        Source,
    )

    counter = {"n": 0}

    def _make(
        label: str = "neutral",
        confidence: float = 0.5,
        score: float = 0.5,
        emotions: Dict[str, float] | None = None,
        keywords: List[str] | None = None,
        timestamp: str = "2024-03-01T12:00:00.000Z",
        city: str | None = "Paris",
        country: str | None = "France",
        source: str = Source.TWITTER,
        event_type: str = "general",
        text: str = "sample text",
    ):
        counter["n"] += 1
        return AnnotatedRecord(
            id=f"rec-{counter['n']}",
            text=text,
            timestamp=timestamp,
            location=Location(lat=48.8566, lng=2.3522, city=city, country=country),
            source=source,
            sentiment=SentimentResult(label=label, score=score, confidence=confidence),
            emotions=EmotionScores(**(emotions or {})),
            keywords=list(keywords or []),
            event_type=event_type,
        )

    return _make


# ── Configuration and randomness ─────────────────────────────────────────────────

@pytest.fixture
def test_config():
    """AnnotatorConfig with defaults, independent of the caller's environment."""
    from config.settings import AnnotatorConfig

    return AnnotatorConfig(max_workers=1, max_text_length=500, output_root="outputs/test-runs")


@pytest.fixture
def rng() -> random.Random:
    return random.Random(42)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 10, 12, 0, 0, tzinfo=timezone.utc)
