"""Unit tests for geosentiment.analysis.timeline_aggregator."""

from __future__ import annotations

import pytest

from geosentiment.analysis.timeline_aggregator import (
    build_timeline,
    mean_emotions,
    polarity_value,
    weighted_sentiment,
)


class TestBuildTimeline:
    def test_days_strictly_ascending(self, make_record):
        """Output days are unique and strictly ascending regardless of input order."""
        records = [
            make_record(timestamp="2024-03-03T09:00:00Z"),
            make_record(timestamp="2024-03-01T09:00:00Z"),
            make_record(timestamp="2024-03-03T23:59:00Z"),
            make_record(timestamp="2024-03-02T00:00:00Z"),
        ]
        days = [point.date for point in build_timeline(records)]
        assert days == ["2024-03-01", "2024-03-02", "2024-03-03"]

    def test_post_counts(self, make_record):
        """post_count is the number of records bucketed into each day."""
        records = [
            make_record(timestamp="2024-03-01T01:00:00Z"),
            make_record(timestamp="2024-03-01T22:00:00Z"),
            make_record(timestamp="2024-03-02T12:00:00Z"),
        ]
        assert [p.post_count for p in build_timeline(records)] == [2, 1]

    def test_confidence_weighted_score(self, make_record):
        """Score is the mean of confidence x polarity over the day."""
        records = [
            make_record(label="positive", confidence=0.8),
            make_record(label="negative", confidence=0.4),
            make_record(label="neutral", confidence=0.9),
        ]
        (point,) = build_timeline(records)
        assert point.sentiment_score == pytest.approx((0.8 - 0.4) / 3)

    def test_mean_emotions(self, make_record):
        """Emotion scores are per-dimension arithmetic means."""
        records = [
            make_record(emotions={"joy": 1.0, "fear": 0.2}),
            make_record(emotions={"joy": 0.0, "fear": 0.4}),
        ]
        (point,) = build_timeline(records)
        assert point.emotion_scores.joy == pytest.approx(0.5)
        assert point.emotion_scores.fear == pytest.approx(0.3)
        assert point.emotion_scores.anger == 0.0

    def test_timezone_offsets_bucket_by_utc_day(self, make_record):
        """Offset timestamps are converted to UTC before truncation."""
        records = [make_record(timestamp="2024-03-01T23:30:00-05:00")]
        assert build_timeline(records)[0].date == "2024-03-02"

    def test_invalid_timestamp_skipped(self, make_record, caplog):
        """Unparseable timestamps are skipped with a warning."""
        records = [
            make_record(timestamp="garbage"),
            make_record(timestamp=""),
            make_record(timestamp="2024-03-01T12:00:00Z"),
        ]
        with caplog.at_level("WARNING", logger="geosentiment"):
            timeline = build_timeline(records)
        assert len(timeline) == 1
        assert timeline[0].post_count == 1
        assert "invalid timestamp" in caplog.text

    def test_empty_input(self):
        """No records, no points."""
        assert build_timeline([]) == []


class TestHelpers:
    @pytest.mark.parametrize("label,expected", [
        ("positive", 1.0),
        ("neutral", 0.0),
        ("negative", -1.0),
        ("unknown", 0.0),
    ])
    def test_polarity_value(self, label, expected):
        """Labels map to +1 / 0 / -1; unknown labels count as neutral."""
        assert polarity_value(label) == expected

    def test_weighted_sentiment_bounds(self, make_record):
        """Fully confident positives reach +1."""
        records = [make_record(label="positive", confidence=1.0)] * 3
        assert weighted_sentiment(records) == pytest.approx(1.0)

    def test_mean_emotions_empty(self):
        """An empty list averages to all zeros."""
        assert max(mean_emotions([]).as_dict().values()) == 0.0


class TestOutOfRangeTimestamps:
    @pytest.mark.parametrize("raw", ["0001-01-01T00:30:00+01:00", "9999-12-31T23:30:00-05:00"])
    def test_unconvertible_timestamp_skipped(self, make_record, raw):
        """A timestamp that parses but overflows in UTC is skipped like any invalid one."""
        records = [make_record(timestamp="2024-01-15T10:00:00Z"), make_record(timestamp=raw)]
        assert [p.date for p in build_timeline(records)] == ["2024-01-15"]
