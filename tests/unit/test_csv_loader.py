"""Unit tests for geosentiment.io.csv_loader."""

from __future__ import annotations

import pytest

from config.settings import AnnotatorConfig
from geosentiment.io.csv_loader import load_csv_file, normalize_source, parse_csv_text
from geosentiment.utils.geo_utils import known_cities


class TestParseCsvText:
    def test_usable_rows_kept_in_order(self, posts_csv_text, rng, fixed_now):
        """Short-text and short rows are skipped; the rest stay in file order."""
        records = parse_csv_text(posts_csv_text, rng=rng, now=fixed_now)
        assert [r.text for r in records] == [
            "I love this amazing movie!",
            "Terrible traffic today, so frustrated",
            "Earthquake causes massive damage, rescue teams deployed",
            "Great concert at the stadium tonight",
            "Stock market crashed again, investors are scared",
            "Beautiful sunset at the beach today",
        ]

    def test_timestamps_normalized(self, posts_csv_text, rng, fixed_now):
        """Valid timestamps are normalized to ISO 8601 UTC with milliseconds."""
        records = parse_csv_text(posts_csv_text, rng=rng, now=fixed_now)
        assert records[0].timestamp == "2024-03-01T10:00:00.000Z"

    def test_invalid_timestamp_uses_now(self, posts_csv_text, rng, fixed_now):
        """An unparseable timestamp defaults to the reference instant."""
        records = parse_csv_text(posts_csv_text, rng=rng, now=fixed_now)
        assert records[3].timestamp == "2024-03-10T12:00:00.000Z"

    def test_missing_timestamp_within_window(self, posts_csv_text, rng, fixed_now):
        """A missing timestamp defaults to a random instant in the last 30 days."""
        records = parse_csv_text(posts_csv_text, rng=rng, now=fixed_now)
        assert "2024-02-09" <= records[5].timestamp <= "2024-03-10T12:00:00.000Z"

    def test_location_and_source(self, posts_csv_text, rng, fixed_now):
        """Coordinates, labels and normalized sources come from their columns."""
        first, second = parse_csv_text(posts_csv_text, rng=rng, now=fixed_now)[:2]
        assert (first.location.lat, first.location.lng) == (48.8566, 2.3522)
        assert first.location.region_key == "Paris, France"
        assert first.source == "twitter"
        assert second.source == "news"

    def test_invalid_coordinates_use_random_city(self, posts_csv_text, rng, fixed_now):
        """Out-of-range coordinates are replaced by a known city."""
        record = parse_csv_text(posts_csv_text, rng=rng, now=fixed_now)[4]
        assert record.location in known_cities()

    def test_text_truncated(self, rng):
        """Text longer than max_text_length is truncated."""
        csv_text = "text,lat,lng\n" + "x" * 40 + ",1,2\n"
        records = parse_csv_text(csv_text, config=AnnotatorConfig(max_text_length=10), rng=rng)
        assert records[0].text == "x" * 10

    def test_missing_coordinate_columns_use_random_city(self, rng):
        """Without lat/lng columns every record gets a known city."""
        records = parse_csv_text("message\nhello world\n", rng=rng)
        assert records[0].location in known_cities()
        assert records[0].source == "upload"

    def test_platform_header_is_not_latitude(self, rng):
        """'platform' is a source column, never a coordinate column."""
        csv_text = "content,platform,latitude,longitude,city,country\nhi there,twitter,10,20,Lagos,Nigeria\n"
        (record,) = parse_csv_text(csv_text, rng=rng)
        assert (record.location.lat, record.location.lng) == (10.0, 20.0)
        assert record.source == "twitter"

    def test_out_of_range_timestamp_uses_now(self, rng, fixed_now):
        """A timestamp that overflows when converted to UTC defaults like an invalid one."""
        csv_text = (
            "text,timestamp,lat,lng\n"
            "first post here,2024-03-01T10:00:00Z,1,2\n"
            "second post here,0001-01-01T00:30:00+01:00,1,2\n"
        )
        records = parse_csv_text(csv_text, rng=rng, now=fixed_now)
        assert [r.timestamp for r in records] == [
            "2024-03-01T10:00:00.000Z",
            "2024-03-10T12:00:00.000Z",
        ]

    def test_header_only_raises(self):
        """A CSV without data rows is rejected."""
        with pytest.raises(ValueError, match="at least a header row"):
            parse_csv_text("text,timestamp\n")

    def test_no_usable_rows_raises(self, rng):
        """A CSV whose rows are all unusable is rejected."""
        with pytest.raises(ValueError, match="No valid data rows"):
            parse_csv_text("text,timestamp\nok,2024-01-01\n", rng=rng)


class TestLoadCsvFile:
    def test_load_fixture(self, fixtures_dir, rng):
        """load_csv_file reads and parses a file from disk."""
        records = load_csv_file(fixtures_dir / "sample_posts.csv", rng=rng)
        assert len(records) == 6

    def test_missing_file_raises(self, tmp_path):
        """A missing file propagates OSError."""
        with pytest.raises(OSError):
            load_csv_file(tmp_path / "missing.csv")


class TestNormalizeSource:
    @pytest.mark.parametrize("value,expected", [
        ("Twitter", "twitter"),
        ("tweetdeck", "twitter"),
        ("BBC News", "news"),
        ("", "upload"),
        ("facebook", "upload"),
    ])
    def test_mapping(self, value, expected):
        """Free-form values map onto twitter, news or upload."""
        assert normalize_source(value) == expected
