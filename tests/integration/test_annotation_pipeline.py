"""Integration tests for the end-to-end annotation flow.

CSV/demo ingestion -> batch annotation -> region/timeline/overview
aggregation -> JSON persistence, plus the annotate_dataset CLI run().
"""

from __future__ import annotations

import argparse
import json
import random
import sys
from pathlib import Path

import pytest

from geosentiment.analysis.keyword_stats import analyze_keywords
from geosentiment.analysis.overview import compute_overview, generate_insights
from geosentiment.analysis.record_filter import filter_records
from geosentiment.analysis.region_aggregator import aggregate_regions
from geosentiment.analysis.timeline_aggregator import build_timeline
from geosentiment.annotator import annotate_records
from geosentiment.io.csv_loader import parse_csv_text
from geosentiment.io.demo_data import SAMPLE_TEXTS, generate_demo_records
from geosentiment.io.persistence import load_records, save_records
from geosentiment.models.records import RecordFilter

_SCRIPTS_DIR = Path(__file__).resolve().parent.parent.parent / "scripts"


@pytest.fixture(scope="module")
def annotate_dataset():
    """The CLI module, imported from scripts/."""
    sys.path.insert(0, str(_SCRIPTS_DIR))
    try:
        import annotate_dataset as module
    finally:
        sys.path.remove(str(_SCRIPTS_DIR))
    return module


class TestCsvToAggregates:
    def test_csv_pipeline(self, posts_csv_text, rng, fixed_now):
        """Uploaded CSV rows flow through annotation into consistent aggregates."""
        raw = parse_csv_text(posts_csv_text, rng=rng, now=fixed_now)
        records = annotate_records(raw, batch_id="csv-test")
        assert len(records) == len(raw) == 6

        # The first two rows are the Paris pair; later rows may land anywhere
        (paris,) = aggregate_regions(records[:2])
        assert paris.region == "Paris, France"
        assert paris.total_posts == 2
        assert paris.sentiment_distribution.positive == 0.5
        assert paris.sentiment_distribution.negative == 0.5

        regions = aggregate_regions(records)
        assert sum(r.total_posts for r in regions) == len(records)

        timeline = build_timeline(records)
        assert sum(p.post_count for p in timeline) == len(records)
        days = [p.date for p in timeline]
        assert days == sorted(set(days))

    def test_fixture_records(self, sample_annotated_records):
        """The JSON fixture annotates with the expected event types."""
        by_text = {r.text: r for r in sample_annotated_records}
        assert by_text["Earthquake causes massive damage, rescue teams deployed"].event_type == "disaster"
        assert by_text["I love this amazing movie!"].event_type == "general"
        assert by_text[
            "Disappointed with the election results. Democracy seems to be failing us."
        ].event_type == "politics"

    def test_region_excludes_record_without_city(self, sample_annotated_records):
        """The fixture record without city/country is not attributed to any region."""
        regions = aggregate_regions(sample_annotated_records)
        assert sum(r.total_posts for r in regions) == len(sample_annotated_records) - 1
        assert regions[0].region == "New York, USA"

    def test_filter_then_aggregate(self, sample_annotated_records):
        """Dashboard filters compose with the aggregators."""
        news = filter_records(sample_annotated_records, RecordFilter(source="news"))
        assert {r.source for r in news} == {"news"}
        stats = compute_overview(news, aggregate_regions(news))
        assert stats.total_posts == len(news)
        assert generate_insights(stats)[0].startswith("Overall sentiment is")

    def test_keyword_explorer(self, sample_annotated_records):
        """Keyword statistics reference only existing record ids."""
        ids = {r.id for r in sample_annotated_records}
        for stat in analyze_keywords(sample_annotated_records):
            assert set(stat.record_ids) <= ids
            assert stat.count == len(stat.record_ids)


class TestDemoData:
    def test_demo_records(self, fixed_now):
        """Demo records use the sample texts, known cities and the 30-day window."""
        raw = generate_demo_records(25, rng=random.Random(5), now=fixed_now)
        assert len(raw) == 25
        assert all(r.text in SAMPLE_TEXTS for r in raw)
        assert all(r.location.region_key for r in raw)
        assert all(r.source in ("twitter", "news", "upload") for r in raw)

    def test_demo_seeded(self, fixed_now):
        """The same seed reproduces the same demo data."""
        first = generate_demo_records(10, rng=random.Random(9), now=fixed_now)
        second = generate_demo_records(10, rng=random.Random(9), now=fixed_now)
        assert first == second

    def test_demo_roundtrip_through_disk(self, tmp_path, fixed_now):
        """Annotated demo records persist and reload unchanged."""
        records = annotate_records(generate_demo_records(15, rng=random.Random(2), now=fixed_now))
        save_records(records, tmp_path / "records.json")
        assert load_records(tmp_path / "records.json") == records


class TestCli:
    def test_run_with_csv(self, annotate_dataset, fixtures_dir, tmp_path):
        """run() writes records, regions, timeline and overview JSON for a CSV input."""
        args = argparse.Namespace(
            input=str(fixtures_dir / "sample_posts.csv"),
            demo=None,
            output_dir=str(tmp_path),
            max_workers=2,
            seed=1,
            log_level="INFO",
        )
        out_dir = annotate_dataset.run(args)

        assert out_dir.parent == tmp_path
        assert out_dir.name.endswith("_sample_posts")
        for name in ("records.json", "regions.json", "timeline.json", "overview.json", "keywords.json"):
            assert (out_dir / name).exists()
        records = json.loads((out_dir / "records.json").read_text(encoding="utf-8"))
        assert len(records) == 6
        overview = json.loads((out_dir / "overview.json").read_text(encoding="utf-8"))
        assert overview["total_posts"] == 6

    def test_run_with_demo(self, annotate_dataset, tmp_path):
        """--demo N generates and annotates N records."""
        args = annotate_dataset.build_arg_parser().parse_args(
            ["--demo", "12", "--seed", "3", "--output-dir", str(tmp_path)]
        )
        out_dir = annotate_dataset.run(args)
        assert len(load_records(out_dir / "records.json")) == 12

    def test_input_and_demo_are_exclusive(self, annotate_dataset):
        """Exactly one of --input / --demo is required."""
        parser = annotate_dataset.build_arg_parser()
        with pytest.raises(SystemExit):
            parser.parse_args([])
        with pytest.raises(SystemExit):
            parser.parse_args(["--input", "x.csv", "--demo", "5"])

    def test_environment_defaults_apply(self, annotate_dataset, tmp_path, monkeypatch):
        """Unset flags fall back to OUTPUT_ROOT, ANNOTATOR_MAX_WORKERS and LOG_LEVEL."""
        monkeypatch.setenv("OUTPUT_ROOT", str(tmp_path))
        monkeypatch.setenv("ANNOTATOR_MAX_WORKERS", "3")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        args = annotate_dataset.build_arg_parser().parse_args(["--demo", "5", "--seed", "4"])

        config = annotate_dataset.build_config(args)
        assert config.output_root == str(tmp_path)
        assert config.max_workers == 3
        assert config.log_level == "DEBUG"

        out_dir = annotate_dataset.run(args)
        assert out_dir.parent == tmp_path
        assert len(load_records(out_dir / "records.json")) == 5

    def test_flags_override_environment(self, annotate_dataset, tmp_path, monkeypatch):
        """Explicit flags win over environment settings."""
        monkeypatch.setenv("ANNOTATOR_MAX_WORKERS", "3")
        args = annotate_dataset.build_arg_parser().parse_args(
            ["--demo", "5", "--max-workers", "2", "--output-dir", str(tmp_path)]
        )
        config = annotate_dataset.build_config(args)
        assert config.max_workers == 2
        assert config.output_root == str(tmp_path)

    def test_keyword_limit_from_config(self, annotate_dataset, tmp_path):
        """keywords.json holds at most keyword_explorer_limit entries."""
        args = annotate_dataset.build_arg_parser().parse_args(
            ["--demo", "40", "--seed", "6", "--output-dir", str(tmp_path)]
        )
        config = annotate_dataset.build_config(args)
        config.keyword_explorer_limit = 3
        out_dir = annotate_dataset.run(args, config)
        keywords = json.loads((out_dir / "keywords.json").read_text(encoding="utf-8"))
        assert 0 < len(keywords) <= 3
