#!/usr/bin/env python3
"""GeoSentiment CLI — annotate a dataset and write dashboard aggregates.

Usage:
    python scripts/annotate_dataset.py --input posts.csv
    python scripts/annotate_dataset.py --demo 200 --seed 7 --output-dir outputs/runs
"""

from __future__ import annotations

import argparse
import logging
import random
import re
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

# Ensure project root is on sys.path for consistent import resolution
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from config.settings import AnnotatorConfig  # noqa: E402
from geosentiment.analysis.keyword_stats import analyze_keywords  # noqa: E402
from geosentiment.analysis.overview import compute_overview, generate_insights  # noqa: E402
from geosentiment.analysis.region_aggregator import aggregate_regions  # noqa: E402
from geosentiment.analysis.timeline_aggregator import build_timeline  # noqa: E402
from geosentiment.annotator import annotate_records  # noqa: E402
from geosentiment.io.csv_loader import load_csv_file  # noqa: E402
from geosentiment.io.demo_data import generate_demo_records  # noqa: E402
from geosentiment.io.persistence import ensure_output_dir, save_json, save_records  # noqa: E402
from geosentiment.utils.logging_utils import configure_logging, get_batch_logger  # noqa: E402


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the argparse argument parser."""
    parser = argparse.ArgumentParser(
        prog="annotate_dataset",
        description="GeoSentiment — annotate text records and aggregate by region and day",
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--input", type=str, help="CSV file with one text record per row")
    source.add_argument("--demo", type=int, metavar="N", help="Generate N demo records instead")

    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Root directory for run outputs (default: $OUTPUT_ROOT or outputs/runs)",
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        default=None,
        help="Worker threads for batch annotation (default: $ANNOTATOR_MAX_WORKERS or 1)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for defaulted timestamps/locations and demo data",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity level (default: $LOG_LEVEL or INFO)",
    )
    return parser


def _make_run_id(label: str) -> str:
    """Sortable run ID: ``YYYYMMDD_HHMMSS_<slug>``."""
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    slug = re.sub(r"[^a-z0-9]+", "_", label.lower())[:40].strip("_") or "run"
    return f"{timestamp}_{slug}"


def build_config(args: argparse.Namespace) -> AnnotatorConfig:
    """Build the run config; flags left unset keep the environment-backed defaults."""
    overrides = {
        "max_workers": args.max_workers,
        "output_root": args.output_dir,
        "log_level": args.log_level,
    }
    return AnnotatorConfig(**{k: v for k, v in overrides.items() if v is not None})


def run(args: argparse.Namespace, config: Optional[AnnotatorConfig] = None) -> Path:
    """Annotate, aggregate and persist; returns the run output directory."""
    config = config or build_config(args)
    rng = random.Random(args.seed)
    label = Path(args.input).stem if args.input else "demo"
    run_id = _make_run_id(label)
    logger = get_batch_logger("cli", run_id)

    if args.input:
        raw_records = load_csv_file(args.input, config=config, rng=rng)
    else:
        raw_records = generate_demo_records(args.demo, rng=rng)
    logger.info("Loaded %d raw records", len(raw_records))

    records = annotate_records(raw_records, config=config, batch_id=run_id)
    regions = aggregate_regions(records, top_keywords=config.trending_keywords_per_region)
    timeline = build_timeline(records)
    overview = compute_overview(records, regions)
    keywords = analyze_keywords(records, limit=config.keyword_explorer_limit)

    out_dir = ensure_output_dir(config.output_root, run_id)
    save_records(records, out_dir / "records.json")
    save_json(regions, out_dir / "regions.json")
    save_json(timeline, out_dir / "timeline.json")
    save_json(overview, out_dir / "overview.json")
    save_json(keywords, out_dir / "keywords.json")

    for line in generate_insights(overview):
        logger.info("Insight: %s", line)
    logger.info(
        "Wrote %d records, %d regions, %d days, %d keywords to %s",
        len(records), len(regions), len(timeline), len(keywords), out_dir,
    )
    return out_dir


def main() -> None:
    """CLI entrypoint."""
    parser = build_arg_parser()
    args = parser.parse_args()
    config = build_config(args)

    try:
        configure_logging(log_level=config.log_level)
    except ValueError as exc:
        parser.error(str(exc))
    logger = logging.getLogger("geosentiment.cli")

    try:
        run(args, config)
    except (OSError, ValueError) as exc:
        logger.error("Annotation failed: %s", exc)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(0)


if __name__ == "__main__":
    main()
