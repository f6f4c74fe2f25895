"""CSV ingestion for GeoSentiment.

Turns an uploaded CSV (arbitrary column names) into RawRecord values ready
for annotation. Columns are located by header keywords; missing or invalid
timestamps and coordinates are defaulted here, so the annotation core can
assume well-formed input.
"""

from __future__ import annotations

import csv
import io
import logging
import random
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from config.settings import AnnotatorConfig
from geosentiment.models.records import Location, RawRecord, Source
from geosentiment.utils.date_utils import (
    normalize_timestamp,
    random_recent_timestamp,
    to_iso,
    utc_now,
)
from geosentiment.utils.geo_utils import is_valid_coordinate, random_city
from geosentiment.utils.text import normalize_text

logger = logging.getLogger(__name__)

# Header keywords per column role, matched as substrings of the lowercased header
_TEXT_HEADERS: Tuple[str, ...] = (
    "text", "content", "message", "tweet", "post", "comment", "description", "body",
)
_TIMESTAMP_HEADERS: Tuple[str, ...] = ("timestamp", "date", "time", "created", "published")
_CITY_HEADERS: Tuple[str, ...] = ("city",)
_COUNTRY_HEADERS: Tuple[str, ...] = ("country",)
_SOURCE_HEADERS: Tuple[str, ...] = ("source", "platform")

# Coordinate headers are matched as prefixes ("platform" must not match "lat")
_LAT_PREFIXES: Tuple[str, ...] = ("lat",)
_LNG_PREFIXES: Tuple[str, ...] = ("lng", "lon")


def _find_column(headers: Sequence[str], needles: Tuple[str, ...]) -> Optional[int]:
    for i, header in enumerate(headers):
        if any(needle in header for needle in needles):
            return i
    return None


def _find_prefixed_column(headers: Sequence[str], prefixes: Tuple[str, ...]) -> Optional[int]:
    for i, header in enumerate(headers):
        if header.startswith(prefixes):
            return i
    return None


def _cell(values: Sequence[str], index: Optional[int]) -> str:
    if index is None or index >= len(values):
        return ""
    return values[index].strip()


def _parse_float(value: str) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def normalize_source(value: str) -> str:
    """Map a free-form source/platform value onto twitter, news or upload."""
    lowered = (value or "").lower()
    if "twitter" in lowered or "tweet" in lowered:
        return Source.TWITTER
    if "news" in lowered:
        return Source.NEWS
    return Source.UPLOAD


class _ColumnMap:
    """Column indexes resolved from a CSV header row."""

    def __init__(self, headers: Sequence[str]) -> None:
        self.text = _find_column(headers, _TEXT_HEADERS)
        self.timestamp = _find_column(headers, _TIMESTAMP_HEADERS)
        self.lat = _find_prefixed_column(headers, _LAT_PREFIXES)
        self.lng = _find_prefixed_column(headers, _LNG_PREFIXES)
        self.city = _find_column(headers, _CITY_HEADERS)
        self.country = _find_column(headers, _COUNTRY_HEADERS)
        self.source = _find_column(headers, _SOURCE_HEADERS)


def parse_csv_text(
    csv_text: str,
    config: Optional[AnnotatorConfig] = None,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> List[RawRecord]:
    """Parse CSV text into raw records.

    Rows shorter than the header, or whose text is shorter than
    ``config.min_text_length``, are skipped with a warning. Text is truncated
    to ``config.max_text_length``. Invalid timestamps default to ``now``;
    missing timestamps to a random instant in the last
    ``config.random_timestamp_days`` days. Missing or out-of-range
    coordinates are replaced by a random major city.

    Args:
        csv_text: Full CSV document including the header row.
        config: Ingestion limits (defaults to AnnotatorConfig()).
        rng: Random source for defaulted timestamps and locations.
        now: Reference instant for defaulted timestamps.

    Returns:
        Raw records in file order.

    Raises:
        ValueError: If there is no data row, or no row could be used.
    """
    cfg = config or AnnotatorConfig()
    rng = rng or random.Random()
    now = now or utc_now()

    rows = [row for row in csv.reader(io.StringIO(csv_text or "")) if any(c.strip() for c in row)]
    if len(rows) < 2:
        raise ValueError("CSV must have at least a header row and one data row")

    headers = [h.strip().lower().replace('"', "") for h in rows[0]]
    logger.debug("CSV headers detected: %s", headers)
    columns = _ColumnMap(headers)

    records: List[RawRecord] = []
    for row_number, values in enumerate(rows[1:], start=1):
        if len(values) < len(headers):
            logger.warning("Row %d has fewer columns than headers, skipping", row_number)
            continue

        text = normalize_text(_cell(values, columns.text) or _cell(values, 0))
        if len(text) < cfg.min_text_length:
            logger.warning("Row %d has no valid text content: %r, skipping", row_number, text)
            continue

        raw_timestamp = _cell(values, columns.timestamp)
        if raw_timestamp:
            timestamp = normalize_timestamp(raw_timestamp)
            if timestamp is None:
                logger.warning(
                    "Invalid timestamp %r in row %d, using current time", raw_timestamp, row_number
                )
                timestamp = to_iso(now)
        else:
            timestamp = random_recent_timestamp(cfg.random_timestamp_days, rng=rng, now=now)

        location = _row_location(values, columns, rng, row_number)

        records.append(
            RawRecord(
                text=text[: cfg.max_text_length],
                timestamp=timestamp,
                location=location,
                source=normalize_source(_cell(values, columns.source)),
            )
        )

    logger.info("Parsed %d rows from %d total rows", len(records), len(rows) - 1)
    if not records:
        raise ValueError("No valid data rows could be processed. Please check your CSV format.")
    return records


def _row_location(
    values: Sequence[str],
    columns: _ColumnMap,
    rng: random.Random,
    row_number: int,
) -> Location:
    fallback = random_city(rng)
    if columns.lat is None or columns.lng is None:
        return fallback

    lat = _parse_float(_cell(values, columns.lat))
    lng = _parse_float(_cell(values, columns.lng))
    if not is_valid_coordinate(lat, lng):
        logger.warning(
            "Invalid coordinates lat:%s, lng:%s in row %d, using random location",
            lat, lng, row_number,
        )
        return fallback

    return Location(
        lat=lat,
        lng=lng,
        city=_cell(values, columns.city) if columns.city is not None else fallback.city,
        country=_cell(values, columns.country) if columns.country is not None else fallback.country,
    )


def load_csv_file(
    path: str | Path,
    config: Optional[AnnotatorConfig] = None,
    rng: Optional[random.Random] = None,
) -> List[RawRecord]:
    """Read a CSV file from disk and parse it with parse_csv_text().

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file holds no usable rows.
    """
    with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
        content = f.read()
    logger.info("Loaded CSV %s (%d chars)", path, len(content))
    return parse_csv_text(content, config=config, rng=rng)
