"""JSON persistence utilities for GeoSentiment.

Atomic file writes (write-to-temp-then-rename) and safe JSON load/save for
annotated records and aggregates. No business logic — file I/O only.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, List, Optional

from geosentiment.models.records import AnnotatedRecord

logger = logging.getLogger(__name__)


class _DataclassEncoder(json.JSONEncoder):
    """JSON encoder that handles dataclasses and Path objects."""

    def default(self, obj: Any) -> Any:
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return dataclasses.asdict(obj)
        if isinstance(obj, Path):
            return str(obj)
        return super().default(obj)


def save_json(data: Any, path: str | Path, indent: int = 2) -> None:
    """Atomically write data to a JSON file.

    Creates parent directories if they do not exist.

    Args:
        data: Data to serialize. Supports dicts, lists, dataclasses, and Path objects.
        path: Output file path.
        indent: JSON indentation level (default: 2).
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        serialized = json.dumps(data, indent=indent, ensure_ascii=False, cls=_DataclassEncoder)
    except (TypeError, ValueError) as exc:
        logger.error("JSON serialization failed for %s: %s", path, exc)
        raise

    with tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        dir=path.parent,
        delete=False,
        suffix=".tmp",
    ) as tmp:
        tmp.write(serialized)
        tmp_path = tmp.name

    try:
        os.replace(tmp_path, path)
    except OSError as exc:
        os.unlink(tmp_path)
        logger.error("Atomic rename failed for %s: %s", path, exc)
        raise

    logger.debug("Saved JSON to %s (%d bytes)", path, len(serialized))


def load_json(path: str | Path) -> Optional[Any]:
    """Load and parse a JSON file.

    Returns None if the file does not exist or cannot be parsed.
    """
    path = Path(path)
    if not path.exists():
        logger.debug("JSON file not found: %s", path)
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Failed to load JSON from %s: %s", path, exc)
        return None


def save_records(records: List[AnnotatedRecord], path: str | Path) -> None:
    """Write annotated records as a JSON array."""
    save_json([record.to_dict() for record in records], path)


def load_records(path: str | Path) -> List[AnnotatedRecord]:
    """Load annotated records written by save_records().

    Missing or unreadable files yield an empty list; malformed entries are skipped.
    """
    data = load_json(path)
    if not isinstance(data, list):
        return []

    records: List[AnnotatedRecord] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            logger.warning("Skipping non-object entry %d in %s", index, path)
            continue
        try:
            records.append(AnnotatedRecord.from_dict(item))
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Skipping malformed record %d in %s: %s", index, path, exc)
    return records


def ensure_output_dir(base_dir: str | Path, run_id: str) -> Path:
    """Create and return the output directory for a CLI run."""
    run_dir = Path(base_dir) / run_id
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir
