"""Logging setup for GeoSentiment.

configure_logging() applies config/logging.yaml once per process (the CLI
calls it; library code never does). Library modules log through
``logging.getLogger(__name__)``; batch-scoped code uses get_batch_logger() so
each line names the annotation batch or CLI run it belongs to.
"""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Any, MutableMapping, Optional, Tuple

import yaml

_DEFAULT_CONFIG = Path(__file__).resolve().parent.parent.parent / "config" / "logging.yaml"
_FALLBACK_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
NAMESPACE = "geosentiment"


def _level_name(log_level: Optional[str]) -> Optional[str]:
    if not log_level:
        return None
    name = log_level.strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ValueError(f"Unknown log level: {log_level!r}")
    return name


def configure_logging(
    config_path: Optional[str] = None,
    log_level: Optional[str] = None,
) -> None:
    """Apply the YAML logging configuration.

    Without a readable YAML file, a console basicConfig is used instead.

    Args:
        config_path: Path to a dictConfig YAML file (defaults to config/logging.yaml).
        log_level: Level applied to the geosentiment loggers, e.g. "DEBUG".

    Raises:
        ValueError: If log_level is not a standard level name.
    """
    level = _level_name(log_level)
    path = Path(config_path) if config_path else _DEFAULT_CONFIG

    if not path.is_file():
        logging.basicConfig(level=level or "INFO", format=_FALLBACK_FORMAT)
        return

    with path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}

    if level:
        # Only our own namespace; root stays at WARNING for third-party noise
        for logger_name, logger_cfg in cfg.get("loggers", {}).items():
            if logger_name == NAMESPACE or logger_name.startswith(NAMESPACE + "."):
                logger_cfg["level"] = level

    logging.config.dictConfig(cfg)


def get_logger(name: str) -> logging.Logger:
    """Return the logger ``geosentiment.<name>`` (names already in the namespace pass through)."""
    if name == NAMESPACE or name.startswith(NAMESPACE + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{NAMESPACE}.{name}")


class BatchLogAdapter(logging.LoggerAdapter):
    """Prefix messages with ``[batch_id]`` and attach ``batch_id`` to each LogRecord.

    Example:
        log = get_batch_logger("annotator", "20240301_101500_posts")
        log.warning("Skipping record %d: %s", 4, exc)
        # ... geosentiment.annotator: [20240301_101500_posts] Skipping record 4: ...
    """

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> Tuple[str, MutableMapping[str, Any]]:
        batch_id = self.extra["batch_id"]
        extra = dict(kwargs.get("extra") or {})
        extra.setdefault("batch_id", batch_id)
        kwargs["extra"] = extra
        return f"[{batch_id}] {msg}", kwargs


def get_batch_logger(name: str, batch_id: str) -> BatchLogAdapter:
    """Logger adapter for one annotation batch or CLI run."""
    return BatchLogAdapter(get_logger(name), {"batch_id": batch_id})
