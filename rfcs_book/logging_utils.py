from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import Any

from rich.logging import RichHandler

from .config import LoggingConfig
from .core.errors import DestinationError


LOGGER_NAME = "rfcs_book"
LOG_FORMATS = ("jsonl", "plain")

# Structured fields a build event may carry, in output order.
EVENT_FIELDS = (
    "source",
    "destination",
    "policy",
    "entry",
    "path",
    "count",
    "copied",
    "failed",
    "error",
)


def setup_logging(cfg: LoggingConfig) -> logging.Logger:
    """Configure the ``rfcs_book`` logger.

    Console output goes through rich. When file logging is enabled, records
    are held in memory until ``open_log_file`` is called, so a build that
    fails before its destination is known good leaves no log file behind.

    Raises:
        ValueError: If the configured level or file format is unknown
    """
    level = _parse_level(cfg.level)
    if cfg.format not in LOG_FORMATS:
        raise ValueError(f"Unsupported log format: {cfg.format}. Use one of: {', '.join(LOG_FORMATS)}")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
    logger.propagate = False

    if cfg.console:
        console_handler = RichHandler(rich_tracebacks=True, show_time=False, show_level=True)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(console_handler)

    if cfg.file:
        pending = MemoryHandler(capacity=10000, flushLevel=logging.CRITICAL + 1)
        pending.setLevel(level)
        logger.addHandler(pending)

    return logger


def open_log_file(logger: logging.Logger, cfg: LoggingConfig, log_dir: Path) -> Path | None:
    """Start writing the log file in ``log_dir`` and replay pending records.

    Returns:
        Path of the log file, or ``None`` when file logging is disabled

    Raises:
        DestinationError: If ``log_dir`` or the log file cannot be created
    """
    pending = next((h for h in logger.handlers if isinstance(h, MemoryHandler)), None)
    if pending is None:
        return None

    file_path = log_dir / cfg.filename
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path, encoding="utf-8")
    except OSError as exc:
        raise DestinationError(file_path, exc) from exc
    file_handler.setLevel(pending.level)
    if cfg.format == "jsonl":
        file_handler.setFormatter(JsonlFormatter())
    else:
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)s %(event)s %(message)s",
                defaults={"event": "-"},
            )
        )

    pending.setTarget(file_handler)
    pending.flush()
    logger.removeHandler(pending)
    pending.close()
    logger.addHandler(file_handler)
    return file_path


def log_event(
    logger: logging.Logger | None,
    message: str,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    if logger is None:
        return
    logger.log(level, message, extra=fields)


class JsonlFormatter(logging.Formatter):
    """One JSON object per build event.

    Every line carries ``timestamp``, ``level``, ``event`` and ``message``;
    the fields in ``EVENT_FIELDS`` follow when the event set them.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "event": getattr(record, "event", None),
            "message": record.getMessage(),
        }
        for key in EVENT_FIELDS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["error"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def _parse_level(level: str) -> int:
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value
