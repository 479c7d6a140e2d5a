"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- BookConfig: Layout and wording of the generated book
- CopyConfig: Behaviour of the copy loop on failure
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml


@dataclass
class BookConfig:
    """Configuration for the generated book layout.

    Attributes:
        heading: Text of the SUMMARY.md heading line
        src_dir: Sub-directory of the destination root that receives the book
        summary_filename: Name of the generated index file
        title_suffix: Suffix stripped from entry names to form titles
    """

    heading: str = "RFCS"
    src_dir: str = "src"
    summary_filename: str = "SUMMARY.md"
    title_suffix: str = ".md"


@dataclass
class CopyConfig:
    """Configuration for copying entries.

    Attributes:
        policy: "fail_fast" to stop at the first failed copy, or
            "best_effort" to attempt every entry and report failures at the end
    """

    policy: str = "fail_fast"


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file, created in the destination root
    """

    level: str = "WARNING"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "rfcs-book-gen.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    book: BookConfig = field(default_factory=BookConfig)
    copy: CopyConfig = field(default_factory=CopyConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


DEFAULT_CONFIG = AppConfig()


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return _fromdict(_asdict(DEFAULT_CONFIG))

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Invalid config file {path}: expected a mapping at top level")

    return _merge_config(DEFAULT_CONFIG, raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "book": {
            "heading": cfg.book.heading,
            "src_dir": cfg.book.src_dir,
            "summary_filename": cfg.book.summary_filename,
            "title_suffix": cfg.book.title_suffix,
        },
        "copy": {
            "policy": cfg.copy.policy,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    try:
        return AppConfig(
            book=BookConfig(**data["book"]),
            copy=CopyConfig(**data["copy"]),
            logging=LoggingConfig(**data["logging"]),
        )
    except TypeError as exc:
        raise ValueError(f"Invalid config: {exc}") from exc
