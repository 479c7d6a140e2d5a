"""Tests for build logging."""

import json
import logging
from pathlib import Path

import pytest
from rich.console import Console

from rfcs_book.config import AppConfig, LoggingConfig
from rfcs_book.core.errors import DestinationError, SourceListingError
from rfcs_book.logging_utils import JsonlFormatter, log_event, open_log_file, setup_logging
from rfcs_book.runner import run_build


def _close_handlers(logger: logging.Logger) -> None:
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []


def _make_source(root: Path, *names: str) -> Path:
    source = root / "text"
    source.mkdir()
    for name in names:
        (source / name).write_text(name, encoding="utf-8")
    return source


def test_jsonl_formatter_emits_book_event_fields():
    record = logging.LogRecord("rfcs_book", logging.WARNING, __file__, 1, "Copy failed", None, None)
    record.event = "copy_failed"
    record.entry = "assets"
    record.error = "[Errno 21] Is a directory"
    record.unrelated = "dropped"

    payload = json.loads(JsonlFormatter().format(record))

    assert payload["message"] == "Copy failed"
    assert payload["level"] == "WARNING"
    assert payload["event"] == "copy_failed"
    assert payload["entry"] == "assets"
    assert payload["error"] == "[Errno 21] Is a directory"
    assert "unrelated" not in payload
    assert "lineno" not in payload


def test_jsonl_formatter_without_event_fields():
    record = logging.LogRecord("rfcs_book", logging.INFO, __file__, 1, "plain message", None, None)

    payload = json.loads(JsonlFormatter().format(record))

    assert set(payload) == {"timestamp", "level", "event", "message"}
    assert payload["event"] is None


def test_log_event_ignores_missing_logger():
    log_event(None, "nothing happens", event="noop")


def test_setup_logging_holds_records_until_log_file_opened(tmp_path: Path) -> None:
    cfg = LoggingConfig(console=False, file=True, level="INFO")
    logger = setup_logging(cfg)
    log_event(logger, "Build start", event="build_start")

    assert list(tmp_path.iterdir()) == []

    log_path = open_log_file(logger, cfg, tmp_path / "book")
    log_event(logger, "Build complete", event="build_complete")
    _close_handlers(logger)

    events = [json.loads(line)["event"] for line in log_path.read_text(encoding="utf-8").splitlines()]
    assert events == ["build_start", "build_complete"]


def test_open_log_file_without_file_logging_returns_none(tmp_path: Path) -> None:
    cfg = LoggingConfig(console=False, file=False)
    logger = setup_logging(cfg)

    assert open_log_file(logger, cfg, tmp_path) is None
    assert list(tmp_path.iterdir()) == []


def test_open_log_file_on_regular_file_raises_destination_error(tmp_path: Path) -> None:
    cfg = LoggingConfig(console=False, file=True)
    logger = setup_logging(cfg)
    dest_root = tmp_path / "book"
    dest_root.write_text("not a directory", encoding="utf-8")

    with pytest.raises(DestinationError):
        open_log_file(logger, cfg, dest_root)
    _close_handlers(logger)


def test_setup_logging_rejects_unknown_level_and_format():
    with pytest.raises(ValueError, match="Unknown log level"):
        setup_logging(LoggingConfig(level="LOUD"))
    with pytest.raises(ValueError, match="Unsupported log format"):
        setup_logging(LoggingConfig(format="xml"))


def test_plain_log_file_format(tmp_path: Path) -> None:
    cfg = LoggingConfig(console=False, file=True, format="plain", level="INFO")
    logger = setup_logging(cfg)
    log_event(logger, "Build start", event="build_start")
    logger.info("no event here")

    log_path = open_log_file(logger, cfg, tmp_path)
    _close_handlers(logger)

    lines = log_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].endswith("INFO build_start Build start")
    assert lines[1].endswith("INFO - no event here")


def test_copy_failure_logged_at_default_level(tmp_path: Path) -> None:
    source = _make_source(tmp_path, "a.md")
    (source / "assets").mkdir()
    cfg = AppConfig()
    cfg.copy.policy = "best_effort"
    cfg.logging.console = False
    cfg.logging.file = True
    dest_root = tmp_path / "book"

    run_build(source, dest_root, cfg, console=Console(quiet=True))
    _close_handlers(logging.getLogger("rfcs_book"))

    records = [
        json.loads(line)
        for line in (dest_root / cfg.logging.filename).read_text(encoding="utf-8").splitlines()
    ]
    assert [record["event"] for record in records] == ["copy_failed"]
    assert records[0]["level"] == "WARNING"
    assert records[0]["entry"] == "assets"
    assert records[0]["path"] == str(source / "assets")
    assert records[0]["error"]


def test_missing_source_leaves_no_log_file(tmp_path: Path) -> None:
    cfg = AppConfig()
    cfg.logging.console = False
    cfg.logging.file = True
    dest_root = tmp_path / "book"

    with pytest.raises(SourceListingError):
        run_build(tmp_path / "missing", dest_root, cfg, console=Console(quiet=True))
    _close_handlers(logging.getLogger("rfcs_book"))

    assert not dest_root.exists()


def test_run_build_writes_event_log_outside_book(tmp_path: Path) -> None:
    source = tmp_path / "text"
    source.mkdir()
    (source / "a.md").write_text("a", encoding="utf-8")
    cfg = AppConfig()
    cfg.logging.console = False
    cfg.logging.file = True
    cfg.logging.level = "INFO"
    dest_root = tmp_path / "book"

    result = run_build(source, dest_root, cfg, console=Console(quiet=True))
    _close_handlers(logging.getLogger("rfcs_book"))

    log_path = dest_root / cfg.logging.filename
    events = [json.loads(line)["event"] for line in log_path.read_text(encoding="utf-8").splitlines()]
    assert events == [
        "build_start",
        "source_listed",
        "summary_written",
        "entry_copied",
        "build_complete",
    ]
    assert sorted(p.name for p in result.dest_dir.iterdir()) == ["SUMMARY.md", "a.md"]


def test_run_build_with_progress(tmp_path: Path) -> None:
    source = tmp_path / "text"
    source.mkdir()
    for name in ("a.md", "b.md"):
        (source / name).write_text(name, encoding="utf-8")
    cfg = AppConfig()
    cfg.logging.console = False

    result = run_build(source, tmp_path / "book", cfg, show_progress=True, console=Console(quiet=True))

    assert result.copied == ["a.md", "b.md"]
