"""Tests for compdocs.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from compdocs.logging import configure_logging, get_logger, resolve_level


def test_get_logger_nests_under_compdocs() -> None:
    assert get_logger("resolver").name == "compdocs.resolver"
    assert get_logger().name == "compdocs"


def test_resolve_level_prefers_verbose() -> None:
    assert resolve_level() == logging.INFO
    assert resolve_level(quiet=True) == logging.WARNING
    assert resolve_level(verbose=True, quiet=True) == logging.DEBUG


def test_configure_logging_replaces_handlers(tmp_path: Path) -> None:
    configure_logging(verbose=True)
    logger = configure_logging(quiet=True, log_file=tmp_path / "logs" / "run.log")

    assert len(logger.handlers) == 2
    console, sink = logger.handlers
    assert console.level == logging.WARNING
    assert sink.level == logging.DEBUG

    get_logger("orchestrator").debug("resolved %d exports", 3)
    sink.flush()
    assert "resolved 3 exports" in (tmp_path / "logs" / "run.log").read_text(encoding="utf-8")

    configure_logging()
