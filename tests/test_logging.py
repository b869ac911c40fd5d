"""Tests for repodocs.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from repodocs.logging import configure_logging, get_logger, repository_context


def test_file_log_tags_records_with_repository(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "run.log"
    configure_logging(log_file=log_file)
    logger = get_logger("orchestrator")

    logger.info("starting")
    with repository_context("sdk"):
        logger.warning("build failed")
    logger.info("finished")

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert lines[0].endswith("INFO repodocs.orchestrator [-]: starting")
    assert lines[1].endswith("WARNING repodocs.orchestrator [sdk]: build failed")
    assert lines[2].endswith("[-]: finished")


def test_configure_logging_replaces_handlers_and_sets_level(tmp_path: Path) -> None:
    configure_logging()
    logger = configure_logging(verbose=True, log_file=tmp_path / "run.log")

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert logger.propagate is False
