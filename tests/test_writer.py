"""Tests for the change-detecting writer."""

from __future__ import annotations

import logging
from pathlib import Path

from repodocs.models import WriteLedger
from repodocs.writer import IdempotentWriter, normalize_newlines


def test_writer_creates_then_skips_identical_content(tmp_path: Path) -> None:
    writer = IdempotentWriter(tmp_path)
    target = tmp_path / "sdk" / "index.md"

    assert writer.write(target, "# Title\n") is True
    assert target.read_text(encoding="utf-8") == "# Title\n"

    rerun = IdempotentWriter(tmp_path)
    assert rerun.write(target, "# Title\n\n") is False
    assert rerun.files_written == 0


def test_writer_treats_line_endings_as_equal(tmp_path: Path) -> None:
    target = tmp_path / "page.md"
    target.write_bytes(b"line one\r\nline two\r\n")

    assert IdempotentWriter(tmp_path).write(target, "line one\nline two\n") is False


def test_writer_updates_changed_content_with_lf_endings(tmp_path: Path, caplog) -> None:
    target = tmp_path / "page.md"
    target.write_text("old\n", encoding="utf-8")
    ledger = WriteLedger()

    with caplog.at_level(logging.INFO, logger="repodocs"):
        changed = IdempotentWriter(tmp_path, ledger).write(target, "new\r\ncontent\r\n")

    assert changed is True
    assert target.read_bytes() == b"new\ncontent\n"
    assert ledger.count == 1
    assert ledger.paths == ["page.md"]
    assert "Updated: page.md" in caplog.text


def test_writer_warns_on_duplicate_paths(tmp_path: Path, caplog) -> None:
    writer = IdempotentWriter(tmp_path)
    target = tmp_path / "toc.yml"

    with caplog.at_level(logging.WARNING, logger="repodocs"):
        writer.write(target, "a\n")
        writer.write(target, "b\n")

    assert writer.files_written == 2
    assert "toc.yml was generated more than once" in caplog.text


def test_normalize_newlines() -> None:
    assert normalize_newlines("a\r\nb\rc\n") == "a\nb\nc\n"
