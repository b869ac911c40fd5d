from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from repodocs.rendering.templates import TemplateRenderer
from tests._fixtures.repo_builder import RepoBuilder


@pytest.fixture
def repo_builder(tmp_path: Path) -> RepoBuilder:
    """Provide a reusable working-copy builder rooted at the pytest tmp_path."""
    return RepoBuilder(tmp_path / "repo")


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """A directory that looks like the root of a documentation project."""
    root = tmp_path / "project"
    (root / ".git").mkdir(parents=True)
    return root


@pytest.fixture(autouse=True)
def _reset_repodocs_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("repodocs")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
