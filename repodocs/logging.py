"""Logging utilities for repodocs runs."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path
from typing import Iterator

_LOGGER_NAME = "repodocs"
_NO_REPOSITORY = "-"

_CONSOLE_FORMAT = "[repodocs] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(repository)s]: %(message)s"

_current_repository: ContextVar[str] = ContextVar("repodocs_repository", default=_NO_REPOSITORY)


class RepositoryContextFilter(logging.Filter):
    """Stamps each record with the repository currently being documented."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.repository = _current_repository.get()
        return True


@contextmanager
def repository_context(name: str) -> Iterator[None]:
    """Attribute log records emitted inside the block to repository ``name``."""
    token = _current_repository.set(name)
    try:
        yield
    finally:
        _current_repository.reset(token)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the repodocs hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Console output for the run, plus a per-repository tagged file log when requested."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(stream_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.addFilter(RepositoryContextFilter())
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


__all__ = ["RepositoryContextFilter", "configure_logging", "get_logger", "repository_context"]
