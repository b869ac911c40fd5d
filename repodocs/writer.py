"""Change-detecting file writer."""

from __future__ import annotations

from pathlib import Path
from typing import Set

from .logging import get_logger
from .models import WriteLedger


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


class IdempotentWriter:
    """Writes files only when their content meaningfully changed.

    Content is compared after normalising line endings and trimming trailing
    whitespace, so a rerun over unchanged inputs leaves the tree untouched and
    the ledger at zero.
    """

    def __init__(self, root: Path, ledger: WriteLedger | None = None) -> None:
        self.root = root
        self.ledger = ledger if ledger is not None else WriteLedger()
        self.logger = get_logger("writer")
        self._seen: Set[Path] = set()

    @property
    def files_written(self) -> int:
        return self.ledger.count

    def write(self, path: Path, content: str) -> bool:
        """Write ``content`` to ``path`` unless it matches what is on disk."""
        resolved = path.resolve()
        if resolved in self._seen:
            self.logger.warning("%s was generated more than once in this run", self._display(path))
        self._seen.add(resolved)

        normalized = normalize_newlines(content)
        existed = path.exists()
        if existed:
            existing = normalize_newlines(path.read_text(encoding="utf-8", errors="replace"))
            if existing.rstrip() == normalized.rstrip():
                return False

        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(normalized)

        display = self._display(path)
        self.ledger.record(display)
        self.logger.info("  %s: %s", "Updated" if existed else "Created", display)
        return True

    def _display(self, path: Path) -> str:
        try:
            return path.resolve().relative_to(self.root.resolve()).as_posix()
        except ValueError:
            return path.as_posix()


__all__ = ["IdempotentWriter", "normalize_newlines"]
