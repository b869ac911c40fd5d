"""Working-copy file walking utilities."""

from __future__ import annotations

import os
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence

_EXCLUDED_DIRS = frozenset(
    {
        ".git",
        ".hg",
        ".svn",
        ".vs",
        ".idea",
        ".repos",
        "node_modules",
        "__pycache__",
        "bin",
        "obj",
    }
)


def _iter_files(root: Path, excluded_dirs: Iterable[str]) -> Iterator[Path]:
    excluded = set(excluded_dirs)
    for dirpath, dirnames, filenames in os.walk(root):
        current_dir = Path(dirpath)
        dirnames[:] = sorted(name for name in dirnames if name not in excluded)
        for filename in sorted(filenames):
            yield current_dir / filename


class RepoScanner:
    """Finds files in a working copy while skipping build output and VCS folders."""

    def __init__(self, excluded_dirs: Iterable[str] | None = None) -> None:
        self.excluded_dirs = frozenset(excluded_dirs) if excluded_dirs is not None else _EXCLUDED_DIRS

    def find(self, root: Path, patterns: Sequence[str]) -> List[Path]:
        """Return files whose names match any glob in ``patterns``, sorted by relative path."""
        if not root.is_dir():
            return []
        matches = [
            path
            for path in _iter_files(root, self.excluded_dirs)
            if any(fnmatchcase(path.name, pattern) for pattern in patterns)
        ]
        return sorted(matches, key=lambda path: path.relative_to(root).as_posix())


__all__ = ["RepoScanner"]
