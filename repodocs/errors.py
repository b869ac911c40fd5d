"""Exception types raised by the repodocs pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class RepoDocsError(RuntimeError):
    """Base class for errors surfaced by repodocs."""


class ConfigError(RepoDocsError):
    """Raised when repodocs.yml cannot be parsed or fails validation."""


class ProjectRootNotFoundError(RepoDocsError):
    """Raised when no project root marker is found above the start directory."""

    def __init__(self, start: Path, marker: str) -> None:
        super().__init__(f"Cannot find {marker} root from {start}")
        self.start = start
        self.marker = marker


class SyncError(RepoDocsError):
    """Raised when a version-control command fails in strict sync mode."""

    def __init__(
        self,
        command: Sequence[str],
        cwd: Path,
        exit_code: int | None,
        stderr: str = "",
    ) -> None:
        self.command = list(command)
        self.cwd = cwd
        self.exit_code = exit_code
        self.stderr = stderr.strip()
        detail = f": {self.stderr}" if self.stderr else ""
        super().__init__(
            f"`{' '.join(self.command)}` failed in {cwd} (exit code {exit_code}){detail}"
        )


class ArtifactLoadError(RepoDocsError):
    """Raised when a built artifact cannot be loaded for introspection."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot load artifact {path}: {reason}")
        self.path = path
        self.reason = reason


__all__ = [
    "ArtifactLoadError",
    "ConfigError",
    "ProjectRootNotFoundError",
    "RepoDocsError",
    "SyncError",
]
