"""Post-run change summary for the documentation tree."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Iterable

from ..logging import get_logger


class ChangeSummary:
    """Reports `git diff --stat` for the project after files were written."""

    def __init__(self, runner: Callable[..., str] | None = None) -> None:
        self._runner = runner or self._default_runner
        self.logger = get_logger("git.diff")

    def stat(self, repo_path: Path) -> str:
        """Return the diff stat text, or an empty string when git is unavailable."""
        args = ["git", "--no-pager", "diff", "--stat"]
        try:
            output = self._runner(args, cwd=repo_path, capture_output=True)
        except (OSError, subprocess.CalledProcessError) as exc:
            self.logger.debug("Unable to compute diff stat in %s: %s", repo_path, exc)
            return ""
        return output.rstrip()

    @staticmethod
    def _default_runner(
        args: Iterable[str],
        *,
        cwd: Path,
        capture_output: bool = False,
    ) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            check=True,
            text=True,
            capture_output=capture_output,
        )
        return completed.stdout if capture_output else ""


__all__ = ["ChangeSummary"]
