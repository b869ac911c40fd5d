"""External build invocation for repositories documented from built artifacts."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from .logging import get_logger


@dataclass(frozen=True)
class BuildResult:
    """Outcome of one build command."""

    exit_code: int
    stdout: str
    stderr: str

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


class BuildRunner:
    """Runs the configured build command inside a working copy.

    Failures never raise: the caller decides how to react to a non-zero exit
    code, and a missing executable or timeout is reported as exit code -1.
    """

    def __init__(
        self,
        command: Sequence[str],
        *,
        timeout: float | None = None,
        runner: Callable[..., BuildResult] | None = None,
    ) -> None:
        self.command = list(command)
        self.timeout = timeout
        self._runner = runner or self._default_runner
        self.logger = get_logger("build")

    def run(self, repo_path: Path) -> BuildResult:
        self.logger.debug("Running %s in %s", " ".join(self.command), repo_path)
        return self._runner(self.command, cwd=repo_path, timeout=self.timeout)

    @staticmethod
    def _default_runner(
        args: Sequence[str],
        *,
        cwd: Path,
        timeout: float | None = None,
    ) -> BuildResult:
        try:
            completed = subprocess.run(
                list(args),
                cwd=str(cwd),
                check=False,
                text=True,
                capture_output=True,
                timeout=timeout,
            )
        except FileNotFoundError as exc:
            return BuildResult(exit_code=-1, stdout="", stderr=f"Failed to start process: {exc}")
        except subprocess.TimeoutExpired as exc:
            return BuildResult(exit_code=-1, stdout="", stderr=f"Timed out after {exc.timeout} seconds")
        return BuildResult(
            exit_code=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )


__all__ = ["BuildResult", "BuildRunner"]
