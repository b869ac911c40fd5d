"""Keeps local working copies of documented repositories up to date."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Iterable, Sequence

from ..errors import SyncError
from ..logging import get_logger
from ..models import RepositorySpec


class RepositorySynchronizer:
    """Clones or hard-resets each repository to the tip of its default branch."""

    def __init__(
        self,
        repos_dir: Path,
        *,
        strict: bool = True,
        timeout: float | None = None,
        runner: Callable[..., str] | None = None,
    ) -> None:
        self.repos_dir = repos_dir
        self.strict = strict
        self.timeout = timeout
        self._runner = runner or self._default_runner
        self.logger = get_logger("git.sync")

    def sync(self, spec: RepositorySpec) -> Path:
        """Return the working copy path after bringing it to ``origin/<branch>``."""
        self.repos_dir.mkdir(parents=True, exist_ok=True)
        repo_path = self.repos_dir / spec.name

        if repo_path.exists():
            self.logger.info("Updating %s...", spec.name)
            self._run(["git", "fetch", "origin"], cwd=repo_path)
            self._run(["git", "reset", "--hard", f"origin/{spec.branch}"], cwd=repo_path)
        else:
            self.logger.info("Cloning %s...", spec.name)
            self._run(["git", "clone", "--depth=1", spec.git_url, spec.name], cwd=self.repos_dir)
        return repo_path

    # ------------------------------------------------------------------
    # Helpers

    def _run(self, args: Sequence[str], *, cwd: Path) -> None:
        try:
            self._runner(args, cwd=cwd, timeout=self.timeout, capture_output=True)
        except subprocess.CalledProcessError as exc:
            self._fail(args, cwd, exc.returncode, exc.stderr or "")
        except subprocess.TimeoutExpired as exc:
            self._fail(args, cwd, None, f"timed out after {exc.timeout} seconds")
        except FileNotFoundError as exc:
            self._fail(args, cwd, None, str(exc))

    def _fail(self, args: Sequence[str], cwd: Path, exit_code: int | None, stderr: str | bytes) -> None:
        if isinstance(stderr, bytes):
            stderr = stderr.decode("utf-8", errors="replace")
        error = SyncError(args, cwd, exit_code, stderr)
        if self.strict:
            raise error
        self.logger.warning("Ignoring sync failure: %s", error)

    @staticmethod
    def _default_runner(
        args: Iterable[str],
        *,
        cwd: Path,
        timeout: float | None = None,
        capture_output: bool = False,
    ) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            check=True,
            text=True,
            capture_output=capture_output,
            timeout=timeout,
        )
        return completed.stdout if capture_output else ""


__all__ = ["RepositorySynchronizer"]
