"""Pipeline orchestration: sync, build, extract, write, assemble."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from .build import BuildRunner
from .config import DocsConfig
from .extractors import ExtractionContext, get_extractor
from .git.diff import ChangeSummary
from .git.sync import RepositorySynchronizer
from .logging import get_logger, repository_context
from .models import DocsSource, RepositorySpec, WriteLedger
from .rendering.site import render_docfx, render_site_index, root_toc
from .rendering.templates import TemplateRenderer
from .rendering.toc import render_toc, repository_toc
from .writer import IdempotentWriter

DOCFX_FILENAME = "docfx.json"
_STDERR_PREVIEW = 2000


@dataclass
class RunResult:
    """Outcome of one full pipeline run."""

    files_written: int
    written_paths: List[str] = field(default_factory=list)
    failed_repos: List[str] = field(default_factory=list)
    change_summary: str = ""


class Orchestrator:
    """Runs every configured repository through the documentation pipeline in order."""

    def __init__(
        self,
        config: DocsConfig,
        *,
        synchronizer: RepositorySynchronizer | None = None,
        build_runner: BuildRunner | None = None,
        renderer: TemplateRenderer | None = None,
        change_summary: ChangeSummary | None = None,
        skip_build: bool = False,
    ) -> None:
        self.config = config
        self.synchronizer = synchronizer or RepositorySynchronizer(
            config.repos_dir,
            strict=config.sync.strict,
            timeout=config.sync.timeout,
        )
        self.build_runner = build_runner or BuildRunner(config.build.command, timeout=config.build.timeout)
        self.renderer = renderer or TemplateRenderer(config.templates_dir)
        self.change_summary = change_summary or ChangeSummary()
        self.skip_build = skip_build
        self.logger = get_logger("orchestrator")

    def run(self) -> RunResult:
        config = self.config
        ledger = WriteLedger()
        writer = IdempotentWriter(config.root, ledger)
        failed: List[str] = []

        self.logger.info("Generating documentation for %d repositories", len(config.repos))
        config.output_dir.mkdir(parents=True, exist_ok=True)

        for spec in config.repos:
            with repository_context(spec.name):
                self.logger.info("Processing %s...", spec.name)
                repo_path = self.synchronizer.sync(spec)
                if spec.requires_build:
                    self._build(spec, repo_path)
                try:
                    self._document(spec, repo_path, writer)
                except Exception:
                    self.logger.exception("Failed to document %s; continuing with the next repository", spec.name)
                    failed.append(spec.name)

        self._assemble_site(writer)

        summary = ""
        if ledger.count:
            summary = self.change_summary.stat(config.root)
            if summary:
                self.logger.info("Changes:\n%s", summary)
        self.logger.info("Done. %d files written.", ledger.count)
        return RunResult(
            files_written=ledger.count,
            written_paths=list(ledger.paths),
            failed_repos=failed,
            change_summary=summary,
        )

    # ------------------------------------------------------------------
    # Steps

    def _build(self, spec: RepositorySpec, repo_path: Path) -> None:
        if self.skip_build:
            self.logger.info("  Skipping build for %s", spec.name)
            return
        self.logger.info("  Building %s...", spec.name)
        result = self.build_runner.run(repo_path)
        if result.succeeded:
            return
        stderr = result.stderr.strip()[:_STDERR_PREVIEW]
        self.logger.warning(
            "  Build failed for %s (exit code %d); continuing with existing artifacts%s",
            spec.name,
            result.exit_code,
            f":\n{stderr}" if stderr else "",
        )

    def _document(self, spec: RepositorySpec, repo_path: Path, writer: IdempotentWriter) -> None:
        output_dir = self.config.output_dir / spec.name
        extractor = get_extractor(spec.docs_source)
        context = ExtractionContext(spec=spec, repo_path=repo_path, renderer=self.renderer)
        outputs = extractor.extract(context)
        self.logger.debug("  %s produced %d files", type(extractor).__name__, len(outputs))
        for output in outputs:
            writer.write(output_dir / output.path, output.content)

        toc_path = output_dir / "toc.yml"
        if not toc_path.exists():
            has_rules = any(output.path.startswith("rules/") for output in outputs)
            entries = repository_toc(include_rules=spec.docs_source is DocsSource.INTROSPECT and has_rules)
            writer.write(toc_path, render_toc(entries))

    def _assemble_site(self, writer: IdempotentWriter) -> None:
        config = self.config
        writer.write(
            config.output_dir / "index.md",
            render_site_index(self.renderer, config.site, config.repos),
        )
        writer.write(config.output_dir / "toc.yml", render_toc(root_toc(config.repos)))
        writer.write(
            config.root / DOCFX_FILENAME,
            render_docfx(
                config.site,
                config.repos,
                output_path=config.output_path,
                repos_path=config.repos_path,
            ),
        )


__all__ = ["DOCFX_FILENAME", "Orchestrator", "RunResult"]
