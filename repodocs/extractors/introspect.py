"""Strategy that documents analyzer rules enumerated from built artifacts."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from ..errors import ArtifactLoadError
from ..introspection.loader import LoadedArtifact, load_artifact
from ..introspection.rules import (
    collect_rules,
    extract_refactorings,
    find_source_file,
    resolve_artifact,
)
from ..logging import get_logger
from ..models import OutputFile
from ..rendering.rules import (
    render_analyzer_index,
    render_configuration_page,
    render_editorconfig,
    render_refactoring_page,
    render_rule_page,
)
from ..rendering.toc import categorized_rules_toc, render_toc
from .base import ExtractionContext, Extractor

logger = get_logger("extractors.introspect")


class IntrospectExtractor(Extractor):
    """Loads every configured artifact and renders the rule catalogue."""

    def extract(self, context: ExtractionContext) -> List[OutputFile]:
        spec = context.spec
        artifact = self._load(context)
        if artifact is None:
            logger.warning("  No artifacts could be loaded for %s; skipping rule pages", spec.name)
            return []

        rules = collect_rules(artifact)
        refactorings = extract_refactorings(artifact.refactorings, reserved_ids=[rule.id for rule in rules])
        logger.info("  Found %d rules and %d refactorings", len(rules), len(refactorings))
        renderer = context.renderer

        outputs = [
            OutputFile(
                path="index.md",
                content=render_analyzer_index(
                    renderer,
                    display_name=spec.display_name,
                    description=spec.description,
                    rules=rules,
                    refactorings=refactorings,
                ),
            )
        ]
        for rule in rules:
            page = render_rule_page(
                renderer,
                rule,
                source_url=find_source_file(context.repo_path, rule.type_name, spec),
                existing=self._existing_rule_page(context, rule.id),
            )
            outputs.append(OutputFile(path=f"rules/{rule.id}.md", content=page))
        for refactoring in refactorings:
            page = render_refactoring_page(
                renderer,
                refactoring,
                source_url=find_source_file(context.repo_path, refactoring.type_name, spec),
            )
            outputs.append(OutputFile(path=f"rules/{refactoring.id}.md", content=page))

        outputs.append(OutputFile(path="rules/toc.yml", content=render_toc(categorized_rules_toc(rules, refactorings))))
        outputs.append(OutputFile(path="configuration.md", content=render_configuration_page(renderer, rules)))
        outputs.append(OutputFile(path="configuration/default.editorconfig", content=render_editorconfig(rules)))
        outputs.append(OutputFile(path="configuration/none.editorconfig", content=render_editorconfig(rules, "none")))
        return outputs

    @staticmethod
    def _load(context: ExtractionContext) -> Optional[LoadedArtifact]:
        combined = LoadedArtifact()
        loaded = False
        for configured in context.spec.artifact_paths:
            path = resolve_artifact(context.repo_path, configured)
            if path is None:
                continue
            try:
                combined.extend(load_artifact(path))
            except ArtifactLoadError as exc:
                logger.warning("  %s", exc)
                continue
            logger.debug("  Loaded %s", path)
            loaded = True
        return combined if loaded else None

    @staticmethod
    def _existing_rule_page(context: ExtractionContext, rule_id: str) -> Optional[str]:
        path: Path = context.repo_path / context.spec.existing_docs_path / "rules" / f"{rule_id}.md"
        if not path.is_file():
            return None
        return path.read_text(encoding="utf-8", errors="replace")


__all__ = ["IntrospectExtractor"]
