"""Turning loaded plugin entries into the rule and refactoring sets that get documented."""

from __future__ import annotations

import re
from pathlib import Path, PurePosixPath
from typing import Dict, Iterable, List, Optional, Sequence

from ..logging import get_logger
from ..models import ExtractedRefactoring, ExtractedRule, RepositorySpec, Severity
from ..repo_scanner import RepoScanner
from .loader import CodeFixEntry, LoadedArtifact

logger = get_logger("introspection.rules")

_REFACTORING_ID = re.compile(r"^ar(\d{4})", re.IGNORECASE)
_REFACTORING_NAME = re.compile(r"^ar\d{4}(.+?)Refactoring$", re.IGNORECASE)
_WORD_BOUNDARY = re.compile(r"([a-z])([A-Z])")

_DEFAULT_REFACTORING_DESCRIPTION = "Code refactoring"

_EDITORCONFIG_SEVERITY: Dict[Severity, str] = {
    Severity.HIDDEN: "silent",
    Severity.INFO: "suggestion",
    Severity.WARNING: "warning",
    Severity.ERROR: "error",
}

SOURCE_SUFFIXES: tuple[str, ...] = (".cs", ".vb", ".fs", ".py")
_SOURCE_EXCLUDED_DIRS = frozenset({".git", "bin", "obj"})
_ARTIFACT_EXCLUDED_DIRS = frozenset({".git"})


def collect_rules(artifact: LoadedArtifact) -> List[ExtractedRule]:
    """Flatten analyzer descriptors into one rule per identifier, sorted by id."""
    fixable = _fixable_ids(artifact.code_fixes)
    rules: Dict[str, ExtractedRule] = {}
    for analyzer in artifact.analyzers:
        for descriptor in analyzer.descriptors:
            existing = rules.get(descriptor.id)
            if existing is not None:
                if existing.title != descriptor.title or existing.category != descriptor.category:
                    logger.warning(
                        "  Rule %s is declared by %s and %s with different metadata; keeping the first",
                        descriptor.id,
                        existing.type_name,
                        analyzer.type_name,
                    )
                continue
            rules[descriptor.id] = ExtractedRule(
                id=descriptor.id,
                category=descriptor.category,
                title=descriptor.title,
                description=descriptor.description,
                severity=descriptor.default_severity,
                enabled=descriptor.is_enabled_by_default,
                has_code_fix=descriptor.id in fixable,
                type_name=analyzer.type_name,
            )
    return [rules[rule_id] for rule_id in sorted(rules)]


def _fixable_ids(code_fixes: Iterable[CodeFixEntry]) -> frozenset[str]:
    ids: set[str] = set()
    for entry in code_fixes:
        ids.update(entry.fixable_ids)
    return frozenset(ids)


def refactoring_id(type_name: str) -> Optional[str]:
    """Return ``AR####`` for refactoring type names, None for anything else."""
    match = _REFACTORING_ID.match(type_name)
    if match is None:
        return None
    return f"AR{match.group(1)}"


def refactoring_description(type_name: str) -> str:
    """Derive a readable description from a refactoring type name."""
    match = _REFACTORING_NAME.match(type_name)
    if match is None:
        return _DEFAULT_REFACTORING_DESCRIPTION
    words = _WORD_BOUNDARY.sub(r"\1 \2", match.group(1)).strip()
    return words or _DEFAULT_REFACTORING_DESCRIPTION


def extract_refactorings(
    type_names: Iterable[str],
    reserved_ids: Iterable[str] = (),
) -> List[ExtractedRefactoring]:
    """One refactoring per ``AR####`` id; the first type in name order wins.

    Ids already used by a rule in ``reserved_ids`` are skipped so every page
    path is generated once.
    """
    reserved = set(reserved_ids)
    refactorings: Dict[str, ExtractedRefactoring] = {}
    for type_name in sorted(set(type_names)):
        identifier = refactoring_id(type_name)
        if identifier is None:
            logger.debug("  Ignoring refactoring type without an AR id: %s", type_name)
            continue
        if identifier in reserved:
            logger.warning("  Refactoring %s reuses rule id %s; skipping it", type_name, identifier)
            continue
        existing = refactorings.get(identifier)
        if existing is not None:
            logger.warning(
                "  Refactoring %s is declared by %s and %s; keeping the first",
                identifier,
                existing.type_name,
                type_name,
            )
            continue
        refactorings[identifier] = ExtractedRefactoring(
            id=identifier,
            description=refactoring_description(type_name),
            type_name=type_name,
        )
    return list(refactorings.values())


def severity_to_editorconfig(severity: Severity, enabled: bool) -> str:
    """Map a rule's default severity onto its editorconfig value."""
    if not enabled:
        return "none"
    return _EDITORCONFIG_SEVERITY.get(severity, "warning")


def resolve_artifact(repo_path: Path, artifact_path: str) -> Optional[Path]:
    """Locate a configured artifact, falling back to release build output."""
    exact = repo_path / artifact_path
    if exact.is_file():
        return exact

    name = PurePosixPath(artifact_path.replace("\\", "/")).name
    scanner = RepoScanner(excluded_dirs=_ARTIFACT_EXCLUDED_DIRS)
    candidates = [
        path
        for path in scanner.find(repo_path, [name])
        if _is_release_output(path.relative_to(repo_path).parts[:-1])
    ]
    if not candidates:
        logger.warning("  Artifact not found: %s (searched %s)", name, repo_path)
        return None
    chosen = candidates[0]
    if len(candidates) > 1:
        logger.info(
            "  Found %d candidates for %s; using %s",
            len(candidates),
            name,
            chosen.relative_to(repo_path).as_posix(),
        )
    return chosen


def _is_release_output(directories: Sequence[str]) -> bool:
    lowered = [part.lower() for part in directories]
    if "ref" in lowered:
        return False
    return any(
        previous == "bin" and _is_release_segment(part)
        for previous, part in zip(lowered, lowered[1:])
    )


def _is_release_segment(part: str) -> bool:
    return part == "release" or part.startswith("release_") or part.startswith("release-")


def find_source_file(repo_path: Path, type_name: str, spec: RepositorySpec) -> Optional[str]:
    """Return a browsable link to the single source file declaring ``type_name``."""
    patterns: List[str] = []
    for suffix in SOURCE_SUFFIXES:
        patterns.append(f"{type_name}{suffix}")
        patterns.append(f"{type_name}.*{suffix}")
    matches = RepoScanner(excluded_dirs=_SOURCE_EXCLUDED_DIRS).find(repo_path, patterns)
    if len(matches) != 1:
        return None
    relative = matches[0].relative_to(repo_path).as_posix()
    return f"{spec.web_url}/blob/{spec.branch}/{relative}"


__all__ = [
    "SOURCE_SUFFIXES",
    "collect_rules",
    "extract_refactorings",
    "find_source_file",
    "refactoring_description",
    "refactoring_id",
    "resolve_artifact",
    "severity_to_editorconfig",
]
