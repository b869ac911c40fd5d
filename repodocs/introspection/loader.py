"""Loading built artifacts and enumerating the rule plugins they export."""

from __future__ import annotations

import hashlib
import importlib.util
import inspect
import json
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from types import ModuleType
from typing import Any, Dict, FrozenSet, List, Mapping

from ..errors import ArtifactLoadError
from ..logging import get_logger
from ..models import Severity
from .contracts import (
    CodeFixProvider,
    CodeRefactoringProvider,
    DiagnosticAnalyzer,
    DiagnosticDescriptor,
)

logger = get_logger("introspection.loader")


@dataclass(frozen=True)
class AnalyzerEntry:
    """Descriptors exposed by one analyzer type."""

    type_name: str
    descriptors: tuple[DiagnosticDescriptor, ...]


@dataclass(frozen=True)
class CodeFixEntry:
    """Identifiers fixable by one code-fix provider type."""

    type_name: str
    fixable_ids: FrozenSet[str]


@dataclass
class LoadedArtifact:
    """Everything harvested from one or more artifacts."""

    analyzers: List[AnalyzerEntry] = field(default_factory=list)
    code_fixes: List[CodeFixEntry] = field(default_factory=list)
    refactorings: List[str] = field(default_factory=list)

    def extend(self, other: "LoadedArtifact") -> None:
        self.analyzers.extend(other.analyzers)
        self.code_fixes.extend(other.code_fixes)
        self.refactorings.extend(other.refactorings)


class ArtifactLoader(ABC):
    """Contract for loaders that turn an artifact file into plugin entries."""

    @abstractmethod
    def load(self, path: Path) -> LoadedArtifact:
        """Return the analyzers, fixers and refactorings exported by ``path``."""


class ModuleArtifactLoader(ArtifactLoader):
    """Imports a Python module and reflects over the public types it defines."""

    def load(self, path: Path) -> LoadedArtifact:
        module = self._import(path)
        artifact = LoadedArtifact()
        for name, cls in inspect.getmembers(module, inspect.isclass):
            if name.startswith("_") or cls.__module__ != module.__name__:
                continue
            if inspect.isabstract(cls):
                continue
            if issubclass(cls, DiagnosticAnalyzer):
                entry = self._load_analyzer(name, cls)
                if entry is not None:
                    artifact.analyzers.append(entry)
            elif issubclass(cls, CodeFixProvider):
                fix = self._load_code_fix(name, cls)
                if fix is not None:
                    artifact.code_fixes.append(fix)
            elif issubclass(cls, CodeRefactoringProvider):
                artifact.refactorings.append(name)
        return artifact

    @staticmethod
    def _import(path: Path) -> ModuleType:
        digest = hashlib.sha1(str(path.resolve()).encode("utf-8")).hexdigest()[:12]
        module_name = f"_repodocs_artifact_{digest}"
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise ArtifactLoadError(path, "not an importable module")
        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as exc:
            sys.modules.pop(module_name, None)
            raise ArtifactLoadError(path, f"{type(exc).__name__}: {exc}") from exc
        return module

    @staticmethod
    def _load_analyzer(name: str, cls: type) -> AnalyzerEntry | None:
        try:
            instance = cls()
            descriptors = tuple(instance.supported_diagnostics)
        except Exception as exc:
            logger.warning("  Skipping analyzer %s: %s: %s", name, type(exc).__name__, exc)
            return None
        valid = tuple(item for item in descriptors if isinstance(item, DiagnosticDescriptor))
        if len(valid) != len(descriptors):
            logger.warning("  Analyzer %s returned descriptors of an unexpected type; ignoring them", name)
        return AnalyzerEntry(type_name=name, descriptors=valid)

    @staticmethod
    def _load_code_fix(name: str, cls: type) -> CodeFixEntry | None:
        try:
            instance = cls()
            fixable = frozenset(str(item) for item in instance.fixable_diagnostic_ids)
        except Exception as exc:
            logger.warning("  Skipping code fix %s: %s: %s", name, type(exc).__name__, exc)
            return None
        return CodeFixEntry(type_name=name, fixable_ids=fixable)


class ManifestArtifactLoader(ArtifactLoader):
    """Reads a JSON descriptor manifest emitted by a build.

    Expected shape::

        {
          "analyzers": [{"type": "...", "rules": [{"id": "...", "title": "...",
                         "category": "...", "severity": "warning",
                         "enabled": true, "description": "..."}]}],
          "code_fixes": [{"type": "...", "fixable_ids": ["..."]}],
          "refactorings": ["Ar0001SomethingRefactoring"]
        }
    """

    def load(self, path: Path) -> LoadedArtifact:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise ArtifactLoadError(path, str(exc)) from exc
        if not isinstance(data, dict):
            raise ArtifactLoadError(path, "manifest root must be an object")

        artifact = LoadedArtifact()
        for raw in _as_list(data.get("analyzers")):
            entry = self._analyzer_entry(raw)
            if entry is not None:
                artifact.analyzers.append(entry)
        for raw in _as_list(data.get("code_fixes")):
            if not isinstance(raw, dict) or not isinstance(raw.get("type"), str):
                logger.warning("  Skipping malformed code fix entry: %r", raw)
                continue
            fixable = frozenset(str(item) for item in _as_list(raw.get("fixable_ids")))
            artifact.code_fixes.append(CodeFixEntry(type_name=raw["type"], fixable_ids=fixable))
        for raw in _as_list(data.get("refactorings")):
            if isinstance(raw, str):
                artifact.refactorings.append(raw)
        return artifact

    @staticmethod
    def _analyzer_entry(raw: Any) -> AnalyzerEntry | None:
        if not isinstance(raw, dict) or not isinstance(raw.get("type"), str):
            logger.warning("  Skipping malformed analyzer entry: %r", raw)
            return None
        type_name = raw["type"]
        descriptors: List[DiagnosticDescriptor] = []
        for rule in _as_list(raw.get("rules")):
            try:
                descriptors.append(_descriptor_from_dict(rule))
            except (KeyError, TypeError, ValueError) as exc:
                logger.warning("  Skipping rule in %s: %s", type_name, exc)
        return AnalyzerEntry(type_name=type_name, descriptors=tuple(descriptors))


def _descriptor_from_dict(raw: Mapping[str, Any]) -> DiagnosticDescriptor:
    if not isinstance(raw, Mapping):
        raise TypeError(f"rule must be an object, got {type(raw).__name__}")
    return DiagnosticDescriptor(
        id=str(raw["id"]),
        title=str(raw.get("title", "")),
        category=str(raw.get("category", "")),
        default_severity=Severity.parse(raw.get("severity", Severity.WARNING.value)),
        is_enabled_by_default=bool(raw.get("enabled", True)),
        description=str(raw.get("description", "")),
    )


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


_LOADERS: Dict[str, ArtifactLoader] = {
    ".py": ModuleArtifactLoader(),
    ".json": ManifestArtifactLoader(),
}


def load_artifact(path: Path) -> LoadedArtifact:
    """Load ``path`` with the loader registered for its suffix."""
    loader = _LOADERS.get(path.suffix.lower())
    if loader is None:
        supported = ", ".join(sorted(_LOADERS))
        raise ArtifactLoadError(path, f"unsupported artifact type (expected {supported})")
    return loader.load(path)


__all__ = [
    "AnalyzerEntry",
    "ArtifactLoader",
    "CodeFixEntry",
    "LoadedArtifact",
    "ManifestArtifactLoader",
    "ModuleArtifactLoader",
    "load_artifact",
]
