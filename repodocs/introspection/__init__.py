"""Rule plugin contracts and the artifact loaders that enumerate them."""

from .contracts import (
    CodeFixProvider,
    CodeRefactoringProvider,
    DiagnosticAnalyzer,
    DiagnosticDescriptor,
)
from .loader import LoadedArtifact, load_artifact
from .rules import (
    collect_rules,
    extract_refactorings,
    find_source_file,
    resolve_artifact,
    severity_to_editorconfig,
)

__all__ = [
    "CodeFixProvider",
    "CodeRefactoringProvider",
    "DiagnosticAnalyzer",
    "DiagnosticDescriptor",
    "LoadedArtifact",
    "collect_rules",
    "extract_refactorings",
    "find_source_file",
    "load_artifact",
    "resolve_artifact",
    "severity_to_editorconfig",
]
