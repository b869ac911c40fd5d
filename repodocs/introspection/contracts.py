"""Contracts implemented by rule plugins inside built artifacts."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from ..models import Severity


@dataclass(frozen=True)
class DiagnosticDescriptor:
    """Describes one diagnostic an analyzer can report."""

    id: str
    title: str
    category: str
    default_severity: Severity = Severity.WARNING
    is_enabled_by_default: bool = True
    description: str = ""


class DiagnosticAnalyzer(ABC):
    """Contract for analyzers exposing the diagnostics they support."""

    @property
    @abstractmethod
    def supported_diagnostics(self) -> Sequence[DiagnosticDescriptor]:
        """Return descriptors for every diagnostic this analyzer reports."""


class CodeFixProvider(ABC):
    """Contract for fixers that remediate a set of diagnostics."""

    @property
    @abstractmethod
    def fixable_diagnostic_ids(self) -> Sequence[str]:
        """Return identifiers of diagnostics this provider can fix."""


class CodeRefactoringProvider:
    """Marker base for refactorings; identified by type name only."""
