"""Base classes for documentation extraction strategies."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List

from ..models import OutputFile, RepositorySpec
from ..rendering.templates import TemplateRenderer


@dataclass(frozen=True)
class ExtractionContext:
    """Inputs shared by every strategy for one repository."""

    spec: RepositorySpec
    repo_path: Path
    renderer: TemplateRenderer


class Extractor(ABC):
    """Contract for strategies that turn a working copy into output files."""

    @abstractmethod
    def extract(self, context: ExtractionContext) -> List[OutputFile]:
        """Return generated files addressed relative to the repository output folder."""
