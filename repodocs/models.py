"""Core data models shared across repodocs components."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

import yaml

_YAML_WIDTH = 1_000_000


class DocsSource(str, Enum):
    """Strategy used to produce documentation for a repository."""

    COPY_EXISTING = "copy_existing"
    INTROSPECT = "introspect"
    SCAN_CONVENTIONS = "scan_conventions"

    @classmethod
    def parse(cls, value: str) -> "DocsSource":
        normalized = value.strip().lower().replace("-", "_")
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unknown docs source '{value}'")


class Severity(str, Enum):
    """Default severity of a diagnostic rule."""

    HIDDEN = "Hidden"
    INFO = "Info"
    WARNING = "Warning"
    ERROR = "Error"

    @classmethod
    def parse(cls, value: "str | Severity") -> "Severity":
        if isinstance(value, Severity):
            return value
        normalized = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        raise ValueError(f"Unknown severity '{value}'")


@dataclass(frozen=True)
class ConventionLayout:
    """Relative locations inspected by the convention scanner."""

    variants_dir: str = "src/Sdk"
    legacy_support_dir: str = "eng/LegacySupport"
    banned_symbols_file: str = "src/configuration/BannedSymbols.txt"
    service_defaults_dir: str = "eng/ANcpSdk.AspNetCore.ServiceDefaults"
    extensions_dir: str = "eng/Extensions"
    shared_dir: str = "eng/Shared"
    configuration_dir: str = "src/configuration"
    testing_dir: str = "src/Shared"


@dataclass(frozen=True)
class RepositorySpec:
    """One documented component repository."""

    name: str
    git_url: str
    display_name: str
    description: str
    docs_source: DocsSource
    existing_docs_path: str = "docs"
    requires_build: bool = False
    artifact_paths: Tuple[str, ...] = ()
    branch: str = "main"
    api_metadata: Tuple[str, ...] = ()
    conventions: ConventionLayout = field(default_factory=ConventionLayout)

    @property
    def web_url(self) -> str:
        """Browsable URL derived from the fetch location."""
        url = self.git_url.rstrip("/")
        if url.endswith(".git"):
            url = url[: -len(".git")]
        return url


@dataclass(frozen=True)
class ExtractedRule:
    """Diagnostic rule harvested from a built artifact."""

    id: str
    category: str
    title: str
    description: str
    severity: Severity
    enabled: bool
    has_code_fix: bool
    type_name: str


@dataclass(frozen=True)
class ExtractedRefactoring:
    """Refactoring provider harvested from a built artifact."""

    id: str
    description: str
    type_name: str


@dataclass(frozen=True)
class PageDocument:
    """Front matter plus Markdown body for one generated page."""

    front_matter: Tuple[Tuple[str, str], ...]
    body: str

    def render(self) -> str:
        lines = ["---"]
        for key, value in self.front_matter:
            flattened = " ".join(str(value).split())
            dumped = yaml.safe_dump(
                {key: flattened},
                sort_keys=False,
                allow_unicode=True,
                default_flow_style=False,
                width=_YAML_WIDTH,
            )
            lines.append(dumped.rstrip("\n"))
        lines.append("---")
        lines.append("")
        return "\n".join(lines) + "\n" + self.body.rstrip("\n") + "\n"


@dataclass(frozen=True)
class NavigationEntry:
    """Table-of-contents node, optionally grouping nested entries."""

    name: str
    href: Optional[str] = None
    items: Tuple["NavigationEntry", ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name}
        if self.href is not None:
            data["href"] = self.href
        if self.items:
            data["items"] = [item.to_dict() for item in self.items]
        return data


@dataclass(frozen=True)
class OutputFile:
    """Generated file addressed relative to a repository's output directory."""

    path: str
    content: str


@dataclass
class WriteLedger:
    """Counts files actually modified during one run."""

    count: int = 0
    paths: List[str] = field(default_factory=list)

    def record(self, path: str) -> None:
        self.count += 1
        self.paths.append(path)
