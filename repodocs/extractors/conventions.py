"""Strategy that documents an SDK repository from its folder layout."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from ..logging import get_logger
from ..models import NavigationEntry, OutputFile
from ..rendering.pages import code_span, escape_markdown, markdown_table, page, sections
from ..rendering.toc import render_toc
from ..repo_scanner import RepoScanner
from . import constants
from .base import ExtractionContext, Extractor
from .text import (
    extract_build_properties,
    extract_first_paragraph,
    extract_summary,
    extract_type_declaration,
    parse_banned_apis,
)

logger = get_logger("extractors.conventions")


@dataclass(frozen=True)
class _Feature:
    name: str
    description: str


@dataclass(frozen=True)
class _Member:
    name: str
    summary: Optional[str]


@dataclass(frozen=True)
class _Folder:
    name: str
    readme: Optional[str]
    files: Tuple[str, ...] = ()
    members: Tuple[_Member, ...] = ()


@dataclass(frozen=True)
class _TestingEntry:
    name: str
    summary: Optional[str]
    declaration: Optional[str]


@dataclass(frozen=True)
class _Property:
    name: str
    default: str
    category: str


_Section = Callable[[ExtractionContext], Optional[str]]


class ConventionsExtractor(Extractor):
    """Runs each section scan in order and finishes with the navigation manifest."""

    def __init__(self, scanner: RepoScanner | None = None) -> None:
        self.scanner = scanner or RepoScanner()
        self._sections: Tuple[Tuple[str, _Section], ...] = (
            ("index.md", self._overview),
            ("variants.md", self._variants),
            ("polyfills.md", self._polyfills),
            ("banned-apis.md", self._banned_apis),
            ("service-defaults.md", self._service_defaults),
            ("extensions.md", self._extensions),
            ("shared-utilities.md", self._shared_utilities),
            ("configuration-files.md", self._configuration_files),
            ("testing.md", self._testing),
            ("msbuild-properties.md", self._msbuild_properties),
        )

    def extract(self, context: ExtractionContext) -> List[OutputFile]:
        outputs: List[OutputFile] = []
        for filename, generate in self._sections:
            content = generate(context)
            if content is None:
                logger.debug("  Skipping %s for %s", filename, context.spec.name)
                continue
            outputs.append(OutputFile(path=filename, content=content))
        generated = {output.path for output in outputs}
        outputs.append(OutputFile(path="toc.yml", content=render_toc(self._toc(generated))))
        return outputs

    @staticmethod
    def _toc(generated: set[str]) -> List[NavigationEntry]:
        return [
            NavigationEntry(name=label, href=filename)
            for filename, label in constants.CONVENTION_PAGES
            if filename in generated
        ]

    # ------------------------------------------------------------------
    # Sections

    def _overview(self, context: ExtractionContext) -> Optional[str]:
        readme = _find_readme(context.repo_path) if context.repo_path.is_dir() else None
        if readme is None:
            return None
        spec = context.spec
        return page(spec.display_name, _read(readme), description=spec.description)

    def _variants(self, context: ExtractionContext) -> Optional[str]:
        root = self._path(context, context.spec.conventions.variants_dir)
        if not root.is_dir():
            return None
        rows = [
            (code_span(folder.name), _folder_description(folder))
            for folder in _subdirectories(root)
        ]
        body = sections("# SDK Variants", markdown_table(("Variant", "Description"), rows))
        return page("SDK Variants", body)

    def _polyfills(self, context: ExtractionContext) -> Optional[str]:
        root = self._path(context, context.spec.conventions.legacy_support_dir)
        if not root.is_dir():
            return None
        rows = [
            (folder.name, constants.MIN_POLYFILL_FRAMEWORK, _folder_description(folder))
            for folder in _subdirectories(root)
        ]
        body = sections(
            "# Polyfills",
            "The SDK automatically injects polyfills for older target frameworks.",
            markdown_table(("Feature", "Min TFM", "Description"), rows),
        )
        return page("Polyfills", body)

    def _banned_apis(self, context: ExtractionContext) -> Optional[str]:
        source = self._path(context, context.spec.conventions.banned_symbols_file)
        if not source.is_file():
            return None
        rows = [
            (code_span(escape_markdown(entry.api)), escape_markdown(entry.reason))
            for entry in parse_banned_apis(_read(source))
        ]
        body = sections(
            "# Banned APIs",
            f"The following APIs are banned by default in {context.spec.display_name} projects.",
            markdown_table(("API", "Reason"), rows),
        )
        return page("Banned APIs", body)

    def _service_defaults(self, context: ExtractionContext) -> Optional[str]:
        root = self._path(context, context.spec.conventions.service_defaults_dir)
        if not root.is_dir():
            return None
        features = [
            _Feature(name=stem.replace("ANcpSdk", "").replace("Configuration", ""), description=description)
            for stem, description in constants.SERVICE_DEFAULT_FEATURES.items()
            if (root / f"{stem}.cs").is_file()
        ]
        readme = _find_readme(root)
        body = context.renderer.render(
            "service_defaults",
            display_name=context.spec.display_name,
            features=features,
            readme=_read(readme).strip() if readme else None,
        )
        return page("Service Defaults (Web SDK)", body)

    def _extensions(self, context: ExtractionContext) -> Optional[str]:
        root = self._path(context, context.spec.conventions.extensions_dir)
        if not root.is_dir():
            return None
        entries = []
        for folder in _subdirectories(root):
            readme = _find_readme(folder)
            entries.append(
                _Folder(
                    name=folder.name,
                    readme=_read(readme).strip() if readme else None,
                    files=tuple(path.name for path in _files(folder, "*.cs")),
                )
            )
        return page("Extensions", context.renderer.render("extensions", entries=entries))

    def _shared_utilities(self, context: ExtractionContext) -> Optional[str]:
        root = self._path(context, context.spec.conventions.shared_dir)
        if not root.is_dir():
            return None
        entries = []
        for folder in _subdirectories(root):
            readme = _find_readme(folder)
            members: Tuple[_Member, ...] = ()
            if readme is None:
                members = tuple(
                    _Member(name=path.stem, summary=extract_summary(_read(path)))
                    for path in _files(folder, "*.cs")
                )
            entries.append(
                _Folder(name=folder.name, readme=_read(readme).strip() if readme else None, members=members)
            )
        return page("Shared Utilities", context.renderer.render("shared_utilities", entries=entries))

    def _configuration_files(self, context: ExtractionContext) -> Optional[str]:
        root = self._path(context, context.spec.conventions.configuration_dir)
        if not root.is_dir():
            return None

        blocks: List[Optional[str]] = [
            "# Configuration Files",
            "The SDK includes pre-configured settings for analyzers and code style.",
        ]
        editorconfigs = _files(root, "*.editorconfig")
        if editorconfigs:
            rows = [(code_span(path.name), _editorconfig_purpose(path.name)) for path in editorconfigs]
            blocks += ["## EditorConfig Files", markdown_table(("File", "Purpose"), rows)]
        banned = _files(root, "BannedSymbols*.txt")
        if banned:
            rows = [(code_span(path.name), _banned_symbols_description(path.name)) for path in banned]
            blocks += ["## Banned Symbols", markdown_table(("File", "Description"), rows)]
        if (root / constants.RUN_SETTINGS_FILE).is_file():
            blocks += [
                "## Test Run Settings",
                f"The `{constants.RUN_SETTINGS_FILE}` file configures test execution settings.",
            ]
        return page("Configuration Files", sections(*blocks))

    def _testing(self, context: ExtractionContext) -> Optional[str]:
        root = self._path(context, context.spec.conventions.testing_dir)
        if not root.is_dir():
            return None
        entries = []
        for path in _files(root, "*.cs"):
            content = _read(path)
            entries.append(
                _TestingEntry(
                    name=path.stem,
                    summary=extract_summary(content),
                    declaration=extract_type_declaration(content),
                )
            )
        return page("Testing Infrastructure", context.renderer.render("testing", entries=entries))

    def _msbuild_properties(self, context: ExtractionContext) -> Optional[str]:
        build_files = self.scanner.find(context.repo_path, ["*.props"]) + self.scanner.find(
            context.repo_path, ["*.targets"]
        )
        if not build_files:
            return None

        properties: Dict[str, _Property] = {}
        for path in build_files:
            category = _property_category(path.name)
            for item in extract_build_properties(_read(path)):
                if item.name in properties or not _is_user_configurable(item.name):
                    continue
                properties[item.name] = _Property(name=item.name, default=item.value, category=category)

        blocks: List[Optional[str]] = [
            "# MSBuild Properties Reference",
            f"Complete reference of all MSBuild properties available in {context.spec.display_name}.",
        ]
        for category in sorted({prop.category for prop in properties.values()}):
            rows = [
                (
                    code_span(prop.name),
                    code_span(prop.default) if prop.default else "-",
                    constants.PROPERTY_DESCRIPTIONS.get(prop.name, constants.DEFAULT_PROPERTY_DESCRIPTION),
                )
                for prop in sorted(properties.values(), key=lambda item: item.name)
                if prop.category == category
            ]
            blocks += [f"## {category}", markdown_table(("Property", "Default", "Description"), rows)]
        return page("MSBuild Properties Reference", sections(*blocks))

    @staticmethod
    def _path(context: ExtractionContext, relative: str) -> Path:
        return context.repo_path / relative


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")


def _subdirectories(root: Path) -> List[Path]:
    return sorted((path for path in root.iterdir() if path.is_dir()), key=lambda path: path.name)


def _files(root: Path, pattern: str) -> List[Path]:
    return sorted((path for path in root.glob(pattern) if path.is_file()), key=lambda path: path.name)


def _find_readme(folder: Path) -> Optional[Path]:
    for path in sorted(folder.iterdir(), key=lambda item: item.name):
        if path.is_file() and path.name.lower() == "readme.md":
            return path
    return None


def _folder_description(folder: Path) -> str:
    readme = _find_readme(folder)
    if readme is None:
        return constants.NO_DESCRIPTION
    return extract_first_paragraph(_read(readme))


def _editorconfig_purpose(name: str) -> str:
    if name in constants.EDITORCONFIG_PURPOSES:
        return constants.EDITORCONFIG_PURPOSES[name]
    prefix = constants.ANALYZER_EDITORCONFIG_PREFIX
    if name.startswith(prefix):
        return f"Settings for {name[len(prefix):].replace('.editorconfig', '')}"
    return constants.DEFAULT_EDITORCONFIG_PURPOSE


def _banned_symbols_description(name: str) -> str:
    if name == constants.DEFAULT_BANNED_SYMBOLS_FILE:
        return constants.DEFAULT_BANNED_SYMBOLS_DESCRIPTION
    if "Json" in name:
        return constants.JSON_BANNED_SYMBOLS_DESCRIPTION
    return constants.EXTRA_BANNED_SYMBOLS_DESCRIPTION


def _property_category(filename: str) -> str:
    for marker, category in constants.PROPERTY_CATEGORIES:
        if marker in filename:
            return category
    return constants.DEFAULT_PROPERTY_CATEGORY


def _is_user_configurable(name: str) -> bool:
    if name.startswith("_") or name in constants.IGNORED_BUILD_ELEMENTS:
        return False
    return name.lower() in constants.USER_CONFIGURABLE_PROPERTIES or name.startswith(
        constants.USER_CONFIGURABLE_PREFIXES
    )


__all__ = ["ConventionsExtractor"]
