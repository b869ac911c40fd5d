"""Configuration loading for repodocs (repodocs.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import ConfigError, ProjectRootNotFoundError
from .logging import get_logger
from .models import ConventionLayout, DocsSource, RepositorySpec

CONFIG_FILENAME = "repodocs.yml"
ROOT_MARKER = ".git"

DEFAULT_BUILD_COMMAND: tuple[str, ...] = ("dotnet", "build", "-c", "Release", "--nologo")

logger = get_logger("config")


@dataclass
class SiteConfig:
    """Landing page and site-build metadata."""

    title: str = "Project Documentation"
    description: str = "Documentation for every configured component"
    footer: Optional[str] = None
    quick_start_language: Optional[str] = None
    quick_start_code: Optional[str] = None

    @property
    def app_footer(self) -> str:
        return self.footer or f"{self.title} Documentation"


@dataclass
class SyncConfig:
    """Repository synchronisation behaviour."""

    strict: bool = True
    timeout: Optional[float] = None


@dataclass
class BuildConfig:
    """External build invocation for repositories that need one."""

    command: List[str] = field(default_factory=lambda: list(DEFAULT_BUILD_COMMAND))
    timeout: Optional[float] = None


@dataclass
class DocsConfig:
    """Represents the settings defined in repodocs.yml."""

    root: Path
    repos: List[RepositorySpec] = field(default_factory=list)
    output_path: str = "content"
    repos_path: str = ".repos"
    templates_dir: Optional[Path] = None
    site: SiteConfig = field(default_factory=SiteConfig)
    sync: SyncConfig = field(default_factory=SyncConfig)
    build: BuildConfig = field(default_factory=BuildConfig)
    fail_on_no_writes: bool = False

    @property
    def output_dir(self) -> Path:
        return self.root / self.output_path

    @property
    def repos_dir(self) -> Path:
        return self.root / self.repos_path


def find_project_root(start: Path | None = None, marker: str = ROOT_MARKER) -> Path:
    """Walk upward from ``start`` until a directory containing ``marker`` is found."""
    origin = (start or Path.cwd()).expanduser().resolve()
    for candidate in (origin, *origin.parents):
        if (candidate / marker).exists():
            return candidate
    raise ProjectRootNotFoundError(origin, marker)


def load_config(root: Path, config_path: Path | None = None) -> DocsConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    root = root.resolve()
    config_file = (config_path or root / CONFIG_FILENAME).expanduser()
    if not config_file.is_absolute():
        config_file = root / config_file

    if not config_file.exists():
        if config_path is not None:
            raise ConfigError(f"Configuration file not found: {config_file}")
        logger.warning("No %s found in %s; no repositories configured", CONFIG_FILENAME, root)
        return DocsConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    site_data = _as_dict(data.get("site"))
    quick_start = _as_dict(site_data.get("quick_start"))
    defaults = SiteConfig()
    site = SiteConfig(
        title=_as_str(site_data.get("title")) or defaults.title,
        description=_as_str(site_data.get("description")) or defaults.description,
        footer=_as_str(site_data.get("footer")),
        quick_start_language=_as_str(quick_start.get("language")),
        quick_start_code=_as_str(quick_start.get("code")),
    )

    sync_data = _as_dict(data.get("sync"))
    sync = SyncConfig(
        strict=_as_bool(sync_data.get("strict"), default=True),
        timeout=_as_float(sync_data.get("timeout")),
    )

    build_data = _as_dict(data.get("build"))
    build = BuildConfig(timeout=_as_float(build_data.get("timeout")))
    command = _as_str_list(build_data.get("command"))
    if command:
        build.command = command

    templates_dir_str = _as_str(data.get("templates_dir"))
    templates_dir = root / templates_dir_str if templates_dir_str else None

    repos = _parse_repos(data.get("repos"))

    return DocsConfig(
        root=root,
        repos=repos,
        output_path=_as_str(data.get("output_path")) or "content",
        repos_path=_as_str(data.get("repos_path")) or ".repos",
        templates_dir=templates_dir,
        site=site,
        sync=sync,
        build=build,
        fail_on_no_writes=_as_bool(data.get("fail_on_no_writes"), default=False),
    )


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _parse_repos(value: Any) -> List[RepositorySpec]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError("'repos' must be a list of repository mappings")

    repos: List[RepositorySpec] = []
    seen: set[str] = set()
    for index, raw in enumerate(value):
        if not isinstance(raw, dict):
            raise ConfigError(f"repos[{index}] must be a mapping")
        spec = _parse_repo(raw, index)
        if spec.name in seen:
            raise ConfigError(f"Duplicate repository name '{spec.name}'")
        seen.add(spec.name)
        repos.append(spec)
    return repos


def _parse_repo(raw: Dict[str, Any], index: int) -> RepositorySpec:
    name = _as_str(raw.get("name"))
    git_url = _as_str(raw.get("git_url"))
    if not name:
        raise ConfigError(f"repos[{index}] is missing 'name'")
    if not git_url:
        raise ConfigError(f"Repository '{name}' is missing 'git_url'")

    source_value = _as_str(raw.get("docs_source")) or DocsSource.COPY_EXISTING.value
    try:
        docs_source = DocsSource.parse(source_value)
    except ValueError as exc:
        raise ConfigError(f"Repository '{name}': {exc}") from exc

    artifact_paths = tuple(_as_str_list(raw.get("artifact_paths")))
    if docs_source is DocsSource.INTROSPECT and not artifact_paths:
        raise ConfigError(
            f"Repository '{name}' uses docs_source 'introspect' but sets no artifact_paths"
        )

    return RepositorySpec(
        name=name,
        git_url=git_url,
        display_name=_as_str(raw.get("display_name")) or name,
        description=_as_str(raw.get("description")) or "",
        docs_source=docs_source,
        existing_docs_path=_as_str(raw.get("existing_docs_path")) or "docs",
        requires_build=_as_bool(raw.get("requires_build"), default=False),
        artifact_paths=artifact_paths,
        branch=_as_str(raw.get("branch")) or "main",
        api_metadata=tuple(_as_str_list(raw.get("api_metadata"))),
        conventions=_parse_conventions(_as_dict(raw.get("conventions"))),
    )


def _parse_conventions(data: Dict[str, Any]) -> ConventionLayout:
    known = {item.name for item in fields(ConventionLayout)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown conventions keys: {', '.join(unknown)}")
    overrides = {key: _as_str(value) for key, value in data.items()}
    return ConventionLayout(**{key: value for key, value in overrides.items() if value})


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return str(value).lower()
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any, *, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return default


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "BuildConfig",
    "CONFIG_FILENAME",
    "DocsConfig",
    "SiteConfig",
    "SyncConfig",
    "find_project_root",
    "load_config",
]
