"""Cross-repository artifacts: landing page, root navigation and docfx.json."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence

from ..config import SiteConfig
from ..models import NavigationEntry, RepositorySpec
from .pages import page
from .templates import TemplateRenderer

SITE_DEST = "_site"
SITE_TEMPLATES = ("default", "modern")
CONTENT_GLOBS = ("**/*.md", "**/toc.yml")


def render_site_index(
    renderer: TemplateRenderer,
    site: SiteConfig,
    repos: Sequence[RepositorySpec],
) -> str:
    body = renderer.render("site_index", site=site, repos=repos)
    return page(site.title, body, description=site.description)


def root_toc(repos: Sequence[RepositorySpec]) -> List[NavigationEntry]:
    entries = [NavigationEntry(name="Home", href="index.md")]
    entries.extend(NavigationEntry(name=repo.display_name, href=f"{repo.name}/") for repo in repos)
    return entries


def render_docfx(
    site: SiteConfig,
    repos: Sequence[RepositorySpec],
    *,
    output_path: str,
    repos_path: str,
) -> str:
    """Site-build configuration consumed by the downstream static-site generator."""
    metadata: List[Dict[str, Any]] = [
        {
            "src": [
                {
                    "files": list(repo.api_metadata),
                    "src": f"{repos_path}/{repo.name}",
                }
            ],
            "dest": f"{output_path}/{repo.name}/api",
        }
        for repo in repos
        if repo.api_metadata
    ]
    document = {
        "metadata": metadata,
        "build": {
            "content": [{"files": list(CONTENT_GLOBS), "src": output_path}],
            "dest": SITE_DEST,
            "globalMetadata": {
                "_appTitle": site.title,
                "_appFooter": site.app_footer,
            },
            "template": list(SITE_TEMPLATES),
        },
    }
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


__all__ = ["render_docfx", "render_site_index", "root_toc"]
