"""Tests for repodocs.rendering.site."""

from __future__ import annotations

import json

import yaml

from repodocs.config import SiteConfig
from repodocs.models import DocsSource
from repodocs.rendering.site import render_docfx, render_site_index, root_toc
from repodocs.rendering.templates import TemplateRenderer
from tests._fixtures.repo_builder import make_spec


def test_site_index_lists_components(renderer: TemplateRenderer) -> None:
    site = SiteConfig(title="Acme Framework", description="Docs for Acme")
    repos = [make_spec("sdk"), make_spec("analyzers", DocsSource.INTROSPECT, artifact_paths=("a.py",))]

    content = render_site_index(renderer, site, repos)

    assert yaml.safe_load(content.split("---\n")[1]) == {
        "title": "Acme Framework",
        "description": "Docs for Acme",
    }
    assert "Welcome to the Acme Framework documentation." in content
    assert "### [Acme Sdk](./sdk/)\n\nThe sdk component.\n" in content
    assert content.index("./sdk/") < content.index("./analyzers/")
    assert "## Quick Start" not in content


def test_site_index_quick_start(renderer: TemplateRenderer) -> None:
    site = SiteConfig(
        title="Acme",
        quick_start_language="xml",
        quick_start_code='<Project Sdk="Acme.Sdk">\n</Project>\n',
    )

    content = render_site_index(renderer, site, [])

    assert content.endswith('## Quick Start\n\n```xml\n<Project Sdk="Acme.Sdk">\n</Project>\n```\n')


def test_root_toc_entries() -> None:
    entries = root_toc([make_spec("sdk")])

    assert [(entry.name, entry.href) for entry in entries] == [("Home", "index.md"), ("Acme Sdk", "sdk/")]


def test_docfx_configuration() -> None:
    site = SiteConfig(title="Acme")
    repos = [make_spec("sdk"), make_spec("utils", api_metadata=("src/**/*.csproj",))]

    document = json.loads(render_docfx(site, repos, output_path="content", repos_path=".repos"))

    assert document["metadata"] == [
        {
            "src": [{"files": ["src/**/*.csproj"], "src": ".repos/utils"}],
            "dest": "content/utils/api",
        }
    ]
    build = document["build"]
    assert build["content"] == [{"files": ["**/*.md", "**/toc.yml"], "src": "content"}]
    assert build["dest"] == "_site"
    assert build["globalMetadata"] == {"_appTitle": "Acme", "_appFooter": "Acme Documentation"}
    assert build["template"] == ["default", "modern"]
