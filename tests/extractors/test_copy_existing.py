"""Tests for the copy-existing strategy."""

from __future__ import annotations

from repodocs.extractors.base import ExtractionContext
from repodocs.extractors.copy_existing import CopyExistingExtractor, transform_links
from repodocs.models import DocsSource
from repodocs.rendering.templates import TemplateRenderer
from tests._fixtures.repo_builder import RepoBuilder, make_spec


def test_transform_links_rewrites_relative_links_only() -> None:
    content = "See [rules](./rules/AL0001.md), [site](https://example.com) and [up](../x.md)."

    assert transform_links(content, "analyzers") == (
        "See [rules](../analyzers/rules/AL0001.md), [site](https://example.com) and [up](../x.md)."
    )


def test_copies_markdown_recursively_with_toc(repo_builder: RepoBuilder, renderer: TemplateRenderer) -> None:
    repo_builder.write(
        {
            "docs/index.md": "# Home\n\n[Guide](./guide/setup.md)\n",
            "docs/guide/setup.md": "# Setup\n",
            "docs/toc.yml": "- name: Home\n  href: index.md\n",
            "docs/images/logo.png": "png",
        }
    )
    spec = make_spec("utils", DocsSource.COPY_EXISTING)
    context = ExtractionContext(spec=spec, repo_path=repo_builder.path(), renderer=renderer)

    outputs = {output.path: output.content for output in CopyExistingExtractor().extract(context)}

    assert sorted(outputs) == ["guide/setup.md", "index.md", "toc.yml"]
    assert outputs["index.md"] == "# Home\n\n[Guide](../utils/guide/setup.md)\n"
    assert outputs["toc.yml"] == "- name: Home\n  href: index.md\n"


def test_custom_docs_path(repo_builder: RepoBuilder, renderer: TemplateRenderer) -> None:
    repo_builder.write({"documentation/readme.md": "hello\n"})
    spec = make_spec("utils", DocsSource.COPY_EXISTING, existing_docs_path="documentation")
    context = ExtractionContext(spec=spec, repo_path=repo_builder.path(), renderer=renderer)

    outputs = CopyExistingExtractor().extract(context)

    assert [output.path for output in outputs] == ["readme.md"]


def test_missing_docs_folder_yields_nothing(repo_builder: RepoBuilder, renderer: TemplateRenderer) -> None:
    spec = make_spec("utils", DocsSource.COPY_EXISTING)
    context = ExtractionContext(spec=spec, repo_path=repo_builder.path(), renderer=renderer)

    assert CopyExistingExtractor().extract(context) == []
