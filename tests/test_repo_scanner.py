"""Tests for repodocs.repo_scanner."""

from __future__ import annotations

from pathlib import Path

from repodocs.repo_scanner import RepoScanner
from tests._fixtures.repo_builder import RepoBuilder


def test_find_matches_file_names_in_path_order(repo_builder: RepoBuilder) -> None:
    repo_builder.write(
        {
            "src/b/Widget.cs": "",
            "src/a/Widget.Generated.cs": "",
            "README.md": "",
            "src/a/notes.txt": "",
        }
    )

    found = RepoScanner().find(repo_builder.path(), ["Widget.cs", "Widget.*.cs"])

    assert [path.relative_to(repo_builder.path()).as_posix() for path in found] == [
        "src/a/Widget.Generated.cs",
        "src/b/Widget.cs",
    ]


def test_find_skips_build_output_and_vcs_folders(repo_builder: RepoBuilder) -> None:
    repo_builder.write(
        {
            ".git/config.md": "",
            "bin/Debug/out.md": "",
            "obj/project.md": "",
            "node_modules/pkg/readme.md": "",
            "docs/guide.md": "",
        }
    )

    found = RepoScanner().find(repo_builder.path(), ["*.md"])

    assert found == [repo_builder.path() / "docs" / "guide.md"]


def test_custom_exclusions_replace_defaults(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"bin/Release/Tool.py": "", "ref/Tool.py": ""})

    found = RepoScanner(excluded_dirs={"ref"}).find(repo_builder.path(), ["Tool.py"])

    assert found == [repo_builder.path() / "bin" / "Release" / "Tool.py"]


def test_find_in_missing_directory(tmp_path: Path) -> None:
    assert RepoScanner().find(tmp_path / "absent", ["*"]) == []
