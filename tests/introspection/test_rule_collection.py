"""Tests for repodocs.introspection.rules."""

from __future__ import annotations

from pathlib import Path

import pytest

from repodocs.introspection.contracts import DiagnosticDescriptor
from repodocs.introspection.loader import AnalyzerEntry, CodeFixEntry, LoadedArtifact
from repodocs.introspection.rules import (
    collect_rules,
    extract_refactorings,
    find_source_file,
    refactoring_description,
    refactoring_id,
    resolve_artifact,
    severity_to_editorconfig,
)
from repodocs.models import Severity
from tests._fixtures.repo_builder import RepoBuilder, make_spec


def _artifact() -> LoadedArtifact:
    return LoadedArtifact(
        analyzers=[
            AnalyzerEntry(
                type_name="FirstAnalyzer",
                descriptors=(
                    DiagnosticDescriptor("AL0002", "Second rule", "Usage"),
                    DiagnosticDescriptor("AL0001", "First rule", "Design", Severity.ERROR),
                ),
            ),
            AnalyzerEntry(
                type_name="SecondAnalyzer",
                descriptors=(
                    DiagnosticDescriptor("AL0002", "Conflicting title", "Usage", Severity.HIDDEN),
                    DiagnosticDescriptor("AL0010", "Tenth rule", "Style", Severity.INFO, False),
                ),
            ),
        ],
        code_fixes=[CodeFixEntry(type_name="Fixer", fixable_ids=frozenset({"AL0010", "al0001"}))],
    )


def test_collect_rules_keeps_first_occurrence_and_sorts_by_id() -> None:
    rules = collect_rules(_artifact())

    assert [rule.id for rule in rules] == ["AL0001", "AL0002", "AL0010"]
    duplicate = rules[1]
    assert duplicate.title == "Second rule"
    assert duplicate.severity is Severity.WARNING
    assert duplicate.type_name == "FirstAnalyzer"


def test_collect_rules_matches_code_fixes_by_exact_id() -> None:
    rules = {rule.id: rule for rule in collect_rules(_artifact())}

    assert rules["AL0010"].has_code_fix is True
    assert rules["AL0001"].has_code_fix is False
    assert rules["AL0002"].has_code_fix is False


def test_collect_rules_is_empty_without_analyzers() -> None:
    assert collect_rules(LoadedArtifact()) == []


@pytest.mark.parametrize(
    ("type_name", "expected"),
    [
        ("Ar0001SnakeCaseToPascalCaseRefactoring", "AR0001"),
        ("AR0042Something", "AR0042"),
        ("ar1234Lower", "AR1234"),
        ("HelperRefactoring", None),
        ("Ar12Short", None),
    ],
)
def test_refactoring_id(type_name: str, expected: str | None) -> None:
    assert refactoring_id(type_name) == expected


def test_refactoring_description_splits_words() -> None:
    assert refactoring_description("Ar0001SnakeCaseToPascalCaseRefactoring") == "Snake Case To Pascal Case"


def test_refactoring_description_falls_back_without_suffix_or_remainder() -> None:
    assert refactoring_description("Ar0001Refactoring") == "Code refactoring"
    assert refactoring_description("Ar0002Inline") == "Code refactoring"


def test_extract_refactorings_excludes_unnumbered_types_and_sorts() -> None:
    refactorings = extract_refactorings(
        ["Ar0002InlineVariableRefactoring", "HelperRefactoring", "Ar0001SnakeCaseToPascalCaseRefactoring"]
    )

    assert [item.id for item in refactorings] == ["AR0001", "AR0002"]
    assert refactorings[1].description == "Inline Variable"


def test_extract_refactorings_keeps_first_type_per_id(caplog) -> None:
    refactorings = extract_refactorings(
        ["Ar0001SnakeCaseToPascalCaseRefactoring", "AR0001OtherThingRefactoring", "Ar0002InlineRefactoring"]
    )

    assert [(item.id, item.type_name) for item in refactorings] == [
        ("AR0001", "AR0001OtherThingRefactoring"),
        ("AR0002", "Ar0002InlineRefactoring"),
    ]
    assert "Refactoring AR0001 is declared by AR0001OtherThingRefactoring" in caplog.text


def test_extract_refactorings_skips_ids_used_by_rules() -> None:
    refactorings = extract_refactorings(["Ar0001SnakeCaseToPascalCaseRefactoring"], reserved_ids=["AR0001"])

    assert refactorings == []


@pytest.mark.parametrize(
    ("severity", "enabled", "expected"),
    [
        (Severity.HIDDEN, True, "silent"),
        (Severity.INFO, True, "suggestion"),
        (Severity.WARNING, True, "warning"),
        (Severity.ERROR, True, "error"),
        (Severity.ERROR, False, "none"),
    ],
)
def test_severity_to_editorconfig(severity: Severity, enabled: bool, expected: str) -> None:
    assert severity_to_editorconfig(severity, enabled) == expected


def test_resolve_artifact_prefers_exact_path(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"artifacts/Acme.Analyzers.py": "", "bin/Release/Acme.Analyzers.py": ""})

    resolved = resolve_artifact(repo_builder.path(), "artifacts/Acme.Analyzers.py")

    assert resolved == repo_builder.path() / "artifacts" / "Acme.Analyzers.py"


def test_resolve_artifact_searches_release_output(repo_builder: RepoBuilder) -> None:
    repo_builder.write(
        {
            "src/Acme/bin/Debug/net8.0/Acme.Analyzers.py": "",
            "src/Acme/bin/Release/net8.0/ref/Acme.Analyzers.py": "",
            "src/Acme/bin/Release/net8.0/Acme.Analyzers.py": "",
            "src/Other/bin/Release_x64/Acme.Analyzers.py": "",
        }
    )

    resolved = resolve_artifact(repo_builder.path(), "missing/Acme.Analyzers.py")

    assert resolved == repo_builder.path() / "src/Acme/bin/Release/net8.0/Acme.Analyzers.py"


def test_resolve_artifact_returns_none_when_absent(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"src/Acme/bin/Debug/Acme.Analyzers.py": ""})

    assert resolve_artifact(repo_builder.path(), "Acme.Analyzers.py") is None


def test_resolve_artifact_requires_bin_release_layout(repo_builder: RepoBuilder) -> None:
    repo_builder.write(
        {
            "docs/release/Acme.Analyzers.py": "",
            "release-notes/Acme.Analyzers.py": "",
        }
    )

    assert resolve_artifact(repo_builder.path(), "Acme.Analyzers.py") is None


def test_find_source_file_links_unique_match(repo_builder: RepoBuilder) -> None:
    repo_builder.write(
        {
            "src/Acme/NamingAnalyzer.cs": "class NamingAnalyzer {}",
            "src/Acme/obj/NamingAnalyzer.cs": "generated",
        }
    )
    spec = make_spec("analyzers", branch="develop")

    url = find_source_file(repo_builder.path(), "NamingAnalyzer", spec)

    assert url == "https://github.com/acme/analyzers/blob/develop/src/Acme/NamingAnalyzer.cs"


def test_find_source_file_matches_partial_files(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"src/NamingAnalyzer.Rules.cs": ""})

    url = find_source_file(repo_builder.path(), "NamingAnalyzer", make_spec("analyzers"))

    assert url is not None and url.endswith("/src/NamingAnalyzer.Rules.cs")


def test_find_source_file_ignores_ambiguous_matches(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"a/NamingAnalyzer.cs": "", "b/NamingAnalyzer.cs": ""})

    assert find_source_file(repo_builder.path(), "NamingAnalyzer", make_spec("analyzers")) is None


def test_find_source_file_without_match(tmp_path: Path) -> None:
    assert find_source_file(tmp_path, "Missing", make_spec("analyzers")) is None
