"""Tests for repodocs.extractors.text."""

from __future__ import annotations

from repodocs.extractors.text import (
    BannedApi,
    extract_build_properties,
    extract_first_paragraph,
    extract_summary,
    extract_type_declaration,
    parse_banned_apis,
)


def test_first_paragraph_truncates_long_text() -> None:
    markdown = "# Title\n\n" + "a" * 250 + "\n\nSecond paragraph."

    paragraph = extract_first_paragraph(markdown)

    assert len(paragraph) == 200
    assert paragraph == "a" * 197 + "..."


def test_first_paragraph_keeps_short_text() -> None:
    text = "b" * 150

    assert extract_first_paragraph(f"# Heading\n{text}\n") == text


def test_first_paragraph_joins_wrapped_lines_and_stops_at_blank_line() -> None:
    markdown = "\n\n# Lock\n\nBackports the\n  Lock type.\r\n\nMore detail.\n"

    assert extract_first_paragraph(markdown) == "Backports the Lock type."


def test_first_paragraph_stops_at_next_heading() -> None:
    assert extract_first_paragraph("Intro line\n## Usage\nignored") == "Intro line"


def test_first_paragraph_of_headings_only_is_empty() -> None:
    assert extract_first_paragraph("# One\n\n## Two\n") == ""


def test_parse_banned_apis_skips_comments_and_defaults_reason() -> None:
    content = "# Time APIs\n\nT:System.DateTime.Now;Use TimeProvider instead\r\nM:System.Console.WriteLine\n"

    assert parse_banned_apis(content) == [
        BannedApi(api="T:System.DateTime.Now", reason="Use TimeProvider instead"),
        BannedApi(api="M:System.Console.WriteLine", reason="Banned"),
    ]


def test_parse_banned_apis_splits_on_first_separator_only() -> None:
    entries = parse_banned_apis("M:Foo.Bar;Reason; with semicolon")

    assert entries == [BannedApi(api="M:Foo.Bar", reason="Reason; with semicolon")]


def test_extract_summary_strips_comment_prefixes() -> None:
    content = """
    namespace Acme;

    /// <summary>
    ///     Base class for integration tests
    ///     hosting the web application.
    /// </summary>
    public abstract class IntegrationTestBase<TProgram> : IAsyncLifetime
    {
    }
    """

    assert extract_summary(content) == "Base class for integration tests\nhosting the web application."


def test_extract_summary_missing_returns_none() -> None:
    assert extract_summary("public class Plain {}") is None


def test_extract_type_declaration_includes_generics_and_base_list() -> None:
    content = "public abstract class IntegrationTestBase<TProgram> : IAsyncLifetime, IDisposable\n{\n}"

    assert extract_type_declaration(content) == (
        "public abstract class IntegrationTestBase<TProgram> : IAsyncLifetime, IDisposable"
    )


def test_extract_type_declaration_ignores_internal_types() -> None:
    assert extract_type_declaration("internal sealed class Hidden {}") is None


def test_extract_build_properties_reads_conditional_elements() -> None:
    content = """
    <Project>
      <PropertyGroup>
        <InjectSharedThrow Condition="'$(InjectSharedThrow)' == ''">true</InjectSharedThrow>
        <Nullable>enable</Nullable>
        <_InternalFlag>1</_InternalFlag>
        <Empty></Empty>
      </PropertyGroup>
    </Project>
    """

    properties = [(item.name, item.value) for item in extract_build_properties(content)]

    assert properties == [
        ("InjectSharedThrow", "true"),
        ("Nullable", "enable"),
        ("_InternalFlag", "1"),
        ("Empty", ""),
    ]
