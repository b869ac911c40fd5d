"""Rule tables, rule pages and settings-override files for analyzer repositories."""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional, Sequence

from ..introspection.rules import severity_to_editorconfig
from ..models import ExtractedRefactoring, ExtractedRule, Severity
from .pages import escape_markdown, markdown_table, page
from .templates import TemplateRenderer

RULES_TABLE_HEADERS = ("Id", "Category", "Description", "Severity", "Enabled", "Code Fix")
RULES_TABLE_SEPARATORS = ("--", "--------", "-----------", ":------:", ":-----:", ":------:")
REFACTORINGS_TABLE_HEADERS = ("Id", "Description")
REFACTORINGS_TABLE_SEPARATORS = ("--", "-----------")
NO_REFACTORINGS = "_No refactorings available._"

EDITORCONFIG_HEADER = "# Auto-generated by repodocs"

_SEVERITY_GLYPHS: Dict[Severity, str] = {
    Severity.HIDDEN: "👻",
    Severity.INFO: "ℹ️",
    Severity.WARNING: "⚠️",
    Severity.ERROR: "❌",
}

_CUSTOM_CONTENT = re.compile(r"^## (?:Examples|See Also|Notes)\b.*", re.MULTILINE | re.DOTALL)


def severity_glyph(severity: Severity) -> str:
    return _SEVERITY_GLYPHS.get(severity, "?")


def bool_glyph(value: bool) -> str:
    return "✔️" if value else "❌"


def render_rules_table(rules: Sequence[ExtractedRule]) -> str:
    rows = [
        (
            f"[{rule.id}](./rules/{rule.id}.md)",
            rule.category,
            escape_markdown(rule.title),
            severity_glyph(rule.severity),
            bool_glyph(rule.enabled),
            bool_glyph(rule.has_code_fix),
        )
        for rule in rules
    ]
    return markdown_table(RULES_TABLE_HEADERS, rows, separators=RULES_TABLE_SEPARATORS, padded=False)


def render_refactorings_table(refactorings: Sequence[ExtractedRefactoring]) -> str:
    if not refactorings:
        return NO_REFACTORINGS
    rows = [
        (f"[{item.id}](./rules/{item.id}.md)", escape_markdown(item.description))
        for item in refactorings
    ]
    return markdown_table(
        REFACTORINGS_TABLE_HEADERS, rows, separators=REFACTORINGS_TABLE_SEPARATORS, padded=False
    )


def render_rule_page(
    renderer: TemplateRenderer,
    rule: ExtractedRule,
    *,
    source_url: Optional[str] = None,
    existing: Optional[str] = None,
) -> str:
    """Render one rule page, keeping hand-written sections from ``existing``."""
    body = renderer.render(
        "rule",
        rule=rule,
        title=escape_markdown(rule.title),
        source_url=source_url,
        source_name=_source_name(source_url),
        editorconfig_severity=severity_to_editorconfig(rule.severity, rule.enabled),
    )
    generated = page(f"{rule.id} - {rule.title}", body)
    if existing is None:
        return generated
    return merge_rule_content(generated, existing)


def merge_rule_content(generated: str, existing: str) -> str:
    """Append the existing page from its first Examples, See Also or Notes heading."""
    match = _CUSTOM_CONTENT.search(existing.replace("\r\n", "\n"))
    if match is None:
        return generated
    return generated.rstrip("\n") + "\n\n" + match.group(0).rstrip() + "\n"


def render_refactoring_page(
    renderer: TemplateRenderer,
    refactoring: ExtractedRefactoring,
    *,
    source_url: Optional[str] = None,
) -> str:
    body = renderer.render(
        "refactoring",
        refactoring=refactoring,
        title=escape_markdown(refactoring.description),
        source_url=source_url,
        source_name=_source_name(source_url),
    )
    return page(f"{refactoring.id} - {refactoring.description}", body)


def _source_name(source_url: Optional[str]) -> Optional[str]:
    if not source_url:
        return None
    return source_url.rsplit("/", 1)[-1]


def render_editorconfig_entries(rules: Iterable[ExtractedRule], override: Optional[str] = None) -> str:
    """Per-rule ``# ID: Title`` / ``dotnet_diagnostic`` pairs separated by blank lines."""
    blocks: List[str] = []
    for rule in rules:
        severity = override or severity_to_editorconfig(rule.severity, rule.enabled)
        blocks.append(f"# {rule.id}: {rule.title}\ndotnet_diagnostic.{rule.id}.severity = {severity}")
    return "\n\n".join(blocks)


def render_editorconfig(rules: Sequence[ExtractedRule], override: Optional[str] = None) -> str:
    """Global settings-override file for every rule."""
    lines = [EDITORCONFIG_HEADER, "is_global = true", "global_level = -100", ""]
    entries = render_editorconfig_entries(rules, override)
    if entries:
        lines.append(entries)
    return "\n".join(lines) + "\n"


def render_configuration_page(renderer: TemplateRenderer, rules: Sequence[ExtractedRule]) -> str:
    body = renderer.render(
        "rules_configuration",
        default_settings=render_editorconfig_entries(rules),
        disabled_settings=render_editorconfig_entries(rules, "none"),
    )
    return page("Configuration", body)


def render_analyzer_index(
    renderer: TemplateRenderer,
    *,
    display_name: str,
    description: str,
    rules: Sequence[ExtractedRule],
    refactorings: Sequence[ExtractedRefactoring],
) -> str:
    body = renderer.render(
        "analyzer_index",
        display_name=display_name,
        description=description,
        rules_table=render_rules_table(rules),
        refactorings_table=render_refactorings_table(refactorings),
    )
    return page(display_name, body, description=description)


__all__ = [
    "EDITORCONFIG_HEADER",
    "NO_REFACTORINGS",
    "bool_glyph",
    "merge_rule_content",
    "render_analyzer_index",
    "render_configuration_page",
    "render_editorconfig",
    "render_editorconfig_entries",
    "render_refactoring_page",
    "render_refactorings_table",
    "render_rule_page",
    "render_rules_table",
    "severity_glyph",
]
