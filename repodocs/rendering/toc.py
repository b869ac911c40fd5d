"""Navigation manifests (toc.yml) for the generated site."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Sequence, Tuple

import yaml

from ..models import ExtractedRefactoring, ExtractedRule, NavigationEntry

CATEGORY_ORDER: Tuple[str, ...] = (
    "Design",
    "Reliability",
    "Usage",
    "Threading",
    "OpenTelemetry",
    "Style",
    "VersionManagement",
    "ASP.NET Core",
    "Performance",
)
_UNKNOWN_CATEGORY_RANK = len(CATEGORY_ORDER)

_YAML_WIDTH = 1_000_000


def render_toc(entries: Iterable[NavigationEntry]) -> str:
    """Serialize navigation entries as a YAML block sequence."""
    data = [entry.to_dict() for entry in entries]
    if not data:
        return "[]\n"
    return yaml.safe_dump(
        data,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
        width=_YAML_WIDTH,
    )


def category_sort_key(category: str) -> Tuple[int, str]:
    """Known categories in their fixed priority, then everything else alphabetically."""
    try:
        return CATEGORY_ORDER.index(category), ""
    except ValueError:
        return _UNKNOWN_CATEGORY_RANK, category


def categorized_rules_toc(
    rules: Sequence[ExtractedRule],
    refactorings: Sequence[ExtractedRefactoring],
) -> List[NavigationEntry]:
    entries = [NavigationEntry(name="Rules Index", href="../index.md")]

    by_category: Dict[str, List[ExtractedRule]] = defaultdict(list)
    for rule in rules:
        by_category[rule.category].append(rule)
    for category in sorted(by_category, key=category_sort_key):
        items = tuple(
            NavigationEntry(name=rule.id, href=f"{rule.id}.md")
            for rule in sorted(by_category[category], key=lambda item: item.id)
        )
        entries.append(NavigationEntry(name=f"{category} Rules", items=items))

    if refactorings:
        items = tuple(NavigationEntry(name=item.id, href=f"{item.id}.md") for item in refactorings)
        entries.append(NavigationEntry(name="Refactorings", items=items))
    return entries


def repository_toc(*, include_rules: bool) -> List[NavigationEntry]:
    """Default per-repository manifest used when the repository ships none."""
    entries = [NavigationEntry(name="Overview", href="index.md")]
    if include_rules:
        entries.append(NavigationEntry(name="Rules", href="rules/"))
        entries.append(NavigationEntry(name="Configuration", href="configuration.md"))
    return entries


__all__ = [
    "CATEGORY_ORDER",
    "categorized_rules_toc",
    "category_sort_key",
    "render_toc",
    "repository_toc",
]
