"""Best-effort pattern extraction from READMEs, source comments and build files.

These helpers do not parse their inputs. They pull out the first match of a
known shape and return ``None`` (or an empty result) when nothing matches.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

FIRST_PARAGRAPH_LIMIT = 200
_ELLIPSIS = "..."

_SUMMARY = re.compile(r"<summary>\s*(.*?)\s*</summary>", re.DOTALL)
_DOC_COMMENT_PREFIX = re.compile(r"^\s*///\s*", re.MULTILINE)
_TYPE_DECLARATION = re.compile(
    r"public\s+(abstract\s+)?class\s+(\w+)(?:<[^>]+>)?(?:\s*:\s*([^\{]+))?"
)
_BUILD_PROPERTY = re.compile(r'<(\w+)\s*(?:Condition="[^"]*")?\s*>([^<]*)</\1>')


@dataclass(frozen=True)
class BannedApi:
    api: str
    reason: str


@dataclass(frozen=True)
class BuildProperty:
    name: str
    value: str


def extract_first_paragraph(markdown: str, limit: int = FIRST_PARAGRAPH_LIMIT) -> str:
    """Return the first prose paragraph, skipping headings and leading blank lines."""
    parts: List[str] = []
    for line in markdown.split("\n"):
        if line.startswith("#") or not line.strip():
            if parts:
                break
            continue
        parts.append(line.strip())
    paragraph = " ".join(parts).strip()
    if len(paragraph) > limit:
        return paragraph[: limit - len(_ELLIPSIS)] + _ELLIPSIS
    return paragraph


def parse_banned_apis(content: str) -> List[BannedApi]:
    """Parse ``api;reason`` lines, skipping blanks and ``#`` comments."""
    entries: List[BannedApi] = []
    for line in content.split("\n"):
        if not line.strip() or line.startswith("#"):
            continue
        api, separator, reason = line.partition(";")
        entries.append(BannedApi(api=api.strip(), reason=reason.strip() if separator else "Banned"))
    return entries


def extract_summary(content: str) -> Optional[str]:
    """Return the first ``<summary>`` doc comment with its ``///`` prefixes removed."""
    match = _SUMMARY.search(content)
    if match is None:
        return None
    summary = _DOC_COMMENT_PREFIX.sub("", match.group(1)).strip()
    return summary or None


def extract_type_declaration(content: str) -> Optional[str]:
    """Return the first public class declaration, including generics and base list."""
    match = _TYPE_DECLARATION.search(content)
    if match is None:
        return None
    return match.group(0).strip()


def extract_build_properties(content: str) -> List[BuildProperty]:
    """Return every ``<Name>value</Name>`` element, in document order."""
    return [
        BuildProperty(name=match.group(1), value=match.group(2).strip())
        for match in _BUILD_PROPERTY.finditer(content)
    ]


__all__ = [
    "BannedApi",
    "BuildProperty",
    "FIRST_PARAGRAPH_LIMIT",
    "extract_build_properties",
    "extract_first_paragraph",
    "extract_summary",
    "extract_type_declaration",
    "parse_banned_apis",
]
