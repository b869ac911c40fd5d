"""Shared Markdown building blocks for generated pages."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from ..models import PageDocument

_MARKDOWN_SPECIAL = ("[", "]", "<", ">")


def escape_markdown(text: str) -> str:
    """Backslash-escape characters that would turn table text into links or HTML."""
    for char in _MARKDOWN_SPECIAL:
        text = text.replace(char, "\\" + char)
    return text


def code_span(text: str) -> str:
    return f"`{text}`"


def markdown_table(
    headers: Sequence[str],
    rows: Iterable[Sequence[str]],
    *,
    separators: Optional[Sequence[str]] = None,
    padded: bool = True,
) -> str:
    """Render a pipe table.

    ``padded`` tables put a space around every cell (``| a | b |``); compact
    tables (``|a|b|``) are used for rule listings. The dashes row is always
    compact and spans each header cell; ``separators`` overrides it, e.g. to
    centre columns.
    """
    if separators is None:
        width = 2 if padded else 0
        separators = ["-" * max(len(header) + width, 3) for header in headers]
    lines = [_row(headers, padded), _row(separators, False)]
    lines.extend(_row(row, padded) for row in rows)
    return "\n".join(lines)


def _row(cells: Sequence[str], padded: bool) -> str:
    if padded:
        return "| " + " | ".join(cells) + " |"
    return "|" + "|".join(cells) + "|"


def page(title: str, body: str, *, description: Optional[str] = None) -> str:
    """Render ``body`` under front matter carrying ``title`` and ``description``."""
    front_matter: List[tuple[str, str]] = [("title", title)]
    if description is not None:
        front_matter.append(("description", description))
    return PageDocument(front_matter=tuple(front_matter), body=body).render()


def sections(*blocks: Optional[str]) -> str:
    """Join non-empty Markdown blocks with one blank line between them."""
    return "\n\n".join(block.strip("\n") for block in blocks if block and block.strip())


__all__ = ["code_span", "escape_markdown", "markdown_table", "page", "sections"]
