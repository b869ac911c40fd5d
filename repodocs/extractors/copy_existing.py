"""Strategy that republishes a repository's own Markdown documentation."""

from __future__ import annotations

import re
from typing import List

from ..logging import get_logger
from ..models import OutputFile
from ..repo_scanner import RepoScanner
from .base import ExtractionContext, Extractor

_RELATIVE_LINK = re.compile(r"\]\(\./(.*?)\)")
_TOC_FILENAME = "toc.yml"

logger = get_logger("extractors.copy_existing")


def transform_links(content: str, repo_name: str) -> str:
    """Rewrite ``](./x)`` links so they resolve from the unified site."""
    return _RELATIVE_LINK.sub(lambda match: f"](../{repo_name}/{match.group(1)})", content)


class CopyExistingExtractor(Extractor):
    """Copies ``*.md`` files and the navigation manifest from the docs folder."""

    def __init__(self, scanner: RepoScanner | None = None) -> None:
        self.scanner = scanner or RepoScanner()

    def extract(self, context: ExtractionContext) -> List[OutputFile]:
        spec = context.spec
        docs_dir = context.repo_path / spec.existing_docs_path
        if not docs_dir.is_dir():
            logger.warning("  No docs folder at %s for %s", docs_dir, spec.name)
            return []

        outputs: List[OutputFile] = []
        for source in self.scanner.find(docs_dir, ["*.md"]):
            relative = source.relative_to(docs_dir).as_posix()
            content = source.read_text(encoding="utf-8", errors="replace")
            outputs.append(OutputFile(path=relative, content=transform_links(content, spec.name)))

        toc = docs_dir / _TOC_FILENAME
        if toc.is_file():
            outputs.append(OutputFile(path=_TOC_FILENAME, content=toc.read_text(encoding="utf-8", errors="replace")))
        return outputs


__all__ = ["CopyExistingExtractor", "transform_links"]
