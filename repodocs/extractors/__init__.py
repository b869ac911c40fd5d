"""Extraction strategies and their lookup by documentation source."""

from __future__ import annotations

from typing import Callable, Dict

from ..models import DocsSource
from .base import ExtractionContext, Extractor
from .conventions import ConventionsExtractor
from .copy_existing import CopyExistingExtractor
from .introspect import IntrospectExtractor

_BUILTIN_EXTRACTORS: Dict[DocsSource, Callable[[], Extractor]] = {
    DocsSource.COPY_EXISTING: CopyExistingExtractor,
    DocsSource.INTROSPECT: IntrospectExtractor,
    DocsSource.SCAN_CONVENTIONS: ConventionsExtractor,
}


def get_extractor(source: DocsSource) -> Extractor:
    """Return a fresh extractor for ``source``."""
    try:
        factory = _BUILTIN_EXTRACTORS[source]
    except KeyError as exc:
        raise ValueError(f"No extractor registered for docs source '{source}'") from exc
    instance = factory()
    if not isinstance(instance, Extractor):
        raise TypeError(f"Extractor factory for '{source.value}' did not return an Extractor instance")
    return instance


__all__ = [
    "ConventionsExtractor",
    "CopyExistingExtractor",
    "ExtractionContext",
    "Extractor",
    "IntrospectExtractor",
    "get_extractor",
]
