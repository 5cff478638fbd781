"""Substring search over the document corpus."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from secondbrain.index.library import DocumentLibrary
from secondbrain.utils.text import build_excerpt

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class SearchResult:
    slug: str
    title: str
    folder: str
    excerpt: str


class Searcher:
    """Case-insensitive substring search on titles and bodies.

    Results keep corpus order (most recently modified first) and are not
    ranked; the first ``limit`` matches win.
    """

    def __init__(
        self,
        library: DocumentLibrary,
        *,
        limit: int = 10,
        excerpt_before: int = 40,
        excerpt_after: int = 60,
    ) -> None:
        self.library = library
        self.limit = limit
        self.excerpt_before = excerpt_before
        self.excerpt_after = excerpt_after

    def search(self, query: str) -> List[SearchResult]:
        if not query or not query.strip() or self.limit <= 0:
            return []

        needle = query.lower()
        results: List[SearchResult] = []
        for doc in self.library.list_all():
            if needle not in doc.title.lower() and needle not in doc.content.lower():
                continue
            results.append(
                SearchResult(
                    slug=doc.slug,
                    title=doc.title,
                    folder=doc.folder,
                    excerpt=build_excerpt(
                        doc.content,
                        needle,
                        before=self.excerpt_before,
                        after=self.excerpt_after,
                    ),
                )
            )
            if len(results) >= self.limit:
                break

        LOGGER.debug("Query %r matched %d documents", needle, len(results))
        return results
