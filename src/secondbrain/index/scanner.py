"""Corpus scanning: every markdown file under a root becomes a Document."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from secondbrain.ingestion.markdown_loader import load_document
from secondbrain.models import Document
from secondbrain.utils.files import iter_markdown_paths

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ScanStats:
    scanned: int = 0
    failed: int = 0
    failed_files: list[Path] = field(default_factory=list)

    def record_failure(self, path: Path) -> None:
        self.failed += 1
        self.failed_files.append(path)


class DocumentScanner:
    """Walks a corpus root and loads every markdown file it finds."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)
        self.last_stats = ScanStats()

    def scan(self) -> List[Document]:
        """Return all documents, most recently modified first.

        A missing root yields an empty list. Files that cannot be read are
        logged and left out.
        """
        stats = ScanStats()
        self.last_stats = stats
        if not self.root.is_dir():
            LOGGER.debug("Corpus root %s does not exist", self.root)
            return []

        documents: List[Document] = []
        for path in iter_markdown_paths(self.root):
            try:
                documents.append(load_document(path, self.root))
                stats.scanned += 1
            except (OSError, UnicodeDecodeError) as exc:
                LOGGER.warning("Skipping unreadable document %s: %s", path, exc)
                stats.record_failure(path)

        # list.sort is stable, so equal mtimes keep path order
        documents.sort(key=lambda doc: doc.modified_at, reverse=True)
        LOGGER.debug(
            "Scanned %d documents under %s (%d failed)", stats.scanned, self.root, stats.failed
        )
        return documents
