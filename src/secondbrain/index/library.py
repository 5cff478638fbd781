"""Read access to the document corpus."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from secondbrain.index.scanner import DocumentScanner
from secondbrain.index.tree import build_folder_tree
from secondbrain.models import Document, FolderTree


class DocumentLibrary:
    """High-level API over the corpus.

    Nothing is cached: every call rescans the filesystem so results always
    reflect what is on disk. The corpus is a small set of hand-edited notes.
    """

    def __init__(self, root: Path, *, scanner: DocumentScanner | None = None) -> None:
        self.root = Path(root)
        self.scanner = scanner or DocumentScanner(self.root)

    def list_all(self) -> List[Document]:
        return self.scanner.scan()

    def folder_tree(self) -> List[FolderTree]:
        return build_folder_tree(self.list_all())

    def by_slug(self, slug: str) -> Optional[Document]:
        """Return the first document whose slug equals ``slug``, else ``None``."""
        for doc in self.list_all():
            if doc.slug == slug:
                return doc
        return None
