"""Core Second Brain data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

ROOT_FOLDER = "root"


@dataclass(slots=True)
class Document:
    """A markdown note as found on disk at scan time."""

    slug: str
    path: Path
    folder: str
    title: str
    content: str
    frontmatter: Dict[str, Any]
    modified_at: datetime
    word_count: int

    def to_ref(self) -> DocumentRef:
        return DocumentRef(slug=self.slug, title=self.title, path=self.path)


@dataclass(slots=True)
class DocumentRef:
    """Lightweight pointer to a document, used inside folder trees."""

    slug: str
    title: str
    path: Path


@dataclass(slots=True)
class FolderTree:
    name: str
    path: str
    documents: List[DocumentRef] = field(default_factory=list)
