"""Grouping of scanned documents into per-folder trees."""

from __future__ import annotations

from typing import Dict, List, Sequence

from secondbrain.models import Document, FolderTree

FOLDER_ORDER = ("journals", "concepts", "research", "projects", "root")


def _folder_rank(name: str) -> int:
    try:
        return FOLDER_ORDER.index(name)
    except ValueError:
        return len(FOLDER_ORDER)


def build_folder_tree(documents: Sequence[Document]) -> List[FolderTree]:
    """Group documents by folder, keeping their incoming order.

    Folders named in ``FOLDER_ORDER`` come first in that order; any other
    folder follows, in the order its first document appeared.
    """
    folders: Dict[str, FolderTree] = {}
    for doc in documents:
        tree = folders.get(doc.folder)
        if tree is None:
            tree = folders[doc.folder] = FolderTree(name=doc.folder, path=doc.folder)
        tree.documents.append(doc.to_ref())

    return sorted(folders.values(), key=lambda tree: _folder_rank(tree.name))
