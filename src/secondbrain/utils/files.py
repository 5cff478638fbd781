"""Utility helpers for working with files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from secondbrain.models import ROOT_FOLDER

MARKDOWN_SUFFIX = ".md"


def iter_markdown_paths(root: Path) -> Iterator[Path]:
    """Yield markdown files under ``root`` at any depth, in sorted order."""
    if not root.is_dir():
        return
    for item in sorted(root.rglob(f"*{MARKDOWN_SUFFIX}")):
        if item.is_file():
            yield item


def top_level_folder(path: Path, root: Path) -> str:
    """Return the first directory below ``root`` containing ``path``.

    Files directly inside ``root`` belong to the ``"root"`` folder. Deeper
    files report their top-level ancestor, whatever their depth.
    """
    parts = path.relative_to(root).parts
    if len(parts) > 1:
        return parts[0]
    return ROOT_FOLDER


def slug_for(path: Path, root: Path) -> str:
    """Build the ``folder/stem`` slug for a markdown file."""
    stem = path.name.removesuffix(MARKDOWN_SUFFIX)
    parts = path.relative_to(root).parts
    if len(parts) > 1:
        return f"{parts[0]}/{stem}"
    return stem
