"""Markdown loading with frontmatter extraction.

Uses python-frontmatter to split the YAML header from the body. A header
that fails to parse never aborts a scan: the whole file is kept as body
text with empty frontmatter.
"""

from __future__ import annotations

import logging
from datetime import datetime
from itertools import islice
from pathlib import Path
from typing import Any, Dict, Tuple

import frontmatter
import yaml

from secondbrain.models import Document
from secondbrain.utils.files import slug_for, top_level_folder
from secondbrain.utils.text import count_words, first_heading, title_from_filename

LOGGER = logging.getLogger(__name__)


YAML_HANDLER = frontmatter.YAMLHandler()


def split_frontmatter(raw: str, *, source: Path | None = None) -> Tuple[Dict[str, Any], str]:
    """Separate the frontmatter mapping from the markdown body.

    The body is returned as written, minus the line break that ends the
    closing ``---``. Text without a header comes back unchanged.
    """
    if not YAML_HANDLER.detect(raw):
        return {}, raw

    boundaries = list(islice(YAML_HANDLER.FM_BOUNDARY.finditer(raw), 2))
    if len(boundaries) < 2:
        # opening fence with no closing one
        return {}, raw
    opening, closing = boundaries

    try:
        metadata = YAML_HANDLER.load(raw[opening.end():closing.start()])
    except yaml.YAMLError as exc:
        LOGGER.warning("Malformed frontmatter in %s: %s", source or "<string>", exc)
        return {}, raw

    line_end = raw.find("\n", closing.start())
    body = raw[line_end + 1:] if line_end != -1 else ""
    if not isinstance(metadata, dict):
        metadata = {}
    return metadata, body


def resolve_title(metadata: Dict[str, Any], content: str, filename: str) -> str:
    """Pick the frontmatter title, else the first H1, else the filename."""
    explicit = metadata.get("title")
    if explicit:
        return str(explicit)
    return first_heading(content) or title_from_filename(filename)


def load_document(path: Path, root: Path) -> Document:
    """Read one markdown file into a :class:`Document`.

    Raises ``OSError`` or ``UnicodeDecodeError`` when the file cannot be read;
    callers decide whether to skip it.
    """
    raw = path.read_text(encoding="utf-8")
    metadata, content = split_frontmatter(raw, source=path)
    stat = path.stat()

    return Document(
        slug=slug_for(path, root),
        path=path.resolve(),
        folder=top_level_folder(path, root),
        title=resolve_title(metadata, content, path.name),
        content=content,
        frontmatter=metadata,
        modified_at=datetime.fromtimestamp(stat.st_mtime).astimezone(),
        word_count=count_words(content),
    )
