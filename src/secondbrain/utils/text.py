"""Text helpers for titles, word counts and search excerpts."""

from __future__ import annotations

import re

H1_PATTERN = re.compile(r"^#\s+(.+)$", re.MULTILINE)
ELLIPSIS = "..."


def count_words(text: str) -> int:
    """Count maximal runs of non-whitespace characters."""
    return len(text.split())


def first_heading(text: str) -> str | None:
    """Return the text of the first level-1 heading, if any."""
    match = H1_PATTERN.search(text)
    if match:
        return match.group(1)
    return None


def title_from_filename(filename: str) -> str:
    stem = filename.removesuffix(".md")
    return stem.replace("-", " ")


def build_excerpt(content: str, query: str, *, before: int = 40, after: int = 60) -> str:
    """Cut a window of ``content`` around the first match of ``query``.

    ``query`` must already be lowercased. The window spans ``before``
    characters ahead of the match through ``after`` characters past its end,
    clamped to the content. Ellipses mark sides that were cut off. Returns
    an empty string when the query does not occur in the content.
    """
    match_index = content.lower().find(query)
    if match_index == -1:
        return ""

    start = max(0, match_index - before)
    end = min(len(content), match_index + len(query) + after)
    prefix = ELLIPSIS if start > 0 else ""
    suffix = ELLIPSIS if end < len(content) else ""
    return prefix + content[start:end].strip() + suffix
