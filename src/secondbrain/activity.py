"""Recent activity derived from markdown modification times."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import Iterable, List

from secondbrain.utils.files import MARKDOWN_SUFFIX, iter_markdown_paths

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ActivityItem:
    id: str
    timestamp: datetime
    type: str
    action: str
    details: str
    icon: str = "📝"


def recent_activity(
    directories: Iterable[Path],
    *,
    now: datetime | None = None,
    window: timedelta = timedelta(hours=24),
    limit: int = 20,
) -> List[ActivityItem]:
    """List markdown files touched within ``window``, newest first."""
    now = (now or datetime.now()).astimezone()
    cutoff = now - window
    items: List[ActivityItem] = []

    for directory in directories:
        for path in iter_markdown_paths(Path(directory)):
            try:
                stat = path.stat()
            except OSError as exc:
                LOGGER.warning("Skipping vanished document %s: %s", path, exc)
                continue
            modified = datetime.fromtimestamp(stat.st_mtime).astimezone()
            if modified <= cutoff:
                continue
            stem = path.name.removesuffix(MARKDOWN_SUFFIX)
            items.append(
                ActivityItem(
                    id=f"document-{path.name}-{int(stat.st_mtime * 1000)}",
                    timestamp=modified,
                    type="document",
                    action="Created" if stat.st_ctime == stat.st_mtime else "Updated",
                    details=stem,
                )
            )

    items.sort(key=lambda item: item.timestamp, reverse=True)
    return items[:limit]
