"""Whole-array JSON persistence for small entity collections."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence

LOGGER = logging.getLogger(__name__)


class JsonCollectionStore:
    """Persistence layer for one JSON array file.

    ``load`` returns the full array and ``save`` replaces it. There are no
    partial updates and no locking: callers read, modify and write back the
    whole collection.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> List[Dict[str, Any]]:
        if not self.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValueError(f"Corrupt collection file {self.path}: {exc}") from exc
        if not isinstance(data, list):
            raise ValueError(f"Collection file {self.path} does not hold a JSON array")
        return data

    def save(self, items: Sequence[Dict[str, Any]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(list(items), indent=2, ensure_ascii=False), encoding="utf-8")
        LOGGER.debug("Saved %d items to %s", len(items), self.path)
