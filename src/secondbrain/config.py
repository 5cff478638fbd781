"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DOCS_ENV_VAR = "SECOND_BRAIN_DOCS"
DATA_ENV_VAR = "SECOND_BRAIN_DATA"


def _get_default_docs_dir() -> Path:
    """Get the default corpus root, honouring the environment override."""
    override = os.environ.get(DOCS_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / "Documents" / "SecondBrain"


def _get_default_data_dir(docs_dir: Path) -> Path:
    override = os.environ.get(DATA_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return docs_dir / "data"


@dataclass(slots=True)
class AppConfig:
    docs_dir: Path | None = None
    data_dir: Path | None = None
    search_limit: int = 10
    excerpt_before: int = 40
    excerpt_after: int = 60

    def __post_init__(self) -> None:
        if self.docs_dir is None:
            self.docs_dir = _get_default_docs_dir()
        if self.data_dir is None:
            self.data_dir = _get_default_data_dir(Path(self.docs_dir))

    def resolve_docs_dir(self, base_dir: Path | None = None) -> Path:
        if self.docs_dir is None:
            self.docs_dir = _get_default_docs_dir()
        if Path(self.docs_dir).is_absolute() or base_dir is None:
            return Path(self.docs_dir)
        return base_dir / self.docs_dir

    def resolve_data_dir(self, base_dir: Path | None = None) -> Path:
        if self.data_dir is None:
            self.data_dir = _get_default_data_dir(self.resolve_docs_dir(base_dir))
        if Path(self.data_dir).is_absolute() or base_dir is None:
            return Path(self.data_dir)
        return base_dir / self.data_dir

    def ensure_data_dir(self, base_dir: Path | None = None) -> Path:
        """Create the entity data directory if needed and return it."""
        data_dir = self.resolve_data_dir(base_dir)
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir
