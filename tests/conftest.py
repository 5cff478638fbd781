"""Shared fixtures for building throwaway markdown corpora."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Optional

import pytest

WriteDoc = Callable[..., Path]


@pytest.fixture
def write_doc(tmp_path: Path) -> WriteDoc:
    """Return a helper that writes a markdown file under ``tmp_path``.

    ``mtime`` pins the modification time so ordering tests stay deterministic.
    """

    def _write(relative: str, text: str, *, mtime: Optional[float] = None) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    return _write
