"""Tests for core data models."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from secondbrain.models import ROOT_FOLDER, Document, DocumentRef, FolderTree


def _document(**overrides) -> Document:
    fields = dict(
        slug="journals/day-one",
        path=Path("/notes/journals/day-one.md"),
        folder="journals",
        title="Day One",
        content="# Day One\nHello",
        frontmatter={},
        modified_at=datetime(2026, 2, 5, tzinfo=timezone.utc),
        word_count=4,
    )
    fields.update(overrides)
    return Document(**fields)


class TestDocument:
    """Test Document dataclass."""

    def test_create_document(self) -> None:
        """Should create Document with all fields."""
        doc = _document(frontmatter={"tags": ["a"]})

        assert doc.slug == "journals/day-one"
        assert doc.folder == "journals"
        assert doc.frontmatter == {"tags": ["a"]}
        assert doc.word_count == 4

    def test_document_equality(self) -> None:
        """Should compare documents by value."""
        assert _document() == _document()
        assert _document() != _document(title="Other")

    def test_to_ref(self) -> None:
        """Reference keeps only slug, title and path."""
        ref = _document().to_ref()

        assert ref == DocumentRef(
            slug="journals/day-one",
            title="Day One",
            path=Path("/notes/journals/day-one.md"),
        )


class TestFolderTree:
    """Test FolderTree dataclass."""

    def test_default_documents_not_shared(self) -> None:
        """Each tree gets its own document list."""
        first = FolderTree(name="a", path="a")
        second = FolderTree(name="b", path="b")
        first.documents.append(_document().to_ref())

        assert second.documents == []

    def test_root_sentinel(self) -> None:
        assert ROOT_FOLDER == "root"
