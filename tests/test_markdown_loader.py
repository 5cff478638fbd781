"""Tests for markdown loading and frontmatter handling."""

from __future__ import annotations

import os
from datetime import date
from pathlib import Path

import pytest

from secondbrain.ingestion.markdown_loader import load_document, resolve_title, split_frontmatter


class TestSplitFrontmatter:
    """Test split_frontmatter function."""

    def test_no_frontmatter(self) -> None:
        metadata, content = split_frontmatter("# Hello\nworld")

        assert metadata == {}
        assert content == "# Hello\nworld"

    def test_with_frontmatter(self) -> None:
        raw = "---\ntitle: B Title\ntags: [a, b]\ncreated: 2026-02-05\n---\nBody text\n"

        metadata, content = split_frontmatter(raw)

        assert metadata == {"title": "B Title", "tags": ["a", "b"], "created": date(2026, 2, 5)}
        assert content == "Body text\n"

    def test_malformed_frontmatter_falls_back_to_raw(self, caplog: pytest.LogCaptureFixture) -> None:
        """Broken YAML keeps the whole file as content."""
        raw = "---\ntitle: [unclosed\n---\nBody\n"

        metadata, content = split_frontmatter(raw, source=Path("bad.md"))

        assert metadata == {}
        assert content == raw
        assert "Malformed frontmatter" in caplog.text

    def test_non_mapping_frontmatter_ignored(self) -> None:
        metadata, content = split_frontmatter("---\n- just\n- a list\n---\nBody")

        assert metadata == {}
        assert content == "Body"

    def test_plain_text_kept_verbatim(self) -> None:
        """Leading indentation and trailing newlines survive."""
        raw = "    indented code block\n\nafter\n"

        metadata, content = split_frontmatter(raw)

        assert metadata == {}
        assert content == raw
        assert content.startswith("    indented")

    def test_body_after_frontmatter_keeps_indentation(self) -> None:
        raw = "---\ntitle: Code\n---\n    indented code block\n\nafter\n\n"

        metadata, content = split_frontmatter(raw)

        assert metadata == {"title": "Code"}
        assert content == "    indented code block\n\nafter\n\n"

    def test_blank_line_after_frontmatter_kept(self) -> None:
        metadata, content = split_frontmatter("---\ntitle: Gap\n---\n\n# Gap\n")

        assert metadata == {"title": "Gap"}
        assert content == "\n# Gap\n"

    def test_crlf_boundary_dropped(self) -> None:
        metadata, content = split_frontmatter("---\r\ntitle: W\r\n---\r\n  body\r\n")

        assert metadata == {"title": "W"}
        assert content == "  body\r\n"

    def test_unclosed_fence_kept_as_body(self) -> None:
        raw = "---\ntitle: never closed\n"

        assert split_frontmatter(raw) == ({}, raw)


class TestResolveTitle:
    """Test resolve_title precedence."""

    def test_frontmatter_wins(self) -> None:
        assert resolve_title({"title": "Explicit"}, "# Heading", "file.md") == "Explicit"

    def test_heading_second(self) -> None:
        assert resolve_title({}, "text\n# Heading\n", "file.md") == "Heading"

    def test_filename_last(self) -> None:
        assert resolve_title({}, "no heading", "my-note.md") == "my note"

    def test_empty_frontmatter_title_ignored(self) -> None:
        assert resolve_title({"title": ""}, "# Heading", "file.md") == "Heading"

    def test_non_string_title_coerced(self) -> None:
        assert resolve_title({"title": 2026}, "", "file.md") == "2026"


class TestLoadDocument:
    """Test load_document function."""

    def test_load_nested_document(self, tmp_path: Path) -> None:
        """Should fill every Document field."""
        path = tmp_path / "journals" / "2026" / "day-one.md"
        path.parent.mkdir(parents=True)
        path.write_text("---\nmood: good\n---\n# Day One\nShort entry here", encoding="utf-8")
        os.utime(path, (1_770_000_000, 1_770_000_000))

        doc = load_document(path, tmp_path)

        assert doc.slug == "journals/day-one"
        assert doc.folder == "journals"
        assert doc.path == path.resolve()
        assert doc.title == "Day One"
        assert doc.content == "# Day One\nShort entry here"
        assert doc.frontmatter == {"mood": "good"}
        assert doc.word_count == 6
        assert doc.modified_at.timestamp() == pytest.approx(1_770_000_000)
        assert doc.modified_at.tzinfo is not None

    def test_load_root_document(self, tmp_path: Path) -> None:
        path = tmp_path / "inbox-zero.md"
        path.write_text("plain words only", encoding="utf-8")

        doc = load_document(path, tmp_path)

        assert doc.slug == "inbox-zero"
        assert doc.folder == "root"
        assert doc.title == "inbox zero"

    def test_content_not_stripped(self, tmp_path: Path) -> None:
        path = tmp_path / "snippet.md"
        path.write_text("    indented code block\n\nafter\n", encoding="utf-8")

        doc = load_document(path, tmp_path)

        assert doc.content.startswith("    indented")
        assert doc.content.endswith("after\n")
        assert doc.word_count == 4

    def test_undecodable_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "binary.md"
        path.write_bytes(b"\xff\xfe\x00bad")

        with pytest.raises(UnicodeDecodeError):
            load_document(path, tmp_path)
