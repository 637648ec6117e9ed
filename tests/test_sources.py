"""Tests for the source list loader."""

from __future__ import annotations

import pytest

from linkwatch.sources import SourceListError, load_sources


def test_one_source_per_line_in_order(tmp_path) -> None:
    path = tmp_path / "sources.txt"
    path.write_text("https://b.test/\nhttps://a.test/\n", encoding="utf-8")
    assert load_sources(path) == ["https://b.test/", "https://a.test/"]


def test_lines_are_taken_verbatim(tmp_path) -> None:
    path = tmp_path / "sources.txt"
    path.write_text("https://a.test/\r\n\n# not a comment\n", encoding="utf-8")
    assert load_sources(path) == ["https://a.test/", "", "# not a comment"]


def test_missing_file_raises(tmp_path) -> None:
    with pytest.raises(SourceListError):
        load_sources(tmp_path / "missing.txt")


def test_only_line_feeds_separate_sources(tmp_path) -> None:
    path = tmp_path / "sources.txt"
    path.write_bytes("https://a.test/x\x0cy\nhttps://b.test/ z\nhttps://c.test/".encode("utf-8"))
    assert load_sources(path) == ["https://a.test/x\x0cy", "https://b.test/ z", "https://c.test/"]
