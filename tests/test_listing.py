"""Tests for ulexite.listing."""

import os
from pathlib import Path

import pytest

from ulexite.listing import Entry, list_entries


def test_lists_immediate_children_only(sample_dir: Path) -> None:
    entries = sorted(list_entries(sample_dir), key=lambda e: e.name)
    assert entries == [
        Entry(".secret", False),
        Entry("a.txt", False),
        Entry("b.txt", False),
        Entry("sub", True),
    ]


def test_missing_directory_lists_empty(tmp_path: Path) -> None:
    assert list_entries(tmp_path / "does-not-exist") == []


def test_file_path_lists_empty(sample_dir: Path) -> None:
    assert list_entries(sample_dir / "a.txt") == []


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="needs symlinks")
def test_symlinked_directory_is_not_followed(tmp_path: Path) -> None:
    (tmp_path / "real").mkdir()
    (tmp_path / "link").symlink_to(tmp_path / "real")
    entries = {e.name: e.is_dir for e in list_entries(tmp_path)}
    assert entries == {"real": True, "link": False}
