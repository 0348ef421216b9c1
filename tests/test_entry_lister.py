"""Tests for entry_lister module."""

import functools
import logging
import os
from unittest import mock

import pytest

from ntree.entry_lister import (
    AllocationError,
    DirectoryOpenError,
    list_entries,
)
from ntree.models import Entry, EntryKind
from ntree.path_joiner import join_path


def _by_name(entries: list[Entry]) -> dict[str, EntryKind]:
    return {e.name: e.kind for e in entries}


class TestListEntries:
    def test_empty_directory(self, tmp_path):
        assert list_entries(str(tmp_path)) == []

    def test_classifies_files_and_directories(self, tmp_path):
        (tmp_path / "a").mkdir()
        (tmp_path / "b.txt").write_text("b")
        result = _by_name(list_entries(str(tmp_path)))
        assert result == {"a": EntryKind.DIRECTORY, "b.txt": EntryKind.FILE}

    def test_hidden_entries_included(self, tmp_path):
        (tmp_path / ".hidden").write_text("")
        assert [e.name for e in list_entries(str(tmp_path))] == [".hidden"]

    def test_skips_pseudo_entries(self, tmp_path):
        (tmp_path / "x").write_text("")
        with mock.patch("ntree.entry_lister.os.listdir", return_value=[".", "..", "x"]):
            result = list_entries(str(tmp_path))
        assert [e.name for e in result] == ["x"]

    def test_symlink_to_directory_is_directory(self, tmp_path):
        (tmp_path / "real").mkdir()
        os.symlink(tmp_path / "real", tmp_path / "link")
        result = _by_name(list_entries(str(tmp_path)))
        assert result["link"] is EntryKind.DIRECTORY

    def test_broken_symlink_skipped_with_warning(self, tmp_path, caplog):
        (tmp_path / "ok.txt").write_text("")
        os.symlink(tmp_path / "missing", tmp_path / "dangling")
        with caplog.at_level(logging.WARNING, logger="ntree"):
            result = list_entries(str(tmp_path))
        assert [e.name for e in result] == ["ok.txt"]
        assert len(caplog.records) == 1
        assert "dangling" in caplog.records[0].getMessage()

    def test_missing_directory_raises(self, tmp_path):
        missing = str(tmp_path / "nope")
        with pytest.raises(DirectoryOpenError) as info:
            list_entries(missing)
        assert info.value.path == missing
        assert isinstance(info.value.cause, FileNotFoundError)

    def test_file_is_not_a_directory(self, tmp_path):
        target = tmp_path / "f.txt"
        target.write_text("")
        with pytest.raises(DirectoryOpenError, match="Cannot open directory"):
            list_entries(str(target))

    def test_permission_denied_raises(self, tmp_path):
        with mock.patch(
            "ntree.entry_lister.os.listdir",
            side_effect=PermissionError(13, "Permission denied"),
        ):
            with pytest.raises(DirectoryOpenError, match="Permission denied"):
                list_entries(str(tmp_path))

    def test_memory_error_raises_allocation_error(self, tmp_path):
        (tmp_path / "a").write_text("")
        with mock.patch(
            "ntree.entry_lister.Entry", side_effect=MemoryError
        ):
            with pytest.raises(AllocationError):
                list_entries(str(tmp_path))

    def test_over_long_child_skipped(self, tmp_path, caplog):
        (tmp_path / "short").write_text("")
        (tmp_path / ("l" * 200)).write_text("")
        limit = len(os.fsencode(str(tmp_path))) + 1 + len("short") + 1
        bounded = functools.partial(join_path, max_path=limit)
        with mock.patch("ntree.entry_lister.join_path", bounded):
            with caplog.at_level(logging.WARNING, logger="ntree"):
                result = list_entries(str(tmp_path))
        assert [e.name for e in result] == ["short"]
        assert "Path too long" in caplog.text
