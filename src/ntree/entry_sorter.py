"""Ordering of directory entries."""

from __future__ import annotations

import os
from typing import Iterable

from ntree.models import Entry


def _sort_key(entry: Entry) -> tuple[bool, bytes]:
    # Directories first, then raw byte order of the name
    return (not entry.is_dir, os.fsencode(entry.name))


def sort_entries(entries: Iterable[Entry]) -> list[Entry]:
    """Return *entries* with directories before files, each group sorted
    byte-wise by name (case-sensitive, no locale collation)."""
    return sorted(entries, key=_sort_key)
