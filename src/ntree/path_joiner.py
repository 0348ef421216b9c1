"""Bounded path construction."""

from __future__ import annotations

import os

from ntree.models import MAX_PATH, NtreeError


class PathTooLongError(NtreeError):
    """Raised when a joined path would not fit within the maximum length."""

    def __init__(self, parent: str, name: str, max_path: int):
        self.parent = parent
        self.name = name
        self.max_path = max_path
        super().__init__(
            f"Path too long: '{parent}/{name}' exceeds {max_path} bytes"
        )


def join_path(parent: str, name: str, max_path: int = MAX_PATH) -> str:
    """Join *parent* and *name* with a single ``/``.

    Lengths are counted in encoded bytes; one byte is reserved for the
    terminator the OS expects, so the result is always shorter than
    *max_path*.
    """
    if len(os.fsencode(parent)) + 1 + len(os.fsencode(name)) + 1 > max_path:
        raise PathTooLongError(parent, name, max_path)
    return f"{parent}/{name}"
