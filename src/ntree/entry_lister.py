"""Reading and classifying the immediate children of a directory."""

from __future__ import annotations

import logging
import os
import stat

from ntree.models import Entry, EntryKind, NtreeError
from ntree.path_joiner import PathTooLongError, join_path

logger = logging.getLogger(__name__)

_PSEUDO_ENTRIES = frozenset({".", ".."})


class DirectoryOpenError(NtreeError):
    """Raised when a directory cannot be opened for listing."""

    def __init__(self, path: str, cause: OSError):
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"Cannot open directory '{path}': {reason}")


class EntryStatusError(NtreeError):
    """A single child could not be classified as file or directory."""

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        reason = getattr(cause, "strerror", None) or str(cause)
        super().__init__(f"Cannot get status of '{path}': {reason}")


class AllocationError(NtreeError):
    """Raised when the listing of a directory cannot be grown."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Out of memory while listing '{path}'")


def _classify(full_path: str) -> EntryKind:
    mode = os.stat(full_path).st_mode
    return EntryKind.DIRECTORY if stat.S_ISDIR(mode) else EntryKind.FILE


def list_entries(path: str) -> list[Entry]:
    """List the immediate children of *path* in the order the OS returns them.

    Children whose status cannot be read (broken symlinks, entries removed
    while listing, over-long paths) are logged and left out.

    Raises:
        DirectoryOpenError: *path* is missing, not a directory, or unreadable.
        AllocationError: the listing ran out of memory.
    """
    try:
        names = os.listdir(path)
    except OSError as exc:
        raise DirectoryOpenError(path, exc) from exc

    entries: list[Entry] = []
    try:
        for name in names:
            if name in _PSEUDO_ENTRIES:
                continue
            try:
                full_path = join_path(path, name)
                kind = _classify(full_path)
            except (OSError, PathTooLongError) as exc:
                logger.warning("%s", EntryStatusError(f"{path}/{name}", exc))
                continue
            entries.append(Entry(name=name, kind=kind))
    except MemoryError as exc:
        raise AllocationError(path) from exc

    return entries
