"""ASCII tree rendering of a directory on disk."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Iterator, TextIO

from ntree.entry_lister import AllocationError, DirectoryOpenError, list_entries
from ntree.entry_sorter import sort_entries
from ntree.models import ELBOW, PIPE_INDENT, SPACE_INDENT, TEE, Entry
from ntree.path_joiner import PathTooLongError, join_path

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    """One directory being printed: its path, prefix and unvisited children."""

    path: str
    prefix: str
    remaining: Iterator[tuple[bool, Entry]]


def _with_last_flag(entries: list[Entry]) -> Iterator[tuple[bool, Entry]]:
    last = len(entries) - 1
    for i, entry in enumerate(entries):
        yield i == last, entry


def _open_frame(path: str, prefix: str) -> _Frame:
    try:
        entries = sort_entries(list_entries(path))
    except DirectoryOpenError as exc:
        logger.warning("%s", exc)
        entries = []
    except AllocationError as exc:
        logger.error("%s", exc)
        entries = []
    return _Frame(path, prefix, _with_last_flag(entries))


def iter_tree_lines(path: str, prefix: str = "") -> Iterator[str]:
    """Yield one line per entry below *path*, in pre-order.

    Example output for a root holding ``dir1/file1.txt`` and ``file2.txt``:
        ├── dir1
        │   └── file1.txt
        └── file2.txt

    A subdirectory is only listed after its own line has been yielded, so
    callers that print each line as it arrives see output immediately.
    Unreadable directories and over-long paths are logged and contribute
    no lines; their siblings are unaffected.
    """
    # Explicit stack; nesting depth is not bounded by sys.getrecursionlimit()
    stack = [_open_frame(path, prefix)]
    while stack:
        frame = stack[-1]
        item = next(frame.remaining, None)
        if item is None:
            stack.pop()
            continue

        is_last, entry = item
        connector = ELBOW if is_last else TEE
        yield f"{frame.prefix}{connector}{entry.name}"

        if entry.is_dir:
            try:
                child_path = join_path(frame.path, entry.name)
            except PathTooLongError as exc:
                logger.warning("%s", exc)
                continue
            extension = SPACE_INDENT if is_last else PIPE_INDENT
            stack.append(_open_frame(child_path, frame.prefix + extension))


def render_tree(path: str, stream: TextIO | None = None) -> int:
    """Write *path* followed by its tree to *stream* (stdout by default).

    Returns the number of entry lines written, not counting the root line.
    """
    out = stream if stream is not None else sys.stdout
    out.write(f"{path}\n")
    count = 0
    for line in iter_tree_lines(path):
        out.write(f"{line}\n")
        count += 1
    return count
