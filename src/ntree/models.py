"""Data classes and constants for ntree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Upper bound (in bytes) for any joined path, matching the common Linux PATH_MAX
MAX_PATH = 4096

# Connector glyphs printed before an entry name
TEE = "├── "
ELBOW = "└── "

# Indentation added to the prefix of a directory's children
PIPE_INDENT = "│   "
SPACE_INDENT = "    "


class EntryKind(Enum):
    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class Entry:
    name: str
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


class NtreeError(Exception):
    """Base class for errors raised while building a tree."""
