"""Defines the small value types passed between the resolver, store and tree renderer."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


def printable(name: str) -> str:
    """Replaces undecodable bytes in a file name (surrogate escapes from os.scandir) with U+FFFD."""
    return name.encode('utf-8', 'surrogateescape').decode('utf-8', 'replace')


@dataclass(frozen=True)
class ResolvedNote:
    """Where a note lives and what it should start with."""

    relative_path: Path
    """Path of the note file, relative to the notes root. Always ends in ``.md``."""

    heading: str
    """First line written to the note when it is created, e.g. ``# Joins``."""


class EntryKind(Enum):
    FILE = 'file'
    DIRECTORY = 'directory'


@dataclass(frozen=True)
class DirectoryEntry:
    name: str
    kind: EntryKind
    path: str
    is_symlink: bool = False

    @property
    def is_dir(self) -> bool:
        return self.kind == EntryKind.DIRECTORY


class DisplayMode(Enum):
    """Controls how names are printed by :func:`dotnotes.tree.render_tree`.

    ``PATHS`` shows directories with a trailing ``/`` and files with their ``.md`` extension.
    ``NAMES`` shows directories bare and files without the ``.md`` extension.
    """
    PATHS = 'paths'
    NAMES = 'names'

    def format(self, entry: DirectoryEntry) -> str:
        return printable(self._format(entry))

    def _format(self, entry: DirectoryEntry) -> str:
        if self == DisplayMode.NAMES:
            if entry.is_dir:
                return entry.name
            return entry.name[:-3] if entry.name.endswith('.md') else entry.name
        return f'{entry.name}/' if entry.is_dir else entry.name
