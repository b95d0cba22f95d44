"""Renders a directory of notes as an ASCII tree.

Example output for ``list --show-notes``::

    ~/.notes/
    ├── daily/
    │   └── 2026/
    │       └── 02-15.md
    └── sql/
        └── joins.md
"""

from __future__ import annotations
import os
import os.path
from typing import Iterator, List, Optional
from dotnotes.models import DirectoryEntry, DisplayMode, EntryKind, printable


BRANCH = '├── '
LAST_BRANCH = '└── '
PIPE_PREFIX = '│   '
SPACE_PREFIX = '    '


def is_note(name: str) -> bool:
    return os.path.splitext(name)[1] == '.md'


def list_entries(dirpath: str, show_notes: bool = False) -> List[DirectoryEntry]:
    """Returns the visible children of a directory, sorted by name.

    Directories starting with ``.`` are never included. Files are included only if show_notes is True and
    they have an ``.md`` extension.

    A directory that cannot be read is treated as empty.
    """
    result = []
    try:
        with os.scandir(dirpath) as entries:
            for entry in entries:
                if entry.is_dir():
                    if entry.name.startswith('.'):
                        continue
                    result.append(DirectoryEntry(entry.name, EntryKind.DIRECTORY, entry.path,
                                                 is_symlink=entry.is_symlink()))
                elif show_notes and is_note(entry.name):
                    result.append(DirectoryEntry(entry.name, EntryKind.FILE, entry.path))
    except OSError:
        return []
    result.sort(key=lambda e: e.name)
    return result


def _child_lines(dirpath: str, prefix: str, depth: int, max_depth: Optional[int], show_notes: bool,
                 mode: DisplayMode) -> Iterator[str]:
    if max_depth is not None and depth >= max_depth:
        return
    entries = list_entries(dirpath, show_notes)
    for i, entry in enumerate(entries):
        last = i == len(entries) - 1
        yield f'{prefix}{LAST_BRANCH if last else BRANCH}{mode.format(entry)}\n'
        # symlinked directories are not followed, which keeps link cycles from recursing forever
        if entry.is_dir and not entry.is_symlink:
            yield from _child_lines(entry.path, prefix + (SPACE_PREFIX if last else PIPE_PREFIX), depth + 1,
                                    max_depth, show_notes, mode)


def tree_lines(root, label: str, max_depth: Optional[int] = None, show_notes: bool = False,
               mode: DisplayMode = DisplayMode.PATHS, root_display: str = None) -> Iterator[str]:
    """Lazily yields the lines of :func:`render_tree`, each ending with a newline."""
    if max_depth is not None and max_depth < 1:
        raise ValueError(f'max_depth must be None or positive, not {max_depth}')
    root = os.fspath(root)
    if not os.path.isdir(root):
        yield f'{printable(root_display or root)} is not a directory\n'
        return
    yield f'{printable(label)}\n'
    yield from _child_lines(root, '', 0, max_depth, show_notes, mode)


def render_tree(root, label: str, max_depth: Optional[int] = None, show_notes: bool = False,
                mode: DisplayMode = DisplayMode.PATHS, root_display: str = None) -> str:
    """Renders the notes and directories under root as a tree, with label as the first line.

    max_depth limits how many levels below root are shown; None means unlimited, and 1 shows only the
    direct children of root. If root is not a directory, a single line saying so is returned instead; it names
    root_display if given, otherwise root.
    """
    return ''.join(tree_lines(root, label, max_depth, show_notes, mode, root_display))
