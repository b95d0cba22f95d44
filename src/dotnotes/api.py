"""Provides the main entry point for using the library, :class:`Notes`"""

from __future__ import annotations
from datetime import date
import logging
import os.path
from pathlib import Path
import shlex
import subprocess
from typing import List, Optional
from dotnotes.conf import NotesConf
from dotnotes.git import run_git
from dotnotes.models import ResolvedNote, DisplayMode
from dotnotes.resolve import resolve_note
from dotnotes.store import NoteStore, append
from dotnotes.tree import render_tree


logger = logging.getLogger(__name__)


def display_path(path: str) -> str:
    """Abbreviates the user's home directory to ``~``."""
    home = os.path.expanduser('~')
    if home and home != '/' and (path == home or path.startswith(home + os.sep)):
        return '~' + path[len(home):]
    return path


class Notes:
    """Main entry point for working programmatically with your notes.

    .. attribute:: conf
       :type: dotnotes.conf.NotesConf

    .. attribute:: store
       :type: dotnotes.store.NoteStore

    Here's an example that adds a line to today's daily note:

    .. code-block:: python

       from dotnotes.api import Notes
       Notes.for_user().append(None, 'remember the milk')
    """

    @staticmethod
    def for_user() -> Notes:
        """Creates an instance from the environment and ``~/.notes.conf.py``.

        Raises :exc:`dotnotes.conf.ConfigError` if ``HOME`` is not set or the config file is invalid.
        """
        return NotesConf.for_user().instantiate()

    def __init__(self, conf: NotesConf):
        self.conf = conf
        self.store = NoteStore(conf.root_path, conf.note_template)

    @property
    def root(self) -> Path:
        return self.store.root

    def resolve(self, path_expr: Optional[str], today: date = None) -> ResolvedNote:
        return resolve_note(path_expr, today or date.today())

    def open(self, path_expr: Optional[str], today: date = None) -> Path:
        """Resolves the note and creates it if needed. Returns its absolute path."""
        today = today or date.today()
        return self.store.ensure_note(self.resolve(path_expr, today), today)

    def append(self, path_expr: Optional[str], text: str, today: date = None) -> Path:
        """Adds a line of text to the end of the note, creating the note first if needed."""
        path = self.open(path_expr, today)
        append(path, text)
        return path

    def edit(self, path: Path) -> int:
        """Opens the file in the configured editor, waits for it to exit, and returns its exit code.

        A negative exit code (the editor was killed by a signal) is reported as 1.
        """
        cmd = shlex.split(self.conf.editor) + [str(path)]
        logger.debug('launching editor: %s', cmd)
        code = subprocess.run(cmd).returncode
        return code if code >= 0 else 1

    def tree(self, path: Optional[str] = None, max_depth: Optional[int] = None, show_notes: bool = None,
             mode: DisplayMode = DisplayMode.PATHS) -> str:
        """Renders the directory at path (relative to the notes root) as a tree.

        If path is omitted, the whole notes root is shown.
        """
        if show_notes is None:
            show_notes = self.conf.show_notes
        if path:
            target = self.root / path.lstrip('/')
            label = path.rstrip('/') or '/'
        else:
            target = self.root
            label = display_path(str(self.root))
        if mode == DisplayMode.PATHS and not label.endswith('/'):
            label += '/'
        return render_tree(target, label, max_depth, show_notes, mode, root_display=display_path(str(target)))

    def git(self, args: List[str]) -> int:
        return run_git(str(self.root), args)
