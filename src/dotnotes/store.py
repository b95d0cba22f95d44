"""Creates note files on demand and appends to them."""

from __future__ import annotations
from datetime import date
import logging
import os
from pathlib import Path
from typing import Optional
from mako.exceptions import MakoException
from mako.template import Template
from dotnotes.conf import ConfigError
from dotnotes.models import ResolvedNote


logger = logging.getLogger(__name__)


def needs_initialization(path: Path) -> bool:
    """True if the file is missing, or contains nothing but whitespace."""
    if not path.exists():
        return True
    # undecodable bytes still count as content, so such files are never clobbered
    return not path.read_bytes().decode('utf-8', errors='replace').strip()


class NoteStore:
    """Materializes resolved notes beneath a notes root.

    .. attribute:: root
       :type: pathlib.Path

    .. attribute:: template
       :type: Optional[mako.template.Template]

       When set, new notes get the rendered template as their contents instead of just the heading.
    """

    def __init__(self, root, template: Optional[str] = None):
        self.root = Path(root)
        try:
            self.template = Template(template) if template else None
        except MakoException as e:
            raise ConfigError(f'Invalid note_template: {e}') from e

    def initial_contents(self, resolved: ResolvedNote, today: date = None) -> str:
        """Raises :exc:`dotnotes.conf.ConfigError` if the note_template fails to render."""
        if self.template:
            try:
                return self.template.render(heading=resolved.heading, relative_path=resolved.relative_path,
                                            today=today or date.today())
            except Exception as e:
                raise ConfigError(f'Could not render note_template for {resolved.relative_path}: {e!r}') from e
        return f'{resolved.heading}\n\n'

    def ensure_note(self, resolved: ResolvedNote, today: date = None) -> Path:
        """Returns the absolute path of the note, creating the file and its parent directories if needed.

        A file that already has content is left untouched. A missing or whitespace-only file is (over)written
        with the note's initial contents.

        Raises :exc:`OSError` if a directory or the file cannot be created.
        """
        path = self.root / resolved.relative_path
        os.makedirs(path.parent, exist_ok=True)
        if needs_initialization(path):
            contents = self.initial_contents(resolved, today)
            logger.debug('initializing note %s', path)
            with open(path, 'w', encoding='utf-8') as file:
                file.write(contents)
        return path

    def append(self, path: Path, text: str) -> None:
        append(path, text)


def ensure_note(notes_root, resolved: ResolvedNote) -> Path:
    """Shortcut for ``NoteStore(notes_root).ensure_note(resolved)``."""
    return NoteStore(notes_root).ensure_note(resolved)


def append(path, text: str) -> None:
    """Writes ``text`` followed by a newline to the end of an existing file.

    Raises :exc:`FileNotFoundError` if the file does not exist; notes must be created with
    :meth:`NoteStore.ensure_note` first.
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(f'File does not exist: {path}')
    logger.debug('appending %d characters to %s', len(text), path)
    with open(path, 'a', encoding='utf-8') as file:
        file.write(f'{text}\n')
