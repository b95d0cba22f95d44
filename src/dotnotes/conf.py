"""Configuration for dotnotes.

Defaults come from the environment (``HOME`` and ``EDITOR``). They can be adjusted by an optional Python
script at ``~/.notes.conf.py``, which runs with the default :class:`NotesConf` bound to the name ``conf``:

.. code-block:: python

   conf.root_path = '~/Dropbox/notes'
   conf.editor = 'code --wait'
   conf.note_template = '${heading}\\n\\nCreated ${today}\\n'
"""

from __future__ import annotations
from dataclasses import dataclass, replace
import os
import os.path
from typing import Mapping, Optional
from dotnotes import Error


DEFAULT_EDITOR = 'nvim'
ROOT_DIRNAME = '.notes'
CONF_FILENAME = '.notes.conf.py'


class ConfigError(Error):
    pass


@dataclass
class NotesConf:
    root_path: str
    """Directory holding all notes. Created on demand when the first note is written."""

    editor: str = DEFAULT_EDITOR
    """Command used to open notes. It is split like a shell command, and the note's path is appended."""

    note_template: Optional[str] = None
    """Optional Mako template for the contents of new notes.

    The template is rendered with ``heading`` (e.g. ``# Joins``), ``relative_path`` (a :class:`pathlib.Path`
    relative to the notes root) and ``today`` (a :class:`datetime.date`). When unset, new notes contain just
    the heading followed by a blank line.
    """

    show_notes: bool = False
    """Default for the ``--show-notes`` option of the ``list`` command."""

    @classmethod
    def for_user(cls, environ: Mapping[str, str] = None) -> NotesConf:
        """Builds the configuration from the environment and the user's ``~/.notes.conf.py``, if present.

        Raises :exc:`ConfigError` if ``HOME`` is not set, or the config file raises an error or does not leave a
        NotesConf in ``conf``.
        """
        environ = os.environ if environ is None else environ
        home = environ.get('HOME')
        if not home:
            raise ConfigError('HOME not set')
        conf = cls(root_path=os.path.join(home, ROOT_DIRNAME),
                   editor=environ.get('EDITOR') or DEFAULT_EDITOR)

        path = os.path.join(home, CONF_FILENAME)
        if os.path.exists(path):
            with open(path, 'r', encoding='utf-8') as file:
                conf_script = file.read()
            context = {'conf': conf, 'NotesConf': cls}
            try:
                exec(compile(conf_script, path, 'exec'), context)
            except Exception as e:
                raise ConfigError(f'Error in your config file {path}: {e!r}') from e
            if not isinstance(context.get('conf'), cls):
                raise ConfigError('The variable `conf` must hold an instance of NotesConf '
                                  f'in your config file: {path}')
            conf = context['conf']

        return conf.standardize(home)

    def standardize(self, home: str = None) -> NotesConf:
        root = self.root_path
        if home and (root == '~' or root.startswith('~/')):
            root = home + root[1:]
        return replace(self, root_path=os.path.abspath(os.path.expanduser(root)))

    def instantiate(self):
        from dotnotes.api import Notes
        return Notes(self.standardize())
