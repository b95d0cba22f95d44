"""Turns the path fragments typed on the command line into note locations.

The rules, in order of precedence:

* no path: today's daily note, ``daily/<year>/<month>-<day>.md``
* a path ending in ``/``: a note named after today's date inside that directory
* anything else: ``<path>.md``, titled after its last segment
"""

from datetime import date
from pathlib import Path
import re
from typing import Optional
from dotnotes.models import ResolvedNote


DAILY_DIR = 'daily'
NOTE_SUFFIX = '.md'


def titlecase(segment: str) -> str:
    """Turns a file name stem into a heading.

    The segment is split on ``-`` and ``_``, the first character of each word is uppercased, and the words
    are joined with single spaces. The rest of each word keeps its case, so ``ALLCAPS`` stays ``ALLCAPS``.

    >>> titlecase('design-decisions')
    'Design Decisions'
    """
    return ' '.join(word[:1].upper() + word[1:] for word in re.split(r'[-_]', segment))


def resolve_note(path_expr: Optional[str], today: date) -> ResolvedNote:
    """Maps a path expression to the note's relative path and the heading it should be created with.

    ``today`` supplies the date used for daily and dated notes.
    """
    today_str = today.isoformat()
    if not path_expr:
        year, rest = today_str.split('-', 1)
        return ResolvedNote(Path(DAILY_DIR, year, f'{rest}{NOTE_SUFFIX}'), f'# {today_str}')

    # a leading slash would make the join with the notes root discard the root
    path_expr = path_expr.lstrip('/')

    if not path_expr or path_expr.endswith('/'):
        return ResolvedNote(Path(path_expr, f'{today_str}{NOTE_SUFFIX}'), f'# {today_str}')

    path = Path(f'{path_expr}{NOTE_SUFFIX}')
    return ResolvedNote(path, f'# {titlecase(path.stem)}')
