"""Command-line interface for dotnotes."""


import argparse
import logging
import sys
from typing import Optional
from dotnotes import Error
from dotnotes.api import Notes
from dotnotes.models import DisplayMode


def _depth(value: str) -> int:
    try:
        depth = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f'invalid depth: {value!r}')
    if depth < 0:
        raise argparse.ArgumentTypeError(f'depth must not be negative: {value}')
    return depth


def _path_expr(words) -> Optional[str]:
    return '/'.join(words) or None


def _open(args, notes: Notes) -> int:
    if args.append is not None:
        notes.append(_path_expr(args.path), args.append[0])
        return 0
    path = notes.open(_path_expr(args.path))
    return notes.edit(path)


def _list(args, notes: Notes) -> int:
    mode = DisplayMode.NAMES if args.bare else DisplayMode.PATHS
    show_notes = True if args.show_notes else None
    # a depth of 0 means unlimited
    max_depth = args.depth[0] if args.depth and args.depth[0] else None
    sys.stdout.write(notes.tree(args.path, max_depth=max_depth, show_notes=show_notes, mode=mode))
    return 0


def _git(args, notes: Notes) -> int:
    return notes.git(args.args)


VERBOSE_FLAGS = ('-v', '--verbose')


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(*VERBOSE_FLAGS, action='store_true', help='Print debug logging to stderr.')


def note_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='notes',
        description='Open a note in your editor, creating it if needed. '
                    'Also: "notes list" shows your notes as a tree (see "notes list -h"), and '
                    '"notes git <args>" runs git in your notes directory.')
    parser.add_argument('path', nargs='*',
                        help='Note path, e.g. "sql/joins" (multiple words are joined with "/"). '
                             'A path ending in "/" opens a note named after today\'s date in that directory. '
                             'Opens today\'s daily note if omitted.')
    parser.add_argument('-a', '--append', nargs=1, metavar='TEXT',
                        help='Append a line of text to the note instead of opening the editor.')
    _add_common(parser)
    parser.set_defaults(func=_open)
    return parser


def list_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='notes list',
                                     description='Show the notes directory (or a subdirectory of it) as a tree.')
    parser.add_argument('path', nargs='?', help='Directory to show, relative to the notes root.')
    parser.add_argument('-d', '--depth', nargs=1, type=_depth,
                        help='Maximum number of levels to show. 0 (the default) means unlimited.')
    parser.add_argument('-n', '--show-notes', action='store_true',
                        help='Show note files as well as directories.')
    parser.add_argument('-b', '--bare', action='store_true',
                        help='Show names without the ".md" extension or trailing "/".')
    _add_common(parser)
    parser.set_defaults(func=_list)
    return parser


def parse_args(args) -> argparse.Namespace:
    # verbose flags may precede the command, e.g. "notes -v list"
    verbose = False
    while args and args[0] in VERBOSE_FLAGS:
        verbose = True
        args = args[1:]
    if args and args[0] == 'list':
        parsed = list_argparser().parse_args(args[1:])
    elif args and args[0] == 'git':
        # everything after "git" belongs to git, including options
        parsed = argparse.Namespace(func=_git, args=args[1:], verbose=False)
    else:
        parsed = note_argparser().parse_args(args)
    parsed.verbose = parsed.verbose or verbose
    return parsed


def main(args=None) -> int:
    """Runs the tool and returns its exit code.

    args may be an array of string command-line arguments; if absent,
    the process's arguments are used.
    """
    args = parse_args(sys.argv[1:] if args is None else list(args))
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')
    try:
        notes = Notes.for_user()
        return args.func(args, notes)
    except (Error, OSError) as e:
        print(f'notes: {e}', file=sys.stderr)
        return 1
