import os
import os.path
import pytest
from dotnotes.models import DisplayMode, EntryKind, printable
from dotnotes.tree import list_entries, render_tree, tree_lines


@pytest.fixture
def notes(fs):
    fs.create_file('/notes/daily/2026/02-15.md', contents='# 2026-02-15\n\n')
    fs.create_file('/notes/sql/joins.md', contents='# Joins\n\n')
    fs.create_file('/notes/my-project/design-decisions.md')
    fs.create_file('/notes/my-project/ideas.md')
    fs.create_file('/notes/todo.md')
    fs.create_file('/notes/README.txt')
    fs.create_file('/notes/.git/config')
    fs.create_file('/notes/.git/objects/info/packs.md')
    return '/notes'


def test_render_all(notes):
    assert render_tree(notes, 'notes/', show_notes=True) == """notes/
├── daily/
│   └── 2026/
│       └── 02-15.md
├── my-project/
│   ├── design-decisions.md
│   └── ideas.md
├── sql/
│   └── joins.md
└── todo.md
"""


def test_render_directories_only(notes):
    assert render_tree(notes, 'notes/') == """notes/
├── daily/
│   └── 2026/
├── my-project/
└── sql/
"""


def test_render_depth_one(notes):
    assert render_tree(notes, 'notes/', max_depth=1) == """notes/
├── daily/
├── my-project/
└── sql/
"""


def test_render_depth_two_names(notes):
    assert render_tree(notes, 'notes', max_depth=2, show_notes=True, mode=DisplayMode.NAMES) == """notes
├── daily
│   └── 2026
├── my-project
│   ├── design-decisions
│   └── ideas
├── sql
│   └── joins
└── todo
"""


def test_dot_directories_never_shown(notes, fs):
    fs.create_file('/notes/sql/.obsidian/workspace.md')
    for depth in (None, 1, 5):
        for show_notes in (True, False):
            for mode in DisplayMode:
                output = render_tree(notes, 'notes', max_depth=depth, show_notes=show_notes, mode=mode)
                assert '.git' not in output
                assert '.obsidian' not in output
                assert 'packs' not in output


def test_dot_files_are_notes(fs):
    fs.create_file('/notes/.hidden.md')
    fs.create_file('/notes/.md')
    assert render_tree('/notes', 'notes/', show_notes=True) == 'notes/\n└── .hidden.md\n'


def test_only_lowercase_md_extension(fs):
    fs.create_file('/notes/upper.MD')
    fs.create_file('/notes/text.txt')
    fs.create_file('/notes/archive.md.bak')
    fs.create_file('/notes/real.md')
    assert render_tree('/notes', 'notes/', show_notes=True) == 'notes/\n└── real.md\n'


def test_files_and_directories_interleaved(fs):
    fs.create_file('/notes/a.md')
    fs.create_dir('/notes/b')
    fs.create_file('/notes/c.md')
    fs.create_dir('/notes/Z')
    assert render_tree('/notes', 'notes/', show_notes=True) == """notes/
├── Z/
├── a.md
├── b/
└── c.md
"""


def test_pipe_continues_under_non_last_entries(fs):
    fs.create_file('/notes/a/x/deep.md')
    fs.create_file('/notes/a/y.md')
    fs.create_file('/notes/b.md')
    assert render_tree('/notes', 'notes/', show_notes=True) == """notes/
├── a/
│   ├── x/
│   │   └── deep.md
│   └── y.md
└── b.md
"""


def test_empty_directory(fs):
    fs.create_dir('/notes')
    assert render_tree('/notes', '~/.notes/') == '~/.notes/\n'


def test_not_a_directory(notes):
    assert render_tree('/notes/todo.md', 'todo.md/') == '/notes/todo.md is not a directory\n'
    assert render_tree('/notes/missing', 'missing/') == '/notes/missing is not a directory\n'


def test_invalid_depth(notes):
    with pytest.raises(ValueError):
        render_tree(notes, 'notes', max_depth=0)


def test_tree_lines_is_lazy(notes):
    lines = tree_lines(notes, 'notes/')
    assert next(lines) == 'notes/\n'
    assert next(lines) == '├── daily/\n'
    assert list(lines) == ['│   └── 2026/\n', '├── my-project/\n', '└── sql/\n']


def test_list_entries(notes):
    entries = list_entries(notes, show_notes=True)
    assert [e.name for e in entries] == ['daily', 'my-project', 'sql', 'todo.md']
    assert [e.kind for e in entries] == [EntryKind.DIRECTORY] * 3 + [EntryKind.FILE]
    assert entries[0].path == os.path.join(notes, 'daily')
    assert list_entries('/notes/missing') == []


def test_unreadable_directory_is_empty(tmp_path, mocker):
    (tmp_path / 'locked').mkdir()
    (tmp_path / 'locked' / 'secret.md').write_text('x')
    (tmp_path / 'open').mkdir()
    (tmp_path / 'open' / 'a.md').write_text('x')
    real_scandir = os.scandir

    def scandir(path):
        if os.path.basename(path) == 'locked':
            raise PermissionError(13, 'Permission denied', path)
        return real_scandir(path)

    mocker.patch('os.scandir', side_effect=scandir)
    assert render_tree(tmp_path, 'root/', show_notes=True) == """root/
├── locked/
└── open/
    └── a.md
"""


def test_symlinked_directories_not_followed(tmp_path):
    (tmp_path / 'real').mkdir()
    (tmp_path / 'real' / 'a.md').write_text('x')
    os.symlink(tmp_path, tmp_path / 'loop')
    assert render_tree(tmp_path, 'root/', show_notes=True) == """root/
├── loop/
└── real/
    └── a.md
"""


def test_undecodable_names_are_printable(tmp_path):
    root = os.fsencode(tmp_path)
    os.mkdir(os.path.join(root, b'r\xe9sum\xe9s'))
    open(os.path.join(root, b'caf\xe9.md'), 'w').close()
    open(os.path.join(root, b'ok.md'), 'w').close()
    assert render_tree(tmp_path, 'root/', show_notes=True) == """root/
├── caf�.md
├── ok.md
└── r�sum�s/
"""
    assert render_tree(tmp_path, 'root', show_notes=True, mode=DisplayMode.NAMES).splitlines()[1] == '├── caf�'


def test_printable():
    assert printable('plain.md') == 'plain.md'
    assert printable('caf\udce9.md') == 'caf�.md'
    assert printable('café.md') == 'café.md'


def test_not_a_directory_display(notes):
    assert (render_tree('/notes/missing', 'missing/', root_display='~/.notes/missing')
            == '~/.notes/missing is not a directory\n')
