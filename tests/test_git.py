from pathlib import Path
from unittest.mock import Mock
import pytest
from dotnotes.git import NotARepositoryError, is_repository, run_git


def test_refuses_outside_repository(fs, mocker):
    run = mocker.patch('subprocess.run')
    fs.create_dir('/notes')
    with pytest.raises(NotARepositoryError, match='/notes is not a git repository'):
        run_git('/notes', ['status'])
    with pytest.raises(NotARepositoryError):
        run_git('/notes', [])
    run.assert_not_called()


def test_runs_in_repository(fs, mocker):
    run = mocker.patch('subprocess.run', return_value=Mock(returncode=3))
    fs.create_dir('/notes/.git')
    assert is_repository('/notes')
    assert run_git('/notes', ['log', '--oneline']) == 3
    run.assert_called_once_with(['git', 'log', '--oneline'], cwd='/notes')


def test_init_creates_root(fs, mocker):
    run = mocker.patch('subprocess.run', return_value=Mock(returncode=0))
    assert run_git('/new/notes', ['init', '-q']) == 0
    assert Path('/new/notes').is_dir()
    run.assert_called_once_with(['git', 'init', '-q'], cwd='/new/notes')
