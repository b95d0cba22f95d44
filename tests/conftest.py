import pytest


@pytest.fixture
def home(fs, monkeypatch):
    """A fake home directory at /home/user, with no EDITOR set."""
    monkeypatch.setenv('HOME', '/home/user')
    monkeypatch.delenv('EDITOR', raising=False)
    fs.create_dir('/home/user')
    return '/home/user'
