"""Runs git commands inside the notes root."""

import logging
import os
import os.path
import subprocess
from typing import List
from dotnotes import Error


logger = logging.getLogger(__name__)

INIT_COMMAND = 'init'


class NotARepositoryError(Error):
    pass


def is_repository(root: str) -> bool:
    return os.path.exists(os.path.join(root, '.git'))


def run_git(root: str, args: List[str]) -> int:
    """Runs ``git`` with the given arguments in root, and returns its exit code.

    Unless the first argument is ``init``, raises :exc:`NotARepositoryError` if root is not already
    a git repository. For ``init``, root is created first if it does not exist.
    """
    if args and args[0] == INIT_COMMAND:
        os.makedirs(root, exist_ok=True)
    elif not is_repository(root):
        raise NotARepositoryError(f'{root} is not a git repository; run `notes git init` first')
    logger.debug('running git %s in %s', args, root)
    return subprocess.run(['git', *args], cwd=root).returncode
