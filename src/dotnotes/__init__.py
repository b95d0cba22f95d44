"""Keeps personal notes as Markdown files under ``~/.notes``.

If you installed via ``pip``, run ``notes -h`` to get help.
Or, run ``python3 -m dotnotes -h``.

To use the Python API, look at :class:`dotnotes.api.Notes`
"""


class Error(Exception):
    pass
