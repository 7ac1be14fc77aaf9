"""Reading text resources from disk."""

from __future__ import annotations

import os


def load_file_as_text(path: str | os.PathLike[str]) -> str:
    """Return the whole contents of a text file.

    Raises RuntimeError if the file cannot be opened.
    """
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read()
    except OSError as exc:
        raise RuntimeError(f"Failed to open file: {os.fspath(path)}") from exc