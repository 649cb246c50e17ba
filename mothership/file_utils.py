"""Small file helpers."""

from __future__ import annotations

import os


def load_text_file(filename: str | os.PathLike[str]) -> str:
    """Read a text file, ending every line (including the last) with a newline."""
    try:
        with open(filename, encoding="utf-8") as handle:
            return "".join(line.rstrip("\n") + "\n" for line in handle)
    except OSError as exc:
        raise OSError(f"Error opening file {os.fspath(filename)}") from exc