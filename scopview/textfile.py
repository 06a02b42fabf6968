"""Reading text files and splitting them into whitespace separated words."""

from __future__ import annotations

import re
from collections.abc import Iterator
from os import PathLike

_WORD_PATTERN = re.compile(r"#[^\n]*|[^ \t\n\v\f\r]+")


class FileReadError(Exception):
    """Raised when a file cannot be opened or read."""


def read_file(path: str | PathLike[str]) -> str:
    """Return the whole content of ``path`` as text, one character per byte."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise FileReadError(f"cannot read file {path}: {exc}") from exc


def next_line(data: str, start: int = 0) -> int:
    """Return the index just past the next newline at or after ``start``.

    If no newline follows, the length of ``data`` is returned.
    """
    index = data.find("\n", start)
    return len(data) if index < 0 else index + 1


def iter_words(data: str) -> Iterator[str]:
    """Yield the whitespace separated words of ``data``.

    A word starting with ``#`` begins a comment that runs to the end of the
    line; it and the rest of the line are skipped.  Text after a NUL
    character is ignored.
    """
    data = data.split("\0", 1)[0]
    for match in _WORD_PATTERN.finditer(data):
        word = match.group()
        if not word.startswith("#"):
            yield word