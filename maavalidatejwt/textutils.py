"""Small text helpers: regex-based JSON field lookup, splitting and file reading."""

from __future__ import annotations

import re

from .context import log

_WS = "[ \n\r]*"


def get_value(text: str, key: str) -> str:
    """Return the string value that follows ``key`` in JSON-like ``text``.

    The key is used as a regular expression. Within a line the last
    occurrence wins. An empty string is returned when nothing matches.
    """
    if not text:
        log(f"Input string is empty, cannot get value for key {key}")
        return ""
    match = re.search(f'.*{key}{_WS}"{_WS}:{_WS}"{_WS}([^"]*)', text)
    return match.group(1) if match else ""


def get_array(text: str, key: str) -> list[str]:
    """Return the items of the array that follows ``key`` in JSON-like ``text``.

    Quotes are removed and the items are split on commas; surrounding
    whitespace is kept as it is.
    """
    if not text:
        log(f"Input string is empty, cannot get array of value for key {key}")
        return []
    match = re.search(f'.*{key}{_WS}"{_WS}:{_WS}[\\[ \n\r]*([^\\]]*)', text)
    values = match.group(1) if match else ""
    return split(values.replace('"', ""), ",")


def split(text: str, pattern: str) -> list[str]:
    """Split ``text`` on the regular expression ``pattern``.

    Empty pieces are kept, except a single empty piece at the very end.
    """
    parts = re.split(pattern, text)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def remove_spaces(text: str) -> str:
    """Return ``text`` with every whitespace character removed."""
    return "".join(char for char in text if not char.isspace())


def read_lines(filename: str) -> list[str]:
    """Read a file and return its lines, split on ``\\n`` only.

    A trailing newline yields a final empty line. Raises ValueError for an
    empty file name and OSError when the file cannot be read.
    """
    if not filename:
        log("File name is empty, exiting")
        raise ValueError("file name is empty")
    try:
        with open(filename, encoding="utf-8", newline="") as handle:
            content = handle.read()
    except OSError:
        log(f"Failed to open file: {filename}")
        raise
    return content.split("\n")