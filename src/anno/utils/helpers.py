"""
Shared helper functions.
"""

from __future__ import annotations


def split_lines(text: str) -> list[str]:
    """Split text into lines on "\\n", dropping a trailing "\\r" from each.

    A final newline terminates the last line rather than starting an empty
    one, so "a\\nb\\n" and "a\\nb" both give two lines. Unlike
    ``str.splitlines`` no other separators (form feed, U+2028, ...) break
    a line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def fit(value: str, width: int) -> str:
    """Pad or truncate a string to exactly ``width`` characters."""
    return value[:width].ljust(width)
