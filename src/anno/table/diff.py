"""
Diff Engine
=============
Compares the first two columns line by line. It decides whether a line is
skipped in diff-only mode and which style tag each cell gets in diff mode.
It only returns tags; turning a tag into terminal colour is the renderer's job.

Only the first two columns take part. Any further columns are always
Normal, and with fewer than two columns nothing is skipped or highlighted.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from anno.table.column import ColumnCursor


class CellStyle(str, Enum):
    """Style tag for one rendered cell."""

    NORMAL = "normal"
    EMPHASIS_A = "emphasis_a"  # first column, disagrees with the second
    EMPHASIS_B = "emphasis_b"  # second column, disagrees with the first


@dataclass(frozen=True)
class DiffMode:
    highlight: bool = False  # --diff
    only: bool = False  # --diff-only


def lines_agree(first: str, second: str) -> bool:
    return first == second


def style_for(column_index: int, value: str, first: str | None, second: str | None) -> CellStyle:
    """Style a cell of ``column_index`` holding ``value``.

    ``first`` and ``second`` are the current lines of columns 0 and 1, or
    None where that column does not exist.
    """
    if column_index == 0 and second is not None and value != second:
        return CellStyle.EMPHASIS_A
    if column_index == 1 and first is not None and value != first:
        return CellStyle.EMPHASIS_B
    return CellStyle.NORMAL


class DiffEngine:
    """Per-line diff decisions over the renderer's column cursors.

    Must be consulted before the renderer consumes anything for the line;
    it only ever peeks.
    """

    def __init__(self, cursors: Sequence[ColumnCursor], mode: DiffMode) -> None:
        self._cursors = cursors
        self.mode = mode

    @property
    def comparable(self) -> bool:
        return len(self._cursors) >= 2

    @property
    def filtering(self) -> bool:
        return self.mode.only and self.comparable

    @property
    def highlighting(self) -> bool:
        return self.mode.highlight and self.comparable

    def peek_pair(self) -> tuple[str, str]:
        return self._cursors[0].peek(), self._cursors[1].peek()

    def skip_line(self) -> bool:
        """True when diff-only is on and the first two columns agree."""
        if not self.filtering:
            return False
        return lines_agree(*self.peek_pair())

    def cell_styles(self) -> list[CellStyle]:
        """Style tags for every column on the current line."""
        if not self.highlighting:
            return [CellStyle.NORMAL] * len(self._cursors)
        first, second = self.peek_pair()
        return [
            style_for(i, cursor.peek(), first, second)
            for i, cursor in enumerate(self._cursors)
        ]
