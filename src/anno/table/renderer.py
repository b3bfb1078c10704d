"""
Table Renderer
================
Writes the annotated table: a header with each producer's name, then one
row per target line with every column's annotation padded to that
column's width, followed by the target line itself.

    lines | debug-lines | int main(void) {
    1     | x           | int main(void) {

Colour escape codes come from rich styles and are only added when a colour
system is given; source lines are always written verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Mapping, Sequence, TextIO

from rich.color import ColorSystem
from rich.style import Style

from anno.document.target import TargetDocument
from anno.table.column import AnnotationColumn
from anno.table.diff import CellStyle, DiffEngine, DiffMode
from anno.utils.helpers import fit
from anno.utils.log import get_logger

logger = get_logger(__name__)

DEFAULT_SEPARATOR = " | "
DEFAULT_STYLES = {
    CellStyle.EMPHASIS_A: "bold red",
    CellStyle.EMPHASIS_B: "bold green",
}


@dataclass
class RenderRow:
    """The cells about to be written for one target line."""

    line_number: int
    text: str
    cells: list[tuple[str, CellStyle]] = field(default_factory=list)


class TableRenderer:
    """Renders columns alongside a target document."""

    def __init__(
        self,
        columns: Sequence[AnnotationColumn],
        separator: str = DEFAULT_SEPARATOR,
        styles: Mapping[CellStyle, str] | None = None,
        color_system: ColorSystem | None = None,
    ) -> None:
        self.columns = list(columns)
        self.separator = separator
        self.color_system = color_system
        self._styles = {
            tag: Style.parse(definition)
            for tag, definition in (styles or DEFAULT_STYLES).items()
        }

    def header(self) -> str | None:
        if not self.columns:
            return None
        return "".join(
            fit(column.name, column.width) + self.separator for column in self.columns
        )

    def rows(self, document: TargetDocument, mode: DiffMode = DiffMode()) -> Iterator[RenderRow]:
        """Walk the document and columns in lockstep, yielding emitted rows."""
        cursors = [column.cursor() for column in self.columns]
        engine = DiffEngine(cursors, mode)

        for index, text in enumerate(document.lines):
            if engine.skip_line():
                for cursor in cursors:
                    cursor.skip()
                continue

            styles = engine.cell_styles()
            row = RenderRow(line_number=index + 1, text=text)
            for cursor, style in zip(cursors, styles):
                row.cells.append((cursor.consume(), style))
            yield row

    def format_row(self, row: RenderRow) -> str:
        parts = []
        for column, (value, style) in zip(self.columns, row.cells):
            parts.append(self._paint(fit(value, column.width), style))
            parts.append(self.separator)
        parts.append(row.text)
        return "".join(parts)

    def _paint(self, cell: str, style: CellStyle) -> str:
        rich_style = self._styles.get(style)
        if rich_style is None or self.color_system is None:
            return cell
        return rich_style.render(cell, color_system=self.color_system)

    def render(self, document: TargetDocument, mode: DiffMode = DiffMode()) -> Iterator[str]:
        """Yield every output line (without line endings)."""
        header = self.header()
        if header is not None:
            yield header
        for row in self.rows(document, mode):
            yield self.format_row(row)

    def write(self, document: TargetDocument, out: TextIO, mode: DiffMode = DiffMode()) -> int:
        """Write the table to ``out``; returns the number of body rows written."""
        written = 0
        for line in self.render(document, mode):
            out.write(line + "\n")
            written += 1
        if self.columns:
            written -= 1
        logger.debug("Rendered %d of %d lines", written, document.line_count)
        return written
