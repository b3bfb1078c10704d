"""Table subpackage: annotation columns, diffing and rendering."""

from anno.table.column import AnnotationColumn, ColumnCursor, build_column
from anno.table.diff import CellStyle, DiffEngine, DiffMode
from anno.table.renderer import RenderRow, TableRenderer

__all__ = [
    "AnnotationColumn",
    "CellStyle",
    "ColumnCursor",
    "DiffEngine",
    "DiffMode",
    "RenderRow",
    "TableRenderer",
    "build_column",
]
