"""
Annotation Columns
====================
One column per producer: its captured output split into lines, checked
against the target's line count, and measured once for display width.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from anno.errors import AnnotationCountMismatch, ColumnExhausted
from anno.producers.spec import ProducerSpec
from anno.utils.helpers import split_lines
from anno.utils.log import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AnnotationColumn:
    """A validated annotation stream for one producer."""

    spec: ProducerSpec
    stream: tuple[str, ...] = field(repr=False)
    width: int = 0

    @property
    def name(self) -> str:
        return self.spec.name

    def __len__(self) -> int:
        return len(self.stream)

    def cursor(self) -> ColumnCursor:
        return ColumnCursor(self)


def build_column(spec: ProducerSpec, output: str, line_count: int) -> AnnotationColumn:
    """Turn a producer's stdout into a column, or raise AnnotationCountMismatch."""
    stream = tuple(split_lines(output))
    if len(stream) != line_count:
        raise AnnotationCountMismatch(spec.name, line_count, len(stream))

    width = max((len(line) for line in stream), default=0)
    column = AnnotationColumn(spec=spec, stream=stream, width=width)
    logger.debug("Column %s: %d lines, width %d", spec.name, len(stream), width)
    return column


class ColumnCursor:
    """Forward-only read position over a column.

    ``peek`` looks at the current line without moving; ``consume`` returns
    it and moves on. The position never goes backwards.
    """

    def __init__(self, column: AnnotationColumn) -> None:
        self.column = column
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    def peek(self) -> str:
        try:
            return self.column.stream[self._position]
        except IndexError:
            raise ColumnExhausted(self.column.name, self._position) from None

    def consume(self) -> str:
        value = self.peek()
        self._position += 1
        return value

    def skip(self) -> None:
        self.consume()
