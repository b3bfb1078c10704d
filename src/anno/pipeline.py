"""
Annotation Pipeline
=====================
Main orchestrator. For one target file:
1. Load the target document
2. Run every producer (in -p order, optionally on a thread pool)
3. Validate each output into a column
4. Render the table, with diff filtering / highlighting

Nothing is written until every column has been built, so any failure
leaves stdout untouched.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, TextIO

from rich.color import ColorSystem

from anno.config import Settings, get_settings
from anno.document.target import TargetDocument, load_target
from anno.producers.invoker import ProducerInvocation, run_producers
from anno.producers.spec import ProducerSpec
from anno.table.column import AnnotationColumn, build_column
from anno.table.diff import CellStyle, DiffMode
from anno.table.renderer import TableRenderer
from anno.utils.log import get_logger

logger = get_logger(__name__)


def collect_columns(
    document: TargetDocument,
    specs: Sequence[ProducerSpec],
    settings: Settings | None = None,
) -> list[AnnotationColumn]:
    """Run the producers for ``document`` and build one column per spec."""
    settings = settings or get_settings()
    invocations = [
        ProducerInvocation.build(spec, document, prefix=settings.producers.command_prefix)
        for spec in specs
    ]
    for inv in invocations:
        logger.debug("Producer: %s → %s", inv.spec, inv.command)

    outputs = run_producers(invocations, max_workers=settings.producers.max_workers)
    return [
        build_column(spec, output, document.line_count)
        for spec, output in zip(specs, outputs)
    ]


def make_renderer(
    columns: Sequence[AnnotationColumn],
    settings: Settings | None = None,
    color_system: ColorSystem | None = None,
) -> TableRenderer:
    settings = settings or get_settings()
    return TableRenderer(
        columns,
        separator=settings.render.separator,
        styles={
            CellStyle.EMPHASIS_A: settings.render.emphasis_a,
            CellStyle.EMPHASIS_B: settings.render.emphasis_b,
        },
        color_system=color_system,
    )


def annotate(
    target: Path | str,
    specs: Sequence[ProducerSpec],
    out: TextIO,
    mode: DiffMode = DiffMode(),
    settings: Settings | None = None,
    color_system: ColorSystem | None = None,
) -> int:
    """Annotate ``target`` with ``specs`` and write the table to ``out``.

    Returns the number of body rows written.
    """
    settings = settings or get_settings()

    document = load_target(target)
    columns = collect_columns(document, specs, settings)

    renderer = make_renderer(columns, settings, color_system)
    return renderer.write(document, out, mode)
