"""
anno CLI
==========
Annotate a source file with columns produced by external programs.

    anno example.c -p lines: -p debug-lines:/path/to/example
    anno example.c -p debug-lines:./a.out -p debug-vars:./a.out --diff-only
"""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path

import click
from rich.color import ColorSystem
from rich.console import Console
from rich.markup import escape

from anno import __version__
from anno.config import COLOR_MODES, get_settings
from anno.errors import AnnoError, InvalidProducerSpec
from anno.pipeline import annotate
from anno.producers.spec import ProducerSpec, parse_producer_spec
from anno.table.diff import DiffMode
from anno.utils.log import get_logger, resolve_level, setup_logging

logger = get_logger(__name__)
err_console = Console(stderr=True)

_COLOR_SYSTEMS = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
    "windows": ColorSystem.WINDOWS,
}


class ProducerSpecType(click.ParamType):
    """click parameter type for `-p` producer URIs."""

    name = "producer"

    def convert(self, value, param, ctx):
        if isinstance(value, ProducerSpec):
            return value
        try:
            return parse_producer_spec(value)
        except InvalidProducerSpec as e:
            self.fail(f"{e.reason} (got {value!r}; expected e.g. `name:` or `name:/path/to/source`)", param, ctx)


PRODUCER_SPEC = ProducerSpecType()


def resolve_color_system(mode: str) -> ColorSystem | None:
    """Colour system for stdout under --color auto/always/never."""
    if mode == "never":
        return None
    console = Console(file=sys.stdout, force_terminal=True if mode == "always" else None)
    if mode == "auto" and console.no_color:
        return None
    detected = _COLOR_SYSTEMS.get(console.color_system or "")
    if detected is None and mode == "always":
        return ColorSystem.STANDARD
    return detected


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="anno")
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--producer", "-p", "producers",
    type=PRODUCER_SPEC,
    multiple=True,
    metavar="PRODUCER",
    help="Add an annotation producer URI: `name:`, `name:/data/source` "
         "or `name:/data/source?param=value`. Repeatable; columns keep this order.",
)
@click.option("--diff", is_flag=True, help="Highlight differences between the first two producers.")
@click.option("--diff-only", is_flag=True, help="Only show lines where the first two producers differ.")
@click.option("--jobs", "-j", type=click.IntRange(min=1), default=None, help="Producers to run at once. Default: config.")
@click.option(
    "--color",
    type=click.Choice(COLOR_MODES, case_sensitive=False),
    default=None,
    help="Colour diff highlights. Default: config (auto).",
)
@click.option("--verbose", "-v", count=True, help="More diagnostic logging (repeatable).")
@click.option("--quiet", "-q", count=True, help="Less diagnostic logging (repeatable).")
def main(
    file: Path,
    producers: tuple[ProducerSpec, ...],
    diff: bool,
    diff_only: bool,
    jobs: int | None,
    color: str | None,
    verbose: int,
    quiet: int,
):
    """Annotate FILE with side-by-side columns from annotation producers."""
    settings = get_settings()
    setup_logging(resolve_level(settings.log_level, verbose, quiet))
    logger.debug(
        "CLI: file=%s producers=%s diff=%s diff_only=%s jobs=%s color=%s",
        file, [str(p) for p in producers], diff, diff_only, jobs, color,
    )

    if jobs is not None:
        settings = replace(settings, producers=replace(settings.producers, max_workers=jobs))

    if not producers:
        err_console.print("[yellow]Warning:[/yellow] No producers, displaying file without annotations", soft_wrap=True)

    try:
        annotate(
            file,
            producers,
            sys.stdout,
            mode=DiffMode(highlight=diff, only=diff_only),
            settings=settings,
            color_system=resolve_color_system((color or settings.render.color).lower()),
        )
    except AnnoError as e:
        logger.debug("Annotation run failed", exc_info=True)
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
