"""
Line Number Producer
======================
Built-in producer installed as `anno-lines`: prints 1..N, one number per
target line.

    anno example.c -p lines:
"""

from __future__ import annotations

import os

import click

from anno.producers.invoker import ENV_TARGET_LINES


def line_numbers(count: int) -> list[str]:
    return [str(i) for i in range(1, count + 1)]


@click.command()
def main():
    """Annotate each line of the target with its line number."""
    raw = os.getenv(ENV_TARGET_LINES)
    if raw is None:
        raise click.ClickException(f"{ENV_TARGET_LINES} is not set; run this via `anno -p lines:`")
    try:
        count = int(raw)
    except ValueError:
        raise click.ClickException(f"{ENV_TARGET_LINES} is not a number: {raw!r}")
    if count < 0:
        raise click.ClickException(f"{ENV_TARGET_LINES} is negative: {count}")

    for number in line_numbers(count):
        click.echo(number)


if __name__ == "__main__":
    main()
