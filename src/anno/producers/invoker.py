"""
Producer Invoker
==================
Runs one external producer command per spec and captures its stdout.

A producer named `foo` runs as the command `anno-foo` (prefix configurable)
with no arguments, stdin closed, stderr passed through, and these
environment variables added to the caller's environment:

    ANNO_TARGET        absolute path of the file being annotated
    ANNO_TARGET_LINES  line count of that file, in decimal
    ANNO_PRODUCER      the producer name
    ANNO_SOURCE        the producer's data source (may be empty)

It must print exactly one line per target line; a single space means
"nothing for this line".
"""

from __future__ import annotations

import os
import subprocess
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Mapping, Sequence

from anno.document.target import TargetDocument
from anno.errors import ProducerExecutionError, ProducerLaunchError
from anno.producers.spec import ProducerSpec
from anno.utils.log import get_logger

logger = get_logger(__name__)

ENV_TARGET = "ANNO_TARGET"
ENV_TARGET_LINES = "ANNO_TARGET_LINES"
ENV_PRODUCER = "ANNO_PRODUCER"
ENV_SOURCE = "ANNO_SOURCE"


@dataclass(frozen=True)
class ProducerEnvironment:
    """The variables handed to one producer process."""

    target: str
    target_lines: int
    producer: str
    source: str

    @classmethod
    def for_run(cls, document: TargetDocument, spec: ProducerSpec) -> ProducerEnvironment:
        return cls(
            target=str(document.path),
            target_lines=document.line_count,
            producer=spec.name,
            source=spec.source,
        )

    def as_dict(self) -> dict[str, str]:
        return {
            ENV_TARGET: self.target,
            ENV_TARGET_LINES: str(self.target_lines),
            ENV_PRODUCER: self.producer,
            ENV_SOURCE: self.source,
        }


@dataclass(frozen=True)
class ProducerInvocation:
    """Everything needed to launch one producer."""

    spec: ProducerSpec
    command: str
    environment: ProducerEnvironment

    @classmethod
    def build(cls, spec: ProducerSpec, document: TargetDocument, prefix: str = "anno-") -> ProducerInvocation:
        return cls(
            spec=spec,
            command=f"{prefix}{spec.name}",
            environment=ProducerEnvironment.for_run(document, spec),
        )


def run_producer(invocation: ProducerInvocation, base_env: Mapping[str, str] | None = None) -> str:
    """Launch a producer, wait for it to exit and return its stdout as text."""
    env = dict(os.environ if base_env is None else base_env)
    env.update(invocation.environment.as_dict())
    logger.debug("Command: %s %s", invocation.command, invocation.environment.as_dict())

    try:
        proc = subprocess.run(
            [invocation.command],
            env=env,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            check=False,
        )
    except OSError as e:
        raise ProducerLaunchError(invocation.command, e) from e

    if proc.returncode != 0:
        raise ProducerExecutionError(
            invocation.command,
            f"exited with status {proc.returncode}",
            returncode=proc.returncode,
        )

    try:
        return proc.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ProducerExecutionError(invocation.command, f"output is not valid UTF-8 ({e})") from e


def run_producers(
    invocations: Sequence[ProducerInvocation],
    max_workers: int = 1,
    base_env: Mapping[str, str] | None = None,
) -> list[str]:
    """Run every producer and return their outputs in invocation order.

    With max_workers > 1 the producers run on a thread pool; all of them
    are waited for, and when several fail the earliest one's error is raised.
    """
    if max_workers <= 1 or len(invocations) <= 1:
        return [run_producer(inv, base_env) for inv in invocations]

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = [pool.submit(run_producer, inv, base_env) for inv in invocations]
        # Results are collected in submission order, not completion order
        return [future.result() for future in futures]
