"""
Error Types
=============
Every failure of an annotation run is fatal and surfaces as a subclass
of AnnoError, carrying enough context to explain itself on stderr.
"""

from __future__ import annotations

from pathlib import Path


class AnnoError(Exception):
    """Base class for all errors that abort an annotation run."""


class InvalidProducerSpec(AnnoError, ValueError):
    """A producer spec string is not a `scheme[:source][?query]` URI."""

    def __init__(self, spec: str, reason: str) -> None:
        self.spec = spec
        self.reason = reason
        super().__init__(f"Invalid producer spec {spec!r}: {reason}")


class TargetFileReadError(AnnoError):
    """The file to annotate could not be read."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Unable to read file to be annotated ({path}): {cause}")


class ProducerLaunchError(AnnoError):
    """The producer command was not found or could not be spawned."""

    def __init__(self, command: str, cause: BaseException) -> None:
        self.command = command
        self.cause = cause
        super().__init__(f"Annotation producer `{command}` could not be launched: {cause}")


class ProducerExecutionError(AnnoError):
    """The producer ran but exited nonzero or its output was unusable."""

    def __init__(self, command: str, reason: str, returncode: int | None = None) -> None:
        self.command = command
        self.reason = reason
        self.returncode = returncode
        super().__init__(f"Annotation producer `{command}` failed: {reason}")


class AnnotationCountMismatch(AnnoError):
    """A producer emitted a different number of lines than the target has."""

    def __init__(self, producer: str, expected: int, actual: int) -> None:
        self.producer = producer
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Annotation producer `{producer}` emitted {actual} line(s), "
            f"expected {expected} (one per target line)"
        )


class ColumnExhausted(AnnoError):
    """A column cursor was read past the end of its stream."""

    def __init__(self, producer: str, position: int) -> None:
        self.producer = producer
        self.position = position
        super().__init__(
            f"Column `{producer}` has no annotation for line {position + 1}"
        )
