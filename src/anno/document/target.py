"""
Target Document Loader
========================
Reads the file being annotated. Its line count is the contract every
producer's output must match.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from anno.errors import TargetFileReadError
from anno.utils.helpers import split_lines
from anno.utils.log import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TargetDocument:
    """The file being annotated, loaded once per run."""

    path: Path
    raw_text: str
    lines: tuple[str, ...] = field(repr=False)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @classmethod
    def from_text(cls, path: Path, text: str) -> TargetDocument:
        return cls(path=path, raw_text=text, lines=tuple(split_lines(text)))


def load_target(path: Path | str) -> TargetDocument:
    """Read the file at ``path`` as UTF-8 and split it into lines."""
    absolute = Path(os.path.abspath(path))
    try:
        text = absolute.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TargetFileReadError(Path(path), e) from e

    document = TargetDocument.from_text(absolute, text)
    logger.debug("Target: %s (%d lines)", document.path, document.line_count)
    return document
