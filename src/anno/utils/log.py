"""
Centralized logging configuration.

Usage:
    from anno.utils.log import get_logger
    logger = get_logger(__name__)
    logger.debug("Running producer %s", spec.name)
"""

from __future__ import annotations

import logging
import sys

_configured = False

# Ordered quietest → noisiest, stepped through by -v / -q
LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


def resolve_level(base: str = "WARNING", verbose: int = 0, quiet: int = 0) -> str:
    """Shift a base level name by the number of -v / -q flags given."""
    base = base.upper()
    idx = LEVELS.index(base) if base in LEVELS else LEVELS.index("WARNING")
    idx = min(max(idx + verbose - quiet, 0), len(LEVELS) - 1)
    return LEVELS[idx]


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for the entire application. Call once at startup."""
    global _configured
    root = logging.getLogger("anno")
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    if _configured:
        return

    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Console handler; stdout carries the annotated table
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(fmt)
    root.addHandler(console)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module. Automatically namespaced under 'anno'."""
    if not name.startswith("anno"):
        name = f"anno.{name}"
    return logging.getLogger(name)
