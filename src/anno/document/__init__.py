"""Target document subpackage: the file being annotated."""

from anno.document.target import TargetDocument, load_target

__all__ = ["TargetDocument", "load_target"]
