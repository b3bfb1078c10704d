"""
anno
=====
Annotate source files with side-by-side columns from external producers.

Each producer is a separate program (`anno-<name>`) that prints one
annotation line per line of the target file; anno lines the columns up
next to the source and can highlight where two producers disagree.
"""

__version__ = "0.1.0"
