"""
FARS Data Package (Imperative Shell)

This package handles all file I/O for the FARS toolkit.

Modules:
- reader: File naming, single-file reads and tolerant multi-year loading
"""

from .reader import (
    FILENAME_TEMPLATE,
    AccidentReader,
    YearLoad,
    make_filename,
    read_fars_file,
    read_years,
)

__all__ = [
    'FILENAME_TEMPLATE',
    'AccidentReader',
    'YearLoad',
    'make_filename',
    'read_fars_file',
    'read_years',
]
