"""
FARS - Fatality Analysis Reporting System toolkit

Loads yearly FARS accident files, summarises accident counts by month
and year, and maps accident locations for a single US state, using the
Functional Core, Imperative Shell architecture.

Structure:
- data/     : Imperative Shell (file naming and reading)
- analysis/ : Functional Core (pure transformations)
- plotting/ : (plotting functions)
- reports/  : orchestration of load -> analyse -> plot
"""

from .analysis.accidents import InvalidStateError
from .data.reader import make_filename, read_fars_file, read_years
from .reports.generators import map_state, summarize_years

__version__ = "0.1.0"

__all__ = [
    'InvalidStateError',
    'make_filename',
    'read_fars_file',
    'read_years',
    'summarize_years',
    'map_state',
]
