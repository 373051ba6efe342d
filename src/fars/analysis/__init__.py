"""
FARS Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept DataFrames and return transformed data.

Modules:
- accidents: Month/year count pivot, state selection, coordinate cleansing
"""

from .accidents import (
    LATITUDE_SENTINEL,
    LONGITUDE_SENTINEL,
    InvalidStateError,
    count_by_month,
    select_state,
    mask_sentinel_coordinates,
    coordinate_ranges,
    require_columns,
)

__all__ = [
    'LATITUDE_SENTINEL',
    'LONGITUDE_SENTINEL',
    'InvalidStateError',
    'count_by_month',
    'select_state',
    'mask_sentinel_coordinates',
    'coordinate_ranges',
    'require_columns',
]
