"""
FARS Accident Calculations (Functional Core)

Pure functions only. No I/O, no side effects.
Input/output is DataFrames and plain tuples.

Provides the month-by-year accident count pivot and the state selection
and coordinate cleansing steps used before mapping.

Package Location: src/fars/analysis/accidents.py

Sentinel Rule:
    FARS encodes unknown coordinates as out-of-range numbers.  Any
    ``LATITUDE > 90`` or ``LONGITUD > 900`` means "unknown" and is replaced
    with ``NaN`` before ranges are computed or points are drawn.  The two
    columns are cleansed independently: a row with an unknown longitude
    keeps its latitude.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd


# ---------------------------------------------------------------------------
# Sentinels
# ---------------------------------------------------------------------------

LATITUDE_SENTINEL: float = 90
LONGITUDE_SENTINEL: float = 900

AxisRange = Optional[Tuple[float, float]]

COORDINATE_COLUMNS: List[str] = ["LATITUDE", "LONGITUD"]


class InvalidStateError(ValueError):
    """
    Raised when a requested state code never appears in the ``STATE``
    column of the loaded accident file.
    """
    pass


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def count_by_month(frames: Iterable[Optional[pd.DataFrame]]) -> pd.DataFrame:
    """
    Pivot yearly ``[MONTH, year]`` frames into a month-by-year count table.

    ``None`` entries (years that failed to load) are skipped, so their
    rows simply do not appear.  Rows are counted per ``(year, MONTH)`` and
    reshaped so each distinct year becomes a column.

    A month with no accidents in a given year is left missing (``NaN``)
    rather than filled with zero, and a month with no accidents in any
    year does not appear in the index at all.

    Args:
        frames: Output of :func:`fars.data.reader.read_years`.

    Returns:
        DataFrame indexed by ``MONTH`` (ascending), one column per year
        (ascending).  Returns an empty DataFrame with a ``MONTH`` index
        when no frame is available.
    """
    available = [df for df in frames if df is not None]
    if not available:
        return pd.DataFrame(index=pd.Index([], name="MONTH"))

    combined = pd.concat(available, ignore_index=True)

    counts = combined.groupby(["year", "MONTH"]).size()
    table = counts.unstack("year").sort_index()
    table.columns.name = None
    return table


def select_state(data: pd.DataFrame, state_num: int) -> pd.DataFrame:
    """
    Return the accidents recorded for one state.

    The state code must occur somewhere in ``data["STATE"]``; the check
    runs before filtering.

    Args:
        data: Full accident DataFrame for one year.
        state_num: Numeric FARS state code; coerced with ``int()``.

    Returns:
        Subset of *data* with ``STATE == state_num``.

    Raises:
        ValueError: If *data* has no ``STATE`` column.
        InvalidStateError: If *state_num* is not present in ``STATE``.
    """
    require_columns(data, ["STATE"], "data")
    state_num = int(state_num)
    if state_num not in data["STATE"].unique():
        raise InvalidStateError(f"invalid STATE number: {state_num}")

    return data.loc[data["STATE"] == state_num]


def mask_sentinel_coordinates(data: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel coordinates with ``NaN``.

    Args:
        data: Accident rows with ``LATITUDE`` and ``LONGITUD`` columns.

    Returns:
        Copy of *data* where ``LATITUDE > 90`` and ``LONGITUD > 900`` are
        ``NaN``.  Rows are never dropped.

    Raises:
        ValueError: If a coordinate column is missing.
    """
    require_columns(data, COORDINATE_COLUMNS, "data")
    out = data.copy()
    out["LATITUDE"] = out["LATITUDE"].mask(out["LATITUDE"] > LATITUDE_SENTINEL)
    out["LONGITUD"] = out["LONGITUD"].mask(out["LONGITUD"] > LONGITUDE_SENTINEL)
    return out


def coordinate_ranges(data: pd.DataFrame) -> Tuple[AxisRange, AxisRange]:
    """
    Compute ``(min, max)`` longitude and latitude over known coordinates.

    Missing values are ignored.  Call after :func:`mask_sentinel_coordinates`
    so sentinel values do not stretch the ranges.

    Returns:
        Tuple ``(lon_range, lat_range)``; an axis with no known values is
        ``None``.
    """
    return _axis_range(data["LONGITUD"]), _axis_range(data["LATITUDE"])


def require_columns(
    df: pd.DataFrame,
    required: Sequence[str],
    arg_name: str,
) -> None:
    """
    Raise ValueError if any required columns are absent from *df*.

    Args:
        df: DataFrame to check.
        required: Column names that must be present.
        arg_name: Name of the caller's argument, used in the message.

    Raises:
        ValueError: Naming *arg_name* and listing the missing columns,
            e.g. ``data is missing required columns: ['STATE']``.
    """
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"{arg_name} is missing required columns: {missing}")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _axis_range(values: pd.Series) -> AxisRange:
    known = pd.to_numeric(values, errors="coerce").to_numpy(dtype=float)
    known = known[~np.isnan(known)]
    if known.size == 0:
        return None
    return float(known.min()), float(known.max())
