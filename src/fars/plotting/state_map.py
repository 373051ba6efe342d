"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no side effects.
Input: accident rows for one state (sentinels already masked) + axis ranges.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Missing Coordinate Rule:
    Rows whose LATITUDE or LONGITUD is NaN stay in the scatter trace.
    Plotly skips points with a missing coordinate, so they are never drawn
    and never pull the view away from the state.  Axis ranges are supplied
    by the caller (see ``fars.analysis.accidents.coordinate_ranges``).
"""

from __future__ import annotations

from typing import Optional, Tuple

import pandas as pd
import plotly.graph_objects as go

from ..analysis.accidents import COORDINATE_COLUMNS, require_columns

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Small dot markers, one per accident
_MARKER_COLOR = 'black'
_MARKER_SIZE  = 3

# Outline styling
_LAND_COLOR     = 'white'
_OUTLINE_COLOR  = 'gray'

# A single accident gives a zero-width range; widen it by this many degrees
_MIN_SPAN_DEG = 0.5


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_map(
    df_state: pd.DataFrame,
    lon_range: Optional[Tuple[float, float]],
    lat_range: Optional[Tuple[float, float]],
    title: Optional[str] = None,
) -> go.Figure:
    """
    Build a scatter map of accident locations over US state outlines.

    The visible window is clipped to *lon_range* x *lat_range*.  An axis
    whose range is ``None`` (no known coordinates) is left at the default
    North America extent.

    Args:
        df_state: Accident rows with ``LATITUDE`` and ``LONGITUD`` columns
            in decimal degrees.  NaN coordinates are allowed.
        lon_range: ``(min, max)`` longitude of the known points, or ``None``.
        lat_range: ``(min, max)`` latitude of the known points, or ``None``.
        title: Optional figure title.

    Returns:
        Figure with a single ``Scattergeo`` trace named ``"Accidents"``.

    Raises:
        ValueError: If a coordinate column is missing.
    """
    require_columns(df_state, COORDINATE_COLUMNS, "df_state")

    fig = go.Figure()
    fig.add_trace(go.Scattergeo(
        lon=df_state['LONGITUD'],
        lat=df_state['LATITUDE'],
        mode='markers',
        marker=dict(color=_MARKER_COLOR, size=_MARKER_SIZE),
        name='Accidents',
        hovertemplate='lon: %{lon:.4f}<br>lat: %{lat:.4f}<extra></extra>',
    ))

    geo = dict(
        scope='north america',
        projection_type='mercator',
        resolution=50,
        showland=True,
        landcolor=_LAND_COLOR,
        showcountries=True,
        countrycolor=_OUTLINE_COLOR,
        showsubunits=True,
        subunitcolor=_OUTLINE_COLOR,
    )
    if lon_range is not None:
        geo['lonaxis'] = dict(range=list(_widen(lon_range)))
    if lat_range is not None:
        geo['lataxis'] = dict(range=list(_widen(lat_range)))

    fig.update_layout(
        title=title,
        geo=geo,
        showlegend=False,
        margin=dict(l=10, r=10, t=50 if title else 10, b=10),
    )
    return fig


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _widen(axis_range: Tuple[float, float]) -> Tuple[float, float]:
    lo, hi = axis_range
    if hi - lo < _MIN_SPAN_DEG:
        mid = (lo + hi) / 2
        return mid - _MIN_SPAN_DEG / 2, mid + _MIN_SPAN_DEG / 2
    return lo, hi
