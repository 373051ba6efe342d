"""
FARS Report Generator (Imperative Shell)

Thin orchestration layer: loads yearly files through ``data/reader.py``,
hands the DataFrames to the functional core, and renders figures.

No file parsing lives here.  All data access goes through
src/fars/data/reader.py.

Package Location: src/fars/reports/generators.py

Usage::

    from fars.reports.generators import summarize_years, map_state

    summary = summarize_years([2013, 2014, 2015], data_dir="data")
    map_state(1, 2013, data_dir="data", output_path="alabama_2013.html")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

import pandas as pd
import plotly.graph_objects as go

from ..analysis.accidents import (
    count_by_month,
    select_state,
    mask_sentinel_coordinates,
    coordinate_ranges,
)
from ..data.reader import AccidentReader, read_years
from ..plotting.state_map import plot_state_map

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


# ---------------------------------------------------------------------------
# Month / year summary
# ---------------------------------------------------------------------------

def summarize_years(
    years: Iterable[Union[int, float]],
    data_dir: Optional[PathLike] = None,
) -> pd.DataFrame:
    """
    Count accidents per month for each requested year.

    Years whose file cannot be read are logged by ``read_years`` and left
    out of the table.

    Args:
        years: Years to summarise.
        data_dir: Directory holding the accident files.

    Returns:
        DataFrame indexed by ``MONTH`` with one count column per year.
        See :func:`fars.analysis.accidents.count_by_month`.
    """
    years = list(years)
    frames = read_years(years, data_dir)

    loaded = sum(df is not None for df in frames)
    log.debug(
        "Summarising %d of %d requested years", loaded, len(years),
        extra={"years": years},
    )
    return count_by_month(frames)


# ---------------------------------------------------------------------------
# State map
# ---------------------------------------------------------------------------

def state_map_figure(
    state_num: Union[int, float, str],
    year: Union[int, float, str],
    data_dir: Optional[PathLike] = None,
) -> Optional[go.Figure]:
    """
    Build the accident map figure for one state and year.

    Steps: read the full file for *year*, keep the rows for *state_num*,
    mask sentinel coordinates, compute axis ranges from the known
    coordinates, then build the figure.

    Args:
        state_num: Numeric FARS state code; coerced with ``int()``.
        year: Year of the accident file to read.
        data_dir: Directory holding the accident files.

    Returns:
        The figure, or ``None`` when the state has no accidents to plot.

    Raises:
        FileNotFoundError: If the year's file does not exist.
        InvalidStateError: If *state_num* never appears in ``STATE``.
    """
    data = AccidentReader(data_dir).read_year(year)
    state_num = int(state_num)

    data_sub = select_state(data, state_num)
    if data_sub.empty:
        log.info(
            "no accidents to plot",
            extra={"state": state_num, "year": year},
        )
        return None

    data_sub = mask_sentinel_coordinates(data_sub)
    lon_range, lat_range = coordinate_ranges(data_sub)

    return plot_state_map(
        data_sub,
        lon_range=lon_range,
        lat_range=lat_range,
        title=f"Fatal accidents – state {state_num}, {int(year)}",
    )


def map_state(
    state_num: Union[int, float, str],
    year: Union[int, float, str],
    data_dir: Optional[PathLike] = None,
    output_path: Optional[PathLike] = None,
) -> None:
    """
    Render accident locations for one state and year.

    When *output_path* is given the figure is written there as HTML;
    otherwise it is displayed with plotly's default renderer.  Nothing is
    rendered when the state has no accidents.

    Args:
        state_num: Numeric FARS state code.
        year: Year of the accident file to read.
        data_dir: Directory holding the accident files.
        output_path: Optional HTML destination.

    Raises:
        FileNotFoundError: If the year's file does not exist.
        InvalidStateError: If *state_num* never appears in ``STATE``.
    """
    fig = state_map_figure(state_num, year, data_dir)
    if fig is None:
        return

    if output_path is not None:
        out_path = Path(output_path)
        fig.write_html(str(out_path))
        log.info("State map saved → %s", out_path, extra={"path": str(out_path)})
    else:
        fig.show()
