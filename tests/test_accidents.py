import numpy as np
import pandas as pd
import pytest

from fars.analysis.accidents import (
    InvalidStateError,
    coordinate_ranges,
    count_by_month,
    mask_sentinel_coordinates,
    select_state,
)

from conftest import ACCIDENTS_2013


def _year_frame(year, months):
    return pd.DataFrame({"MONTH": months, "year": year})


# ---------------------------------------------------------------------------
# count_by_month
# ---------------------------------------------------------------------------

def test_count_by_month_single_year():
    table = count_by_month([_year_frame(2013, [1, 1, 3, 3, 2, 12])])

    assert table.index.name == "MONTH"
    assert table.index.tolist() == [1, 2, 3, 12]
    assert table.columns.tolist() == [2013]
    assert table[2013].tolist() == [2, 1, 2, 1]


def test_count_by_month_leaves_absent_pairs_missing():
    table = count_by_month([
        _year_frame(2013, [1, 1, 2]),
        _year_frame(2014, [1, 5, 5]),
    ])

    assert table.index.tolist() == [1, 2, 5]
    assert table.columns.tolist() == [2013, 2014]
    assert table.loc[1, 2013] == 2
    assert table.loc[5, 2014] == 2
    assert np.isnan(table.loc[5, 2013])
    assert np.isnan(table.loc[2, 2014])
    # no explicit zero anywhere
    assert not (table == 0).any().any()


def test_count_by_month_skips_failed_years():
    table = count_by_month([None, _year_frame(2014, [7]), None])

    assert table.columns.tolist() == [2014]
    assert table.loc[7, 2014] == 1


def test_count_by_month_nothing_loaded():
    table = count_by_month([None, None])

    assert table.empty
    assert table.index.name == "MONTH"


# ---------------------------------------------------------------------------
# select_state
# ---------------------------------------------------------------------------

def test_select_state_filters_rows():
    subset = select_state(ACCIDENTS_2013, 6)

    assert len(subset) == 2
    assert (subset["STATE"] == 6).all()


def test_select_state_coerces_code():
    assert len(select_state(ACCIDENTS_2013, "1")) == 4
    assert len(select_state(ACCIDENTS_2013, 1.0)) == 4


def test_select_state_unknown_code():
    with pytest.raises(InvalidStateError, match="invalid STATE number: 99"):
        select_state(ACCIDENTS_2013, 99)


def test_select_state_requires_state_column():
    with pytest.raises(ValueError, match=r"data is missing required columns: \[.STATE.\]"):
        select_state(pd.DataFrame({"MONTH": [1]}), 1)


def test_mask_sentinel_requires_coordinates():
    with pytest.raises(ValueError, match="LONGITUD"):
        mask_sentinel_coordinates(pd.DataFrame({"LATITUDE": [40.0]}))


def test_invalid_state_error_is_value_error():
    assert issubclass(InvalidStateError, ValueError)


def test_known_state_always_yields_rows():
    for state in ACCIDENTS_2013["STATE"].unique():
        assert not select_state(ACCIDENTS_2013, state).empty


# ---------------------------------------------------------------------------
# Sentinel cleansing and ranges
# ---------------------------------------------------------------------------

def test_mask_sentinel_longitude_keeps_latitude():
    df = pd.DataFrame({"LATITUDE": [40.0, 35.0], "LONGITUD": [999.0, -90.0]})

    masked = mask_sentinel_coordinates(df)

    assert np.isnan(masked.loc[0, "LONGITUD"])
    assert masked.loc[0, "LATITUDE"] == 40.0
    assert masked.loc[1, "LONGITUD"] == -90.0


def test_mask_sentinel_latitude():
    df = pd.DataFrame({"LATITUDE": [99.99, 90.0], "LONGITUD": [-86.0, -85.0]})

    masked = mask_sentinel_coordinates(df)

    assert np.isnan(masked.loc[0, "LATITUDE"])
    # the threshold itself is a valid latitude
    assert masked.loc[1, "LATITUDE"] == 90.0


def test_mask_sentinel_does_not_modify_input_or_drop_rows():
    df = pd.DataFrame({"LATITUDE": [99.99], "LONGITUD": [999]})

    masked = mask_sentinel_coordinates(df)

    assert len(masked) == 1
    assert df.loc[0, "LONGITUD"] == 999


def test_sentinel_longitude_does_not_distort_range():
    df = pd.DataFrame({
        "LATITUDE": [40.0, 32.0, 33.0],
        "LONGITUD": [999.0, -86.0, -88.0],
    })

    lon_range, lat_range = coordinate_ranges(mask_sentinel_coordinates(df))

    assert lon_range == (-88.0, -86.0)
    assert lat_range == (32.0, 40.0)


def test_coordinate_ranges_all_unknown():
    df = pd.DataFrame({"LATITUDE": [99.99], "LONGITUD": [999.0]})

    lon_range, lat_range = coordinate_ranges(mask_sentinel_coordinates(df))

    assert lon_range is None
    assert lat_range is None
