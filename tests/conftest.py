"""Shared fixtures: small FARS accident files written to a temp directory."""

import logging

import pandas as pd
import pytest

# 2013: state 1 has one unknown longitude (999) and one unknown latitude (99.99)
ACCIDENTS_2013 = pd.DataFrame(
    {
        "STATE":    [1,     1,     1,     1,      6,      6],
        "MONTH":    [1,     1,     3,     3,      2,      12],
        "LATITUDE": [32.5,  33.0,  40.0,  99.99,  36.0,   34.0],
        "LONGITUD": [-86.5, -87.0, 999.0, -86.0,  -120.0, -118.0],
        "FATALS":   [1,     2,     1,     1,      1,      3],
    }
)

ACCIDENTS_2014 = pd.DataFrame(
    {
        "STATE":    [1,     1,     1],
        "MONTH":    [1,     5,     5],
        "LATITUDE": [31.0,  34.5,  30.2],
        "LONGITUD": [-85.0, -88.1, -87.9],
        "FATALS":   [1,     1,     2],
    }
)


@pytest.fixture
def data_dir(tmp_path):
    """Directory holding bz2-compressed accident files for 2013 and 2014."""
    ACCIDENTS_2013.to_csv(tmp_path / "accident_2013.csv.bz2", index=False)
    ACCIDENTS_2014.to_csv(tmp_path / "accident_2014.csv.bz2", index=False)
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_fars_logger():
    """Drop handlers installed by configure_logging between tests."""
    yield
    logger = logging.getLogger("fars")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
