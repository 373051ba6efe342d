"""
FARS Accident File Reader (Imperative Shell)

This module owns all file I/O for the package: it resolves yearly file
names, reads the (bz2-compressed) CSV files into DataFrames, and loads
several years at once with per-year failure isolation.

Package Location: src/fars/data/reader.py

File naming:
   Yearly files are named ``accident_<year>.csv.bz2`` and looked up
   relative to a caller-supplied data directory (default: the current
   working directory).

Failure isolation:
   ``read_years`` never lets one bad year abort the batch.  Each year is
   loaded into a ``YearLoad`` result; failures are logged as warnings and
   surface as ``None`` in the returned list, in the same position as the
   requested year.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, NamedTuple, Optional, Union

import pandas as pd

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# File naming
# ---------------------------------------------------------------------------
FILENAME_TEMPLATE: str = "accident_{year}.csv.bz2"

# Columns kept by read_years
_YEAR_COLUMNS: List[str] = ["MONTH", "year"]

# Per-year errors that read_years downgrades to a warning.  EOFError comes
# from a truncated bz2 stream; KeyError covers files that parse but lack a
# MONTH column.
_RECOVERABLE_ERRORS = (OSError, EOFError, ValueError, KeyError)

PathLike = Union[str, Path]


class YearLoad(NamedTuple):
    """Outcome of loading one requested year.

    Exactly one of ``data`` / ``error`` is set.
    """

    year: Union[int, float]
    data: Optional[pd.DataFrame]
    error: Optional[Exception]

    @property
    def ok(self) -> bool:
        return self.error is None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def read_fars_file(path: PathLike) -> pd.DataFrame:
    """
    Read one FARS accident file into a DataFrame.

    Compression is inferred from the file extension, so both plain
    ``.csv`` and ``.csv.bz2`` files are accepted.

    Args:
        path: Path to the accident file.

    Returns:
        DataFrame with one row per accident and the file's column names.

    Raises:
        FileNotFoundError: If *path* does not reference an existing file.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"file '{path}' does not exist")

    log.debug("Reading %s", path, extra={"path": str(path)})
    # low_memory=False reads the file in one pass so pandas does not emit
    # DtypeWarning chatter for wide mixed-type columns.
    return pd.read_csv(path, low_memory=False)


def make_filename(year: Union[int, float, str]) -> str:
    """
    Build the canonical accident file name for *year*.

    The year is coerced with ``int()``, so ``2013.7`` yields
    ``accident_2013.csv.bz2``.

    Raises:
        ValueError: If *year* cannot be coerced to an integer.
    """
    return FILENAME_TEMPLATE.format(year=int(year))


def read_years(
    years: Iterable[Union[int, float]],
    data_dir: Optional[PathLike] = None,
) -> List[Optional[pd.DataFrame]]:
    """
    Load the ``MONTH`` column of several yearly files.

    Each successfully loaded frame is projected to ``[MONTH, year]``,
    where ``year`` is the requested year (not derived from the data).
    A year whose file is missing or unreadable is logged as
    ``invalid year: <year>`` and yields ``None``; the remaining years are
    still processed.

    Args:
        years: Years to load, in the order results should be returned.
        data_dir: Directory holding the accident files.  Defaults to the
            current working directory.

    Returns:
        List with one entry per requested year, order preserved.
    """
    return [load.data for load in _load_years(years, data_dir)]


class AccidentReader:
    """Reader bound to one directory of yearly accident files.

    Args:
        data_dir: Directory holding ``accident_<year>.csv.bz2`` files.
            Defaults to the current working directory.
    """

    def __init__(self, data_dir: Optional[PathLike] = None) -> None:
        self.data_dir = Path(data_dir) if data_dir is not None else Path(".")

    def path_for(self, year: Union[int, float, str]) -> Path:
        """Return the full path of the accident file for *year*."""
        return self.data_dir / make_filename(year)

    def read_year(self, year: Union[int, float, str]) -> pd.DataFrame:
        """Read the complete dataset for one year (no column projection).

        Raises:
            FileNotFoundError: If the year's file does not exist.
        """
        return read_fars_file(self.path_for(year))

    def read_years(
        self, years: Iterable[Union[int, float]]
    ) -> List[Optional[pd.DataFrame]]:
        """Load ``[MONTH, year]`` frames for *years*; see :func:`read_years`."""
        return read_years(years, self.data_dir)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _load_years(
    years: Iterable[Union[int, float]],
    data_dir: Optional[PathLike],
) -> List[YearLoad]:
    """Load every requested year into an ordered list of ``YearLoad``."""
    reader = AccidentReader(data_dir)
    return [_load_year(reader, year) for year in years]


def _load_year(reader: AccidentReader, year: Union[int, float]) -> YearLoad:
    """Load one year, converting recoverable failures into a ``YearLoad``.

    The file name is resolved before the guarded block: a year that cannot
    be coerced to an integer is a caller error, not a data problem.
    """
    path = reader.path_for(year)
    try:
        data = read_fars_file(path)
        data = data.assign(year=year)[_YEAR_COLUMNS]
    except _RECOVERABLE_ERRORS as exc:
        log.warning(
            "invalid year: %s",
            year,
            extra={"year": year, "path": str(path), "error": str(exc)},
        )
        return YearLoad(year=year, data=None, error=exc)

    return YearLoad(year=year, data=data, error=None)
