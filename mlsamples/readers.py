"""Dataset readers for the sample programs.

Both readers parse strictly: a short row, an empty field, an extra field or a
non-numeric value in a numeric column raises :class:`ParseError` naming the
file line and the column instead of silently producing NaN. Blank lines are
skipped.
"""
from __future__ import annotations
import logging
import re
from pathlib import Path
from typing import Optional, Sequence
import pandas as pd
from sklearn.datasets import load_iris

logger = logging.getLogger(__name__)

TAXI_COLUMNS = [
    "vendor_id",
    "rate_code",
    "passenger_count",
    "trip_time_in_secs",
    "trip_distance",
    "payment_type",
    "fare_amount",
]
TAXI_CATEGORICAL = ["vendor_id", "rate_code", "payment_type"]
TAXI_NUMERIC = [
    "passenger_count",
    "trip_time_in_secs",
    "trip_distance",
    "fare_amount",
]

IRIS_FEATURES = ["sepal_length", "sepal_width", "petal_length", "petal_width"]
IRIS_COLUMNS = IRIS_FEATURES + ["label"]

_LINE_RE = re.compile(r"line (\d+)")


class ParseError(ValueError):
    """Raised when a data file row or field cannot be parsed."""

    def __init__(self, message: str, row: Optional[int] = None,
                 column: Optional[str] = None, value: Optional[str] = None,
                 path: Optional[str] = None):
        self.row = row
        self.column = column
        self.value = value
        self.path = path
        where = []
        if path:
            where.append(str(path))
        if row is not None:
            where.append(f"row {row}")
        if column is not None:
            where.append(f"column '{column}'")
        prefix = ", ".join(where)
        super().__init__(f"{prefix}: {message}" if prefix else message)


def _first_flagged(mask: pd.DataFrame):
    rows = mask.any(axis=1)
    if not rows.any():
        return None
    idx = rows.idxmax()
    col = mask.columns[int(mask.loc[idx].to_numpy().argmax())]
    return idx, col


def _read_delimited(
    path,
    columns: Sequence[str],
    numeric: Sequence[str],
    has_header: bool,
    nrows: Optional[int] = None,
) -> pd.DataFrame:
    path = Path(path)
    first_line = 2 if has_header else 1
    try:
        raw = pd.read_csv(
            path,
            header=0 if has_header else None,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=False,
            nrows=nrows,
        )
    except pd.errors.ParserError as exc:
        m = _LINE_RE.search(str(exc))
        row = int(m.group(1)) if m else None
        raise ParseError(
            f"unexpected number of fields ({exc})", row=row, path=str(path)
        ) from exc
    except pd.errors.EmptyDataError as exc:
        raise ParseError("file is empty", row=1, path=str(path)) from exc
    if raw.shape[1] != len(columns):
        raise ParseError(
            f"expected {len(columns)} columns, found {raw.shape[1]}",
            row=1 if has_header else first_line,
            path=str(path),
        )
    raw.columns = list(columns)
    out = raw.copy()
    for col in out.columns:
        out[col] = out[col].fillna("").astype(str).str.strip()
    # Short rows are padded with empty fields and blank lines come through as
    # all-empty rows; the index keeps line numbers.
    empty = out.eq("")
    keep = ~empty.all(axis=1)
    out, empty = out[keep].copy(), empty[keep]

    missing = _first_flagged(empty)
    if missing is not None:
        idx, col = missing
        raise ParseError(
            "missing field", row=first_line + idx, column=col, path=str(path)
        )

    for col in numeric:
        out[col] = pd.to_numeric(out[col], errors="coerce")
    bad = _first_flagged(out[list(numeric)].isna())
    if bad is not None:
        idx, col = bad
        value = raw.at[idx, col]
        raise ParseError(
            f"'{value}' is not a number",
            row=first_line + idx,
            column=col,
            value=value,
            path=str(path),
        )
    return out.reset_index(drop=True)


def read_taxi_trips(path, limit: Optional[int] = None) -> pd.DataFrame:
    """Read a taxi-fare CSV (header row + 7 positional fields)."""
    df = _read_delimited(path, TAXI_COLUMNS, TAXI_NUMERIC, True, nrows=limit)
    logger.info("Read %d taxi trips from %s", len(df), path)
    return df


def read_iris(path=None) -> pd.DataFrame:
    """Read a headerless iris file, or the bundled copy when *path* is None."""
    if path is None:
        bunch = load_iris()
        df = pd.DataFrame(bunch.data, columns=IRIS_FEATURES)
        df["label"] = bunch.target_names[bunch.target]
        logger.info("Loaded %d bundled iris rows", len(df))
        return df
    df = _read_delimited(path, IRIS_COLUMNS, IRIS_FEATURES, False)
    logger.info("Read %d iris rows from %s", len(df), path)
    return df


__all__ = [
    "ParseError",
    "TAXI_COLUMNS",
    "TAXI_CATEGORICAL",
    "TAXI_NUMERIC",
    "IRIS_FEATURES",
    "IRIS_COLUMNS",
    "read_taxi_trips",
    "read_iris",
]
