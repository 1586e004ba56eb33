"""Small helpers shared by the gt constructor and its initializers."""

import secrets
import string
from typing import Any, Iterable

import pandas as pd
from pandas.api import types as ptypes
from pandas.core.groupby import DataFrameGroupBy

from gtable.config import TABLE_ID_LENGTH


def random_id(n: int = TABLE_ID_LENGTH) -> str:
    """Return a random ID of *n* lowercase letters (e.g. ``"kqzjwubmex"``)."""
    return "".join(secrets.choice(string.ascii_lowercase) for _ in range(n))


def group_vars(data: Any) -> list:
    """Return the grouping keys of a ``DataFrame.groupby()`` result, or [] for anything else.

    Keys are returned as given to ``groupby`` so that non-column groupings
    (Series, functions) surface as invalid ``groupname_col`` values later on.
    """
    if not isinstance(data, DataFrameGroupBy):
        return []
    keys = data.keys
    if keys is None:
        # Grouped by index level only
        return []
    if isinstance(keys, (list, tuple)):
        return list(keys)
    return [keys]


def ungroup(data: Any) -> Any:
    """Return the underlying DataFrame of a groupby result (other inputs unchanged)."""
    if isinstance(data, DataFrameGroupBy):
        return data.obj
    return data


def is_missing(value: Any) -> bool:
    """Return True for scalar NA values (None, NaN, NaT, pd.NA)."""
    return ptypes.is_scalar(value) and bool(pd.isna(value))


def join_group_label(values: Iterable[Any], sep: str) -> str | None:
    """Join one row's group column values into a label; None if any part is missing."""
    parts = list(values)
    if not parts or any(is_missing(v) for v in parts):
        return None
    return sep.join(str(v) for v in parts)


def column_alignment(series: pd.Series) -> str:
    """Pick an alignment for a column from its dtype.

    Numbers right, text and dates left, logicals and categories center.
    Anything unrecognised is centered.
    """
    dtype = series.dtype
    # Checked before numeric: bool counts as numeric in pandas
    if ptypes.is_bool_dtype(dtype):
        return "center"
    if isinstance(dtype, pd.CategoricalDtype):
        return "center"
    if ptypes.is_numeric_dtype(dtype):
        return "right"
    if ptypes.is_datetime64_any_dtype(dtype):
        return "left"
    if ptypes.is_string_dtype(dtype) or ptypes.is_object_dtype(dtype):
        return "left"
    return "center"
