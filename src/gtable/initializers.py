"""Sub-initializers that populate each slot of a gt table.

Every initializer takes the in-progress ``parts`` dict and returns a new dict
with its own slot set; the input dict is never mutated.  The stub step also
retypes the boxhead entries of the columns it takes over.  They must run in
the order ``gt()`` calls them: later steps read slots written by earlier ones
(the boxhead needs the data, the stub rewrites boxhead column types, and row
groups are derived from the stub).  Calling one early raises KeyError naming
the missing slot.
"""

import logging
from typing import Any

import pandas as pd

from gtable.options import dt_options_init
from gtable.schema import BoxheadEntry, Heading, StubOthers, Stubhead, StubRow, StubSettings
from gtable.utils import is_missing, join_group_label

logger = logging.getLogger(__name__)

__all__ = [
    "dt_boxhead_init",
    "dt_data_init",
    "dt_footnotes_init",
    "dt_formats_init",
    "dt_has_built_init",
    "dt_heading_init",
    "dt_options_init",
    "dt_row_groups_init",
    "dt_source_notes_init",
    "dt_spanners_init",
    "dt_stub_df_init",
    "dt_stub_others_init",
    "dt_stubhead_init",
    "dt_styles_init",
    "dt_summary_init",
    "dt_transforms_init",
]


def _require(parts: dict, slot: str, initializer: str) -> Any:
    """Fetch *slot* from *parts*, failing loudly if its initializer has not run yet."""
    if slot not in parts:
        raise KeyError(f"{initializer}() needs `{slot}`, which has not been initialised yet")
    return parts[slot]


# ─── Data & Column Header ────────────────────────────────────────────────────


def dt_data_init(parts: dict, data_tbl: pd.DataFrame, rownames_to_column: str | None = None) -> dict:
    """Store a copy of the input data with a fresh 0..n-1 index.

    If *rownames_to_column* is given, the original index values (as strings)
    are kept as a new first column under that name.
    """
    data = data_tbl.copy()
    rownames = [str(v) for v in data.index]
    data = data.reset_index(drop=True)
    if rownames_to_column is not None:
        data.insert(0, rownames_to_column, rownames)
    logger.debug("Stored data: %d rows x %d columns", len(data), len(data.columns))
    return {**parts, "data": data}


def dt_boxhead_init(parts: dict) -> dict:
    """Create one default boxhead entry per data column, labelled with the column name."""
    data = _require(parts, "data", "dt_boxhead_init")
    boxhead = [BoxheadEntry(var=col, column_label=col) for col in data.columns]
    return {**parts, "boxhead": boxhead}


# ─── Stub & Row Groups ───────────────────────────────────────────────────────


def dt_stub_df_init(
    parts: dict,
    rowname_col: str | None,
    groupname_col: list[str] | None,
    row_group_sep: str,
) -> dict:
    """Assign stub rownames and group ids/labels to every body row.

    Naming columns that are not in the data are ignored, so the default
    ``"rowname"`` only takes effect when such a column exists.  Columns that
    are used become ``stub`` / ``row_group`` in the boxhead.
    """
    data = _require(parts, "data", "dt_stub_df_init")
    boxhead = _require(parts, "boxhead", "dt_stub_df_init")
    n_rows = len(data)
    col_types: dict[Any, str] = {}

    rownames: list[str | None] = [None] * n_rows
    if rowname_col is not None and rowname_col in data.columns:
        rownames = [None if is_missing(v) else str(v) for v in data[rowname_col]]
        col_types[rowname_col] = "stub"
    elif rowname_col is not None:
        logger.debug("Rowname column %r not in data; no stub rownames", rowname_col)

    group_ids: list[str | None] = [None] * n_rows
    if groupname_col:
        missing = [col for col in groupname_col if col not in data.columns]
        if missing:
            logger.warning("Group column(s) %s not in data; rows will not be grouped", missing)
        else:
            group_ids = [
                join_group_label(values, row_group_sep)
                for values in data[groupname_col].itertuples(index=False, name=None)
            ]
            for col in groupname_col:
                col_types[col] = "row_group"

    stub_df = [
        StubRow(rownum_i=i + 1, group_id=group_id, group_label=group_id, rowname=rowname)
        for i, (group_id, rowname) in enumerate(zip(group_ids, rownames))
    ]
    boxhead = [
        entry.model_copy(update={"type": col_types[entry.var]}) if entry.var in col_types else entry
        for entry in boxhead
    ]
    settings = StubSettings(rowname_col=rowname_col, groupname_col=groupname_col, row_group_sep=row_group_sep)
    return {**parts, "boxhead": boxhead, "stub_df": stub_df, "stub_settings": settings}


def dt_row_groups_init(parts: dict) -> dict:
    """Collect the distinct group ids from the stub, in order of first appearance."""
    stub_df = _require(parts, "stub_df", "dt_row_groups_init")
    row_groups = list(dict.fromkeys(row.group_id for row in stub_df if row.group_id is not None))
    logger.debug("Found %d row groups", len(row_groups))
    return {**parts, "row_groups": row_groups}


def dt_stub_others_init(parts: dict) -> dict:
    return {**parts, "stub_others": StubOthers()}


# ─── Table Parts ─────────────────────────────────────────────────────────────


def dt_heading_init(parts: dict) -> dict:
    return {**parts, "heading": Heading()}


def dt_spanners_init(parts: dict) -> dict:
    return {**parts, "spanners": []}


def dt_stubhead_init(parts: dict) -> dict:
    return {**parts, "stubhead": Stubhead()}


def dt_footnotes_init(parts: dict) -> dict:
    return {**parts, "footnotes": []}


def dt_source_notes_init(parts: dict) -> dict:
    return {**parts, "source_notes": []}


def dt_formats_init(parts: dict) -> dict:
    return {**parts, "formats": []}


def dt_styles_init(parts: dict) -> dict:
    return {**parts, "styles": []}


def dt_summary_init(parts: dict) -> dict:
    return {**parts, "summary": []}


def dt_transforms_init(parts: dict) -> dict:
    return {**parts, "transforms": []}


def dt_has_built_init(parts: dict) -> dict:
    """Mark the table as not yet built (rendering flips this later)."""
    return {**parts, "has_built": False}
