"""Create a gt table object from a DataFrame.

``gt()`` is the first step of a gt workflow.  It validates the naming
arguments, then runs the initializer chain that fills in every part of the
table (data, boxhead, stub, row groups, heading, spanners, stubhead,
footnotes, source notes, formats, styles, summaries, options, transforms and
the built flag), and finally auto-aligns the columns unless asked not to.

Row groups come either from ``groupname_col`` or, by default, from the keys
of a ``DataFrame.groupby()`` passed as ``data``.  With several group columns,
the label of each group is the row's values joined by ``row_group_sep``.
"""

import logging
from functools import partial
from typing import Any

from gtable import config
from gtable.align import cols_align
from gtable.initializers import (
    dt_boxhead_init,
    dt_data_init,
    dt_footnotes_init,
    dt_formats_init,
    dt_has_built_init,
    dt_heading_init,
    dt_options_init,
    dt_row_groups_init,
    dt_source_notes_init,
    dt_spanners_init,
    dt_stub_df_init,
    dt_stub_others_init,
    dt_stubhead_init,
    dt_styles_init,
    dt_summary_init,
    dt_transforms_init,
)
from gtable.options import dt_options_set_value
from gtable.schema import GtArguments, GTTable
from gtable.utils import group_vars, ungroup

logger = logging.getLogger(__name__)

# Default for groupname_col: take the grouping keys of a groupby input
_GROUP_VARS = object()


def gt(  # pylint: disable=too-many-arguments,redefined-builtin
    data: Any,
    rowname_col: str | None = "rowname",
    groupname_col: Any = _GROUP_VARS,
    rownames_to_stub: bool = False,
    auto_align: bool = True,
    id: str | None = None,
    row_group_sep: str | None = None,
) -> GTTable:
    """Create a gt table object.

    Args:
        data: A DataFrame, or the result of ``DataFrame.groupby(<columns>)``.
            A column selection on the groupby (``df.groupby("g")[["x"]]``) is
            not applied: every column of the grouped frame is kept.
        rowname_col: Column whose values become the row captions in the stub.
            Ignored (and ignored if absent from the data) when
            ``rownames_to_stub`` is True.
        groupname_col: Column name(s) whose values label the stub row groups.
            Defaults to the groupby keys of *data*, if any.  None or an empty
            list means no row groups.
        rownames_to_stub: Use the DataFrame index as the stub row captions.
        auto_align: Align every column according to its dtype.
        id: Table ID.  When None, a random ten-letter ID is generated.
        row_group_sep: Separator between group values in multi-column group
            labels.  When None, ``config.row_group_sep()`` is used.

    Raises:
        pydantic.ValidationError: *data* is not a DataFrame, *id* is not a
            single string, *data* has duplicate column names, the reserved
            rowname column already exists with ``rownames_to_stub``, or a
            column is in both ``rowname_col`` and ``groupname_col``.
    """
    if groupname_col is _GROUP_VARS:
        groupname_col = group_vars(data)

    if rownames_to_stub:
        rowname_col = config.ROWNAME_PRIVATE_COL

    if row_group_sep is None:
        row_group_sep = config.row_group_sep()

    # All argument checks happen here, before anything is initialised
    args = GtArguments(
        data=ungroup(data),
        rowname_col=rowname_col,
        groupname_col=groupname_col,
        row_group_sep=row_group_sep,
        id=id,
        rownames_to_stub=rownames_to_stub,
    )

    steps = [
        partial(
            dt_data_init,
            data_tbl=args.data,
            rownames_to_column=args.rowname_col if rownames_to_stub else None,
        ),
        dt_boxhead_init,
        partial(
            dt_stub_df_init,
            rowname_col=args.rowname_col,
            groupname_col=args.groupname_col,
            row_group_sep=args.row_group_sep,
        ),
        dt_row_groups_init,
        dt_stub_others_init,
        dt_heading_init,
        dt_spanners_init,
        dt_stubhead_init,
        dt_footnotes_init,
        dt_source_notes_init,
        dt_formats_init,
        dt_styles_init,
        dt_summary_init,
        dt_options_init,
        dt_transforms_init,
        dt_has_built_init,
    ]
    parts: dict = {}
    for step in steps:
        parts = step(parts)

    # A user-supplied ID replaces the random one from dt_options_init
    if args.id is not None:
        parts = dt_options_set_value(parts, "table_id", args.id)

    table = GTTable(**parts)
    logger.info(
        "Created gt table %s: %d rows, %d columns, %d row groups",
        table.table_id,
        len(table.data),
        len(table.data.columns),
        len(table.row_groups),
    )

    if auto_align:
        table = cols_align(table, align="auto")
    return table


def is_gt_tbl(obj: Any) -> bool:
    """Return True if *obj* is a gt table object."""
    return isinstance(obj, GTTable)
