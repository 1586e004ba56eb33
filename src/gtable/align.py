"""Column alignment for gt tables."""

import logging
from typing import Any, Literal

from pydantic import BaseModel, model_validator

from gtable.schema import GTTable
from gtable.utils import column_alignment

logger = logging.getLogger(__name__)


class ColsAlignArguments(BaseModel):
    """Arguments to cols_align(); every requested column must exist in the table."""

    align: Literal["auto", "left", "center", "right"]
    columns: list[Any] | None
    available: list[Any]

    @model_validator(mode="after")
    def validate_columns_exist(self) -> "ColsAlignArguments":
        if self.columns is None:
            return self
        unknown = [col for col in self.columns if col not in self.available]
        if unknown:
            raise ValueError(f"Column(s) {unknown} not found in the table data")
        return self


def cols_align(table: GTTable, align: str = "auto", columns: Any = None) -> GTTable:
    """Return a copy of *table* with the alignment of *columns* (default: all) set to *align*.

    ``"auto"`` picks each column's alignment from its dtype (see
    ``utils.column_alignment``).  The input table is left unchanged and the
    returned table holds its own copy of the data.
    """
    if isinstance(columns, str):
        columns = [columns]
    args = ColsAlignArguments(align=align, columns=columns, available=list(table.data.columns))
    targets = args.available if args.columns is None else args.columns

    alignments: dict[Any, str] = {}
    for col in targets:
        alignments[col] = column_alignment(table.data[col]) if args.align == "auto" else args.align
    logger.debug("Aligning %d columns (%s)", len(alignments), args.align)

    boxhead = [
        entry.model_copy(update={"column_align": alignments[entry.var]}) if entry.var in alignments else entry
        for entry in table.boxhead
    ]
    return table.model_copy(update={"boxhead": boxhead, "data": table.data.copy()})
