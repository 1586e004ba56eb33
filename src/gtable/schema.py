"""Pydantic models for gt table construction.

``GtArguments`` validates the constructor arguments before any part of the
table is initialised; a failed check raises ``pydantic.ValidationError`` and no
table object is produced.  The remaining models are the records held in each
slot of a ``GTTable``.
"""

from typing import Any, Literal

import pandas as pd
from pydantic import BaseModel, ConfigDict, StrictStr, field_validator, model_validator

# ─── Argument Validation ─────────────────────────────────────────────────────


class GtArguments(BaseModel):
    """Arguments to gt() after rowname/groupname defaults have been resolved.

    ``id`` must be a single string (lists, numbers, etc. are rejected rather
    than coerced).  An empty ``groupname_col`` means "no grouping" and is
    normalised to None.  ``rowname_col`` must not also appear in
    ``groupname_col``.  Column names in ``data`` must be unique, and with
    ``rownames_to_stub`` the reserved rowname column must not already exist.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    data: pd.DataFrame
    rowname_col: StrictStr | None
    groupname_col: list[StrictStr] | None
    row_group_sep: StrictStr
    id: StrictStr | None = None
    rownames_to_stub: bool = False

    @field_validator("groupname_col", mode="before")
    @classmethod
    def wrap_single_column(cls, value: Any) -> Any:
        """Accept a bare column name as a one-element list."""
        if isinstance(value, str):
            return [value]
        if isinstance(value, tuple):
            return list(value)
        return value

    @field_validator("groupname_col")
    @classmethod
    def empty_means_ungrouped(cls, value: list[str] | None) -> list[str] | None:
        """Normalise an empty list of group columns to None."""
        return value or None

    @field_validator("data")
    @classmethod
    def validate_unique_column_names(cls, value: pd.DataFrame) -> pd.DataFrame:
        """Reject frames with duplicate column names (every column must be addressable by name)."""
        duplicated = list(dict.fromkeys(value.columns[value.columns.duplicated()]))
        if duplicated:
            raise ValueError(f"Column names must be unique; duplicated: {duplicated}")
        return value

    @model_validator(mode="after")
    def validate_private_rowname_col_free(self) -> "GtArguments":
        """Ensure the column that receives the rownames does not already exist."""
        if self.rownames_to_stub and self.rowname_col in self.data.columns:
            raise ValueError(
                f'The data already has a column named "{self.rowname_col}", which is reserved '
                "for rownames when `rownames_to_stub` is True."
            )
        return self

    @model_validator(mode="after")
    def validate_disjoint_naming_columns(self) -> "GtArguments":
        """Ensure the stub rowname column is not also a row group column."""
        if self.rowname_col is not None and self.groupname_col is not None and self.rowname_col in self.groupname_col:
            raise ValueError(
                f'The value "{self.rowname_col}" appears in both `rowname_col` and `groupname_col`. '
                "These arguments must not have any values in common."
            )
        return self


# ─── Sub-state Records ───────────────────────────────────────────────────────


class BoxheadEntry(BaseModel):
    """Column header metadata for one data column."""

    var: Any
    type: Literal["default", "stub", "row_group", "hidden"] = "default"
    column_label: Any = None
    column_units: str | None = None
    column_pattern: str | None = None
    column_align: Literal["left", "center", "right"] = "center"
    column_width: str | None = None


class StubRow(BaseModel):
    """Stub assignment for one body row (1-based ``rownum_i``)."""

    rownum_i: int
    group_id: str | None = None
    group_label: str | None = None
    rowname: str | None = None
    built: str | None = None


class StubSettings(BaseModel):
    rowname_col: str | None = None
    groupname_col: list[str] | None = None
    row_group_sep: str


class StubOthers(BaseModel):
    """Label used for the group of rows that have no group id."""

    label: str | None = None


class Heading(BaseModel):
    title: str | None = None
    subtitle: str | None = None
    preheader: str | None = None


class Spanner(BaseModel):
    vars: list[str]
    spanner_label: str
    spanner_id: str
    gather: bool = True


class Stubhead(BaseModel):
    label: str | None = None


class Footnote(BaseModel):
    locname: str
    grpname: str | None = None
    colname: str | None = None
    locnum: float
    rownum: int | None = None
    colnum: int | None = None
    footnotes: list[str]


class Style(BaseModel):
    locname: str
    grpname: str | None = None
    colname: str | None = None
    locnum: float
    rownum: int | None = None
    colnum: int | None = None
    styles: list[dict[str, Any]]


class OptionEntry(BaseModel):
    """One row of the table options: parameter name, SCSS flag, category, type and value."""

    parameter: str
    scss: bool
    category: str
    type: Literal["value", "values", "logical", "px", "overflow"]
    value: Any


# ─── Table Object ────────────────────────────────────────────────────────────


class GTTable(BaseModel):
    """A gt table: the input data plus every sub-state needed to render it later.

    Instances are produced by ``gt()``; downstream code uses ``is_gt_tbl()`` (an
    isinstance check on this class) to recognise them.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    data: pd.DataFrame
    boxhead: list[BoxheadEntry]
    stub_df: list[StubRow]
    stub_settings: StubSettings
    row_groups: list[str]
    stub_others: StubOthers
    heading: Heading
    spanners: list[Spanner]
    stubhead: Stubhead
    footnotes: list[Footnote]
    source_notes: list[str]
    formats: list[dict[str, Any]]
    styles: list[Style]
    summary: list[dict[str, Any]]
    options: dict[str, OptionEntry]
    transforms: list[dict[str, Any]]
    has_built: bool = False

    @property
    def table_id(self) -> str:
        return self.options["table_id"].value

    def boxhead_entry(self, var: Any) -> BoxheadEntry:
        """Return the boxhead entry for column *var* (KeyError if absent)."""
        for entry in self.boxhead:
            if entry.var == var:
                return entry
        raise KeyError(f"Column {var!r} is not in the table boxhead")
