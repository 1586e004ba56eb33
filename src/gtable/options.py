"""Default table options and the helpers that read and write them.

Options live in the ``options`` slot as a dict of ``OptionEntry`` keyed by
parameter name.  The helpers accept either the in-progress ``parts`` dict used
while a table is being initialised, or a finished ``GTTable``.
"""

import copy
import logging
from typing import Any

from gtable.schema import GTTable, OptionEntry
from gtable.utils import random_id

logger = logging.getLogger(__name__)


# ─── Defaults ────────────────────────────────────────────────────────────────

# (parameter, scss, category, type, value)
OPTIONS_DEFAULTS: tuple[tuple[str, bool, str, str, Any], ...] = (
    ("table_id", False, "table", "value", None),
    ("table_caption", False, "table", "value", None),
    ("container_width", False, "container", "px", "auto"),
    ("container_height", False, "container", "px", "auto"),
    ("container_overflow_x", False, "container", "overflow", "auto"),
    ("container_overflow_y", False, "container", "overflow", "auto"),
    ("table_width", True, "table", "px", "auto"),
    ("table_layout", True, "table", "value", "fixed"),
    ("table_align", False, "table", "value", "center"),
    ("table_margin_left", True, "table", "px", "auto"),
    ("table_margin_right", True, "table", "px", "auto"),
    ("table_background_color", True, "table", "value", "#FFFFFF"),
    ("table_font_names", False, "table", "values", ["-apple-system", "BlinkMacSystemFont", "Segoe UI", "Roboto", "Oxygen", "Ubuntu", "Cantarell", "Helvetica Neue", "Fira Sans", "Droid Sans", "Arial", "sans-serif"]),
    ("table_font_size", True, "table", "px", "16px"),
    ("table_font_weight", True, "table", "value", "normal"),
    ("table_font_style", True, "table", "value", "normal"),
    ("table_font_color", True, "table", "value", "#333333"),
    ("table_font_color_light", True, "table", "value", "#FFFFFF"),
    ("table_border_top_include", False, "table", "logical", True),
    ("table_border_top_style", True, "table", "value", "solid"),
    ("table_border_top_width", True, "table", "px", "2px"),
    ("table_border_top_color", True, "table", "value", "#A8A8A8"),
    ("table_border_bottom_include", False, "table", "logical", True),
    ("table_border_bottom_style", True, "table", "value", "solid"),
    ("table_border_bottom_width", True, "table", "px", "2px"),
    ("table_border_bottom_color", True, "table", "value", "#A8A8A8"),
    ("heading_background_color", True, "heading", "value", None),
    ("heading_align", True, "heading", "value", "center"),
    ("heading_title_font_size", True, "heading", "px", "125%"),
    ("heading_title_font_weight", True, "heading", "value", "initial"),
    ("heading_subtitle_font_size", True, "heading", "px", "85%"),
    ("heading_subtitle_font_weight", True, "heading", "value", "initial"),
    ("heading_padding", True, "heading", "px", "4px"),
    ("heading_border_bottom_style", True, "heading", "value", "solid"),
    ("heading_border_bottom_width", True, "heading", "px", "2px"),
    ("heading_border_bottom_color", True, "heading", "value", "#D3D3D3"),
    ("column_labels_background_color", True, "column_labels", "value", None),
    ("column_labels_font_size", True, "column_labels", "px", "100%"),
    ("column_labels_font_weight", True, "column_labels", "value", "normal"),
    ("column_labels_text_transform", True, "column_labels", "value", "inherit"),
    ("column_labels_padding", True, "column_labels", "px", "5px"),
    ("column_labels_hidden", False, "column_labels", "logical", False),
    ("row_group_background_color", True, "row_group", "value", None),
    ("row_group_font_size", True, "row_group", "px", "100%"),
    ("row_group_font_weight", True, "row_group", "value", "initial"),
    ("row_group_text_transform", True, "row_group", "value", "inherit"),
    ("row_group_padding", True, "row_group", "px", "8px"),
    ("row_group_border_top_style", True, "row_group", "value", "solid"),
    ("row_group_border_top_width", True, "row_group", "px", "2px"),
    ("row_group_border_top_color", True, "row_group", "value", "#D3D3D3"),
    ("row_group_border_bottom_style", True, "row_group", "value", "solid"),
    ("row_group_border_bottom_width", True, "row_group", "px", "2px"),
    ("row_group_border_bottom_color", True, "row_group", "value", "#D3D3D3"),
    ("stub_background_color", True, "stub", "value", None),
    ("stub_font_weight", True, "stub", "value", "initial"),
    ("stub_border_style", True, "stub", "value", "solid"),
    ("stub_border_width", True, "stub", "px", "2px"),
    ("stub_border_color", True, "stub", "value", "#D3D3D3"),
    ("data_row_padding", True, "data_row", "px", "8px"),
    ("summary_row_padding", True, "summary_row", "px", "8px"),
    ("summary_row_background_color", True, "summary_row", "value", None),
    ("summary_row_text_transform", True, "summary_row", "value", "inherit"),
    ("grand_summary_row_padding", True, "grand_summary_row", "px", "8px"),
    ("grand_summary_row_background_color", True, "grand_summary_row", "value", None),
    ("grand_summary_row_text_transform", True, "grand_summary_row", "value", "inherit"),
    ("footnotes_background_color", True, "footnotes", "value", None),
    ("footnotes_font_size", True, "footnotes", "px", "90%"),
    ("footnotes_padding", True, "footnotes", "px", "4px"),
    ("footnotes_marks", False, "footnotes", "values", "numbers"),
    ("footnotes_sep", False, "footnotes", "value", "<br />"),
    ("source_notes_background_color", True, "source_notes", "value", None),
    ("source_notes_font_size", True, "source_notes", "px", "90%"),
    ("source_notes_padding", True, "source_notes", "px", "4px"),
    ("source_notes_sep", False, "source_notes", "value", "<br />"),
    ("row_striping_background_color", True, "row", "value", "rgba(128,128,128,0.05)"),
    ("row_striping_include_stub", False, "row", "logical", False),
    ("row_striping_include_table_body", False, "row", "logical", False),
)


# ─── Access Helpers ──────────────────────────────────────────────────────────


def _options_of(target: dict | GTTable) -> dict[str, OptionEntry]:
    if isinstance(target, GTTable):
        return target.options
    if "options" not in target:
        raise KeyError("`options` has not been initialised; run dt_options_init() first")
    return target["options"]


def dt_options_init(parts: dict) -> dict:
    """Populate the ``options`` slot from OPTIONS_DEFAULTS with a fresh random table ID."""
    options = {
        parameter: OptionEntry(parameter=parameter, scss=scss, category=category, type=type_, value=copy.deepcopy(value))
        for parameter, scss, category, type_, value in OPTIONS_DEFAULTS
    }
    options["table_id"] = options["table_id"].model_copy(update={"value": random_id()})
    logger.debug("Initialised %d options (table_id=%s)", len(options), options["table_id"].value)
    return {**parts, "options": options}


def dt_options_get_value(target: dict | GTTable, option: str) -> Any:
    """Return the value of *option* (KeyError for an unknown option)."""
    options = _options_of(target)
    if option not in options:
        raise KeyError(f"Unknown table option: {option!r}")
    return options[option].value


def dt_options_set_value(target: dict | GTTable, option: str, value: Any) -> dict | GTTable:
    """Return a copy of *target* with *option* set to *value* (KeyError for an unknown option).

    A returned ``GTTable`` holds its own copy of the data, so it shares no
    DataFrame with *target*.
    """
    options = _options_of(target)
    if option not in options:
        raise KeyError(f"Unknown table option: {option!r}")
    updated = {**options, option: options[option].model_copy(update={"value": value})}
    if isinstance(target, GTTable):
        return target.model_copy(update={"options": updated, "data": target.data.copy()})
    return {**target, "options": updated}
