"""Build display-table objects from pandas DataFrames.

Submodules:
  config        -- process-wide defaults read from the environment / .env
  schema        -- Pydantic models for arguments, sub-state records and GTTable
  utils         -- random IDs, grouping discovery, label joining, dtype alignment
  options       -- default options table and option get/set helpers
  initializers  -- the dt_*_init chain that fills each GTTable slot
  align         -- cols_align() for explicit and automatic column alignment
  gt            -- the gt() constructor
"""

from pydantic import ValidationError

from gtable.align import cols_align
from gtable.gt import gt, is_gt_tbl
from gtable.options import dt_options_get_value, dt_options_set_value
from gtable.schema import GTTable
from gtable.utils import random_id

__all__ = [
    "GTTable",
    "ValidationError",
    "cols_align",
    "dt_options_get_value",
    "dt_options_set_value",
    "gt",
    "is_gt_tbl",
    "random_id",
]
