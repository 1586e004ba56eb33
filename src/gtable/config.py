"""Process-wide defaults for table construction."""

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

ROW_GROUP_SEP_ENV = "GT_ROW_GROUP_SEP"

DEFAULT_ROW_GROUP_SEP = " - "

# Reserved column for rownames moved into the stub; unlikely to collide with user data
ROWNAME_PRIVATE_COL = "__GT_ROWNAME_PRIVATE__"

TABLE_ID_LENGTH = 10


def row_group_sep() -> str:
    """Return the configured separator for multi-column row group labels."""
    return os.getenv(ROW_GROUP_SEP_ENV, DEFAULT_ROW_GROUP_SEP)
