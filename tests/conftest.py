"""Shared test configuration and fixtures."""

from pathlib import Path

import pandas as pd
import pytest
from dotenv import load_dotenv

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


@pytest.fixture(autouse=True)
def default_row_group_sep(monkeypatch):
    """Run every test with the built-in separator unless a test sets its own."""
    monkeypatch.delenv("GT_ROW_GROUP_SEP", raising=False)


@pytest.fixture
def exibble() -> pd.DataFrame:
    """Small mixed-dtype table with row and group label columns."""
    return pd.DataFrame(
        {
            "num": [0.1111, 2.222, 33.33, 444.4],
            "char": ["apricot", "banana", "coconut", "durian"],
            "fctr": pd.Categorical(["one", "two", "three", "four"]),
            "date": pd.to_datetime(["2015-01-15", "2015-02-15", "2015-03-15", "2015-04-15"]),
            "logical": [True, False, True, False],
            "row": ["row_1", "row_2", "row_3", "row_4"],
            "group": ["grp_a", "grp_a", "grp_b", "grp_b"],
        }
    )


@pytest.fixture
def sales() -> pd.DataFrame:
    """Table with two categorical columns suitable for a two-level groupby."""
    return pd.DataFrame(
        {
            "region": ["North", "North", "South", "North", "South"],
            "channel": ["web", "store", "web", "web", "web"],
            "units": [10, 4, 7, 3, 12],
        },
        index=["a", "b", "c", "d", "e"],
    )
