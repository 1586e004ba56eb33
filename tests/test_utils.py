"""Unit tests for pure helper functions in gtable.utils."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import numpy as np
import pandas as pd

from gtable.utils import column_alignment, group_vars, is_missing, join_group_label, random_id, ungroup


class TestRandomId:

    def test_default_length(self):
        assert len(random_id()) == 10

    def test_custom_length(self):
        assert len(random_id(4)) == 4

    def test_lowercase_letters_only(self):
        value = random_id(50)
        assert value.isalpha() and value.islower()


class TestGroupVars:

    def test_plain_frame(self, sales):
        assert group_vars(sales) == []

    def test_single_key(self, sales):
        assert group_vars(sales.groupby("region")) == ["region"]

    def test_multiple_keys(self, sales):
        assert group_vars(sales.groupby(["region", "channel"])) == ["region", "channel"]

    def test_level_grouping(self, sales):
        assert group_vars(sales.groupby(level=0)) == []

    def test_ungroup(self, sales):
        pd.testing.assert_frame_equal(ungroup(sales.groupby("region")), sales)
        assert ungroup(sales) is sales


class TestJoinGroupLabel:

    def test_join(self):
        assert join_group_label(["a", 1], " - ") == "a - 1"

    def test_missing_part(self):
        assert join_group_label(["a", None], " - ") is None
        assert join_group_label([np.nan], " - ") is None

    def test_empty(self):
        assert join_group_label([], " - ") is None


class TestIsMissing:

    def test_na_values(self):
        assert is_missing(None)
        assert is_missing(np.nan)
        assert is_missing(pd.NA)
        assert is_missing(pd.NaT)

    def test_non_missing(self):
        assert not is_missing("")
        assert not is_missing(0)
        assert not is_missing([None])


class TestColumnAlignment:

    def test_numeric(self):
        assert column_alignment(pd.Series([1, 2])) == "right"
        assert column_alignment(pd.Series([1.5, 2.5])) == "right"

    def test_text(self):
        assert column_alignment(pd.Series(["a", "b"])) == "left"

    def test_dates(self):
        assert column_alignment(pd.Series(pd.to_datetime(["2020-01-01"]))) == "left"

    def test_bool(self):
        assert column_alignment(pd.Series([True, False])) == "center"

    def test_categorical(self):
        assert column_alignment(pd.Series(pd.Categorical([1, 2]))) == "center"
