"""Unit tests for the config module."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from pathlib import Path

from gtable.config import DEFAULT_ROW_GROUP_SEP, ROOT, ROWNAME_PRIVATE_COL, ROW_GROUP_SEP_ENV, row_group_sep


class TestRowGroupSep:

    def test_default(self):
        assert row_group_sep() == DEFAULT_ROW_GROUP_SEP == " - "

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv(ROW_GROUP_SEP_ENV, " > ")
        assert row_group_sep() == " > "


class TestConstants:

    def test_private_rowname_col(self):
        assert ROWNAME_PRIVATE_COL == "__GT_ROWNAME_PRIVATE__"

    def test_root_is_project_root(self):
        """ROOT should point to the project root (contains pyproject.toml)."""
        assert isinstance(ROOT, Path)
        assert (ROOT / "pyproject.toml").exists()
