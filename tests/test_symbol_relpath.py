"""Tests for symbol name to relative path conversion."""

import os

from classmap.symbol_relpath import (
    candidate_path,
    strip_leading_separator,
    strip_prefix,
    symbol_relpath,
)


def test_strip_leading_separator() -> None:
    """Verify that only leading separators are removed."""
    assert strip_leading_separator("\\\\Vendor\\Widget", "\\") == "Vendor\\Widget"
    assert strip_leading_separator("Vendor\\Widget\\", "\\") == "Vendor\\Widget\\"


def test_strip_prefix_drops_one_following_character() -> None:
    """Verify that the prefix and exactly one following character are removed."""
    assert strip_prefix("Vendor\\Package\\Widget", "Vendor\\Package") == "Widget"
    assert strip_prefix("Zend_Db_Table", "Zend") == "Db_Table"
    assert strip_prefix("Vendor\\Package", "Vendor\\Package") == ""


def test_symbol_relpath() -> None:
    """Verify that every hierarchy separator becomes a directory separator."""
    assert symbol_relpath("Db_Table_Row", "_") == os.sep.join(["Db", "Table", "Row"])
    assert symbol_relpath("Sub\\Widget", "\\") == f"Sub{os.sep}Widget"
    assert symbol_relpath("Widget", "_") == "Widget"


def test_candidate_path() -> None:
    """Verify candidate path assembly, including an empty stem."""
    assert candidate_path("/lib", f"Sub{os.sep}Widget", ".py") == (
        f"/lib{os.sep}Sub{os.sep}Widget.py"
    )
    assert candidate_path("/lib", "", ".py") == f"/lib{os.sep}.py"
