"""Tests for matching go-import records to a requested import path."""

import pytest

from pkgident.errors import ParseError
from pkgident.import_meta import ImportMeta
from pkgident.select_import_meta import select_import_meta

ROOT = ImportMeta("example.com", "git", "https://git.example.com/root")
MOD = ImportMeta("example.com/mod", "git", "https://git.example.com/mod")
MOD_PROXY = ImportMeta("example.com/mod", "mod", "https://proxy.example.com")


def test_exact_and_subpackage_match() -> None:
    """Verify a prefix covers itself and its subpackages."""
    assert select_import_meta([MOD], "example.com/mod") == MOD
    assert select_import_meta([MOD], "example.com/mod/sub/pkg") == MOD


def test_prefix_must_end_at_path_boundary() -> None:
    """Verify a prefix does not cover paths that only share characters."""
    assert select_import_meta([MOD], "example.com/module") is None
    assert select_import_meta([], "example.com/mod") is None


def test_longest_prefix_wins() -> None:
    """Verify the most specific record is chosen."""
    assert select_import_meta([ROOT, MOD], "example.com/mod/x") == MOD
    assert select_import_meta([MOD, ROOT], "example.com/other") == ROOT


def test_identical_duplicates_are_accepted() -> None:
    """Verify repeated identical records are not a conflict."""
    assert select_import_meta([MOD, MOD], "example.com/mod") == MOD


def test_conflicting_records() -> None:
    """Verify disagreeing records for the same prefix are an error."""
    with pytest.raises(ParseError, match="multiple go-import records"):
        select_import_meta([MOD, MOD_PROXY], "example.com/mod")
    # A conflict on a shorter prefix does not matter when a longer one wins
    root_alt = ImportMeta("example.com", "hg", "https://hg.example.com/root")
    assert select_import_meta([ROOT, root_alt, MOD], "example.com/mod") == MOD
