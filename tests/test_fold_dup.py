"""Tests for case-insensitive import path collision detection."""

from pkgident.fold_dup import fold_dup


def test_no_collision() -> None:
    """Verify lists without case-fold collisions return the empty pair."""
    assert fold_dup(["math/rand", "math/big"]) == ("", "")
    assert fold_dup(["math", "strings"]) == ("", "")
    assert fold_dup(["strings"]) == ("", "")
    assert fold_dup([]) == ("", "")


def test_literal_repeat() -> None:
    """Verify an entry repeated verbatim is a collision."""
    assert fold_dup(["strings", "strings"]) == ("strings", "strings")


def test_first_collision_wins() -> None:
    """Verify only the first colliding pair is reported."""
    paths = ["Rand", "rand", "math", "math/rand", "math/Rand"]
    assert fold_dup(paths) == ("Rand", "rand")


def test_pair_is_in_list_order() -> None:
    """Verify the earlier entry comes first in the pair."""
    assert fold_dup(["math/rand", "x", "Math/Rand"]) == ("math/rand", "Math/Rand")
    assert fold_dup(["a", "B", "b", "A"]) == ("B", "b")


def test_later_group_members_are_not_reported() -> None:
    """Verify a third member of a collision group does not change the result."""
    assert fold_dup(["fmt", "FMT", "Fmt"]) == ("fmt", "FMT")


def test_unicode_case_folding() -> None:
    """Verify folding goes beyond ASCII upper/lower case."""
    assert fold_dup(["example.com/Ünicode", "example.com/ünicode"]) == (
        "example.com/Ünicode",
        "example.com/ünicode",
    )
    assert fold_dup(["pkg/ΣΟΦΙΑ", "pkg/σοφια"]) == ("pkg/ΣΟΦΙΑ", "pkg/σοφια")
    # KELVIN SIGN folds to a plain 'k'
    assert fold_dup(["Kelvin", "kelvin"]) == ("Kelvin", "kelvin")


def test_expanding_folds_do_not_collide() -> None:
    """Verify characters are folded one to one, as filesystems do."""
    assert fold_dup(["example.com/straße", "example.com/STRASSE"]) == ("", "")
    assert fold_dup(["example.com/straße", "example.com/STRAẞE"]) == (
        "example.com/straße",
        "example.com/STRAẞE",
    )


def test_empty_entries_are_skipped() -> None:
    """Verify empty paths never collide with each other."""
    assert fold_dup(["", ""]) == ("", "")
    assert fold_dup(["", "fmt", "", "FMT"]) == ("fmt", "FMT")
