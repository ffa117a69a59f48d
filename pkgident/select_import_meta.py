"""Utility for matching go-import records against a requested import path."""

from pkgident.errors import ParseError
from pkgident.import_meta import ImportMeta


def select_import_meta(
    records: list[ImportMeta], import_path: str
) -> ImportMeta | None:
    """Pick the record whose prefix covers import_path, preferring the longest.

    A prefix covers a path when it equals the path or is followed in it by '/'.
    Two records sharing the winning prefix but disagreeing on where it lives are
    an error.
    """
    matches = [
        r
        for r in records
        if import_path == r.import_prefix
        or import_path.startswith(r.import_prefix + "/")
    ]
    if not matches:
        return None

    longest = max(len(r.import_prefix) for r in matches)
    first, *rest = [r for r in matches if len(r.import_prefix) == longest]
    for other in rest:
        if other != first:
            msg = (
                f"multiple go-import records for {first.import_prefix}: "
                f"{first.vcs} {first.repo_root} and {other.vcs} {other.repo_root}"
            )
            raise ParseError(msg)
    return first
