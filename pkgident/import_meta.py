"""Data model for go-import redirection records."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ImportMeta:
    """One go-import record found in a fetched document."""

    import_prefix: str
    vcs: str  # git/hg/svn/bzr/mod
    repo_root: str  # e.g. https://github.com/rsc/foo/bar
