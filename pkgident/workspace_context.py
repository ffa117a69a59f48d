"""Lookup of the workspace root that contains a directory."""

import os
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Any

SOURCE_DIR = "src"


@dataclass(frozen=True)
class WorkspaceContext:
    """The current directory and the configured workspace roots.

    Packages live under <root>/src/<import path>. Lookups are pure path
    arithmetic; nothing here touches the filesystem.
    """

    cwd: PurePath
    roots: tuple[PurePath, ...] = field(default_factory=tuple)

    @classmethod
    def from_config(
        cls, config: dict[str, Any], cwd: str | PurePath
    ) -> "WorkspaceContext":
        """Build a context from the workspace section of a loaded config."""
        roots = config.get("workspace", {}).get("roots") or []
        return cls(cwd=PurePath(cwd), roots=tuple(PurePath(r) for r in roots))

    def root_containing(self, directory: str | PurePath) -> PurePath | None:
        """Return the first root whose source tree contains directory."""
        target = self._absolute(directory)
        for root in self.roots:
            if target.is_relative_to(PurePath(os.path.normpath(root / SOURCE_DIR))):
                return root
        return None

    def import_path_for(self, directory: str | PurePath) -> str | None:
        """Return the import path of a directory given relative to cwd."""
        target = self._absolute(directory)
        root = self.root_containing(target)
        if root is None:
            return None
        src = PurePath(os.path.normpath(root / SOURCE_DIR))
        rel = target.relative_to(src).as_posix()
        return None if rel == "." else rel

    def _absolute(self, directory: str | PurePath) -> PurePath:
        """Resolve directory against cwd, folding '.' and '..' lexically."""
        return PurePath(os.path.normpath(self.cwd / directory))
