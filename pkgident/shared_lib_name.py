"""Logic for naming the shared library built from a set of packages."""

import logging
from collections.abc import Sequence

from pkgident.common_path_prefix import common_path_prefix
from pkgident.errors import NamingError
from pkgident.workspace_context import WorkspaceContext

logger = logging.getLogger(__name__)

RESERVED_KEYWORDS = ("std", "cmd", "all")
WILDCARD = "..."
RECURSIVE_SUFFIX = "/..."
REFERENCE_PLATFORM = "linux"
ELF_AFFIXES = {"prefix": "lib", "suffix": ".so"}
SHARED_LIB_AFFIXES: dict[str, dict[str, str]] = {
    "linux": ELF_AFFIXES,
    "freebsd": ELF_AFFIXES,
    "netbsd": ELF_AFFIXES,
    "openbsd": ELF_AFFIXES,
    "android": ELF_AFFIXES,
    "darwin": {"prefix": "lib", "suffix": ".dylib"},
    "windows": {"prefix": "", "suffix": ".dll"},
}


def is_local_pattern(arg: str) -> bool:
    """Check if a pattern names a directory relative to the current one."""
    return arg in {".", ".."} or arg.startswith(("./", "../"))


def shared_lib_affixes(
    platform: str, affixes: dict[str, dict[str, str]] | None = None
) -> tuple[str, str]:
    """Return the (prefix, suffix) wrapped around shared library names."""
    table = affixes or SHARED_LIB_AFFIXES
    entry = table.get(platform)
    if entry is None:
        logger.debug("No shared library affixes for %s; using ELF naming", platform)
        entry = ELF_AFFIXES
    return entry.get("prefix", ""), entry.get("suffix", "")


def shared_lib_name(
    raw_args: Sequence[str],
    resolved_packages: Sequence[str],
    workspace_context: WorkspaceContext | None = None,
    *,
    platform: str = REFERENCE_PLATFORM,
    reserved: Sequence[str] = RESERVED_KEYWORDS,
    affixes: dict[str, dict[str, str]] | None = None,
) -> str:
    """Derive the file name of a shared library from its build arguments.

    - Reserved keywords alone (std, cmd) name the library verbatim, joined by
      commas; mixing them with anything else is a NamingError.
    - Any wildcard pattern names the library after the longest common import
      path prefix of the resolved packages.
    - Otherwise the library is named after each distinct resolved package.

    Slashes become '-' and the platform prefix and suffix are applied, so
    ["std", "cmd"] gives "libstd,cmd.so" on linux.
    """
    core = _core_name(
        list(raw_args), list(resolved_packages), workspace_context, reserved
    )
    prefix, suffix = shared_lib_affixes(platform, affixes)
    return prefix + core.replace("/", "-") + suffix


def _core_name(
    raw_args: list[str],
    resolved_packages: list[str],
    workspace_context: WorkspaceContext | None,
    reserved: Sequence[str],
) -> str:
    """Compute the library name before slashes are replaced and affixes added."""
    reserved_args = [arg for arg in raw_args if arg in reserved]
    if reserved_args:
        if len(reserved_args) != len(raw_args):
            msg = "mixing of meta and non-meta packages is not allowed"
            raise NamingError(msg, raw_args)
        return ",".join(raw_args)

    if any(WILDCARD in arg for arg in raw_args):
        return _wildcard_core_name(raw_args, resolved_packages, workspace_context)

    core = ",".join(dict.fromkeys(resolved_packages))
    if not core:
        msg = "no packages to name the shared library after"
        raise NamingError(msg, raw_args)
    return core


def _wildcard_core_name(
    raw_args: list[str],
    resolved_packages: list[str],
    workspace_context: WorkspaceContext | None,
) -> str:
    """Name a wildcard expansion after the import path its packages share."""
    if not resolved_packages and workspace_context is not None:
        # Nothing matched yet; name the library after the pattern's directory.
        if len(raw_args) == 1 and raw_args[0].endswith(RECURSIVE_SUFFIX):
            directory = raw_args[0][: -len(RECURSIVE_SUFFIX)]
            if is_local_pattern(directory):
                import_path = workspace_context.import_path_for(directory)
                if import_path:
                    return import_path

    prefix = common_path_prefix(resolved_packages)
    if not prefix:
        msg = "packages matched by the pattern share no import path prefix"
        raise NamingError(msg, raw_args)
    return prefix
