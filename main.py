"""Command-line driver for vanity import resolution and shared library naming."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from pkgident.errors import PkgIdentError
from pkgident.fold_dup import fold_dup
from pkgident.load_config import load_config
from pkgident.select_import_meta import select_import_meta
from pkgident.shared_lib_name import shared_lib_name
from pkgident.vanity_import_resolver import VanityImportResolver
from pkgident.workspace_context import WorkspaceContext


def run_meta(args: argparse.Namespace, config: dict[str, Any]) -> int:
    """Print the go-import records of a fetched document."""
    resolver = VanityImportResolver(config["resolver"]["strategies"])
    if args.document == "-":
        records = resolver.parse(sys.stdin.buffer)
    else:
        path = Path(args.document)
        if not path.is_file():
            msg = f"No such document: {path}"
            raise SystemExit(msg)
        records = resolver.parse(path.read_bytes())

    if args.import_path:
        match = select_import_meta(records, args.import_path)
        if match is None:
            print(f"No go-import record matches {args.import_path}", file=sys.stderr)
            return 1
        records = [match]

    for r in records:
        print(f"{r.import_prefix} {r.vcs} {r.repo_root}")
    return 0


def run_folddup(args: argparse.Namespace, config: dict[str, Any]) -> int:
    """Report the first pair of paths that collide under case folding."""
    first, second = fold_dup(args.paths)
    if not first and not second:
        return 0
    print(f"case-insensitive import collision: {first!r} and {second!r}")
    return 1


def run_libname(args: argparse.Namespace, config: dict[str, Any]) -> int:
    """Print the shared library file name for a set of build arguments."""
    naming = config["naming"]
    workspace = WorkspaceContext.from_config(config, cwd=Path.cwd())
    name = shared_lib_name(
        args.patterns,
        args.packages,
        workspace,
        platform=args.platform or naming["platform"],
        reserved=naming["reserved_keywords"],
        affixes=naming["affixes"],
    )
    print(name)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all subcommands."""
    ap = argparse.ArgumentParser(
        description="Resolve vanity import paths and name shared library builds.",
    )
    ap.add_argument("--config", help="Path to configuration file")
    ap.add_argument(
        "--verbose", action="store_true", help="Log debugging information"
    )
    sub = ap.add_subparsers(dest="command", required=True)

    meta = sub.add_parser("meta", help="List go-import records in a fetched page")
    meta.add_argument("document", help="HTML document to scan, or - for stdin")
    meta.add_argument(
        "--import-path",
        help="Print only the record whose prefix covers this import path",
    )
    meta.set_defaults(func=run_meta)

    folddup = sub.add_parser(
        "folddup", help="Find import paths that collide when case is ignored"
    )
    folddup.add_argument("paths", nargs="*", help="Import paths in build order")
    folddup.set_defaults(func=run_folddup)

    libname = sub.add_parser("libname", help="Name a shared library build")
    libname.add_argument(
        "patterns", nargs="*", help="Package patterns as given on the command line"
    )
    libname.add_argument(
        "--pkg",
        dest="packages",
        action="append",
        default=[],
        help="Import path of a package the patterns resolved to (repeatable)",
    )
    libname.add_argument(
        "--platform", help="Target platform for library prefix/suffix (default: linux)"
    )
    libname.set_defaults(func=run_libname)
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the selected subcommand."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = load_config(args.config)
    try:
        return args.func(args, config)
    except PkgIdentError as e:
        msg = f"Error: {e}"
        raise SystemExit(msg) from e


if __name__ == "__main__":
    raise SystemExit(main())
