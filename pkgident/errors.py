"""Exceptions raised by the identity resolution and naming logic."""

import shlex


class PkgIdentError(Exception):
    """Base class for all errors raised by this package."""


class ParseError(PkgIdentError):
    """Raised when a fetched document cannot be scanned for go-import metadata."""


class NamingError(PkgIdentError):
    """Raised when a shared library name cannot be derived unambiguously."""

    def __init__(self, message: str, args_list: list[str]) -> None:
        """Store the offending argument list alongside the message."""
        self.args_list = list(args_list)
        if self.args_list:
            message = f"{message}: {shlex.join(self.args_list)}"
        super().__init__(message)
