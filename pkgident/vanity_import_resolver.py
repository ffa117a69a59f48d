"""Discovery of go-import redirection records in fetched vanity import pages."""

import logging
from typing import IO

from pkgident.decode_document import decode_document
from pkgident.errors import ParseError
from pkgident.import_meta import ImportMeta
from pkgident.meta_parser import MetaParser, MetaParseResult
from pkgident.strict_meta_parser import StrictMetaParser
from pkgident.tolerant_meta_parser import TolerantMetaParser

logger = logging.getLogger(__name__)

META_PARSERS: dict[str, type[MetaParser]] = {
    StrictMetaParser.name: StrictMetaParser,
    TolerantMetaParser.name: TolerantMetaParser,
}
DEFAULT_STRATEGIES = ("strict", "tolerant")


class VanityImportResolver:
    """Parses fetched HTML into go-import records.

    Strategies are tried in order; the first one that does not raise ParseError
    wins, and a failed strategy's partial results are discarded.
    """

    def __init__(self, strategies: list[str] | tuple[str, ...] | None = None) -> None:
        """Initialize the resolver with parsing strategies by name."""
        names = list(strategies or DEFAULT_STRATEGIES)
        unknown = [n for n in names if n not in META_PARSERS]
        if unknown:
            msg = f"unknown meta parser strategies: {', '.join(unknown)}"
            raise ValueError(msg)
        self.parsers: list[MetaParser] = [META_PARSERS[n]() for n in names]

    def parse(self, source: bytes | str | IO[bytes] | IO[str]) -> list[ImportMeta]:
        """Return the go-import records of a document in document order."""
        doc = decode_document(source)
        result = self._parse_text(doc.text)
        for warning in result.warnings:
            logger.warning("%s", warning)
        records = result.records

        # Bytes after the head are never scanned, so they cannot be at fault
        if doc.truncated_at is not None and not result.reached_boundary:
            if not records:
                msg = f"undecodable byte at offset {doc.truncated_at}"
                raise ParseError(msg)
            logger.warning(
                "Undecodable byte at offset %d; keeping %d go-import record(s)",
                doc.truncated_at,
                len(records),
            )
        return records

    def _parse_text(self, text: str) -> MetaParseResult:
        """Run each strategy in turn until one succeeds."""
        errors: list[ParseError] = []
        for parser in self.parsers:
            try:
                return parser.parse(text)
            except ParseError as exc:
                logger.debug("%s meta parser gave up: %s", parser.name, exc)
                errors.append(exc)
        raise errors[-1]


def parse_meta_go_imports(
    source: bytes | str | IO[bytes] | IO[str],
) -> list[ImportMeta]:
    """Parse go-import records with the default strict-then-tolerant strategies."""
    return VanityImportResolver().parse(source)
