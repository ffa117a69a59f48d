"""Tolerant scanner for go-import meta tags in HTML that is not well-formed."""

import html
import re
from dataclasses import dataclass, field

from pkgident.errors import ParseError
from pkgident.import_meta_from_attrs import collect_meta_tag
from pkgident.meta_parser import (
    BODY_TAG,
    HEAD_TAG,
    META_TAG,
    MetaParser,
    MetaParseResult,
)

START_TAG_RE = re.compile(r"<([A-Za-z][^\s/>]*)")
END_TAG_RE = re.compile(r"</\s*([A-Za-z][^\s/>]*)[^>]*>")
ATTR_RE = re.compile(
    r"""([^\s"'<>/=]+)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'=<>`]+)))?"""
)
WHITESPACE_RE = re.compile(r"\s*")

# Elements whose content is raw text and never holds tags.
RAW_TEXT_TAGS = {"script", "style", "textarea", "title"}

# Markup sections that carry no tags: (opener, closer).
OPAQUE_SECTIONS = (
    ("<!--", "-->"),
    ("<![CDATA[", "]]>"),
    ("<?", ">"),
    ("<!", ">"),
)


@dataclass
class ScanResult:
    """Outcome of walking a document's tags."""

    result: MetaParseResult = field(default_factory=MetaParseResult)
    unterminated_at: int | None = None  # offset of a tag or section left open


class TolerantMetaParser(MetaParser):
    """Walks tag-like substrings directly, ignoring markup it cannot make sense of.

    Tag and attribute names are matched case-insensitively; attribute values may
    be double-quoted, single-quoted, unquoted or absent, and tags may be
    self-closing. Scanning stops at the first <body> or </head> tag.
    """

    name = "tolerant"

    def parse(self, text: str) -> MetaParseResult:
        """Return go-import records found before the body starts."""
        scan = self.scan(text)
        if scan.unterminated_at is None:
            return scan.result
        if not scan.result.records:
            msg = f"unterminated markup at offset {scan.unterminated_at}"
            raise ParseError(msg)
        scan.result.warnings.append(
            f"unterminated markup at offset {scan.unterminated_at}; "
            f"keeping {len(scan.result.records)} go-import record(s)"
        )
        return scan.result

    def scan(self, text: str) -> ScanResult:
        """Walk the document tag by tag until the body boundary or the end."""
        scan = ScanResult()
        pos = 0
        while True:
            lt = text.find("<", pos)
            if lt == -1:
                return scan

            section_end = self._skip_opaque(text, lt)
            if section_end is not None:
                if section_end < 0:
                    scan.unterminated_at = lt
                    return scan
                pos = section_end
                continue

            end_match = END_TAG_RE.match(text, lt)
            if end_match:
                if end_match.group(1).lower() == HEAD_TAG:
                    scan.result.reached_boundary = True
                    return scan
                pos = end_match.end()
                continue

            start_match = START_TAG_RE.match(text, lt)
            if not start_match:
                # Stray '<' in text content
                pos = lt + 1
                continue

            attrs, tag_end = self._scan_attrs(text, start_match.end())
            if tag_end is None:
                scan.unterminated_at = lt
                return scan
            pos = tag_end

            tag = start_match.group(1).lower()
            if tag == BODY_TAG:
                scan.result.reached_boundary = True
                return scan
            if tag == META_TAG:
                collect_meta_tag(scan.result, attrs)
            elif tag in RAW_TEXT_TAGS and not text.startswith("/>", tag_end - 2):
                pos = self._skip_raw_text(text, tag, tag_end)

    def _skip_opaque(self, text: str, lt: int) -> int | None:
        """Return the offset after a comment/declaration at lt, -1 if unclosed."""
        for opener, closer in OPAQUE_SECTIONS:
            if text.startswith(opener, lt):
                end = text.find(closer, lt + len(opener))
                if end == -1:
                    return -1
                return end + len(closer)
        return None

    def _skip_raw_text(self, text: str, tag: str, pos: int) -> int:
        """Return the offset of the end tag closing a raw text element."""
        match = re.compile(rf"</\s*{tag}\b", re.IGNORECASE).search(text, pos)
        return match.start() if match else len(text)

    def _scan_attrs(self, text: str, pos: int) -> tuple[dict[str, str], int | None]:
        """Collect attributes up to the closing '>' of a start tag.

        Returns the lower-cased attributes and the offset just past the tag, or
        None for the offset when the input ends inside the tag.
        """
        attrs: dict[str, str] = {}
        n = len(text)
        while True:
            pos = WHITESPACE_RE.match(text, pos).end()
            if pos >= n:
                return attrs, None
            if text[pos] == ">":
                return attrs, pos + 1
            if text.startswith("/>", pos):
                return attrs, pos + 2

            match = ATTR_RE.match(text, pos)
            if not match:
                # Unparseable character: skip it rather than abandon the tag
                pos += 1
                continue

            name = match.group(1).lower()
            value = next((g for g in match.groups()[1:] if g is not None), "")
            # First occurrence wins, as in HTML
            attrs.setdefault(name, html.unescape(value))
            pos = match.end()
