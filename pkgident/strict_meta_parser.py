"""Well-formed markup strategy for extracting go-import meta tags."""

import xml.etree.ElementTree as ET
from collections.abc import Iterator

from pkgident.errors import ParseError
from pkgident.import_meta_from_attrs import collect_meta_tag
from pkgident.meta_parser import (
    BODY_TAG,
    HEAD_TAG,
    META_TAG,
    MetaParser,
    MetaParseResult,
)


def _local_name(name: str) -> str:
    """Strip an ElementTree {namespace} prefix and lower-case the name."""
    return name.rsplit("}", 1)[-1].lower()


class StrictMetaParser(MetaParser):
    """Parses the document as XML, failing on the first lexical error.

    Most real-world HTML is not well-formed XML; the resolver falls back to the
    tolerant scanner whenever this strategy raises ParseError.
    """

    name = "strict"

    def parse(self, text: str) -> MetaParseResult:
        """Return go-import records found before the body starts."""
        result = MetaParseResult()
        try:
            for event, elem in self._events(text):
                tag = _local_name(elem.tag)
                if event == "end":
                    if tag == HEAD_TAG:
                        result.reached_boundary = True
                        break
                    continue
                if tag == BODY_TAG:
                    result.reached_boundary = True
                    break
                if tag == META_TAG:
                    attrs = {_local_name(k): v for k, v in elem.attrib.items()}
                    collect_meta_tag(result, attrs)
        except ET.ParseError as exc:
            msg = f"document is not well-formed markup: {exc}"
            raise ParseError(msg) from exc
        return result

    def _events(self, text: str) -> Iterator[tuple[str, ET.Element]]:
        """Yield start/end events, reporting errors only when they are reached."""
        parser = ET.XMLPullParser(events=("start", "end"))
        parser.feed(text)
        yield from parser.read_events()
        parser.close()
        yield from parser.read_events()
