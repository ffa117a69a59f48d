"""Logic for turning a fetched byte stream into text for meta tag scanning."""

import codecs
import re
from dataclasses import dataclass
from typing import IO

from pkgident.errors import ParseError

# Only these charsets may be declared; anything else cannot be scanned safely.
SUPPORTED_CHARSETS = {"utf-8", "utf8", "ascii", "us-ascii"}
XML_DECL_ENCODING_RE = re.compile(
    r"""^\s*<\?xml\b[^>]*?\bencoding\s*=\s*["']([^"']+)["']""",
    re.IGNORECASE,
)


@dataclass
class DecodedDocument:
    """Text decoded from a fetched document."""

    text: str
    truncated_at: int | None = None  # byte offset of the first undecodable byte


def decode_document(source: bytes | str | IO[bytes] | IO[str]) -> DecodedDocument:
    """Decode bytes, text, or a readable stream into a DecodedDocument.

    Undecodable bytes cut the document short at the first bad byte; the caller
    decides whether the decodable prefix is enough. It is when scanning reaches
    the end of the head inside it.
    """
    if not isinstance(source, (bytes, bytearray, str)):
        if not hasattr(source, "read"):
            msg = f"cannot read go-import metadata from {type(source).__name__}"
            raise ParseError(msg)
        source = source.read()

    if isinstance(source, str):
        doc = DecodedDocument(text=source)
    else:
        raw = bytes(source).removeprefix(codecs.BOM_UTF8)
        try:
            doc = DecodedDocument(text=raw.decode("utf-8"))
        except UnicodeDecodeError as exc:
            doc = DecodedDocument(
                text=raw[: exc.start].decode("utf-8"), truncated_at=exc.start
            )

    match = XML_DECL_ENCODING_RE.match(doc.text)
    if match and match.group(1).strip().lower() not in SUPPORTED_CHARSETS:
        msg = f"cannot decode document using charset {match.group(1)!r}"
        raise ParseError(msg)
    return doc
