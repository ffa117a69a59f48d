"""Common interface for go-import meta tag parsing strategies."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from pkgident.import_meta import ImportMeta

BODY_TAG = "body"
HEAD_TAG = "head"
META_TAG = "meta"


@dataclass
class MetaParseResult:
    """Records found by a strategy, with the non-fatal problems it skipped."""

    records: list[ImportMeta] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    reached_boundary: bool = False  # stopped at <body> or </head>, not at the end


class MetaParser(ABC):
    """Extracts go-import records from the head of a decoded document."""

    name: str = ""

    @abstractmethod
    def parse(self, text: str) -> MetaParseResult:
        """Return go-import records in document order.

        Raises ParseError when the strategy cannot make sense of the document.
        """
