"""Logic for turning the attributes of a single meta tag into an ImportMeta."""

from pkgident.errors import ParseError
from pkgident.import_meta import ImportMeta
from pkgident.meta_parser import MetaParseResult

GO_IMPORT_NAME = "go-import"
GO_IMPORT_FIELDS = 3


def import_meta_from_attrs(attrs: dict[str, str]) -> ImportMeta | None:
    """Build an ImportMeta from lower-cased meta tag attributes.

    Returns None for meta tags that are not go-import records. Raises
    ParseError for go-import tags without a three-field content attribute.
    """
    if attrs.get("name", "").strip().lower() != GO_IMPORT_NAME:
        return None

    content = attrs.get("content")
    if content is None:
        msg = "go-import meta tag has no content attribute"
        raise ParseError(msg)

    fields = content.split()
    if len(fields) != GO_IMPORT_FIELDS:
        msg = (
            f"go-import meta tag has {len(fields)} fields "
            f"(want {GO_IMPORT_FIELDS}): {content!r}"
        )
        raise ParseError(msg)

    return ImportMeta(import_prefix=fields[0], vcs=fields[1], repo_root=fields[2])


def collect_meta_tag(result: MetaParseResult, attrs: dict[str, str]) -> None:
    """Add the record of one meta tag to result, noting malformed ones."""
    try:
        record = import_meta_from_attrs(attrs)
    except ParseError as exc:
        result.warnings.append(f"skipping {exc}")
        return
    if record is not None:
        result.records.append(record)
