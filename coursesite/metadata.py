"""Front-matter metadata of course articles.

Every Markdown source starts with a YAML block describing the article. This
module defines the recognised fields and validates a parsed block against them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .content import Document

_SCALAR_TYPES = (str, int, float, bool)


class MetadataError(ValueError):
    """Raised when a document's front-matter is missing or malformed."""


@dataclass(frozen=True)
class SrcMeta:
    """Metadata found in a Markdown source's YAML block.

    Attributes:
        title: Article title (required).
        description: Optional Markdown summary shown on the index.
        date: Free-form date text, never parsed.
        authors: Author names in the order given.
        github: Optional URL of the project's code repository.
    """

    title: str
    description: str | None = None
    date: str | None = None
    authors: tuple[str, ...] = ()
    github: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SrcMeta:
        """Validate a front-matter mapping and build a SrcMeta.

        Scalars such as numbers are accepted as text. Unknown keys are ignored.

        Args:
            data: Parsed YAML mapping.

        Returns:
            The validated metadata.

        Raises:
            MetadataError: If the mapping does not match the schema.
        """
        if not isinstance(data, Mapping):
            raise MetadataError(
                f"Invalid metadata: expected a mapping, got {type(data).__name__}"
            )
        title = _text_field(data, "title")
        if title is None:
            raise MetadataError("Invalid metadata: missing required field 'title'")
        return cls(
            title=title,
            description=_text_field(data, "description"),
            date=_text_field(data, "date"),
            authors=_text_list_field(data, "authors"),
            github=_text_field(data, "github"),
        )


def get_meta(document: Document) -> SrcMeta:
    """Extract the metadata of a parsed document.

    Args:
        document: Parsed Markdown document.

    Returns:
        The document's metadata.

    Raises:
        MetadataError: If the document has no YAML block, if the block is not
            valid YAML, or if it does not match the schema.
    """
    if document.meta_error is not None:
        raise MetadataError(f"Invalid YAML metadata: {document.meta_error}")
    if document.meta is None:
        raise MetadataError("No YAML metadata")
    return SrcMeta.from_mapping(document.meta)


def _text_field(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, _SCALAR_TYPES):
        return str(value)
    raise MetadataError(
        f"Invalid metadata: field '{key}' must be text, got {type(value).__name__}"
    )


def _text_list_field(data: Mapping[str, Any], key: str) -> tuple[str, ...]:
    value = data.get(key)
    if value is None:
        return ()
    if not isinstance(value, list):
        raise MetadataError(
            f"Invalid metadata: field '{key}' must be a list, got {type(value).__name__}"
        )
    items: list[str] = []
    for index, item in enumerate(value):
        if not isinstance(item, _SCALAR_TYPES):
            raise MetadataError(
                f"Invalid metadata: field '{key}[{index}]' must be text, "
                f"got {type(item).__name__}"
            )
        items.append(str(item))
    return tuple(items)
