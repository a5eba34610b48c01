"""Markdown parsing for coursesite.

This module turns Markdown sources into Document objects. A source may start
with a YAML metadata block delimited by ``---`` and closed by ``---`` or
``...``. The block is kept as a raw mapping on the document; validating it
against the metadata schema is left to ``metadata.get_meta`` so that parsing
never fails on bad front-matter.

Key items:
- Document: Dataclass holding a parsed source.
- parse_markdown: Read and parse a source file.
- parse_text: Parse Markdown text that is already in memory.
- render_markdown: Render Markdown text to HTML.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import mistune
import yaml

FRONTMATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(.*?\r?\n)?(?:---|\.\.\.)[ \t]*(?:\r?\n|\Z)", re.DOTALL
)
TAG_RE = re.compile(r"<[^>]+>")

MARKDOWN_PLUGINS = ["strikethrough", "footnotes", "table", "url"]

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _FrontMatterLoader(yaml.SafeLoader):
    """Safe YAML loader that keeps dates as plain text."""


_FrontMatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


@dataclass(frozen=True)
class Document:
    """A parsed Markdown source.

    Attributes:
        path: Path to the source file.
        meta: Raw metadata mapping, or None when the source has no YAML block.
        meta_error: YAML error text when the block exists but does not parse.
        body: Markdown text following the metadata block.
        html: Body rendered to HTML.
    """

    path: Path
    meta: dict[str, Any] | None
    meta_error: str | None
    body: str
    html: str


def _generate_heading_id(text: str) -> str:
    """Generate a URL-friendly ID from heading text.

    Args:
        text: The heading text, possibly containing inline HTML.

    Returns:
        URL-friendly slug suitable for anchor links.
    """
    slug = TAG_RE.sub("", text).lower().strip()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"[-\s]+", "-", slug)
    return slug.strip("-")


class _AnchoredRenderer(mistune.HTMLRenderer):
    """HTML renderer that gives every heading a unique anchor ID.

    Raw HTML in the source is passed through untouched.
    """

    def __init__(self):
        super().__init__(escape=False)
        self._heading_id_counts: dict[str, int] = {}

    def heading(self, text: str, level: int, **attrs) -> str:
        base_id = _generate_heading_id(text) or "section"

        if base_id in self._heading_id_counts:
            self._heading_id_counts[base_id] += 1
            heading_id = f"{base_id}-{self._heading_id_counts[base_id]}"
        else:
            self._heading_id_counts[base_id] = 0
            heading_id = base_id

        return f'<h{level} id="{heading_id}">{text}</h{level}>\n'


def render_markdown(text: str) -> str:
    """Render Markdown text to HTML.

    Args:
        text: Markdown source.

    Returns:
        Rendered HTML.
    """
    markdown = mistune.create_markdown(
        renderer=_AnchoredRenderer(), plugins=MARKDOWN_PLUGINS
    )
    return markdown(text)


def extract_frontmatter(text: str) -> tuple[dict[str, Any] | None, str | None, str]:
    """Split a YAML metadata block from Markdown text.

    Args:
        text: Raw file content.

    Returns:
        Tuple of (metadata mapping or None, YAML error text or None, body).
        The mapping is None when there is no block or it does not parse.
    """
    match = FRONTMATTER_RE.match(text)
    if not match:
        return None, None, text
    body = text[match.end() :]
    try:
        data = yaml.load(match.group(1) or "", Loader=_FrontMatterLoader)
    except yaml.YAMLError as exc:
        return None, str(exc), body
    if data is None:
        return {}, None, body
    if not isinstance(data, dict):
        return None, f"expected a mapping, got {type(data).__name__}", body
    return data, None, body


def parse_text(text: str, path: Path) -> Document:
    """Parse Markdown text into a Document.

    Args:
        text: Markdown source, optionally starting with a YAML block. A
            leading byte-order mark is ignored.
        path: Path the text was read from.

    Returns:
        The parsed document.
    """
    if text.startswith("\ufeff"):
        text = text[1:]
    meta, meta_error, body = extract_frontmatter(text)
    return Document(
        path=path,
        meta=meta,
        meta_error=meta_error,
        body=body,
        html=render_markdown(body),
    )


def parse_markdown(path: Path) -> Document:
    """Read and parse a Markdown source file.

    A leading UTF-8 byte-order mark is dropped.

    Args:
        path: Path to the source file.

    Returns:
        The parsed document.
    """
    return parse_text(path.read_text(encoding="utf-8-sig"), path)
