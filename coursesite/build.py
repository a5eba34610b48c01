"""Site building functionality for coursesite.

This module contains the core logic for building the course website from its
content directory. It discovers Markdown sources, renders one page per source
plus the index, copies static files, and writes everything to the output
directory.

Pages are rendered in memory first. Nothing is written until every page has
rendered, so invalid metadata in any source leaves the output untouched.

Key functions:
- build_site: Main function to build the entire site.
- load_config: Loads site configuration from coursesite.yaml.
- discover_sources: Lists the Markdown sources in discovery order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .content import Document, parse_markdown
from .metadata import MetadataError
from .routes import ArticleRoute, IndexRoute, Route, route_file
from .templates import TemplateEngine
from .utils import copy_if_changed, write_if_changed

CONFIG_FILE = "coursesite.yaml"

MARKDOWN_GLOB = "*.md"
STATIC_GLOB = "static/**/*"

DEFAULT_CONFIG = {
    "content_dir": "content",
    "output_dir": "dest",
    "port": 4000,
}


class BuildError(Exception):
    """Error during site build with file context.

    Attributes:
        source_path: Path to the source file that caused the error.
        message: Human-readable error message.
        original_error: The original exception that was caught.
    """

    def __init__(
        self,
        source_path: Path,
        message: str,
        original_error: Exception | None = None,
    ):
        self.source_path = source_path
        self.message = message
        self.original_error = original_error
        super().__init__(f"{source_path}: {message}")


@dataclass
class BuildResult:
    """Result of a site build operation.

    Attributes:
        pages: Article routes and their documents, in discovery order.
        output_dir: Directory where the site was built.
        written: Output files whose content changed during this build.
    """

    pages: list[tuple[ArticleRoute, Document]]
    output_dir: Path
    written: list[Path] = field(default_factory=list)


def load_config(project_root: Path) -> dict[str, Any]:
    """Load site configuration from coursesite.yaml.

    Args:
        project_root: Root directory of the project.

    Returns:
        Dictionary containing configuration values, with defaults applied.

    Raises:
        BuildError: If coursesite.yaml is not valid YAML.
    """
    config_path = project_root / CONFIG_FILE
    config = DEFAULT_CONFIG.copy()
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            try:
                loaded = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise BuildError(config_path, f"Invalid configuration: {exc}", exc) from exc
            if isinstance(loaded, dict):
                config.update(loaded)
    return config


def discover_sources(content_dir: Path) -> list[str]:
    """List the Markdown sources at the top of the content directory.

    Args:
        content_dir: Directory holding the sources.

    Returns:
        Source paths relative to content_dir, sorted by name.
    """
    return sorted(
        path.relative_to(content_dir).as_posix()
        for path in content_dir.glob(MARKDOWN_GLOB)
        if path.is_file()
    )


def build_site(
    project_root: Path,
    output_dir_override: Path | None = None,
    engine: TemplateEngine | None = None,
) -> BuildResult:
    """Build the entire static site.

    Args:
        project_root: Root directory of the project.
        output_dir_override: Optional path to write the build output instead of
            the configured output_dir.
        engine: Optional template engine to render pages with.

    Returns:
        BuildResult containing the articles, output directory and written files.

    Raises:
        BuildError: If a source has missing or invalid metadata, or the
            configuration is not valid YAML.
        FileNotFoundError: If the content directory does not exist.
    """
    config = load_config(project_root)
    content_dir = project_root / config.get("content_dir", "content")
    output_dir = output_dir_override or (project_root / config.get("output_dir", "dest"))
    if not content_dir.is_dir():
        raise FileNotFoundError(f"Expected content directory at {content_dir}")

    engine = engine or TemplateEngine()
    rendered: list[tuple[Route, str]] = []
    articles: list[tuple[ArticleRoute, Document]] = []
    for source in discover_sources(content_dir):
        route = ArticleRoute(source)
        document = parse_markdown(content_dir / source)
        rendered.append((route, _render(engine, route, document, document.path)))
        articles.append((route, document))
    # Every article's metadata was validated above
    rendered.append((IndexRoute(), engine.render_page(IndexRoute(), articles)))

    written = _copy_static_files(content_dir, output_dir)
    for route, html in rendered:
        target = output_dir / route_file(route)
        if write_if_changed(target, html):
            written.append(target)
    return BuildResult(pages=articles, output_dir=output_dir, written=written)


def _render(engine: TemplateEngine, route: Route, payload: Any, source_path: Path) -> str:
    """Render one route, reporting metadata errors against source_path.

    Args:
        engine: Template engine to render with.
        route: Route being rendered.
        payload: Payload of the route.
        source_path: Source reported in a BuildError.

    Returns:
        Rendered HTML.
    """
    try:
        return engine.render_page(route, payload)
    except MetadataError as exc:
        raise BuildError(source_path, str(exc), exc) from exc


def _copy_static_files(content_dir: Path, output_dir: Path) -> list[Path]:
    """Copy static files verbatim to their mirrored path in output_dir.

    Args:
        content_dir: Directory holding the static/ folder.
        output_dir: Destination root.

    Returns:
        Destination paths that were copied.
    """
    copied: list[Path] = []
    for src in sorted(content_dir.glob(STATIC_GLOB)):
        if src.is_dir():
            continue
        dest = output_dir / src.relative_to(content_dir)
        if copy_if_changed(src, dest):
            copied.append(dest)
    return copied
