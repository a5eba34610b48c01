"""Page rendering for coursesite.

This module uses Jinja2 to turn a route and its payload into a complete HTML
page. Every page shares the same head, heading and footer; the content between
them depends on the route:

- IndexRoute: an introduction followed by one entry per article.
- ArticleRoute: the authors, an optional GitHub link and the article body.

Key items:
- TemplateEngine: Holds the Jinja2 environment and renders pages.
- format_list: Join author names for display.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from .content import Document, render_markdown
from .metadata import get_meta
from .routes import ArticleRoute, IndexRoute, Route, route_url
from .styles import page_style, render_css

__all__ = ["TemplateEngine", "format_list"]

_TEMPLATES_DIR = Path(__file__).parent / "templates"

PAGE_TEMPLATE = "page.html.jinja"

COURSE_TITLE = "Multilingual Technologies and Language Diversity"

INTRODUCTION = (
    "A course taught in the Department of Computer Science, the Data Science "
    "Institute, and the Institute for Comparative Literature and Society, "
    "Columbia University, in Spring 2020 and 2021."
)

STYLESHEET_URL = "https://cdnjs.cloudflare.com/ajax/libs/tufte-css/1.7.2/tufte.min.css"

FOOTER_LINKS = {
    "author": "https://jonreeve.com/",
    "language": "https://www.python.org/",
    "generator": "https://mistune.lepture.com/",
    "repository": "https://github.com/JonathanReeve/course-multilingual-technologies/",
    "sponsor": "https://entrepreneurship.columbia.edu/collaboratory/",
}


def format_list(items: Iterable[str]) -> str:
    """Join items with a comma after trimming surrounding whitespace.

    Args:
        items: Strings to join, in display order.

    Returns:
        The joined text, or an empty string for no items.

    Examples:
        >>> format_list(["  Alice ", "Bob  "])
        'Alice, Bob'
    """
    return ", ".join(item.strip() for item in items)


class TemplateEngine:
    """Template rendering engine using Jinja2.

    Attributes:
        env: Jinja2 environment loading the bundled templates.
        css: Inline stylesheet text, rendered once per engine.
    """

    def __init__(self, templates_dir: Path | None = None):
        """Initialize the template engine.

        Args:
            templates_dir: Optional directory to load templates from instead
                of the bundled ones.
        """
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir or _TEMPLATES_DIR)),
            autoescape=select_autoescape(["html", "jinja"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.css = render_css(page_style())
        self._install_globals()

    def _install_globals(self) -> None:
        """Install the fixed page text and filters in the Jinja environment."""
        self.env.globals["stylesheet_url"] = STYLESHEET_URL
        self.env.globals["links"] = FOOTER_LINKS
        self.env.globals["css"] = Markup(self.css)
        self.env.filters["format_list"] = format_list

    def render_page(self, route: Route, payload: Any) -> str:
        """Render the HTML page of a route.

        Args:
            route: Route being rendered.
            payload: The article's Document for an ArticleRoute, or the ordered
                (ArticleRoute, Document) pairs for the IndexRoute.

        Returns:
            Rendered HTML document.

        Raises:
            MetadataError: If a document's front-matter is missing or invalid.
        """
        if isinstance(route, IndexRoute):
            context = self._index_context(payload)
        elif isinstance(route, ArticleRoute):
            context = self._article_context(payload)
        else:
            raise TypeError(f"Unknown route: {route!r}")
        template = self.env.get_template(PAGE_TEMPLATE)
        return template.render(**context)

    def _index_context(
        self, articles: Sequence[tuple[ArticleRoute, Document]]
    ) -> dict[str, Any]:
        entries = []
        for route, document in articles:
            meta = get_meta(document)
            description_html = None
            if meta.description is not None:
                description_html = Markup(render_markdown(meta.description))
            entries.append(
                {
                    "url": route_url(route),
                    "meta": meta,
                    "description_html": description_html,
                }
            )
        return {
            "kind": "index",
            "title": COURSE_TITLE,
            "introduction": INTRODUCTION,
            "entries": entries,
        }

    def _article_context(self, document: Document) -> dict[str, Any]:
        meta = get_meta(document)
        return {
            "kind": "article",
            "title": meta.title,
            "meta": meta,
            "document_html": Markup(document.html),
        }
