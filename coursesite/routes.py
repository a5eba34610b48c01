"""Routes for the generated pages.

Each generated page is identified by a route. There are exactly two kinds:

- IndexRoute: the course front page, rendered from every article.
- ArticleRoute: one page per Markdown source file.

Consumers dispatch over both variants and raise TypeError for anything else.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .utils import replace_extension


@dataclass(frozen=True)
class IndexRoute:
    """The index page listing every article."""


@dataclass(frozen=True)
class ArticleRoute:
    """An article page generated from one Markdown source.

    Attributes:
        source_path: Path of the source file relative to the content directory.
    """

    source_path: str


Route = Union[IndexRoute, ArticleRoute]


def route_file(route: Route) -> str:
    """Return the output path of a route, relative to the output directory.

    Args:
        route: Route to resolve.

    Returns:
        "index.html" for the index, "article/<name>.html" for an article.

    Examples:
        >>> route_file(ArticleRoute("week-1.md"))
        'article/week-1.html'
    """
    if isinstance(route, IndexRoute):
        return "index.html"
    if isinstance(route, ArticleRoute):
        return f"article/{replace_extension(route.source_path, '.html')}"
    raise TypeError(f"Unknown route: {route!r}")


def route_url(route: Route) -> str:
    """Return the site-absolute URL of a route.

    A trailing index.html is dropped so the index links to "/".

    Args:
        route: Route to resolve.

    Returns:
        URL path beginning with a slash.
    """
    url = "/" + route_file(route)
    if url.endswith("/index.html"):
        url = url[: -len("index.html")]
    return url
