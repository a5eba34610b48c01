import pytest

from coursesite.routes import ArticleRoute, IndexRoute, route_file, route_url


def test_index_route_file_and_url():
    assert route_file(IndexRoute()) == "index.html"
    assert route_url(IndexRoute()) == "/"


def test_article_route_replaces_extension():
    assert route_file(ArticleRoute("week-1.md")) == "article/week-1.html"
    assert route_file(ArticleRoute("final.project.md")) == "article/final.project.html"
    assert route_file(ArticleRoute("README")) == "article/README.html"
    assert route_url(ArticleRoute("week-1.md")) == "/article/week-1.html"


def test_routes_are_values():
    assert ArticleRoute("a.md") == ArticleRoute("a.md")
    assert IndexRoute() == IndexRoute()
    assert len({ArticleRoute("a.md"), ArticleRoute("a.md"), IndexRoute()}) == 2


def test_unknown_route_is_rejected():
    with pytest.raises(TypeError):
        route_file("index")
