from pathlib import Path

import pytest

from coursesite.content import parse_text
from coursesite.metadata import MetadataError
from coursesite.routes import ArticleRoute, IndexRoute
from coursesite.templates import (
    COURSE_TITLE,
    FOOTER_LINKS,
    STYLESHEET_URL,
    TemplateEngine,
    format_list,
)


def doc(text: str, name: str = "doc.md"):
    return parse_text(text, Path("content") / name)


def test_format_list():
    assert format_list(["  Alice ", "Bob  "]) == "Alice, Bob"
    assert format_list([]) == ""
    assert format_list(["Ann", "Ann"]) == "Ann, Ann"
    assert format_list(("Zed", "Amy")) == "Zed, Amy"


def test_shared_head_and_footer():
    engine = TemplateEngine()
    html = engine.render_page(ArticleRoute("a.md"), doc("---\ntitle: Alpha\n---\nBody"))
    assert html.startswith("<!DOCTYPE html>")
    assert '<html lang="en">' in html
    assert (
        '<meta http-equiv="Content-Type" content="text/html; charset=utf-8">' in html
    )
    assert "<title>Alpha</title>" in html
    assert "<h1>Alpha</h1>" in html
    assert f'<link rel="stylesheet" href="{STYLESHEET_URL}">' in html
    assert '<style type="text/css">' in html
    assert "body li.pages p { margin: 0px; }" in html
    assert engine.css in html
    for url in FOOTER_LINKS.values():
        assert f'<a href="{url}">' in html
    assert "Collaboratory at Columbia" in html


def test_article_page():
    engine = TemplateEngine()
    document = doc(
        "---\ntitle: Alpha\nauthors: [' Ann ', 'Bo ']\n"
        "github: https://github.com/example/alpha\n---\n\n## Method\n\nText.\n"
    )
    html = engine.render_page(ArticleRoute("a.md"), document)
    assert "<article>" in html
    assert "<h3>Ann, Bo</h3>" in html
    assert (
        '<a href="https://github.com/example/alpha">Project code repository, on GitHub</a>'
        in html
    )
    assert '<h2 id="method">Method</h2>' in html
    assert html.index("<h3>") < html.index("GitHub</a>") < html.index('id="method"')


def test_article_without_github_has_no_link():
    engine = TemplateEngine()
    html = engine.render_page(ArticleRoute("a.md"), doc("---\ntitle: Alpha\n---\nBody"))
    assert "Project code repository" not in html
    assert "<h3></h3>" in html
    article = html[html.index("<article>") : html.index("</article>")]
    assert "<a " not in article


def test_index_entries_follow_given_order():
    engine = TemplateEngine()
    pairs = [
        (ArticleRoute("b.md"), doc("---\ntitle: Bravo\n---\n", "b.md")),
        (ArticleRoute("a.md"), doc("---\ntitle: Alpha\n---\n", "a.md")),
    ]
    html = engine.render_page(IndexRoute(), pairs)
    assert f"<title>{COURSE_TITLE}</title>" in html
    assert f"<h1>{COURSE_TITLE}</h1>" in html
    assert "A course taught in the Department of Computer Science" in html
    assert html.index(">Bravo</a>") < html.index(">Alpha</a>")
    assert '<a href="/article/b.html">Bravo</a>' in html
    assert html.count('<li class="pages">') == 2


def test_index_entry_layout():
    engine = TemplateEngine()
    document = doc(
        "---\ntitle: Alpha\ndate: 2021-01-01\nauthors: [Ann, Bo]\n"
        "description: Intro text\n---\nBody\n"
    )
    html = engine.render_page(IndexRoute(), [(ArticleRoute("a.md"), document)])
    assert "<p><strong>2021-01-01</strong>Ann, Bo</p>" in html
    assert "<p>Intro text</p>" in html
    assert html.index("Ann, Bo</p>") < html.index("<p>Intro text</p>")


def test_index_entry_without_optional_fields():
    engine = TemplateEngine()
    html = engine.render_page(
        IndexRoute(), [(ArticleRoute("a.md"), doc("---\ntitle: Alpha\n---\n"))]
    )
    assert "<p><strong></strong></p>" in html
    entry = html[html.index('<li class="pages">') : html.index("</li>")]
    assert entry.count("<p>") == 1


def test_description_markdown_is_rendered():
    engine = TemplateEngine()
    document = doc("---\ntitle: Alpha\ndescription: Uses *spaCy* and [NLTK](https://nltk.org)\n---\n")
    html = engine.render_page(IndexRoute(), [(ArticleRoute("a.md"), document)])
    assert "<em>spaCy</em>" in html
    assert '<a href="https://nltk.org">NLTK</a>' in html


def test_metadata_text_is_escaped():
    engine = TemplateEngine()
    html = engine.render_page(
        ArticleRoute("a.md"), doc("---\ntitle: Tom & Jerry <3\nauthors: [A<b>]\n---\n")
    )
    assert "<title>Tom &amp; Jerry &lt;3</title>" in html
    assert "<h3>A&lt;b&gt;</h3>" in html


def test_missing_metadata_raises():
    engine = TemplateEngine()
    with pytest.raises(MetadataError):
        engine.render_page(ArticleRoute("a.md"), doc("No metadata"))
    with pytest.raises(MetadataError):
        engine.render_page(IndexRoute(), [(ArticleRoute("a.md"), doc("No metadata"))])


def test_unknown_route_raises():
    with pytest.raises(TypeError):
        TemplateEngine().render_page(object(), None)
