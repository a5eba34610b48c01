"""Inline stylesheet for the generated pages.

Styles are described as a tree of rules. A child rule's selector is scoped
under its parent's, so ``Rule("body", children=(Rule("footer", ...),))``
renders as ``body footer { ... }``. ``render_css`` serializes the tree.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rule:
    """A CSS rule with nested child rules.

    Attributes:
        selector: Selector relative to the parent rule.
        declarations: (property, value) pairs in output order.
        children: Rules scoped under this one.
    """

    selector: str
    declarations: tuple[tuple[str, str], ...] = ()
    children: tuple[Rule, ...] = ()


def render_css(rule: Rule, parent: str = "") -> str:
    """Serialize a rule tree to CSS text.

    Parents are emitted before their children. Rules without declarations
    only contribute their selector to their children.

    Args:
        rule: Root of the tree.
        parent: Selector of the enclosing rule.

    Returns:
        CSS text, one rule block per line.
    """
    selector = f"{parent} {rule.selector}" if parent else rule.selector
    blocks: list[str] = []
    if rule.declarations:
        body = " ".join(f"{prop}: {value};" for prop, value in rule.declarations)
        blocks.append(f"{selector} {{ {body} }}\n")
    for child in rule.children:
        blocks.append(render_css(child, selector))
    return "".join(blocks)


def page_style() -> Rule:
    """Return the stylesheet embedded in every page."""
    return Rule(
        "body",
        children=(
            Rule(".header", (("margin-bottom", "2em"),)),
            Rule(
                "li.pages",
                (
                    ("list-style-type", "none"),
                    ("margin-top", "1em"),
                    ("font-size", "2em"),
                ),
                children=(Rule("p", (("margin", "0px"),)),),
            ),
            Rule(
                "footer",
                (
                    ("font-size", "1em"),
                    ("margin-top", "2em"),
                    ("position", "absolute"),
                    ("bottom", "0"),
                ),
            ),
        ),
    )
