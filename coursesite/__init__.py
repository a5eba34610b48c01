"""Course website generator.

This package builds the static website of a single university course from
Markdown sources with YAML front-matter. Each source file becomes an article
page, and an index page lists every article in discovery order.

The main entry point is the CLI module, which provides commands for building
the site and for running a development server with live reload.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
