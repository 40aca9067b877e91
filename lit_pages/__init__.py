"""Render annotated source files as side-by-side documentation pages.

Comments are rendered as Markdown, code is highlighted with Pygments, and each
source becomes one page in a flat output directory, linked to its siblings by
a "Jump To" menu when several sources are rendered together.

Exports
-------
- ``app``: Cyclopts application behind the ``lit-pages`` console script.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``build_documentation``: Library entry point returning per-file results.

Examples
--------
>>> from lit_pages import build_documentation
>>> results = build_documentation(["main.go"])  # doctest: +SKIP
>>> results[0].destination  # doctest: +SKIP
PosixPath('docs/main.html')
"""

from __future__ import annotations

from .cli import app, main
from .generator import build_documentation

__all__ = ["app", "build_documentation", "main"]
