"""Utilities for rendering markdown and syntax-highlighted code sections."""

from __future__ import annotations

import logging
import typing as typ
from html import escape

from markdown import Markdown
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from lit_pages._constants import DEFAULT_PYGMENTS_STYLE, HIGHLIGHT_END, HIGHLIGHT_START

if typ.TYPE_CHECKING:
    from pygments.lexer import Lexer

    from lit_pages.languages import LanguageDescriptor
    from lit_pages.splitter import Section

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = ["fenced_code", "codehilite", "tables", "sane_lists"]
FALLBACK_STYLE = "default"
FALLBACK_LEXER = "text"


class HtmlContentRenderer:
    """Render documentation markdown and highlighted code with one style.

    The renderer holds no per-call state: a fresh ``Markdown`` instance is
    built for every conversion, so one renderer can serve many threads.
    """

    def __init__(self, pygments_style: str = DEFAULT_PYGMENTS_STYLE) -> None:
        """Initialize a renderer, falling back to Pygments' default style.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Unknown
            names fall back to ``"default"``.
        """
        try:
            self._formatter = HtmlFormatter(style=pygments_style, nowrap=True)
        except ClassNotFound:
            logger.warning(
                "unknown pygments style %r, using %r", pygments_style, FALLBACK_STYLE
            )
            pygments_style = FALLBACK_STYLE
            self._formatter = HtmlFormatter(style=pygments_style, nowrap=True)
        self.pygments_style = pygments_style

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".highlight")

    def markdown(self, text: str) -> str:
        """Render documentation markdown into HTML.

        Whitespace-only text renders to an empty string. Errors raised by the
        markdown library propagate to the caller.
        """
        if not text.strip():
            return ""
        md = Markdown(
            extensions=MARKDOWN_EXTENSIONS,
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "highlight",
                    "pygments_style": self.pygments_style,
                }
            },
        )
        return md.convert(text)

    def code_block(self, code: str, language: str | None = None) -> str:
        """Render ``code`` into a highlight block.

        Parameters
        ----------
        code : str
            Source snippet to highlight.
        language : str, optional
            Pygments lexer name; the plain ``"text"`` lexer is used when not
            provided or when the lookup fails.

        Returns
        -------
        str
            Highlighted markup, or the escaped code when highlighting fails,
            wrapped in the highlight block either way.
        """
        try:
            body = highlight(code, self._lexer(language), self._formatter)
        except Exception:
            logger.warning(
                "highlighting failed for %s code", language or FALLBACK_LEXER, exc_info=True
            )
            body = escape(code)
        return f"{HIGHLIGHT_START}{body}{HIGHLIGHT_END}"

    def render_section(
        self,
        section: Section,
        language: LanguageDescriptor,
        *,
        source: str | None = None,
    ) -> Section:
        """Fill ``section.docs_html`` and ``section.code_html`` in place.

        The two conversions are independent: a markdown failure falls back to
        the escaped raw documentation and never prevents code highlighting.
        """
        section.code_html = self.code_block(section.raw_code, language.name)
        try:
            section.docs_html = self.markdown(section.raw_docs)
        except Exception:
            logger.warning(
                "markdown rendering failed in %s", source or language.name, exc_info=True
            )
            section.docs_html = f"<pre>{escape(section.raw_docs)}</pre>"
        return section

    @staticmethod
    def _lexer(language: str | None) -> Lexer:
        # Blank lines at either end of a section are part of its code.
        try:
            return get_lexer_by_name(language or FALLBACK_LEXER, stripnl=False)
        except ClassNotFound:
            return get_lexer_by_name(FALLBACK_LEXER, stripnl=False)


__all__ = ["HtmlContentRenderer"]
