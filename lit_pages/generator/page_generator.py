"""Per-file page generation.

This module turns one annotated source file into one HTML page: it reads the
file, splits it into sections with :func:`~lit_pages.splitter.split_sections`,
renders each section through :class:`HtmlContentRenderer`, and feeds the
resulting :class:`~lit_pages.generator.models.PageModel` to the Jinja page
template. A single :class:`PageGenerator` is shared by every worker of a run;
it only holds read-only state (registry, renderer, compiled template, sorted
source list).

Example
-------
>>> from pathlib import Path
>>> from lit_pages.generator import HtmlContentRenderer, PageGenerator
>>> from lit_pages.languages import default_registry
>>> generator = PageGenerator(
...     default_registry(), HtmlContentRenderer(), ["main.go"], Path("docs")
... )  # doctest: +SKIP
>>> generator.generate("main.go")  # doctest: +SKIP
PosixPath('docs/main.html')
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import os
import threading
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from lit_pages._constants import PAGE_TEMPLATE, STYLESHEET_NAME
from lit_pages.errors import BuildCancelledError, SourceIOError
from lit_pages.generator.models import PageModel, RenderSection
from lit_pages.splitter import decode_source, split_sections

if typ.TYPE_CHECKING:
    from lit_pages.generator.renderer import HtmlContentRenderer
    from lit_pages.languages import LanguageRegistry
    from lit_pages.splitter import Section

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


def destination(source: os.PathLike[str] | str, output_dir: Path) -> Path:
    """Return the output page for ``source``: ``<output_dir>/<stem>.html``.

    Input directories are flattened, so ``src/foo.go`` and ``foo.go`` map to
    the same page.
    """
    return output_dir / f"{Path(source).stem}.html"


def _check_cancelled(source: str, cancelled: threading.Event | None) -> None:
    if cancelled is not None and cancelled.is_set():
        raise BuildCancelledError(source)


class PageGenerator:
    """Render annotated source files into literate-programming pages."""

    def __init__(
        self,
        registry: LanguageRegistry,
        renderer: HtmlContentRenderer,
        sources: cabc.Iterable[str],
        output_dir: Path,
        *,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the generator with its collaborators and template.

        Parameters
        ----------
        registry : LanguageRegistry
            Languages used to split sources and pick lexers.
        renderer : HtmlContentRenderer
            Markdown and code renderer shared by every page.
        sources : Iterable[str]
            Every source of the run; sorted and frozen for navigation.
        output_dir : Path
            Directory receiving the pages.
        templates_dir : Path, optional
            Directory containing ``page.jinja``; defaults to the package
            templates.
        """
        self.registry = registry
        self.renderer = renderer
        self.sources = tuple(sorted(sources))
        self.output_dir = output_dir
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["destination"] = self._destination_name
        self.env.filters["basename"] = os.path.basename
        self.template = self.env.get_template(PAGE_TEMPLATE)

    def generate(self, source: str, cancelled: threading.Event | None = None) -> Path:
        """Run the full pipeline for ``source`` and return the written page.

        Parameters
        ----------
        source : str
            Path of the annotated source file.
        cancelled : threading.Event, optional
            Set by the caller once it no longer wants the page. It is checked
            between stages and right before writing, so a cancelled source
            never reaches the output directory.

        Raises
        ------
        UnknownLanguageError
            If the source extension has no registered language.
        SourceIOError
            If the source cannot be read or the page cannot be written.
        BuildCancelledError
            If ``cancelled`` is set before the page is written.
        """
        language = self.registry.for_path(source)
        try:
            content = Path(source).read_bytes()
        except OSError as exc:
            raise SourceIOError(source, exc) from exc

        sections = split_sections(decode_source(content), language)
        for section in sections:
            _check_cancelled(source, cancelled)
            self.renderer.render_section(section, language, source=source)

        html = self.render(self.build_page(source, sections))
        dest = destination(source, self.output_dir)
        _check_cancelled(source, cancelled)
        try:
            dest.write_text(html, encoding="utf-8")
        except OSError as exc:
            raise SourceIOError(source, exc) from exc
        logger.info("lit-pages: %s -> %s", source, dest)
        return dest

    def build_page(self, source: str, sections: cabc.Sequence[Section]) -> PageModel:
        """Project rendered sections into the template model for ``source``."""
        return PageModel(
            title=os.path.basename(source),
            sections=tuple(
                RenderSection(section.docs_html, section.code_html, index)
                for index, section in enumerate(sections, start=1)
            ),
            sources=self.sources,
            stylesheet=self.renderer.stylesheet,
        )

    def render(self, page: PageModel) -> str:
        """Render ``page`` through the page template."""
        return self.template.render(
            title=page.title,
            stylesheet=page.stylesheet,
            stylesheet_href=STYLESHEET_NAME,
            multiple=page.multiple,
            sources=page.sources,
            sections=page.sections,
        )

    def _destination_name(self, source: str) -> str:
        return destination(source, self.output_dir).name


__all__ = ["DEFAULT_TEMPLATES_DIR", "PageGenerator", "destination"]
