"""Shared dataclasses used by the page generation pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path

    from lit_pages.errors import LitPagesError


@dc.dataclass(frozen=True, slots=True)
class RenderSection:
    """Structured data passed to the page template for one table row.

    Attributes
    ----------
    docs_html : str
        Rendered documentation HTML.
    code_html : str
        Highlighted code wrapped in the highlight block.
    index : int
        1-based position in the page, used for ``section-<index>`` anchors.
    """

    docs_html: str
    code_html: str
    index: int


@dc.dataclass(frozen=True, slots=True)
class PageModel:
    """Everything the page template needs to render one source file.

    Attributes
    ----------
    title : str
        Base name of the source file.
    sections : tuple[RenderSection, ...]
        Rendered sections in source order.
    sources : tuple[str, ...]
        Every source of the run, sorted; shared by all pages for navigation.
    stylesheet : str
        Highlighting CSS emitted by the Pygments style in use.
    """

    title: str
    sections: tuple[RenderSection, ...]
    sources: tuple[str, ...]
    stylesheet: str

    @property
    def multiple(self) -> bool:
        """Return ``True`` when the run covers more than one source."""
        return len(self.sources) > 1


@dc.dataclass(frozen=True, slots=True)
class FileResult:
    """Outcome of processing one source file."""

    source: str
    destination: Path | None = None
    error: LitPagesError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


__all__ = ["FileResult", "PageModel", "RenderSection"]
