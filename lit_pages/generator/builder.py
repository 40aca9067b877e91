"""Run the page pipeline for every source file concurrently.

:class:`DocumentationBuilder` prepares the output directory and the shared
stylesheet, then submits one :meth:`PageGenerator.generate` task per source to
a thread pool. Every task returns a :class:`FileResult`; a failing source is
recorded with its typed error while the other sources keep going. Results are
reported as sources finish; a source still running at the timeout is told to
stop through a shared event and never writes its page.

Example
-------
>>> from lit_pages.generator import build_documentation
>>> results = build_documentation(["src/main.go", "src/util.go"])  # doctest: +SKIP
>>> [result.ok for result in results]  # doctest: +SKIP
[True, True]
"""

from __future__ import annotations

import collections.abc as cabc
import concurrent.futures
import logging
import threading
import typing as typ
from pathlib import Path

from lit_pages._constants import DEFAULT_OUTPUT_DIR, STYLESHEET_NAME
from lit_pages.errors import (
    BuildTimeoutError,
    LitPagesError,
    RenderFailure,
    SourceIOError,
)
from lit_pages.generator.models import FileResult
from lit_pages.generator.page_generator import DEFAULT_TEMPLATES_DIR, PageGenerator
from lit_pages.generator.renderer import HtmlContentRenderer
from lit_pages.languages import default_registry

if typ.TYPE_CHECKING:
    from lit_pages.languages import LanguageRegistry

logger = logging.getLogger(__name__)


class DocumentationBuilder:
    """Generate one page per source, isolating failures per file."""

    def __init__(
        self,
        sources: cabc.Iterable[str],
        *,
        output_dir: Path | None = None,
        registry: LanguageRegistry | None = None,
        renderer: HtmlContentRenderer | None = None,
        templates_dir: Path | None = None,
        max_workers: int | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        sources : Iterable[str]
            Source paths to render; sorted for deterministic navigation.
        output_dir : Path, optional
            Flat directory receiving the pages and the stylesheet; defaults
            to ``docs``.
        registry : LanguageRegistry, optional
            Languages known to the run; defaults to the built-in set.
        renderer : HtmlContentRenderer, optional
            Shared markdown/code renderer; defaults to the default style.
        templates_dir : Path, optional
            Directory holding ``page.jinja`` and the stylesheet.
        max_workers : int, optional
            Thread pool size; ``None`` lets ``concurrent.futures`` decide.
        timeout : float, optional
            Seconds to wait for all sources; unfinished ones are reported as
            :class:`BuildTimeoutError`. ``None`` waits indefinitely.
        """
        self.sources = tuple(sorted(sources))
        self.output_dir = output_dir or Path(DEFAULT_OUTPUT_DIR)
        self.registry = registry or default_registry()
        self.renderer = renderer or HtmlContentRenderer()
        self.templates_dir = templates_dir
        self.max_workers = max_workers
        self.timeout = timeout

    def run(
        self, on_result: cabc.Callable[[FileResult], None] | None = None
    ) -> list[FileResult]:
        """Render every source and return one result per source.

        Parameters
        ----------
        on_result : Callable[[FileResult], None], optional
            Called with each result as soon as its source finishes, in
            completion order. Sources given up on at the timeout are reported
            after the wait ends.

        Returns
        -------
        list[FileResult]
            Results ordered like the sorted sources. Empty when there are no
            sources, in which case nothing is written.

        Raises
        ------
        SourceIOError
            If the output directory or stylesheet cannot be written; no
            source is processed in that case.
        """
        if not self.sources:
            return []

        self.prepare()
        generator = PageGenerator(
            self.registry,
            self.renderer,
            self.sources,
            self.output_dir,
            templates_dir=self.templates_dir,
        )
        cancelled = threading.Event()
        results: dict[str, FileResult] = {}
        executor = concurrent.futures.ThreadPoolExecutor(max_workers=self.max_workers)
        try:
            futures = {
                executor.submit(generator.generate, source, cancelled): source
                for source in self.sources
            }
            try:
                for future in concurrent.futures.as_completed(
                    futures, timeout=self.timeout
                ):
                    source = futures[future]
                    results[source] = self._report(
                        self._collect(source, future), on_result
                    )
            except TimeoutError:
                # Stalled tasks keep running but will not write their pages.
                cancelled.set()
                for future, source in futures.items():
                    if source in results:
                        continue
                    if future.done():
                        result = self._collect(source, future)
                    else:
                        future.cancel()
                        result = FileResult(
                            source, error=BuildTimeoutError(source, self.timeout or 0.0)
                        )
                    results[source] = self._report(result, on_result)
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        return [results[source] for source in self.sources]

    def prepare(self) -> Path:
        """Create the output directory and write the shared stylesheet."""
        stylesheet = self.output_dir / STYLESHEET_NAME
        templates_dir = self.templates_dir or DEFAULT_TEMPLATES_DIR
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            css = (templates_dir / STYLESHEET_NAME).read_text(encoding="utf-8")
            stylesheet.write_text(css, encoding="utf-8")
        except OSError as exc:
            raise SourceIOError(stylesheet, exc) from exc
        return stylesheet

    @staticmethod
    def _report(
        result: FileResult, on_result: cabc.Callable[[FileResult], None] | None
    ) -> FileResult:
        if result.error is not None:
            logger.error("lit-pages: %s failed: %s", result.source, result.error)
        if on_result is not None:
            on_result(result)
        return result

    @staticmethod
    def _collect(source: str, future: concurrent.futures.Future[Path]) -> FileResult:
        try:
            return FileResult(source, destination=future.result())
        except LitPagesError as exc:
            return FileResult(source, error=exc)
        except Exception as exc:  # noqa: BLE001 - isolate collaborator failures per file
            return FileResult(source, error=RenderFailure(source, exc))


def build_documentation(
    sources: cabc.Iterable[str], **options: typ.Any
) -> list[FileResult]:
    """Render ``sources`` with a :class:`DocumentationBuilder` and return results."""
    return DocumentationBuilder(sources, **options).run()


__all__ = ["DocumentationBuilder", "build_documentation"]
