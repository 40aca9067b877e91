"""Cyclopts CLI entrypoint for rendering literate-programming pages.

The ``lit-pages`` console script defined here takes a list of annotated
source files and renders one side-by-side documentation page per file, plus a
shared stylesheet, into a flat output directory. Typical usage is
``lit-pages src/*.go``; options may also be supplied through ``LIT_PAGES_*``
environment variables or the optional ``lit-pages.yaml`` file.

Examples
--------
Render two sources into the default ``docs`` directory:

>>> from lit_pages.cli import main
>>> main(["main.go", "util.go"])  # doctest: +SKIP

Render into a custom directory with a different highlighting style:

>>> from lit_pages.cli import app
>>> app(["main.go", "--output-dir", "site", "--pygments-style", "monokai"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG_FILE
from .config import load_config
from .errors import LitPagesError
from .generator import DocumentationBuilder, FileResult, HtmlContentRenderer

app = App(
    name="lit-pages",
    help="Render annotated source files as side-by-side documentation pages.",
    config=cyclopts.config.Env("LIT_PAGES_", command=False),  # type: ignore[unknown-argument]
)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _print_written(result: FileResult) -> None:
    if result.destination is not None:
        print(f"wrote {_format_path(result.destination)}", flush=True)


@app.default
def generate(
    *sources: str,
    output_dir: typ.Annotated[
        Path | None, Parameter(help="Directory receiving the generated pages")
    ] = None,
    config: typ.Annotated[
        Path | None,
        Parameter(help=f"Path to the YAML config (default: {DEFAULT_CONFIG_FILE})"),
    ] = None,
    pygments_style: typ.Annotated[
        str | None, Parameter(help="Pygments style used for code blocks")
    ] = None,
    workers: typ.Annotated[
        int | None, Parameter(help="Number of files rendered in parallel")
    ] = None,
    timeout: typ.Annotated[
        float | None, Parameter(help="Seconds to wait for all files to finish")
    ] = None,
    verbose: typ.Annotated[
        bool, Parameter(help="Log each page as soon as it is written")
    ] = False,
) -> None:
    """Render one documentation page per source file.

    Parameters
    ----------
    *sources : str
        Annotated source files. With none, the command exits without writing
        anything.
    output_dir : Path or None, optional
        Override the configured output directory (``docs`` by default).
    config : Path or None, optional
        YAML configuration file. When omitted, ``lit-pages.yaml`` is read if
        it exists.
    pygments_style : str or None, optional
        Override the configured Pygments style.
    workers : int or None, optional
        Override the configured thread pool size.
    timeout : float or None, optional
        Override the configured run timeout.
    verbose : bool, optional
        Enable ``INFO`` logging for per-file progress.

    Returns
    -------
    None
        Prints ``wrote <path>`` as each page is written; failures are logged
        per source and summarised on stderr.

    Raises
    ------
    SystemExit
        With status ``1`` when at least one source failed.
    """
    if not sources:
        return

    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if config is None:
        settings = load_config(Path(DEFAULT_CONFIG_FILE), required=False)
    else:
        settings = load_config(config)

    builder = DocumentationBuilder(
        sources,
        output_dir=output_dir or settings.output_dir,
        registry=settings.build_registry(),
        renderer=HtmlContentRenderer(pygments_style or settings.pygments_style),
        max_workers=workers or settings.workers,
        timeout=timeout if timeout is not None else settings.timeout,
    )
    try:
        results = builder.run(on_result=_print_written)
    except LitPagesError as exc:
        print(f"failed: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    failed = sum(1 for result in results if not result.ok)
    if failed:
        print(f"{failed} of {len(results)} sources failed", file=sys.stderr)
        raise SystemExit(1)


def main(tokens: list[str] | None = None) -> None:
    """Invoke the Cyclopts application that powers the `lit-pages` command.

    Parameters
    ----------
    tokens : list[str] or None, optional
        Command-line arguments; ``None`` reads ``sys.argv``.

    Returns
    -------
    None
        This function executes for its side effects of parsing CLI arguments
        and rendering the requested pages.

    Examples
    --------
    >>> main(["main.go"])  # doctest: +SKIP
    """
    app(tokens)


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
