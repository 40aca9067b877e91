"""Typed dataclasses describing lit-pages configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from lit_pages._constants import DEFAULT_OUTPUT_DIR, DEFAULT_PYGMENTS_STYLE
from lit_pages.languages import LanguageDescriptor, LanguageRegistry, default_registry


class ConfigError(ValueError):
    """Raised when the configuration file is invalid or incomplete."""


@dc.dataclass(slots=True)
class LitPagesConfig:
    """Run-wide defaults and extra language registrations.

    Attributes
    ----------
    output_dir : Path
        Flat directory receiving pages and the stylesheet.
    pygments_style : str
        Pygments style name used for code highlighting.
    workers : int or None
        Thread pool size; ``None`` lets ``concurrent.futures`` decide.
    timeout : float or None
        Seconds to wait for a run before reporting unfinished sources.
    languages : dict[str, LanguageDescriptor]
        Extensions added to, or overriding, the built-in languages.
    """

    output_dir: Path = dc.field(default_factory=lambda: Path(DEFAULT_OUTPUT_DIR))
    pygments_style: str = DEFAULT_PYGMENTS_STYLE
    workers: int | None = None
    timeout: float | None = None
    languages: dict[str, LanguageDescriptor] = dc.field(default_factory=dict)

    def build_registry(self) -> LanguageRegistry:
        """Return the built-in registry extended with configured languages."""
        return default_registry().with_languages(self.languages)
