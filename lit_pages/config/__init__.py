"""Load and validate lit-pages configuration YAML.

The configuration file is optional. It sets run defaults (output directory,
Pygments style, worker count, timeout) and registers extra single-line-comment
languages on top of the built-in set. The primary entry point is
:func:`load_config`, which returns a :class:`LitPagesConfig`.

Examples
--------
>>> from pathlib import Path
>>> from lit_pages.config import load_config
>>> config = load_config(Path("lit-pages.yaml"), required=False)  # doctest: +SKIP
>>> config.build_registry().lookup(".zig")  # doctest: +SKIP
LanguageDescriptor(name='zig', symbol='//')
"""

from .loader import load_config
from .models import ConfigError, LitPagesConfig

__all__ = ["ConfigError", "LitPagesConfig", "load_config"]
