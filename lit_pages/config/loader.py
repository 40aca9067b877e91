"""Load lit-pages configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from lit_pages._constants import DEFAULT_OUTPUT_DIR, DEFAULT_PYGMENTS_STYLE
from lit_pages.languages import LanguageDescriptor

from .models import ConfigError, LitPagesConfig


def load_config(path: Path, *, required: bool = True) -> LitPagesConfig:
    """Load the YAML configuration describing run defaults and languages.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``lit-pages.yaml``).
    required : bool, optional
        When ``False``, a missing file yields the default configuration
        instead of an error.

    Returns
    -------
    LitPagesConfig
        Parsed configuration with defaults applied.

    Raises
    ------
    FileNotFoundError
        If ``required`` is true and the file does not exist.
    ConfigError
        If the YAML is not a mapping or contains invalid values.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_config(Path("lit-pages.yaml"), required=False)
    >>> config.pygments_style
    'friendly'
    """
    if not path.exists():
        if required:
            msg = f"Configuration file '{path}' not found."
            raise FileNotFoundError(msg)
        return LitPagesConfig()

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise ConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults") or {}
    if not isinstance(defaults, dict):
        msg = "'defaults' must be a mapping."
        raise ConfigError(msg)

    return LitPagesConfig(
        output_dir=Path(defaults.get("output_dir", DEFAULT_OUTPUT_DIR)),
        pygments_style=str(defaults.get("pygments_style", DEFAULT_PYGMENTS_STYLE)),
        workers=_positive_number(defaults.get("workers"), "workers", int),
        timeout=_positive_number(defaults.get("timeout"), "timeout", float),
        languages=_build_languages(raw.get("languages") or {}),
    )


def _build_languages(payload: object) -> dict[str, LanguageDescriptor]:
    """Build descriptors from ``{extension: {name, symbol}}`` entries."""
    if not isinstance(payload, dict):
        msg = "'languages' must map extensions to language entries."
        raise ConfigError(msg)
    languages: dict[str, LanguageDescriptor] = {}
    for extension, entry in payload.items():
        match entry:
            case {"name": str(name), "symbol": str(symbol)} if name and symbol:
                languages[str(extension)] = LanguageDescriptor(name, symbol)
            case _:
                msg = (
                    f"Language '{extension}' needs non-empty 'name' and 'symbol' "
                    "strings."
                )
                raise ConfigError(msg)
    return languages


_N = typ.TypeVar("_N", int, float)


def _positive_number(value: object, key: str, kind: type[_N]) -> _N | None:
    """Return ``value`` coerced to ``kind`` or ``None`` when unset."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int | float):
        msg = f"'{key}' must be a number, got {value!r}."
        raise ConfigError(msg)
    number = kind(value)
    if number <= 0:
        msg = f"'{key}' must be positive, got {value!r}."
        raise ConfigError(msg)
    return number
