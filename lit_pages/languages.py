r"""Language descriptors keyed by file extension.

A :class:`LanguageDescriptor` pairs the Pygments lexer name used to highlight
a language with its single-line comment prefix, and compiles the pattern that
recognises documentation lines. :class:`LanguageRegistry` maps extensions to
descriptors and is immutable once built; extra languages are layered on with
:meth:`LanguageRegistry.with_languages`, which returns a new registry.

Examples
--------
>>> from lit_pages.languages import default_registry
>>> registry = default_registry()
>>> go = registry.for_path("src/main.go")
>>> go.name, go.symbol
('go', '//')
>>> go.strip_comment("    // Title")
'Title'
>>> registry.lookup(".unknown") is None
True
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import os
import re
import types

from .errors import UnknownLanguageError


@dc.dataclass(frozen=True, slots=True)
class LanguageDescriptor:
    """Highlighting and comment metadata for a single-line-comment language.

    Attributes
    ----------
    name : str
        Pygments lexer alias used to highlight code sections.
    symbol : str
        Line-comment prefix, matched literally.
    comment_pattern : re.Pattern[str]
        Optional leading whitespace, the prefix, then at most one whitespace
        character, anchored at the start of the line.
    """

    name: str
    symbol: str
    comment_pattern: re.Pattern[str] = dc.field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.symbol:
            msg = f"Language '{self.name}' needs a non-empty comment symbol."
            raise ValueError(msg)
        pattern = re.compile(rf"^\s*{re.escape(self.symbol)}\s?")
        object.__setattr__(self, "comment_pattern", pattern)

    def is_comment(self, line: str) -> bool:
        """Return ``True`` when ``line`` is a documentation line."""
        return self.comment_pattern.match(line) is not None

    def strip_comment(self, line: str) -> str:
        """Remove the comment prefix and one optional following space."""
        return self.comment_pattern.sub("", line, count=1)


DEFAULT_LANGUAGES: dict[str, LanguageDescriptor] = {
    ".go": LanguageDescriptor("go", "//"),
    ".py": LanguageDescriptor("python", "#"),
    ".rb": LanguageDescriptor("ruby", "#"),
    ".sh": LanguageDescriptor("bash", "#"),
    ".bash": LanguageDescriptor("bash", "#"),
    ".pl": LanguageDescriptor("perl", "#"),
    ".r": LanguageDescriptor("r", "#"),
    ".coffee": LanguageDescriptor("coffeescript", "#"),
    ".ex": LanguageDescriptor("elixir", "#"),
    ".exs": LanguageDescriptor("elixir", "#"),
    ".yaml": LanguageDescriptor("yaml", "#"),
    ".yml": LanguageDescriptor("yaml", "#"),
    ".toml": LanguageDescriptor("toml", "#"),
    ".js": LanguageDescriptor("javascript", "//"),
    ".ts": LanguageDescriptor("typescript", "//"),
    ".rs": LanguageDescriptor("rust", "//"),
    ".c": LanguageDescriptor("c", "//"),
    ".h": LanguageDescriptor("c", "//"),
    ".cpp": LanguageDescriptor("cpp", "//"),
    ".java": LanguageDescriptor("java", "//"),
    ".kt": LanguageDescriptor("kotlin", "//"),
    ".scala": LanguageDescriptor("scala", "//"),
    ".swift": LanguageDescriptor("swift", "//"),
    ".lua": LanguageDescriptor("lua", "--"),
    ".hs": LanguageDescriptor("haskell", "--"),
    ".sql": LanguageDescriptor("sql", "--"),
    ".erl": LanguageDescriptor("erlang", "%"),
    ".tex": LanguageDescriptor("latex", "%"),
    ".clj": LanguageDescriptor("clojure", ";"),
    ".lisp": LanguageDescriptor("common-lisp", ";"),
    ".scm": LanguageDescriptor("scheme", ";"),
}


def _normalize_extension(extension: str) -> str:
    ext = extension.strip().lower()
    if ext and not ext.startswith("."):
        ext = f".{ext}"
    return ext


class LanguageRegistry:
    """Read-only mapping from file extension to :class:`LanguageDescriptor`."""

    def __init__(self, languages: cabc.Mapping[str, LanguageDescriptor]) -> None:
        normalized = {
            _normalize_extension(ext): language for ext, language in languages.items()
        }
        self._languages: cabc.Mapping[str, LanguageDescriptor] = (
            types.MappingProxyType(normalized)
        )

    def __contains__(self, extension: object) -> bool:
        if not isinstance(extension, str):
            return False
        return _normalize_extension(extension) in self._languages

    def __len__(self) -> int:
        return len(self._languages)

    @property
    def extensions(self) -> list[str]:
        """Return the registered extensions in sorted order."""
        return sorted(self._languages)

    def lookup(self, extension: str) -> LanguageDescriptor | None:
        """Return the descriptor for ``extension`` or ``None`` when unknown."""
        return self._languages.get(_normalize_extension(extension))

    def for_path(self, path: os.PathLike[str] | str) -> LanguageDescriptor:
        """Resolve the descriptor for a source path from its extension.

        Parameters
        ----------
        path : PathLike or str
            Source file path; only its final extension is consulted.

        Returns
        -------
        LanguageDescriptor
            The registered descriptor for the path's extension.

        Raises
        ------
        UnknownLanguageError
            If nothing is registered for the extension (including paths
            without one).
        """
        _root, extension = os.path.splitext(os.fspath(path))
        language = self.lookup(extension) if extension else None
        if language is None:
            raise UnknownLanguageError(path, extension)
        return language

    def with_languages(
        self, languages: cabc.Mapping[str, LanguageDescriptor]
    ) -> LanguageRegistry:
        """Return a new registry with ``languages`` added or overriding."""
        merged = dict(self._languages)
        merged.update(
            (_normalize_extension(ext), language) for ext, language in languages.items()
        )
        return LanguageRegistry(merged)


def default_registry() -> LanguageRegistry:
    """Build a registry of the built-in languages."""
    return LanguageRegistry(DEFAULT_LANGUAGES)


__all__ = [
    "DEFAULT_LANGUAGES",
    "LanguageDescriptor",
    "LanguageRegistry",
    "default_registry",
]
