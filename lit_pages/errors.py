"""Exception types raised while turning source files into pages.

Every per-file failure derives from :class:`LitPagesError` and records the
offending source path so the orchestrator can report it at file granularity
without aborting sibling files.
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path


class LitPagesError(Exception):
    """Base class for failures tied to a single source file."""

    def __init__(self, source: Path | str, message: str) -> None:
        super().__init__(message)
        self.source = source


class ConfigurationError(LitPagesError):
    """Raised when a source cannot be processed with the current setup."""


class UnknownLanguageError(ConfigurationError):
    """Raised when no language is registered for a file extension."""

    def __init__(self, source: Path | str, extension: str) -> None:
        label = extension or "<none>"
        msg = f"{source}: no language registered for extension '{label}'"
        super().__init__(source, msg)
        self.extension = extension


class SourceIOError(LitPagesError):
    """Raised when a source cannot be read or its page cannot be written."""

    def __init__(self, source: Path | str, cause: OSError) -> None:
        reason = cause.strerror or str(cause)
        target = cause.filename or source
        super().__init__(source, f"{target}: {reason}")
        self.cause = cause


class RenderFailure(LitPagesError):
    """Raised when a collaborator fails to render part of a page."""

    def __init__(self, source: Path | str, cause: BaseException) -> None:
        super().__init__(source, f"{source}: rendering failed ({cause})")
        self.cause = cause


class BuildTimeoutError(LitPagesError):
    """Raised for sources still unfinished when the run's timeout expires."""

    def __init__(self, source: Path | str, timeout: float) -> None:
        super().__init__(source, f"{source}: not finished after {timeout:g}s")
        self.timeout = timeout


class BuildCancelledError(LitPagesError):
    """Raised inside a task whose run gave up on it before it finished."""

    def __init__(self, source: Path | str) -> None:
        super().__init__(source, f"{source}: cancelled before the page was written")


__all__ = [
    "BuildCancelledError",
    "BuildTimeoutError",
    "ConfigurationError",
    "LitPagesError",
    "RenderFailure",
    "SourceIOError",
    "UnknownLanguageError",
]
