from __future__ import annotations

"""Error taxonomy shared by the include expander and the data inliner.

Every hard failure derives from `PreprocessError`, so callers (and the CLI)
can abort on a single exception type. Soft conditions are never raised;
they are reported through a diagnostics sink instead.
"""


class PreprocessError(Exception):
    """Base class for every hard preprocessing failure."""


class ParseError(PreprocessError):
    """The document cannot be parsed (Vega-Lite view specification)."""


class ReadError(PreprocessError):
    """A referenced resource could not be read."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class CycleError(PreprocessError):
    """A reference is already on the active inclusion path."""

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path


class DuplicateIncludeError(PreprocessError):
    """An '!include_once' reference was already included in this expansion."""

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path
