from __future__ import annotations

"""
PlantUML include expansion.

`PlantUmlIncludeExpander.expand` strips comments, tokenizes every line and
replaces each include directive with the (recursively expanded) referenced
content:

    directive → resolve (library skip / cycle check / read) →
    include_once guard → block extraction → push, recurse, pop

Traversal state (`IncludeState`) is created per top-level call and threaded
through the recursion explicitly, so concurrent expansions never share it.
"""

import logging
from typing import Optional

from krokiprep.core.errors import CycleError, DuplicateIncludeError, ReadError
from krokiprep.core.interfaces.content import ContentSourceProtocol
from krokiprep.core.interfaces.diagnostics import DiagnosticsSinkProtocol
from krokiprep.core.models import (
    DiagnosticEvent,
    Directive,
    IncludeKind,
    IncludeState,
    ReferenceKind,
    ResolutionResult,
)
from krokiprep.diagnostics import LIBRARY_REFERENCE, REMOTE_READ_FAILED, LoggingDiagnosticsSink
from krokiprep.io.content_sources import LocalFileContentSource
from krokiprep.logging.helpers import get_logger
from krokiprep.parsing.comments import strip_comments
from krokiprep.parsing.directives import DirectiveTokenizer
from krokiprep.processing import blocks
from krokiprep.utils.paths import classify_reference, join_reference, parent_dir

_ERR_PREFIX = 'Preprocessing of PlantUML include failed'


class IncludeResolver:
    """Turn a raw reference into text, a skip decision or a hard error."""

    def __init__(
        self,
        source: ContentSourceProtocol,
        *,
        diagnostics: DiagnosticsSinkProtocol,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._source = source
        self._diag = diagnostics
        self._log = logger or get_logger('includes')

    def _skip(self, url: str, code: str, message: str, **ctx) -> ResolutionResult:
        self._diag.emit(DiagnosticEvent(code=code, message=message, reference=url, context=ctx))
        return ResolutionResult(skip=True, text='', resolved_path=url)

    @staticmethod
    def _check_cycle(path: str, state: IncludeState) -> None:
        if path in state.stack:
            raise CycleError(
                f"{_ERR_PREFIX}, because recursive reading already included referenced file '{path}'",
                path=path,
            )

    def resolve(self, url: str, base_dir: str, state: IncludeState) -> ResolutionResult:
        kind = classify_reference(url)
        if kind is ReferenceKind.LIBRARY:
            return self._skip(
                url,
                LIBRARY_REFERENCE,
                f"Skipping preprocessing of PlantUML standard library include file '{url}'",
            )

        self._check_cycle(url, state)

        if kind is ReferenceKind.REMOTE:
            try:
                text = self._source.read(url)
            except ReadError as exc:
                return self._skip(
                    url,
                    REMOTE_READ_FAILED,
                    f"Skipping preprocessing of PlantUML include, because reading the referenced "
                    f"remote file '{url}' caused an error:\n{exc}",
                    error=str(exc),
                )
            return ResolutionResult(skip=False, text=text, resolved_path=url)

        path = join_reference(base_dir, url)
        if not self._source.exists(path):
            path = url
        self._check_cycle(path, state)
        try:
            text = self._source.read(path)
        except ReadError as exc:
            raise ReadError(
                f"{_ERR_PREFIX}, because reading the referenced local file '{path}' caused an error:\n{exc}",
                path=path,
            ) from exc
        self._log.debug('resolved %s → %s', url, path)
        return ResolutionResult(skip=False, text=text, resolved_path=path)


class PlantUmlIncludeExpander:
    def __init__(
        self,
        source: Optional[ContentSourceProtocol] = None,
        *,
        diagnostics: Optional[DiagnosticsSinkProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._log = logger or get_logger('includes')
        self._resolver = IncludeResolver(
            source or LocalFileContentSource(),
            diagnostics=diagnostics or LoggingDiagnosticsSink(),
            logger=self._log,
        )

    def run(self, text: str, *, base_dir: str = '.') -> str:
        """Expand *text* with a fresh IncludeState."""
        return self.expand(text, base_dir, IncludeState())

    def expand(self, text: str, base_dir: str, state: IncludeState) -> str:
        lines = strip_comments(text).split('\n')
        return '\n'.join(self._expand_line(line, base_dir, state) for line in lines)

    def _expand_line(self, line: str, base_dir: str, state: IncludeState) -> str:
        body, eol = (line[:-1], '\r') if line.endswith('\r') else (line, '')
        directive = DirectiveTokenizer.parse_line(body)
        if directive is None:
            return line
        result = self._resolver.resolve(directive.path, base_dir, state)
        if result.skip:
            return line
        return self._include(directive, result, state) + eol

    def _include(self, directive: Directive, result: ResolutionResult, state: IncludeState) -> str:
        if directive.kind is IncludeKind.INCLUDE_ONCE:
            self._check_once(result.resolved_path, state)
        text = blocks.extract(result.text, directive.kind, directive.sub_selector)
        state.stack.append(result.resolved_path)
        try:
            return self.expand(text, parent_dir(result.resolved_path), state)
        finally:
            state.stack.pop()

    @staticmethod
    def _check_once(path: str, state: IncludeState) -> None:
        if path in state.once:
            raise DuplicateIncludeError(
                f"{_ERR_PREFIX}, because including multiple times referenced file '{path}' "
                "with '!include_once' guard",
                path=path,
            )
        state.once.add(path)


def expand_includes(
    text: str,
    source: Optional[ContentSourceProtocol] = None,
    *,
    base_dir: str = '.',
    diagnostics: Optional[DiagnosticsSinkProtocol] = None,
) -> str:
    """Resolve every PlantUML include directive in *text*.

    Args:
        text: Diagram source.
        source: Content source used for reads; local filesystem by default.
        base_dir: Directory that relative references in *text* resolve against.
        diagnostics: Sink for soft skips; warnings are logged by default.

    Returns:
        The expanded diagram source.

    Raises:
        CycleError: A reference is already being expanded.
        DuplicateIncludeError: An '!include_once' file is included twice.
        ReadError: A local reference cannot be read.
    """
    return PlantUmlIncludeExpander(source, diagnostics=diagnostics).run(text, base_dir=base_dir)
