from __future__ import annotations

"""Diagnostic sinks for soft preprocessing conditions.

Soft conditions (library references, unreachable remote files) never abort
a run. They are reported as `DiagnosticEvent` values to a sink:

  * `LoggingDiagnosticsSink` – default; logs a warning carrying the event as
    structured context (rendered as 'ctx' by the JSON log formatter).
  * `CollectingDiagnosticsSink` – keeps events in memory for callers/tests.
"""

import logging
from typing import Any, List, Optional

from krokiprep.core.interfaces.diagnostics import DiagnosticsSinkProtocol
from krokiprep.core.models import DiagnosticEvent
from krokiprep.logging.helpers import get_logger

LIBRARY_REFERENCE = 'library-reference'
REMOTE_READ_FAILED = 'remote-read-failed'


class LoggingDiagnosticsSink(DiagnosticsSinkProtocol):
    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('diagnostics')

    def emit(self, event: DiagnosticEvent) -> None:
        ctx: dict[str, Any] = {'code': event.code}
        if event.reference is not None:
            ctx['reference'] = event.reference
        ctx.update(event.context)
        self._log.warning('⚠  %s', event.message, extra={'context': ctx})


class CollectingDiagnosticsSink(DiagnosticsSinkProtocol):
    def __init__(self) -> None:
        self.events: List[DiagnosticEvent] = []

    def emit(self, event: DiagnosticEvent) -> None:
        self.events.append(event)

    def codes(self) -> List[str]:
        return [e.code for e in self.events]

    def clear(self) -> None:
        self.events.clear()
