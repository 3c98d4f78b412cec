from __future__ import annotations
from typing import Protocol, runtime_checkable

from krokiprep.core.models import DiagnosticEvent


@runtime_checkable
class DiagnosticsSinkProtocol(Protocol):
    """Receiver for soft, non-fatal preprocessing conditions."""

    def emit(self, event: DiagnosticEvent) -> None:
        ...
