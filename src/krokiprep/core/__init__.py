from __future__ import annotations

"""Public surface for krokiprep.core.

Stable import location for the error taxonomy, data models and protocol
types:

    from krokiprep.core import CycleError, IncludeState, ContentSourceProtocol
"""

from krokiprep.core.errors import (
    CycleError,
    DuplicateIncludeError,
    ParseError,
    PreprocessError,
    ReadError,
)
from krokiprep.core.interfaces import (
    ContentSourceProtocol,
    DiagnosticsSinkProtocol,
    HTTPTransportProtocol,
)
from krokiprep.core.models import (
    DiagnosticEvent,
    Directive,
    IncludeKind,
    IncludeState,
    ReferenceKind,
    ResolutionResult,
)

__all__ = [
    # Errors
    "PreprocessError",
    "ParseError",
    "ReadError",
    "CycleError",
    "DuplicateIncludeError",
    # Protocols
    "ContentSourceProtocol",
    "DiagnosticsSinkProtocol",
    "HTTPTransportProtocol",
    # Models
    "DiagnosticEvent",
    "Directive",
    "IncludeKind",
    "IncludeState",
    "ReferenceKind",
    "ResolutionResult",
]
