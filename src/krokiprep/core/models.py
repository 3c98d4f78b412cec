from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Mapping, Optional, Set


class IncludeKind(str, Enum):
    """PlantUML include directive keywords (always stored lower-case)."""

    INCLUDE = 'include'
    INCLUDE_MANY = 'include_many'
    INCLUDE_ONCE = 'include_once'
    INCLUDE_URL = 'includeurl'
    INCLUDE_SUB = 'includesub'


class ReferenceKind(str, Enum):
    LIBRARY = 'library'
    REMOTE = 'remote'
    LOCAL = 'local'


@dataclass(frozen=True)
class Directive:
    """One parsed include line.

    Attributes:
        kind: Directive keyword.
        reference: Reference token exactly as written (escaped spaces kept).
        path: Reference before the first '!', with '\\ ' unescaped.
        sub_selector: Text between the first and second '!', or None.
        trailing_tail: Anything after the reference token; never reparsed.
    """
    kind: IncludeKind
    reference: str
    path: str
    sub_selector: Optional[str] = None
    trailing_tail: str = ''


@dataclass(frozen=True)
class ResolutionResult:
    skip: bool
    text: str
    resolved_path: str


@dataclass
class IncludeState:
    """Traversal state owned by one top-level expansion.

    ``stack`` lists the resolved paths currently being expanded and ``once``
    collects every path pulled in through ``!include_once``.
    """
    stack: List[str] = field(default_factory=list)
    once: Set[str] = field(default_factory=set)


@dataclass(frozen=True)
class DiagnosticEvent:
    code: str
    message: str
    reference: str | None = None
    context: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class FetchRequest:
    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes | None = None
    timeout: float | None = None


@dataclass(frozen=True)
class FetchResponse:
    status: int
    headers: Mapping[str, str]
    body: bytes
    final_url: str
