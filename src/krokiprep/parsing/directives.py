from __future__ import annotations

"""
DirectiveTokenizer – explicit scanner for PlantUML include lines.

Grammar (one physical line, no line break):

    line       := ws* '!' keyword ws+ reference tail
    keyword    := 'include' | 'include_many' | 'include_once'
                | 'includeurl' | 'includesub'          (case-insensitive)
    reference  := ( '\\ ' | any char except ' ' )+
    tail       := anything, captured verbatim

The reference is split on '!' into a path and an optional sub-selector
('file.puml!2', 'file.puml!my_id', 'file.puml!SUBNAME'); escaped spaces in
the path become literal spaces.
"""

from typing import Optional

from krokiprep.core.models import Directive, IncludeKind

_KEYWORDS = {kind.value: kind for kind in IncludeKind}


class DirectiveTokenizer:
    @staticmethod
    def _skip_ws(line: str, i: int) -> int:
        n = len(line)
        while i < n and line[i].isspace():
            i += 1
        return i

    @staticmethod
    def read_keyword(line: str, i: int) -> tuple[Optional[IncludeKind], int]:
        """Read the word after '!' up to the next whitespace."""
        start = i
        n = len(line)
        while i < n and not line[i].isspace():
            i += 1
        return _KEYWORDS.get(line[start:i].lower()), i

    @staticmethod
    def read_reference(line: str, i: int) -> tuple[str, int]:
        """Read up to the first space not preceded by a backslash."""
        start = i
        n = len(line)
        while i < n:
            if line[i] == ' ' and (i == start or line[i - 1] != '\\'):
                break
            i += 1
        return line[start:i], i

    @staticmethod
    def split_reference(reference: str) -> tuple[str, Optional[str]]:
        parts = reference.strip().split('!')
        path = parts[0].replace('\\ ', ' ')
        sub = parts[1] if len(parts) > 1 and parts[1] else None
        return path, sub

    @classmethod
    def parse_line(cls, line: str) -> Optional[Directive]:
        """Return the Directive on *line*, or None when it is not an include."""
        i = cls._skip_ws(line, 0)
        if i >= len(line) or line[i] != '!':
            return None
        kind, i = cls.read_keyword(line, i + 1)
        if kind is None or i >= len(line):
            return None
        i = cls._skip_ws(line, i)
        reference, i = cls.read_reference(line, i)
        if not reference:
            return None
        path, sub = cls.split_reference(reference)
        return Directive(
            kind=kind,
            reference=reference,
            path=path,
            sub_selector=sub,
            trailing_tail=line[i:],
        )
