"""
blocks – Narrow an included file down to the requested part.

Addressing modes:
  • no selector            → body of the first @startuml/@enduml pair, or
                             the whole text when the file has none
  • !includesub f!NAME     → every '!startsub NAME' … '!endsub' body
  • !include f!2           → body of the third @startuml/@enduml pair
  • !include f!my_id       → every '@startuml(id=my_id)' … '@enduml' body

Multiple bodies are joined with a single '\\n'.
"""

import re
from typing import Optional, Pattern

from krokiprep.core.models import IncludeKind

_EOL = r'(?:\r\n|\n)'
BLOCK_RE: Pattern[str] = re.compile(rf'@startuml{_EOL}([\s\S]*?){_EOL}@enduml')
_INDEX_RE = re.compile(r'[+-]?[0-9]+')


def _sub_re(name: str) -> Pattern[str]:
    return re.compile(rf'!startsub\s+{re.escape(name)}{_EOL}([\s\S]*?){_EOL}!endsub')


def _id_re(block_id: str) -> Pattern[str]:
    return re.compile(rf'@startuml\(id={re.escape(block_id)}\){_EOL}([\s\S]*?){_EOL}@enduml')


def _join_matches(text: str, pattern: Pattern[str]) -> str:
    return '\n'.join(m.group(1) for m in pattern.finditer(text))


def first_block_or_text(text: str) -> str:
    m = BLOCK_RE.search(text)
    return m.group(1) if m else text


def sub_blocks(text: str, name: str) -> str:
    return _join_matches(text, _sub_re(name))


def id_blocks(text: str, block_id: str) -> str:
    return _join_matches(text, _id_re(block_id))


def block_at(text: str, index: int) -> str:
    """Return the body of the *index*-th block (0-based); '' when out of range."""
    if index < 0:
        return ''
    for idx, m in enumerate(BLOCK_RE.finditer(text)):
        if idx == index:
            return m.group(1)
    return ''


def parse_index(selector: str) -> Optional[int]:
    """Parse a leading base-10 integer ('2', '-1', '3a' → 3); None otherwise."""
    s = selector.strip()
    m = _INDEX_RE.match(s)
    return int(m.group(0)) if m else None


def extract(text: str, kind: IncludeKind, selector: Optional[str]) -> str:
    if not selector:
        return first_block_or_text(text)
    if kind is IncludeKind.INCLUDE_SUB:
        return sub_blocks(text, selector)
    index = parse_index(selector)
    if index is not None:
        return block_at(text, index)
    return id_blocks(text, selector)
