"""
comments – PlantUML comment removal applied before directive scanning.

Two passes, in this order:
  • Block comments  /' … '/  are removed with their content (may span lines).
  • Any remaining physical line holding a quoted span ('…') is dropped whole,
    line break included. A last line without a line break is kept.

Directives written inside a comment therefore never reach the tokenizer.
"""

import re
from typing import Pattern

BLOCK_COMMENT_RE: Pattern[str] = re.compile(r"/'[\s\S]*?'/")
SINGLE_LINE_COMMENT_RE: Pattern[str] = re.compile(r"^[^\r\n]*'[^\r\n]*'[^\r\n]*(?:\r\n|\n)", re.M)


def strip_block_comments(text: str) -> str:
    return BLOCK_COMMENT_RE.sub('', text)


def strip_line_comments(text: str) -> str:
    return SINGLE_LINE_COMMENT_RE.sub('', text)


def strip_comments(text: str) -> str:
    """Remove block comments first, then whole commented lines."""
    return strip_line_comments(strip_block_comments(text))
