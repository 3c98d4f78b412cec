#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Unit tests for the PlantUML directive tokenizer and comment stripping."""
from __future__ import annotations

import unittest

from krokiprep.core.models import IncludeKind
from krokiprep.parsing.comments import strip_block_comments, strip_comments, strip_line_comments
from krokiprep.parsing.directives import DirectiveTokenizer


# --------------------------------------------------------------------------- #
#  1. Directive tokenizer                                                     #
# --------------------------------------------------------------------------- #
class TokenizerTests(unittest.TestCase):
    def test_plain_include(self) -> None:
        d = DirectiveTokenizer.parse_line("!include foo.puml")
        self.assertIsNotNone(d)
        self.assertIs(d.kind, IncludeKind.INCLUDE)
        self.assertEqual(d.path, "foo.puml")
        self.assertIsNone(d.sub_selector)
        self.assertEqual(d.trailing_tail, "")

    def test_every_keyword_is_recognized(self) -> None:
        for kind in IncludeKind:
            with self.subTest(kind=kind):
                d = DirectiveTokenizer.parse_line(f"!{kind.value} x.puml")
                self.assertIsNotNone(d)
                self.assertIs(d.kind, kind)

    def test_keyword_is_case_insensitive(self) -> None:
        d = DirectiveTokenizer.parse_line("!INCLUDE_Once x.puml")
        self.assertIs(d.kind, IncludeKind.INCLUDE_ONCE)

    def test_leading_whitespace_allowed(self) -> None:
        d = DirectiveTokenizer.parse_line(" \t!includeurl https://example.com/a.puml")
        self.assertIs(d.kind, IncludeKind.INCLUDE_URL)
        self.assertEqual(d.path, "https://example.com/a.puml")

    def test_sub_selector_and_tail(self) -> None:
        d = DirectiveTokenizer.parse_line("!includesub lib/file.puml!PART  extra words")
        self.assertIs(d.kind, IncludeKind.INCLUDE_SUB)
        self.assertEqual(d.reference, "lib/file.puml!PART")
        self.assertEqual(d.path, "lib/file.puml")
        self.assertEqual(d.sub_selector, "PART")
        self.assertEqual(d.trailing_tail, "  extra words")

    def test_only_second_bang_segment_is_selector(self) -> None:
        d = DirectiveTokenizer.parse_line("!include a.puml!1!2")
        self.assertEqual(d.sub_selector, "1")

    def test_empty_selector_is_none(self) -> None:
        d = DirectiveTokenizer.parse_line("!include a.puml!")
        self.assertEqual(d.path, "a.puml")
        self.assertIsNone(d.sub_selector)

    def test_escaped_spaces_stay_in_reference(self) -> None:
        d = DirectiveTokenizer.parse_line(r"!include my\ dir/a\ b.puml rest")
        self.assertEqual(d.reference, r"my\ dir/a\ b.puml")
        self.assertEqual(d.path, "my dir/a b.puml")
        self.assertEqual(d.trailing_tail, " rest")

    def test_non_directives(self) -> None:
        for line in (
            "",
            "Alice -> Bob",
            "include foo.puml",
            "! include foo.puml",
            "!includex foo.puml",
            "!include",
            "!include   ",
            "!define FOO bar",
            "x !include foo.puml",
        ):
            with self.subTest(line=line):
                self.assertIsNone(DirectiveTokenizer.parse_line(line))


# --------------------------------------------------------------------------- #
#  2. Comment stripping                                                       #
# --------------------------------------------------------------------------- #
class CommentTests(unittest.TestCase):
    def test_block_comment_removed_across_lines(self) -> None:
        self.assertEqual(strip_block_comments("a\n/' x\ny '/b\nc"), "a\nb\nc")

    def test_block_comments_are_non_greedy(self) -> None:
        self.assertEqual(strip_block_comments("/'1'/keep/'2'/"), "keep")

    def test_quoted_line_dropped_with_line_break(self) -> None:
        self.assertEqual(strip_line_comments("keep\nskip 'x' here\nnext\n"), "keep\nnext\n")

    def test_last_line_without_break_is_kept(self) -> None:
        self.assertEqual(strip_line_comments("keep\nlast 'y'"), "keep\nlast 'y'")

    def test_crlf_line_dropped(self) -> None:
        self.assertEqual(strip_line_comments("a\r\n'c' d\r\nb"), "a\r\nb")

    def test_block_before_line_pass(self) -> None:
        # The block pass removes the quotes first, so the line survives.
        self.assertEqual(strip_comments("x /'note'/ y\nz"), "x  y\nz")

    def test_text_without_quotes_untouched(self) -> None:
        text = "@startuml\r\nAlice -> Bob\r\n  \n@enduml\n"
        self.assertEqual(strip_comments(text), text)


if __name__ == "__main__":
    unittest.main()
