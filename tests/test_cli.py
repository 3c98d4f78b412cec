#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""End-to-end tests for the krokiprep command line (offline)."""
from __future__ import annotations

import contextlib
import io
import json
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from krokiprep.cli import KrokiPrep, main
from krokiprep.core.errors import ReadError

sys.path.insert(0, str(Path(__file__).resolve().parent / "tools"))
import build_fixtures  # noqa: E402


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = build_fixtures.build(Path(self._tmp.name) / "fixtures")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_plantuml_base_dir_defaults_to_file_dir(self) -> None:
        out = KrokiPrep.run(["plantuml", str(self.root / "main.puml")])
        self.assertIn("skinparam shadowing false", out)
        self.assertIn("actor Bob", out)
        self.assertNotIn("!include", out)

    def test_output_file(self) -> None:
        dst = self.root / "out.puml"
        out = KrokiPrep.run(["plantuml", str(self.root / "main.puml"), "-o", str(dst)])
        self.assertEqual(dst.read_text(encoding="utf-8"), out)

    def test_vegalite(self) -> None:
        src = self.root / "bar.vl.json5"
        out = KrokiPrep.run(["vegalite", str(src), "-d", str(self.root)])
        data = json.loads(out)["data"]
        self.assertEqual(data["format"], {"type": "csv"})
        self.assertTrue(data["values"].startswith("name,hp"))

    def test_stdin_input(self) -> None:
        with patch("sys.stdin", io.StringIO("!include lib/colors.puml")):
            out = KrokiPrep.run(["plantuml", "-", "-d", str(self.root)])
        self.assertEqual(out, "skinparam backgroundColor white\n")

    def test_main_writes_stdout(self) -> None:
        buf = io.StringIO()
        with contextlib.redirect_stdout(buf), self.assertRaises(SystemExit) as cm:
            main(["plantuml", str(self.root / "lib" / "parts.puml")])
        self.assertEqual(cm.exception.code, 0)
        self.assertIn("!startsub ACTORS", buf.getvalue())

    def test_main_exit_code_on_failure(self) -> None:
        with self.assertRaises(SystemExit) as cm:
            main(["plantuml", str(self.root / "broken.puml")])
        self.assertEqual(cm.exception.code, 1)

    def test_main_exit_code_on_cycle(self) -> None:
        with self.assertRaises(SystemExit) as cm:
            main(["plantuml", str(self.root / "cycle" / "a.puml")])
        self.assertEqual(cm.exception.code, 1)

    def test_undecodable_input_is_read_error(self) -> None:
        bad = self.root / "latin.puml"
        bad.write_bytes(b"@startuml\n\xff\xfe\n@enduml\n")
        with self.assertRaises(ReadError) as cm:
            KrokiPrep.run(["plantuml", str(bad)])
        self.assertIn("latin.puml", str(cm.exception))

    def test_main_exit_code_on_undecodable_input(self) -> None:
        bad = self.root / "latin.puml"
        bad.write_bytes(b"@startuml\n\xff\xfe\n@enduml\n")
        with self.assertRaises(SystemExit) as cm:
            main(["plantuml", str(bad)])
        self.assertEqual(cm.exception.code, 1)

    def test_main_exit_code_on_deeply_nested_vegalite(self) -> None:
        deep = self.root / "deep.vl.json"
        deep.write_text("[" * 100000, encoding="utf-8")
        with self.assertRaises(SystemExit) as cm:
            main(["vegalite", str(deep)])
        self.assertEqual(cm.exception.code, 1)

    def test_main_missing_input(self) -> None:
        with self.assertRaises(SystemExit) as cm:
            main(["plantuml", str(self.root / "nope.puml")])
        self.assertEqual(cm.exception.code, 1)


if __name__ == "__main__":
    unittest.main()
