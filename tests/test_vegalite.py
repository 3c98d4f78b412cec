from __future__ import annotations

import json
import unittest

from krokiprep import (
    CollectingDiagnosticsSink,
    InMemoryContentSource,
    ParseError,
    ReadError,
    inline_data_references,
)
from krokiprep.diagnostics import REMOTE_READ_FAILED

CSV = "name,hp\na,100\nb,120\n"


class VegaLiteInlineTests(unittest.TestCase):
    def test_spec_without_url_unchanged(self) -> None:
        text = '{ "mark": "bar",  "data": {"values": [1, 2]} }'
        self.assertEqual(inline_data_references(text, InMemoryContentSource()), text)

    def test_non_object_unchanged(self) -> None:
        self.assertEqual(inline_data_references("[1, 2]", InMemoryContentSource()), "[1, 2]")

    def test_local_csv_inlined(self) -> None:
        text = '{"data": {"url": "data/cars.csv"}, "mark": "bar"}'
        out = inline_data_references(text, InMemoryContentSource({"data/cars.csv": CSV}))
        self.assertNotIn('"url"', out)
        self.assertEqual(
            json.loads(out),
            {"data": {"values": CSV, "format": {"type": "csv"}}, "mark": "bar"},
        )

    def test_output_is_compact(self) -> None:
        out = inline_data_references('{"data": {"url": "a.json"}}', InMemoryContentSource({"a.json": "[]"}))
        self.assertEqual(out, '{"data":{"values":"[]","format":{"type":"json"}}}')

    def test_relaxed_json_accepted(self) -> None:
        text = (
            "{\n"
            "  // cars\n"
            "  data: {url: 'cars.tsv',},\n"
            "  mark: 'point',\n"
            "}\n"
        )
        out = inline_data_references(text, InMemoryContentSource({"cars.tsv": "a\tb\n"}))
        self.assertEqual(json.loads(out)["data"], {"values": "a\tb\n", "format": {"type": "tsv"}})

    def test_url_resolved_against_base_dir(self) -> None:
        src = InMemoryContentSource({"charts/data/a.csv": CSV})
        out = json.loads(inline_data_references('{"data": {"url": "data/a.csv"}}', src, base_dir="charts"))
        self.assertEqual(out["data"]["values"], CSV)

    def test_explicit_format_kept(self) -> None:
        text = '{"data": {"url": "d.txt", "format": {"type": "dsv", "delimiter": "|"}}}'
        out = json.loads(inline_data_references(text, InMemoryContentSource({"d.txt": "a|b"})))
        self.assertEqual(out["data"]["format"], {"type": "dsv", "delimiter": "|"})

    def test_unknown_extension_defaults_to_json(self) -> None:
        text = '{"data": {"url": "values.txt"}}'
        out = json.loads(inline_data_references(text, InMemoryContentSource({"values.txt": "[]"})))
        self.assertEqual(out["data"]["format"], {"type": "json"})

    def test_topojson_extension(self) -> None:
        text = '{"data": {"url": "world.topojson"}}'
        out = json.loads(inline_data_references(text, InMemoryContentSource({"world.topojson": "{}"})))
        self.assertEqual(out["data"]["format"], {"type": "topojson"})

    def test_parse_error(self) -> None:
        with self.assertRaises(ParseError) as cm:
            inline_data_references("{ not: valid json5 ", InMemoryContentSource())
        self.assertIn("{ not: valid json5 ", str(cm.exception))
        self.assertIsNotNone(cm.exception.__cause__)

    def test_deep_nesting_is_a_parse_error(self) -> None:
        with self.assertRaises(ParseError) as cm:
            inline_data_references("[" * 100000, InMemoryContentSource())
        self.assertIsNotNone(cm.exception.__cause__)

    def test_non_finite_numbers_written_as_null(self) -> None:
        text = "{data: {url: 'a.csv'}, x: NaN, y: [Infinity, -Infinity, 1.5]}"
        out = inline_data_references(text, InMemoryContentSource({"a.csv": "a"}))
        self.assertEqual(out, '{"data":{"values":"a","format":{"type":"csv"}},"x":null,"y":[null,null,1.5]}')

    def test_remote_failure_returns_input(self) -> None:
        sink = CollectingDiagnosticsSink()
        text = '{"data": {"url": "https://example.com/cars.csv"}}'
        out = inline_data_references(text, InMemoryContentSource(), diagnostics=sink)
        self.assertEqual(out, text)
        self.assertEqual(sink.codes(), [REMOTE_READ_FAILED])

    def test_remote_success(self) -> None:
        text = '{"data": {"url": "https://example.com/cars.csv?raw=1"}}'
        src = InMemoryContentSource({"https://example.com/cars.csv?raw=1": CSV})
        out = json.loads(inline_data_references(text, src))
        self.assertEqual(out["data"], {"values": CSV, "format": {"type": "csv"}})

    def test_local_failure_is_hard(self) -> None:
        with self.assertRaises(ReadError) as cm:
            inline_data_references('{"data": {"url": "missing.csv"}}', InMemoryContentSource())
        self.assertIn("missing.csv", str(cm.exception))


if __name__ == "__main__":
    unittest.main()
