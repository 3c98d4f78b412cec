# krokiprep/parsing/parser.py
from __future__ import annotations

import argparse

DIAGRAM_TYPES = ("plantuml", "vegalite")


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - Flags left unset stay None so that KROKIPREP_* environment values
          are only overridden by options the user actually passed.
    """
    p = argparse.ArgumentParser(
        prog="krokiprep",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "krokiprep – resolve PlantUML includes and inline Vega-Lite data\n"
            "before a diagram source is sent to Kroki."
        ),
    )

    g_in = p.add_argument_group("Input & output")
    g_res = p.add_argument_group("Resolution")
    g_misc = p.add_argument_group("Miscellaneous")

    g_in.add_argument(
        "diagram_type",
        choices=DIAGRAM_TYPES,
        metavar="{plantuml,vegalite}",
        help="Dialect of the diagram source.",
    )
    g_in.add_argument(
        "file",
        metavar="FILE",
        help="Diagram source file, or '-' to read standard input.",
    )
    g_in.add_argument(
        "-o",
        "--output",
        metavar="OUT",
        dest="output",
        help="Write the preprocessed source to OUT instead of standard output.",
    )
    g_res.add_argument(
        "-d",
        "--base-dir",
        metavar="DIR",
        dest="base_dir",
        help=(
            "Directory that relative include references resolve against.\n"
            "Defaults to the directory of FILE ('.' for standard input)."
        ),
    )
    g_res.add_argument(
        "--encoding",
        metavar="NAME",
        dest="encoding",
        help="Encoding of local files (default: utf-8).",
    )
    g_res.add_argument(
        "--timeout",
        metavar="SECS",
        type=float,
        dest="timeout",
        help="Timeout for remote reads in seconds (default: 30).",
    )
    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        default=None,
        dest="json_logs",
        help="Emit logs as JSON lines on standard error.",
    )
    g_misc.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="Enable debug logging.",
    )
    return p
