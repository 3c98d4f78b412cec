from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from krokiprep.core.config import PreprocessConfig, build_content_source
from krokiprep.core.errors import PreprocessError, ReadError
from krokiprep.core.interfaces.content import ContentSourceProtocol
from krokiprep.logging.factory import DefaultLoggerFactory
from krokiprep.logging.helpers import get_logger
from krokiprep.parsing.parser import _build_parser
from krokiprep.processing.includes import expand_includes
from krokiprep.processing.vegalite import inline_data_references

logger = get_logger('krokiprep')


def _configure_logging(enable_json: bool, level: int) -> None:
    """Configure process-wide logging, either JSON or plain text."""
    factory = DefaultLoggerFactory(json_logs=enable_json, level=level)
    global logger
    logger = factory.get_logger('krokiprep')


def _read_input(ns: argparse.Namespace, encoding: str) -> str:
    try:
        if ns.file == '-':
            return sys.stdin.read()
        return Path(ns.file).read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        name = '<stdin>' if ns.file == '-' else ns.file
        raise ReadError(f"Cannot decode {name} as {encoding}: {exc}", path=name) from exc


def _default_base_dir(ns: argparse.Namespace) -> Optional[str]:
    if ns.base_dir:
        return ns.base_dir
    if ns.file == '-':
        return None
    return os.path.dirname(ns.file) or '.'


class KrokiPrep:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str], *, source: Optional[ContentSourceProtocol] = None) -> str:
        """Parse *argv*, preprocess the input and return the resulting text.

        The result is also written to --output when given. Errors propagate.
        """
        return KrokiPrep.execute(_build_parser().parse_args(list(argv)), source=source)

    @staticmethod
    def execute(ns: argparse.Namespace, *, source: Optional[ContentSourceProtocol] = None) -> str:
        cfg = PreprocessConfig.from_env().with_overrides(
            base_dir=_default_base_dir(ns),
            encoding=ns.encoding,
            timeout=ns.timeout,
            json_logs=ns.json_logs,
            log_level=logging.DEBUG if ns.verbose else None,
        )
        _configure_logging(cfg.json_logs, cfg.log_level)

        src = source or build_content_source(cfg)
        text = _read_input(ns, cfg.encoding)
        if ns.diagram_type == 'plantuml':
            out = expand_includes(text, src, base_dir=cfg.base_dir)
        else:
            out = inline_data_references(text, src, base_dir=cfg.base_dir)

        if ns.output:
            Path(ns.output).write_text(out, encoding=cfg.encoding)
            logger.info('✔ wrote %s', ns.output)
        return out


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `krokiprep` console script."""
    ns = _build_parser().parse_args(sys.argv[1:] if argv is None else list(argv))
    try:
        out = KrokiPrep.execute(ns)
        if not ns.output:
            sys.stdout.write(out)
        raise SystemExit(0)
    except PreprocessError as exc:
        logger.error('%s', exc)
        raise SystemExit(1)
    except BrokenPipeError:
        raise SystemExit(0)
    except OSError as exc:
        logger.error('⚠  I/O error: %s', exc)
        raise SystemExit(1)
    except UnicodeError as exc:
        logger.error('⚠  encoding error: %s', exc)
        raise SystemExit(1)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)


if __name__ == '__main__':
    main()
