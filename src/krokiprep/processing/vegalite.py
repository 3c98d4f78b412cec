from __future__ import annotations

"""
Vega-Lite data inlining.

Kroki cannot read files that only exist next to the diagram source, so a
view specification whose ``data.url`` points at such a file is rewritten to
carry the file content inline:

    {"data": {"url": "cars.csv"}, ...}
      → {"data": {"values": "<csv text>", "format": {"type": "csv"}}, ...}

The specification is parsed as JSON5 (comments, trailing commas, unquoted
keys are all accepted) and re-serialized as compact JSON.
"""

import json
import logging
import math
from typing import Any, Optional

import json5

from krokiprep.core.errors import ParseError, ReadError
from krokiprep.core.interfaces.content import ContentSourceProtocol
from krokiprep.core.interfaces.diagnostics import DiagnosticsSinkProtocol
from krokiprep.core.models import DiagnosticEvent
from krokiprep.diagnostics import REMOTE_READ_FAILED, LoggingDiagnosticsSink
from krokiprep.io.content_sources import LocalFileContentSource
from krokiprep.logging.helpers import get_logger
from krokiprep.utils.mime import infer_data_format
from krokiprep.utils.paths import is_remote_url, join_reference

_ERR_PREFIX = 'Preprocessing of Vega-Lite view specification failed'


def _parse(text: str) -> Any:
    try:
        return json5.loads(text)
    except (ValueError, RecursionError) as exc:
        raise ParseError(
            f"{_ERR_PREFIX}, because of a parsing error:\n{exc}\n"
            f"The invalid view specification was:\n{text}\n"
        ) from exc


def _json_safe(value: Any) -> Any:
    """Replace NaN and infinities with None, as JSON has no literal for them."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_json_safe(v) for v in value]
    return value


def _data_url(spec: Any) -> Optional[str]:
    if not isinstance(spec, dict):
        return None
    data = spec.get('data')
    if not isinstance(data, dict):
        return None
    url = data.get('url')
    return url if isinstance(url, str) and url else None


class VegaLiteDataInliner:
    def __init__(
        self,
        source: Optional[ContentSourceProtocol] = None,
        *,
        diagnostics: Optional[DiagnosticsSinkProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._source = source or LocalFileContentSource()
        self._diag = diagnostics or LoggingDiagnosticsSink()
        self._log = logger or get_logger('vegalite')

    def _locate(self, url: str, base_dir: str) -> str:
        if is_remote_url(url):
            return url
        candidate = join_reference(base_dir, url)
        return candidate if self._source.exists(candidate) else url

    def run(self, text: str, *, base_dir: str = '.') -> str:
        spec = _parse(text)
        url = _data_url(spec)
        if url is None:
            return text

        data = spec['data']
        try:
            data['values'] = self._source.read(self._locate(url, base_dir))
        except ReadError as exc:
            if is_remote_url(url):
                self._diag.emit(DiagnosticEvent(
                    code=REMOTE_READ_FAILED,
                    message=(
                        "Skipping preprocessing of Vega-Lite view specification, because reading "
                        f"the referenced remote file '{url}' caused an error:\n{exc}"
                    ),
                    reference=url,
                    context={'error': str(exc)},
                ))
                return text
            raise ReadError(
                f"{_ERR_PREFIX}, because reading the referenced local file '{url}' caused an error:\n{exc}",
                path=url,
            ) from exc

        if not data.get('format'):
            data['format'] = {'type': infer_data_format(url)}
        del data['url']
        self._log.debug('inlined %s (%d chars)', url, len(data['values']))
        return json.dumps(_json_safe(spec), allow_nan=False, separators=(',', ':'), ensure_ascii=False)


def inline_data_references(
    text: str,
    source: Optional[ContentSourceProtocol] = None,
    *,
    base_dir: str = '.',
    diagnostics: Optional[DiagnosticsSinkProtocol] = None,
) -> str:
    """Inline the file referenced by ``data.url`` of a Vega-Lite spec.

    A relative local ``url`` is looked up under *base_dir* first and used
    as written when not found there.

    Returns *text* unchanged when there is no ``data.url`` or when a remote
    file cannot be fetched (Kroki may still resolve it).

    Raises:
        ParseError: *text* is not valid JSON5.
        ReadError: A local data file cannot be read.
    """
    return VegaLiteDataInliner(source, diagnostics=diagnostics).run(text, base_dir=base_dir)
