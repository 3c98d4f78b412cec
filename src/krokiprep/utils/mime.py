from __future__ import annotations
import re
from typing import Optional
from urllib.parse import urlparse

_EXT_RE = re.compile(r'\.([^./\\]+)$')

# Data formats understood by Vega-Lite for inline values.
DATA_FORMAT_TYPES = ('json', 'csv', 'tsv', 'dsv', 'topojson')
DEFAULT_DATA_FORMAT = 'json'


def extract_ext_from_url_path(url_path: str) -> str:
    """Return the extension of the last path segment, without the dot."""
    m = _EXT_RE.search(url_path or '')
    return m.group(1) if m else ''


def charset_from_content_type(ctype: str, default: str = 'utf-8') -> str:
    for part in (ctype or '').split(';')[1:]:
        key, _, value = part.strip().partition('=')
        if key.lower() == 'charset' and value:
            return value.strip('"\' ')
    return default


def infer_data_format(url: str, *, default: Optional[str] = None) -> str:
    """Infer the Vega-Lite ``format.type`` from the extension of *url*.

    Query strings and fragments are ignored for remote URLs. Unknown or
    missing extensions fall back to *default* ('json').
    """
    path = urlparse(url).path if '://' in url else url
    ext = extract_ext_from_url_path(path)
    if ext in DATA_FORMAT_TYPES:
        return ext
    return default or DEFAULT_DATA_FORMAT
