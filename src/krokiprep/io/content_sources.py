from __future__ import annotations

"""
Content sources – the virtual file system behind include resolution.

This module exposes:
  * `LocalFileContentSource`: reads files from disk (default source).
  * `RemoteContentSource`: fetches http(s)/ftp URLs through an HTTP transport.
  * `RoutingContentSource`: dispatches remote references to the remote
    source and everything else to the local one.
  * `InMemoryContentSource`: dict-backed source for embedding and tests.

Every `read` failure is raised as `ReadError` with the original exception
chained, so callers decide whether the failure is hard or soft.
"""

import logging
from pathlib import Path
from typing import Mapping, Optional

from krokiprep.core.errors import ReadError
from krokiprep.core.interfaces.content import ContentSourceProtocol
from krokiprep.core.interfaces.net import HTTPTransportProtocol
from krokiprep.core.models import FetchRequest
from krokiprep.logging.helpers import get_logger, trace_io
from krokiprep.net.urllib_transport import UrllibHTTPTransport
from krokiprep.utils.mime import charset_from_content_type
from krokiprep.utils.paths import is_remote_url

DEFAULT_USER_AGENT = 'krokiprep (+https://kroki.io)'


class LocalFileContentSource(ContentSourceProtocol):
    def __init__(self, *, encoding: str = 'utf-8', logger: Optional[logging.Logger] = None) -> None:
        self._encoding = encoding
        self._log = logger or get_logger('io.local')

    def exists(self, path: str) -> bool:
        try:
            return Path(path).is_file()
        except OSError:
            return False

    def read(self, path: str) -> str:
        trace_io(self._log, 'read local file', path=path)
        try:
            return Path(path).read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(f'could not read {path}: {exc}', path=path) from exc


class RemoteContentSource(ContentSourceProtocol):
    def __init__(
        self,
        *,
        transport: Optional[HTTPTransportProtocol] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._ua = user_agent
        self._timeout = timeout
        self._http: HTTPTransportProtocol = transport or UrllibHTTPTransport(user_agent=user_agent, timeout=timeout)
        self._log = logger or get_logger('io.remote')

    def _request(self, method: str, url: str):
        return self._http.request(
            FetchRequest(method=method, url=url, headers={'User-Agent': self._ua}, timeout=self._timeout)
        )

    def exists(self, path: str) -> bool:
        try:
            resp = self._request('HEAD', path)
        except (OSError, ValueError) as exc:
            trace_io(self._log, 'HEAD failed', url=path, error=str(exc))
            return False
        return 200 <= resp.status < 400

    def read(self, path: str) -> str:
        trace_io(self._log, 'fetch remote file', url=path)
        try:
            resp = self._request('GET', path)
        except (OSError, ValueError) as exc:
            raise ReadError(f'could not fetch {path}: {exc}', path=path) from exc
        if not 200 <= resp.status < 300:
            raise ReadError(f'could not fetch {path}: HTTP {resp.status}', path=path)
        charset = charset_from_content_type(resp.headers.get('Content-Type', ''))
        try:
            return resp.body.decode(charset)
        except (LookupError, UnicodeDecodeError) as exc:
            raise ReadError(f'could not decode {path} as {charset}: {exc}', path=path) from exc


class RoutingContentSource(ContentSourceProtocol):
    """Send URL-shaped references to *remote* and the rest to *local*."""

    def __init__(
        self,
        *,
        local: Optional[ContentSourceProtocol] = None,
        remote: Optional[ContentSourceProtocol] = None,
    ) -> None:
        self._local = local or LocalFileContentSource()
        self._remote = remote or RemoteContentSource()

    def _route(self, path: str) -> ContentSourceProtocol:
        return self._remote if is_remote_url(path) else self._local

    def exists(self, path: str) -> bool:
        return self._route(path).exists(path)

    def read(self, path: str) -> str:
        return self._route(path).read(path)


class InMemoryContentSource(ContentSourceProtocol):
    """Content source backed by a mapping of path → text.

    Paths are looked up verbatim, so keys must use the same spelling the
    expander produces (normalized joins such as 'lib/a.puml').
    """

    def __init__(self, files: Optional[Mapping[str, str]] = None) -> None:
        self.files: dict[str, str] = dict(files or {})
        self.reads: list[str] = []

    def exists(self, path: str) -> bool:
        return path in self.files

    def read(self, path: str) -> str:
        self.reads.append(path)
        try:
            return self.files[path]
        except KeyError as exc:
            raise ReadError(f'no such file: {path}', path=path) from exc
