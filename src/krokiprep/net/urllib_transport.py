from __future__ import annotations

"""HTTP transport implementation using urllib.

The transport is minimal and synchronous. It supports:
- Custom User-Agent via constructor.
- A default timeout applied when the request does not carry one.
- Optional SSL context provider callback per request URL.

HTTP error statuses are returned as regular responses; deciding whether a
status is a failure belongs to the caller. Connection-level failures
(DNS, refused, timeouts) still raise ``urllib.error.URLError``/``OSError``.
"""

import ssl
import urllib.error
import urllib.request
from typing import Callable, Optional

from krokiprep.core.interfaces.net import HTTPTransportProtocol
from krokiprep.core.models import FetchRequest, FetchResponse


class UrllibHTTPTransport(HTTPTransportProtocol):
    """urllib-based HTTP transport that satisfies HTTPTransportProtocol."""

    def __init__(
        self,
        *,
        user_agent: Optional[str] = None,
        timeout: float = 30.0,
        ssl_ctx_provider: Optional[Callable[[str], Optional[ssl.SSLContext]]] = None,
    ) -> None:
        self._ua = user_agent
        self._timeout = float(timeout)
        self._ssl_ctx_for = ssl_ctx_provider or (lambda _url: None)

    def request(self, req: FetchRequest) -> FetchResponse:
        headers = dict(req.headers or {})
        if self._ua and "User-Agent" not in headers:
            headers["User-Agent"] = self._ua

        url_req = urllib.request.Request(req.url, data=req.body, headers=headers, method=req.method or "GET")
        timeout = float(req.timeout) if req.timeout is not None else self._timeout
        ctx = self._ssl_ctx_for(req.url)

        try:
            with urllib.request.urlopen(url_req, timeout=timeout, context=ctx) as resp:  # nosec B310 (intended usage)
                body = resp.read()
                status = getattr(resp, "status", None) or int(resp.getcode())
                headers_map = dict(resp.headers.items())
                final_url = resp.geturl()
        except urllib.error.HTTPError as exc:
            body = exc.read() or b""
            return FetchResponse(
                status=int(exc.code),
                headers=dict(exc.headers.items()) if exc.headers else {},
                body=body,
                final_url=exc.geturl() or req.url,
            )

        return FetchResponse(status=status, headers=headers_map, body=body, final_url=final_url)
