from __future__ import annotations
from typing import Protocol, runtime_checkable

from krokiprep.core.models import FetchRequest, FetchResponse


@runtime_checkable
class HTTPTransportProtocol(Protocol):
    def request(self, req: FetchRequest) -> FetchResponse:
        ...
