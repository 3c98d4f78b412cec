from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class ContentSourceProtocol(Protocol):
    """Virtual file system consumed by the preprocessors.

    ``read`` returns decoded text and raises ``ReadError`` on any failure.
    """

    def exists(self, path: str) -> bool:
        ...

    def read(self, path: str) -> str:
        ...
