from __future__ import annotations

"""Runtime configuration for krokiprep.

`PreprocessConfig` is an immutable blob; `from_env` seeds it from
KROKIPREP_* variables and `build_content_source` wires the content source
the CLI uses (local files plus remote URLs).
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from krokiprep.core.interfaces.content import ContentSourceProtocol
from krokiprep.core.interfaces.net import HTTPTransportProtocol
from krokiprep.io.content_sources import (
    DEFAULT_USER_AGENT,
    LocalFileContentSource,
    RemoteContentSource,
    RoutingContentSource,
)

_TRUE = {'1', 'true', 'yes', 'on'}


@dataclass(frozen=True)
class PreprocessConfig:
    base_dir: str = '.'
    encoding: str = 'utf-8'
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = 30.0
    json_logs: bool = False
    log_level: int = logging.INFO

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "PreprocessConfig":
        """Build a config from KROKIPREP_* variables (``os.environ`` by default).

        A malformed KROKIPREP_TIMEOUT raises ValueError.
        """
        env = os.environ if env is None else env
        cfg = cls()
        if env.get('KROKIPREP_BASE_DIR'):
            cfg = replace(cfg, base_dir=env['KROKIPREP_BASE_DIR'])
        if env.get('KROKIPREP_ENCODING'):
            cfg = replace(cfg, encoding=env['KROKIPREP_ENCODING'])
        if env.get('KROKIPREP_USER_AGENT'):
            cfg = replace(cfg, user_agent=env['KROKIPREP_USER_AGENT'])
        if env.get('KROKIPREP_TIMEOUT'):
            cfg = replace(cfg, timeout=float(env['KROKIPREP_TIMEOUT']))
        if env.get('KROKIPREP_JSON_LOGS'):
            cfg = replace(cfg, json_logs=env['KROKIPREP_JSON_LOGS'].strip().lower() in _TRUE)
        return cfg

    def with_overrides(self, **changes) -> "PreprocessConfig":
        """Return a copy with every non-None keyword applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def build_content_source(
    config: PreprocessConfig,
    *,
    transport: Optional[HTTPTransportProtocol] = None,
) -> ContentSourceProtocol:
    return RoutingContentSource(
        local=LocalFileContentSource(encoding=config.encoding),
        remote=RemoteContentSource(transport=transport, user_agent=config.user_agent, timeout=config.timeout),
    )
