from __future__ import annotations

from krokiprep.core.config import PreprocessConfig, build_content_source
from krokiprep.core.errors import (
    CycleError,
    DuplicateIncludeError,
    ParseError,
    PreprocessError,
    ReadError,
)
from krokiprep.diagnostics import CollectingDiagnosticsSink, LoggingDiagnosticsSink
from krokiprep.io.content_sources import (
    InMemoryContentSource,
    LocalFileContentSource,
    RemoteContentSource,
    RoutingContentSource,
)
from krokiprep.processing.includes import PlantUmlIncludeExpander, expand_includes
from krokiprep.processing.vegalite import VegaLiteDataInliner, inline_data_references

__version__ = '0.3.0'

__all__ = [
    'expand_includes',
    'inline_data_references',
    'PlantUmlIncludeExpander',
    'VegaLiteDataInliner',
    'PreprocessConfig',
    'build_content_source',
    'PreprocessError',
    'ParseError',
    'ReadError',
    'CycleError',
    'DuplicateIncludeError',
    'LocalFileContentSource',
    'RemoteContentSource',
    'RoutingContentSource',
    'InMemoryContentSource',
    'LoggingDiagnosticsSink',
    'CollectingDiagnosticsSink',
]
