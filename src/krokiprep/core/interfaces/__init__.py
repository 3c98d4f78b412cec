from .content import ContentSourceProtocol
from .diagnostics import DiagnosticsSinkProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .net import HTTPTransportProtocol

__all__ = [
    'ContentSourceProtocol',
    'DiagnosticsSinkProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'HTTPTransportProtocol',
]
