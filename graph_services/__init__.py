"""
Graph services — parsing, visibility filtering, diffing and serialization.
"""
from .parser_service import ParserService
from .filter_service import FilterService
from .diff_service import DiffService
from .serialization_service import ElementSerializer, SerializationConfig
from .exceptions import (
    ReconcilerError,
    RendererError,
    RendererQueryError,
    RendererCommandError,
    ReadinessTimeoutError,
    CommandParseError,
)

__all__ = [
    'ParserService',
    'FilterService',
    'DiffService',
    'ElementSerializer',
    'SerializationConfig',
    'ReconcilerError',
    'RendererError',
    'RendererQueryError',
    'RendererCommandError',
    'ReadinessTimeoutError',
    'CommandParseError',
]
