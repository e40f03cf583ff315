"""Reducer logging middleware."""

from .channel import ConsoleChannel, IDiagnosticChannel
from .config import INIT_ACTION, Settings, detect_color_support, load_settings
from .errors import (
    ConfigurationError,
    LogPostError,
    StoreLoggerError,
    UnknownSeverityError,
)
from .middleware import StoreLogger, store_logger
from .models import (
    Fixed,
    FilterSpec,
    LoggerColors,
    LoggerOptions,
    PerAction,
    PerFacet,
    PosterOptions,
    ServerLogObject,
    TraceEntry,
)
from .policy import is_allowed, resolve_level
from .poster import HttpLogPoster, ILogPoster, RemotePosterAdapter
from .printer import StructuredPrinter

__all__ = [
    # Middleware
    "store_logger",
    "StoreLogger",
    "INIT_ACTION",
    # Models
    "TraceEntry",
    "ServerLogObject",
    "LoggerOptions",
    "LoggerColors",
    "FilterSpec",
    "PosterOptions",
    "Fixed",
    "PerAction",
    "PerFacet",
    # Policies
    "resolve_level",
    "is_allowed",
    # Sinks
    "IDiagnosticChannel",
    "ConsoleChannel",
    "StructuredPrinter",
    "ILogPoster",
    "RemotePosterAdapter",
    "HttpLogPoster",
    # Config
    "Settings",
    "load_settings",
    "detect_color_support",
    # Errors
    "StoreLoggerError",
    "ConfigurationError",
    "UnknownSeverityError",
    "LogPostError",
]
