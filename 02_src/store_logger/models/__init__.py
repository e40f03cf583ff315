"""Core data models for store_logger."""

from .levels import (
    ACTION,
    ERROR,
    FACETS,
    NEXT_STATE,
    PREV_STATE,
    Fixed,
    LevelSpec,
    PerAction,
    PerFacet,
    as_level_spec,
)
from .options import (
    FilterSpec,
    LoggerColors,
    LoggerOptions,
    PosterOptions,
    default_poster_level,
    identity,
)
from .trace import ServerLogObject, TraceEntry, action_type, previous_state

__all__ = [
    # Trace
    "TraceEntry",
    "ServerLogObject",
    "action_type",
    "previous_state",
    # Levels
    "Fixed",
    "PerAction",
    "PerFacet",
    "LevelSpec",
    "as_level_spec",
    "FACETS",
    "PREV_STATE",
    "ACTION",
    "ERROR",
    "NEXT_STATE",
    # Options
    "FilterSpec",
    "PosterOptions",
    "LoggerColors",
    "LoggerOptions",
    "default_poster_level",
    "identity",
]
