"""Reducer middleware that traces every transition."""

import functools
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any

from ..channel import ConsoleChannel, IDiagnosticChannel
from ..config import INIT_ACTION
from ..formatting import now_ms
from ..logging_config import get_logger
from ..models import LoggerOptions, TraceEntry, action_type
from ..policy import is_allowed
from ..poster import ILogPoster, RemotePosterAdapter
from ..printer import StructuredPrinter

logger = get_logger(__name__)

Reducer = Callable[[Any, Any], Any]


class StoreLogger:
    """
    Drop-in replacement for a reducer.

    Each call runs the wrapped reducer, records a TraceEntry and sends it
    to the printer and (if one was given) the log poster, subject to their
    filters. The reducer's return value is passed through untouched.
    """

    def __init__(
        self,
        reducer: Reducer,
        options: LoggerOptions | Mapping[str, Any] | None = None,
        log_poster: ILogPoster | None = None,
        channel: IDiagnosticChannel | None = None,
    ):
        if not isinstance(options, LoggerOptions):
            options = LoggerOptions.from_mapping(options)

        # Before our own attributes: update_wrapper copies reducer.__dict__.
        functools.update_wrapper(self, reducer)

        self._reducer = reducer
        self._options = options
        self._channel = channel if channel is not None else ConsoleChannel(
            colorize=options.supports_color
        )
        self._printer = StructuredPrinter(options, self._channel)
        self._poster = (
            RemotePosterAdapter(options, log_poster) if log_poster is not None else None
        )

        # Previous trace record; empty until the first transition.
        self._last_trace: Any = {}

    @property
    def options(self) -> LoggerOptions:
        return self._options

    @property
    def last_trace(self) -> Any:
        """Entry recorded by the most recent successful transition."""
        return self._last_trace

    @property
    def printer(self) -> StructuredPrinter:
        return self._printer

    @property
    def poster(self) -> RemotePosterAdapter | None:
        return self._poster

    def __call__(self, state: Any, action: Any) -> Any:
        options = self._options

        started = now_ms()
        started_time = datetime.now()
        prev_state = options.state_transformer(self._last_trace)

        # Reducer errors propagate; the last trace stays as it was.
        next_state = self._reducer(state, action)

        entry = TraceEntry(
            started=started,
            started_time=started_time,
            action=action,
            prev_state=prev_state,
            took=now_ms() - started,
            next_state=options.state_transformer(next_state),
        )
        self._last_trace = entry

        kind = action_type(action)
        if kind == INIT_ACTION:
            logger.debug("Skipping init action %s", kind)
            return next_state

        if is_allowed(action, options.filter):
            self._printer.print_entries([entry])

        if self._poster is not None and is_allowed(action, options.poster_options):
            self._poster.post_entries([entry])

        return next_state


def store_logger(
    options: LoggerOptions | Mapping[str, Any] | None = None,
    log_poster: ILogPoster | None = None,
    channel: IDiagnosticChannel | None = None,
) -> Callable[[Reducer], StoreLogger]:
    """
    Build a reducer decorator.

    Args:
        options: LoggerOptions or a dict of option overrides.
        log_poster: Optional remote sink; nothing is posted without one.
        channel: Diagnostic channel for printed groups. Defaults to a
                 ConsoleChannel over the "store_logger.console" logger.

    Returns:
        Function wrapping a reducer in a StoreLogger. Each wrapped reducer
        gets its own trace history.

    Example:
        @store_logger({"collapsed": True})
        def counter(state, action):
            ...
    """
    if not isinstance(options, LoggerOptions):
        options = LoggerOptions.from_mapping(options)

    def wrap(reducer: Reducer) -> StoreLogger:
        return StoreLogger(reducer, options, log_poster=log_poster, channel=channel)

    return wrap
