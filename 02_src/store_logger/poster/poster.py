"""Remote poster adapter: forwards sparse trace objects to a log poster."""

from typing import Protocol

from ..buffer import read_buffer
from ..models import (
    ACTION,
    ERROR,
    NEXT_STATE,
    PREV_STATE,
    LoggerOptions,
    ServerLogObject,
    TraceEntry,
)
from ..policy import resolve_level


class ILogPoster(Protocol):
    """Caller-supplied sink that ships log objects to a server."""

    def post_log(self, server_log: ServerLogObject) -> None:
        """Deliver one log object. The return value is ignored."""
        ...


class RemotePosterAdapter:
    """Builds one ServerLogObject per entry and hands it to the poster."""

    def __init__(self, options: LoggerOptions, log_poster: ILogPoster):
        self._options = options
        self._log_poster = log_poster

    def post_entries(self, entries: list[TraceEntry]) -> None:
        """Post every entry, then empty the list."""
        level = self._options.poster_options.level

        for view in read_buffer(entries, self._options):
            facets = {}

            if resolve_level(level, view.action, [view.prev_state], PREV_STATE):
                facets[PREV_STATE] = view.prev_state
            if resolve_level(level, view.action, [view.action], ACTION):
                facets[ACTION] = view.action
            if view.error is not None and resolve_level(
                level, view.action, [view.error, view.prev_state], ERROR
            ):
                facets[ERROR] = view.error
            if resolve_level(level, view.action, [view.next_state], NEXT_STATE):
                facets[NEXT_STATE] = view.next_state

            # Poster failures are not caught here.
            self._log_poster.post_log(ServerLogObject(title=view.title, **facets))

        entries.clear()
