"""Structured printer: renders trace entries as grouped console blocks."""

from collections.abc import Callable
from typing import Any, Protocol

from ..buffer import LogView, read_buffer
from ..channel import IDiagnosticChannel
from ..config import LOG_END_MARKER
from ..logging_config import get_logger
from ..models import ACTION, ERROR, NEXT_STATE, PREV_STATE, LoggerOptions, TraceEntry
from ..policy import resolve_level

logger = get_logger(__name__)


class IPrinter(Protocol):
    """Human-facing sink for trace entries."""

    def print_entries(self, entries: list[TraceEntry]) -> None:
        """Print and clear the given entries."""
        ...


class StructuredPrinter:
    """Prints one (optionally collapsed, colorized) group per trace entry."""

    def __init__(self, options: LoggerOptions, channel: IDiagnosticChannel):
        self._options = options
        self._channel = channel

    def print_entries(self, entries: list[TraceEntry]) -> None:
        """Print every entry, then empty the list so nothing is printed twice."""
        for view in read_buffer(entries, self._options):
            self._print_view(view)
        entries.clear()

    def _print_view(self, view: LogView) -> None:
        colors = self._options.colors
        title_color = self._hint(colors.title, view.action)

        try:
            if self._is_collapsed(view):
                self._channel.group_collapsed(view.title, color=title_color)
            else:
                self._channel.group(view.title, color=title_color)
        except Exception:
            self._channel.print("log", view.title)

        facets = [
            (PREV_STATE, "prev state", view.prev_state, [view.prev_state], colors.prev_state),
            (ACTION, "action", view.action, [view.action], colors.action),
        ]
        if view.error is not None:
            facets.append(
                (ERROR, "error", view.error, [view.error, view.prev_state], colors.error)
            )
        facets.append(
            (NEXT_STATE, "next state", view.next_state, [view.next_state], colors.next_state)
        )

        for facet, label, value, args, color_fn in facets:
            try:
                severity = resolve_level(self._options.level, view.action, args, facet)
                if not severity:
                    continue
                color = color_fn(*args) if color_fn else None
                self._channel.print(severity, label, value, color=color)
            except Exception:
                logger.warning(
                    "Failed to print %s for %r", label, view.title, exc_info=True
                )

        try:
            self._channel.group_end()
        except Exception:
            self._channel.print("log", LOG_END_MARKER)

    def _is_collapsed(self, view: LogView) -> bool:
        collapsed = self._options.collapsed
        if not callable(collapsed):
            return bool(collapsed)

        try:
            return bool(collapsed(lambda: view.next_state, view.action))
        except Exception:
            logger.warning("collapsed predicate failed for %r", view.title, exc_info=True)
            return False

    def _hint(self, color_fn: Callable[..., Any] | None, *args: Any) -> str | None:
        if color_fn is None:
            return None
        try:
            return color_fn(*args)
        except Exception:
            logger.warning("Title color function failed", exc_info=True)
            return None
