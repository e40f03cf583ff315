"""Reading a buffer of trace entries the way sinks display them."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from .formatting import build_title
from .models import LoggerOptions, TraceEntry, action_type, previous_state


@dataclass(frozen=True)
class LogView:
    """Display values for one buffered entry."""

    entry: TraceEntry
    action: Any  # transformed
    prev_state: Any
    next_state: Any
    took: float
    title: str

    @property
    def error(self) -> Any:
        return self.entry.error


def read_buffer(entries: list[TraceEntry], options: LoggerOptions) -> Iterator[LogView]:
    """
    Yield a LogView per entry, in order.

    When an entry has a successor in the same buffer, its next state and
    duration are taken from the successor, so batched flushes show the
    time until the next dispatch.
    """
    for index, entry in enumerate(entries):
        next_state = entry.next_state
        took = entry.took

        if index + 1 < len(entries):
            successor = entries[index + 1]
            next_state = previous_state(successor.prev_state)
            took = successor.started - entry.started

        action = options.action_transformer(entry.action)
        title = build_title(
            action_type(action),
            entry.started_time,
            took,
            timestamp=options.timestamp,
            duration=options.duration,
        )

        yield LogView(
            entry=entry,
            action=action,
            prev_state=previous_state(entry.prev_state),
            next_state=next_state,
            took=took,
            title=title,
        )
