"""Trace data models."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_core import to_jsonable_python

from ..config import EMPTY_STATE


@dataclass(frozen=True)
class TraceEntry:
    """One captured reducer transition."""

    started: float  # monotonic, ms
    started_time: datetime
    action: Any
    prev_state: Any  # state_transformer(previous trace record)
    took: float  # ms
    next_state: Any
    error: Any = None


def previous_state(record: Any) -> Any:
    """
    Read the state a trace record ended in.

    Works for TraceEntry objects and mapping-shaped records alike; the
    empty record the middleware starts from yields EMPTY_STATE.
    """
    if isinstance(record, Mapping):
        next_state = record.get("next_state")
    else:
        next_state = getattr(record, "next_state", None)
    return EMPTY_STATE if next_state is None else next_state


def action_type(action: Any) -> Any:
    """Type of an action: action["type"] for mappings, action.type otherwise."""
    if isinstance(action, Mapping):
        return action.get("type")
    return getattr(action, "type", None)


class ServerLogObject(BaseModel):
    """Sparse log object handed to a log poster. Only set fields are sent."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str
    prev_state: Any = None
    action: Any = None
    error: Any = None
    next_state: Any = None

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict with camelCase keys and only the facets that were set."""
        return to_jsonable_python(
            self.model_dump(by_alias=True, exclude_unset=True),
            serialize_unknown=True,
        )
