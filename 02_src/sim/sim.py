"""SIM implementation - hardcoded counter scenario for trying the logger."""

from typing import Any, Protocol

from store_logger import INIT_ACTION
from store_logger.logging_config import get_logger
from store_logger.middleware import Reducer

logger = get_logger(__name__)

SCENARIO: list[dict[str, Any]] = [
    {"type": INIT_ACTION},
    {"type": "INCREMENT"},
    {"type": "INCREMENT"},
    {"type": "ADD", "amount": 5},
    {"type": "DECREMENT"},
    {"type": "RESET"},
]


def counter_reducer(state: dict | None, action: dict) -> dict:
    """Reducer for a single counter."""
    state = state or {"count": 0}
    kind = action.get("type")

    if kind == "INCREMENT":
        return {**state, "count": state["count"] + 1}
    if kind == "DECREMENT":
        return {**state, "count": state["count"] - 1}
    if kind == "ADD":
        return {**state, "count": state["count"] + action.get("amount", 0)}
    if kind == "RESET":
        return {"count": 0}
    return state


class ISim(Protocol):
    """Replays a scenario through a reducer."""

    def run(self) -> Any:
        """Dispatch every scenario action; return the final state."""
        ...


class Sim:
    """SIM with a hardcoded counter scenario."""

    def __init__(
        self,
        reducer: Reducer,
        actions: list[dict[str, Any]] | None = None,
        initial_state: Any = None,
    ):
        self._reducer = reducer
        self._actions = actions if actions is not None else SCENARIO
        self._state = initial_state

    @property
    def state(self) -> Any:
        return self._state

    def run(self) -> Any:
        """Dispatch the scenario actions in order."""
        logger.info("SIM: dispatching %d actions", len(self._actions))

        for action in self._actions:
            self._state = self._reducer(self._state, action)

        logger.info("SIM: final state %r", self._state)
        return self._state
