"""Level option variants."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from ..errors import ConfigurationError

PREV_STATE = "prev_state"
ACTION = "action"
ERROR = "error"
NEXT_STATE = "next_state"

FACETS = (PREV_STATE, ACTION, ERROR, NEXT_STATE)

# camelCase names accepted in per-facet mappings
FACET_ALIASES = {
    "prevState": PREV_STATE,
    "nextState": NEXT_STATE,
}


@dataclass(frozen=True)
class Fixed:
    """One severity for every facet. A falsy severity suppresses output."""

    severity: Any = "log"


@dataclass(frozen=True)
class PerAction:
    """Severity computed from the (transformed) action, same for every facet."""

    fn: Callable[[Any], Any]


@dataclass(frozen=True)
class PerFacet:
    """Facet name -> fixed severity or callable over the facet's values."""

    levels: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        levels = {}
        for name, level in self.levels.items():
            if not isinstance(name, str):
                raise ConfigurationError(f"Facet names must be strings, got {name!r}")
            levels[FACET_ALIASES.get(name, name)] = level
        object.__setattr__(self, "levels", levels)


LevelSpec = Union[Fixed, PerAction, PerFacet]


def as_level_spec(value: Any) -> LevelSpec:
    """
    Coerce a raw level option into a LevelSpec.

    Accepts an existing LevelSpec, a mapping (per-facet), a callable
    (per-action) or any other value (fixed, including None/False).
    """
    if isinstance(value, (Fixed, PerAction, PerFacet)):
        return value

    if isinstance(value, Mapping):
        return PerFacet(value)

    if callable(value):
        return PerAction(value)

    return Fixed(value)
