"""Level resolution for trace facets."""

from collections.abc import Sequence
from typing import Any

from ..models import LevelSpec, PerAction, PerFacet, as_level_spec


def resolve_level(
    level: LevelSpec | Any,
    action: Any,
    facet_args: Sequence[Any],
    facet: str,
) -> Any:
    """
    Resolve the severity for one facet of a transition.

    Args:
        level: LevelSpec, or a raw option value coerced with as_level_spec.
        action: Transformed action; the argument of a PerAction function.
        facet_args: Values handed to a per-facet callable, in order.
        facet: Facet name (prev_state, action, error, next_state).

    Returns:
        Severity name, or a falsy value meaning "don't emit this facet".
    """
    level = as_level_spec(level)

    if isinstance(level, PerFacet):
        entry = level.levels.get(facet)
        if callable(entry):
            return entry(*facet_args)
        return entry

    if isinstance(level, PerAction):
        return level.fn(action)

    # Fixed
    return level.severity
