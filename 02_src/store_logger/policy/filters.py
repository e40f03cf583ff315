"""Action filter policy."""

from collections.abc import Collection
from typing import Any, Protocol

from ..models import action_type


class IActionFilter(Protocol):
    """Anything carrying a whitelist/blacklist of action types."""

    whitelist: Collection[str] | None
    blacklist: Collection[str] | None


def is_allowed(action: Any, action_filter: IActionFilter | None) -> bool:
    """Check whether an action may reach the sink guarded by action_filter."""
    if action_filter is None:
        return True

    kind = action_type(action)

    whitelist = getattr(action_filter, "whitelist", None)
    if whitelist:
        return kind in whitelist

    blacklist = getattr(action_filter, "blacklist", None)
    if not blacklist:
        return True
    return kind not in blacklist
