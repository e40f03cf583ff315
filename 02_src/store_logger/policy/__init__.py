"""Level and filter policies."""

from .filters import IActionFilter, is_allowed
from .levels import resolve_level

__all__ = ["IActionFilter", "is_allowed", "resolve_level"]
