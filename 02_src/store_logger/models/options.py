"""Logger configuration models."""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field, fields
from typing import Any

from ..config import (
    ACTION_COLOR,
    ERROR_COLOR,
    NEXT_STATE_COLOR,
    PREV_STATE_COLOR,
    TITLE_COLOR,
)
from ..errors import ConfigurationError
from .levels import FACETS, PerFacet, as_level_spec

ColorFn = Callable[..., str | None]


def identity(value: Any) -> Any:
    return value


def _passthrough(payload: Any, *_: Any) -> Any:
    return payload


def _constant(color: str | None) -> ColorFn | None:
    if color is None:
        return None
    return lambda *_: color


def _action_types(name: str, values: Iterable[str] | None) -> frozenset[str]:
    if values is None:
        return frozenset()
    if isinstance(values, str):
        raise ConfigurationError(f"{name} must be a collection of action types, not a string")
    return frozenset(values)


@dataclass
class FilterSpec:
    """Whitelist/blacklist of action types. A non-empty whitelist wins."""

    whitelist: Iterable[str] | None = None
    blacklist: Iterable[str] | None = None

    def __post_init__(self):
        self.whitelist = _action_types("whitelist", self.whitelist)
        self.blacklist = _action_types("blacklist", self.blacklist)


def default_poster_level() -> PerFacet:
    """Every facet resolves to its own value, so present facets are posted."""
    return PerFacet({facet: _passthrough for facet in FACETS})


@dataclass
class PosterOptions:
    """Which actions reach the log poster and which facets it receives."""

    whitelist: Iterable[str] | None = None
    blacklist: Iterable[str] | None = None
    level: Any = field(default_factory=default_poster_level)

    def __post_init__(self):
        self.whitelist = _action_types("whitelist", self.whitelist)
        self.blacklist = _action_types("blacklist", self.blacklist)
        self.level = as_level_spec(self.level)


@dataclass
class LoggerColors:
    """Per-facet color hint functions. None prints that part plain."""

    title: ColorFn | None = _constant(TITLE_COLOR)
    prev_state: ColorFn | None = _constant(PREV_STATE_COLOR)
    action: ColorFn | None = _constant(ACTION_COLOR)
    next_state: ColorFn | None = _constant(NEXT_STATE_COLOR)
    error: ColorFn | None = _constant(ERROR_COLOR)

    @classmethod
    def disabled(cls) -> "LoggerColors":
        return cls(title=None, prev_state=None, action=None, next_state=None, error=None)


@dataclass
class LoggerOptions:
    """Options for store_logger(); every field is optional."""

    level: Any = "log"
    collapsed: bool | Callable[[Callable[[], Any], Any], bool] = False
    duration: bool = True
    timestamp: bool = True
    state_transformer: Callable[[Any], Any] = identity
    action_transformer: Callable[[Any], Any] = identity
    filter: FilterSpec | None = field(default_factory=FilterSpec)
    colors: LoggerColors | None = field(default_factory=LoggerColors)
    supports_color: bool = True
    poster_options: PosterOptions | None = field(default_factory=PosterOptions)

    def __post_init__(self):
        self.level = as_level_spec(self.level)

        if isinstance(self.filter, Mapping):
            self.filter = FilterSpec(**self.filter)
        if self.poster_options is None:
            self.poster_options = PosterOptions()
        elif isinstance(self.poster_options, Mapping):
            self.poster_options = PosterOptions(**self.poster_options)
        if self.colors is None:
            self.colors = LoggerColors.disabled()
        elif isinstance(self.colors, Mapping):
            self.colors = LoggerColors(**self.colors)

        if not self.supports_color:
            self.colors = LoggerColors.disabled()

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None) -> "LoggerOptions":
        """Build options from a plain dict, merged over the defaults."""
        if not values:
            return cls()

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigurationError(f"Unknown logger options: {', '.join(unknown)}")

        try:
            return cls(**values)
        except TypeError as e:
            raise ConfigurationError(f"Invalid logger options: {e}") from e
