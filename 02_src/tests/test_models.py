"""Tests for data models."""

import dataclasses
from datetime import datetime

import pytest

from store_logger.config import EMPTY_STATE
from store_logger.errors import ConfigurationError
from store_logger.models import (
    FilterSpec,
    Fixed,
    LoggerColors,
    LoggerOptions,
    PerFacet,
    PosterOptions,
    ServerLogObject,
    TraceEntry,
    action_type,
    previous_state,
)


class TestTraceEntry:
    """Tests for TraceEntry model."""

    def test_create_entry(self, make_entry):
        """Test creating a TraceEntry."""
        entry = make_entry(next_state=3, took=1.25)
        assert entry.action == {"type": "INC"}
        assert entry.next_state == 3
        assert entry.took == 1.25
        assert entry.error is None

    def test_entry_is_frozen(self, make_entry):
        """Test that entries can't be modified once built."""
        entry = make_entry()
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.next_state = 5


class TestPreviousState:
    """Tests for previous_state()."""

    def test_empty_record(self):
        """Test that the empty starting record reads as EMPTY_STATE."""
        assert previous_state({}) == EMPTY_STATE

    def test_trace_entry_record(self, make_entry):
        """Test that a previous entry yields its next state."""
        assert previous_state(make_entry(next_state={"count": 2})) == {"count": 2}

    def test_falsy_state_is_kept(self, make_entry):
        """Test that a falsy but present state isn't shown as empty."""
        assert previous_state(make_entry(next_state=0)) == 0

    def test_mapping_record(self):
        """Test that mapping-shaped records are read by key."""
        assert previous_state({"next_state": "x"}) == "x"


class TestActionType:
    """Tests for action_type()."""

    def test_mapping_action(self):
        assert action_type({"type": "INC"}) == "INC"

    def test_object_action(self):
        class Action:
            type = "DEC"

        assert action_type(Action()) == "DEC"

    def test_missing_type(self):
        assert action_type({}) is None
        assert action_type(object()) is None


class TestServerLogObject:
    """Tests for ServerLogObject model."""

    def test_only_set_fields_in_payload(self):
        """Test that unset facets are absent from the payload."""
        obj = ServerLogObject(title="action INC", next_state=1)
        assert obj.model_fields_set == {"title", "next_state"}
        assert obj.to_payload() == {"title": "action INC", "nextState": 1}

    def test_camel_case_keys(self):
        """Test that facets are sent with camelCase keys."""
        obj = ServerLogObject(
            title="t", prev_state=0, action={"type": "A"}, error="e", next_state=1
        )
        assert set(obj.to_payload()) == {"title", "prevState", "action", "error", "nextState"}

    def test_unknown_values_are_serialized(self):
        """Test that values JSON doesn't know are turned into strings."""
        when = datetime(2024, 1, 1)
        obj = ServerLogObject(title="t", next_state={"at": when, "tags": {"a"}})
        payload = obj.to_payload()
        assert payload["nextState"]["at"] == "2024-01-01T00:00:00"
        assert payload["nextState"]["tags"] == ["a"]


class TestLoggerOptions:
    """Tests for LoggerOptions model."""

    def test_defaults(self):
        """Test the default option values."""
        options = LoggerOptions()
        assert options.level == Fixed("log")
        assert options.collapsed is False
        assert options.duration is True
        assert options.timestamp is True
        assert options.state_transformer("s") == "s"
        assert options.action_transformer("a") == "a"
        assert options.filter.whitelist == frozenset()
        assert options.filter.blacklist == frozenset()
        assert isinstance(options.poster_options.level, PerFacet)

    def test_default_colors(self):
        """Test the default color hints."""
        colors = LoggerOptions().colors
        assert colors.title is None
        assert colors.prev_state({}) == "#9E9E9E"
        assert colors.action({}) == "#03A9F4"
        assert colors.next_state({}) == "#4CAF50"
        assert colors.error("e", {}) == "#F20404"

    def test_supports_color_false_disables_colors(self):
        """Test that colors are dropped when the output can't render them."""
        options = LoggerOptions(supports_color=False)
        assert options.colors == LoggerColors.disabled()

    def test_from_mapping_merges_over_defaults(self):
        """Test building options from a plain dict."""
        options = LoggerOptions.from_mapping(
            {"collapsed": True, "filter": {"blacklist": ["NOISY"]}, "level": "info"}
        )
        assert options.collapsed is True
        assert options.filter == FilterSpec(blacklist=["NOISY"])
        assert options.level == Fixed("info")
        assert options.duration is True

    def test_from_mapping_none(self):
        """Test that no overrides yields defaults."""
        assert LoggerOptions.from_mapping(None).level == Fixed("log")

    def test_from_mapping_unknown_key(self):
        """Test that unknown option names are rejected."""
        with pytest.raises(ConfigurationError, match="colours"):
            LoggerOptions.from_mapping({"colours": {}})

    def test_from_mapping_bad_nested_key(self):
        """Test that unknown nested keys are rejected."""
        with pytest.raises(ConfigurationError):
            LoggerOptions.from_mapping({"poster_options": {"levels": "log"}})

    def test_none_sub_options(self):
        """Test that None poster options and colors fall back to usable values."""
        options = LoggerOptions.from_mapping({"poster_options": None, "colors": None})
        assert options.poster_options == PosterOptions()
        assert options.colors == LoggerColors.disabled()

    def test_poster_options_from_mapping(self):
        """Test that poster options accept raw level values."""
        options = LoggerOptions(poster_options={"whitelist": ["INC"], "level": "error"})
        assert isinstance(options.poster_options, PosterOptions)
        assert options.poster_options.whitelist == frozenset({"INC"})
        assert options.poster_options.level == Fixed("error")


class TestFilterSpec:
    """Tests for FilterSpec model."""

    def test_string_rejected(self):
        """Test that a bare string is not mistaken for a list of types."""
        with pytest.raises(ConfigurationError):
            FilterSpec(whitelist="INC")

    def test_lists_become_frozensets(self):
        spec = FilterSpec(whitelist=["A", "B"], blacklist=("C",))
        assert spec.whitelist == frozenset({"A", "B"})
        assert spec.blacklist == frozenset({"C"})
