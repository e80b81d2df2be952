"""
Tests for the event filter model.

These tests verify:
    - EventSpec parsing from lists, strings and None
    - Polarity and event name extraction
    - Warnings for mixed polarity
    - Handler selection for a dispatched event
"""

import warnings

import pytest

from eventspec.model import (
    EventSpec,
    EventSpecError,
    HandlerFilter,
    Polarity,
    applicable_handlers,
)


class TestParse:
    """Test building specs from `on` values."""

    def test_none_is_kept_distinct_from_empty(self):
        assert EventSpec.parse(None).events is None
        assert EventSpec.parse([]).events == ()

    def test_sequence_kept_verbatim(self):
        spec = EventSpec.parse(["save", " update", "", None])
        assert spec.events == ("save", " update", "", None)

    def test_comma_separated_string(self):
        spec = EventSpec.parse("save, update ,,delete")
        assert spec.events == ("save", "update", "delete")

    def test_blank_string_is_empty_filter(self):
        assert EventSpec.parse("  ").events == ()

    def test_non_string_entry_rejected(self):
        with pytest.raises(EventSpecError, match="must be strings"):
            EventSpec.parse(["save", 3])

    def test_non_sequence_rejected(self):
        with pytest.raises(EventSpecError):
            EventSpec.parse(42)

    def test_mapping_rejected(self):
        """A mapping is not read as its keys."""
        with pytest.raises(EventSpecError, match="got dict"):
            EventSpec.parse({"save": 1})

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            EventSpec.parse([object()])

    def test_mixed_polarity_warns(self):
        with pytest.warns(UserWarning, match="Mixed polarity"):
            EventSpec.parse(["save", "!delete"])

    def test_consistent_filter_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            EventSpec.parse(["!view", "!cancel"])
            EventSpec.parse("save, update")

    def test_immutable(self):
        spec = EventSpec.parse(["save"])
        with pytest.raises(AttributeError):
            spec.events = ("view",)


class TestPolarity:
    """Test polarity and derived properties."""

    def test_unrestricted(self):
        assert EventSpec.parse(None).polarity is Polarity.UNRESTRICTED
        assert EventSpec.parse([]).is_unrestricted

    def test_positive(self):
        assert EventSpec.parse(["save"]).polarity is Polarity.POSITIVE

    def test_negative(self):
        assert EventSpec.parse("!view").polarity is Polarity.NEGATIVE

    def test_blank_first_entry_is_positive(self):
        assert EventSpec.parse([""]).polarity is Polarity.POSITIVE

    def test_mixed_entries(self):
        spec = EventSpec(events=("!view", "save", "!cancel", "", None))
        assert spec.mixed_entries == ["save"]

    def test_event_names(self):
        spec = EventSpec(events=("!view", "", None, "!view", "!cancel", "!"))
        assert spec.event_names == ["view", "cancel"]


class TestApplies:
    """Test evaluation through the model."""

    def test_agrees_with_raw_filter(self):
        spec = EventSpec.parse(["save", "update"])
        assert spec.applies("save") is True
        assert spec.applies("view") is False

    def test_negative(self):
        spec = EventSpec.parse("!view")
        assert spec.applies("save") is True
        assert spec.applies("view") is False

    def test_default_applies_to_everything(self):
        assert EventSpec().applies("anything") is True


class TestApplicableHandlers:
    """Test selecting handlers for an event."""

    def build_filters(self):
        return [
            HandlerFilter("validateUser", EventSpec.parse(["save", "update"])),
            HandlerFilter("audit", EventSpec.parse("!view")),
            HandlerFilter("always"),
        ]

    def test_order_is_kept(self):
        assert applicable_handlers(self.build_filters(), "save") == ["validateUser", "audit", "always"]

    def test_excluded_handlers_dropped(self):
        assert applicable_handlers(self.build_filters(), "view") == ["always"]

    def test_no_filters(self):
        assert applicable_handlers([], "save") == []
