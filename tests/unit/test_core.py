"""Tests for core infrastructure."""

import pytest
from imgcast import (
    AlwaysMatcher,
    CastNode,
    CastRegistry,
    Caster,
    ConversionError,
    UnknownNameError,
    ValueMatcher,
)


class EvenMatcher(ValueMatcher):
    def matches(self, value):
        return isinstance(value, int) and value % 2 == 0


class DoublingCaster(Caster):
    name = "double"

    def load(self, src):
        return src * 2 if isinstance(src, int) else None

    def cast(self, value):
        return value // 2


class TestConversionError:
    """Test ConversionError and UnknownNameError."""

    def test_message_names_target(self):
        """Message names the target type."""
        err = ConversionError("Image")

        assert str(err) == "cannot convert input to Image"
        assert err.target == "Image"
        assert err.value is None

    def test_message_includes_value(self):
        """Offending value is appended when given."""
        err = ConversionError("Image", "not-an-image")

        assert str(err) == "cannot convert input to Image: 'not-an-image'"
        assert err.value == "not-an-image"

    def test_is_type_error(self):
        """ConversionError is a TypeError."""
        assert issubclass(ConversionError, TypeError)

    def test_unknown_name_is_lookup_error(self):
        """UnknownNameError is both a ConversionError and a LookupError."""
        err = UnknownNameError("DataType", "NOPE")

        assert isinstance(err, ConversionError)
        assert isinstance(err, LookupError)
        assert "NOPE" in str(err)


class TestCaster:
    """Test the Caster base class."""

    def test_call_returns_loaded_value(self):
        """Calling a caster returns the loaded value."""
        assert DoublingCaster()(4) == 8

    def test_call_raises_on_soft_failure(self):
        """Calling a caster turns a soft failure into ConversionError."""
        with pytest.raises(ConversionError, match="cannot convert input to double"):
            DoublingCaster()("x")


class TestCastRegistry:
    """Test CastRegistry dispatch."""

    def test_empty_registry_returns_none(self):
        """Empty registry never matches."""
        registry = CastRegistry()

        assert registry.load(1) is None
        assert registry.select(1) is None

    def test_priority_order(self):
        """Nodes are walked by descending priority."""
        registry = CastRegistry()
        registry.register(CastNode(name="low", priority=1, load=lambda v: "low"))
        registry.register(CastNode(name="high", priority=10, load=lambda v: "high"))

        assert registry.load(0) == "high"
        assert [n.name for n in registry.nodes()] == ["high", "low"]

    def test_equal_priority_keeps_registration_order(self):
        """Equal priorities keep registration order."""
        registry = CastRegistry()
        registry.register(CastNode(name="first", priority=0, load=lambda v: "first"))
        registry.register(CastNode(name="second", priority=0, load=lambda v: "second"))

        assert registry.load(0) == "first"

    def test_matcher_filters_nodes(self):
        """Nodes whose matcher rejects the value are skipped."""
        registry = CastRegistry()
        registry.register(CastNode(name="even", priority=10, load=lambda v: "even", matcher=EvenMatcher()))
        registry.register(CastNode(name="any", priority=0, load=lambda v: "any", matcher=AlwaysMatcher()))

        assert registry.load(2) == "even"
        assert registry.load(3) == "any"
        assert registry.select(2).name == "even"
        assert registry.select(3).name == "any"

    def test_exclusive_node_stops_walk(self):
        """A matching exclusive node that fails ends the walk."""
        registry = CastRegistry()
        registry.register(CastNode(name="claims", priority=10, load=lambda v: None))
        registry.register(CastNode(name="never", priority=0, load=lambda v: "never"))

        assert registry.load(1) is None

    def test_non_exclusive_node_falls_through(self):
        """A failing non-exclusive node lets the next candidate try."""
        registry = CastRegistry()
        registry.register(CastNode(name="tries", priority=10, load=lambda v: None, exclusive=False))
        registry.register(CastNode(name="fallback", priority=0, load=lambda v: "fallback"))

        assert registry.load(1) == "fallback"

    def test_falsy_results_count_as_matches(self):
        """Only None is a soft failure; other falsy values are results."""
        registry = CastRegistry()
        registry.register(CastNode(name="zero", priority=0, load=lambda v: 0))

        assert registry.load("x") == 0
