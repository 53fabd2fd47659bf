"""Tests for scalar element casters."""

import numpy
import pytest
from imgcast import (
    BUILTIN_CASTERS,
    BoolCaster,
    ComplexCaster,
    FloatCaster,
    IntegerCaster,
    StringCaster,
    UnsignedCaster,
)


class TestBoolCaster:
    """Test BoolCaster."""

    def test_converts_numbers(self):
        """Any number converts by truthiness."""
        caster = BoolCaster()

        assert caster.load(True) is True
        assert caster.load(0) is False
        assert caster.load(2.5) is True
        assert caster.load(numpy.bool_(True)) is True

    def test_rejects_text(self):
        """Text is not a boolean."""
        assert BoolCaster().load("True") is None
        assert BoolCaster().load(None) is None


class TestIntegerCaster:
    """Test IntegerCaster and UnsignedCaster."""

    def test_converts_integrals(self):
        """Integral values convert to int."""
        caster = IntegerCaster()

        assert caster.load(5) == 5
        assert caster.load(numpy.int32(-5)) == -5
        assert type(caster.load(numpy.int32(-5))) is int
        assert caster.load(True) == 1

    def test_rejects_floats_and_text(self):
        """Floats never convert to integers, nor does text."""
        caster = IntegerCaster()

        assert caster.load(5.0) is None
        assert caster.load(numpy.float64(5.0)) is None
        assert caster.load(1j) is None
        assert caster.load("5") is None

    def test_signed_64_bit_bounds(self):
        """Values outside signed 64-bit do not convert."""
        caster = IntegerCaster()

        assert caster.load(2 ** 63 - 1) == 2 ** 63 - 1
        assert caster.load(2 ** 63) is None
        assert caster.load(-(2 ** 63) - 1) is None

    def test_unsigned_rejects_negative(self):
        """UnsignedCaster rejects negative values."""
        caster = UnsignedCaster()

        assert caster.load(0) == 0
        assert caster.load(2 ** 64 - 1) == 2 ** 64 - 1
        assert caster.load(-1) is None

    def test_index_protocol(self):
        """Objects implementing __index__ convert."""

        class Index:
            def __index__(self):
                return 7

        assert IntegerCaster().load(Index()) == 7


class TestFloatAndComplexCasters:
    """Test FloatCaster and ComplexCaster."""

    def test_float_upcasts_integers(self):
        """Integers become floats."""
        assert FloatCaster().load(2) == 2.0
        assert type(FloatCaster().load(2)) is float

    def test_float_rejects_complex(self):
        """Complex numbers are not floats."""
        assert FloatCaster().load(1 + 2j) is None
        assert FloatCaster().load("1.0") is None

    def test_complex_accepts_any_number(self):
        """Every number converts to complex."""
        caster = ComplexCaster()

        assert caster.load(1 + 2j) == 1 + 2j
        assert caster.load(3) == 3 + 0j
        assert caster.load(1.5) == 1.5 + 0j
        assert caster.load("1j") is None


class TestStringCaster:
    """Test StringCaster."""

    def test_str_and_bytes(self):
        """str passes through, bytes are decoded."""
        caster = StringCaster()

        assert caster.load("abc") == "abc"
        assert caster.load(b"abc") == "abc"

    def test_invalid_utf8(self):
        """Undecodable bytes do not convert."""
        assert StringCaster().load(b"\xff\xfe") is None

    def test_rejects_non_text(self):
        """Numbers are not strings."""
        assert StringCaster().load(1) is None


class TestBuiltinCasters:
    """Test BUILTIN_CASTERS registry."""

    def test_names(self):
        """All element types are registered by name."""
        assert set(BUILTIN_CASTERS) == {"bool", "int", "uint", "float", "complex", "str"}

    @pytest.mark.parametrize("name", ["bool", "int", "uint", "float", "complex", "str"])
    def test_caster_name_matches_key(self, name):
        """Each caster's name is its registry key."""
        assert BUILTIN_CASTERS[name].name == name

    @pytest.mark.parametrize("name, value, expected", [
        ("bool", 1, True),
        ("int", numpy.uint8(3), 3),
        ("float", numpy.float32(0.5), 0.5),
        ("complex", numpy.complex64(1j), 1j),
        ("str", "x", "x"),
    ])
    def test_cast_returns_python_types(self, name, value, expected):
        """cast() returns plain Python scalars."""
        caster = BUILTIN_CASTERS[name]
        result = caster.cast(value)

        assert result == expected
        assert type(result) is type(expected)
