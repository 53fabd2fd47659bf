"""Tests for build_default_resolver, build_array_caster and image_or_pixel."""

import numpy
import pytest
from imgcast import (
    ArrayCaster,
    ConversionError,
    DataType,
    FloatCaster,
    Image,
    Pixel,
    UnsignedCaster,
    build_array_caster,
    build_default_resolver,
    image_or_pixel,
)


class TestFactory:
    """Test build_default_resolver and image_or_pixel."""

    def test_default_resolver(self):
        """Default resolver handles buffers and pixels."""
        resolver = build_default_resolver()

        assert resolver.resolve(numpy.zeros((2, 3))).sizes == (3, 2)
        assert resolver.resolve(7).pixel() == Pixel(DataType.SINT64, (7,))

    def test_reverse_dimensions(self):
        """reverse_dimensions is passed to the image caster."""
        resolver = build_default_resolver(reverse_dimensions=False)

        assert resolver.resolve(numpy.zeros((2, 3))).sizes == (2, 3)

    def test_converters(self):
        """Extra converters are wired at priority 5."""
        marker = Image.from_buffer(numpy.zeros(1))
        resolver = build_default_resolver(converters={"marker": lambda v: marker if v == "marker" else None})

        assert resolver.resolve("marker") is marker
        with pytest.raises(ConversionError):
            resolver.resolve("other")

    def test_image_or_pixel(self):
        """Module-level helper uses the default resolver."""
        assert image_or_pixel(5).pixel() == Pixel(DataType.SINT64, (5,))
        with pytest.raises(ConversionError):
            image_or_pixel("not-an-image")


class TestBuildArrayCaster:
    """Test build_array_caster factory."""

    def test_by_name(self):
        """Element caster can be given by name."""
        caster = build_array_caster("uint")

        assert isinstance(caster, ArrayCaster)
        assert caster.load([1, 2]) == [1, 2]
        assert caster.name == "uint[]"

    def test_by_instance(self):
        """Element caster can be given as an instance."""
        caster = build_array_caster(FloatCaster())

        assert caster.load(3) == [3.0]

    def test_custom_casters(self):
        """A custom caster mapping replaces the built-ins."""
        caster = build_array_caster("count", casters={"count": UnsignedCaster()})

        assert caster.load([2, 4]) == [2, 4]

    def test_unknown_name(self):
        """Unknown element names raise KeyError."""
        with pytest.raises(KeyError):
            build_array_caster("quaternion")
