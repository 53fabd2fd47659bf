"""imgcast: conversion between Python values and typed image-library values.

Every caster offers ``load(value)`` (returns ``None`` when the value is not
convertible) and ``cast(value)`` (projects back onto the narrowest Python
type).  ``ImageOrPixelResolver`` is the one place that raises
``ConversionError`` once all alternatives are exhausted.
"""

import logging

from .casters import (
    BUILTIN_CASTERS,
    ArrayCaster,
    BoolCaster,
    BooleanArrayCaster,
    ComplexCaster,
    DataTypeCaster,
    EnumStringCaster,
    FloatArrayCaster,
    FloatCaster,
    ImageCaster,
    IntegerArrayCaster,
    IntegerCaster,
    PixelCaster,
    RangeCaster,
    SAMPLE_KINDS,
    SampleCaster,
    SampleKind,
    ShapeKindCaster,
    StringArrayCaster,
    StringCaster,
    UnsignedArrayCaster,
    UnsignedCaster,
    python_type,
)
from .core import (
    CastNode,
    CastRegistry,
    Caster,
    ConversionError,
    LoadFn,
    UnknownNameError,
    ValueMatcher,
)
from .factory import build_array_caster, build_default_resolver, image_or_pixel
from .image import Image
from .matchers import (
    AlwaysMatcher,
    IsBool,
    IsBuffer,
    IsComplex,
    IsFloat,
    IsInteger,
    IsList,
    IsSequence,
    IsSlice,
    IsText,
)
from .resolver import ImageOrPixelResolver
from .rng import random_number_generator, seed_random_number_generator
from .types import DataType, Pixel, Range, Sample, ShapeKind

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # core
    "Caster",
    "CastNode",
    "CastRegistry",
    "ConversionError",
    "LoadFn",
    "UnknownNameError",
    "ValueMatcher",
    # types
    "DataType",
    "ShapeKind",
    "Range",
    "Sample",
    "Pixel",
    "Image",
    # matchers
    "AlwaysMatcher",
    "IsBool",
    "IsInteger",
    "IsFloat",
    "IsComplex",
    "IsText",
    "IsSequence",
    "IsList",
    "IsSlice",
    "IsBuffer",
    # casters
    "BUILTIN_CASTERS",
    "BoolCaster",
    "IntegerCaster",
    "UnsignedCaster",
    "FloatCaster",
    "ComplexCaster",
    "StringCaster",
    "ArrayCaster",
    "UnsignedArrayCaster",
    "IntegerArrayCaster",
    "FloatArrayCaster",
    "BooleanArrayCaster",
    "StringArrayCaster",
    "EnumStringCaster",
    "DataTypeCaster",
    "ShapeKindCaster",
    "RangeCaster",
    "SAMPLE_KINDS",
    "SampleKind",
    "SampleCaster",
    "python_type",
    "PixelCaster",
    "ImageCaster",
    # resolver / factory
    "ImageOrPixelResolver",
    "build_default_resolver",
    "build_array_caster",
    "image_or_pixel",
    # rng
    "random_number_generator",
    "seed_random_number_generator",
]
