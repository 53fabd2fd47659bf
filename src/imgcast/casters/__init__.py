"""Casters sub-package: concrete ``Caster`` implementations, one module per target.

scalar      – bool / int / uint / float / complex / str element casters
array       – sequence-or-scalar → list of one element type
enum_string – text ↔ DataType / ShapeKind
range       – slice / int ↔ Range
sample      – Python scalar ↔ Sample (ordered tag dispatch)
pixel       – scalar or list ↔ Pixel
image       – buffer ↔ Image
"""

from .array import (
    ArrayCaster,
    UnsignedArrayCaster, IntegerArrayCaster, FloatArrayCaster,
    BooleanArrayCaster, StringArrayCaster,
)
from .enum_string import EnumStringCaster, DataTypeCaster, ShapeKindCaster
from .image import ImageCaster
from .pixel import PixelCaster
from .range import RangeCaster
from .sample import SAMPLE_KINDS, SampleKind, SampleCaster, python_type
from .scalar import (
    BUILTIN_CASTERS,
    BoolCaster, IntegerCaster, UnsignedCaster,
    FloatCaster, ComplexCaster, StringCaster,
)

__all__ = [
    # scalar
    "BUILTIN_CASTERS",
    "BoolCaster",
    "IntegerCaster",
    "UnsignedCaster",
    "FloatCaster",
    "ComplexCaster",
    "StringCaster",
    # array
    "ArrayCaster",
    "UnsignedArrayCaster",
    "IntegerArrayCaster",
    "FloatArrayCaster",
    "BooleanArrayCaster",
    "StringArrayCaster",
    # enum_string
    "EnumStringCaster",
    "DataTypeCaster",
    "ShapeKindCaster",
    # range
    "RangeCaster",
    # sample
    "SAMPLE_KINDS",
    "SampleKind",
    "SampleCaster",
    "python_type",
    # pixel
    "PixelCaster",
    # image
    "ImageCaster",
]
