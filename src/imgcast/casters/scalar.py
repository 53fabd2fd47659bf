"""Scalar element casters.

These convert one Python value into one plain Python scalar and are the
element converters used by ``ArrayCaster`` and by the Sample/Pixel casters.
They *convert* rather than *classify*: ``FloatCaster`` accepts ``3`` and
returns ``3.0``.  Classification (which tag a value denotes) is the job of
the matchers in ``imgcast.matchers``.

Conversion rules
----------------
bool     any number (numpy scalars included) → ``bool(x)``
int      integral values and ``__index__`` objects, within signed 64-bit
uint     as ``int``, within unsigned 64-bit
float    real numbers
complex  any number
str      ``str`` as-is, ``bytes`` decoded as UTF-8

Text never converts to a number, floats never convert to integers.

Exports
-------
BUILTIN_CASTERS
    Dictionary mapping type names to caster instances.
    Default types: bool, int, uint, float, complex, str.
"""

from __future__ import annotations

import logging
import numbers
import operator
from typing import Any, Optional

import numpy

from ..core import Caster

logger = logging.getLogger(__name__)

_SINT64_MIN = -(2 ** 63)
_SINT64_MAX = 2 ** 63 - 1
_UINT64_MAX = 2 ** 64 - 1


def _as_index(value: Any) -> Optional[int]:
    if isinstance(value, (str, bytes)):
        return None
    if isinstance(value, numpy.bool_):
        return int(value)
    try:
        return operator.index(value)
    except TypeError:
        return None


class BoolCaster(Caster[bool]):
    name = "bool"

    def load(self, src: Any) -> Optional[bool]:
        if isinstance(src, (numbers.Number, numpy.bool_)):
            return bool(src)
        return None

    def cast(self, value: bool) -> bool:
        return bool(value)


class IntegerCaster(Caster[int]):
    """Signed 64-bit integer."""

    name = "int"

    def load(self, src: Any) -> Optional[int]:
        value = _as_index(src)
        if value is None or not _SINT64_MIN <= value <= _SINT64_MAX:
            return None
        return value

    def cast(self, value: int) -> int:
        return int(value)


class UnsignedCaster(Caster[int]):
    """Unsigned 64-bit integer; negative values do not convert."""

    name = "uint"

    def load(self, src: Any) -> Optional[int]:
        value = _as_index(src)
        if value is None or not 0 <= value <= _UINT64_MAX:
            return None
        return value

    def cast(self, value: int) -> int:
        return int(value)


class FloatCaster(Caster[float]):
    name = "float"

    def load(self, src: Any) -> Optional[float]:
        if isinstance(src, (numbers.Real, numpy.bool_)):
            return float(src)
        return None

    def cast(self, value: float) -> float:
        return float(value)


class ComplexCaster(Caster[complex]):
    name = "complex"

    def load(self, src: Any) -> Optional[complex]:
        if isinstance(src, (numbers.Complex, numpy.bool_)):
            return complex(src)
        return None

    def cast(self, value: complex) -> complex:
        return complex(value)


class StringCaster(Caster[str]):
    name = "str"

    def load(self, src: Any) -> Optional[str]:
        if isinstance(src, str):
            return src
        if isinstance(src, bytes):
            try:
                return src.decode("utf-8")
            except UnicodeDecodeError:
                logger.debug("str: bytes %r are not valid UTF-8", src)
                return None
        return None

    def cast(self, value: str) -> str:
        return str(value)


BUILTIN_CASTERS: dict[str, Caster] = {
    "bool": BoolCaster(),
    "int": IntegerCaster(),
    "uint": UnsignedCaster(),
    "float": FloatCaster(),
    "complex": ComplexCaster(),
    "str": StringCaster(),
}
