"""Value types produced and consumed by the casters.

Exports
-------
DataType
    Closed enumeration of sample representations; ``.value`` is the
    canonical name string.

ShapeKind
    Closed enumeration of tensor layouts; ``.value`` is the canonical name.

Range
    Strided index interval with sentinel-encoded open ends.

Sample
    One tagged numeric value (bool / int / float / complex).

Pixel
    Non-empty tuple of values sharing one tag.

All types are immutable and created fresh by every conversion.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Iterator, Tuple

import numpy

from .core import ConversionError, UnknownNameError


# ─────────────────────────────────────────────────────────────────────────────
# Name-keyed enumerations
# ─────────────────────────────────────────────────────────────────────────────


class _NamedEnum(enum.Enum):
    """Enum whose ``.value`` is its canonical name (string bijection)."""

    @classmethod
    def from_name(cls, name: str):
        """Exact-name lookup.  Raises ``UnknownNameError`` for unknown names."""
        try:
            return cls(name)
        except ValueError:
            raise UnknownNameError(cls.__name__, name) from None

    @property
    def name_string(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class DataType(_NamedEnum):
    """Sample representation of an image or pixel."""

    BIN = "BIN"
    UINT8 = "UINT8"
    UINT16 = "UINT16"
    UINT32 = "UINT32"
    UINT64 = "UINT64"
    SINT8 = "SINT8"
    SINT16 = "SINT16"
    SINT32 = "SINT32"
    SINT64 = "SINT64"
    SFLOAT = "SFLOAT"
    DFLOAT = "DFLOAT"
    SCOMPLEX = "SCOMPLEX"
    DCOMPLEX = "DCOMPLEX"

    # -- categories ---------------------------------------------------------

    @property
    def is_binary(self) -> bool:
        return self is DataType.BIN

    @property
    def is_unsigned(self) -> bool:
        return self.value.startswith("UINT")

    @property
    def is_signed(self) -> bool:
        return self.value.startswith("SINT") or self.is_float or self.is_complex

    @property
    def is_integer(self) -> bool:
        return self.value.startswith(("UINT", "SINT"))

    @property
    def is_float(self) -> bool:
        return self.value.endswith("FLOAT")

    @property
    def is_complex(self) -> bool:
        return self.value.endswith("COMPLEX")

    @property
    def is_real(self) -> bool:
        return self.is_integer or self.is_float

    # -- numpy interop ------------------------------------------------------

    @property
    def numpy_dtype(self) -> numpy.dtype:
        return numpy.dtype(_NUMPY_TYPES[self])

    @classmethod
    def from_numpy(cls, dtype: Any) -> "DataType":
        """Map a numpy dtype (or anything ``numpy.dtype`` accepts) to a DataType."""
        dtype = numpy.dtype(dtype)
        for data_type, scalar_type in _NUMPY_TYPES.items():
            if dtype == numpy.dtype(scalar_type):
                return data_type
        raise ConversionError("DataType", dtype, f"unsupported buffer data type: {dtype}")


_NUMPY_TYPES = {
    DataType.BIN: numpy.bool_,
    DataType.UINT8: numpy.uint8,
    DataType.UINT16: numpy.uint16,
    DataType.UINT32: numpy.uint32,
    DataType.UINT64: numpy.uint64,
    DataType.SINT8: numpy.int8,
    DataType.SINT16: numpy.int16,
    DataType.SINT32: numpy.int32,
    DataType.SINT64: numpy.int64,
    DataType.SFLOAT: numpy.float32,
    DataType.DFLOAT: numpy.float64,
    DataType.SCOMPLEX: numpy.complex64,
    DataType.DCOMPLEX: numpy.complex128,
}


class ShapeKind(_NamedEnum):
    """Layout of the tensor elements of a pixel."""

    COL_VECTOR = "column vector"
    ROW_VECTOR = "row vector"
    COL_MAJOR_MATRIX = "column-major matrix"
    ROW_MAJOR_MATRIX = "row-major matrix"
    DIAGONAL_MATRIX = "diagonal matrix"
    SYMMETRIC_MATRIX = "symmetric matrix"
    UPPER_TRIANGULAR_MATRIX = "upper triangular matrix"
    LOWER_TRIANGULAR_MATRIX = "lower triangular matrix"


# ─────────────────────────────────────────────────────────────────────────────
# Range
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Range:
    """Strided index interval ``start..stop`` (both ends inclusive).

    ``step`` is a magnitude and is never negative.  Direction is carried by
    the ends themselves: negative indices count from the end of the axis
    (``-1`` is the last element), so ``Range(0, -1, 1)`` covers a whole axis
    forwards and ``Range(-1, 0, 1)`` covers it backwards.

    ::

        Range.single(3)        → Range(3, 3, 1)
        Range(0, -1, 2).fix(5) → Range(0, 4, 2)   # indices 0, 2, 4
        Range(-1, 0, 1).fix(3) → Range(2, 0, 1)   # indices 2, 1, 0
    """

    start: int = 0
    stop: int = -1
    step: int = 1

    def __post_init__(self) -> None:
        if self.step < 0:
            raise ValueError(f"Range step must be a non-negative magnitude, got {self.step}")

    @classmethod
    def single(cls, index: int) -> "Range":
        """Range addressing the single element at *index*."""
        return cls(index, index, 1)

    def fix(self, extent: int) -> "Range":
        """Resolve negative indices against an axis of length *extent*.

        Raises ``IndexError`` if either end falls outside ``[-extent, extent)``.
        A zero step becomes 1, and ``stop`` is moved towards ``start`` so that
        it lies on the stride grid.
        """
        for index in (self.start, self.stop):
            if index >= extent or index < -extent:
                raise IndexError(f"index {index} out of range for extent {extent}")
        start = self.start + extent if self.start < 0 else self.start
        stop = self.stop + extent if self.stop < 0 else self.stop
        step = self.step or 1
        if start > stop:
            stop += (start - stop) % step
        else:
            stop -= (stop - start) % step
        return Range(start, stop, step)

    @property
    def size(self) -> int:
        """Number of indices addressed.  Only meaningful after ``fix``."""
        step = self.step or 1
        return 1 + abs(self.stop - self.start) // step

    @property
    def last(self) -> int:
        return self.stop

    @property
    def signed_step(self) -> int:
        """Step with the direction restored: negative when counting down."""
        step = self.step or 1
        return -step if self.start > self.stop else step

    def indices(self) -> range:
        """Python ``range`` over the addressed indices.  Call after ``fix``."""
        step = self.signed_step
        return range(self.start, self.stop + (1 if step > 0 else -1), step)


# ─────────────────────────────────────────────────────────────────────────────
# Sample / Pixel
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Sample:
    """A single numeric value together with the DataType it was produced as."""

    value: Any
    data_type: DataType

    def __bool__(self) -> bool:
        return bool(self.value)

    def __int__(self) -> int:
        if isinstance(self.value, complex):
            return int(self.value.real)
        return int(self.value)

    def __float__(self) -> float:
        if isinstance(self.value, complex):
            return self.value.real
        return float(self.value)

    def __complex__(self) -> complex:
        return complex(self.value)


@dataclass(frozen=True)
class Pixel:
    """Non-empty, ordered collection of values that share one DataType.

    Iterating or indexing yields ``Sample`` objects.
    """

    data_type: DataType
    values: Tuple[Any, ...]

    def __post_init__(self) -> None:
        if not self.values:
            raise ValueError("a Pixel needs at least one sample")
        object.__setattr__(self, "values", tuple(self.values))

    @classmethod
    def from_sample(cls, sample: Sample) -> "Pixel":
        return cls(sample.data_type, (sample.value,))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Sample]:
        for value in self.values:
            yield Sample(value, self.data_type)

    def __getitem__(self, index: int) -> Sample:
        return Sample(self.values[index], self.data_type)
