"""Shared ValueMatcher implementations.

The numeric matchers form a chain in which every later predicate also accepts
the earlier kinds (a ``bool`` is ``Integral``, an ``Integral`` is ``Real``, a
``Real`` is ``Complex``).  They are therefore only meaningful when evaluated
in priority order::

    IsBool → IsInteger → IsFloat → IsComplex

Exports
-------
IsBool, IsInteger, IsFloat, IsComplex
    Numeric scalar kinds (numpy scalars included).

IsText
    ``str`` or ``bytes``.

IsSequence, IsList
    Array-like inputs.

IsSlice
    Built-in ``slice`` objects.

IsBuffer
    Objects exposing the buffer protocol.

AlwaysMatcher
    Unconditional match: catch-all / fallback sentinel.
"""

from __future__ import annotations

import numbers
from collections.abc import Sequence
from typing import Any

import numpy

from .core import ValueMatcher


class IsBool(ValueMatcher):
    """Match Python and numpy booleans.

    ::

        IsBool().matches(True)   # True
        IsBool().matches(1)      # False
    """

    def matches(self, value: Any) -> bool:
        return isinstance(value, (bool, numpy.bool_))


class IsInteger(ValueMatcher):
    """Match integral numbers (``bool`` included; order this after IsBool)."""

    def matches(self, value: Any) -> bool:
        return isinstance(value, numbers.Integral)


class IsFloat(ValueMatcher):
    """Match real numbers (integers included; order this after IsInteger)."""

    def matches(self, value: Any) -> bool:
        return isinstance(value, numbers.Real)


class IsComplex(ValueMatcher):
    """Match any number (reals included; order this after IsFloat)."""

    def matches(self, value: Any) -> bool:
        return isinstance(value, numbers.Complex)


class IsText(ValueMatcher):

    def matches(self, value: Any) -> bool:
        return isinstance(value, (str, bytes))


class IsSequence(ValueMatcher):
    """Match sequences, text, and numpy arrays with at least one dimension.

    Mappings and sets are not sequences and do not match.
    """

    def matches(self, value: Any) -> bool:
        if isinstance(value, numpy.ndarray):
            return value.ndim > 0
        return isinstance(value, (Sequence, str))


class IsList(ValueMatcher):
    """Match ``list`` only; tuples and other sequences do not match."""

    def matches(self, value: Any) -> bool:
        return isinstance(value, list)


class IsSlice(ValueMatcher):

    def matches(self, value: Any) -> bool:
        return isinstance(value, slice)


class IsBuffer(ValueMatcher):
    """Match objects that expose the buffer protocol.

    ``str`` never matches (it is not a buffer); ``bytes`` does.
    """

    def matches(self, value: Any) -> bool:
        if isinstance(value, numpy.ndarray):
            return True
        try:
            memoryview(value).release()
        except TypeError:
            return False
        return True


class AlwaysMatcher(ValueMatcher):
    """Unconditional match: use as a catch-all / fallback node.

    ::

        AlwaysMatcher().matches(anything)   # True
    """

    def matches(self, value: Any) -> bool:
        return True
