"""Dynamic-length arrays of a fixed element type.

Parameters that take "one value per image dimension" accept either a full
sequence or a single scalar; a scalar becomes a one-element array and the
caller repeats it as needed::

    UnsignedArrayCaster().load([3, 5])   → [3, 5]
    UnsignedArrayCaster().load(7)        → [7]
    UnsignedArrayCaster().load([3, -1])  → None   (element does not convert)
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, TypeVar

from ..core import Caster
from ..matchers import IsSequence
from .scalar import BoolCaster, FloatCaster, IntegerCaster, StringCaster, UnsignedCaster

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ArrayCaster(Caster[List[T]]):
    """Convert a sequence element-wise, or promote a scalar to a one-element list.

    Sequences, text strings, and numpy arrays with at least one dimension are
    converted element by element with *element*; order and length are kept
    and any failing element fails the whole load.  Everything else is handed
    to *element* as a whole.
    """

    def __init__(self, element: Caster[T], *, name: Optional[str] = None) -> None:
        self.element = element
        self.name = name or f"{element.name}[]"
        self._is_sequence = IsSequence()

    def load(self, src: Any) -> Optional[List[T]]:
        if self._is_sequence.matches(src):
            out: List[T] = []
            for index, item in enumerate(src):
                value = self.element.load(item)
                if value is None:
                    logger.debug("%s: element %d (%r) is not a %s", self.name, index, item, self.element.name)
                    return None
                out.append(value)
            return out

        value = self.element.load(src)
        if value is None:
            return None
        return [value]

    def cast(self, value: List[T]) -> List[Any]:
        return [self.element.cast(item) for item in value]


class UnsignedArrayCaster(ArrayCaster[int]):

    def __init__(self) -> None:
        super().__init__(UnsignedCaster(), name="UnsignedArray")


class IntegerArrayCaster(ArrayCaster[int]):

    def __init__(self) -> None:
        super().__init__(IntegerCaster(), name="IntegerArray")


class FloatArrayCaster(ArrayCaster[float]):

    def __init__(self) -> None:
        super().__init__(FloatCaster(), name="FloatArray")


class BooleanArrayCaster(ArrayCaster[bool]):

    def __init__(self) -> None:
        super().__init__(BoolCaster(), name="BooleanArray")


class StringArrayCaster(ArrayCaster[str]):
    """Note that a bare string is a sequence: ``"ab"`` loads as ``["a", "b"]``."""

    def __init__(self) -> None:
        super().__init__(StringCaster(), name="StringArray")
