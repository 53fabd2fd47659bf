"""Python scalar ↔ ``Sample``.

Dispatch is an explicit ordered table of ``(matcher, element caster, tag)``
rows, mounted as exclusive nodes of a ``CastRegistry``.  ``bool`` must be
tested before ``int`` because every ``bool`` is also an ``int``; likewise
``int`` before ``float`` and ``float`` before ``complex``.

Exports
-------
SAMPLE_KINDS
    The dispatch table, highest priority first.

SampleKind
    One row of the table.

python_type
    Narrowest Python type for a DataType (the reverse direction).

SampleCaster
    The caster itself.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from ..core import Caster, CastNode, CastRegistry, ValueMatcher
from ..matchers import IsBool, IsComplex, IsFloat, IsInteger
from ..types import DataType, Sample
from .scalar import BoolCaster, ComplexCaster, FloatCaster, IntegerCaster

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SampleKind:
    """One tag a Python scalar can map to.

    Attributes:
        name:      Label of the registry node.
        matcher:   Decides whether a value *denotes* this kind.
        element:   Converts a value *to* this kind (may upcast, e.g. int → float).
        data_type: Tag given to the resulting Sample.
    """

    name: str
    matcher: ValueMatcher
    element: Caster
    data_type: DataType

    def load(self, value: Any) -> Optional[Sample]:
        converted = self.element.load(value)
        if converted is None:
            return None
        return Sample(converted, self.data_type)


SAMPLE_KINDS = (
    SampleKind("bool", IsBool(), BoolCaster(), DataType.BIN),
    SampleKind("int", IsInteger(), IntegerCaster(), DataType.SINT64),
    SampleKind("float", IsFloat(), FloatCaster(), DataType.DFLOAT),
    SampleKind("complex", IsComplex(), ComplexCaster(), DataType.DCOMPLEX),
)

# Reverse direction: first matching category wins, integers are the fallback.
_PYTHON_TYPES: tuple[tuple[Callable[[DataType], bool], type], ...] = (
    (lambda dt: dt.is_binary, bool),
    (lambda dt: dt.is_complex, complex),
    (lambda dt: dt.is_float, float),
)


def python_type(data_type: DataType) -> type:
    """Narrowest Python type that holds samples of *data_type* losslessly."""
    for predicate, py_type in _PYTHON_TYPES:
        if predicate(data_type):
            return py_type
    return int


def build_sample_registry() -> CastRegistry:
    """Mount ``SAMPLE_KINDS`` as exclusive nodes, first row highest priority."""
    registry = CastRegistry("Sample")
    for rank, kind in enumerate(SAMPLE_KINDS):
        registry.register(CastNode(
            name=kind.name,
            priority=len(SAMPLE_KINDS) - rank,
            load=kind.load,
            matcher=kind.matcher,
        ))
    return registry


class SampleCaster(Caster[Sample]):
    """``True`` → ``Sample(True, BIN)``, ``3`` → ``Sample(3, SINT64)``, and so on.

    Non-numeric values (text, None, containers) do not convert.
    """

    name = "Sample"

    def __init__(self) -> None:
        self.registry = build_sample_registry()

    def load(self, src: Any) -> Optional[Sample]:
        return self.registry.load(src)

    def cast(self, value: Sample) -> Any:
        return python_type(value.data_type)(value)
