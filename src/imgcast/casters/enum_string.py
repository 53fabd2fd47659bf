"""Text ↔ closed-enumeration casters (``DataType``, ``ShapeKind``).

Only ``str`` and ``bytes`` are considered; anything else is a soft failure.
A text value that is not a recognised name is a *hard* failure: the
``UnknownNameError`` raised by the enum's parser propagates unchanged.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

from ..core import Caster
from ..matchers import IsText
from ..types import DataType, ShapeKind

E = TypeVar("E")


class EnumStringCaster(Caster[E]):
    """Map names to enum members with *parse* and back with *to_name*.

    ``parse(to_name(x)) == x`` must hold for every member ``x``.
    """

    def __init__(self, name: str, parse: Callable[[str], E], to_name: Callable[[E], str]) -> None:
        self.name = name
        self._parse = parse
        self._to_name = to_name
        self._is_text = IsText()

    def load(self, src: Any) -> Optional[E]:
        if not self._is_text.matches(src):
            return None
        if isinstance(src, bytes):
            src = src.decode("utf-8", errors="surrogateescape")
        return self._parse(src)

    def cast(self, value: E) -> str:
        return self._to_name(value)


class DataTypeCaster(EnumStringCaster[DataType]):
    """``"SFLOAT"`` ↔ ``DataType.SFLOAT``."""

    def __init__(self) -> None:
        super().__init__("DataType", DataType.from_name, lambda member: member.name_string)


class ShapeKindCaster(EnumStringCaster[ShapeKind]):
    """``"column vector"`` ↔ ``ShapeKind.COL_VECTOR``."""

    def __init__(self) -> None:
        super().__init__("TensorShape", ShapeKind.from_name, lambda member: member.name_string)
