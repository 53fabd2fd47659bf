"""``slice`` / integer ↔ ``Range``.

An integer ``i`` addresses a single index: ``Range(i, i, 1)``.

A slice's unset components are replaced by sentinels.  The step is stored as
a magnitude, so the direction of an open-ended slice survives only through
the sentinels chosen for its ends::

    component   unset, step >= 0   unset, step < 0
    ---------   ----------------   ---------------
    step        1                  -
    start       0                  -1
    stop        -1                 0

    slice(None, None, None)  → Range(0, -1, 1)
    slice(None, None, -1)    → Range(-1, 0, 1)
    slice(2, 5, 1)           → Range(2, 5, 1)

A component that is set but not integral means the value is not a Range
(soft failure).
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..core import Caster
from ..matchers import IsInteger, IsSlice
from ..types import Range

logger = logging.getLogger(__name__)


class RangeCaster(Caster[Range]):
    name = "slice"

    def __init__(self) -> None:
        self._is_slice = IsSlice()
        self._is_integer = IsInteger()

    def load(self, src: Any) -> Optional[Range]:
        if self._is_slice.matches(src):
            return self._load_slice(src)
        if self._is_integer.matches(src):
            return Range.single(int(src))
        return None

    def _load_slice(self, src: slice) -> Optional[Range]:
        components: dict[str, Optional[int]] = {}
        for field in ("start", "stop", "step"):
            value = getattr(src, field)
            if value is None:
                components[field] = None
            elif self._is_integer.matches(value):
                components[field] = int(value)
            else:
                logger.debug("slice: %s=%r is not an integer", field, value)
                return None

        step = components["step"] if components["step"] is not None else 1
        backwards = step < 0
        start = components["start"]
        if start is None:
            start = -1 if backwards else 0
        stop = components["stop"]
        if stop is None:
            stop = 0 if backwards else -1
        return Range(start, stop, abs(step))

    def cast(self, value: Range) -> slice:
        return slice(value.start, value.stop, value.step)
