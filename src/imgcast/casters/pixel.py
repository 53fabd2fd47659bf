"""Python scalar or list ↔ ``Pixel``.

For a list, the **first** element alone decides the tag of the whole pixel;
every element (the first included) is then converted to that tag::

    [1, 2, 3]      → SINT64 pixel (1, 2, 3)
    [1.0, 2, 3]    → DFLOAT pixel (1.0, 2.0, 3.0)
    [1, 2.5]       → None   (2.5 is not an integer)
    [1, "x", 3]    → None
    []             → None

Anything that is not a list goes through ``SampleCaster`` and becomes a
one-element pixel.  Tuples are not lists.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from ..core import Caster
from ..matchers import IsList
from ..types import Pixel
from .sample import SampleCaster, python_type

logger = logging.getLogger(__name__)


class PixelCaster(Caster[Pixel]):
    name = "Pixel"

    def __init__(self, sample_caster: Optional[SampleCaster] = None) -> None:
        self.sample_caster = sample_caster or SampleCaster()
        self._is_list = IsList()

    def load(self, src: Any) -> Optional[Pixel]:
        if self._is_list.matches(src):
            return self._load_list(src)
        sample = self.sample_caster.load(src)
        if sample is None:
            return None
        return Pixel.from_sample(sample)

    def _load_list(self, src: List[Any]) -> Optional[Pixel]:
        if not src:
            logger.debug("Pixel: empty list")
            return None

        node = self.sample_caster.registry.select(src[0])
        if node is None:
            logger.debug("Pixel: first element %r is not a scalar", src[0])
            return None

        values = []
        for index, item in enumerate(src):
            sample = node.load(item)
            if sample is None:
                logger.debug("Pixel: element %d (%r) does not convert to %s", index, item, node.name)
                return None
            values.append(sample.value)
        return Pixel(sample.data_type, tuple(values))

    def cast(self, value: Pixel) -> List[Any]:
        convert = python_type(value.data_type)
        return [convert(item) for item in value.values]
