"""Buffer-protocol object ↔ ``Image``."""

from __future__ import annotations

import logging
from typing import Any, Optional

import numpy

from ..core import Caster, ConversionError
from ..image import Image
from ..matchers import IsBuffer

logger = logging.getLogger(__name__)


class ImageCaster(Caster[Image]):
    """Wrap buffers (numpy arrays, ``bytes``, ``array.array``, ...) as images.

    Existing ``Image`` objects pass through.  Non-buffers and buffers whose
    element format has no DataType are a soft failure.
    """

    name = "Image"

    def __init__(self, *, reverse_dimensions: bool = True) -> None:
        self.reverse_dimensions = reverse_dimensions
        self._is_buffer = IsBuffer()

    def load(self, src: Any) -> Optional[Image]:
        if isinstance(src, Image):
            return src
        if not self._is_buffer.matches(src):
            return None
        if not isinstance(src, numpy.ndarray):
            src = memoryview(src)
        try:
            return Image.from_buffer(src, reverse_dimensions=self.reverse_dimensions)
        except ConversionError as exc:
            logger.debug("%s: buffer declined: %s", self.name, exc)
            return None

    def cast(self, value: Image) -> numpy.ndarray:
        return value.data
