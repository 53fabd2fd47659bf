"""Image-or-pixel resolution: the single hard-failure boundary.

Functions that take an image also accept a plain scalar or a list of
scalars, which is then treated as a constant single-pixel image.  The
candidates are kept in an explicit ``CastRegistry`` and tried in priority
order::

    image (10)  ImageCaster           buffers and Image objects
    ...         extra converters      registered with ``register``
    pixel (0)   PixelCaster → Image   scalars and lists of scalars

Every candidate fails softly; only when all of them declined does
``resolve`` raise ``ConversionError``.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .casters.image import ImageCaster
from .casters.pixel import PixelCaster
from .core import CastNode, CastRegistry, ConversionError, LoadFn
from .image import Image
from .matchers import AlwaysMatcher

logger = logging.getLogger(__name__)


class ImageOrPixelResolver:
    """Turn any accepted input into an ``Image`` or raise ``ConversionError``.

    ::

        resolver = ImageOrPixelResolver()
        resolver.resolve(numpy.zeros((4, 5)))   # Image, sizes (5, 4)
        resolver.resolve(5)                     # 0-D SINT64 image, value 5
        resolver.resolve([1.0, 2.0])            # 0-D DFLOAT image, 2 tensor elements
        resolver.resolve("not-an-image")        # ConversionError
    """

    name = "Image"

    def __init__(
            self,
            *,
            image_caster: Optional[ImageCaster] = None,
            pixel_caster: Optional[PixelCaster] = None,
    ) -> None:
        self.image_caster = image_caster or ImageCaster()
        self.pixel_caster = pixel_caster or PixelCaster()
        self.registry = CastRegistry(self.name)
        self.registry.register(CastNode(
            name="image", priority=10,
            load=self.image_caster.load,
            exclusive=False,
        ))
        self.registry.register(CastNode(
            name="pixel", priority=0,
            load=self._load_pixel,
            matcher=AlwaysMatcher(),
            exclusive=False,
        ))

    # -- registration -------------------------------------------------------

    def register(self, name: str, load: LoadFn, *, priority: int = 5) -> None:
        """Add a candidate converter.  *load* must return an Image or ``None``."""
        self.registry.register(CastNode(name=name, priority=priority, load=load, exclusive=False))

    # -- resolution ---------------------------------------------------------

    def _load_pixel(self, value: Any) -> Optional[Image]:
        pixel = self.pixel_caster.load(value)
        if pixel is None:
            return None
        return Image.from_pixel(pixel)

    def resolve(self, value: Any) -> Image:
        image = self.registry.load(value)
        if image is None:
            logger.debug("no converter accepted %r as %s", value, self.name)
            raise ConversionError(self.name, value)
        return image

    __call__ = resolve
