"""Caster factory: the single place where resolvers and array casters are assembled.

``build_default_resolver`` is the recommended entry point for users who want
image-or-pixel resolution without hand-wiring the registry.

Customisation points:

* **reverse_dimensions** – axis order reported by images built from buffers.
* **converters**         – extra ``{name: load}`` candidates, tried after
                           the buffer caster and before the pixel fallback.
* **casters**            – element casters available to ``build_array_caster``
                           by name.  ``None`` → ``BUILTIN_CASTERS``.
"""

from __future__ import annotations

from typing import Any, Mapping, Union

from .casters.array import ArrayCaster
from .casters.image import ImageCaster
from .casters.pixel import PixelCaster
from .casters.scalar import BUILTIN_CASTERS
from .core import Caster, LoadFn
from .image import Image
from .resolver import ImageOrPixelResolver


def build_default_resolver(
        *,
        reverse_dimensions: bool = True,
        converters: Mapping[str, LoadFn] | None = None,
) -> ImageOrPixelResolver:
    """Assemble an ``ImageOrPixelResolver``.

    What gets wired
    ---------------
    * ``image``  (priority 10) – ``ImageCaster(reverse_dimensions=…)``.
    * *converters* (priority 5, in mapping order).
    * ``pixel``  (priority 0)  – ``PixelCaster`` wrapped into a 0-D image.

    Args:
        reverse_dimensions: Passed to ``ImageCaster``.
        converters:         Additional candidates.  Each ``load`` returns an
                            ``Image`` or ``None``.

    Returns:
        Fully wired resolver.

    Example::

        resolver = build_default_resolver(
            converters={"pil": lambda v: Image.from_buffer(numpy.asarray(v)) if isinstance(v, PIL.Image.Image) else None},
        )
        resolver.resolve(3.5)   # 0-D DFLOAT image
    """
    resolver = ImageOrPixelResolver(
        image_caster=ImageCaster(reverse_dimensions=reverse_dimensions),
        pixel_caster=PixelCaster(),
    )
    for name, load in (converters or {}).items():
        resolver.register(name, load, priority=5)
    return resolver


def build_array_caster(
        element: Union[str, Caster],
        *,
        casters: Mapping[str, Caster] | None = None,
) -> ArrayCaster:
    """Return an ``ArrayCaster`` over *element*.

    *element* is either a caster or the name of one in *casters*
    (``bool``, ``int``, ``uint``, ``float``, ``complex``, ``str`` by default).
    Raises ``KeyError`` if the name is not registered.
    """
    if isinstance(element, Caster):
        return ArrayCaster(element)
    resolved = casters if casters is not None else BUILTIN_CASTERS
    if element not in resolved:
        raise KeyError(f"unknown element caster: {element!r}")
    return ArrayCaster(resolved[element])


_DEFAULT_RESOLVER = build_default_resolver()


def image_or_pixel(value: Any) -> Image:
    """Resolve *value* with the default resolver.  See ``ImageOrPixelResolver``."""
    return _DEFAULT_RESOLVER.resolve(value)
