"""Minimal Image type backed by a numpy array.

The image library proper is an external collaborator; this class only offers
what the conversion layer needs to build and inspect its results:

* wrapping a buffer-protocol object (``Image.from_buffer``), and
* wrapping a single ``Pixel`` as a 0-D image (``Image.from_pixel``).

Tensor images store the tensor elements along the last numpy axis.  Pixel
data is never copied unless numpy has to.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

import numpy

from .types import DataType, Pixel, ShapeKind


class Image:
    """An n-dimensional image whose pixels are tensors of ``tensor_elements`` samples.

    Attributes:
        data:               The underlying numpy array.
        data_type:          DataType of every sample.
        tensor_shape:       Layout of the tensor elements.
        reverse_dimensions: When ``True``, ``sizes`` lists the spatial
                            dimensions fastest-varying axis first (the image
                            library's convention); when ``False`` it follows
                            the numpy axis order.
    """

    def __init__(
            self,
            data: numpy.ndarray,
            *,
            tensor_elements: int = 1,
            tensor_shape: ShapeKind = ShapeKind.COL_VECTOR,
            reverse_dimensions: bool = True,
    ) -> None:
        if tensor_elements > 1 and (data.ndim == 0 or data.shape[-1] != tensor_elements):
            raise ValueError(
                f"last axis of data must hold {tensor_elements} tensor elements, got shape {data.shape}"
            )
        self.data = data
        self.data_type = DataType.from_numpy(data.dtype)
        self.tensor_elements = tensor_elements
        self.tensor_shape = tensor_shape
        self.reverse_dimensions = reverse_dimensions

    # -- construction -------------------------------------------------------

    @classmethod
    def from_buffer(cls, obj: Any, *, reverse_dimensions: bool = True) -> "Image":
        """Wrap a buffer-protocol object as a scalar image (no copy)."""
        return cls(numpy.asarray(obj), reverse_dimensions=reverse_dimensions)

    @classmethod
    def from_pixel(cls, pixel: Pixel) -> "Image":
        """0-D image holding exactly *pixel*, with its tensor as a column vector."""
        data = numpy.array(pixel.values, dtype=pixel.data_type.numpy_dtype)
        if len(pixel) == 1:
            return cls(data.reshape(()))
        return cls(data, tensor_elements=len(pixel), tensor_shape=ShapeKind.COL_VECTOR)

    # -- geometry -----------------------------------------------------------

    @property
    def sizes(self) -> Tuple[int, ...]:
        shape = self.data.shape[:-1] if self.tensor_elements > 1 else self.data.shape
        return tuple(reversed(shape)) if self.reverse_dimensions else tuple(shape)

    @property
    def dimensionality(self) -> int:
        return len(self.sizes)

    @property
    def number_of_pixels(self) -> int:
        return int(numpy.prod(self.sizes, dtype=numpy.int64))

    @property
    def is_scalar(self) -> bool:
        return self.tensor_elements == 1

    # -- pixel access -------------------------------------------------------

    def pixel(self, coordinates: Optional[Tuple[int, ...]] = None) -> Pixel:
        """Return the pixel at *coordinates* (given in ``sizes`` order).

        A 0-D image has one pixel, addressed by ``()`` or ``None``.
        """
        coordinates = tuple(coordinates or ())
        if len(coordinates) != self.dimensionality:
            raise IndexError(
                f"expected {self.dimensionality} coordinates, got {len(coordinates)}"
            )
        if self.reverse_dimensions:
            coordinates = tuple(reversed(coordinates))
        samples = numpy.atleast_1d(self.data[coordinates])
        return Pixel(self.data_type, tuple(s.item() for s in samples))

    def __repr__(self) -> str:
        return (
            f"Image(sizes={self.sizes}, data_type={self.data_type}, "
            f"tensor_elements={self.tensor_elements})"
        )
