# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from __future__ import annotations
from typing import Iterable, Optional
import logging

from .backend import ArrayLike, ArrayNamespace, namespace_of_arrays, size, flat
from .errors import InvalidRankAccessError, ShapeMismatchError, ShapeSizeMismatchError
from .shapedarray import ShapedArray
from .tensorindex import TensorIndex
from .tensorshape import TensorShape

logger = logging.getLogger(__name__)

class Tensor[T: ArrayLike](ShapedArray[T]):
    """
    Owning tensor. The units are stored contiguously in row-major order in a one-dimensional
    array of the backend namespace. A tensor without element shape is a scalar holding
    exactly one unit, otherwise it holds ``count`` elements of the element shape.
    """

    _xp: ArrayNamespace[T]
    _units: T
    _element_shape: Optional[TensorShape]
    _count: int
    _borrowed: bool

    def __init__(
            self,
            element_shape: Optional[TensorShape],
            units: T,
            count: Optional[int] = None,
            copy_data: bool = True) -> None:
        xp = namespace_of_arrays(units)
        units = flat(xp, units) # type: ignore
        if copy_data:
            units = xp.asarray(units, copy=True)
        nunits = size(units)

        if element_shape is None:
            if nunits != 1:
                raise ShapeSizeMismatchError(f"A scalar tensor holds exactly one unit, got {nunits}.")
            count = 0
        else:
            per_element = element_shape.volume
            if count is None:
                if per_element == 0:
                    raise ValueError("Element count is required for elements without units.")
                if nunits % per_element != 0:
                    raise ShapeSizeMismatchError(f"{nunits} units do not fill elements of shape {element_shape}.")
                count = nunits // per_element
            elif count < 0:
                raise ValueError("Element count must be non-negative.")
            elif nunits != count * per_element:
                raise ShapeSizeMismatchError(f"Expected {count * per_element} units for {count} elements of shape {element_shape}, got {nunits}.")

        self._xp = xp
        self._units = units
        self._element_shape = element_shape
        self._count = count
        self._indices = TensorIndex()
        self._bounds = None
        self._generation = 0
        self._borrowed = False

    @classmethod
    def with_shape(cls, shape: TensorShape, units: T, copy_data: bool = True) -> Tensor[T]:
        """Tensor of the given full shape."""
        if shape.is_scalar:
            return cls(None, units, copy_data=copy_data)
        return cls(shape.dropping_first(), units, count=shape[0], copy_data=copy_data)

    @classmethod
    def from_slice(cls, view: ShapedArray[T]) -> Tensor[T]:
        """Owning copy of a view."""
        return view.to_tensor()

    @property
    def _owner(self) -> Tensor[T]:
        return self

    @property
    def shape(self) -> TensorShape:
        if self._element_shape is None:
            return TensorShape.SCALAR
        return self._element_shape.prepending(self._count)

    @property
    def element_shape(self) -> Optional[TensorShape]:
        return self._element_shape

    @property
    def is_scalar(self) -> bool:
        return self._element_shape is None

    def _window(self) -> tuple[int, int]:
        return 0, size(self._units)

    def copy(self) -> Tensor[T]:
        return self.to_tensor()

    #-------------------------------------------------------------------------
    #growth

    def append(self, element: ShapedArray[T]) -> None:
        self.extend([element])

    def extend(self, elements: Iterable[ShapedArray[T]]) -> None:
        """
        Append elements of the element shape. Storage is reallocated once for all
        elements, which invalidates every view created before.
        """
        self._check_access()
        if self._element_shape is None:
            raise InvalidRankAccessError("Cannot append elements to a scalar tensor.")
        parts = [self._units]
        added = 0
        for element in elements:
            if element.shape != self._element_shape:
                raise ShapeMismatchError(f"Cannot append an element of shape {element.shape} to elements of shape {self._element_shape}.")
            parts.append(self._xp.asarray(element.units, dtype=self._units.dtype))
            added += 1
        if added == 0:
            return
        self._units = self._xp.concat(parts)
        self._count += added
        self._generation += 1
        logger.debug("Reallocated storage for %d appended elements, shape is now %s", added, self.shape)
