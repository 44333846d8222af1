# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""
Construction of owning tensors. Storage always holds the product of all dimensions of the
requested shape; the unit dtype defaults to the active StorageOptions of the namespace.
"""

from typing import Any, Callable, Iterable, Optional, Sequence
from itertools import islice

from .backend import ArrayLike, ArrayNamespace, DType, is_array, flat, size
from .errors import ShapeMismatchError, ShapeSizeMismatchError
from .literal import parse_literal
from .options import default_dtype
from .shapedarray import ShapedArray
from .tensor import Tensor
from .tensorshape import TensorShape, as_shape

type ShapeLike = TensorShape | Sequence[int] | int

def full[T: ArrayLike](xp: ArrayNamespace[T], shape: ShapeLike, value: Any, dtype: Optional[DType] = None) -> Tensor[T]:
    shape = as_shape(shape)
    units = xp.full((shape.volume,), value, dtype=default_dtype(xp, dtype))
    return Tensor.with_shape(shape, units, copy_data=False)

def supplied[T: ArrayLike](
        xp: ArrayNamespace[T],
        shape: ShapeLike,
        supplier: Callable[[], Any],
        dtype: Optional[DType] = None) -> Tensor[T]:
    """Tensor whose units are produced by calling supplier once per unit, in row-major order."""
    shape = as_shape(shape)
    units = xp.asarray([supplier() for _ in range(shape.volume)], dtype=default_dtype(xp, dtype))
    return Tensor.with_shape(shape, units, copy_data=False)

def from_units[T: ArrayLike](
        xp: ArrayNamespace[T],
        shape: ShapeLike,
        units: Iterable[Any] | T | ShapedArray[T],
        vacancy_supplier: Optional[Callable[[], Any]] = None,
        dtype: Optional[DType] = None) -> Tensor[T]:
    """
    Tensor filled from a flat sequence of units in row-major order. Surplus units are
    ignored. Missing units are produced by vacancy_supplier; without a supplier a short
    input raises ShapeSizeMismatchError.
    """
    shape = as_shape(shape)
    needed = shape.volume
    if isinstance(units, ShapedArray):
        units = units.units
    if is_array(units):
        values: Any = flat(xp, units)[:needed] # type: ignore
        available = size(values)
    else:
        values = list(islice(iter(units), needed)) # type: ignore
        available = len(values)

    target = default_dtype(xp, dtype)
    missing = needed - available
    if missing > 0:
        if vacancy_supplier is None:
            raise ShapeSizeMismatchError(f"Shape {shape} needs {needed} units, got {available}.")
        padding = [vacancy_supplier() for _ in range(missing)]
        if is_array(values):
            values = xp.concat([values, xp.asarray(padding, dtype=target)])
        else:
            values = values + padding
    data = xp.asarray(values, dtype=target, copy=True)
    return Tensor.with_shape(shape, data, copy_data=False)

def increasing[T: ArrayLike](
        xp: ArrayNamespace[T],
        shape: ShapeLike,
        start: int | float = 0,
        dtype: Optional[DType] = None) -> Tensor[T]:
    """Tensor with the units start, start+1, ... in row-major order."""
    shape = as_shape(shape)
    units = xp.asarray(xp.arange(shape.volume) + start, dtype=default_dtype(xp, dtype))
    return Tensor.with_shape(shape, units, copy_data=False)

def scalar[T: ArrayLike](xp: ArrayNamespace[T], value: Any, dtype: Optional[DType] = None) -> Tensor[T]:
    return Tensor(None, xp.asarray([value], dtype=default_dtype(xp, dtype)), copy_data=False)

def empty[T: ArrayLike](xp: ArrayNamespace[T], element_shape: ShapeLike, dtype: Optional[DType] = None) -> Tensor[T]:
    """Tensor without elements, ready to be grown by append or extend."""
    units = xp.empty((0,), dtype=default_dtype(xp, dtype))
    return Tensor(as_shape(element_shape), units, count=0, copy_data=False)

def from_elements[T: ArrayLike](
        xp: ArrayNamespace[T],
        element_shape: ShapeLike,
        elements: Iterable[ShapedArray[T]],
        dtype: Optional[DType] = None) -> Tensor[T]:
    element_shape = as_shape(element_shape)
    parts = []
    for element in elements:
        if element.shape != element_shape:
            raise ShapeMismatchError(f"Element of shape {element.shape} does not match element shape {element_shape}.")
        parts.append(element.units)
    if len(parts) == 0:
        return empty(xp, element_shape, dtype)
    units = xp.asarray(xp.concat(parts), dtype=default_dtype(xp, dtype))
    return Tensor(element_shape, units, count=len(parts), copy_data=False)

def scalar_elements[T: ArrayLike](xp: ArrayNamespace[T], values: Iterable[Any], dtype: Optional[DType] = None) -> Tensor[T]:
    """Rank one tensor from a sequence or range of units."""
    values = list(values)
    units = xp.asarray(values, dtype=default_dtype(xp, dtype))
    return Tensor(TensorShape.SCALAR, units, count=len(values), copy_data=False)

def from_nested[T: ArrayLike](xp: ArrayNamespace[T], literal: Any, dtype: Optional[DType] = None) -> Tensor[T]:
    """Tensor from a nested list literal. A literal that is not a sequence gives a scalar."""
    dims, units = parse_literal(literal)
    data = xp.asarray(units, dtype=default_dtype(xp, dtype))
    return Tensor.with_shape(TensorShape(dims), data, copy_data=False)
