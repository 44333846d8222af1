# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from __future__ import annotations
from typing import Any, Generator, Iterator, Optional, Sequence, TYPE_CHECKING
from contextlib import contextmanager
import logging

from .backend import ArrayLike, ArrayNamespace, DType
from .bounds import Bounds
from .errors import (
    BorrowError,
    InvalidRankAccessError,
    OutOfBoundsError,
    ShapeMismatchError,
    StaleViewError,
)
from .sequenceof import as_ints
from .tensorindex import TensorIndex
from .tensorshape import TensorShape, as_shape
from .units import check_arithmetic, divided
from .utils import transform_index, transform_range, sequence_product

if TYPE_CHECKING:
    from .tensor import Tensor
    from .tensorslice import TensorSlice

logger = logging.getLogger(__name__)

class ShapedArray[T: ArrayLike]:
    """
    Behaviour shared by owning tensors and views. Both are addressed the same way: an
    owning tensor, the fixed leading coordinates into it and optional bounds on the
    dimension that follows them. An owning tensor addresses itself without indices
    and without bounds.
    """

    _indices: TensorIndex
    _bounds: Optional[Bounds]
    _generation: int

    @property
    def _owner(self) -> Tensor[T]:
        raise NotImplementedError

    @property
    def shape(self) -> TensorShape:
        raise NotImplementedError

    def _window(self) -> tuple[int, int]:
        """Begin and end of the addressed units in the owner's storage."""
        raise NotImplementedError

    #-------------------------------------------------------------------------
    #properties

    @property
    def namespace(self) -> ArrayNamespace[T]:
        """Array namespace of the unit storage."""
        return self._owner._xp

    @property
    def dtype(self) -> DType:
        return self._owner._units.dtype

    @property
    def rank(self) -> int:
        return self.shape.rank

    @property
    def is_scalar(self) -> bool:
        return self.shape.is_scalar

    @property
    def element_shape(self) -> Optional[TensorShape]:
        """Shape of the first-level elements, None for a scalar."""
        shape = self.shape
        if shape.is_scalar:
            return None
        return shape.dropping_first()

    @property
    def unit_count(self) -> int:
        return self.shape.volume

    @property
    def unit_count_per_element(self) -> int:
        element_shape = self.element_shape
        if element_shape is None:
            return 0
        return element_shape.volume

    @property
    def units(self) -> T:
        """Copy of the addressed units in row-major order."""
        self._check_access()
        begin, end = self._window()
        return self.namespace.asarray(self._owner._units[begin:end], copy=True)

    #-------------------------------------------------------------------------
    #element access

    def __len__(self) -> int:
        if self.is_scalar:
            raise TypeError("len() of a scalar tensor")
        return self.shape[0]

    def __iter__(self) -> Iterator[TensorSlice[T]]:
        if self.is_scalar:
            raise TypeError("iteration over a scalar tensor")
        return (self[i] for i in range(len(self)))

    def __getitem__(self, key: Any) -> TensorSlice[T]:
        """
        View of a sub-tensor. Keys can be an integer, a tuple of integers, a TensorIndex,
        a contiguous range, or a tuple of integers followed by a range.
        """
        from .tensorslice import TensorSlice
        return TensorSlice(self, key)

    def __setitem__(self, key: Any, value: Any) -> None:
        target = self[key]
        begin, end = target._window()
        if isinstance(value, ShapedArray):
            if value.shape != target.shape:
                raise ShapeMismatchError(f"Shape mismatch: cannot assign shape {value.shape} to shape {target.shape}.")
            units = value.units
            self._owner._units[begin:end] = units
        elif target.is_scalar:
            self._owner._units[begin] = value
        else:
            raise ShapeMismatchError(f"Cannot assign a single unit to a tensor of shape {target.shape}.")

    def _address(self, key: Any) -> tuple[TensorIndex, Optional[Bounds]]:
        """Translate a key relative to this array into indices and bounds of the owner."""
        if isinstance(key, TensorIndex):
            coords, cut = list(key), None
        elif isinstance(key, slice):
            coords, cut = [], key
        elif isinstance(key, tuple):
            if len(key) > 0 and isinstance(key[-1], slice):
                coords, cut = list(key[:-1]), key[-1]
            else:
                coords, cut = list(key), None
        else:
            coords, cut = [key], None
        coords = list(as_ints(coords, "Index coordinates"))

        shape = self.shape
        nslots = len(coords) + (0 if cut is None else 1)
        if shape.is_scalar and nslots > 0:
            raise InvalidRankAccessError("Cannot index into a scalar tensor.")
        if nslots > shape.rank:
            raise InvalidRankAccessError(f"Index with {nslots} coordinates exceeds rank {shape.rank}.")
        coords = [transform_index(c, shape[i]) for i, c in enumerate(coords)]

        offset = 0 if self._bounds is None else self._bounds.begin
        if len(coords) > 0:
            coords[0] += offset
        bounds = None if len(coords) > 0 else self._bounds
        if cut is not None:
            begin, end = transform_range(cut, shape[len(coords)])
            if len(coords) == 0 and self._bounds is not None:
                bounds = self._bounds.narrowed(begin, end)
            else:
                bounds = Bounds(begin=begin, end=end)
        return TensorIndex([*self._indices, *coords]), bounds

    def coordinates(self) -> Generator[TensorIndex, None, None]:
        """Full indices of all units in row-major order."""
        for idxs in sequence_product(self.shape):
            yield TensorIndex(idxs)

    #-------------------------------------------------------------------------
    #unit access

    def unit(self, pos: int | TensorIndex | Sequence[int]) -> Any:
        """
        Unit at a flat position of the addressed window, or the first unit of the
        sub-tensor addressed by an index.
        """
        if isinstance(pos, (TensorIndex, tuple, list)):
            return self[TensorIndex(pos)].unit(0)
        self._check_access()
        return self._owner._units[self._position(pos)]

    def item(self) -> Any:
        """The single unit of a tensor holding exactly one unit."""
        if self.unit_count != 1:
            raise ShapeMismatchError(f"item() requires exactly one unit, shape is {self.shape}.")
        return self.unit(0)

    def update_unit(self, pos: int, value: Any) -> None:
        self._check_access()
        self._owner._units[self._position(pos)] = value

    def increment_unit(self, pos: int, value: Any) -> None:
        check_arithmetic(self.namespace, self.dtype, "increment")
        self._check_access()
        idx = self._position(pos)
        self._owner._units[idx] = self._owner._units[idx] + value

    def decrement_unit(self, pos: int, value: Any) -> None:
        check_arithmetic(self.namespace, self.dtype, "decrement")
        self._check_access()
        idx = self._position(pos)
        self._owner._units[idx] = self._owner._units[idx] - value

    def multiply_unit(self, pos: int, value: Any) -> None:
        check_arithmetic(self.namespace, self.dtype, "multiplication")
        self._check_access()
        idx = self._position(pos)
        self._owner._units[idx] = self._owner._units[idx] * value

    def divide_unit(self, pos: int, value: Any) -> None:
        """Divide a unit in place. Integral units truncate toward zero."""
        self._check_access()
        idx = self._position(pos)
        self._owner._units[idx] = divided(self.namespace, self.dtype, self._owner._units[idx], value)

    def _position(self, pos: int) -> int:
        count = self.unit_count
        if pos < 0:
            pos += count
        if pos < 0 or pos >= count:
            raise OutOfBoundsError(f"Unit position {pos} out of range for {count} units.")
        return self._window()[0] + pos

    @contextmanager
    def unit_buffer(self) -> Generator[T, None, None]:
        """
        Exclusive access to the raw storage window. Until the context exits every other
        access to the owner's storage, through the owner or any view, raises BorrowError.
        """
        self._check_access()
        owner = self._owner
        begin, end = self._window()
        owner._borrowed = True
        logger.debug("Borrowed units %d:%d of a tensor of shape %s", begin, end, owner.shape)
        try:
            yield owner._units[begin:end]
        finally:
            owner._borrowed = False

    def _check_access(self) -> None:
        owner = self._owner
        if owner._borrowed:
            raise BorrowError("Tensor storage is exclusively borrowed.")
        if self._generation != owner._generation:
            raise StaleViewError("View refers to storage that has been reallocated by its owner.")

    #-------------------------------------------------------------------------
    #conversion

    def to_tensor(self) -> Tensor[T]:
        """Owning copy of the addressed window."""
        return type(self._owner).with_shape(self.shape, self.units, copy_data=False)

    def reshaped(self, shape: TensorShape | Sequence[int]) -> Optional[Tensor[T]]:
        """Owning copy with a new shape, None if the number of units differs."""
        shape = as_shape(shape)
        if shape.volume != self.shape.volume:
            return None
        return type(self._owner).with_shape(shape, self.units, copy_data=False)

    #-------------------------------------------------------------------------
    #comparison

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ShapedArray):
            return NotImplemented
        return self.shape == other.shape and self.units_equal(other)

    __hash__ = None # type: ignore[assignment]

    def elements_equal(self, other: ShapedArray) -> bool:
        return self == other

    def units_equal(self, other: ShapedArray) -> bool:
        """Equality of the units, ignoring the shapes."""
        if self.unit_count != other.unit_count:
            return False
        return bool(self.namespace.all(self.units == other.units))

    def is_similar(self, other: ShapedArray) -> bool:
        return self.shape.is_similar(other.shape)

    def is_isomorphic(self, other: ShapedArray) -> bool:
        return self.shape == other.shape

    #-------------------------------------------------------------------------
    #text output

    def __str__(self) -> str:
        if self.is_scalar:
            return str(self.unit(0))
        return f"[{', '.join(str(element) for element in self)}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"
