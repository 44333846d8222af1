# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from __future__ import annotations
from typing import Any, Callable, Iterable, Iterator, Optional, Sequence

from .backend import ArrayLike, ArrayNamespace, DType
from .errors import ShapeMismatchError
from .rank import StaticRank, static_rank
from .shapedarray import ShapedArray
from .tensor import Tensor
from .tensorshape import TensorShape
from .tensorslice import TensorSlice
from . import construct

class RankedArray[T: ArrayLike]:
    """
    Fixed-rank wrapper around a dynamically shaped tensor or view. Shapes are tuples of
    exactly rank entries, and every check is delegated to the wrapped array.
    """

    _rank: type[StaticRank]
    _base: ShapedArray[T]

    def __init__(self, rank: int | type[StaticRank], base: ShapedArray[T]) -> None:
        rank = static_rank(rank)
        if base.rank != rank.rank:
            raise ShapeMismatchError(f"Cannot wrap a tensor of shape {base.shape} with rank {rank.rank}.")
        self._rank = rank
        self._base = base

    @property
    def rank_type(self) -> type[StaticRank]:
        return self._rank

    @property
    def rank(self) -> int:
        return self._rank.rank

    @property
    def base(self) -> ShapedArray[T]:
        """The wrapped dynamically shaped array."""
        return self._base

    @property
    def shape(self) -> tuple[int, ...]:
        return self._rank.static_shape(self._base.shape)

    @property
    def dynamic_shape(self) -> TensorShape:
        return self._base.shape

    @property
    def row_count(self) -> int:
        self._check_matrix()
        return self._base.shape[0]

    @property
    def column_count(self) -> int:
        self._check_matrix()
        return self._base.shape[1]

    def _check_matrix(self) -> None:
        if self.rank != 2:
            raise TypeError(f"Rows and columns are defined for rank 2, not rank {self.rank}.")

    @property
    def units(self) -> T:
        return self._base.units

    @property
    def unit_count(self) -> int:
        return self._base.unit_count

    @property
    def namespace(self) -> ArrayNamespace[T]:
        return self._base.namespace

    @property
    def dtype(self) -> DType:
        return self._base.dtype

    #-------------------------------------------------------------------------
    #element access

    def __len__(self) -> int:
        return len(self._base)

    def __iter__(self) -> Iterator[Any]:
        for i in range(len(self)):
            yield self[i]

    def __getitem__(self, key: int | slice) -> Any:
        """
        Integer keys give a unit for rank one and a view of the next lower rank otherwise,
        ranges give a view of the same rank.
        """
        if not isinstance(key, (int, slice)):
            raise TypeError(f"Ranked tensors are indexed by an int or a slice, got {type(key).__name__}.")
        if isinstance(key, slice):
            return RankedTensorSlice(self._rank, self._base[key])
        view = self._base[key]
        if self._rank.lower is None:
            return view.item()
        return RankedTensorSlice(self._rank.lower, view)

    def __setitem__(self, key: int | slice, value: Any) -> None:
        if not isinstance(key, (int, slice)):
            raise TypeError(f"Ranked tensors are indexed by an int or a slice, got {type(key).__name__}.")
        if isinstance(value, RankedArray):
            value = value.base
        self._base[key] = value

    def unit(self, pos: int) -> Any:
        return self._base.unit(pos)

    def update_unit(self, pos: int, value: Any) -> None:
        self._base.update_unit(pos, value)

    def increment_unit(self, pos: int, value: Any) -> None:
        self._base.increment_unit(pos, value)

    def decrement_unit(self, pos: int, value: Any) -> None:
        self._base.decrement_unit(pos, value)

    def multiply_unit(self, pos: int, value: Any) -> None:
        self._base.multiply_unit(pos, value)

    def divide_unit(self, pos: int, value: Any) -> None:
        self._base.divide_unit(pos, value)

    def to_tensor(self) -> RankedTensor[T]:
        return RankedTensor(self._rank, self._base.to_tensor())

    #-------------------------------------------------------------------------
    #comparison

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, RankedArray):
            return self._base == other._base
        if isinstance(other, ShapedArray):
            return self._base == other
        return NotImplemented

    __hash__ = None # type: ignore[assignment]

    def units_equal(self, other: RankedArray[T]) -> bool:
        return self._base.units_equal(other._base)

    def is_similar(self, other: RankedArray[T]) -> bool:
        return self._base.is_similar(other._base)

    def is_isomorphic(self, other: RankedArray[T]) -> bool:
        return self._base.is_isomorphic(other._base)

    def __str__(self) -> str:
        return str(self._base)

    def __repr__(self) -> str:
        return f"{type(self).__name__}[{self._rank.__name__}]({self})"

class RankedTensor[T: ArrayLike](RankedArray[T]):
    """Owning tensor of a static rank."""

    _base: Tensor[T]

    def __init__(self, rank: int | type[StaticRank], base: Tensor[T]) -> None:
        if not isinstance(base, Tensor):
            raise TypeError("RankedTensor wraps an owning Tensor, use RankedTensorSlice for views.")
        super().__init__(rank, base)

    @property
    def base(self) -> Tensor[T]:
        return self._base

    @classmethod
    def full(
            cls,
            rank: int | type[StaticRank],
            xp: ArrayNamespace[T],
            shape: Sequence[int] | int,
            value: Any,
            dtype: Optional[DType] = None) -> RankedTensor[T]:
        rank = static_rank(rank)
        return cls(rank, construct.full(xp, rank.dynamic_shape(shape), value, dtype))

    @classmethod
    def supplied(
            cls,
            rank: int | type[StaticRank],
            xp: ArrayNamespace[T],
            shape: Sequence[int] | int,
            supplier: Callable[[], Any],
            dtype: Optional[DType] = None) -> RankedTensor[T]:
        rank = static_rank(rank)
        return cls(rank, construct.supplied(xp, rank.dynamic_shape(shape), supplier, dtype))

    @classmethod
    def from_units(
            cls,
            rank: int | type[StaticRank],
            xp: ArrayNamespace[T],
            shape: Sequence[int] | int,
            units: Iterable[Any] | T,
            vacancy_supplier: Optional[Callable[[], Any]] = None,
            dtype: Optional[DType] = None) -> RankedTensor[T]:
        rank = static_rank(rank)
        return cls(rank, construct.from_units(xp, rank.dynamic_shape(shape), units, vacancy_supplier, dtype))

    @classmethod
    def increasing(
            cls,
            rank: int | type[StaticRank],
            xp: ArrayNamespace[T],
            shape: Sequence[int] | int,
            start: int | float = 0,
            dtype: Optional[DType] = None) -> RankedTensor[T]:
        rank = static_rank(rank)
        return cls(rank, construct.increasing(xp, rank.dynamic_shape(shape), start, dtype))

    @classmethod
    def from_literal(
            cls,
            rank: int | type[StaticRank],
            xp: ArrayNamespace[T],
            literal: Any,
            dtype: Optional[DType] = None) -> RankedTensor[T]:
        rank = static_rank(rank)
        return cls(rank, rank.make_tensor(xp, literal, dtype))

    @classmethod
    def vector(cls, xp: ArrayNamespace[T], units: Iterable[Any], dtype: Optional[DType] = None) -> RankedTensor[T]:
        """Rank one tensor holding the given units."""
        return cls(1, construct.scalar_elements(xp, units, dtype))

    @classmethod
    def from_slice(cls, view: RankedArray[T]) -> RankedTensor[T]:
        return view.to_tensor()

    def append(self, element: RankedArray[T] | ShapedArray[T]) -> None:
        if isinstance(element, RankedArray):
            element = element.base
        self._base.append(element)

    def extend(self, elements: Iterable[RankedArray[T] | ShapedArray[T]]) -> None:
        self._base.extend(e.base if isinstance(e, RankedArray) else e for e in elements)

class RankedTensorSlice[T: ArrayLike](RankedArray[T]):
    """View of a static rank into a tensor."""

    _base: TensorSlice[T]

    def __init__(self, rank: int | type[StaticRank], base: ShapedArray[T] | RankedArray[T]) -> None:
        if isinstance(base, RankedArray):
            base = base.base
        if not isinstance(base, TensorSlice):
            base = TensorSlice(base)
        super().__init__(rank, base)

    @property
    def base(self) -> TensorSlice[T]:
        return self._base
