# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from __future__ import annotations
from typing import ClassVar, Iterable, Optional, Sequence, TYPE_CHECKING
from dataclasses import dataclass
from math import prod

from .sequenceof import SequenceOf, as_ints

if TYPE_CHECKING:
    from .tensorindex import TensorIndex

@dataclass(frozen=True, init=False, eq=False, repr=False)
class TensorShape(SequenceOf[int]):
    """
    Shape of a tensor, an immutable sequence of non-negative dimension sizes with the
    outermost dimension first. The empty shape describes a scalar.

    Shape algebra that may be infeasible (concatenation, multiplication, broadcasting)
    returns None instead of raising, so the ``can_*`` predicates are derived from the
    same computation.
    """

    #: The scalar shape.
    SCALAR: ClassVar[TensorShape]

    #-------------------------------------------------------------------------
    #constructor

    def __init__(self, dims: Iterable[int] = (), /) -> None:
        dims = as_ints(dims, "Dimension sizes")
        if any(d < 0 for d in dims):
            raise ValueError(f"Dimension sizes must be non-negative, got {list(dims)}")
        super().__init__(dims)

    @classmethod
    def vector(cls, size: int) -> TensorShape:
        return cls([size])

    @classmethod
    def matrix(cls, row_count: int, column_count: int) -> TensorShape:
        return cls([row_count, column_count])

    #-------------------------------------------------------------------------
    #properties

    @property
    def rank(self) -> int:
        """Number of dimensions."""
        return len(self)

    @property
    def contiguous_size(self) -> int:
        """Product of the dimensions of the simplified shape."""
        return prod(self.simplified())

    @property
    def volume(self) -> int:
        """Product of all dimensions, i.e. the number of units stored for this shape."""
        return prod(self)

    @property
    def is_scalar(self) -> bool:
        return self.rank == 0

    @property
    def is_vector(self) -> bool:
        return self.rank == 1

    @property
    def is_matrix(self) -> bool:
        return self.rank == 2

    @property
    def transpose(self) -> TensorShape:
        return self._new(reversed(self))

    #-------------------------------------------------------------------------
    #derived shapes

    def prepending(self, size: int) -> TensorShape:
        return TensorShape([size, *self])

    def dropping_first(self, count: int = 1) -> TensorShape:
        return self[count:]

    def dropping_dimension(self, dim: int) -> TensorShape:
        """Remove a dimension. An index outside the shape leaves it unchanged."""
        if dim < 0 or dim >= self.rank:
            return self
        return self._new(d for i, d in enumerate(self) if i != dim)

    def replacing_dimension(self, dim: int, size: int) -> TensorShape:
        """Shape with the size of one dimension replaced."""
        if dim < 0:
            dim += self.rank
        if dim < 0 or dim >= self.rank:
            raise IndexError(f"Dimension {dim} out of range for shape of rank {self.rank}.")
        dims = list(self)
        dims[dim] = size
        return TensorShape(dims)

    def dropping_higher_paddings(self) -> TensorShape:
        """Drop the leading dimensions of size one."""
        for i, d in enumerate(self):
            if d != 1:
                return self[i:]
        return TensorShape.SCALAR

    def dropping_zero_dimensions(self) -> TensorShape:
        """Truncate the shape at its first dimension of size zero."""
        for i, d in enumerate(self):
            if d == 0:
                return self[:i]
        return self

    def simplified(self) -> TensorShape:
        return self.dropping_higher_paddings().dropping_zero_dimensions()

    def shape_after(self, index: TensorIndex | Sequence[int]) -> Optional[TensorShape]:
        """Shape addressed by a (partial) index, None if the index is longer than the rank."""
        if len(index) > self.rank:
            return None
        return self.dropping_first(len(index))

    def contiguous_index(self, index: TensorIndex) -> int:
        """Row-major position of the index within this shape."""
        return index.contiguous_index(self)

    #-------------------------------------------------------------------------
    #comparison

    def is_similar(self, other: TensorShape) -> bool:
        """Equality of the simplified shapes."""
        return self.simplified() == other.simplified()

    #-------------------------------------------------------------------------
    #shape algebra

    def concatenating(self, other: TensorShape, dim: int = 0) -> Optional[TensorShape]:
        """
        Concatenate two shapes that agree in every dimension except ``dim``.
        Shapes are not conformed, so [1, 8] and [1, 8] concatenate to [2, 8].
        """
        if self.rank != other.rank or dim < 0 or dim >= self.rank:
            return None
        if self[:dim] != other[:dim] or self[dim+1:] != other[dim+1:]:
            return None
        return self.replacing_dimension(dim, self[dim] + other[dim])

    def can_concatenate(self, other: TensorShape, dim: int = 0) -> bool:
        return self.concatenating(other, dim) is not None

    def multiplied(self, other: TensorShape) -> Optional[TensorShape]:
        """Tensor product shape: the last dimension of self contracts the first of other."""
        lhs, rhs = conformed(self, other)
        if lhs.is_scalar:
            return TensorShape.SCALAR
        if lhs[-1] != rhs[0]:
            return None
        return TensorShape([*lhs[:-1], *rhs[1:]])

    def can_multiply(self, other: TensorShape) -> bool:
        return self.multiplied(other) is not None

    def matrix_multiplied(self, other: TensorShape) -> Optional[TensorShape]:
        """
        Matrix product shape on the trailing two dimensions. Leading (batch) dimensions
        have to be equal after conforming.
        """
        lhs, rhs = conformed(self, other)
        if lhs.rank < 2:
            return None
        if lhs[:-2] != rhs[:-2] or lhs[-1] != rhs[-2]:
            return None
        return TensorShape([*lhs[:-1], rhs[-1]])

    def can_matrix_multiply(self, other: TensorShape) -> bool:
        return self.matrix_multiplied(other) is not None

    def broadcasted(self, other: TensorShape) -> Optional[TensorShape]:
        """Broadcast self to other. Only scalar broadcasting and equal shapes are supported."""
        lhs, rhs = conformed(self, other)
        if lhs.is_similar(TensorShape.SCALAR) or lhs == rhs:
            return other
        return None

    def can_broadcast(self, other: TensorShape) -> bool:
        return self.broadcasted(other) is not None

    def mutually_broadcasted(self, other: TensorShape) -> Optional[TensorShape]:
        res = self.broadcasted(other)
        if res is None:
            res = other.broadcasted(self)
        return res

    def can_mutually_broadcast(self, other: TensorShape) -> bool:
        return self.mutually_broadcasted(other) is not None

    #-------------------------------------------------------------------------
    #some magic

    def __str__(self) -> str:
        return f"[{', '.join(str(d) for d in self)}]"

TensorShape.SCALAR = TensorShape()

def conformed(lhs: TensorShape, rhs: TensorShape) -> tuple[TensorShape, TensorShape]:
    """
    Simplify both shapes and left-pad the one of lower rank with dimensions of size one,
    so both have the same rank. The higher-ranked shape is never truncated.
    """
    lhs, rhs = lhs.simplified(), rhs.simplified()
    if lhs.rank < rhs.rank:
        lhs = TensorShape([1] * (rhs.rank - lhs.rank) + list(lhs))
    elif rhs.rank < lhs.rank:
        rhs = TensorShape([1] * (lhs.rank - rhs.rank) + list(rhs))
    return lhs, rhs

def as_shape(shape: TensorShape | Sequence[int] | int) -> TensorShape:
    if isinstance(shape, TensorShape):
        return shape
    if isinstance(shape, int):
        return TensorShape([shape])
    return TensorShape(shape)
