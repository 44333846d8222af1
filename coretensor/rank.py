# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from __future__ import annotations
from typing import Any, ClassVar, Optional, Sequence

from .backend import ArrayLike, ArrayNamespace, DType
from .errors import ShapeMismatchError
from .literal import parse_literal
from .options import default_dtype
from .tensor import Tensor
from .tensorshape import TensorShape

class StaticRank:
    """
    Compile-time style rank marker. Subclasses fix the number of dimensions and name the
    rank of their elements; shapes of ranked tensors are plain tuples of that length.
    """

    rank: ClassVar[int]
    #: Rank of the elements, None when the elements are units.
    lower: ClassVar[Optional[type[StaticRank]]] = None

    @classmethod
    def static_shape(cls, dynamic: TensorShape) -> tuple[int, ...]:
        if dynamic.rank != cls.rank:
            raise ShapeMismatchError(f"Shape {dynamic} does not have rank {cls.rank}.")
        return tuple(dynamic[i] for i in range(cls.rank))

    @classmethod
    def dynamic_shape(cls, static: Sequence[int] | int) -> TensorShape:
        if isinstance(static, int):
            static = (static,)
        if len(static) != cls.rank:
            raise ShapeMismatchError(f"Shape {tuple(static)} does not have rank {cls.rank}.")
        return TensorShape(static)

    @classmethod
    def make_tensor[T: ArrayLike](cls, xp: ArrayNamespace[T], literal: Any, dtype: Optional[DType] = None) -> Tensor[T]:
        """Tensor from a nested literal exactly rank levels deep."""
        dims, units = parse_literal(literal, cls.rank)
        data = xp.asarray(units, dtype=default_dtype(xp, dtype))
        return Tensor.with_shape(TensorShape(dims), data, copy_data=False)

class R1(StaticRank):
    rank = 1

class R2(StaticRank):
    rank = 2
    lower = R1

class R3(StaticRank):
    rank = 3
    lower = R2

class R4(StaticRank):
    rank = 4
    lower = R3

RANKS: dict[int, type[StaticRank]] = {1: R1, 2: R2, 3: R3, 4: R4}

def static_rank(rank: int | type[StaticRank]) -> type[StaticRank]:
    if isinstance(rank, type) and issubclass(rank, StaticRank):
        return rank
    if rank not in RANKS:
        raise ValueError(f"Static ranks are available for 1 to 4 dimensions, got {rank}.")
    return RANKS[rank] # type: ignore
