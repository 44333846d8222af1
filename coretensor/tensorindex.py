# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from __future__ import annotations
from typing import Any, Iterable
from dataclasses import dataclass
from math import prod

from .sequenceof import SequenceOf, as_ints
from .tensorshape import TensorShape

@dataclass(frozen=True, init=False, eq=False, repr=False)
class TensorIndex(SequenceOf[int]):
    """
    Coordinates into a tensor, outermost dimension first. An index may address only a
    prefix of the dimensions, in which case it denotes a sub-tensor.
    """

    def __init__(self, coords: Iterable[int] = (), /) -> None:
        super().__init__(as_ints(coords, "Index coordinates"))

    @classmethod
    def repeating(cls, value: int, count: int) -> TensorIndex:
        return cls([value] * count)

    @property
    def dimension(self) -> int:
        """Dimension addressed by the last coordinate."""
        return len(self) - 1

    def contiguous_index(self, shape: TensorShape) -> int:
        """
        Row-major position of this index. Strides are taken from the prefix of the shape
        that has as many dimensions as the index has coordinates.
        """
        trimmed = shape[:len(self)]
        if len(trimmed) == 0:
            return 0
        return sum(coord * prod(trimmed[i+1:]) for i, coord in enumerate(self))

    def advanced(self, n: int) -> TensorIndex:
        """Advance the last coordinate by n."""
        if len(self) == 0:
            return self
        return TensorIndex([*self[:-1], self[-1] + n])

    def distance(self, other: TensorIndex) -> int:
        if len(self) != len(other):
            raise ValueError("Indices are not in the same dimension.")
        if len(self) == 0:
            return 0
        return other[-1] - self[-1]

    #-------------------------------------------------------------------------
    #ordering, most significant coordinate first

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, TensorIndex):
            return NotImplemented
        return self.as_tuple() < other.as_tuple()

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, TensorIndex):
            return NotImplemented
        return self.as_tuple() <= other.as_tuple()

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, TensorIndex):
            return NotImplemented
        return self.as_tuple() > other.as_tuple()

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, TensorIndex):
            return NotImplemented
        return self.as_tuple() >= other.as_tuple()
