# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

import sys
from typing import overload, SupportsIndex, Iterator, Iterable, Sequence, Any, Self
from dataclasses import dataclass

@dataclass(frozen=True, init=False)
class SequenceOf[T](Sequence):
    """
    Immutable, hashable sequence. Slicing returns an instance of the same class,
    so subclasses keep their type through prefix and suffix operations.
    """

    _seq_data: tuple[T, ...]

    def __init__(self, data: Iterable[T]) -> None:
        object.__setattr__(self, "_seq_data", tuple(data))

    def _new(self, data: Iterable[T]) -> Self:
        return type(self)(data)

    #-------------------------------------------------------------------------
    #container behaviour

    def __len__(self) -> int:
        return len(self._seq_data)

    def __iter__(self) -> Iterator[T]:
        return self._seq_data.__iter__()

    def __reversed__(self) -> Iterator[T]:
        return self._seq_data.__reversed__()

    @overload
    def __getitem__(self, idx: SupportsIndex) -> T: ...
    @overload
    def __getitem__(self, idx: slice) -> Self: ...
    #implementation
    def __getitem__(self, idx: SupportsIndex | slice) -> T | Self:
        if isinstance(idx, slice):
            return self._new(self._seq_data[idx])
        return self._seq_data[idx]

    def __contains__(self, item: Any) -> bool:
        return item in self._seq_data

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, type(self))\
               and self._seq_data == other._seq_data

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._seq_data))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._seq_data)})"

    def index(self, value: T, start: SupportsIndex = 0, stop: SupportsIndex = sys.maxsize) -> int:
        return self._seq_data.index(value, start, stop)

    def count(self, value: T) -> int:
        return self._seq_data.count(value)

    def as_tuple(self) -> tuple[T, ...]:
        return self._seq_data

def as_ints(values: Iterable[Any], what: str) -> Sequence[int]:
    res = []
    for value in values:
        if isinstance(value, bool):
            raise TypeError(f"{what} must be integers, got {value!r}")
        try:
            res.append(value.__index__())
        except AttributeError:
            raise TypeError(f"{what} must be integers, got {value!r}")
    return res
