# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Self
from dataclasses import dataclass
from functools import total_ordering

@total_ordering
@dataclass(kw_only=True, frozen=True)
class Bounds:
    """Half-open range of element positions along the leading dimension of a view."""

    begin: int
    end: int

    def __init__(self, *, begin: int, end: int) -> None:
        if begin < 0:
            raise ValueError("Bounds begin must be non-negative.")
        elif end < begin:
            raise ValueError("Bounds end must not be smaller than begin.")
        object.__setattr__(self, "begin", begin)
        object.__setattr__(self, "end", end)

    def __len__(self) -> int:
        return self.end - self.begin

    def __hash__(self) -> int:
        return hash((self.begin, self.end))

    def __lt__(self, other: Self) -> bool:
        if self.begin != other.begin:
            return self.begin < other.begin
        return self.end < other.end

    def narrowed(self, begin: int, end: int) -> Self:
        """Sub-range given relative to this range."""
        if end > len(self):
            raise ValueError("Narrowed bounds exceed the current bounds.")
        return type(self)(begin=self.begin + begin, end=self.begin + end)

    def as_range(self) -> range:
        return range(self.begin, self.end)
