# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Sequence, Generator
from itertools import product

from .errors import OutOfBoundsError

def transform_index(idx: int, length: int) -> int:
    if idx < 0:
        idx += length
    if idx < 0 or idx >= length:
        raise OutOfBoundsError(f"Index {idx} out of range for dimension of size {length}.")
    return idx

def transform_range(cut: slice, length: int) -> tuple[int, int]:
    if cut.step not in (None, 1):
        raise ValueError(f"Only contiguous ranges are supported, got step {cut.step}.")
    start = 0 if cut.start is None else cut.start
    stop = length if cut.stop is None else cut.stop
    if start < 0:
        start += length
    if stop < 0:
        stop += length
    if start < 0 or stop > length or stop < start:
        raise OutOfBoundsError(f"Range {cut.start}:{cut.stop} out of bounds for dimension of size {length}.")
    return start, stop

def sequence_product(seq: Sequence[int]) -> Generator[Sequence[int], None, None]:
    ranges = [range(s) for s in seq]
    for idxs in product(*ranges):
        yield idxs
