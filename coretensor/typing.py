# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""typing has all classes used in the external API of coretensor."""

from .tensorshape import TensorShape
from .tensorindex import TensorIndex
from .bounds import Bounds

from .shapedarray import ShapedArray
from .tensor import Tensor
from .tensorslice import TensorSlice

from .rank import StaticRank, R1, R2, R3, R4
from .rankedtensor import RankedArray, RankedTensor, RankedTensorSlice

from .errors import (
    TensorError,
    ShapeMismatchError,
    ShapeSizeMismatchError,
    OutOfBoundsError,
    InvalidRankAccessError,
    MalformedLiteralError,
    UnsupportedUnitError,
    StaleViewError,
    BorrowError,
)

from .options import Options, StorageOptions, OptionType

from .coretensor import CoreTensor
