# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

import logging

from .tensorshape import TensorShape
from .tensorindex import TensorIndex
from .tensor import Tensor
from .tensorslice import TensorSlice
from .rank import StaticRank, R1, R2, R3, R4
from .rankedtensor import RankedTensor, RankedTensorSlice
from .errors import TensorError

from .options import set_options, get_options, OptionType, StorageOptions
from .coretensor import CoreTensor

logging.getLogger(__name__).addHandler(logging.NullHandler())
