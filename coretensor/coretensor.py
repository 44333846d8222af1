# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Callable, Iterable, Optional, Sequence
from dataclasses import dataclass

from .backend import ArrayNamespace, DType, get_index_dtype, get_namespace
from .tensorshape import TensorShape
from .tensorindex import TensorIndex
from .tensor import Tensor
from .shapedarray import ShapedArray
from .rank import StaticRank
from .rankedtensor import RankedTensor
from .options import StorageOptions, OptionType, get_options as _get_options, set_options as _set_options

from . import construct as _construct

# Construction wrapper
@dataclass(frozen=True)
class CoreTensor[NDArray: Any]:

    #: Array namespace for the unit storage.
    namespace: ArrayNamespace[NDArray]

    #: Internally used index type.
    index_type: Any

    def __init__(self, namespace: Any, dtype: Optional[DType] = None) -> None:
        object.__setattr__(self, "namespace", get_namespace(namespace))
        object.__setattr__(self, "index_type", get_index_dtype(self.namespace))

        _set_options(self.storage(dtype))

    #-------------------------------------------------------------------------------------------------
    # base wrapper

    def shape(self, *dims: int) -> TensorShape:
        """
        Shape of a tensor, outermost dimension first. No dimensions give the scalar shape.
        """
        return TensorShape(dims)

    def index(self, *coords: int) -> TensorIndex:
        """
        Coordinates into a tensor. Fewer coordinates than the rank address a sub-tensor.
        """
        return TensorIndex(coords)

    #-------------------------------------------------------------------------------------------------
    # construction wrapper

    def full(self, shape: TensorShape | Sequence[int], value: Any, dtype: Optional[DType] = None) -> Tensor[NDArray]:
        """
        Tensor where all units are set to the given value.
        """
        return _construct.full(self.namespace, shape, value, dtype)

    def supplied(self, shape: TensorShape | Sequence[int], supplier: Callable[[], Any], dtype: Optional[DType] = None) -> Tensor[NDArray]:
        """
        Tensor filled by calling the supplier once for each unit in row-major order.
        """
        return _construct.supplied(self.namespace, shape, supplier, dtype)

    def from_units(
            self,
            shape: TensorShape | Sequence[int],
            units: Iterable[Any] | NDArray,
            vacancy_supplier: Optional[Callable[[], Any]] = None,
            dtype: Optional[DType] = None
            ) -> Tensor[NDArray]:
        """
        Tensor filled from a flat sequence of units. Surplus units are ignored, missing
        units are produced by the vacancy supplier.
        """
        return _construct.from_units(self.namespace, shape, units, vacancy_supplier, dtype)

    def increasing(self, shape: TensorShape | Sequence[int], start: int | float = 0, dtype: Optional[DType] = None) -> Tensor[NDArray]:
        """
        Tensor with units increasing by one from start.
        """
        return _construct.increasing(self.namespace, shape, start, dtype)

    def scalar(self, value: Any, dtype: Optional[DType] = None) -> Tensor[NDArray]:
        return _construct.scalar(self.namespace, value, dtype)

    def empty(self, element_shape: TensorShape | Sequence[int], dtype: Optional[DType] = None) -> Tensor[NDArray]:
        """
        Tensor without elements of the given element shape.
        """
        return _construct.empty(self.namespace, element_shape, dtype)

    def from_elements(
            self,
            element_shape: TensorShape | Sequence[int],
            elements: Iterable[ShapedArray[NDArray]],
            dtype: Optional[DType] = None
            ) -> Tensor[NDArray]:
        return _construct.from_elements(self.namespace, element_shape, elements, dtype)

    def scalar_elements(self, values: Iterable[Any], dtype: Optional[DType] = None) -> Tensor[NDArray]:
        """
        Rank one tensor holding the given values.
        """
        return _construct.scalar_elements(self.namespace, values, dtype)

    def tensor(self, literal: Any, dtype: Optional[DType] = None) -> Tensor[NDArray]:
        """
        Tensor from a nested list literal. Siblings must have identical lengths on every level.
        """
        return _construct.from_nested(self.namespace, literal, dtype)

    #-------------------------------------------------------------------------------------------------
    # static rank wrapper

    def ranked(self, rank: int | type[StaticRank], literal: Any, dtype: Optional[DType] = None) -> RankedTensor[NDArray]:
        """
        Tensor of a static rank from a nested literal that is exactly rank levels deep.
        """
        return RankedTensor.from_literal(rank, self.namespace, literal, dtype)

    def ranked_full(self, shape: Sequence[int], value: Any, dtype: Optional[DType] = None) -> RankedTensor[NDArray]:
        """
        Tensor of a static rank where all units are set to the given value. The rank is
        the length of the shape.
        """
        return RankedTensor.full(len(shape), self.namespace, shape, value, dtype)

    def vector(self, units: Iterable[Any], dtype: Optional[DType] = None) -> RankedTensor[NDArray]:
        return RankedTensor.vector(self.namespace, units, dtype)

    def matrix(self, literal: Any, dtype: Optional[DType] = None) -> RankedTensor[NDArray]:
        return RankedTensor.from_literal(2, self.namespace, literal, dtype)

    #-------------------------------------------------------------------------------------------------
    # default options

    def storage(self, dtype: Optional[DType] = None) -> StorageOptions:
        """
        Storage of newly constructed tensors. Usable as context manager to change the
        default unit dtype temporarily.
        """
        return StorageOptions(namespace=self.namespace, dtype=dtype)

    def get_options(self, otype: OptionType = OptionType.STORAGE) -> StorageOptions:
        return _get_options(self.namespace, otype)

    def set_options(self, opts: StorageOptions) -> None:
        _set_options(opts)
