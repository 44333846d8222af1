# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from __future__ import annotations
from typing import Any, Optional, TYPE_CHECKING

from .backend import ArrayLike
from .bounds import Bounds
from .shapedarray import ShapedArray
from .tensorindex import TensorIndex
from .tensorshape import TensorShape

if TYPE_CHECKING:
    from .tensor import Tensor

class TensorSlice[T: ArrayLike](ShapedArray[T]):
    """
    Non-owning view of a sub-tensor. Reads and writes go to the storage of the owning
    tensor. A view stays valid until its owner reallocates its storage; any access after
    that raises StaleViewError.

    :param base: Tensor or view the new view is taken from.
    :param key: Subscript relative to ``base``, defaults to the whole of ``base``.
    """

    __owner: Tensor[T]
    _shape: TensorShape
    _begin: int

    def __init__(self, base: ShapedArray[T], key: Any = ()) -> None:
        base._check_access()
        indices, bounds = base._address(key)
        owner = base._owner
        self.__owner = owner
        self._indices = indices
        self._bounds = bounds
        self._generation = owner._generation

        full = owner.shape
        shape = full.dropping_first(len(indices))
        begin = indices.contiguous_index(full) * shape.volume
        if bounds is not None:
            begin += bounds.begin * shape.dropping_first().volume
            shape = shape.replacing_dimension(0, len(bounds))
        self._shape = shape
        self._begin = begin

    @property
    def _owner(self) -> Tensor[T]:
        return self.__owner

    @property
    def base(self) -> Tensor[T]:
        """The owning tensor."""
        return self.__owner

    @property
    def indices(self) -> TensorIndex:
        """Fixed leading coordinates into the owner."""
        return self._indices

    @property
    def bounds(self) -> Optional[Bounds]:
        """Range of the view's leading dimension within the owner, None if unrestricted."""
        return self._bounds

    @property
    def shape(self) -> TensorShape:
        return self._shape

    def _window(self) -> tuple[int, int]:
        return self._begin, self._begin + self._shape.volume
