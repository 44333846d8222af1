# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any
import array_api_compat as api
from array_api_compat import size as _size

from .array_namespace import ArrayNamespace, ArrayLike, Device, DType


def get_namespace(obj: Any) -> ArrayNamespace:
    if not api.is_array_api_obj(obj):
        try:
            obj = obj.zeros(1)
        except AttributeError:
            raise TypeError("Provided object is not a recognized array or namespace.")
    return api.array_namespace(obj) # type: ignore

def namespace_of_arrays[T: ArrayLike](*arrays: T) -> ArrayNamespace[T]:
    return api.array_namespace(*arrays) # type: ignore

def is_array(obj: Any) -> bool:
    return api.is_array_api_obj(obj)

def get_index_dtype(xp: ArrayNamespace) -> Any:
    info = xp.__array_namespace_info__()
    dtypes = info.dtypes(kind=None)
    for name in ["int64", "int32", "int16"]:
        if name in dtypes:
            return dtypes[name]
    raise ValueError("No suitable index dtype found")

def size(array: ArrayLike) -> int:
    val = _size(array)
    if val is None:
        raise ValueError("Array size is unknown (None).")
    return val

def flat(xp: ArrayNamespace, array: ArrayLike) -> ArrayLike:
    """Return a one-dimensional version of the array."""
    if array.ndim == 1:
        return array
    return xp.reshape(array, (-1,))

__all__ = ["ArrayNamespace", "ArrayLike", "Device", "DType",
           "get_namespace", "namespace_of_arrays", "is_array", "get_index_dtype", "size", "flat"]
