# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""Structural types for the parts of the array API standard used as unit storage."""

from typing import Protocol, Any, Sequence, Optional, Self

type DType = Any
type Device = Any

class ArrayLike(Protocol):

    @property
    def dtype(self) -> DType: ...
    @property
    def shape(self) -> tuple[int | None, ...]: ...
    @property
    def ndim(self) -> int: ...

    def __getitem__(self, key: Any, /) -> Any: ...
    def __setitem__(self, key: Any, value: Any, /) -> None: ...
    def __eq__(self, other: Any, /) -> Any: ...  # type: ignore[override]
    def __truediv__(self, other: Any, /) -> Self: ...

class ArrayNamespace[T: ArrayLike](Protocol):

    def asarray(self, obj: Any, /, *, dtype: Optional[DType] = None,
                device: Optional[Device] = None, copy: Optional[bool] = None) -> T: ...
    def full(self, shape: tuple[int, ...], fill_value: Any, *,
             dtype: Optional[DType] = None, device: Optional[Device] = None) -> T: ...
    def empty(self, shape: tuple[int, ...], *,
              dtype: Optional[DType] = None, device: Optional[Device] = None) -> T: ...
    def arange(self, start: int, /, stop: Optional[int] = None, step: int = 1, *,
               dtype: Optional[DType] = None, device: Optional[Device] = None) -> T: ...
    def concat(self, arrays: Sequence[T], /, *, axis: Optional[int] = 0) -> T: ...
    def reshape(self, x: T, /, shape: tuple[int, ...]) -> T: ...
    def all(self, x: T, /) -> T: ...
    def isdtype(self, dtype: DType, kind: str | tuple[str, ...], /) -> bool: ...
    def __array_namespace_info__(self) -> Any: ...
