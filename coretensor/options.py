# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Hashable, Any, Optional, Self
from enum import Enum
import logging
import threading

from .backend import ArrayNamespace, DType

logger = logging.getLogger(__name__)

class OptionType(Enum):
    STORAGE = 0

class Options:

    key: Hashable

    def __init__(self, namespace: ArrayNamespace, category: OptionType):
        self.key = (namespace, category, threading.get_ident())

    def __enter__(self) -> Self:
        global _opts
        if self.key in _opts:
            self._tmp = _opts[self.key]
        else:
            self._tmp = None
        _opts[self.key] = self
        return self

    def __exit__(self, *_) -> None:
        global _opts
        if self._tmp is not None:
            _opts[self.key] = self._tmp
        else:
            del _opts[self.key]

class StorageOptions(Options):
    """
    Context manager for the storage of newly constructed tensors.
    """

    #: Array namespace the unit storage is allocated in.
    namespace: ArrayNamespace
    #: Unit dtype used when a constructor is called without one. None lets the namespace infer it.
    dtype: Optional[DType]

    def __init__(
            self, *,
            namespace: ArrayNamespace,
            dtype: Optional[DType] = None):
        self.namespace = namespace
        self.dtype = dtype
        super().__init__(namespace, OptionType.STORAGE)

    def __repr__(self) -> str:
        return f"StorageOptions(dtype={self.dtype})"

_opts: dict[Any, Options] = {}

def get_options(namespace: ArrayNamespace, otype: OptionType = OptionType.STORAGE) -> StorageOptions:
    global _opts
    key = (namespace, otype, threading.get_ident())
    if key in _opts:
        return _opts[key] # type: ignore
    return StorageOptions(namespace=namespace)

def set_options(opts: StorageOptions) -> None:
    global _opts
    logger.debug("Setting %r for thread %d", opts, threading.get_ident())
    _opts[opts.key] = opts

def default_dtype(namespace: ArrayNamespace, dtype: Optional[DType]) -> Optional[DType]:
    if dtype is not None:
        return dtype
    return get_options(namespace, OptionType.STORAGE).dtype
