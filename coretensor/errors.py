# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""
Exceptions raised for contract violations. Every class also derives from the builtin
exception a caller would expect, so ``except IndexError`` keeps working.
Feasibility queries on shapes never raise; they return None instead.
"""

class TensorError(Exception):
    """Base class of all tensor errors."""
    pass

class ShapeMismatchError(TensorError, ValueError):
    """Raised when an assigned or appended tensor does not have the required shape."""
    pass

class ShapeSizeMismatchError(ShapeMismatchError):
    """Raised when a unit sequence does not fill the requested shape."""
    pass

class OutOfBoundsError(TensorError, IndexError):
    """Raised when a coordinate, range or unit position lies outside its dimension."""
    pass

class InvalidRankAccessError(TensorError, IndexError):
    """Raised when a scalar is indexed or an index has more coordinates than the rank."""
    pass

class MalformedLiteralError(TensorError, ValueError):
    """Raised when a nested literal has inconsistent sub-lengths."""
    pass

class UnsupportedUnitError(TensorError, TypeError):
    """Raised when a unit arithmetic operation is not supported by the dtype."""
    pass

class StaleViewError(TensorError, RuntimeError):
    """Raised when a view is used after its owner reallocated the storage."""
    pass

class BorrowError(TensorError, RuntimeError):
    """Raised when storage is accessed while it is exclusively borrowed."""
    pass
