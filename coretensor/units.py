# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""
Unit capabilities. A unit dtype always supports reading and updating; increment, decrement
and multiply need a numeric dtype, divide needs an integral dtype (truncating toward zero)
or a floating dtype.
"""

from typing import Any
from enum import Enum

from .backend import ArrayNamespace, DType
from .errors import UnsupportedUnitError

class UnitKind(Enum):
    BOOL = 0
    INTEGRAL = 1
    FLOATING = 2
    OTHER = 3

def unit_kind(xp: ArrayNamespace, dtype: DType) -> UnitKind:
    if xp.isdtype(dtype, "bool"):
        return UnitKind.BOOL
    if xp.isdtype(dtype, "integral"):
        return UnitKind.INTEGRAL
    if xp.isdtype(dtype, ("real floating", "complex floating")):
        return UnitKind.FLOATING
    return UnitKind.OTHER

def is_arithmetic(xp: ArrayNamespace, dtype: DType) -> bool:
    return unit_kind(xp, dtype) in (UnitKind.INTEGRAL, UnitKind.FLOATING)

def check_arithmetic(xp: ArrayNamespace, dtype: DType, operation: str) -> None:
    if not is_arithmetic(xp, dtype):
        raise UnsupportedUnitError(f"Units of dtype {dtype} do not support {operation}.")

def divided(xp: ArrayNamespace, dtype: DType, unit: Any, divisor: Any) -> Any:
    kind = unit_kind(xp, dtype)
    if kind == UnitKind.INTEGRAL:
        num, den = int(unit), int(divisor)
        quot = abs(num) // abs(den)
        return -quot if (num < 0) != (den < 0) else quot
    elif kind == UnitKind.FLOATING:
        return unit / divisor
    raise UnsupportedUnitError(f"Units of dtype {dtype} do not support division.")
