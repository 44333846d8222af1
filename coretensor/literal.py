# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Optional

from .errors import MalformedLiteralError

_ORDINALS = {1: "1st", 2: "2nd", 3: "3rd"}

def is_nested(x: Any) -> bool:
    return hasattr(x, "__len__") and hasattr(x, "__getitem__") and not isinstance(x, (str, bytes))

def literal_rank(literal: Any) -> int:
    """Nesting depth of a literal, following the first element at each level."""
    rank = 0
    while is_nested(literal):
        rank += 1
        if len(literal) == 0:
            break
        literal = literal[0]
    return rank

def parse_literal(literal: Any, rank: Optional[int] = None) -> tuple[list[int], list[Any]]:
    """
    Validate a nested literal and return its dimensions and its units in row-major
    order. At every nesting level all siblings must have identical length and no level
    may be empty.
    """
    if rank is None:
        rank = literal_rank(literal)
    dims: list[int] = []
    units: list[Any] = []

    def visit(node: Any, depth: int) -> None:
        if depth == rank:
            if is_nested(node):
                raise MalformedLiteralError(f"Literal is nested deeper than rank {rank}.")
            units.append(node)
            return
        if not is_nested(node):
            raise MalformedLiteralError(f"Expected a sequence in the {_ordinal(depth+1)} dimension, got {node!r}.")
        if len(dims) == depth:
            if len(node) == 0:
                raise MalformedLiteralError(f"The {_ordinal(depth+1)} dimension cannot be empty.")
            dims.append(len(node))
        elif len(node) != dims[depth]:
            raise MalformedLiteralError(f"Element tensors in the {_ordinal(depth+1)} dimension have mismatching shapes.")
        for child in node:
            visit(child, depth+1)

    visit(literal, 0)
    return dims, units

def _ordinal(n: int) -> str:
    return _ORDINALS.get(n, f"{n}th")
