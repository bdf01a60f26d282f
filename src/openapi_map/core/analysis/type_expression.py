from __future__ import annotations

"""
Type-Expression Parser.

Decodes the compact type markers used by registry fields:
'Contact Object' (atomic), '[Tag Object]' (array) and '{Path Item Object}' or
'{expression, Callback Object}' (map). Arrays and maps are transparent
wrappers around a registry lookup key; nesting them is not supported.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from openapi_map.domain.constants import (
    ARRAY_PATTERN,
    ATOMIC_PATTERN,
    MAP_DEFAULT_KEY,
    MAP_PATTERN,
)
from openapi_map.domain.errors import MalformedTypeExpression, NotAMap

# -----------------------------------------------------------------------------
# MODELS
# -----------------------------------------------------------------------------

class TypeShape(Enum):
    ATOMIC = "atomic"
    ARRAY = "array"
    MAP = "map"


@dataclass(frozen=True)
class MapParts:
    """Key label and value type of a map expression."""
    key: str
    type: str

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def classify(expr: str) -> TypeShape:
    """
    Determine which of the three grammar shapes an expression has.

    Shapes are tried in order atomic, array, map.

    Raises:
        MalformedTypeExpression: If no shape matches.
    """
    if not isinstance(expr, str):
        raise MalformedTypeExpression(expr)
    if ATOMIC_PATTERN.match(expr):
        return TypeShape.ATOMIC
    if ARRAY_PATTERN.match(expr):
        return TypeShape.ARRAY
    if MAP_PATTERN.match(expr):
        return TypeShape.MAP
    raise MalformedTypeExpression(expr)


def parse_type_name(expr: str) -> str:
    """
    Extract the registry lookup key of a type expression.

    Args:
        expr: Atomic, array or map expression.

    Returns:
        str: The trimmed atomic name, array item type or map value type.

    Raises:
        MalformedTypeExpression: If the expression is not well-formed.
    """
    shape = classify(expr)
    if shape is TypeShape.ATOMIC:
        return expr.strip()
    if shape is TypeShape.ARRAY:
        return ARRAY_PATTERN.match(expr).group(1).strip()
    return parse_map_parts(expr).type


def parse_map_parts(expr: str) -> MapParts:
    """
    Split a map expression into its key label and value type.

    '{X}' gives key 'name'; '{K, X}' gives key 'K'.

    Raises:
        NotAMap: If the expression is not a map expression.
    """
    match = MAP_PATTERN.match(expr) if isinstance(expr, str) else None
    if match is None:
        raise NotAMap(expr)

    first, second = match.group(1), match.group(2)
    if second:
        return MapParts(key=first.strip(), type=second.strip())
    return MapParts(key=MAP_DEFAULT_KEY, type=first.strip())


def is_array(expr: Optional[str]) -> bool:
    return expr is not None and "[" in expr


def is_map(expr: Optional[str]) -> bool:
    return expr is not None and "{" in expr
