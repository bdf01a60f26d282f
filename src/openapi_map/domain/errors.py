from __future__ import annotations

"""
Error Taxonomy.

Every failure raised while building a documentation tree derives from
OpenapiMapError. They all signal malformed registry data, never a transient
condition, so callers treat a build as all-or-nothing.
"""

from typing import Sequence


class OpenapiMapError(Exception):
    """Base class for registry and type-expression failures."""


class MalformedTypeExpression(OpenapiMapError, ValueError):
    """
    Raised when a type expression matches none of the atomic, array or map shapes.

    Attributes:
        expression: The offending type expression.
    """

    def __init__(self, expression: object) -> None:
        self.expression = expression
        super().__init__(f"Unexpected type format: {expression!r}")


class NotAMap(OpenapiMapError, ValueError):
    """Raised when map decomposition is requested on a non-map expression."""

    def __init__(self, expression: object) -> None:
        self.expression = expression
        super().__init__(f"Type expression is not a map: {expression!r}")


class UnknownType(OpenapiMapError, LookupError):
    """
    Raised when a mandatory registry lookup finds no definition.

    Attributes:
        type_name: The resolved type name that was looked up.
    """

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"Type not found in registry: {type_name!r}")


class CyclicFieldsGroup(OpenapiMapError, ValueError):
    """
    Raised when a fields group splices itself, directly or transitively.

    Attributes:
        path: Fields-group names from the outermost splice to the repeated one.
    """

    def __init__(self, path: Sequence[str]) -> None:
        self.path = tuple(path)
        super().__init__("Cyclic fields group: " + " -> ".join(self.path))
