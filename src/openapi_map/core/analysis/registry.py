from __future__ import annotations

"""
Registry Accessor.

Pure lookup helpers answering questions about type expressions and fields
against a type registry. Fields groups are invisible here except through
flattened_fields, which splices them into the field list of the types that
reference them.
"""

import logging
from typing import List, Optional, Tuple

from openapi_map.core.analysis.type_expression import parse_type_name
from openapi_map.domain.errors import CyclicFieldsGroup, UnknownType
from openapi_map.domain.registry_models import Field, Registry, TypeDefinition

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# LOOKUPS
# -----------------------------------------------------------------------------

def resolve_definition(registry: Registry, type_expr: Optional[str]) -> Optional[TypeDefinition]:
    """Return the registry entry behind a type expression, or None."""
    if type_expr is None:
        return None
    return registry.get(parse_type_name(type_expr))


def require_definition(registry: Registry, type_expr: str) -> TypeDefinition:
    """
    Return the registry entry behind a type expression.

    Raises:
        UnknownType: If the resolved type name has no entry.
    """
    type_name = parse_type_name(type_expr)
    definition = registry.get(type_name)
    if definition is None:
        raise UnknownType(type_name)
    return definition


def is_fields_group(registry: Registry, type_expr: Optional[str]) -> bool:
    definition = resolve_definition(registry, type_expr)
    return definition is not None and definition.fields_group


def is_known_type(registry: Registry, type_expr: Optional[str]) -> bool:
    """True for documented types; fields groups do not count."""
    definition = resolve_definition(registry, type_expr)
    return definition is not None and not definition.fields_group


def is_atomic_field(registry: Registry, field: Field) -> bool:
    """True when the field is untyped or its type has no registry entry (string, integer...)."""
    return resolve_definition(registry, field.type) is None


def allows_extension(definition: TypeDefinition) -> bool:
    return definition.allow_extension


def allows_reference(field: Field) -> bool:
    return field.allow_reference

# -----------------------------------------------------------------------------
# FIELDS-GROUP SPLICING
# -----------------------------------------------------------------------------

def flattened_fields(registry: Registry, definition: TypeDefinition) -> List[Field]:
    """
    Return the definition's fields with fields groups spliced in place.

    Each field typed with a fields group is replaced by that group's own
    flattened fields, so original ordering is preserved.

    Raises:
        CyclicFieldsGroup: If a group splices itself, directly or transitively.
    """
    return _flatten(registry, definition, ())


def _flatten(registry: Registry, definition: TypeDefinition, path: Tuple[str, ...]) -> List[Field]:
    result: List[Field] = []
    for field in definition.fields:
        if not is_fields_group(registry, field.type):
            result.append(field)
            continue

        group_name = parse_type_name(field.type)
        if group_name in path:
            raise CyclicFieldsGroup(path + (group_name,))

        logger.debug(f"Splicing fields group '{group_name}'")
        result.extend(_flatten(registry, registry[group_name], path + (group_name,)))
    return result
