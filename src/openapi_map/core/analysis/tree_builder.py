from __future__ import annotations

"""
Documentation Tree Builder.

Walks a type registry from a root type and constructs the immutable
documentation tree: one node per type or field, descriptions rendered to
HTML, change-history merged per type, fields groups spliced in place, and
the technical extension/reference children appended where allowed.

Any malformed expression or missing type aborts the whole build.
"""

import logging
from dataclasses import replace
from typing import List, Optional, Sequence

from openapi_map.core.analysis.registry import (
    allows_extension,
    allows_reference,
    flattened_fields,
    is_atomic_field,
    is_fields_group,
    is_known_type,
    require_definition,
)
from openapi_map.core.analysis.type_expression import (
    is_array,
    is_map,
    parse_map_parts,
    parse_type_name,
)
from openapi_map.core.rendering.links import documentation_url, markdown_syntax
from openapi_map.core.rendering.markup import Renderer, render_markdown
from openapi_map.domain.constants import REFERENCE_OBJECT_KEY, SPECIFICATION_EXTENSIONS_KEY
from openapi_map.domain.errors import UnknownType
from openapi_map.domain.registry_models import Changelog, Field, Registry, TypeDefinition
from openapi_map.domain.tree_models import (
    DeletedPropertyEntry,
    Node,
    NodeChangelog,
    PropertyChange,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(
        registry: Registry,
        root_type: str,
        specification_url: Optional[str] = None,
        renderer: Optional[Renderer] = None,
) -> Node:
    """
    Build the full documentation tree rooted at a registry type.

    Args:
        registry: Type name to definition mapping. Read only.
        root_type: Type expression of the root, e.g. 'OpenAPI Object'.
        specification_url: Base URL of the specification document.
        renderer: Markdown-to-HTML function; Python-Markdown when omitted.

    Returns:
        Node: The root node, always expanded.

    Raises:
        MalformedTypeExpression, NotAMap, UnknownType, CyclicFieldsGroup:
            On malformed registry data. No partial tree is returned.
    """
    logger.info(f"Building documentation tree for: {root_type}")

    root = build_type_node(
        registry,
        root_type,
        specification_url,
        parent_changelog=None,
        with_children=True,
        allow_reference=False,
        renderer=renderer,
    )

    logger.info(f"Documentation tree built: {sum(1 for _ in root.walk())} nodes")
    return root


def build_type_node(
        registry: Registry,
        type_expr: str,
        specification_url: Optional[str] = None,
        parent_changelog: Optional[NodeChangelog] = None,
        with_children: bool = True,
        allow_reference: bool = False,
        renderer: Optional[Renderer] = None,
) -> Node:
    """
    Build the node of a registry type and, optionally, its subtree.

    Children are the type's flattened fields followed by the extension child
    (when the type allows extension) and the reference child (when the caller
    allows reference), in that order.

    Raises:
        UnknownType: If the type is absent from the registry.
    """
    definition = require_definition(registry, type_expr)
    type_name = parse_type_name(type_expr)
    fields = flattened_fields(registry, definition)

    type_changelog = _merge_type_changelog(definition, fields, specification_url, renderer)

    children: List[Node] = []
    if with_children:
        logger.debug(f"Expanding type '{type_name}' ({len(fields)} fields)")
        for field in fields:
            children.append(
                build_field_node(registry, field, specification_url, type_changelog, renderer)
            )
        if allows_extension(definition):
            children.append(
                _build_technical_node(registry, SPECIFICATION_EXTENSIONS_KEY, specification_url, renderer)
            )
        if allow_reference:
            children.append(
                _build_technical_node(registry, REFERENCE_OBJECT_KEY, specification_url, renderer)
            )

    return Node(
        name=definition.name or type_name,
        type=type_name,
        type_description=render_markdown(definition.description, specification_url, renderer),
        documentation_url=documentation_url(
            type_name, definition.specification_anchor, specification_url
        ),
        type_changelog=type_changelog,
        allow_extension=allows_extension(definition),
        is_fields_group=is_fields_group(registry, type_expr),
        is_openapi_type=is_known_type(registry, type_expr),
        parent_changelog=parent_changelog,
        children=tuple(children),
    )


def build_field_node(
        registry: Registry,
        field: Field,
        specification_url: Optional[str] = None,
        parent_changelog: Optional[NodeChangelog] = None,
        renderer: Optional[Renderer] = None,
) -> Node:
    """Build the node of a field, dispatching on the shape of its type."""
    if is_map(field.type):
        return _build_map_node(registry, field, specification_url, parent_changelog, renderer)
    return _build_array_or_object_node(registry, field, specification_url, parent_changelog, renderer)

# -----------------------------------------------------------------------------
# FIELD BUILDERS
# -----------------------------------------------------------------------------

def _build_map_node(
        registry: Registry,
        field: Field,
        specification_url: Optional[str],
        parent_changelog: Optional[NodeChangelog],
        renderer: Optional[Renderer],
) -> Node:
    """
    Build a map field: the map itself plus one exemplar item child.

    The item child is named after the map key ('{name}') and carries the
    map's allow_reference flag; the map node never allows reference itself.
    """
    parts = parse_map_parts(field.type)
    changelog = _field_changelog(field.changelog, specification_url, renderer)

    item_field = Field(
        name="{" + parts.key + "}",
        type=parts.type,
        description=f"A `{field.name}` map item",
        is_map_item=True,
        allow_reference=allows_reference(field),
    )
    item = build_field_node(registry, item_field, specification_url, changelog, renderer)

    return Node(
        name=field.name,
        type=parts.type,
        description=render_markdown(field.description, specification_url, renderer),
        changelog=changelog,
        required=field.required,
        is_map=True,
        is_array=False,
        allow_reference=False,
        is_openapi_type=is_known_type(registry, parts.type),
        parent_changelog=parent_changelog,
        children=(item,),
    )


def _build_array_or_object_node(
        registry: Registry,
        field: Field,
        specification_url: Optional[str],
        parent_changelog: Optional[NodeChangelog],
        renderer: Optional[Renderer],
) -> Node:
    """
    Build an atomic, object or array field.

    Atomic fields become leaves carrying their type name. Registry types are
    expanded unless the field sets no_follow. Field attributes are then
    stamped over the type node.
    """
    if is_atomic_field(registry, field):
        node = Node(
            name=field.name,
            type=parse_type_name(field.type) if field.type is not None else None,
        )
    else:
        node = build_type_node(
            registry,
            field.type,
            specification_url,
            parent_changelog,
            with_children=not field.no_follow,
            allow_reference=allows_reference(field),
            renderer=renderer,
        )

    return replace(
        node,
        name=field.name,
        description=render_markdown(field.description, specification_url, renderer),
        changelog=_field_changelog(field.changelog, specification_url, renderer),
        additional_type=field.additional_type,
        parent_changelog=parent_changelog,
        required=field.required,
        is_array=is_array(field.type),
        is_map_item=field.is_map_item,
        allow_reference=allows_reference(field),
        values=field.values,
        md=markdown_syntax(field.md),
    )


def _build_technical_node(
        registry: Registry,
        key: str,
        specification_url: Optional[str],
        renderer: Optional[Renderer],
) -> Node:
    """Build an extension or reference child from its reserved registry entry."""
    definition = registry.get(key)
    if definition is None:
        raise UnknownType(key)
    node = build_field_node(registry, definition.as_field(), specification_url, None, renderer)
    return replace(node, is_technical=True)

# -----------------------------------------------------------------------------
# CHANGELOG ASSEMBLY
# -----------------------------------------------------------------------------

def _field_changelog(
        changelog: Optional[Changelog],
        specification_url: Optional[str],
        renderer: Optional[Renderer],
) -> Optional[NodeChangelog]:
    if changelog is None:
        return None
    details = render_markdown(changelog.details, specification_url, renderer)
    return NodeChangelog.from_changelog(changelog, details)


def _merge_type_changelog(
        definition: TypeDefinition,
        fields: Sequence[Field],
        specification_url: Optional[str],
        renderer: Optional[Renderer],
) -> Optional[NodeChangelog]:
    """
    Merge a type's own changelog with the changes of its fields.

    Returns None when the definition has no changelog and no field is new,
    modified or deleted.
    """
    new_properties = tuple(
        PropertyChange(f.name, render_markdown(f.description, specification_url, renderer))
        for f in fields
        if f.changelog is not None and f.changelog.is_new
    )
    modified_properties = tuple(
        PropertyChange(f.name, render_markdown(f.changelog.details, specification_url, renderer))
        for f in fields
        if f.changelog is not None and f.changelog.is_modified
    )

    own = definition.changelog
    deleted_properties = tuple(
        DeletedPropertyEntry(
            name=d.name,
            description=d.description,
            see=d.see,
            documentation_url=(
                documentation_url(d.see, None, specification_url) if d.see is not None else None
            ),
            extra=d.extra,
        )
        for d in (own.deleted_properties if own is not None else ())
    )

    if own is None and not (new_properties or modified_properties or deleted_properties):
        return None

    base = _field_changelog(own, specification_url, renderer) if own is not None else NodeChangelog()
    return replace(
        base,
        new_properties=new_properties,
        modified_properties=modified_properties,
        deleted_properties=deleted_properties,
    )
