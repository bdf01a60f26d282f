from __future__ import annotations

from .core.analysis.tree_builder import build_field_node, build_tree, build_type_node
from .core.analysis.type_expression import (
    MapParts,
    TypeShape,
    classify,
    is_array,
    is_map,
    parse_map_parts,
    parse_type_name,
)
from .core.rendering.links import anchor_for_type, documentation_url
from .core.rendering.markup import (
    add_blank_targets,
    render_markdown,
    rewrite_anchors,
    rewrite_example_links,
)
from .domain.errors import (
    CyclicFieldsGroup,
    MalformedTypeExpression,
    NotAMap,
    OpenapiMapError,
    UnknownType,
)
from .domain.registry_models import Field, TypeDefinition, registry_from_mapping
from .domain.tree_models import Node, node_to_dict

__version__ = "0.1.0"

__all__ = [
    "build_tree",
    "build_type_node",
    "build_field_node",
    "classify",
    "TypeShape",
    "MapParts",
    "parse_type_name",
    "parse_map_parts",
    "is_array",
    "is_map",
    "anchor_for_type",
    "documentation_url",
    "render_markdown",
    "add_blank_targets",
    "rewrite_anchors",
    "rewrite_example_links",
    "registry_from_mapping",
    "TypeDefinition",
    "Field",
    "Node",
    "node_to_dict",
    "OpenapiMapError",
    "MalformedTypeExpression",
    "NotAMap",
    "UnknownType",
    "CyclicFieldsGroup",
]
