from __future__ import annotations

"""
Documentation Tree Data Models.

Provides the immutable node records produced by the tree builder and the
serializer that turns a tree into the camelCase JSON shape consumed by
outline front-ends.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from openapi_map.domain.registry_models import Changelog

# -----------------------------------------------------------------------------
# CHANGELOG VIEW
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PropertyChange:
    """A new or modified property listed on its parent type."""
    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class DeletedPropertyEntry:
    """
    A removed property, with its 'see' reference resolved to a URL.

    Attributes:
        name: Name of the removed property.
        description: Note about the removal, verbatim.
        see: Type expression of the replacement, if any.
        documentation_url: Link to the replacement's documentation.
        extra: Other keys of the registry entry, verbatim.
    """
    name: str
    description: Optional[str] = None
    see: Optional[str] = None
    documentation_url: Optional[str] = None
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class NodeChangelog:
    """
    Changelog as displayed on a node.

    Merges the annotation written on the field or type (details rendered to
    HTML) with the property lists computed from a type's fields. Empty lists
    mean "no such change".
    """
    is_new: bool = False
    is_modified: bool = False
    details: Optional[str] = None
    new_properties: Tuple[PropertyChange, ...] = ()
    modified_properties: Tuple[PropertyChange, ...] = ()
    deleted_properties: Tuple[DeletedPropertyEntry, ...] = ()
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_changelog(cls, changelog: Changelog, details: Optional[str]) -> "NodeChangelog":
        return cls(
            is_new=changelog.is_new,
            is_modified=changelog.is_modified,
            details=details,
            extra=changelog.extra,
        )


@dataclass(frozen=True)
class MarkdownSyntax:
    """Markdown dialect of a field's content, with a link to its cheatsheet."""
    syntax: str
    url: Optional[str] = None

# -----------------------------------------------------------------------------
# TREE NODE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Node:
    """
    One entry of the documentation tree: a type, a field, or both.

    Attributes:
        name: Field name, or the type name for the root.
        type: Resolved type name with array/map markers stripped.
        description: Field description (HTML).
        type_description: Description of the field's type (HTML).
        documentation_url: Link to the type's section of the specification.
        changelog: The field's own changelog.
        type_changelog: Merged changelog of the field's type.
        required: Field is mandatory.
        is_array: Field holds a list of its type.
        is_map: Field holds a map whose single child is the map item.
        is_map_item: Node is the exemplar value of a map.
        is_openapi_type: Type is a documented registry type.
        is_fields_group: Type is a fields group.
        is_technical: Synthetic extension/reference child.
        allow_extension: Type accepts specification extensions.
        allow_reference: Field may hold a Reference Object.
        additional_type: Passthrough secondary type hint.
        values: Passthrough enumerable literal set.
        md: Markdown dialect of the field content.
        parent_changelog: Changelog of the enclosing node. Not owned.
        children: Ordered child nodes.
    """
    name: str
    type: Optional[str] = None
    description: Optional[str] = None
    type_description: Optional[str] = None
    documentation_url: Optional[str] = None
    changelog: Optional[NodeChangelog] = None
    type_changelog: Optional[NodeChangelog] = None
    required: bool = False
    is_array: bool = False
    is_map: bool = False
    is_map_item: bool = False
    is_openapi_type: bool = False
    is_fields_group: bool = False
    is_technical: bool = False
    allow_extension: bool = False
    allow_reference: bool = False
    additional_type: Optional[str] = None
    values: Optional[Tuple[Any, ...]] = None
    md: Optional[MarkdownSyntax] = None
    parent_changelog: Optional[NodeChangelog] = field(default=None, compare=False, repr=False)
    children: Tuple["Node", ...] = ()

    def walk(self):
        """Yield this node and all its descendants, depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()

# -----------------------------------------------------------------------------
# SERIALIZATION
# -----------------------------------------------------------------------------

_NODE_KEYS = (
    ("name", "name"),
    ("type", "type"),
    ("description", "description"),
    ("type_description", "typeDescription"),
    ("documentation_url", "documentationUrl"),
    ("required", "required"),
    ("is_array", "isArray"),
    ("is_map", "isMap"),
    ("is_map_item", "isMapItem"),
    ("is_openapi_type", "isOpenapiType"),
    ("is_fields_group", "isFieldsGroup"),
    ("is_technical", "isTechnical"),
    ("allow_extension", "allowExtension"),
    ("allow_reference", "allowReference"),
    ("additional_type", "additionalType"),
)


def node_to_dict(node: Node) -> Dict[str, Any]:
    """
    Serialize a tree into plain JSON-compatible dictionaries.

    None values and empty changelog lists are omitted. The parent changelog
    back-reference is never emitted.

    Args:
        node: Root of the tree (or subtree) to serialize.

    Returns:
        Dict[str, Any]: camelCase representation with nested 'children'.
    """
    out: Dict[str, Any] = {}
    for attr, key in _NODE_KEYS:
        value = getattr(node, attr)
        if value is not None:
            out[key] = value

    if node.values is not None:
        out["values"] = list(node.values)
    if node.md is not None:
        out["md"] = {"syntax": node.md.syntax, "url": node.md.url}
    if node.changelog is not None:
        out["changelog"] = _changelog_to_dict(node.changelog)
    if node.type_changelog is not None:
        out["typeChangelog"] = _changelog_to_dict(node.type_changelog)

    out["children"] = [node_to_dict(child) for child in node.children]
    return out


def _changelog_to_dict(changelog: NodeChangelog) -> Dict[str, Any]:
    out: Dict[str, Any] = dict(changelog.extra)
    if changelog.is_new:
        out["isNew"] = True
    if changelog.is_modified:
        out["isModified"] = True
    if changelog.details is not None:
        out["details"] = changelog.details

    if changelog.new_properties:
        out["newProperties"] = _changes_to_list(changelog.new_properties)
    if changelog.modified_properties:
        out["modifiedProperties"] = _changes_to_list(changelog.modified_properties)
    if changelog.deleted_properties:
        deleted: List[Dict[str, Any]] = []
        for entry in changelog.deleted_properties:
            item: Dict[str, Any] = dict(entry.extra)
            item["name"] = entry.name
            if entry.description is not None:
                item["description"] = entry.description
            if entry.see is not None:
                item["see"] = entry.see
                item["documentationUrl"] = entry.documentation_url
            deleted.append(item)
        out["deletedProperties"] = deleted
    return out


def _changes_to_list(changes: Tuple[PropertyChange, ...]) -> List[Dict[str, Any]]:
    return [{"name": c.name, "description": c.description} for c in changes]
