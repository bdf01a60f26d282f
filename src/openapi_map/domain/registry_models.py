from __future__ import annotations

"""
Type Registry Data Models.

Immutable records for the entries of a type registry: type definitions, their
fields and change-history annotations. Raw registry documents use camelCase
keys; the factories below translate them and default every optional
attribute at construction so consumers never probe for missing keys.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

# -----------------------------------------------------------------------------
# CHANGELOG RECORDS
# -----------------------------------------------------------------------------

_EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True)
class DeletedProperty:
    """
    A property removed from a type since the previous specification version.

    Attributes:
        name: Name of the removed property.
        description: Markdown note about the removal.
        see: Optional type expression documenting the replacement.
        extra: Any other keys of the raw entry, kept verbatim.
    """
    name: str
    description: Optional[str] = None
    see: Optional[str] = None
    extra: Mapping[str, Any] = field(default_factory=lambda: _EMPTY, compare=False)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "DeletedProperty":
        known = {"name", "description", "see"}
        return cls(
            name=raw["name"],
            description=raw.get("description"),
            see=raw.get("see"),
            extra=_rest(raw, known),
        )


@dataclass(frozen=True)
class Changelog:
    """
    Change-history annotation attached to a field or a type definition.

    Attributes:
        is_new: The element appeared in this specification version.
        is_modified: The element changed in this specification version.
        details: Markdown explanation of the change.
        deleted_properties: Properties removed from a type (types only).
        extra: Unrelated metadata such as rename notes, kept verbatim.
    """
    is_new: bool = False
    is_modified: bool = False
    details: Optional[str] = None
    deleted_properties: Tuple[DeletedProperty, ...] = ()
    extra: Mapping[str, Any] = field(default_factory=lambda: _EMPTY, compare=False)

    @classmethod
    def from_mapping(cls, raw: Optional[Mapping[str, Any]]) -> Optional["Changelog"]:
        if raw is None:
            return None
        known = {"isNew", "isModified", "details", "deletedProperties"}
        return cls(
            is_new=bool(raw.get("isNew", False)),
            is_modified=bool(raw.get("isModified", False)),
            details=raw.get("details"),
            deleted_properties=tuple(
                DeletedProperty.from_mapping(item)
                for item in raw.get("deletedProperties") or ()
            ),
            extra=_rest(raw, known),
        )

# -----------------------------------------------------------------------------
# REGISTRY ENTRIES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Field:
    """
    One element of a type definition's field list.

    Attributes:
        name: Field name as written in documents (may be a pattern like '^x-').
        type: Type expression, or None for untyped fields.
        description: Markdown description.
        required: Field is mandatory in its parent.
        changelog: Change-history annotation.
        no_follow: Stop recursion into the field's type.
        additional_type: Free-form secondary type hint, passed through.
        values: Enumerable literal set, passed through.
        md: Markdown syntax tag of the field content (e.g. 'GFM').
        allow_reference: The field may hold a Reference Object instead.
        is_map_item: Synthetic exemplar field standing for a map's values.
    """
    name: str
    type: Optional[str] = None
    description: Optional[str] = None
    required: bool = False
    changelog: Optional[Changelog] = None
    no_follow: bool = False
    additional_type: Optional[str] = None
    values: Optional[Tuple[Any, ...]] = None
    md: Optional[str] = None
    allow_reference: bool = False
    is_map_item: bool = False

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "Field":
        values = raw.get("values")
        return cls(
            name=raw["name"],
            type=raw.get("type"),
            description=raw.get("description"),
            required=bool(raw.get("required", False)),
            changelog=Changelog.from_mapping(raw.get("changelog")),
            no_follow=bool(raw.get("noFollow", False)),
            additional_type=raw.get("additionalType"),
            values=tuple(values) if values is not None else None,
            md=raw.get("md"),
            allow_reference=bool(raw.get("allowReference", False)),
        )


@dataclass(frozen=True)
class TypeDefinition:
    """
    A registry entry describing a documented type or a fields group.

    Attributes:
        name: Display name; empty means "use the registry key".
        description: Markdown description.
        fields: Ordered field list.
        allow_extension: The type accepts specification extensions.
        fields_group: The entry is spliced into other field lists instead of
            being documented on its own.
        changelog: Change-history annotation of the type itself.
        specification_anchor: Overrides the derived documentation anchor.
        type: Value type used when the entry itself stands as a field.
    """
    name: Optional[str] = None
    description: Optional[str] = None
    fields: Tuple[Field, ...] = ()
    allow_extension: bool = False
    fields_group: bool = False
    changelog: Optional[Changelog] = None
    specification_anchor: Optional[str] = None
    type: Optional[str] = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "TypeDefinition":
        return cls(
            name=raw.get("name"),
            description=raw.get("description"),
            fields=tuple(Field.from_mapping(f) for f in raw.get("fields") or ()),
            allow_extension=bool(raw.get("allowExtension", False)),
            fields_group=bool(raw.get("fieldsGroup", False)),
            changelog=Changelog.from_mapping(raw.get("changelog")),
            specification_anchor=raw.get("specificationAnchor"),
            type=raw.get("type"),
        )

    def as_field(self) -> Field:
        """Present this entry as a field, as done for the technical children."""
        return Field(
            name=self.name or "",
            type=self.type,
            description=self.description,
            changelog=self.changelog,
        )


Registry = Mapping[str, TypeDefinition]


def registry_from_mapping(raw: Mapping[str, Mapping[str, Any]]) -> Dict[str, TypeDefinition]:
    """
    Convert a raw registry document into typed definitions.

    Args:
        raw: Mapping of type name to camelCase definition mapping.

    Returns:
        Dict[str, TypeDefinition]: Registry keyed by type name, order preserved.
    """
    return {name: TypeDefinition.from_mapping(entry) for name, entry in raw.items()}

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _rest(raw: Mapping[str, Any], known: set) -> Mapping[str, Any]:
    rest = {k: v for k, v in raw.items() if k not in known}
    return MappingProxyType(rest) if rest else _EMPTY
