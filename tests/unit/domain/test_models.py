from __future__ import annotations

"""
Unit tests for Domain Models.

Verifies:
1. camelCase registry entries are converted with defaults filled in.
2. Tree serialization to the JSON shape.
"""

import json

from openapi_map.core.analysis.tree_builder import build_tree
from openapi_map.domain.registry_models import Changelog, Field, TypeDefinition, registry_from_mapping
from openapi_map.domain.tree_models import Node, NodeChangelog, node_to_dict


def test_field_defaults_are_filled() -> None:
    field = Field.from_mapping({"name": "title"})
    assert field.type is None
    assert field.required is False
    assert field.no_follow is False
    assert field.allow_reference is False
    assert field.changelog is None
    assert field.values is None


def test_field_from_mapping_reads_camel_case() -> None:
    field = Field.from_mapping({
        "name": "in",
        "type": "string",
        "required": True,
        "noFollow": True,
        "allowReference": True,
        "additionalType": "Any",
        "values": ["query", "header"],
        "md": "GFM",
        "changelog": {"isModified": True, "details": "More values."},
    })
    assert field.no_follow is True
    assert field.allow_reference is True
    assert field.additional_type == "Any"
    assert field.values == ("query", "header")
    assert field.changelog == Changelog(is_modified=True, details="More values.")


def test_type_definition_from_mapping() -> None:
    definition = TypeDefinition.from_mapping({
        "description": "A group.",
        "fieldsGroup": True,
        "specificationAnchor": "group",
        "fields": [{"name": "a", "type": "string"}],
        "changelog": {
            "renamed": True,
            "deletedProperties": [{"name": "old", "see": "New Object", "since": "3.1"}],
        },
    })
    assert definition.fields_group is True
    assert definition.allow_extension is False
    assert definition.specification_anchor == "group"
    assert definition.fields == (Field(name="a", type="string"),)
    assert definition.changelog.extra == {"renamed": True}
    deleted = definition.changelog.deleted_properties[0]
    assert deleted.see == "New Object"
    assert deleted.extra == {"since": "3.1"}


def test_as_field_uses_entry_name_and_type() -> None:
    definition = TypeDefinition.from_mapping({"name": "^x-", "type": "Any", "description": "Ext."})
    assert definition.as_field() == Field(name="^x-", type="Any", description="Ext.")


def test_registry_from_mapping_preserves_order(raw_registry) -> None:
    registry = registry_from_mapping(raw_registry)
    assert list(registry) == list(raw_registry)
    assert all(isinstance(d, TypeDefinition) for d in registry.values())


def test_node_equality_ignores_parent_changelog() -> None:
    a = Node(name="x", parent_changelog=NodeChangelog(is_new=True))
    b = Node(name="x")
    assert a == b


def test_node_to_dict_shape(registry, spec_url) -> None:
    root = build_tree(registry, "OpenAPI Object", spec_url, renderer=lambda t: t)
    data = node_to_dict(root)

    assert data["name"] == "OpenAPI Object"
    assert data["documentationUrl"] == f"{spec_url}#openAPIObject"
    assert data["isOpenapiType"] is True
    assert "parentChangelog" not in data
    assert "description" not in data

    changelog = data["typeChangelog"]
    assert changelog["details"] == "Renamed from Swagger Object."
    assert changelog["previousName"] == "Swagger Object"
    assert changelog["newProperties"] == [{"name": "tags", "description": "Tags used by the document."}]
    assert "modifiedProperties" not in changelog
    assert changelog["deletedProperties"][0] == {
        "name": "host",
        "description": "Use servers.",
        "see": "Server Object",
        "documentationUrl": f"{spec_url}#serverObject",
    }
    assert changelog["deletedProperties"][1] == {"name": "consumes", "description": "Gone."}

    tags = next(c for c in data["children"] if c["name"] == "tags")
    assert tags["isArray"] is True
    assert tags["changelog"] == {"isNew": True}

    # Serializable as-is
    json.dumps(data)


def test_node_to_dict_serializes_md_and_values() -> None:
    data = node_to_dict(Node(name="style", type="string", values=("form",), md=None))
    assert data == {
        "name": "style",
        "type": "string",
        "required": False,
        "isArray": False,
        "isMap": False,
        "isMapItem": False,
        "isOpenapiType": False,
        "isFieldsGroup": False,
        "isTechnical": False,
        "allowExtension": False,
        "allowReference": False,
        "values": ["form"],
        "children": [],
    }
