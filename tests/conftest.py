from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports uninstalled.
2. Provides a small OpenAPI-like registry and deterministic renderers.
"""

import copy
import os
import sys
from typing import Any, Callable, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from openapi_map.domain.registry_models import TypeDefinition, registry_from_mapping  # noqa: E402

SPEC_URL = "https://example.org/versions/3.0.0.md"

# -----------------------------------------------------------------------------
# Registry Fixtures
# -----------------------------------------------------------------------------
_RAW_REGISTRY: Dict[str, Any] = {
    "OpenAPI Object": {
        "description": "Root document object.",
        "allowExtension": True,
        "fields": [
            {"name": "openapi", "type": "string", "required": True,
             "description": "Semantic version number."},
            {"name": "info", "type": "Info Object", "required": True,
             "description": "Metadata about the API."},
            {"name": "servers", "type": "[Server Object]",
             "description": "Connectivity information."},
            {"name": "paths", "type": "Paths Object", "required": True, "noFollow": True,
             "description": "Available paths."},
            {"name": "components", "type": "Components Object",
             "description": "Reusable objects."},
            {"name": "tags", "type": "[Tag Object]", "changelog": {"isNew": True},
             "description": "Tags used by the document."},
        ],
        "changelog": {
            "details": "Renamed from Swagger Object.",
            "previousName": "Swagger Object",
            "deletedProperties": [
                {"name": "host", "description": "Use servers.", "see": "Server Object"},
                {"name": "consumes", "description": "Gone."},
            ],
        },
    },
    "Info Object": {
        "description": "Metadata.",
        "fields": [
            {"name": "title", "type": "string", "required": True},
            {"name": "description", "type": "string", "md": "CommonMark"},
            {"name": "contact", "type": "Contact Object"},
        ],
    },
    "Contact Object": {
        "allowExtension": True,
        "fields": [
            {"name": "name", "type": "string"},
            {"name": "email", "type": "string",
             "changelog": {"isModified": True, "details": "Must be an email."}},
        ],
    },
    "Server Object": {
        "fields": [
            {"name": "url", "type": "string", "required": True},
            {"name": "variables", "type": "{Server Variable Object}"},
        ],
    },
    "Server Variable Object": {
        "fields": [
            {"name": "enum", "type": "[string]"},
            {"name": "default", "type": "string", "required": True},
        ],
    },
    "Paths Object": {
        "specificationAnchor": "pathsObject-section",
        "fields": [
            {"name": "/{path}", "type": "Path Item Object"},
        ],
    },
    "Path Item Object": {
        "fields": [
            {"name": "summary", "type": "string"},
        ],
    },
    "Components Object": {
        "fields": [
            {"name": "schemas", "type": "{Schema Object}", "allowReference": True},
            {"name": "callbacks", "type": "{expression, Callback Object}"},
        ],
    },
    "Schema Object": {
        "fields": [
            {"name": "title", "type": "string"},
        ],
    },
    "Callback Object": {
        "fields": [
            {"name": "url", "type": "string"},
        ],
    },
    "Tag Object": {
        "fields": [
            {"name": "name", "type": "string", "required": True},
            {"name": "Descriptive Fields", "type": "Descriptive Fields"},
            {"name": "externalDocs", "type": "string"},
        ],
    },
    "Descriptive Fields": {
        "fieldsGroup": True,
        "fields": [
            {"name": "summary", "type": "string", "changelog": {"isNew": True}},
            {"name": "Nested Fields", "type": "Nested Fields"},
        ],
    },
    "Nested Fields": {
        "fieldsGroup": True,
        "fields": [
            {"name": "description", "type": "string"},
        ],
    },
    "Specification Extensions": {
        "name": "^x-",
        "type": "Any",
        "description": "Extension field.",
    },
    "Reference Object": {
        "name": "$ref",
        "type": "string",
        "description": "Reference string.",
    },
}


@pytest.fixture
def raw_registry() -> Dict[str, Any]:
    """Return a fresh copy of the raw (camelCase) sample registry."""
    return copy.deepcopy(_RAW_REGISTRY)


@pytest.fixture
def registry(raw_registry: Dict[str, Any]) -> Dict[str, TypeDefinition]:
    """Return the sample registry converted to typed definitions."""
    return registry_from_mapping(raw_registry)


@pytest.fixture
def spec_url() -> str:
    return SPEC_URL

# -----------------------------------------------------------------------------
# Renderer Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def paragraph_renderer() -> Callable[[str], str]:
    """Wrap text in a paragraph without interpreting markdown."""
    return lambda text: f"<p>{text}</p>"


@pytest.fixture
def identity_renderer() -> Callable[[str], str]:
    """Treat input as already-rendered HTML."""
    return lambda text: text
