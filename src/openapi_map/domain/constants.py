from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the type-expression grammar, the reserved registry keys used for
technical children, and the markdown dialect help links.
"""

import re
from types import MappingProxyType
from typing import Mapping

# -----------------------------------------------------------------------------
# TYPE-EXPRESSION GRAMMAR
# -----------------------------------------------------------------------------

_NAME = r"[a-zA-Z\s\*\|]*"

ATOMIC_PATTERN = re.compile(rf"^{_NAME}$")
ARRAY_PATTERN = re.compile(rf"^\s*\[({_NAME})\]\s*$")
MAP_PATTERN = re.compile(rf"^\s*\{{({_NAME}),?({_NAME})\}}\s*$")

MAP_DEFAULT_KEY = "name"

# -----------------------------------------------------------------------------
# RESERVED REGISTRY ENTRIES
# -----------------------------------------------------------------------------

SPECIFICATION_EXTENSIONS_KEY = "Specification Extensions"
REFERENCE_OBJECT_KEY = "Reference Object"

DEFAULT_ROOT_TYPE = "OpenAPI Object"

# -----------------------------------------------------------------------------
# MARKDOWN DIALECTS
# -----------------------------------------------------------------------------

# Read-only: shared by every build
MARKDOWN_HELP_URLS: Mapping[str, str] = MappingProxyType({
    "gfm": "https://github.com/adam-p/markdown-here/wiki/Markdown-Cheatsheet",
    "commonmark": "http://commonmark.org/help/",
})
