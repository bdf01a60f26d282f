from __future__ import annotations

"""
Specification Link Helpers.

Derive documentation anchors and URLs for registry types, and the help link
of a markdown dialect.
"""

from typing import Optional

from openapi_map.core.analysis.type_expression import parse_type_name
from openapi_map.domain.constants import MARKDOWN_HELP_URLS
from openapi_map.domain.tree_models import MarkdownSyntax


def anchor_for_type(type_expr: str) -> str:
    """
    Anchor of a type's section: spaces removed, first letter lowercased.

    Array and map markers are stripped first, so '[Tag Object]' gives 'tagObject'.
    """
    type_name = parse_type_name(type_expr).replace(" ", "")
    return type_name[:1].lower() + type_name[1:]


def documentation_url(
        type_expr: Optional[str],
        anchor: Optional[str],
        specification_url: Optional[str],
) -> Optional[str]:
    """
    Build the link to a type's documentation.

    An explicit anchor wins over the one derived from the type.

    Returns:
        Optional[str]: The URL, or None when neither anchor nor type is given.
    """
    base = specification_url or ""
    if anchor is not None:
        return f"{base}#{anchor}"
    if type_expr is not None:
        return f"{base}#{anchor_for_type(type_expr)}"
    return None


def markdown_syntax(tag: Optional[str]) -> Optional[MarkdownSyntax]:
    """Describe a field's markdown dialect; unknown dialects get no help URL."""
    if not tag:
        return None
    return MarkdownSyntax(syntax=tag, url=MARKDOWN_HELP_URLS.get(tag.lower()))
