from __future__ import annotations

"""
Markdown Rendering and HTML Post-Processing.

Descriptions in the registry are markdown written against the specification
document. Once rendered, same-document anchors and relative example links are
rebased on the specification URL and every link is made to open in a new
browsing context.
"""

import re
from typing import Callable, Optional

import markdown

Renderer = Callable[[str], str]

_ANCHOR_LINK = re.compile(r'<a href="#')
_EXAMPLE_LINK = re.compile(r'<a href="\.\.')
_ANY_LINK = re.compile(r"<a href=")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def default_renderer(text: str) -> str:
    """Render markdown with Python-Markdown."""
    return markdown.markdown(text)


def render_markdown(
        md: Optional[str],
        specification_url: Optional[str] = None,
        renderer: Optional[Renderer] = None,
) -> Optional[str]:
    """
    Convert a markdown description to HTML ready for display.

    Steps run strictly in order: render, rebase anchors, rebase example
    links, add blank targets. The last step only prepends an attribute so the
    href values matched before it are left untouched.

    Args:
        md: Markdown text. None passes through unchanged.
        specification_url: Base URL of the specification document.
        renderer: Markdown-to-HTML function; Python-Markdown when omitted.

    Returns:
        Optional[str]: The HTML, or None when md is None.
    """
    if md is None:
        return None

    html = (renderer or default_renderer)(md)
    html = rewrite_anchors(html, specification_url)
    html = rewrite_example_links(html, specification_url)
    return add_blank_targets(html)


def rewrite_anchors(html: str, specification_url: Optional[str]) -> str:
    """Point same-document anchors ('#section') at the specification URL."""
    if not specification_url:
        return html
    return _ANCHOR_LINK.sub(lambda _: f'<a href="{specification_url}#', html)


def rewrite_example_links(html: str, specification_url: Optional[str]) -> str:
    """Resolve '../' links against the folder containing the specification."""
    if not specification_url:
        return html
    folder = specification_url[:specification_url.rfind("/") + 1]
    return _EXAMPLE_LINK.sub(lambda _: f'<a href="{folder}..', html)


def add_blank_targets(html: str) -> str:
    """
    Make every link open in a new browsing context.

    The attribute is added unconditionally: a link whose target attribute
    follows its href ends up with two.
    """
    return _ANY_LINK.sub('<a target="_blank" href=', html)
