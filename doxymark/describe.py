"""Resolution of Doxygen description elements into Markdown-ready text."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from doxymark.element import Element

PARAGRAPH_SEPARATOR = "\n\n"
MAX_LIST_DEPTH = 32


def get_description(element: Element, max_depth: int = MAX_LIST_DEPTH) -> str:
    """Resolve the description of a compound or member.

    The detailed description wins whenever it resolves to non-empty text;
    otherwise the brief description is used.
    """
    result = ""
    detailed = element.get_child("detaileddescription")
    if detailed is not None:
        result = parse_description(detailed, max_depth)
    if not result:
        brief = element.get_child("briefdescription")
        if brief is not None:
            result = parse_description(brief, max_depth)
    return result


def parse_description(element: Element, max_depth: int = MAX_LIST_DEPTH) -> str:
    """Join the rendered ``para`` children with a blank line between them."""
    return PARAGRAPH_SEPARATOR.join(
        render_paragraph(para, max_depth) for para in element.get_children("para")
    )


def render_paragraph(para: Element, max_depth: int = MAX_LIST_DEPTH) -> str:
    """Render a paragraph, or only its itemized lists when it holds any.

    Plain paragraph text is stripped at both ends, so leading indentation and
    Doxygen's trailing spaces are dropped.
    """
    lists = para.get_children("itemizedlist")
    if not lists or max_depth <= 0:
        return para.inner_text().strip()
    return "".join(render_itemized_list(lst, max_depth - 1) for lst in lists)


def render_itemized_list(element: Element, max_depth: int = MAX_LIST_DEPTH) -> str:
    """Render an ``itemizedlist`` as an HTML unordered list."""
    items = "".join(
        f"<li>{parse_description(item, max_depth)}</li>"
        for item in element.get_children("listitem")
    )
    return f"<ul>{items}</ul>"
