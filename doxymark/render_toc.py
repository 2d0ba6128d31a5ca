"""Rendering of the nested table of contents page."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from doxymark.toc_entry import TocEntry


def render_toc(
    toc: list[tuple[int, TocEntry]],
    title: str = "Table of Contents",
    indent: str = "  ",
) -> str:
    """Render ``(depth, entry)`` pairs as a nested Markdown bullet list."""
    parts = [f"# {title}", ""]
    parts.extend(
        f"{indent * depth}* [{entry.label}]({entry.file_name})" for depth, entry in toc
    )
    return "\n".join(parts) + "\n"
