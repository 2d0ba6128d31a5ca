"""Logic for nesting published compounds by inheritance into a TOC."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from doxymark.toc_entry import TocEntry

logger = logging.getLogger(__name__)


def is_root(entry: TocEntry, entries: list[TocEntry]) -> bool:
    """Check that no other entry is this entry's declared parent."""
    parent = entry.record.parent_qualified_name
    return not any(
        other is not entry and other.record.qualified_name == parent
        for other in entries
    )


def build_toc(entries: list[TocEntry]) -> list[tuple[int, TocEntry]]:
    """Order entries parent-first, returning ``(depth, entry)`` pairs.

    Roots are taken in input order and each is followed depth-first by the
    entries naming it as parent, siblings keeping input order. A file name is
    emitted at most once. Entries whose parent chain never reaches a root (a
    parent cycle) are not emitted.
    """
    children: dict[str, list[TocEntry]] = {}
    for entry in entries:
        children.setdefault(entry.record.parent_qualified_name, []).append(entry)

    marked: set[str] = set()
    result: list[tuple[int, TocEntry]] = []
    for entry in entries:
        if entry.file_name in marked or not is_root(entry, entries):
            continue
        stack = [(0, entry)]
        while stack:
            depth, current = stack.pop()
            if current.file_name in marked:
                continue
            marked.add(current.file_name)
            result.append((depth, current))
            kids = children.get(current.record.qualified_name, [])
            stack.extend((depth + 1, kid) for kid in reversed(kids))

    for entry in entries:
        if entry.file_name not in marked:
            logger.debug(
                "%s is not reachable from any root (parent %s), leaving it out of "
                "the TOC",
                entry.record.qualified_name,
                entry.record.parent_qualified_name,
            )
    return result
