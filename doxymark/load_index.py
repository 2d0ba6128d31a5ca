"""Logic for reading the Doxygen index and extracting every listed compound."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from doxymark.compound_record import CompoundRecord
from doxymark.describe import MAX_LIST_DEPTH
from doxymark.load_document import load_document

logger = logging.getLogger(__name__)

INDEX_FILE = "index.xml"


def read_index(
    root: Path,
    kinds: Iterable[str] = ("class",),
    max_list_depth: int = MAX_LIST_DEPTH,
) -> list[CompoundRecord] | None:
    """List the compounds of the wanted kinds without parsing them.

    Returns None when ``index.xml`` under ``root`` is missing or unreadable.
    """
    index_path = root / INDEX_FILE
    if not index_path.exists():
        print(f"File {index_path} not found!")
        return None

    document = load_document(index_path)
    if document is None:
        return None

    wanted = set(kinds)
    records: list[CompoundRecord] = []
    index = document.get_element("doxygenindex")
    if index is None:
        return records

    for compound in index.get_children("compound"):
        if compound.get_attribute("kind") not in wanted:
            continue
        name = compound.get_child("name")
        if name is None:
            continue
        records.append(
            CompoundRecord(
                source_path=root / f"{compound.get_attribute('refid')}.xml",
                qualified_name=name.inner_text(),
                max_list_depth=max_list_depth,
            )
        )
    return records


def load_index(
    root: Path,
    kinds: Iterable[str] = ("class",),
    max_list_depth: int = MAX_LIST_DEPTH,
) -> list[CompoundRecord] | None:
    """Read ``index.xml`` and parse every listed compound in index order.

    A compound whose XML file is missing is logged and left with empty
    defaults; only a missing index aborts the load.
    """
    records = read_index(root, kinds, max_list_depth)
    if records is None:
        return None

    print(f"Parsed {len(records)} classes.")
    for record in records:
        if not record.parse():
            logger.warning(
                "Skipping %s: file %s not found",
                record.qualified_name,
                record.source_path,
            )
    return records
