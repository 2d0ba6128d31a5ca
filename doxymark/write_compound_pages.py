"""Logic for writing compound pages to disk."""

import logging
from pathlib import Path

from doxymark.compound_record import CompoundRecord
from doxymark.render_compound_page import LINE_BREAK, render_compound_page
from doxymark.toc_entry import TocEntry

logger = logging.getLogger(__name__)


def write_compound_pages(
    records: list[CompoundRecord],
    md_dir: Path,
    line_break: str = LINE_BREAK,
) -> list[TocEntry]:
    """Write one page per published compound, returning the written entries.

    A page that cannot be written is logged and left out; the remaining pages
    are still written.
    """
    published = [r for r in records if r.published]
    print(f"Writing {len(published)} compound pages...")
    entries: list[TocEntry] = []
    for record in published:
        out_file = md_dir / record.file_name
        md = render_compound_page(record, line_break=line_break)
        try:
            out_file.write_text(md, encoding="utf-8")
        except OSError as e:
            logger.error("Failed to write %s: %s", out_file, e)
            continue
        entries.append(TocEntry(file_name=record.file_name, record=record))
    return entries
