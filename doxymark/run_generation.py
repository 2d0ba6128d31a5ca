"""Orchestration logic for converting Doxygen XML to Markdown."""

import argparse
import logging
from pathlib import Path
from typing import Any

from doxymark.build_toc import build_toc
from doxymark.compound_record import CompoundRecord
from doxymark.load_config import load_config
from doxymark.load_document import load_document
from doxymark.load_index import load_index
from doxymark.render_toc import render_toc
from doxymark.toc_entry import TocEntry
from doxymark.write_compound_pages import write_compound_pages

logger = logging.getLogger(__name__)


def run_generation(args: argparse.Namespace) -> int:
    """Execute the full generation pipeline."""
    config = load_config(args.config)
    records = load_index(
        Path(args.path),
        kinds=config["compounds"]["kinds"],
        max_list_depth=config["description"]["max_list_depth"],
    )
    if records is None:
        print("Index could not be loaded. No documentation generated.")
        return 1

    if args.dump:
        _dump_documents(records)

    output = config["output"]
    md_dir = (Path(args.output_dir) / output["subdir"]).resolve()
    try:
        md_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("Failed to create output directory %s: %s", md_dir, e)
        return 1

    entries = write_compound_pages(records, md_dir, line_break=output["line_break"])
    _write_toc(entries, md_dir, output)

    print(f"Generated {len(entries)} Markdown pages into: {md_dir}")
    return 0


def _write_toc(entries: list[TocEntry], md_dir: Path, output: dict[str, Any]) -> None:
    """Nest the written pages by inheritance and write the TOC page."""
    md = render_toc(
        build_toc(entries), title=output["toc_title"], indent=output["indent"]
    )
    toc_file = md_dir / output["toc_file"]
    try:
        toc_file.write_text(md, encoding="utf-8")
    except OSError as e:
        logger.error("Failed to write %s: %s", toc_file, e)


def _dump_documents(records: list[CompoundRecord]) -> None:
    """Print the element tree of every compound document."""
    for record in records:
        document = load_document(record.source_path)
        if document is not None:
            print(f"--- {record.source_path}")
            print(document.dump())
