"""Rendering of a single compound's Markdown page."""

from doxymark.compound_record import CompoundRecord
from doxymark.md_table import md_table

LINE_BREAK = "<br>"


def render_compound_page(record: CompoundRecord, line_break: str = LINE_BREAK) -> str:
    """Render a compound page: heading, description and a functions table."""
    parts: list[str] = [f"# {record.simple_name}", ""]

    if record.description:
        parts += [record.description, ""]

    # Table rows must stay on one line
    rows = [
        [f.name, line_break.join(f.description.splitlines())]
        for f in record.functions
    ]
    if rows:
        parts += ["## Functions", "", md_table(["Name", "Description"], rows), ""]

    return "\n".join(parts).rstrip() + "\n"
