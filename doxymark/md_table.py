"""Utility for generating Markdown tables."""


def escape_cell(text: str) -> str:
    """Escape pipes so a cell cannot split into extra columns."""
    return text.replace("|", "\\|")


def md_table(headers: list[str], rows: list[list[str]]) -> str:
    """Generate a compact Markdown table."""
    if not rows:
        return ""
    out = [
        "|" + "|".join(headers) + "|",
        "|" + "|".join(["---"] * len(headers)) + "|",
    ]
    out.extend("|" + "|".join(escape_cell(c) for c in r) + "|" for r in rows)
    return "\n".join(out)
