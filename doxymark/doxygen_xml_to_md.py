"""Convert Doxygen XML output to Markdown.

Reads the ``index.xml`` written by Doxygen's XML generator, extracts every
documented class and writes one Markdown page per class plus a ``TOC.md``
that nests classes under their base classes.
"""

import argparse
import logging
from pathlib import Path

from doxymark import __version__
from doxymark.run_generation import run_generation

MISSING_PATH_MSG = (
    "--path argument not specified. Pass path to base of xml documentation files."
)


def main() -> int:
    """Run the conversion process."""
    print(f"doxymark: {__version__}")

    ap = argparse.ArgumentParser(
        description="Convert Doxygen XML documentation to Markdown pages.",
    )
    ap.add_argument(
        "--path",
        type=Path,
        help="Directory containing the Doxygen XML output (index.xml)",
    )
    ap.add_argument(
        "--output-dir",
        type=Path,
        default=Path.cwd(),
        help="Directory receiving the md/ folder (default: working directory)",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--dump",
        action="store_true",
        help="Print the parsed element tree of every compound file",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if args.path is None:
        print(MISSING_PATH_MSG)
        return 0

    return run_generation(args)


if __name__ == "__main__":
    raise SystemExit(main())
