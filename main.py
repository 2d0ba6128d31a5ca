"""Main orchestration script for generating Doxygen XML and Markdown documentation."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the full documentation generation pipeline."""
    parser = argparse.ArgumentParser(
        description="Generate Doxygen XML and convert it to Markdown documentation."
    )
    parser.add_argument(
        "--doxyfile",
        type=Path,
        help="Run doxygen with this Doxyfile before converting",
    )
    parser.add_argument(
        "--xml-dir",
        type=Path,
        default=Path("xml"),
        help="Directory holding Doxygen's XML output (default: xml)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("docs"),
        help="Directory receiving the md/ folder (default: docs)",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args()

    if args.doxyfile:
        print("--- Step 1: Generating Doxygen XML ---")
        run_command(["doxygen", args.doxyfile.name], cwd=args.doxyfile.parent)

    print("\n--- Step 2: Converting Doxygen XML to Markdown ---")
    cmd = [
        sys.executable,
        "-m",
        "doxymark.doxygen_xml_to_md",
        "--path",
        str(args.xml_dir),
        "--output-dir",
        str(args.output_dir),
    ]
    if args.config:
        cmd.extend(["--config", args.config])

    run_command(cmd)

    print(f"\nSUCCESS: Documentation generated in {args.output_dir}")


if __name__ == "__main__":
    main()
