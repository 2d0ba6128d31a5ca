"""Shared fixtures for writing small Doxygen XML trees."""

from collections.abc import Callable
from pathlib import Path

import pytest

INDEX_TEMPLATE = """<?xml version='1.0' encoding='UTF-8' standalone='no'?>
<doxygenindex xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" \
xsi:noNamespaceSchemaLocation="index.xsd" version="1.9.1">
{compounds}
</doxygenindex>
"""

COMPOUND_TEMPLATE = """<?xml version='1.0' encoding='UTF-8' standalone='no'?>
<doxygen xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" \
xsi:noNamespaceSchemaLocation="compound.xsd" version="1.9.1">
  <compounddef id="{refid}" kind="class" language="C++" prot="public">
    <compoundname>{name}</compoundname>
{base}
{sections}
    <briefdescription>
{brief}
    </briefdescription>
    <detaileddescription>
{detailed}
    </detaileddescription>
  </compounddef>
</doxygen>
"""

MEMBER_TEMPLATE = """      <memberdef kind="function" id="{refid}_{name}" prot="public">
        <name>{name}</name>
        <briefdescription>
{brief}
        </briefdescription>
        <detaileddescription>
        </detaileddescription>
      </memberdef>"""


def para(text: str) -> str:
    """Wrap text in a para element, or nothing for empty text."""
    return f"<para>{text}</para>" if text else ""


@pytest.fixture
def xml_dir(tmp_path: Path) -> Path:
    """Directory standing in for Doxygen's XML output."""
    d = tmp_path / "xml"
    d.mkdir()
    return d


@pytest.fixture
def write_index(xml_dir: Path) -> Callable[[list[tuple[str, str, str]]], Path]:
    """Write index.xml listing (kind, refid, name) compounds."""

    def _write(compounds: list[tuple[str, str, str]]) -> Path:
        body = "\n".join(
            f'  <compound refid="{refid}" kind="{kind}"><name>{name}</name></compound>'
            for kind, refid, name in compounds
        )
        path = xml_dir / "index.xml"
        path.write_text(INDEX_TEMPLATE.format(compounds=body), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_compound(xml_dir: Path) -> Callable[..., Path]:
    """Write a compound file with optional base class and public functions."""

    def _write(
        refid: str,
        name: str,
        *,
        detailed: str = "",
        brief: str = "",
        base: str = "",
        functions: list[tuple[str, str]] | None = None,
    ) -> Path:
        members = "\n".join(
            MEMBER_TEMPLATE.format(refid=refid, name=fname, brief=para(fdesc))
            for fname, fdesc in functions or []
        )
        sections = (
            f'    <sectiondef kind="public-func">\n{members}\n    </sectiondef>'
            if functions
            else ""
        )
        base_ref = (
            f'    <basecompoundref prot="public" virt="non-virtual">{base}'
            "</basecompoundref>"
            if base
            else ""
        )
        path = xml_dir / f"{refid}.xml"
        path.write_text(
            COMPOUND_TEMPLATE.format(
                refid=refid,
                name=name,
                base=base_ref,
                sections=sections,
                brief=para(brief),
                detailed=para(detailed),
            ),
            encoding="utf-8",
        )
        return path

    return _write
