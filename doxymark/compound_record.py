"""Extraction of one Doxygen compound (class) into a structured record."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from doxymark.describe import MAX_LIST_DEPTH, get_description
from doxymark.function_info import FunctionInfo
from doxymark.load_document import load_document

if TYPE_CHECKING:
    from doxymark.element import Element

SCOPE_SEPARATOR = "::"


def simple_name_of(qualified_name: str) -> str:
    """Return the last scope segment of a qualified name."""
    return qualified_name.split(SCOPE_SEPARATOR)[-1] or qualified_name


@dataclass
class CompoundRecord:
    """A documented class as listed in the index and read from its XML file."""

    source_path: Path
    qualified_name: str
    simple_name: str = ""
    description: str = ""
    parent_qualified_name: str = ""
    functions: list[FunctionInfo] = field(default_factory=list)
    max_list_depth: int = MAX_LIST_DEPTH

    def __post_init__(self) -> None:
        """Derive the simple name from the qualified one when not given."""
        if not self.simple_name:
            self.simple_name = simple_name_of(self.qualified_name)

    @property
    def file_name(self) -> str:
        """Markdown file name for this compound's page."""
        return f"{self.simple_name}.md"

    @property
    def published(self) -> bool:
        """Only documented compounds get a page and a TOC entry."""
        return bool(self.description)

    def parse(self) -> bool:
        """Load the compound XML and extract description, base and functions.

        Returns False only when the source file does not exist. A file without
        the expected ``doxygen/compounddef`` structure leaves the defaults in
        place and still counts as parsed.
        """
        if not self.source_path.exists():
            return False

        document = load_document(self.source_path)
        if document is None:
            return True
        root = document.get_element("doxygen")
        if root is None:
            return True
        compounddef = root.get_child("compounddef")
        if compounddef is not None:
            self._parse_def(compounddef)
        return True

    def _parse_def(self, compounddef: Element) -> None:
        self.description = get_description(compounddef, self.max_list_depth)

        self.functions = []
        for section in compounddef.get_children("sectiondef"):
            if section.get_attribute("kind") == "public-func":
                self.functions.extend(self._parse_members(section))

        base = compounddef.get_child("basecompoundref")
        self.parent_qualified_name = base.inner_text() if base is not None else ""

    def _parse_members(self, section: Element) -> list[FunctionInfo]:
        result: list[FunctionInfo] = []
        for member in section.get_children("memberdef"):
            if member.get_attribute("kind") != "function":
                continue
            description = get_description(member, self.max_list_depth)
            if not description:
                continue
            name = member.get_child("name")
            if name is not None:
                result.append(
                    FunctionInfo(name=name.inner_text(), description=description)
                )
        return result
