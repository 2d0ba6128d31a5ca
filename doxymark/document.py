"""The finalized result of parsing one XML file."""

from __future__ import annotations

from dataclasses import dataclass, field

from doxymark.element import Element


@dataclass(frozen=True)
class Document:
    """Top-level elements of one parsed file, normally a single root."""

    elements: tuple[Element, ...] = field(default_factory=tuple)

    def get_element(self, name: str) -> Element | None:
        """Return the first top-level element named ``name``, if any."""
        for element in self.elements:
            if element.name == name:
                return element
        return None

    def dump(self) -> str:
        """Render every top-level element as an indented debug listing."""
        return "\n".join(element.dump() for element in self.elements)
