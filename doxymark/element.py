"""Order-preserving in-memory representation of one XML element."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Element:
    """One XML node with mixed text and element content.

    ``content`` holds text runs (``str``) and child elements in the exact order
    the parser reported them, so flattening it reproduces the document's
    character stream around inline markup.
    """

    name: str
    attributes: dict[str, str] = field(default_factory=dict)
    content: list[str | Element] = field(default_factory=list)

    @property
    def children(self) -> list[Element]:
        """Child elements in document order."""
        return [c for c in self.content if isinstance(c, Element)]

    @property
    def texts(self) -> list[str]:
        """Text runs in document order."""
        return [c for c in self.content if isinstance(c, str)]

    def append_text(self, text: str) -> None:
        """Record a text run after everything seen so far."""
        self.content.append(text)

    def append_child(self, child: Element) -> None:
        """Record a finished child element after everything seen so far."""
        self.content.append(child)

    def get_child(self, name: str) -> Element | None:
        """Return the first direct child named ``name``, if any."""
        for c in self.content:
            if isinstance(c, Element) and c.name == name:
                return c
        return None

    def get_children(self, name: str) -> list[Element]:
        """Return every direct child named ``name``."""
        return [c for c in self.children if c.name == name]

    def get_attribute(self, name: str) -> str:
        """Return an attribute value, or an empty string when it is absent."""
        return self.attributes.get(name, "")

    def inner_text(self) -> str:
        """Flatten this element and all descendants to text.

        An element without children yields its text runs concatenated. With
        children, text runs and each child's inner text are joined in recorded
        order, so ``see <ref>Foo</ref> for details`` reads back as
        ``see Foo for details``.
        """
        if not self.children:
            return "".join(self.texts)
        parts: list[str] = []
        for c in self.content:
            parts.append(c if isinstance(c, str) else c.inner_text())
        return "".join(parts)

    def dump(self, indent: int = 0) -> str:
        """Render the subtree as an indented debug listing."""
        lines = [f"{' ' * indent}{self.name} => '{''.join(self.texts).strip()}'"]
        lines.extend(c.dump(indent + 2) for c in self.children)
        return "\n".join(lines)
