"""Logic for loading XML files into order-preserving element trees."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from lxml import etree

from doxymark.document import Document
from doxymark.element import Element

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def local_name(tag: str) -> str:
    """Strip an ``{namespace}`` prefix from an lxml tag."""
    return tag.rsplit("}", 1)[-1]


class DocumentBuilder:
    """Parser target that assembles a Document from start/data/end events.

    Open elements live on an explicit stack and are attached to their parent
    (or to the document's top level) only once their end tag is seen.
    """

    def __init__(self) -> None:
        """Start with no open elements and an empty top level."""
        self.stack: list[Element] = []
        self.elements: list[Element] = []

    def start(self, tag: str, attrib: dict[str, str]) -> None:
        """Open a new element."""
        attributes = {local_name(k): v for k, v in attrib.items()}
        self.stack.append(Element(name=local_name(tag), attributes=attributes))

    def data(self, text: str) -> None:
        """Record character data on the innermost open element."""
        if self.stack:
            self.stack[-1].append_text(text)

    def end(self, tag: str) -> None:
        """Close the innermost open element."""
        if not self.stack:
            return
        self._finish(self.stack.pop())

    def close(self) -> Document:
        """Finalize the document, closing anything a truncated stream left open."""
        while self.stack:
            self._finish(self.stack.pop())
        return Document(elements=tuple(self.elements))

    def _finish(self, element: Element) -> None:
        if self.stack:
            self.stack[-1].append_child(element)
        else:
            self.elements.append(element)


def _build(chunks: Iterable[bytes], source: str) -> Document:
    """Feed chunks to a target parser, stopping at the first syntax error.

    Elements read before the error are kept and closed bottom-up.
    """
    builder = DocumentBuilder()
    parser = etree.XMLParser(
        target=builder,
        resolve_entities=False,
        no_network=True,
    )
    try:
        for chunk in chunks:
            parser.feed(chunk)
        return parser.close()
    except etree.XMLSyntaxError as e:
        logger.warning("Malformed XML in %s (line %s): %s", source, e.lineno, e.msg)
        return builder.close()


def parse_document(text: str | bytes, source: str = "<string>") -> Document:
    """Parse XML held in memory into a Document."""
    data = text.encode("utf-8") if isinstance(text, str) else text
    return _build([data], source)


def load_document(path: Path) -> Document | None:
    """Load and parse an XML file.

    Returns None when the file cannot be opened. Malformed XML is logged and
    whatever was assembled up to the error is still returned.
    """
    try:
        with path.open("rb") as fh:
            return _build(iter(lambda: fh.read(CHUNK_SIZE), b""), str(path))
    except OSError as e:
        logger.warning("Failed to open file %s: %s", path, e)
        return None
