"""Root SVG document container."""

from __future__ import annotations

import logging
from typing import Any

from hai_svg.attributes import AttributeMap
from hai_svg.element import SVGElement

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


class SVGDocument:
    """An ``<svg>`` root holding document attributes and ordered elements.

    Elements are serialized in the order they were added. Adding an
    element hands it over to the document; callers should not keep
    mutating it or add it to a second document.

    Example:
        >>> doc = SVGDocument(100, 100)
        >>> doc.add_element(SVGElement("test_element").set_attribute("test_attr", "foo"))
        SVGDocument(width='100', height='100', elements=1)
        >>> print(doc)
        <svg height="100" width="100" xmlns="http://www.w3.org/2000/svg">
        <test_element test_attr="foo" />
        </svg>
    """

    def __init__(self, width: Any, height: Any, namespace: str | None = None) -> None:
        self.attributes = AttributeMap()
        self._elements: list[SVGElement] = []
        self.attributes.set("width", width)
        self.attributes.set("height", height)
        self.attributes.set("xmlns", SVG_NAMESPACE if namespace is None else namespace)

    def set_attribute(self, key: str, value: Any) -> SVGDocument:
        """Set a document-level attribute and return self for chaining."""
        self.attributes.set(key, value)
        return self

    def get_attribute(self, key: str) -> str:
        """Return a document-level attribute.

        Raises:
            KeyNotFoundError: If the attribute was never set.
        """
        return self.attributes.get(key)

    def add_element(self, element: SVGElement) -> SVGDocument:
        """Append ``element``; it becomes the last child in the output."""
        self._elements.append(element)
        return self

    @property
    def elements(self) -> tuple[SVGElement, ...]:
        return tuple(self._elements)

    def serialize(self, legacy_whitespace: bool = False) -> str:
        """Render the whole document as SVG text.

        Args:
            legacy_whitespace: Passed to each element's ``serialize``.

        Returns:
            ``<svg ...>``, one line per element, then ``</svg>``. A document
            with no elements still has an empty line between the two tags.
        """
        logger.debug("Serializing document with %d elements", len(self._elements))
        body = "\n".join(
            element.serialize(legacy_whitespace=legacy_whitespace)
            for element in self._elements
        )
        return f"<svg {self.attributes.serialize()}>\n{body}\n</svg>"

    def __len__(self) -> int:
        return len(self._elements)

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return (
            f"SVGDocument(width={self.attributes.get('width')!r}, "
            f"height={self.attributes.get('height')!r}, elements={len(self._elements)})"
        )
