"""Unit tests for hai_svg.document.SVGDocument."""

from __future__ import annotations

import defusedxml.ElementTree as ET
import pytest

from hai_svg import PathCommand, SVGDocument, SVGElement
from hai_svg.document import SVG_NAMESPACE
from hai_svg.exceptions import KeyNotFoundError

REFERENCE_OUTPUT = (
    '<svg height="100" width="100" xmlns="http://www.w3.org/2000/svg">\n'
    '<test_element test_attr="foo" />\n'
    "</svg>"
)


class TestDocumentAttributes:
    """Root attributes set at construction."""

    def test_default_namespace(self) -> None:
        """xmlns defaults to the SVG namespace."""
        document = SVGDocument(10, 20)

        assert document.get_attribute("xmlns") == SVG_NAMESPACE
        assert document.get_attribute("width") == "10"
        assert document.get_attribute("height") == "20"

    def test_custom_namespace(self) -> None:
        """An explicit namespace replaces the default."""
        document = SVGDocument(10, 20, namespace="urn:example")

        assert document.get_attribute("xmlns") == "urn:example"

    def test_set_attribute_chains_and_sorts(self) -> None:
        """Extra root attributes join the sorted list."""
        document = SVGDocument(10, 20).set_attribute("viewBox", "0 0 10 20")

        assert document.serialize().startswith(
            '<svg height="20" viewBox="0 0 10 20" width="10" xmlns='
        )

    def test_missing_attribute_raises(self) -> None:
        """Unknown root attributes raise KeyNotFoundError."""
        with pytest.raises(KeyNotFoundError):
            SVGDocument(1, 1).get_attribute("viewBox")


class TestDocumentSerialize:
    """Full-document output."""

    def test_reference_output(self, simple_document: SVGDocument) -> None:
        """Document with one element matches the reference bytes."""
        assert simple_document.serialize() == REFERENCE_OUTPUT
        assert str(simple_document) == REFERENCE_OUTPUT

    def test_empty_document_has_blank_line(self) -> None:
        """Zero elements leave an empty line between the tags."""
        assert SVGDocument(1, 2).serialize() == (
            f'<svg height="2" width="1" xmlns="{SVG_NAMESPACE}">\n\n</svg>'
        )

    def test_elements_in_insertion_order(self) -> None:
        """Elements appear in the order they were added."""
        document = SVGDocument(10, 10)
        document.add_element(SVGElement.circle(1, 2, 3))
        document.add_element(SVGElement("g"))
        document.add_element(SVGElement.line(0, 0, 1, 1))

        lines = document.serialize().split("\n")

        assert lines[1].startswith("<circle")
        assert lines[2] == "<g />"
        assert lines[3].startswith("<line")
        assert len(document) == 3
        assert [e.tag for e in document.elements] == ["circle", "g", "line"]

    def test_repeated_serialization_is_identical(self, simple_document: SVGDocument) -> None:
        """Serializing twice without mutation gives the same bytes."""
        assert simple_document.serialize() == simple_document.serialize()

    def test_legacy_whitespace_reaches_elements(self) -> None:
        """The legacy flag is applied to every element."""
        document = SVGDocument(1, 1).add_element(SVGElement("g"))

        assert "<g  />" in document.serialize(legacy_whitespace=True)
        assert "<g />" in document.serialize()

    def test_output_is_well_formed_xml(self) -> None:
        """A document mixing shapes parses back as SVG."""
        document = SVGDocument(100, 100)
        document.add_element(SVGElement.rectangle(10, 10, 0, 0))
        document.add_element(
            SVGElement.path([PathCommand.move_to(0, 0), (50, 50), PathCommand.close_path()])
        )
        document.add_element(SVGElement.text("label", 10, 90))

        root = ET.fromstring(document.serialize())

        assert root.tag == f"{{{SVG_NAMESPACE}}}svg"
        assert len(list(root)) == 3
