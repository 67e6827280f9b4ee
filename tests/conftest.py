"""Pytest configuration and shared fixtures for hai-svg tests."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest
from click.testing import CliRunner

from hai_svg import SVGDocument, SVGElement


@pytest.fixture
def runner() -> CliRunner:
    """Create a CliRunner instance for testing CLI commands."""
    return CliRunner()


@pytest.fixture
def test_element() -> SVGElement:
    """Return the single-attribute element used by the reference outputs."""
    return SVGElement("test_element").set_attribute("test_attr", "foo")


@pytest.fixture
def simple_document(test_element: SVGElement) -> SVGDocument:
    """Return a 100x100 document holding ``test_element``."""
    return SVGDocument(100, 100).add_element(test_element)


@pytest.fixture
def scene_file(tmp_path: Path) -> Path:
    """Create a scene file exercising several shapes."""
    scene_path = tmp_path / "scene.yaml"
    scene_path.write_text(
        dedent("""
        width: 200
        height: 100
        attributes:
          viewBox: 0 0 200 100
        elements:
          - shape: rect
            width: 50
            height: 20
            x: 10
            y: 10
            attributes:
              fill: steelblue
          - shape: path
            commands:
              - [M, 0, 0]
              - [10, 10]
              - Z
          - shape: text
            content: Hello
            x: 5
            y: 90
        """).strip(),
        encoding="utf-8",
    )
    return scene_path
