"""Build SVG documents from YAML scene descriptions.

A scene lists the document size and its elements::

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
          - [10, 10]        # bare pair, tagged with the scene letter
          - Z

Each element names a ``shape`` plus that shape's parameters (see
``SHAPES``), and may carry extra ``attributes``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from hai_svg.config import Config
from hai_svg.document import SVGDocument
from hai_svg.element import SVGElement
from hai_svg.exceptions import SceneError
from hai_svg.path import COMMAND_LETTERS, PathCommand

logger = logging.getLogger(__name__)

SCENE_KEYS = ("width", "height", "namespace", "attributes", "elements")


@dataclass(frozen=True)
class ShapeSpec:
    """Parameters accepted by one scene shape."""

    factory: Callable[..., SVGElement]
    required: tuple[str, ...]
    optional: tuple[str, ...] = ()
    description: str = ""


SHAPES: dict[str, ShapeSpec] = {
    "rect": ShapeSpec(
        SVGElement.rectangle, ("width", "height", "x", "y"), ("rx", "ry"), "Rectangle"
    ),
    "circle": ShapeSpec(SVGElement.circle, ("r", "cx", "cy"), (), "Circle"),
    "ellipse": ShapeSpec(SVGElement.ellipse, ("rx", "ry", "cx", "cy"), (), "Ellipse"),
    "line": ShapeSpec(SVGElement.line, ("x1", "y1", "x2", "y2"), (), "Straight line"),
    "polygon": ShapeSpec(SVGElement.polygon, ("points",), (), "Closed polygon"),
    "polyline": ShapeSpec(SVGElement.polyline, ("points",), (), "Open polyline"),
    "path": ShapeSpec(SVGElement.path, ("commands",), ("letter",), "Path data"),
    "text": ShapeSpec(
        SVGElement.text,
        ("content", "x", "y"),
        ("dx", "dy", "rotate", "text_length", "length_adjust"),
        "Text content",
    ),
    "element": ShapeSpec(SVGElement, ("tag",), ("content",), "Any tag, attributes only"),
}


def _parse_command(item: Any) -> Any:
    """Turn one scene path item into a PathCommand or a bare pair."""
    if isinstance(item, str):
        return PathCommand.from_letter(item)
    if isinstance(item, list) and item:
        if isinstance(item[0], str):
            return PathCommand.from_letter(item[0], *item[1:])
        if len(item) == 2:
            return tuple(item)
    raise ValueError(f"Invalid path command: {item!r}")


def _parse_points(points: Any) -> Any:
    if isinstance(points, str):
        return points
    if isinstance(points, list) and all(
        isinstance(p, list) and len(p) == 2 for p in points
    ):
        return [tuple(p) for p in points]
    raise ValueError("points must be text or a list of [x, y] pairs")


def build_element(entry: Any, config: Config) -> SVGElement:
    """Build a single element from its scene mapping.

    Raises:
        ValueError: If the entry is malformed.
    """
    if not isinstance(entry, dict):
        raise ValueError("element must be a mapping")
    entry = dict(entry)
    shape = entry.pop("shape", None)
    if shape not in SHAPES:
        raise ValueError(f"unknown shape {shape!r}; expected one of {', '.join(SHAPES)}")
    spec = SHAPES[shape]

    attributes = entry.pop("attributes", None) or {}
    if not isinstance(attributes, dict):
        raise ValueError("attributes must be a mapping")

    missing = [name for name in spec.required if name not in entry]
    if missing:
        raise ValueError(f"{shape}: missing required field(s) {', '.join(missing)}")
    unknown = sorted(map(str, set(entry) - set(spec.required) - set(spec.optional)))
    if unknown:
        raise ValueError(f"{shape}: unknown field(s) {', '.join(unknown)}")

    kwargs = dict(entry)
    if shape == "path":
        kwargs["commands"] = [_parse_command(item) for item in kwargs["commands"]]
        kwargs.setdefault("letter", config.letter)
        if kwargs["letter"] not in COMMAND_LETTERS:
            raise ValueError(
                f"path: letter must be one of {' '.join(COMMAND_LETTERS)}, got {kwargs['letter']!r}"
            )
        kwargs["legacy_whitespace"] = config.legacy_whitespace
    elif shape in ("polygon", "polyline"):
        kwargs["points"] = _parse_points(kwargs["points"])

    element = spec.factory(**kwargs)
    for key, value in attributes.items():
        element.set_attribute(str(key), value)
    return element


def build_document(data: Any, config: Config | None = None) -> SVGDocument:
    """Build an SVGDocument from a parsed scene mapping.

    Args:
        data: Scene mapping (already parsed from YAML).
        config: Settings for namespace, whitespace and bare-pair letter.

    Raises:
        SceneError: If the scene is malformed. Element errors name the
            element's index in the ``elements`` list.
    """
    config = config or Config()
    if not isinstance(data, dict):
        raise SceneError("Scene root must be a mapping")
    unknown = sorted(map(str, set(data) - set(SCENE_KEYS)))
    if unknown:
        raise SceneError(f"Unknown scene keys: {', '.join(unknown)}")
    for key in ("width", "height"):
        if key not in data:
            raise SceneError(f"{key}: required field is missing")

    document = SVGDocument(
        data["width"], data["height"], data.get("namespace", config.namespace)
    )

    attributes = data.get("attributes") or {}
    if not isinstance(attributes, dict):
        raise SceneError("attributes: must be a mapping")
    for key, value in attributes.items():
        document.set_attribute(str(key), value)

    elements = data.get("elements") or []
    if not isinstance(elements, list):
        raise SceneError("elements: must be a list")
    for index, entry in enumerate(elements):
        try:
            document.add_element(build_element(entry, config))
        except (TypeError, ValueError) as e:
            raise SceneError(f"elements[{index}]: {e}") from e

    logger.debug("Built scene document with %d elements", len(document))
    return document


def load_scene(path: Path | str, config: Config | None = None) -> SVGDocument:
    """Read a YAML scene file and build its document.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        SceneError: If the file is not a valid scene.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Scene file not found: {path}")

    logger.debug("Loading scene %s", path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SceneError(f"Invalid YAML syntax in {path}: {e}") from e

    if data is None:
        raise SceneError(f"Empty scene file: {path}")
    return build_document(data, config)
