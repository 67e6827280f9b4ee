"""hai-svg: build SVG documents in memory and serialize them to text.

This library provides:
- Shape constructors (rect, circle, ellipse, line, polygon, polyline, path, text)
- Path-data commands with uniform coercion of bare coordinate pairs
- Deterministic serialization with attributes sorted by name
- YAML scene loading and a small command-line renderer

Example:
    >>> from hai_svg import PathCommand, SVGDocument, SVGElement
    >>> doc = SVGDocument(100, 100)
    >>> _ = doc.add_element(SVGElement.circle(10, 50, 50))
    >>> _ = doc.add_element(SVGElement.path([PathCommand.move_to(0, 0), (10, 10)]))
    >>> print(doc.serialize())
    <svg height="100" width="100" xmlns="http://www.w3.org/2000/svg">
    <circle cx="50" cy="50" r="10" />
    <path d="M 0,0 L 10,10" />
    </svg>
"""

from hai_svg.attributes import AttributeMap
from hai_svg.config import Config
from hai_svg.document import SVG_NAMESPACE, SVGDocument
from hai_svg.element import SVGElement
from hai_svg.exceptions import (
    ConfigError,
    HaiSVGError,
    KeyNotFoundError,
    SceneError,
)
from hai_svg.path import (
    COMMAND_LETTERS,
    PathCommand,
    SupportsPathCommand,
    format_path_data,
    to_path_command,
)
from hai_svg.points import format_points
from hai_svg.scene import build_document, load_scene

__version__ = "0.1.0"

__all__ = [
    # Document model
    "SVGDocument",
    "SVGElement",
    "AttributeMap",
    "SVG_NAMESPACE",
    # Path data
    "PathCommand",
    "SupportsPathCommand",
    "COMMAND_LETTERS",
    "to_path_command",
    "format_path_data",
    "format_points",
    # Config and scenes
    "Config",
    "build_document",
    "load_scene",
    # Exceptions
    "HaiSVGError",
    "KeyNotFoundError",
    "ConfigError",
    "SceneError",
    # Metadata
    "__version__",
]
