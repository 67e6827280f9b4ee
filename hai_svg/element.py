"""SVG element model and shape constructors."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from hai_svg.attributes import AttributeMap
from hai_svg.path import format_path_data
from hai_svg.points import format_points


class SVGElement:
    """A single SVG node: tag name, attributes, and optional inner text.

    An element with ``content`` set serializes with explicit open and close
    tags; without it, the element is self-closing. The tag name plays no
    part in that choice.

    Example:
        >>> SVGElement("test_element").set_attribute("test_attr", "foo").serialize()
        '<test_element test_attr="foo" />'
    """

    def __init__(self, tag: str, content: str | None = None) -> None:
        self.tag = tag
        self.content = content
        self.attributes = AttributeMap()

    # -- shapes -----------------------------------------------------------

    @classmethod
    def rectangle(
        cls,
        width: Any,
        height: Any,
        x: Any,
        y: Any,
        rx: Any | None = None,
        ry: Any | None = None,
    ) -> SVGElement:
        """Create a ``rect``; corner radii default to ``"0"``."""
        return (
            cls("rect")
            .set_attribute("width", width)
            .set_attribute("height", height)
            .set_attribute("x", x)
            .set_attribute("y", y)
            .set_attribute("rx", "0" if rx is None else rx)
            .set_attribute("ry", "0" if ry is None else ry)
        )

    @classmethod
    def circle(cls, r: Any, cx: Any, cy: Any) -> SVGElement:
        return cls("circle").set_attribute("r", r).set_attribute("cx", cx).set_attribute("cy", cy)

    @classmethod
    def ellipse(cls, rx: Any, ry: Any, cx: Any, cy: Any) -> SVGElement:
        return (
            cls("ellipse")
            .set_attribute("rx", rx)
            .set_attribute("ry", ry)
            .set_attribute("cx", cx)
            .set_attribute("cy", cy)
        )

    @classmethod
    def line(cls, x1: Any, y1: Any, x2: Any, y2: Any) -> SVGElement:
        return (
            cls("line")
            .set_attribute("x1", x1)
            .set_attribute("y1", y1)
            .set_attribute("x2", x2)
            .set_attribute("y2", y2)
        )

    @classmethod
    def polygon(cls, points: str | Iterable[tuple[Any, Any]]) -> SVGElement:
        return cls("polygon").set_attribute("points", format_points(points))

    @classmethod
    def polyline(cls, points: str | Iterable[tuple[Any, Any]]) -> SVGElement:
        return cls("polyline").set_attribute("points", format_points(points))

    @classmethod
    def path(
        cls,
        commands: Iterable[Any],
        letter: str = "L",
        legacy_whitespace: bool = False,
    ) -> SVGElement:
        """Create a ``path`` whose ``d`` attribute joins ``commands``.

        Args:
            commands: Path commands and/or bare ``(x, y)`` pairs.
            letter: Command letter for bare pairs.
            legacy_whitespace: Keep the trailing space after ``Z``.
        """
        d = format_path_data(commands, letter=letter, legacy_whitespace=legacy_whitespace)
        return cls("path").set_attribute("d", d)

    @classmethod
    def text(
        cls,
        content: str,
        x: Any,
        y: Any,
        dx: Any | None = None,
        dy: Any | None = None,
        rotate: Any | None = None,
        text_length: Any | None = None,
        length_adjust: Any | None = None,
    ) -> SVGElement:
        """Create a content-bearing ``text`` element.

        Unset optional attributes fall back to ``dx="0"``, ``dy="0"``,
        ``rotate="0"``, ``textLength="none"`` and ``lengthAdjust="spacing"``.
        """
        return (
            cls("text", content=str(content))
            .set_attribute("x", x)
            .set_attribute("y", y)
            .set_attribute("dx", "0" if dx is None else dx)
            .set_attribute("dy", "0" if dy is None else dy)
            .set_attribute("rotate", "0" if rotate is None else rotate)
            .set_attribute("textLength", "none" if text_length is None else text_length)
            .set_attribute(
                "lengthAdjust", "spacing" if length_adjust is None else length_adjust
            )
        )

    # -- attributes -------------------------------------------------------

    def set_attribute(self, key: str, value: Any) -> SVGElement:
        """Set ``key`` to ``str(value)`` and return self for chaining."""
        self.attributes.set(key, value)
        return self

    def get_attribute(self, key: str) -> str:
        """Return the text value of ``key``.

        Raises:
            KeyNotFoundError: If the attribute was never set.
        """
        return self.attributes.get(key)

    # -- output -----------------------------------------------------------

    @property
    def is_self_closing(self) -> bool:
        return self.content is None

    def serialize(self, legacy_whitespace: bool = False) -> str:
        """Render the element as markup text.

        Args:
            legacy_whitespace: Emit ``<tag  />`` (two spaces) for a
                self-closing element without attributes, as older output did.
        """
        attrs = self.attributes.serialize()
        if self.is_self_closing:
            if attrs or legacy_whitespace:
                return f"<{self.tag} {attrs} />"
            return f"<{self.tag} />"
        opening = f"<{self.tag} {attrs}>" if attrs else f"<{self.tag}>"
        return f"{opening}{self.content}</{self.tag}>"

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"SVGElement({self.tag!r}, attributes={len(self.attributes)}, content={self.content!r})"
