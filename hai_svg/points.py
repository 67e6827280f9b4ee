"""Points-list formatting shared by polygon and polyline elements."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def format_points(points: str | Iterable[tuple[Any, Any]]) -> str:
    """Render 2-D points as an SVG ``points`` attribute value.

    Args:
        points: Either an iterable of ``(x, y)`` pairs or text that is
            already in points-list form.

    Returns:
        ``"x1,y1 x2,y2 ..."``, or the input text unchanged. An empty
        iterable renders as an empty string.

    Example:
        >>> format_points([(0, 0), (1, 1), (2, 2)])
        '0,0 1,1 2,2'
    """
    if isinstance(points, str):
        return points
    return " ".join(f"{x},{y}" for x, y in points)
