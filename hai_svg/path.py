"""Path-data mini-language: commands, coercion, and ``d`` attribute text.

A path is a sequence of commands, each a letter plus operand text. The
operand text is formatted once, when the command is created, and carried
around as-is from then on.

Example:
    >>> format_path_data([PathCommand.move_to(0, 0), (10, 10), PathCommand.close_path()])
    'M 0,0 L 10,10 Z'
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

# Command letter -> (constructor name, operand count)
_CONSTRUCTORS: dict[str, tuple[str, int]] = {
    "M": ("move_to", 2),
    "m": ("move_by", 2),
    "L": ("line_to", 2),
    "l": ("line_by", 2),
    "H": ("horizontal_to", 1),
    "h": ("horizontal_by", 1),
    "V": ("vertical_to", 1),
    "v": ("vertical_by", 1),
    "C": ("cubic_to", 6),
    "c": ("cubic_by", 6),
    "S": ("smooth_cubic_to", 4),
    "s": ("smooth_cubic_by", 4),
    "Q": ("quadratic_to", 4),
    "q": ("quadratic_by", 4),
    "T": ("smooth_quadratic_to", 2),
    "t": ("smooth_quadratic_by", 2),
    "A": ("arc_to", 7),
    "a": ("arc_by", 7),
    "Z": ("close_path", 0),
}

COMMAND_LETTERS = tuple(_CONSTRUCTORS)


def _pair(x: Any, y: Any) -> str:
    return f"{x},{y}"


@dataclass(frozen=True)
class PathCommand:
    """One path instruction: a command letter and its pre-formatted operands."""

    letter: str
    operands: str = ""

    # -- move / line ------------------------------------------------------

    @classmethod
    def move_to(cls, x: Any, y: Any) -> PathCommand:
        return cls("M", _pair(x, y))

    @classmethod
    def move_by(cls, dx: Any, dy: Any) -> PathCommand:
        return cls("m", _pair(dx, dy))

    @classmethod
    def line_to(cls, x: Any, y: Any) -> PathCommand:
        return cls("L", _pair(x, y))

    @classmethod
    def line_by(cls, dx: Any, dy: Any) -> PathCommand:
        return cls("l", _pair(dx, dy))

    @classmethod
    def horizontal_to(cls, x: Any) -> PathCommand:
        return cls("H", str(x))

    @classmethod
    def horizontal_by(cls, dx: Any) -> PathCommand:
        return cls("h", str(dx))

    @classmethod
    def vertical_to(cls, y: Any) -> PathCommand:
        return cls("V", str(y))

    @classmethod
    def vertical_by(cls, dy: Any) -> PathCommand:
        return cls("v", str(dy))

    # -- curves -----------------------------------------------------------

    @classmethod
    def cubic_to(cls, x1: Any, y1: Any, x2: Any, y2: Any, x: Any, y: Any) -> PathCommand:
        return cls("C", f"{_pair(x1, y1)} {_pair(x2, y2)} {_pair(x, y)}")

    @classmethod
    def cubic_by(
        cls, dx1: Any, dy1: Any, dx2: Any, dy2: Any, dx: Any, dy: Any
    ) -> PathCommand:
        return cls("c", f"{_pair(dx1, dy1)} {_pair(dx2, dy2)} {_pair(dx, dy)}")

    @classmethod
    def smooth_cubic_to(cls, x2: Any, y2: Any, x: Any, y: Any) -> PathCommand:
        return cls("S", f"{_pair(x2, y2)} {_pair(x, y)}")

    @classmethod
    def smooth_cubic_by(cls, dx2: Any, dy2: Any, dx: Any, dy: Any) -> PathCommand:
        return cls("s", f"{_pair(dx2, dy2)} {_pair(dx, dy)}")

    @classmethod
    def quadratic_to(cls, x1: Any, y1: Any, x: Any, y: Any) -> PathCommand:
        return cls("Q", f"{_pair(x1, y1)} {_pair(x, y)}")

    @classmethod
    def quadratic_by(cls, dx1: Any, dy1: Any, dx: Any, dy: Any) -> PathCommand:
        return cls("q", f"{_pair(dx1, dy1)} {_pair(dx, dy)}")

    @classmethod
    def smooth_quadratic_to(cls, x: Any, y: Any) -> PathCommand:
        return cls("T", _pair(x, y))

    @classmethod
    def smooth_quadratic_by(cls, dx: Any, dy: Any) -> PathCommand:
        return cls("t", _pair(dx, dy))

    @classmethod
    def arc_to(
        cls,
        rx: Any,
        ry: Any,
        angle: Any,
        large_arc_flag: Any,
        sweep_flag: Any,
        x: Any,
        y: Any,
    ) -> PathCommand:
        """Elliptical arc to an absolute point.

        Flags are rendered as given; pass ``0``/``1`` for valid SVG.
        """
        return cls("A", f"{rx} {ry} {angle} {large_arc_flag} {sweep_flag} {_pair(x, y)}")

    @classmethod
    def arc_by(
        cls,
        rx: Any,
        ry: Any,
        angle: Any,
        large_arc_flag: Any,
        sweep_flag: Any,
        dx: Any,
        dy: Any,
    ) -> PathCommand:
        return cls("a", f"{rx} {ry} {angle} {large_arc_flag} {sweep_flag} {_pair(dx, dy)}")

    @classmethod
    def close_path(cls) -> PathCommand:
        return cls("Z")

    # -- generic ----------------------------------------------------------

    @classmethod
    def from_letter(cls, letter: str, *values: Any) -> PathCommand:
        """Build a command from its letter and raw operand values.

        Args:
            letter: One of ``COMMAND_LETTERS``.
            *values: Operands in the order the matching constructor takes them.

        Raises:
            ValueError: If the letter is unknown or the operand count is wrong.
        """
        try:
            name, arity = _CONSTRUCTORS[letter]
        except KeyError:
            raise ValueError(f"Unknown path command letter: {letter!r}") from None
        if len(values) != arity:
            raise ValueError(
                f"Path command {letter!r} takes {arity} operands, got {len(values)}"
            )
        return getattr(cls, name)(*values)

    def to_path_command(self, letter: str) -> PathCommand:
        """Return self; a command is already tagged, so ``letter`` is ignored."""
        return self

    def render(self, legacy_whitespace: bool = False) -> str:
        """Render as ``"{letter} {operands}"``.

        A command without operands renders as the bare letter unless
        ``legacy_whitespace`` asks for the padded ``"Z "`` form.
        """
        if self.operands or legacy_whitespace:
            return f"{self.letter} {self.operands}"
        return self.letter

    def __str__(self) -> str:
        return self.render()


@runtime_checkable
class SupportsPathCommand(Protocol):
    """Anything that can stand in for a path command."""

    def to_path_command(self, letter: str) -> PathCommand: ...


def to_path_command(value: Any, letter: str) -> PathCommand:
    """Coerce ``value`` into a PathCommand.

    Args:
        value: A ``SupportsPathCommand`` object (passed through its own
            conversion) or a bare ``(x, y)`` coordinate pair.
        letter: Command letter given to bare coordinate pairs.

    Raises:
        TypeError: If ``value`` is neither kind of input.
    """
    if isinstance(value, SupportsPathCommand):
        return value.to_path_command(letter)
    if (
        isinstance(value, Sequence)
        and not isinstance(value, (str, bytes, bytearray))
        and len(value) == 2
    ):
        x, y = value
        return PathCommand(letter, _pair(x, y))
    raise TypeError(f"Cannot convert {type(value).__name__} to a path command")


def format_path_data(
    values: Iterable[Any],
    letter: str = "L",
    legacy_whitespace: bool = False,
) -> str:
    """Join commands and coordinate pairs into ``d`` attribute text.

    Args:
        values: Path commands and/or bare ``(x, y)`` pairs, in drawing order.
        letter: Letter used to tag bare pairs.
        legacy_whitespace: Keep the trailing space after operand-less
            commands instead of trimming it.
    """
    return " ".join(
        to_path_command(value, letter).render(legacy_whitespace) for value in values
    )
