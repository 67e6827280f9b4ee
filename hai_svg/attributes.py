"""Attribute storage with deterministic serialization."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from hai_svg.exceptions import KeyNotFoundError


class AttributeMap:
    """Mapping from attribute name to its text value.

    Values are stored as text at the moment they are set, using Python's
    default ``str()`` conversion. Serialization always sorts by key, so the
    order in which attributes were set never shows up in the output.
    """

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        self._values[key] = str(value)

    def get(self, key: str) -> str:
        """Return the text stored under ``key``.

        Raises:
            KeyNotFoundError: If ``key`` was never set.
        """
        try:
            return self._values[key]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def items(self) -> list[tuple[str, str]]:
        """Return ``(key, value)`` pairs in serialization order."""
        return sorted(self._values.items())

    def serialize(self) -> str:
        """Render as space-separated ``key="value"`` tokens sorted by key."""
        return " ".join(f'{key}="{value}"' for key, value in self.items())

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._values))

    def __repr__(self) -> str:
        return f"AttributeMap({dict(self.items())!r})"
