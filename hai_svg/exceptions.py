"""Exception hierarchy for hai-svg.

All library errors derive from HaiSVGError so callers can catch them
with a single except clause.
"""

from __future__ import annotations


class HaiSVGError(Exception):
    """Base exception for all hai-svg errors."""


class KeyNotFoundError(HaiSVGError, KeyError):
    """Raised when an attribute lookup asks for a key that was never set.

    Subclasses KeyError so mapping-style callers can handle it the usual way.
    """

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Key '{self.key}' not found in map"


class ConfigError(HaiSVGError):
    """Raised when a configuration file is malformed."""


class SceneError(HaiSVGError):
    """Raised when a scene description cannot be turned into a document."""
