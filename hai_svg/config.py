"""Configuration for hai-svg.

Settings live in a small YAML file::

    namespace: http://www.w3.org/2000/svg
    legacy_whitespace: false
    letter: L
    log_level: WARNING

Every key is optional. ``Config.load()`` without a path picks up
``hai-svg.yaml`` from the working directory when it exists.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from hai_svg.document import SVG_NAMESPACE
from hai_svg.exceptions import ConfigError
from hai_svg.path import COMMAND_LETTERS

DEFAULT_CONFIG_NAME = "hai-svg.yaml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Output and logging settings.

    Attributes:
        namespace: Value written to the root ``xmlns`` attribute.
        legacy_whitespace: Reproduce the padded whitespace of older output
            (``<tag  />`` and a trailing space after ``Z``).
        letter: Command letter given to bare coordinate pairs in paths.
        log_level: Logging level name used by the CLI.
    """

    namespace: str = SVG_NAMESPACE
    legacy_whitespace: bool = False
    letter: str = "L"
    log_level: str = "WARNING"

    @classmethod
    def load(cls, path: Path | str | None = None) -> Config:
        """Load configuration from YAML.

        Args:
            path: Config file to read. When omitted, ``hai-svg.yaml`` in the
                current directory is used if present, else defaults.

        Raises:
            FileNotFoundError: If an explicit ``path`` does not exist.
            ConfigError: If the file is not valid configuration.
        """
        if path is None:
            default = Path.cwd() / DEFAULT_CONFIG_NAME
            if not default.is_file():
                return cls()
            path = default

        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax in {path}: {e}") from e

        if data is None:
            return cls()
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Any) -> Config:
        """Build a Config from a parsed mapping, validating each value."""
        if not isinstance(data, dict):
            raise ConfigError("Config root must be a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(map(str, set(data) - known))
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

        config = cls(**data)
        config.validate()
        return config

    def validate(self) -> None:
        """Check value types and ranges.

        Raises:
            ConfigError: On the first invalid setting.
        """
        if not isinstance(self.namespace, str) or not self.namespace:
            raise ConfigError("namespace: must be a non-empty string")
        if not isinstance(self.legacy_whitespace, bool):
            raise ConfigError("legacy_whitespace: must be true or false")
        if self.letter not in COMMAND_LETTERS:
            raise ConfigError(f"letter: must be one of {' '.join(COMMAND_LETTERS)}")
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(f"log_level: must be one of {', '.join(LOG_LEVELS)}")
        self.log_level = self.log_level.upper()
