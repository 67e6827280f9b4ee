"""Tests for YAML configuration loading (hai_svg.config)."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from hai_svg.config import Config
from hai_svg.document import SVG_NAMESPACE
from hai_svg.exceptions import ConfigError


class TestLoadConfig:
    """Loading settings from disk."""

    def test_defaults_without_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """No path and no hai-svg.yaml in cwd gives defaults."""
        monkeypatch.chdir(tmp_path)

        config = Config.load()

        assert config == Config()
        assert config.namespace == SVG_NAMESPACE
        assert config.legacy_whitespace is False
        assert config.letter == "L"
        assert config.log_level == "WARNING"

    def test_picks_up_default_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """hai-svg.yaml in the working directory is read automatically."""
        (tmp_path / "hai-svg.yaml").write_text("legacy_whitespace: true\n")
        monkeypatch.chdir(tmp_path)

        assert Config.load().legacy_whitespace is True

    def test_load_full_config(self, tmp_path: Path) -> None:
        """Every setting is read from an explicit path."""
        config_file = tmp_path / "full.yaml"
        config_file.write_text(
            dedent("""
            namespace: urn:test
            legacy_whitespace: true
            letter: l
            log_level: debug
            """)
        )

        config = Config.load(config_file)

        assert config.namespace == "urn:test"
        assert config.legacy_whitespace is True
        assert config.letter == "l"
        assert config.log_level == "DEBUG"

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        """An empty YAML file is treated as no settings."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        assert Config.load(config_file) == Config()

    def test_file_not_found_raises(self, tmp_path: Path) -> None:
        """An explicit missing path raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            Config.load(tmp_path / "nonexistent.yaml")


class TestConfigValidation:
    """Invalid settings raise ConfigError."""

    def test_invalid_yaml_syntax_raises(self, tmp_path: Path) -> None:
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("namespace: [unclosed bracket")

        with pytest.raises(ConfigError, match="Invalid YAML syntax"):
            Config.load(config_file)

    def test_non_mapping_root_raises(self, tmp_path: Path) -> None:
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="must be a mapping"):
            Config.load(config_file)

    def test_unknown_key_raises(self) -> None:
        with pytest.raises(ConfigError, match="Unknown config keys: precision"):
            Config.from_dict({"precision": 3})

    def test_bad_letter_raises(self) -> None:
        with pytest.raises(ConfigError, match="letter:"):
            Config.from_dict({"letter": "X"})

    def test_bad_whitespace_flag_raises(self) -> None:
        with pytest.raises(ConfigError, match="legacy_whitespace:"):
            Config.from_dict({"legacy_whitespace": "yes please"})

    def test_bad_log_level_raises(self) -> None:
        with pytest.raises(ConfigError, match="log_level:"):
            Config.from_dict({"log_level": "LOUD"})

    def test_unknown_keys_of_mixed_types_raise(self, tmp_path: Path) -> None:
        """Integer and string keys together still give a ConfigError."""
        config_file = tmp_path / "mixed.yaml"
        config_file.write_text("1: a\nbogus: 2\n")

        with pytest.raises(ConfigError, match="Unknown config keys: 1, bogus"):
            Config.load(config_file)
