"""Tests for config loading and validation."""

from pathlib import Path

import pytest
import yaml

from pathglob.config import (
    CONFIG_DIR,
    CONFIG_FILE,
    Config,
    ConfigValidationError,
    validate_config_data,
)


class TestValidateConfigData:
    """Tests for validate_config_data function."""

    def test_valid_config(self):
        data = {"patterns": {"docs": "/docs/**"}, "strict": True}
        assert validate_config_data(data) == []

    def test_empty_config_is_valid(self):
        assert validate_config_data({}) == []

    def test_unknown_key(self):
        errors = validate_config_data({"pattern": {"docs": "/docs/**"}})
        assert errors == ["Unknown config key: 'pattern'"]

    def test_null_value(self):
        errors = validate_config_data({"patterns": None})
        assert errors == ["'patterns' cannot be null"]

    def test_wrong_type(self):
        errors = validate_config_data({"patterns": ["/docs/**"], "strict": "yes"})
        assert "'patterns' must be dict, got list" in errors
        assert "'strict' must be bool, got str" in errors

    def test_empty_patterns(self):
        errors = validate_config_data({"patterns": {}})
        assert errors == ["'patterns' must not be empty"]

    def test_non_string_pattern(self):
        errors = validate_config_data({"patterns": {"docs": 42}})
        assert errors == ["'patterns.docs' must be str, got int"]

    def test_non_string_name(self):
        errors = validate_config_data({"patterns": {1: "/docs/**"}})
        assert errors == ["'patterns' keys must be str, got int"]


class TestConfigLoad:
    """Tests for Config.load() and Config.from_yaml()."""

    def test_load_from_project(self, project_root: Path):
        config = Config.load(project_root)

        assert config.patterns == {
            "docs": "/docs/**",
            "sources": "/src/**|/lib/*.py",
            "readme": "/README.md",
        }
        assert config.strict is False

    def test_load_keeps_pattern_order(self, project_root: Path):
        config = Config.load(project_root)
        assert list(config.patterns) == ["docs", "sources", "readme"]

    def test_load_missing_config_returns_defaults(self, tmp_path: Path):
        config = Config.load(tmp_path)

        assert config.patterns == {}
        assert config.strict is False

    def test_empty_file(self, tmp_path: Path):
        config_path = tmp_path / CONFIG_FILE
        config_path.write_text("")

        config = Config.from_yaml(config_path)
        assert config == Config()

    def test_invalid_values_raise(self, tmp_path: Path):
        config_path = tmp_path / CONFIG_FILE
        config_path.write_text("patterns: []\nextra: 1\n")

        with pytest.raises(ConfigValidationError) as exc_info:
            Config.from_yaml(config_path)

        assert len(exc_info.value.errors) == 2
        assert "Invalid config.yml" in str(exc_info.value)
        assert "Unknown config key: 'extra'" in str(exc_info.value)

    def test_non_mapping_raises(self, tmp_path: Path):
        config_path = tmp_path / CONFIG_FILE
        config_path.write_text("- /docs/**\n")

        with pytest.raises(ConfigValidationError, match="Expected a mapping, got list"):
            Config.from_yaml(config_path)

    def test_malformed_yaml_raises(self, tmp_path: Path):
        config_path = tmp_path / CONFIG_FILE
        config_path.write_text("patterns: {docs: [\n")

        with pytest.raises(yaml.YAMLError):
            Config.from_yaml(config_path)


class TestGenerateTemplate:
    """Tests for Config.generate_template()."""

    def test_template_loads_as_valid_config(self, tmp_path: Path):
        config_path = tmp_path / CONFIG_DIR / CONFIG_FILE
        config_path.parent.mkdir()
        config_path.write_text(Config.generate_template())

        config = Config.load(tmp_path)

        assert config.patterns == {"docs": "/docs/**", "sources": "/src/**|/lib/**"}
        assert config.strict is False
