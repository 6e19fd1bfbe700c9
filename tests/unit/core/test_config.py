"""
Tests for Configuration Management.

Organization
------------
- TestExpandEnvVars: Environment variable expansion
- TestConfigDataclass: Config object creation and validation
- TestLoadConfig: YAML loading and environment overrides
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from reportforge.core.config import (
    CitationConfig,
    Config,
    expand_env_vars,
    load_config,
    save_config,
)
from reportforge.core.exceptions import ConfigValidationError


# ============================================================================
# Test Classes
# ============================================================================


class TestExpandEnvVars:
    """Tests for environment variable expansion."""

    def test_simple_expansion(self):
        """Test basic ${VAR} expansion."""
        with patch.dict(os.environ, {"TEST_VAR": "test_value"}):
            assert expand_env_vars("${TEST_VAR}") == "test_value"

    def test_default_value(self):
        """Test ${VAR:default} falls back when unset."""
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("${MISSING:WARNING}") == "WARNING"

    def test_nested_structures(self):
        """Test dicts and lists are expanded recursively."""
        with patch.dict(os.environ, {"LEVEL": "DEBUG"}):
            result = expand_env_vars({"logging": {"level": "${LEVEL}"}, "x": ["${LEVEL}"]})

        assert result == {"logging": {"level": "DEBUG"}, "x": ["DEBUG"]}

    def test_primitives_unchanged(self):
        assert expand_env_vars(6) == 6
        assert expand_env_vars(None) is None


class TestConfigDataclass:
    """Tests for Config creation and validation."""

    def test_defaults(self):
        config = Config()

        assert config.citation.max_authors == 6
        assert config.citation.et_al == " et. al."
        assert config.citation.missing_year == "n.d."
        assert config.shaping.enabled is True
        assert config.authors.strict_cycles is False
        assert config.logging.level == "INFO"

    def test_invalid_max_authors(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            Config(citation=CitationConfig(max_authors=0))

        assert exc_info.value.field == "citation.max_authors"

    def test_invalid_log_level(self):
        with pytest.raises(ConfigValidationError):
            Config.from_dict({"logging": {"level": "LOUD"}})

    def test_from_dict_ignores_unknown_keys(self):
        config = Config.from_dict(
            {"citation": {"max_authors": 3, "style": "apa"}, "unknown": {}}
        )

        assert config.citation.max_authors == 3

    def test_from_dict_env_string_int(self):
        """Test integers that arrive as strings through env expansion."""
        with patch.dict(os.environ, {"RF_MAX": "4"}):
            config = Config.from_dict({"citation": {"max_authors": "${RF_MAX}"}})

        assert config.citation.max_authors == 4

    def test_from_dict_bad_int(self):
        with pytest.raises(ConfigValidationError):
            Config.from_dict({"citation": {"max_authors": "many"}})

    def test_from_dict_env_string_bools(self):
        """Test booleans that arrive as strings through env expansion."""
        data = {
            "authors": {"strict_cycles": "${RF_STRICT:false}"},
            "shaping": {"enabled": "${RF_SHAPE:false}"},
        }
        with patch.dict(os.environ, {}, clear=True):
            config = Config.from_dict(data)

        assert config.authors.strict_cycles is False
        assert config.shaping.enabled is False

        with patch.dict(os.environ, {"RF_STRICT": "yes", "RF_SHAPE": "True"}):
            config = Config.from_dict(data)

        assert config.authors.strict_cycles is True
        assert config.shaping.enabled is True

    def test_from_dict_bad_bool(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            Config.from_dict({"shaping": {"enabled": [1]}})

        assert exc_info.value.field == "shaping.enabled"

    def test_numeric_log_level(self):
        """Test a non-string level is a validation error, not a crash."""
        with pytest.raises(ConfigValidationError) as exc_info:
            Config.from_dict({"logging": {"level": 10}})

        assert exc_info.value.field == "logging.level"

    def test_non_integer_max_authors(self):
        with pytest.raises(ConfigValidationError):
            Config.from_dict({"citation": {"max_authors": 2.5}})

    def test_round_trip_dict(self):
        config = Config.from_dict({"authors": {"separator": "; "}})

        assert Config.from_dict(config.to_dict()) == config


class TestLoadConfig:
    """Tests for load_config() and save_config()."""

    def test_no_file_gives_defaults(self, tmp_path: Path):
        with patch.dict(os.environ, {}, clear=True):
            config = load_config(base_path=tmp_path)

        assert config == Config()

    def test_finds_reportforge_yaml(self, tmp_path: Path):
        (tmp_path / "reportforge.yaml").write_text(
            yaml.dump({"citation": {"max_authors": 3}})
        )

        with patch.dict(os.environ, {}, clear=True):
            config = load_config(base_path=tmp_path)

        assert config.citation.max_authors == 3

    def test_missing_explicit_path(self, tmp_path: Path):
        with patch.dict(os.environ, {}, clear=True):
            config = load_config(tmp_path / "absent.yaml")

        assert config == Config()

    def test_invalid_yaml_falls_back(self, tmp_path: Path):
        path = tmp_path / "reportforge.yaml"
        path.write_text("citation: [unclosed")

        with patch.dict(os.environ, {}, clear=True):
            config = load_config(path)

        assert config == Config()

    def test_non_mapping_rejected(self, tmp_path: Path):
        path = tmp_path / "reportforge.yaml"
        path.write_text("- just\n- a list\n")

        with pytest.raises(ConfigValidationError):
            load_config(path)

    def test_env_overrides(self, tmp_path: Path):
        env = {
            "REPORTFORGE_LOG_LEVEL": "debug",
            "REPORTFORGE_MAX_AUTHORS": "10",
            "REPORTFORGE_STRICT_CYCLES": "true",
        }
        with patch.dict(os.environ, env, clear=True):
            config = load_config(base_path=tmp_path)

        assert config.logging.level == "DEBUG"
        assert config.citation.max_authors == 10
        assert config.authors.strict_cycles is True

    def test_bad_env_override(self, tmp_path: Path):
        with patch.dict(os.environ, {"REPORTFORGE_MAX_AUTHORS": "x"}, clear=True):
            with pytest.raises(ConfigValidationError):
                load_config(base_path=tmp_path)

    def test_save_and_load(self, tmp_path: Path):
        path = tmp_path / "reportforge.yaml"
        config = Config.from_dict({"citation": {"et_al": " et al."}})

        save_config(config, path)
        with patch.dict(os.environ, {}, clear=True):
            loaded = load_config(path)

        assert loaded == config
