"""Unit tests for the REST error config loader."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from resterr.config import ConfigLoader, RestErrConfig, load_config, resolve_env_vars
from resterr.errors import RestErr


class TestResolveEnvVars:
    """Tests for environment variable resolution."""

    def test_set_variable(self) -> None:
        with patch.dict(os.environ, {"RESTERR_MSG": "Oops"}):
            assert resolve_env_vars("${RESTERR_MSG}") == "Oops"

    def test_default_used_when_unset(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert resolve_env_vars("${RESTERR_MSG:-fallback}") == "fallback"

    def test_required_missing(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(RestErr) as exc_info:
                resolve_env_vars("${RESTERR_MSG}")
        assert exc_info.value.code == 500
        assert "RESTERR_MSG" in exc_info.value.message

    def test_required_custom_message(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(RestErr, match="set the message"):
                resolve_env_vars("${RESTERR_MSG:?set the message}")

    def test_plain_string(self) -> None:
        assert resolve_env_vars("no references") == "no references"


class TestConfigLoader:
    """Tests for ConfigLoader."""

    def test_defaults_without_path(self) -> None:
        config = ConfigLoader().load()
        assert config == RestErrConfig()
        assert config.generic_message == "An unexpected error occurred"
        assert config.omit_empty_causes is True
        assert config.log_conversions is True

    def test_load_section(self, tmp_path: Path) -> None:
        path = tmp_path / "resterr.yaml"
        path.write_text(
            "rest_err:\n"
            "  generic_message: Something broke\n"
            "  omit_empty_causes: false\n"
        )
        loader = ConfigLoader()
        config = loader.load(path)
        assert config.generic_message == "Something broke"
        assert config.omit_empty_causes is False
        assert config.log_conversions is True
        assert loader.config is config
        assert loader.config_path == path

    def test_load_top_level(self, tmp_path: Path) -> None:
        path = tmp_path / "resterr.yaml"
        path.write_text("log_conversions: no\n")
        assert load_config(path).log_conversions is False

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "resterr.yaml"
        path.write_text("")
        assert load_config(path) == RestErrConfig()

    def test_env_vars_resolved(self, tmp_path: Path) -> None:
        path = tmp_path / "resterr.yaml"
        path.write_text(
            "rest_err:\n"
            "  generic_message: ${RESTERR_MSG:-Default}\n"
            "  log_conversions: ${RESTERR_LOG}\n"
        )
        with patch.dict(os.environ, {"RESTERR_LOG": "false"}, clear=True):
            config = load_config(path)
        assert config.generic_message == "Default"
        assert config.log_conversions is False

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(RestErr) as exc_info:
            load_config(tmp_path / "missing.yaml")
        assert exc_info.value.is_server_error()
        assert isinstance(exc_info.value.unwrap(), FileNotFoundError)

    def test_directory_path(self, tmp_path: Path) -> None:
        with pytest.raises(RestErr, match="cannot read config file") as exc_info:
            load_config(tmp_path)
        assert exc_info.value.code == 500
        assert isinstance(exc_info.value.unwrap(), OSError)

    def test_not_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "resterr.yaml"
        path.write_bytes(b"generic_message: \xff\xfe\n")
        with pytest.raises(RestErr, match="not valid UTF-8") as exc_info:
            load_config(path)
        assert exc_info.value.code == 500
        assert isinstance(exc_info.value.unwrap(), UnicodeDecodeError)

    def test_empty_section(self, tmp_path: Path) -> None:
        path = tmp_path / "resterr.yaml"
        path.write_text("rest_err:\n")
        assert load_config(path) == RestErrConfig()

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "resterr.yaml"
        path.write_text("rest_err: [unclosed\n")
        with pytest.raises(RestErr, match="invalid YAML"):
            load_config(path)

    def test_unknown_keys(self) -> None:
        with pytest.raises(RestErr, match="unknown keys colour"):
            ConfigLoader().from_dict({"rest_err": {"colour": "red"}})

    def test_wrong_type(self) -> None:
        with pytest.raises(RestErr, match="omit_empty_causes must be a boolean"):
            ConfigLoader().from_dict({"omit_empty_causes": "sometimes"})

    def test_section_not_mapping(self) -> None:
        with pytest.raises(RestErr, match="must be a mapping"):
            ConfigLoader().from_dict({"rest_err": ["a"]})

    def test_loader_config_defaults_before_load(self) -> None:
        assert ConfigLoader().config == RestErrConfig()
