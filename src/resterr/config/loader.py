"""REST error configuration loader."""

import logging
import os
import re
from dataclasses import fields
from pathlib import Path
from typing import Any

import yaml

from resterr.errors.constructors import new_internal_server_error

from .models import RestErrConfig

logger = logging.getLogger(__name__)

SECTION = "rest_err"

_TRUE = {"true", "yes", "on", "1"}
_FALSE = {"false", "no", "off", "0"}


def resolve_env_vars(value: str) -> str:
    """Resolve environment variable references in string.

    Supports:
    - ${VAR} - Required, error if not set
    - ${VAR:-default} - With default value
    - ${VAR:?error message} - Required with custom error

    Args:
        value: String with potential env var references

    Returns:
        String with env vars resolved

    Raises:
        RestErr: If required var not set
    """
    pattern = r"\$\{([^}:]+)(?::([?-])([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        operator = match.group(2)  # '-' or '?' or None
        operand = match.group(3)

        env_value = os.environ.get(var_name)
        if env_value is not None:
            return env_value

        if operator == "-":
            return operand or ""
        detail = operand if operator == "?" and operand else f"Required environment variable {var_name} not set"
        raise new_internal_server_error("invalid configuration: %s", detail)

    return re.sub(pattern, replacer, value)


def _coerce(name: str, value: Any, default: Any) -> Any:
    """Coerce a YAML or env-resolved value to the type of the field default."""
    if isinstance(default, bool):
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in _TRUE | _FALSE:
            return value.strip().lower() in _TRUE
        raise new_internal_server_error("invalid configuration: %s must be a boolean", name)
    if not isinstance(value, str):
        raise new_internal_server_error("invalid configuration: %s must be a string", name)
    return value


class ConfigLoader:
    """Load and validate REST error configuration."""

    def __init__(self) -> None:
        self._config: RestErrConfig | None = None
        self._config_path: Path | None = None

    @property
    def config(self) -> RestErrConfig:
        """Last loaded configuration, or defaults."""
        return self._config or RestErrConfig()

    @property
    def config_path(self) -> Path | None:
        return self._config_path

    def load(self, path: str | Path | None = None) -> RestErrConfig:
        """Load configuration from a YAML file.

        The file may hold the options at the top level or under a
        ``rest_err`` section. String values may reference environment
        variables.

        Args:
            path: Config file path. None returns defaults.

        Returns:
            Loaded configuration

        Raises:
            RestErr: If the file is missing or invalid
        """
        if path is None:
            self._config = RestErrConfig()
            self._config_path = None
            return self._config

        config_path = Path(path)
        try:
            raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise new_internal_server_error("config file not found: %s", config_path).with_cause(e) from e
        except OSError as e:
            raise new_internal_server_error("cannot read config file %s", config_path).with_cause(e) from e
        except UnicodeDecodeError as e:
            raise new_internal_server_error("config file %s is not valid UTF-8", config_path).with_cause(e) from e
        except yaml.YAMLError as e:
            raise new_internal_server_error("invalid YAML in %s", config_path).with_cause(e) from e

        self._config = self.from_dict(raw or {})
        self._config_path = config_path
        logger.debug("Loaded REST error config from %s", config_path)
        return self._config

    def from_dict(self, data: dict[str, Any]) -> RestErrConfig:
        """Build configuration from a parsed mapping.

        Raises:
            RestErr: If the mapping has unknown keys or wrong value types
        """
        if not isinstance(data, dict):
            raise new_internal_server_error("invalid configuration: expected a mapping")
        section = data.get(SECTION, data)
        if section is None:
            section = {}
        if not isinstance(section, dict):
            raise new_internal_server_error("invalid configuration: %s must be a mapping", SECTION)

        defaults = RestErrConfig()
        known = {f.name for f in fields(RestErrConfig)}
        unknown = sorted(str(key) for key in section if key not in known)
        if unknown:
            raise new_internal_server_error("invalid configuration: unknown keys %s", ", ".join(unknown))

        values: dict[str, Any] = {}
        for name, value in section.items():
            if isinstance(value, str):
                value = resolve_env_vars(value)
            values[name] = _coerce(name, value, getattr(defaults, name))
        return RestErrConfig(**values)


def load_config(path: str | Path | None = None) -> RestErrConfig:
    """Load configuration with a fresh ConfigLoader."""
    return ConfigLoader().load(path)
