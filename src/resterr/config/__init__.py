"""REST error configuration."""

from .models import RestErrConfig
from .loader import ConfigLoader, load_config, resolve_env_vars

__all__ = ["RestErrConfig", "ConfigLoader", "load_config", "resolve_env_vars"]
