"""Config – search settings from the environment."""

from qsearch.config.settings import ENV_PREFIX, SearchSettings, env_name
from qsearch.kernel.errors import ConfigError, InvalidSettingValueError

__all__ = ["ENV_PREFIX", "ConfigError", "InvalidSettingValueError", "SearchSettings", "env_name"]
