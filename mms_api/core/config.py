"""
Configuration Management.

Settings come from, highest precedence first:
    1. Command-line options
    2. The key=value config file (~/.mms-api or --cfg)
    3. MMS_* environment variables
    4. Defaults below

Config file format (one option per line):
    username=john.doe@example.com
    apikey=a6d3e2b1-...
    apiurl=https://mms.mydomain.tld/api/public/v1.0
    default_group_id=5196d3628d022db4cbc11111
    limit=20

Unknown keys or invalid values are fatal: a ConfigError names the offending
key and file instead of the option being silently ignored.
"""

from pathlib import Path
from typing import Any

from dotenv import dotenv_values
from pydantic import Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from mms_api.core.exceptions import ConfigError
from mms_api.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_API_URL = "https://mms.mongodb.com/api/public/v1.0"
CONFIG_FILE_NAME = ".mms-api"


def default_config_path() -> Path:
    """Return the per-user config file location."""
    return Path.home() / CONFIG_FILE_NAME


class MMSConfig(BaseSettings):
    """Connection and presentation settings for one CLI invocation."""

    username: str | None = None
    apikey: str | None = None
    apiurl: str = DEFAULT_API_URL
    default_group_id: str | None = None
    default_cluster_id: str | None = None
    limit: int = Field(default=10, ge=1)
    timeout: float = Field(default=30.0, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="MMS_",
        case_sensitive=False,
        extra="forbid",
    )


def load_config_file(path: str | Path | None = None) -> tuple[Path, dict[str, str]]:
    """
    Read a key=value config file.

    An explicitly given path must exist; a missing default file yields no values.

    Returns:
        Tuple of (resolved path, option values).

    Raises:
        ConfigError: If an explicit file is missing or contains unknown keys.
    """
    explicit = path is not None
    config_path = Path(path).expanduser() if explicit else default_config_path()

    if not config_path.is_file():
        if explicit:
            raise ConfigError(f"Config file `{config_path}` does not exist")
        return config_path, {}

    values: dict[str, str] = {}
    for raw_key, value in dotenv_values(config_path).items():
        key = raw_key.strip().lower()
        if key not in MMSConfig.model_fields:
            raise ConfigError(f"Config option `{key}` from file `{config_path}` is not allowed!")
        # a line without "=" parses to None
        if value is None:
            raise ConfigError(f"Config option `{key}` from file `{config_path}` has no value!")
        values[key] = value

    logger.debug("Config file loaded", path=str(config_path), keys=sorted(values))
    return config_path, values


def build_config(config_path: str | Path | None = None, **overrides: Any) -> MMSConfig:
    """
    Merge config file values with command-line overrides.

    Args:
        config_path: Explicit config file path, or None for ~/.mms-api.
        **overrides: Option values from the command line; None means "not given".

    Raises:
        ConfigError: On a missing explicit file, an unknown key or an invalid value.
    """
    resolved_path, file_values = load_config_file(config_path)
    given = {key: value for key, value in overrides.items() if value is not None}

    try:
        return MMSConfig(**{**file_values, **given})
    except PydanticValidationError as e:
        error = e.errors()[0]
        key = ".".join(str(part) for part in error["loc"]) or "?"
        if key in given:
            origin = "from command line"
        elif key in file_values:
            origin = f"from file `{resolved_path}`"
        else:
            origin = "from environment"
        raise ConfigError(
            f"Config option `{key}` {origin} is not allowed! {error['msg']}"
        ) from e
