"""
Configuration loading for ruby-version-checker.

Settings live in an optional YAML file. When no file exists every setting
takes its default, so the tool works without any setup.
"""

import math
import os
from typing import Any, Dict, Optional
from urllib.parse import urlsplit

import platformdirs
import yaml

from ruby_version_checker.constants import (
    APP_NAME,
    CONFIG_FILE_NAME,
    CONFIG_KEY_LOG_DIR,
    CONFIG_KEY_LOG_LEVEL,
    CONFIG_KEY_RELEASE_INDEX_URL,
    CONFIG_KEY_REQUEST_TIMEOUT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_REQUEST_TIMEOUT,
    RELEASE_INDEX_URL,
    SECURE_URL_SCHEME,
)
from ruby_version_checker.exceptions import ConfigFileError, ConfigValidationError
from ruby_version_checker.log_utils import logger

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_CONFIG: Dict[str, Any] = {
    CONFIG_KEY_RELEASE_INDEX_URL: RELEASE_INDEX_URL,
    CONFIG_KEY_REQUEST_TIMEOUT: DEFAULT_REQUEST_TIMEOUT,
    CONFIG_KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
    CONFIG_KEY_LOG_DIR: None,
}


def get_config_file_path() -> str:
    """Return the platform-specific location of the configuration file."""
    return os.path.join(platformdirs.user_config_dir(APP_NAME), CONFIG_FILE_NAME)


def _read_config_file(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigFileError(
            f"Unable to read configuration file {path}", details=str(e)
        ) from e
    except yaml.YAMLError as e:
        raise ConfigFileError(
            f"Invalid YAML in configuration file {path}", details=str(e)
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigValidationError(
            f"Configuration file {path} must contain a mapping",
            details=f"got {type(data).__name__}",
        )
    return data


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check and normalize configuration values.

    Returns:
        Dict[str, Any]: The same mapping with LOG_LEVEL upper-cased and
        REQUEST_TIMEOUT converted to a float.

    Raises:
        ConfigValidationError: If a value is unusable.
    """
    url = config.get(CONFIG_KEY_RELEASE_INDEX_URL)
    try:
        scheme = urlsplit(url).scheme if isinstance(url, str) else None
    except ValueError:
        scheme = None
    if scheme != SECURE_URL_SCHEME:
        raise ConfigValidationError(
            f"{CONFIG_KEY_RELEASE_INDEX_URL} must be an {SECURE_URL_SCHEME} URL",
            details=repr(url),
        )

    raw_timeout = config.get(CONFIG_KEY_REQUEST_TIMEOUT)
    timeout: Optional[float] = None
    if not isinstance(raw_timeout, bool):
        try:
            timeout = float(raw_timeout)
        except (TypeError, ValueError):
            timeout = None
    if timeout is None or not math.isfinite(timeout) or timeout <= 0:
        raise ConfigValidationError(
            f"{CONFIG_KEY_REQUEST_TIMEOUT} must be a positive number of seconds",
            details=repr(raw_timeout),
        )
    config[CONFIG_KEY_REQUEST_TIMEOUT] = timeout

    level = config.get(CONFIG_KEY_LOG_LEVEL)
    if not isinstance(level, str) or level.upper() not in VALID_LOG_LEVELS:
        raise ConfigValidationError(
            f"{CONFIG_KEY_LOG_LEVEL} must be one of {', '.join(VALID_LOG_LEVELS)}",
            details=repr(level),
        )
    config[CONFIG_KEY_LOG_LEVEL] = level.upper()

    log_dir = config.get(CONFIG_KEY_LOG_DIR)
    if log_dir is not None and not isinstance(log_dir, str):
        raise ConfigValidationError(
            f"{CONFIG_KEY_LOG_DIR} must be a directory path", details=repr(log_dir)
        )

    return config


def load_config(
    path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Load the configuration, apply overrides, and validate the result.

    If `path` is given the file must exist. Otherwise the platformdirs location
    is used when present and defaults apply when it is not. Keys in `overrides`
    whose value is None are ignored, so unset command-line flags do not mask
    file values.

    Parameters:
        path (str | None): Explicit configuration file path.
        overrides (dict | None): Values that take precedence over the file.

    Returns:
        Dict[str, Any]: The validated configuration.

    Raises:
        ConfigFileError: If the file cannot be read or parsed.
        ConfigValidationError: If a value is invalid.
    """
    config = dict(DEFAULT_CONFIG)

    if path is not None:
        if not os.path.exists(path):
            raise ConfigFileError(f"Configuration file not found: {path}")
        config_path: Optional[str] = path
    else:
        default_path = get_config_file_path()
        config_path = default_path if os.path.exists(default_path) else None

    if config_path is not None:
        file_config = _read_config_file(config_path)
        for key in file_config:
            if key not in DEFAULT_CONFIG:
                logger.warning(f"Ignoring unknown configuration key: {key}")
        config.update(
            {key: value for key, value in file_config.items() if key in DEFAULT_CONFIG}
        )
        logger.debug(f"Loaded configuration from {config_path}")
    else:
        logger.debug("No configuration file found; using defaults")

    if overrides:
        config.update(
            {key: value for key, value in overrides.items() if value is not None}
        )

    return validate_config(config)
