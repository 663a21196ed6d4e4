"""
Constants and configuration values for ruby-version-checker.

This module contains the release index URL, the bounds that decide which
releases count as regular, the feed layout, and logging settings.
"""

# Release index
RELEASE_INDEX_URL = "https://cache.ruby-lang.org/pub/ruby/index.txt"
SECURE_URL_SCHEME = "https"

# Network timeouts (in seconds)
DEFAULT_REQUEST_TIMEOUT = 30

# Feed layout
FIELD_DELIMITER = "\t"
VERSION_NAME_COLUMN = "name"
URL_COLUMN = "url"
SHA256_COLUMN = "sha256"
REQUIRED_COLUMNS = (VERSION_NAME_COLUMN, URL_COLUMN, SHA256_COLUMN)
VERSION_NAME_PREFIX = "ruby-"

# Regular release bounds
SUPPORTED_MAJOR_VERSION = 3
VERSION_COMPONENT_LIMIT = 99  # exclusive upper bound for minor and patch
ARTIFACT_SUFFIX = ".tar.gz"

# Report output
REPORT_JSON_INDENT = 2

# Logging
LOGGER_NAME = "ruby_version_checker"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
INFO_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s: %(message)s"
LOG_FILE_NAME = "ruby_version_checker.log"
LOG_FILE_MAX_BYTES = 1024 * 1024  # 1 MB
LOG_FILE_BACKUP_COUNT = 3
LOG_LEVEL_ENV_VAR = "RUBY_VERSION_CHECKER_LOG_LEVEL"

# Configuration
APP_NAME = "ruby-version-checker"
CONFIG_FILE_NAME = "ruby_version_checker.yaml"
CONFIG_KEY_RELEASE_INDEX_URL = "RELEASE_INDEX_URL"
CONFIG_KEY_REQUEST_TIMEOUT = "REQUEST_TIMEOUT"
CONFIG_KEY_LOG_LEVEL = "LOG_LEVEL"
CONFIG_KEY_LOG_DIR = "LOG_DIR"
DEFAULT_LOG_LEVEL = "INFO"
