"""
ruby-version-checker

Fetches the Ruby release index and reports the latest patch release of each
Ruby 3.x minor version line.
"""

from .release import (
    ReleaseRecord,
    is_valid,
    latest_releases,
    latest_versions,
    parse_data,
    select_valid,
)

__all__ = [
    "ReleaseRecord",
    "parse_data",
    "is_valid",
    "select_valid",
    "latest_versions",
    "latest_releases",
]
