"""
Version handling for Ruby release names.

Release names in the index look like ``ruby-3.1.1`` or ``ruby-3.2.0-rc2``.
This module turns them into ``semver.Version`` objects and decides whether a
version is a regular release of the supported major line.
"""

from typing import Optional

from semver import Version

from ruby_version_checker.constants import (
    SUPPORTED_MAJOR_VERSION,
    VERSION_COMPONENT_LIMIT,
    VERSION_NAME_PREFIX,
)


def parse_version_name(
    name: Optional[str], prefix: str = VERSION_NAME_PREFIX
) -> Optional[Version]:
    """
    Parse a prefixed release name into a semantic version.

    Args:
        name: Raw value of the version-name column (e.g. "ruby-3.1.1").
        prefix: Literal prefix that must precede the version.

    Returns:
        The parsed Version, or None when the name lacks the prefix or the
        remainder is not a valid ``major.minor.patch[-pre][+build]`` string.
    """
    if not name or not name.startswith(prefix):
        return None

    try:
        return Version.parse(name[len(prefix) :])
    except ValueError:
        return None


def is_regular_release(version: Version) -> bool:
    """
    Return True for a stable release on the supported major line.

    The major number must equal SUPPORTED_MAJOR_VERSION, minor and patch must
    lie below VERSION_COMPONENT_LIMIT, and there must be no prerelease part.
    """
    return (
        version.major == SUPPORTED_MAJOR_VERSION
        and 0 <= version.minor < VERSION_COMPONENT_LIMIT
        and 0 <= version.patch < VERSION_COMPONENT_LIMIT
        and not version.prerelease
    )
