"""
Release records for the Ruby release index.

This module covers the three steps between the raw index text and the report:

- parse_data: turn the tab-separated index into ReleaseRecord objects,
  skipping rows that cannot be parsed
- is_valid / select_valid: keep regular releases with an https .tar.gz artifact
- latest_versions: keep the highest patch release of each minor version line
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence
from urllib.parse import urlsplit

from semver import Version

from ruby_version_checker.constants import (
    ARTIFACT_SUFFIX,
    FIELD_DELIMITER,
    REQUIRED_COLUMNS,
    SECURE_URL_SCHEME,
    SHA256_COLUMN,
    URL_COLUMN,
    VERSION_COMPONENT_LIMIT,
    VERSION_NAME_COLUMN,
)
from ruby_version_checker.exceptions import ParseError
from ruby_version_checker.log_utils import logger
from ruby_version_checker.version import is_regular_release, parse_version_name


@dataclass(frozen=True)
class ReleaseRecord:
    """One row of the release index."""

    version: Version
    """Semantic version parsed from the name column (prefix removed)"""

    url: str
    """Artifact download location"""

    sha256: str
    """Artifact checksum, passed through unchanged"""

    def to_dict(self) -> Dict[str, str]:
        """Return the JSON-ready representation used in the report."""
        return {
            "version": str(self.version),
            "url": self.url,
            "sha256": self.sha256,
        }


def _column_indexes(header: Sequence[str]) -> Dict[str, int]:
    """
    Map every required column name to its position in the header.

    Raises:
        ParseError: If any required column is absent.
    """
    positions = {name.strip(): index for index, name in enumerate(header)}
    missing = [column for column in REQUIRED_COLUMNS if column not in positions]
    if missing:
        raise ParseError(
            "Release index header is missing required columns",
            details=", ".join(missing),
        )
    return {column: positions[column] for column in REQUIRED_COLUMNS}


def _parse_row(
    row: Sequence[str], columns: Dict[str, int], width: int
) -> Optional[ReleaseRecord]:
    if len(row) != width:
        return None

    version = parse_version_name(row[columns[VERSION_NAME_COLUMN]].strip())
    if version is None:
        return None

    return ReleaseRecord(
        version=version,
        url=row[columns[URL_COLUMN]].strip(),
        sha256=row[columns[SHA256_COLUMN]].strip(),
    )


def parse_data(text: str) -> List[ReleaseRecord]:
    """
    Parse the tab-separated release index into release records.

    The first line must be a header naming at least the version-name, url and
    sha256 columns; other columns are ignored. Rows with the wrong number of
    fields or an unparsable version name are skipped rather than failing the
    whole parse.

    Args:
        text: Raw index contents.

    Returns:
        List[ReleaseRecord]: Records in the order they appear in the index.

    Raises:
        ParseError: If the input is empty or the header lacks a required column.
    """
    if not text or not text.strip():
        raise ParseError("Release index is empty")

    lines = text.splitlines()
    header = lines[0].split(FIELD_DELIMITER)
    columns = _column_indexes(header)
    width = len(header)

    records: List[ReleaseRecord] = []
    skipped = 0
    for line in lines[1:]:
        row = line.split(FIELD_DELIMITER)
        record = _parse_row(row, columns, width)
        if record is None:
            skipped += 1
            logger.debug("Skipping malformed release index row: %r", row)
            continue
        records.append(record)

    logger.debug(
        "Parsed %d release records from index (%d rows skipped)",
        len(records),
        skipped,
    )
    return records


def has_valid_artifact_url(url: str) -> bool:
    """Return True when the URL uses https and points at a .tar.gz archive."""
    try:
        scheme = urlsplit(url).scheme
    except ValueError:
        return False
    return scheme == SECURE_URL_SCHEME and url.endswith(ARTIFACT_SUFFIX)


def is_valid(record: ReleaseRecord) -> bool:
    """
    Return True when the record is a regular release with a usable artifact.

    Both the version (supported major line, bounded minor and patch, no
    prerelease) and the artifact URL (https, .tar.gz) must pass.
    """
    return is_regular_release(record.version) and has_valid_artifact_url(record.url)


def select_valid(records: Iterable[ReleaseRecord]) -> List[ReleaseRecord]:
    """Return the records that pass is_valid, keeping their input order."""
    return [record for record in records if is_valid(record)]


def latest_versions(records: Sequence[ReleaseRecord]) -> List[ReleaseRecord]:
    """
    Select the highest version of each minor version line.

    Walks the minor numbers 0 .. VERSION_COMPONENT_LIMIT - 1 in ascending order
    and, for every minor that has records, keeps the one with the greatest
    version. When two records compare equal the later one in ``records`` wins.

    Args:
        records: Records that already passed is_valid.

    Returns:
        List[ReleaseRecord]: At most one record per minor, ascending by minor.
    """
    latest: List[ReleaseRecord] = []
    for minor in range(VERSION_COMPONENT_LIMIT):
        best: Optional[ReleaseRecord] = None
        for record in records:
            if record.version.minor != minor:
                continue
            if best is None or record.version >= best.version:
                best = record
        if best is not None:
            latest.append(best)
    return latest


def latest_releases(text: str) -> List[ReleaseRecord]:
    """
    Run the full selection pipeline over raw index text.

    Raises:
        ParseError: If the index header cannot be established.
    """
    records = parse_data(text)
    valid = select_valid(records)
    logger.debug("%d of %d release records are valid", len(valid), len(records))

    latest = latest_versions(valid)
    logger.info(
        "Found %d minor version lines: %s",
        len(latest),
        ", ".join(str(record.version) for record in latest) or "none",
    )
    return latest
