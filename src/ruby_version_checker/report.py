"""
JSON report rendering for the latest release list.
"""

import json
from typing import Sequence

from ruby_version_checker.constants import REPORT_JSON_INDENT
from ruby_version_checker.release import ReleaseRecord


def render_report(records: Sequence[ReleaseRecord]) -> str:
    """
    Serialize the latest release list as pretty-printed JSON.

    Args:
        records: Records in the order they should appear in the report.

    Returns:
        str: A JSON array of ``{"version", "url", "sha256"}`` objects.
    """
    return json.dumps(
        [record.to_dict() for record in records], indent=REPORT_JSON_INDENT
    )
