# src/ruby_version_checker/cli.py

import argparse
import importlib.metadata
import sys
from pathlib import Path
from typing import List, Optional

from ruby_version_checker import log_utils
from ruby_version_checker.client import ReleaseIndexClient
from ruby_version_checker.config import VALID_LOG_LEVELS, load_config
from ruby_version_checker.constants import (
    APP_NAME,
    CONFIG_KEY_LOG_DIR,
    CONFIG_KEY_LOG_LEVEL,
    CONFIG_KEY_RELEASE_INDEX_URL,
    CONFIG_KEY_REQUEST_TIMEOUT,
)
from ruby_version_checker.exceptions import RubyVersionCheckerError
from ruby_version_checker.release import latest_releases
from ruby_version_checker.report import render_report

logger = log_utils.logger


def get_version() -> str:
    """Return the installed package version, or "unknown" when not installed."""
    try:
        return importlib.metadata.version(APP_NAME)
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Report the latest patch release of every Ruby 3.x minor version",
    )
    parser.add_argument(
        "--url",
        help="Release index URL (must be https)",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Path to a YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LOG_LEVELS,
        help="Logging verbosity",
    )
    parser.add_argument(
        "--log-dir",
        metavar="DIR",
        help="Also write logs to a rotating file in this directory",
    )
    parser.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Write the JSON report to FILE instead of standard output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {get_version()}",
    )
    return parser


def run(args: argparse.Namespace) -> str:
    """
    Load configuration, fetch the index and return the rendered report.

    Raises:
        RubyVersionCheckerError: On configuration, fetch or parse failures.
    """
    config = load_config(
        args.config,
        overrides={
            CONFIG_KEY_RELEASE_INDEX_URL: args.url,
            CONFIG_KEY_LOG_LEVEL: args.log_level,
            CONFIG_KEY_LOG_DIR: args.log_dir,
        },
    )

    log_utils.set_log_level(config[CONFIG_KEY_LOG_LEVEL])
    if config[CONFIG_KEY_LOG_DIR]:
        log_utils.add_file_logging(
            Path(config[CONFIG_KEY_LOG_DIR]), config[CONFIG_KEY_LOG_LEVEL]
        )

    url = config[CONFIG_KEY_RELEASE_INDEX_URL]
    logger.info(f"Checking Ruby releases from {url}")
    with ReleaseIndexClient(timeout=config[CONFIG_KEY_REQUEST_TIMEOUT]) as client:
        text = client.fetch(url)

    return render_report(latest_releases(text))


def main(argv: Optional[List[str]] = None) -> None:
    """
    Entry point for the ruby-version-checker command-line interface.

    Prints the JSON report and exits with status 0 on success. Configuration,
    fetch and parse errors are logged and end the process with status 1
    before anything is written.
    """
    args = build_parser().parse_args(argv)

    try:
        report = run(args)
    except RubyVersionCheckerError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(report + "\n")
        except OSError as e:
            logger.error(f"Error: unable to write report to {args.output}: {e}")
            sys.exit(1)
        logger.info(f"Report written to {args.output}")
    else:
        print(report)
    sys.exit(0)


if __name__ == "__main__":
    main()
