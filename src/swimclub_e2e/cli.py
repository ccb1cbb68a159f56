#!/usr/bin/env python3
"""
Command-line interface for swimclub-e2e.

Usage:
    swimclub-e2e [OPTIONS] {config,check}

Commands:
    config          Print the resolved suite settings (passwords masked)
    check           Probe the application under test and exit 0 if reachable

Options:
    --debug         Enable debug logging
    --config FILE   Load settings from a TOML file
    --version       Show version and exit
    --help          Show this message and exit
"""

import argparse
import json
import logging
import sys
from typing import Any, Optional, Sequence

from pydantic import ValidationError

from swimclub_e2e import __version__
from swimclub_e2e.config import LoggingSettings, Settings, get_settings
from swimclub_e2e.exceptions import ConfigurationError
from swimclub_e2e.preflight import DEFAULT_PROBE_TIMEOUT, probe_application

MASK = "********"
SECRET_FIELDS = ("user_password", "admin_password")


def setup_logging(settings: Optional[LoggingSettings] = None,
                  debug: bool = False) -> None:
    """
    Configure logging for the command-line tool.

    Args:
        settings: Logging settings; defaults are used when omitted.
        debug: Force debug logging regardless of the configured level.
    """
    settings = settings or LoggingSettings()
    log_level = logging.DEBUG if debug else getattr(logging, settings.level)

    logging.basicConfig(
        level=log_level,
        format=settings.format,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )

    if not debug:
        logging.getLogger("urllib3").setLevel(logging.WARNING)


def masked_settings(settings: Settings) -> dict[str, Any]:
    """Settings as JSON-ready data with credentials hidden."""
    data = settings.model_dump(mode="json")
    for key in SECRET_FIELDS:
        if data.get(key):
            data[key] = MASK
    return data


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog="swimclub-e2e",
        description="swimclub-e2e - HNT Swim Club UI test suite tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    Show the settings the suite will run with:
        swimclub-e2e config

    Check that the storefront is up before running pytest:
        E2E_BASE_URL=http://localhost:5500 swimclub-e2e check

Environment Variables:
    E2E_BASE_URL            Storefront base URL
    E2E_HEADLESS            Run the browser without a window (true/false)
    E2E_CONFIG_FILE         TOML configuration file
        """,
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Load settings from a TOML file",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"swimclub-e2e {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("config", help="Print resolved settings")
    check = subparsers.add_parser("check", help="Probe the application")
    check.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_PROBE_TIMEOUT,
        help="Probe timeout in seconds (default: %(default)s)",
    )

    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for the swimclub-e2e command.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    args = parse_args(argv)

    try:
        settings = Settings.from_toml(args.config) if args.config else get_settings()
    except (ConfigurationError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    setup_logging(settings.logging, args.debug)
    logger = logging.getLogger(__name__)

    if args.command == "config":
        print(json.dumps(masked_settings(settings), indent=2, ensure_ascii=False))
        return 0

    logger.debug("Probing %s", settings.base_url)
    result = probe_application(settings, timeout=args.timeout)
    if result.reachable:
        print(f"OK {result.url} ({result.status_code})")
        return 0
    reason = result.error or f"HTTP {result.status_code}"
    print(f"UNREACHABLE {result.url}: {reason}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
