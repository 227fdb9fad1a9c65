"""Command-line entry point: format subscription periods and emit test log lines."""

import argparse
import os
import sys
from typing import Optional

from purchases_log.config import Config, ConfigurationError
from purchases_log.models.levels import LogLevel
from purchases_log.services.log_dispatcher import LogDispatcher
from purchases_log.utils.period_format import (
    abbreviated_unit_string,
    localized_duration,
    parse_subscription_period,
)

LEVEL_CHOICES = [str(level) for level in LogLevel]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="purchases-log",
        description="In-app purchase SDK logging and period formatting tools",
    )
    parser.add_argument(
        "--log-format",
        choices=["json", "console"],
        default=os.getenv("LOG_FORMAT"),
        help="Console sink output format (default: from config, console)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to logging.yaml (default: $PURCHASES_LOG_CONFIG or config/logging.yaml)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    duration = subparsers.add_parser("duration", help="Print a localized subscription period")
    duration.add_argument("period", help="ISO 8601 period (e.g., P1M, P1Y, P7D)")
    duration.add_argument("--locale", default="en", help="Locale identifier (default: en)")
    duration.add_argument(
        "--abbreviated",
        action="store_true",
        help="Print only the abbreviated unit label",
    )

    emit = subparsers.add_parser("emit", help="Dispatch one message to the console sink")
    emit.add_argument("message", help="Message text")
    emit.add_argument("--level", choices=LEVEL_CHOICES, default="info", help="Message level (default: info)")
    emit.add_argument(
        "--min-level",
        choices=LEVEL_CHOICES,
        default=None,
        help="Minimum level to emit (default: from config, info)",
    )

    return parser


def run_duration(args: argparse.Namespace) -> int:
    period = parse_subscription_period(args.period)
    if args.abbreviated:
        print(abbreviated_unit_string(period.unit, args.locale))
    else:
        print(localized_duration(period, args.locale))
    return 0


def run_emit(args: argparse.Namespace) -> int:
    if args.log_format:
        os.environ["LOG_FORMAT"] = args.log_format
    if args.min_level:
        os.environ["LOG_LEVEL"] = args.min_level

    dispatcher = Config(args.config).apply(LogDispatcher())
    dispatcher.log(LogLevel.parse(args.level), args.message)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the purchases-log CLI."""
    args = build_parser().parse_args(argv)

    try:
        if args.command == "duration":
            return run_duration(args)
        return run_emit(args)
    except (ValueError, ConfigurationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
