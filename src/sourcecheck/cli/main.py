# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""SourceCheck CLI: GET-only health check for the video sources in config.json."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from ..check.report import ProgressPrinter, dump_report, format_summary, write_report
from ..config import CheckSettings, load_endpoints, load_settings
from ..errors import ConfigError
from ..log import setup_logging
from ..runtime import SourceChecker

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="GET-only health check for the api_site sources in config.json")
    parser.add_argument("--config", dest="config_path", help="Site config path (default: ./config.json)")
    parser.add_argument("--output", dest="report_path", help="Report path (default: ./source-check-report.json)")
    parser.add_argument("--concurrency", type=int, help="Number of concurrent probes (default: 8)")
    parser.add_argument("--timeout", type=float, help="Per-probe timeout in seconds (default: 10)")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Also print the report JSON to stdout",
    )
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for self-signed sources)",
    )
    parser.add_argument("--log-level", help="Logging level (default: WARNING)")
    return parser


def settings_from_args(args: argparse.Namespace) -> CheckSettings:
    settings = load_settings(
        config_path=args.config_path,
        report_path=args.report_path,
        concurrency=args.concurrency,
        timeout=args.timeout,
    )
    if args.ignore_ssl_errors:
        settings.verify_ssl = False
    return settings


async def run_check(settings: CheckSettings, *, as_json: bool = False) -> int:
    config_path = settings.resolve(settings.config_path)
    try:
        endpoints = load_endpoints(config_path)
    except ConfigError as exc:
        print(exc, file=sys.stderr)
        return 1

    if not endpoints:
        print("No api_site entries found.")
        return 0

    print(f"Testing {len(endpoints)} sources (GET only, timeout {settings.timeout_ms}ms)...\n")

    async with SourceChecker(settings, on_result=ProgressPrinter()) as checker:
        report = await checker.run(endpoints)

    print()
    print(format_summary(report))

    out_path = write_report(report, settings.resolve(settings.report_path))
    print(f"\nReport saved to {out_path}")
    if as_json:
        print(dump_report(report))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        return asyncio.run(run_check(settings_from_args(args), as_json=args.json))
    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected error: %s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
