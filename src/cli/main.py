"""Statfeed CLI entry points.
This module exposes report and CSV export commands for each feed.
It maps argparse commands onto dashboard session calls.
"""

from __future__ import annotations

import argparse
import asyncio
from typing import Any, Sequence

from cli.report_rendering import (
    render_analytics_series,
    render_immigration_view,
    render_mobility_report,
)
from core.config import StatfeedConfig
from core.constants import DEFAULT_PORT_ID, FLOW_DIRECTIONS, INBOUND_FLOW, PORT_DEFINITIONS
from core.errors import StatfeedError
from core.logging_config import configure_logging
from ingest.http_fetcher import HttpTextFetcher
from reports.dashboard_session import DashboardSession

DEFAULT_TOP_COUNTRIES = 10


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="statfeed", description="Statfeed report CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_ports_command(subparsers)
    _add_immigration_command(subparsers)
    _add_mobility_command(subparsers)
    _add_analytics_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Statfeed CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "ports":
        return _run_ports_command()
    try:
        config = StatfeedConfig.from_env()
        configure_logging(config.log_level)
        return asyncio.run(_run_session_command(config, args))
    except StatfeedError as error:
        print(f"error={error}")
        return 1


async def _run_session_command(config: StatfeedConfig, args: argparse.Namespace) -> int:
    """Open a fetcher and session, then dispatch the command."""
    async with HttpTextFetcher.from_config(config) as fetcher:
        session = DashboardSession(config, fetcher)
        if args.command == "immigration":
            return await _run_immigration_command(session, args)
        if args.command == "mobility":
            return await _run_mobility_command(session, args)
        if args.command == "analytics":
            return await _run_analytics_command(session, args)
    raise StatfeedError(f"Unsupported command: {args.command}")


def _run_ports_command() -> int:
    """Handle ports command."""
    for port in PORT_DEFINITIONS:
        print(f"{port.port_id}\t{port.label}")
    return 0


async def _run_immigration_command(
    session: DashboardSession,
    args: argparse.Namespace,
) -> int:
    """Handle immigration command.

    Args:
        session: Dashboard session.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    session.update_selection(port_id=args.port, flow=args.flow, category=args.category)
    view = await session.immigration_view()
    if view is None:
        return 1
    print(render_immigration_view(view))
    if args.output_dir:
        for path in await session.export_immigration(args.output_dir):
            print(f"csv_path={path}")
    return 0


async def _run_mobility_command(session: DashboardSession, args: argparse.Namespace) -> int:
    """Handle mobility command."""
    report = await session.mobility_report()
    print(render_mobility_report(report, args.top))
    return 0


async def _run_analytics_command(session: DashboardSession, args: argparse.Namespace) -> int:
    """Handle analytics command.

    Args:
        session: Dashboard session.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    report = await session.analytics_report()
    country_id = args.country or report.default_country
    if country_id is None:
        print("no analytics data")
        return 0
    print(render_analytics_series(country_id, report.series_for(country_id)))
    if args.output_dir:
        path = await session.export_analytics_country(country_id, args.output_dir)
        print(f"csv_path={path or '-'}")
    return 0


def _add_ports_command(subparsers: Any) -> None:
    """Register ports subcommand."""
    subparsers.add_parser("ports", help="List known immigration ports")


def _add_immigration_command(subparsers: Any) -> None:
    """Register immigration subcommand."""
    parser = subparsers.add_parser(
        "immigration",
        help="Show a port's latest breakdown and trend",
    )
    parser.add_argument("--port", default=DEFAULT_PORT_ID, help="Port identifier")
    parser.add_argument(
        "--flow",
        default=INBOUND_FLOW,
        choices=FLOW_DIRECTIONS,
        help="Flow direction for category options and trend",
    )
    parser.add_argument("--category", help="Trend category, defaults to the first option")
    parser.add_argument("--output-dir", help="Write breakdown and trend CSVs here")


def _add_mobility_command(subparsers: Any) -> None:
    """Register mobility subcommand."""
    parser = subparsers.add_parser("mobility", help="Show monthly mobility totals")
    parser.add_argument(
        "--top",
        type=int,
        default=DEFAULT_TOP_COUNTRIES,
        help="Number of countries in the latest-month ranking",
    )


def _add_analytics_command(subparsers: Any) -> None:
    """Register analytics subcommand."""
    parser = subparsers.add_parser("analytics", help="Show monthly analytics for a country")
    parser.add_argument("--country", help="Country id, defaults to JP or the first country")
    parser.add_argument("--output-dir", help="Write the country CSV here")
