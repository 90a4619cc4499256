"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from tapping_time import __version__
from tapping_time.config import get_settings
from tapping_time.date_utils import date_range_label, format_date
from tapping_time.flows.build import SITE_DIR, build_all
from tapping_time.flows.fetch import fetch_all
from tapping_time.scoring import get_season_info
from tapping_time.server import create_server
from tapping_time.services.forecast import ForecastError, get_forecast


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="tapping-time",
        description="Best days to tap maple trees from your local 7-day forecast",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    # 'forecast' command - score the forecast for a location
    forecast_parser = subparsers.add_parser("forecast", help="Show tapping recommendation")
    forecast_parser.add_argument("--lat", type=float, default=None, help="Latitude")
    forecast_parser.add_argument("--lon", type=float, default=None, help="Longitude")

    # 'season' command - typical season timing for a latitude
    season_parser = subparsers.add_parser("season", help="Show typical season timing")
    season_parser.add_argument("--lat", type=float, default=None, help="Latitude")
    season_parser.add_argument(
        "--year",
        type=int,
        default=None,
        help="Calendar year (default: current year)",
    )

    # 'refresh' command - fetch forecast and build site
    subparsers.add_parser("refresh", help="Fetch forecast and build site")

    # 'serve' command - API plus built site
    serve_parser = subparsers.add_parser("serve", help="Serve API and site locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def configure_logging(debug: bool = False) -> None:
    """Set up root logging from settings (DEBUG when ``debug``)."""
    level = "DEBUG" if debug else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Location: ({settings.lat}, {settings.lon})")
    print(f"API key configured: {'yes' if settings.pirate_weather_api_key else 'no'}")
    return 0


def cmd_forecast(args: argparse.Namespace) -> int:
    """Handle the 'forecast' command: print the recommendation and days."""
    settings = get_settings()
    lat = settings.lat if args.lat is None else args.lat
    lon = settings.lon if args.lon is None else args.lon

    try:
        result = get_forecast(lat, lon)
    except ForecastError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    rec = result["recommendation"]
    print(f"[{rec['type']}] {rec['message']}")
    window = result["best_window"]
    if window:
        print(f"Best window: {date_range_label(window['start_date'], window['end_date'])}")
    for day in result["days"]:
        print(f"  {format_date(day['date']):<12} {day['rating']}")
    if result["season"]:
        print(result["season"]["message"])
    return 0


def cmd_season(args: argparse.Namespace) -> int:
    """Handle the 'season' command."""
    lat = get_settings().lat if args.lat is None else args.lat
    year = date.today().year if args.year is None else args.year
    info = get_season_info(lat, year)
    print(f"Tap by: {format_date(info.tap_by_date)} ({info.tap_by_date})")
    print(f"Season ends: {format_date(info.season_end_date)} ({info.season_end_date})")
    print(info.message)
    return 0


def cmd_refresh(_args: argparse.Namespace) -> int:
    """Handle the 'refresh' command: fetch forecast then build site."""
    settings = get_settings()
    print(f"Fetching forecast for ({settings.lat}, {settings.lon})...")
    try:
        fetch_all(lat=settings.lat, lon=settings.lon)
    except ForecastError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print("Building site...")
    build_all(lat=settings.lat, lon=settings.lon)

    print("Done.")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: API endpoint plus the built site."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = Path(SITE_DIR)

    if not site_dir.exists():
        print("No site built yet; API only. Run 'tapping-time refresh' for the page.")

    with create_server(port, site_dir) as server:
        print(f"Serving on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.debug)

    commands = {
        "info": cmd_info,
        "forecast": cmd_forecast,
        "season": cmd_season,
        "refresh": cmd_refresh,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
