"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import requests
from pydantic import ValidationError

from lifer_planner import __version__
from lifer_planner.analysis.distance import distance_km
from lifer_planner.config import Settings, get_settings
from lifer_planner.exceptions import EBirdError
from lifer_planner.flows.recommend import recommend_hotspots
from lifer_planner.life_list import LifeList
from lifer_planner.reference.life_lists import PRESETS, search_catalog
from lifer_planner.renderers.recommendations import (
    DEFAULT_LIMIT,
    build_recommendations_html,
    format_recommendations_table,
)


def _add_life_list_args(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--life-list",
        type=Path,
        default=None,
        help="File with one species code per line",
    )
    source.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default=None,
        help="Start from a preset life list",
    )
    parser.add_argument(
        "--add",
        action="append",
        default=[],
        metavar="CODE",
        help="Add a species code to the life list (repeatable)",
    )
    parser.add_argument(
        "--remove",
        action="append",
        default=[],
        metavar="CODE",
        help="Remove a species code from the life list (repeatable)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="lifer-planner",
        description="Rank nearby eBird hotspots by expected new life-list species",
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
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info and search settings")

    # 'recommend' command - fetch data and rank hotspots
    rec_parser = subparsers.add_parser("recommend", help="Fetch eBird data and rank hotspots")
    _add_life_list_args(rec_parser)
    rec_parser.add_argument(
        "--limit",
        type=int,
        default=DEFAULT_LIMIT,
        help=f"Number of hotspots to show (default: {DEFAULT_LIMIT})",
    )
    rec_parser.add_argument(
        "--html",
        type=Path,
        default=None,
        help="Also write an HTML report to this path",
    )

    # 'species' command - search the species catalog
    species_parser = subparsers.add_parser("species", help="Search common species codes")
    species_parser.add_argument("--search", type=str, default="", help="Name or code fragment")
    _add_life_list_args(species_parser)

    # 'distance' command - haversine distance between two points
    dist_parser = subparsers.add_parser("distance", help="Great-circle distance in km")
    for name in ("lat1", "lon1", "lat2", "lon2"):
        dist_parser.add_argument(name, type=float)

    return parser


def build_life_list(args: argparse.Namespace) -> LifeList:
    """Apply --life-list/--preset, then --add and --remove, in that order."""
    if args.life_list is not None:
        life_list = LifeList.from_file(args.life_list)
    elif args.preset is not None:
        life_list = LifeList.from_preset(args.preset)
    else:
        life_list = LifeList()
    for code in args.add:
        life_list.add(code)
    for code in args.remove:
        life_list.remove(code)
    return life_list


def _load_settings() -> Settings | None:
    try:
        return get_settings()
    except ValidationError as exc:
        print(f"Error: invalid configuration:\n{exc}", file=sys.stderr)
        return None


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = _load_settings()
    if settings is None:
        return 1
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Search area: {settings.area_name} ({settings.center_lat}, {settings.center_lng})")
    print(f"Radius: {settings.radius_km:g} km")
    print(f"Lookback: {settings.lookback_days} days")
    print(f"eBird API key: {'configured' if settings.ebird_api_key else 'missing'}")
    return 0


def cmd_recommend(args: argparse.Namespace) -> int:
    """Handle the 'recommend' command: fetch data, score, print ranking."""
    settings = _load_settings()
    if settings is None:
        return 1
    if args.debug:
        print(f"Debug mode enabled. Settings: {settings}")

    try:
        life_list = build_life_list(args)
    except OSError as exc:
        print(f"Error: could not read life list: {exc}", file=sys.stderr)
        return 1

    if not life_list:
        print("Warning: life list is empty; every species will count as new.", file=sys.stderr)

    try:
        recommendations = recommend_hotspots(life_list.codes, settings)
    except (EBirdError, requests.RequestException) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(format_recommendations_table(recommendations, limit=args.limit))

    if args.html is not None:
        html = build_recommendations_html(
            recommendations, settings.search_area(), len(life_list), limit=args.limit
        )
        args.html.parent.mkdir(parents=True, exist_ok=True)
        args.html.write_text(html)
        print(f"Report written to {args.html}")
    return 0


def cmd_species(args: argparse.Namespace) -> int:
    """Handle the 'species' command: list catalog matches, marking seen ones."""
    try:
        life_list = build_life_list(args)
    except OSError as exc:
        print(f"Error: could not read life list: {exc}", file=sys.stderr)
        return 1

    matches = search_catalog(args.search)
    if not matches:
        print(f"No species match {args.search!r}.")
        return 0
    for bird in matches:
        mark = "✓" if bird.code in life_list else " "
        print(f"[{mark}] {bird.code:<8} {bird.name}")
    print(f"{len(life_list)} species on life list.")
    return 0


def cmd_distance(args: argparse.Namespace) -> int:
    """Handle the 'distance' command."""
    print(f"{distance_km(args.lat1, args.lon1, args.lat2, args.lon2):.2f} km")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "recommend": cmd_recommend,
        "species": cmd_species,
        "distance": cmd_distance,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
