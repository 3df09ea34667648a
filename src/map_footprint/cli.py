"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import json
import sys

from pydantic import ValidationError

from map_footprint import __version__
from map_footprint.camera import MercatorCamera
from map_footprint.config import get_settings
from map_footprint.errors import ProjectionError
from map_footprint.geometry import bearing, compass_bearing, longitude_span
from map_footprint.logging_utils import setup_logger
from map_footprint.projection import Projection
from map_footprint.schemas import GeoPoint


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="map-footprint",
        description="Geographic footprint of a map viewport",
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

    # 'region' command - visible region of a Web Mercator camera
    region_parser = subparsers.add_parser("region", help="Compute the visible region of a viewport")
    region_parser.add_argument("--lat", type=float, required=True, help="Center latitude")
    region_parser.add_argument("--lon", type=float, required=True, help="Center longitude")
    region_parser.add_argument("--zoom", type=float, required=True, help="Zoom level")
    region_parser.add_argument(
        "--width",
        type=float,
        default=None,
        help="Viewport width in pixels (default: viewport_width from settings)",
    )
    region_parser.add_argument(
        "--height",
        type=float,
        default=None,
        help="Viewport height in pixels (default: viewport_height from settings)",
    )
    region_parser.add_argument(
        "--bearing", type=float, default=0.0, help="Map rotation in degrees (default: 0)"
    )
    region_parser.add_argument("--pitch", type=float, default=0.0, help="Map tilt in degrees (default: 0)")

    # 'bearing' command - initial bearing between two points
    bearing_parser = subparsers.add_parser("bearing", help="Initial bearing between two points")
    bearing_parser.add_argument("lat1", type=float)
    bearing_parser.add_argument("lon1", type=float)
    bearing_parser.add_argument("lat2", type=float)
    bearing_parser.add_argument("lon2", type=float)

    # 'span' command - antimeridian-aware longitude span
    span_parser = subparsers.add_parser("span", help="Longitude span from WEST eastward to EAST")
    span_parser.add_argument("east", type=float)
    span_parser.add_argument("west", type=float)

    return parser


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Viewport: {settings.viewport_width:g}x{settings.viewport_height:g}")
    return 0


def cmd_region(args: argparse.Namespace) -> int:
    """Handle the 'region' command: print the visible region as JSON."""
    settings = get_settings()
    try:
        camera = MercatorCamera(
            center=GeoPoint(latitude=args.lat, longitude=args.lon),
            zoom_level=args.zoom,
            viewport_width=args.width if args.width is not None else settings.viewport_width,
            viewport_height=args.height if args.height is not None else settings.viewport_height,
            bearing=args.bearing,
            pitch=args.pitch,
            tile_size=settings.tile_size,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        region = Projection(camera).visible_region()
    except ProjectionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(region.model_dump_json(indent=2))
    return 0


def cmd_bearing(args: argparse.Namespace) -> int:
    """Handle the 'bearing' command."""
    try:
        p1 = GeoPoint(latitude=args.lat1, longitude=args.lon1)
        p2 = GeoPoint(latitude=args.lat2, longitude=args.lon2)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = {"bearing": bearing(p1, p2), "compass_bearing": compass_bearing(p1, p2)}
    print(json.dumps(result, indent=2))
    return 0


def cmd_span(args: argparse.Namespace) -> int:
    """Handle the 'span' command."""
    print(f"{longitude_span(args.east, args.west):g}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    level = "DEBUG" if args.debug or settings.debug else settings.log_level
    setup_logger("map_footprint", logs_dir=settings.logs_dir, level=level)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "region": cmd_region,
        "bearing": cmd_bearing,
        "span": cmd_span,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
