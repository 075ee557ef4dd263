#!/usr/bin/env python
"""
Thousand Sunny Ship Systems Script

This script simulates the tech on board the Thousand Sunny. It reports the ship's
current coordinates, moves the ship with its propulsion systems, fires the Gaon
Cannon and describes the contents of the Soldier Dock and Usopp's garden.

Example usage:
    sunny
    sunny coupe 2
    sunny chicken 10 --lat 35.6895 --lon 139.6917 --chart charts/
    sunny dock 3
    sunny garden 7
"""

import sys
import math
import logging
import argparse
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from sunny.data.location import (
    GPSD_HOST,
    GPSD_PORT,
    LOCATION_FIX_TIMEOUT,
    Located,
    LocationProvider,
    fetch_current_position,
    resolve_location_provider,
)
from sunny.data.ship_systems import get_dock, get_pop_green, get_restricted_area
from sunny.navigation.coordinates import GeoPosition
from sunny.navigation.maneuvers import chicken_voyage, coup_de_burst, gaon_cannon, rabbit_screw
from sunny.utils.geo_utils import format_position_lines
from sunny.visualization import VoyageMapPlotter

logger = logging.getLogger("sunny")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
UNKNOWN_COORDINATES = "⚠️Unable to determine current coordinates⚠️"

Maneuver = Callable[[GeoPosition, float], GeoPosition]

# System name -> (maneuver, whether the command prints the initial and new position)
MANEUVERS: Dict[str, Tuple[Maneuver, bool]] = {
    "coupe": (coup_de_burst, True),
    "chicken": (chicken_voyage, True),
    "rabbit": (rabbit_screw, False),
}

USAGE = """Usage: sunny <system> <number>
Systems:
  coupe <km>      - COUP DE BURST: move north by <km> km
  chicken <km>    - CHICKEN VOYAGE: move south by <km> km
  rabbit <km>     - RABBIT SCREW: move north by <km> km
  cannon <power>  - GAON CANNON: fire with power level
  dock <1-6>      - SOLDIER DOCK SYSTEM: describe + launch vehicle
  garden <1-14>   - USOPP'S GARDEN: show Pop Green info
  mikan <n>       - NAMI'S GARDEN: access warning (number ignored)
  fluer <n>       - ROBIN'S FLOWERS: access warning (number ignored)"""


def configure_logging(verbose: bool = False, debug: bool = False,
                      log_file: Optional[str] = None) -> None:
    """
    Configure root logging for a command-line run.

    Args:
        verbose: Log at INFO level
        debug: Log at DEBUG level (takes precedence over verbose)
        log_file: Optional path of a log file written alongside stderr
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(Path(log_file)))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="sunny",
        description="Simulation of the tech on board the Thousand Sunny",
        epilog=USAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    # Define positional arguments
    parser.add_argument("system", nargs="?", help="Ship system to operate")
    parser.add_argument("number", nargs="?", help="Distance, power level or selection number")

    # Define location arguments
    parser.add_argument("--lat", type=float, help="Use a fixed latitude instead of the device location")
    parser.add_argument("--lon", type=float, help="Use a fixed longitude instead of the device location")
    parser.add_argument("--timeout", type=float, default=LOCATION_FIX_TIMEOUT,
                        help="Seconds to wait for a location fix")
    parser.add_argument("--gpsd-host", type=str, default=GPSD_HOST, help="Host of the gpsd daemon")
    parser.add_argument("--gpsd-port", type=int, default=GPSD_PORT, help="Port of the gpsd daemon")

    # Define optional arguments
    parser.add_argument("--chart", type=str, help="Directory to save a voyage chart in after moving")
    parser.add_argument("--log-file", type=str, help="Write log records to this file")
    parser.add_argument("--verbose", action="store_true", help="Log progress information")
    parser.add_argument("--debug", action="store_true", help="Log debugging information")

    return parser


def print_usage() -> None:
    """Print usage instructions."""
    print(USAGE)


def print_location(position: GeoPosition) -> None:
    """Print a position in (N/S/E/W) formatted style."""
    for line in format_position_lines(position):
        print(line)


def get_position(provider: LocationProvider, timeout: float) -> Optional[GeoPosition]:
    """
    Obtain the current position, printing the warning when it is unavailable.

    Returns:
        The position, or None if it could not be determined
    """
    result = fetch_current_position(provider, timeout)

    if isinstance(result, Located):
        return result.position

    logger.info(f"Position unavailable ({result.reason.value}): {result.detail}")
    print(result.detail)
    print(UNKNOWN_COORDINATES)

    return None


def parse_distance(number_str: str) -> Optional[float]:
    """Parse a non-negative, finite distance in kilometers; None if invalid."""
    try:
        distance = float(number_str)
    except ValueError:
        return None

    if not math.isfinite(distance) or distance < 0:
        return None

    return distance


def parse_selection(number_str: str) -> Optional[int]:
    """Parse a whole number; None if invalid."""
    try:
        return int(number_str)
    except ValueError:
        return None


def display_current_location(provider: LocationProvider, timeout: float) -> int:
    """Display the current location followed by usage. Used when no system is given."""
    print("\n=== THE THOUSAND SUNNY'S CURRENT COORDINATES ===\n")
    print("Fetching current location...")

    position = get_position(provider, timeout)
    if position is not None:
        print_location(position)

    print("\nTip: run with arguments, e.g.\n  sunny coupe 2\n  sunny dock 3\n")
    print_usage()

    return 0


def execute_navigation_command(
        number_str: str,
        maneuver: Maneuver,
        show_positions: bool,
        provider: LocationProvider,
        timeout: float,
        chart_dir: Optional[str] = None
) -> int:
    """
    Execute a movement command with common validation and display logic.

    Args:
        number_str: Distance argument as typed by the user
        maneuver: Maneuver moving the ship
        show_positions: Whether to print the initial and new position
        provider: Source of the current position
        timeout: Seconds to wait for the position
        chart_dir: Directory for a voyage chart, if one is requested

    Returns:
        Process exit status
    """
    distance = parse_distance(number_str)
    if distance is None:
        print(f"⚠️Invalid distance: {number_str}⚠️")
        return 1

    start = get_position(provider, timeout)
    if start is None:
        return 0

    if show_positions:
        print("Initial Position:")
        print_location(start)

    end = maneuver(start, distance)

    if show_positions:
        print("New Position:")
        print_location(end)

    if chart_dir:
        plotter = VoyageMapPlotter(output_dir=chart_dir)
        plotter.plot_voyage(start, end)
        for path in plotter.save():
            print(f"Voyage chart saved to {path}")

    return 0


def handle_system(args: argparse.Namespace, provider_factory: Callable[[], LocationProvider]) -> int:
    """
    Dispatch a ship system command.

    Args:
        args: Parsed command-line arguments (system and number set)
        provider_factory: Creates the location provider when a command needs it

    Returns:
        Process exit status
    """
    command = args.system.lower()
    number_str = args.number

    if command in MANEUVERS:
        maneuver, show_positions = MANEUVERS[command]
        return execute_navigation_command(
            number_str=number_str,
            maneuver=maneuver,
            show_positions=show_positions,
            provider=provider_factory(),
            timeout=args.timeout,
            chart_dir=args.chart
        )

    if command == "cannon":
        power = parse_selection(number_str)
        if power is None or power < 0:
            print(f"Invalid power level: {number_str}")
            return 1
        gaon_cannon(power)
        return 0

    if command == "dock":
        channel = parse_selection(number_str)
        try:
            dock = get_dock(channel)
        except KeyError:
            print(f"Invalid dock channel: {number_str}. Use 1-6.")
            return 1
        print(dock.title)
        print(dock.description)
        print(dock.launch_message)
        return 0

    if command == "garden":
        number = parse_selection(number_str)
        try:
            pop_green = get_pop_green(number)
        except KeyError:
            print(f"Invalid Pop Green selection: {number_str}. Use 1-14.")
            return 1
        print(pop_green.title)
        print(pop_green.description)
        return 0

    if command in ("mikan", "fluer"):
        print(get_restricted_area(command).description)
        return 0

    print(f"Unknown system: {command}\n")
    print_usage()
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug, log_file=args.log_file)

    def provider_factory() -> LocationProvider:
        try:
            return resolve_location_provider(
                latitude=args.lat,
                longitude=args.lon,
                gpsd_host=args.gpsd_host,
                gpsd_port=args.gpsd_port
            )
        except ValueError as e:
            parser.error(str(e))

    if args.system is None:
        return display_current_location(provider_factory(), args.timeout)

    if args.number is None:
        print("Missing number argument.\n")
        print_usage()
        return 1

    return handle_system(args, provider_factory)


if __name__ == "__main__":
    sys.exit(main())
