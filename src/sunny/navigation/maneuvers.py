"""
Maneuvers Module

This module implements the Thousand Sunny's propulsion and weapon systems. Each
propulsion maneuver announces itself on the console and returns the position the
ship reaches.

Functions:
    coup_de_burst(): Emergency escape, moves north
    chicken_voyage(): Tactical retreat, moves south
    rabbit_screw(): Full-power paddle wheels, moves north
    gaon_cannon(): Fire the cola-powered air cannon
"""

import logging

from sunny.navigation.coordinates import GeoPosition, move_north, move_south
from sunny.utils.geo_utils import format_position_lines

# Configure logger
logger = logging.getLogger(__name__)


def coup_de_burst(position: GeoPosition, distance_km: float) -> GeoPosition:
    """
    Release compressed air from the stern and launch the ship north.

    Args:
        position: Position before the maneuver
        distance_km: Distance to travel in kilometers

    Returns:
        Position after the maneuver
    """
    print("\n=== COUP DE BURST ACTIVATED ===")
    print("Releasing compressed air from stern...")
    print("BOOOOOOOOM!")
    print(f"The Thousand Sunny has been launched {distance_km:.0f} kilometer(s) north!\n")

    logger.info(f"Coup de Burst: {distance_km} km north")

    return move_north(position, distance_km)


def chicken_voyage(position: GeoPosition, distance_km: float) -> GeoPosition:
    """
    Release compressed air from the bow and retreat south.

    Args:
        position: Position before the maneuver
        distance_km: Distance to travel in kilometers

    Returns:
        Position after the maneuver
    """
    print("\n=== CHICKEN VOYAGE ACTIVATED ===")
    print("Tactical retreat engaged!")
    print("Releasing compressed air from bow...")
    print("WHOOOOOOSH!")
    print(f"The Thousand Sunny has retreated {distance_km:.0f} kilometer(s) south!\n")

    logger.info(f"Chicken Voyage: {distance_km} km south")

    return move_south(position, distance_km)


def rabbit_screw(position: GeoPosition, distance_km: float) -> GeoPosition:
    """
    Spin the paddle wheels at full power and surge north.

    Unlike the other maneuvers this one reports the new position itself.

    Args:
        position: Position before the maneuver
        distance_km: Distance to travel in kilometers

    Returns:
        Position after the maneuver
    """
    print("\n=== RABBIT SCREW: SUKURYŪ ===")
    print("Full power activated, Sunny now going all out… buckle up or huddle down, my Mugiwaras!")
    print("The paddle wheels spin at maximum velocity!")
    print("VOOOOOOSSSHHHHH!")
    print(f"The Sunny surges ahead by {distance_km:.0f} kilometer(s)!\n")

    logger.info(f"Rabbit Screw: {distance_km} km north")

    new_position = move_north(position, distance_km)

    print("New Position after Sukuryū Propulsion:")
    for line in format_position_lines(new_position):
        print(line)
    print()

    return new_position


def gaon_cannon(power: int) -> int:
    """
    Fire the Gaon Cannon.

    Args:
        power: Power level (non-negative); at least one blast is always fired

    Returns:
        Number of air blasts fired
    """
    blasts = max(1, power)

    print("\n=== GAON CANNON ACTIVATED ===")
    print(f"Power level: {power}")

    for _ in range(blasts):
        print("AIR BLAST FIRED!!")

    print("TARGET SUCESSFULY OBLITERATED!!")
    print("\n⚠️  WARNING: Cola-Cannons depleted! Restock urgently!")
    print()

    logger.info(f"Gaon Cannon fired {blasts} blast(s) at power {power}")

    return blasts
