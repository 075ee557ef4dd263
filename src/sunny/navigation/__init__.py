"""
Navigation Module

This module provides the coordinate model and the ship's maneuvers.

Classes:
    Axis: Latitude or longitude tag
    Heading: North or south displacement multiplier
    Coordinate: Degrees/minutes/seconds value with a sign flag
    GeoPosition: Latitude/longitude pair of coordinates

Functions:
    decimal_to_dms: Convert decimal degrees to a Coordinate
    dms_to_decimal: Convert a Coordinate to decimal degrees
    move_north: Displace a position due north
    move_south: Displace a position due south
"""

from .coordinates import (
    KM_PER_DEGREE_LATITUDE,
    Axis,
    Heading,
    Coordinate,
    GeoPosition,
    decimal_to_dms,
    dms_to_decimal,
    move,
    move_north,
    move_south,
)

__all__ = [
    'KM_PER_DEGREE_LATITUDE',
    'Axis',
    'Heading',
    'Coordinate',
    'GeoPosition',
    'decimal_to_dms',
    'dms_to_decimal',
    'move',
    'move_north',
    'move_south'
]
