"""
Coordinate Model Module

This module provides the degrees/minutes/seconds (DMS) coordinate model used by the
Thousand Sunny's navigation systems. It converts between decimal degrees and DMS,
and displaces a position due north or due south by a distance in kilometers.

Classes:
    Axis: Latitude or longitude tag used when formatting a coordinate
    Heading: Direction multiplier for displacement along the meridian
    Coordinate: One axis value in DMS form with a separate sign flag
    GeoPosition: A latitude/longitude pair of coordinates

Functions:
    decimal_to_dms(): Convert decimal degrees to a Coordinate (truncating)
    dms_to_decimal(): Convert a Coordinate back to decimal degrees
    move(): Displace a position along a heading
    move_north(): Displace a position due north
    move_south(): Displace a position due south
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

# Configure logger
logger = logging.getLogger(__name__)

# Constants
# Mean length of one degree of latitude. Not geodetically exact.
KM_PER_DEGREE_LATITUDE = 111.0
MINUTES_PER_DEGREE = 60
SECONDS_PER_MINUTE = 60
SECONDS_PER_DEGREE = MINUTES_PER_DEGREE * SECONDS_PER_MINUTE


class Axis(Enum):
    """Axis of a coordinate, selecting the N/S or E/W hemisphere letters."""

    LATITUDE = "latitude"
    LONGITUDE = "longitude"


class Heading(Enum):
    """Direction multiplier applied to the latitude change."""

    NORTH = 1.0
    SOUTH = -1.0


@dataclass(frozen=True)
class Coordinate:
    """
    A single axis value in degrees, minutes and seconds.

    The sign is carried only by ``is_negative`` (south for a latitude, west for a
    longitude); the three components are never negative.

    Attributes:
        degrees: Whole degrees (>= 0)
        minutes: Whole minutes (0-59)
        seconds: Whole seconds (0-59)
        is_negative: True for southern latitudes and western longitudes
    """

    degrees: int
    minutes: int
    seconds: int
    is_negative: bool = False

    def __post_init__(self):
        for name in ("degrees", "minutes", "seconds"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Invalid {name}: {value!r}. Must be an integer")
        if self.degrees < 0:
            raise ValueError(f"Invalid degrees: {self.degrees}. Must be >= 0")
        if not 0 <= self.minutes < MINUTES_PER_DEGREE:
            raise ValueError(f"Invalid minutes: {self.minutes}. Must be in range 0-59")
        if not 0 <= self.seconds < SECONDS_PER_MINUTE:
            raise ValueError(f"Invalid seconds: {self.seconds}. Must be in range 0-59")

    def to_decimal_degrees(self) -> float:
        """Convert this coordinate to signed decimal degrees."""
        return dms_to_decimal(self)

    @classmethod
    def from_decimal_degrees(cls, decimal: float) -> "Coordinate":
        """Build a coordinate from signed decimal degrees."""
        return decimal_to_dms(decimal)


@dataclass(frozen=True)
class GeoPosition:
    """
    A geographic position as a latitude/longitude pair of coordinates.

    Attributes:
        latitude: Latitude coordinate (negative is south)
        longitude: Longitude coordinate (negative is west)
    """

    latitude: Coordinate
    longitude: Coordinate

    @classmethod
    def from_decimal_degrees(cls, latitude: float, longitude: float) -> "GeoPosition":
        """Build a position from signed decimal latitude and longitude."""
        return cls(latitude=decimal_to_dms(latitude), longitude=decimal_to_dms(longitude))

    def to_decimal_degrees(self) -> Tuple[float, float]:
        """Return the position as a (latitude, longitude) pair of decimal degrees."""
        return dms_to_decimal(self.latitude), dms_to_decimal(self.longitude)


def decimal_to_dms(decimal: float) -> Coordinate:
    """
    Convert decimal degrees to a DMS coordinate.

    Each component is truncated rather than rounded, so a round trip through
    dms_to_decimal() loses up to (but less than) one arc-second.

    Args:
        decimal: Signed decimal degrees

    Returns:
        Coordinate with non-negative components and the sign in is_negative

    Raises:
        ValueError: If the value is NaN or infinite
    """
    if not math.isfinite(decimal):
        raise ValueError(f"Invalid decimal degrees: {decimal}. Must be a finite number")

    is_negative = decimal < 0
    absolute = abs(decimal)

    degrees = math.floor(absolute)
    minutes_decimal = (absolute - degrees) * MINUTES_PER_DEGREE
    # A fraction just below 1 can round up to exactly 60.0 in floating point
    minutes = min(math.floor(minutes_decimal), MINUTES_PER_DEGREE - 1)
    seconds = min(math.floor((minutes_decimal - minutes) * SECONDS_PER_MINUTE),
                  SECONDS_PER_MINUTE - 1)

    return Coordinate(
        degrees=degrees,
        minutes=minutes,
        seconds=seconds,
        is_negative=is_negative
    )


def dms_to_decimal(coordinate: Coordinate) -> float:
    """
    Convert a DMS coordinate to signed decimal degrees.

    Args:
        coordinate: Coordinate to convert

    Returns:
        Decimal degrees, negative when the coordinate is south or west
    """
    magnitude = (coordinate.degrees
                 + coordinate.minutes / MINUTES_PER_DEGREE
                 + coordinate.seconds / SECONDS_PER_DEGREE)

    return -magnitude if coordinate.is_negative else magnitude


def move(position: GeoPosition, distance_km: float, heading: Heading) -> GeoPosition:
    """
    Move a position by a distance along the meridian.

    One degree of latitude is taken as KM_PER_DEGREE_LATITUDE kilometers. The
    longitude is unchanged apart from its decimal round trip.

    Args:
        position: Current position
        distance_km: Distance to travel in kilometers (callers reject negatives)
        heading: Heading.NORTH or Heading.SOUTH

    Returns:
        New GeoPosition after the movement
    """
    current_lat, current_lon = position.to_decimal_degrees()

    latitude_change = distance_km / KM_PER_DEGREE_LATITUDE
    new_lat = current_lat + latitude_change * heading.value

    logger.debug(f"Moving {heading.name.lower()} {distance_km} km: "
                 f"latitude {current_lat:.6f} -> {new_lat:.6f}")

    return GeoPosition(
        latitude=decimal_to_dms(new_lat),
        longitude=decimal_to_dms(current_lon)
    )


def move_north(position: GeoPosition, distance_km: float) -> GeoPosition:
    """Move a position due north by distance_km kilometers."""
    return move(position, distance_km, Heading.NORTH)


def move_south(position: GeoPosition, distance_km: float) -> GeoPosition:
    """Move a position due south by distance_km kilometers."""
    return move(position, distance_km, Heading.SOUTH)
