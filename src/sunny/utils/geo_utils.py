"""Geographic coordinates formatting functions."""

from typing import Tuple

from sunny.navigation.coordinates import Axis, Coordinate, GeoPosition

# Hemisphere letters as (positive, negative) per axis
HEMISPHERES = {
    Axis.LATITUDE: ("N", "S"),
    Axis.LONGITUDE: ("E", "W"),
}


def hemisphere_letter(coordinate: Coordinate, axis: Axis) -> str:
    """Return N/S for a latitude or E/W for a longitude."""
    positive, negative = HEMISPHERES[axis]
    return negative if coordinate.is_negative else positive


def format_coordinate(coordinate: Coordinate, axis: Axis) -> str:
    """
    Format a coordinate in DMS with its hemisphere letter.

    Args:
        coordinate: Coordinate to format
        axis: Axis the coordinate belongs to

    Returns:
        String such as 35° 41'22" N or 139° 41'30" W
    """
    return f"{format_dms(coordinate)} {hemisphere_letter(coordinate, axis)}"


def format_dms(coordinate: Coordinate) -> str:
    """
    Format a coordinate in DMS without sign or hemisphere.

    Args:
        coordinate: Coordinate to format

    Returns:
        String such as 35° 41'22"
    """
    return f"{coordinate.degrees}° {coordinate.minutes}'{coordinate.seconds}\""


def format_coordinates_cardinal(position: GeoPosition) -> Tuple[str, str, str]:
    """
    Format a position in cardinal DMS format (N/S, E/W).

    Args:
        position: Position to format

    Returns:
        Tuple containing (latitude string, longitude string, combined location string)
    """
    lat_str = format_coordinate(position.latitude, Axis.LATITUDE)
    lon_str = format_coordinate(position.longitude, Axis.LONGITUDE)

    # Full location string
    location_str = f"{lat_str}, {lon_str}"

    return lat_str, lon_str, location_str


def format_position_lines(position: GeoPosition) -> Tuple[str, str]:
    """Return the two indented console lines used to report a position."""
    lat_str, lon_str, _ = format_coordinates_cardinal(position)

    return f"  Latitude:  {lat_str}", f"  Longitude: {lon_str}"
