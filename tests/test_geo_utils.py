"""
Tests for coordinate formatting.
"""

import unittest

from sunny.navigation.coordinates import Axis, Coordinate, GeoPosition
from sunny.utils.geo_utils import (
    format_coordinate,
    format_coordinates_cardinal,
    format_dms,
    format_position_lines,
    hemisphere_letter,
)


class TestFormatCoordinate(unittest.TestCase):
    """Test hemisphere-aware formatting."""

    def test_northern_latitude(self):
        """Test a northern latitude."""
        coord = Coordinate(degrees=35, minutes=41, seconds=22, is_negative=False)
        self.assertEqual(format_coordinate(coord, Axis.LATITUDE), "35° 41'22\" N")

    def test_western_longitude(self):
        """Test a western longitude."""
        coord = Coordinate(degrees=139, minutes=41, seconds=30, is_negative=True)
        self.assertEqual(format_coordinate(coord, Axis.LONGITUDE), "139° 41'30\" W")

    def test_no_zero_padding(self):
        """Test that components are printed without padding."""
        self.assertEqual(format_coordinate(Coordinate(0, 5, 7), Axis.LONGITUDE), "0° 5'7\" E")

    def test_hemisphere_letters(self):
        """Test all four hemisphere letters."""
        north, south = Coordinate(1, 0, 0), Coordinate(1, 0, 0, True)
        self.assertEqual(hemisphere_letter(north, Axis.LATITUDE), "N")
        self.assertEqual(hemisphere_letter(south, Axis.LATITUDE), "S")
        self.assertEqual(hemisphere_letter(north, Axis.LONGITUDE), "E")
        self.assertEqual(hemisphere_letter(south, Axis.LONGITUDE), "W")


class TestFormatDms(unittest.TestCase):
    """Test the sign-less DMS format."""

    def test_plain(self):
        """Test that neither sign nor hemisphere is printed."""
        self.assertEqual(format_dms(Coordinate(12, 3, 45, True)), "12° 3'45\"")


class TestFormatPosition(unittest.TestCase):
    """Test formatting of whole positions."""

    def setUp(self):
        self.position = GeoPosition(Coordinate(33, 52, 4, True), Coordinate(151, 12, 36))

    def test_cardinal(self):
        """Test the (latitude, longitude, combined) tuple."""
        lat_str, lon_str, location_str = format_coordinates_cardinal(self.position)
        self.assertEqual(lat_str, "33° 52'4\" S")
        self.assertEqual(lon_str, "151° 12'36\" E")
        self.assertEqual(location_str, "33° 52'4\" S, 151° 12'36\" E")

    def test_console_lines(self):
        """Test the aligned console lines."""
        self.assertEqual(
            format_position_lines(self.position),
            ("  Latitude:  33° 52'4\" S", "  Longitude: 151° 12'36\" E")
        )


if __name__ == '__main__':
    unittest.main()
