"""
Tests for the sunny command-line interface.
"""

import io
import logging
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

from sunny import cli
from sunny.data.location import FixedLocationProvider, Located, Unavailable, UnavailableReason
from sunny.navigation.coordinates import GeoPosition

FIXED = ["--lat", "0", "--lon", "0"]


def run_cli(*argv):
    """Run the CLI and return (exit status, stdout)."""
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        status = cli.main(list(argv))
    return status, buffer.getvalue()


class TestNavigationCommands(unittest.TestCase):
    """Test the movement commands."""

    def test_coupe(self):
        """Test Coup de Burst prints both positions."""
        status, output = run_cli("coupe", "111", *FIXED)

        self.assertEqual(status, 0)
        self.assertIn("Initial Position:\n  Latitude:  0° 0'0\" N\n  Longitude: 0° 0'0\" E", output)
        self.assertIn("New Position:\n  Latitude:  1° 0'0\" N\n  Longitude: 0° 0'0\" E", output)

    def test_chicken(self):
        """Test Chicken Voyage moves south."""
        status, output = run_cli("chicken", "111", "--lat", "0", "--lon", "-10")

        self.assertEqual(status, 0)
        self.assertIn("New Position:\n  Latitude:  1° 0'0\" S\n  Longitude: 10° 0'0\" W", output)

    def test_rabbit(self):
        """Test Rabbit Screw prints only its own position block."""
        status, output = run_cli("rabbit", "555", *FIXED)

        self.assertEqual(status, 0)
        self.assertNotIn("Initial Position:", output)
        self.assertIn("New Position after Sukuryū Propulsion:\n  Latitude:  5° 0'0\" N", output)

    def test_system_name_is_case_insensitive(self):
        """Test that system names ignore case."""
        status, output = run_cli("COUPE", "1", *FIXED)

        self.assertEqual(status, 0)
        self.assertIn("COUP DE BURST ACTIVATED", output)

    def test_invalid_distance(self):
        """Test that negative and non-numeric distances are rejected."""
        for distance in ("-5", "far", "nan", "inf"):
            with self.subTest(distance=distance):
                status, output = run_cli("coupe", distance, *FIXED)
                self.assertEqual(status, 1)
                self.assertIn(f"⚠️Invalid distance: {distance}⚠️", output)

    def test_unavailable_position_skips_movement(self):
        """Test that no displacement happens without a position."""
        unavailable = Unavailable(UnavailableReason.TIMED_OUT, "No location fix within 12 seconds")

        with mock.patch.object(cli, "fetch_current_position", return_value=unavailable), \
                mock.patch("sunny.navigation.maneuvers.move_north") as move_north:
            status, output = run_cli("coupe", "5", *FIXED)

        self.assertEqual(status, 0)
        move_north.assert_not_called()
        self.assertIn("No location fix within 12 seconds", output)
        self.assertIn(cli.UNKNOWN_COORDINATES, output)
        self.assertNotIn("COUP DE BURST", output)

    def test_chart_is_saved(self):
        """Test that --chart plots the voyage from start to end."""
        with mock.patch.object(cli, "VoyageMapPlotter") as plotter_cls:
            plotter_cls.return_value.save.return_value = ["charts/voyage.png"]
            status, output = run_cli("coupe", "111", *FIXED, "--chart", "charts")

        self.assertEqual(status, 0)
        plotter_cls.assert_called_once_with(output_dir="charts")
        plotter_cls.return_value.plot_voyage.assert_called_once_with(
            GeoPosition.from_decimal_degrees(0.0, 0.0),
            GeoPosition.from_decimal_degrees(1.0, 0.0)
        )
        self.assertIn("Voyage chart saved to charts/voyage.png", output)


class TestOtherSystems(unittest.TestCase):
    """Test the non-navigational systems."""

    def test_cannon(self):
        """Test firing the Gaon Cannon."""
        status, output = run_cli("cannon", "2")

        self.assertEqual(status, 0)
        self.assertEqual(output.count("AIR BLAST FIRED!!"), 2)

    def test_invalid_cannon_power(self):
        """Test that negative power is rejected."""
        status, output = run_cli("cannon", "-1")

        self.assertEqual(status, 1)
        self.assertIn("Invalid power level: -1", output)

    def test_dock(self):
        """Test describing and launching a dock vehicle."""
        status, output = run_cli("dock", "3")

        self.assertEqual(status, 0)
        self.assertIn("Channel 3 - Shark Submerge:", output)
        self.assertIn("Baby Meg dives beneath the waves!", output)

    def test_invalid_dock(self):
        """Test that unknown channels are rejected."""
        for channel in ("7", "x"):
            with self.subTest(channel=channel):
                status, output = run_cli("dock", channel)
                self.assertEqual(status, 1)
                self.assertIn(f"Invalid dock channel: {channel}. Use 1-6.", output)

    def test_garden(self):
        """Test describing a Pop Green."""
        status, output = run_cli("garden", "7")

        self.assertEqual(status, 0)
        self.assertIn("#7 - Sleep Grass:", output)

    def test_invalid_garden(self):
        """Test that unknown Pop Greens are rejected."""
        status, output = run_cli("garden", "15")

        self.assertEqual(status, 1)
        self.assertIn("Invalid Pop Green selection: 15. Use 1-14.", output)

    def test_restricted_areas(self):
        """Test the restricted area warnings."""
        self.assertIn("CONTACTING NAMI!!", run_cli("mikan", "0")[1])
        self.assertIn("CONTACTING ROBIN!!", run_cli("fluer", "99")[1])


class TestDispatch(unittest.TestCase):
    """Test argument handling."""

    def test_no_arguments_shows_location_and_usage(self):
        """Test the default location report."""
        status, output = run_cli("--lat", "35.5", "--lon", "-139.75")

        self.assertEqual(status, 0)
        self.assertIn("=== THE THOUSAND SUNNY'S CURRENT COORDINATES ===", output)
        self.assertIn("  Latitude:  35° 30'0\" N\n  Longitude: 139° 45'0\" W", output)
        self.assertIn("Usage: sunny <system> <number>", output)

    def test_missing_number(self):
        """Test that a system without a number prints usage."""
        status, output = run_cli("dock")

        self.assertEqual(status, 1)
        self.assertIn("Missing number argument.", output)
        self.assertIn("Usage: sunny <system> <number>", output)

    def test_unknown_system(self):
        """Test that unknown systems print usage."""
        status, output = run_cli("thrusters", "1")

        self.assertEqual(status, 1)
        self.assertIn("Unknown system: thrusters", output)

    def test_half_position_is_an_error(self):
        """Test that --lat without --lon is a usage error."""
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                run_cli("coupe", "1", "--lat", "10")

        self.assertEqual(ctx.exception.code, 2)


class TestLocationOptions(unittest.TestCase):
    """Test that location options reach the location layer."""

    def test_timeout_reaches_fetch(self):
        """Test that --timeout bounds the location request."""
        located = Located(GeoPosition.from_decimal_degrees(0.0, 0.0))

        with mock.patch.object(cli, "fetch_current_position", return_value=located) as fetch:
            status, _ = run_cli("coupe", "1", *FIXED, "--timeout", "3")

        self.assertEqual(status, 0)
        fetch.assert_called_once()
        provider, timeout = fetch.call_args[0]
        self.assertIsInstance(provider, FixedLocationProvider)
        self.assertEqual(timeout, 3.0)

    def test_gpsd_options_reach_provider_selection(self):
        """Test that --gpsd-host and --gpsd-port select the gpsd daemon."""
        with mock.patch.object(cli, "resolve_location_provider",
                               return_value=FixedLocationProvider(0.0, 0.0)) as resolve:
            status, _ = run_cli("coupe", "1", "--gpsd-host", "gps.local", "--gpsd-port", "3000")

        self.assertEqual(status, 0)
        resolve.assert_called_once_with(latitude=None, longitude=None,
                                        gpsd_host="gps.local", gpsd_port=3000)


class TestConfigureLogging(unittest.TestCase):
    """Test logging configuration."""

    def setUp(self):
        self.root = logging.getLogger()
        self.saved_handlers = self.root.handlers[:]
        self.saved_level = self.root.level
        self.root.handlers = []

    def tearDown(self):
        for handler in self.root.handlers:
            handler.close()
        self.root.handlers = self.saved_handlers
        self.root.setLevel(self.saved_level)

    def test_default_level(self):
        """Test that only warnings are logged by default."""
        cli.configure_logging()

        self.assertEqual(self.root.level, logging.WARNING)
        self.assertEqual([type(h) for h in self.root.handlers], [logging.StreamHandler])

    def test_verbose_and_debug(self):
        """Test that --verbose selects INFO and --debug takes precedence."""
        cli.configure_logging(verbose=True)
        self.assertEqual(self.root.level, logging.INFO)

        self.root.handlers = []
        cli.configure_logging(verbose=True, debug=True)
        self.assertEqual(self.root.level, logging.DEBUG)

    def test_log_file(self):
        """Test that --log-file adds a file handler."""
        with tempfile.TemporaryDirectory() as tmp:
            log_path = f"{tmp}/sunny.log"
            run_cli("--verbose", "--log-file", log_path, "cannon", "1")

            file_handlers = [h for h in self.root.handlers if isinstance(h, logging.FileHandler)]
            self.assertEqual(len(file_handlers), 1)
            self.assertTrue(file_handlers[0].baseFilename.endswith("sunny.log"))
            self.assertEqual(self.root.level, logging.INFO)

            for handler in self.root.handlers:
                handler.close()
            self.root.handlers = []


if __name__ == '__main__':
    unittest.main()
