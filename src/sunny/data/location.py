"""
Location Retrieval Module

This module obtains the Thousand Sunny's current position. A position comes from a
LocationProvider: either a fixed (mocked) position, or the real device location
reported by a local gpsd daemon. Retrieval is a single asynchronous request bounded
by a timeout, and always ends in exactly one outcome value.

Classes:
    UnavailableReason: Why no position could be obtained
    Located: Outcome carrying a position
    Unavailable: Outcome carrying the reason no position was obtained
    LocationServiceError: Raised by providers when the location service fails
    LocationProvider: Abstract base class for position sources
    FixedLocationProvider: Provider returning a configured position
    GpsdLocationProvider: Provider reading fixes from gpsd

Functions:
    obtain_current_position(): Request a position with a timeout (async)
    fetch_current_position(): Blocking wrapper around obtain_current_position()
    resolve_location_provider(): Pick a provider from arguments and environment
"""

import asyncio
import json
import logging
import math
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Tuple, Union

from sunny.navigation.coordinates import GeoPosition

# Configure module logger
logger = logging.getLogger(__name__)

# Constants
CONNECT_TIMEOUT = 8.0
LOCATION_FIX_TIMEOUT = 12.0
GPSD_HOST = "127.0.0.1"
GPSD_PORT = 2947
GPSD_WATCH_COMMAND = b'?WATCH={"enable":true,"json":true};\n'
# gpsd TPV mode: 0 unknown, 1 no fix, 2 2D fix, 3 3D fix
GPSD_MIN_FIX_MODE = 2
LATITUDE_ENV_VAR = "SUNNY_LATITUDE"
LONGITUDE_ENV_VAR = "SUNNY_LONGITUDE"


class UnavailableReason(Enum):
    """Reason a location request produced no position."""

    TIMED_OUT = "timed_out"
    PERMISSION_DENIED = "permission_denied"
    SERVICE_ERROR = "service_error"


@dataclass(frozen=True)
class Located:
    """Successful location outcome."""

    position: GeoPosition


@dataclass(frozen=True)
class Unavailable:
    """Failed location outcome."""

    reason: UnavailableReason
    detail: str = ""


LocationResult = Union[Located, Unavailable]


class LocationServiceError(Exception):
    """Raised when the location service cannot deliver a position."""


class LocationProvider(ABC):
    """
    Abstract base class for sources of the ship's current position.

    Implementations raise PermissionError when access to the location is denied
    and LocationServiceError for any other service failure. They may block
    indefinitely; obtain_current_position() bounds the wait.
    """

    name = "location provider"

    @abstractmethod
    async def request_position(self) -> GeoPosition:
        """
        Request the current position.

        Returns:
            The current GeoPosition

        Raises:
            PermissionError: If access to the location is denied
            LocationServiceError: If the service cannot provide a position
        """


class FixedLocationProvider(LocationProvider):
    """Provider that always reports the same configured position."""

    name = "fixed position"

    def __init__(self, latitude: float, longitude: float):
        """
        Initialize the provider.

        Args:
            latitude: Latitude in decimal degrees (-90 to 90)
            longitude: Longitude in decimal degrees (-180 to 180)
        """
        if not -90.0 <= latitude <= 90.0:
            raise ValueError(f"Invalid latitude: {latitude}. Must be in range -90 to 90")
        if not -180.0 <= longitude <= 180.0:
            raise ValueError(f"Invalid longitude: {longitude}. Must be in range -180 to 180")

        self.latitude = latitude
        self.longitude = longitude

    async def request_position(self) -> GeoPosition:
        return GeoPosition.from_decimal_degrees(self.latitude, self.longitude)


class GpsdLocationProvider(LocationProvider):
    """
    Provider reading the device location from a gpsd daemon.

    The provider enables JSON watch mode and waits for the first TPV report that
    carries a 2D or 3D fix.
    """

    name = "gpsd"

    def __init__(self, host: str = GPSD_HOST, port: int = GPSD_PORT,
                 connect_timeout: float = CONNECT_TIMEOUT):
        """
        Initialize the provider.

        Args:
            host: Host where gpsd listens
            port: Port where gpsd listens
            connect_timeout: Seconds allowed for establishing the connection
        """
        self.host = host
        self.port = port
        self.connect_timeout = connect_timeout

    async def request_position(self) -> GeoPosition:
        logger.info(f"Connecting to gpsd at {self.host}:{self.port}")

        try:
            reader, writer = await asyncio.wait_for(
                asyncio.open_connection(self.host, self.port),
                self.connect_timeout
            )
        except PermissionError:
            raise
        except (OSError, asyncio.TimeoutError) as e:
            logger.error(f"Could not connect to gpsd at {self.host}:{self.port}: {e}")
            raise LocationServiceError(
                f"Location services may be disabled: no gpsd reachable at {self.host}:{self.port}"
            ) from e

        try:
            try:
                writer.write(GPSD_WATCH_COMMAND)
                await writer.drain()

                while True:
                    line = await reader.readline()
                    if not line:
                        raise LocationServiceError("gpsd closed the connection before a fix was obtained")

                    fix = self.parse_report(line)
                    if fix is not None:
                        latitude, longitude = fix
                        logger.info(f"gpsd fix obtained: lat={latitude}, lon={longitude}")
                        return GeoPosition.from_decimal_degrees(latitude, longitude)
            # readline() raises ValueError when a report exceeds the stream limit
            except (OSError, ValueError) as e:
                logger.error(f"gpsd connection failed: {e}")
                raise LocationServiceError(f"gpsd connection failed: {e}") from e
        finally:
            writer.close()
            try:
                await writer.wait_closed()
            except OSError as e:
                logger.debug(f"Error while closing gpsd connection: {e}")

    @staticmethod
    def parse_report(line: bytes) -> Optional[Tuple[float, float]]:
        """
        Extract a latitude/longitude fix from one gpsd JSON report.

        Args:
            line: A single newline-terminated report from gpsd

        Returns:
            (latitude, longitude) tuple, or None if the report carries no usable fix
        """
        try:
            report = json.loads(line)
        except ValueError:
            logger.warning(f"Ignoring malformed gpsd report: {line!r}")
            return None

        if not isinstance(report, dict) or report.get("class") != "TPV":
            return None

        mode = report.get("mode")
        if not isinstance(mode, int) or mode < GPSD_MIN_FIX_MODE:
            logger.debug("gpsd report has no fix yet")
            return None

        latitude = report.get("lat")
        longitude = report.get("lon")
        if not isinstance(latitude, (int, float)) or not isinstance(longitude, (int, float)):
            return None
        if not (math.isfinite(latitude) and math.isfinite(longitude)):
            return None

        return float(latitude), float(longitude)


async def obtain_current_position(provider: LocationProvider,
                                  timeout: float = LOCATION_FIX_TIMEOUT) -> LocationResult:
    """
    Request the current position from a provider, waiting at most timeout seconds.

    Args:
        provider: Source of the position
        timeout: Maximum number of seconds to wait for a position

    Returns:
        Located with the position, or Unavailable with the reason
    """
    logger.info(f"Requesting position from {provider.name} (timeout {timeout:g}s)")

    try:
        position = await asyncio.wait_for(provider.request_position(), timeout)
    except asyncio.TimeoutError:
        logger.warning(f"No position from {provider.name} within {timeout:g} seconds")
        return Unavailable(UnavailableReason.TIMED_OUT,
                           f"No location fix within {timeout:g} seconds")
    except PermissionError as e:
        logger.error(f"Location access denied: {e}")
        return Unavailable(UnavailableReason.PERMISSION_DENIED,
                           f"Location access denied/restricted: {e}")
    except LocationServiceError as e:
        logger.error(f"Location service error: {e}")
        return Unavailable(UnavailableReason.SERVICE_ERROR, str(e))

    return Located(position)


def fetch_current_position(provider: LocationProvider,
                           timeout: float = LOCATION_FIX_TIMEOUT) -> LocationResult:
    """Blocking variant of obtain_current_position() for synchronous callers."""
    return asyncio.run(obtain_current_position(provider, timeout))


def resolve_location_provider(
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        gpsd_host: str = GPSD_HOST,
        gpsd_port: int = GPSD_PORT,
        environ: Optional[Mapping[str, str]] = None
) -> LocationProvider:
    """
    Choose the location provider for this run.

    An explicit latitude/longitude pair wins, then the SUNNY_LATITUDE and
    SUNNY_LONGITUDE environment variables, then gpsd.

    Args:
        latitude: Mocked latitude in decimal degrees
        longitude: Mocked longitude in decimal degrees
        gpsd_host: Host for the gpsd provider
        gpsd_port: Port for the gpsd provider
        environ: Environment mapping (defaults to os.environ)

    Returns:
        The selected LocationProvider

    Raises:
        ValueError: If only one half of a coordinate pair is given, or a value is invalid
    """
    if environ is None:
        environ = os.environ

    if (latitude is None) != (longitude is None):
        raise ValueError("Both latitude and longitude must be provided for a fixed position")

    if latitude is not None:
        logger.info(f"Using fixed position lat={latitude}, lon={longitude}")
        return FixedLocationProvider(latitude, longitude)

    env_lat = environ.get(LATITUDE_ENV_VAR)
    env_lon = environ.get(LONGITUDE_ENV_VAR)

    if (env_lat is None) != (env_lon is None):
        raise ValueError(f"Both {LATITUDE_ENV_VAR} and {LONGITUDE_ENV_VAR} must be set")

    if env_lat is not None:
        try:
            lat, lon = float(env_lat), float(env_lon)
        except ValueError as e:
            raise ValueError(f"Could not parse position from environment: "
                             f"{LATITUDE_ENV_VAR}={env_lat}, {LONGITUDE_ENV_VAR}={env_lon}") from e
        logger.info(f"Using fixed position from environment: lat={lat}, lon={lon}")
        return FixedLocationProvider(lat, lon)

    return GpsdLocationProvider(gpsd_host, gpsd_port)
