"""
Voyage Map Module

This module draws the Thousand Sunny's voyage between two positions on a map.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

import matplotlib.pyplot as plt
import numpy as np
import cartopy.crs as ccrs
import cartopy.feature as cfeature

from sunny.navigation.coordinates import GeoPosition
from sunny.utils.geo_utils import format_coordinates_cardinal
from .export import export_figure

# Configure logger
logger = logging.getLogger(__name__)


class VoyageMapPlotter:
    """
    Class for creating maps of a voyage from a start to an end position.
    """

    START_COLOR = '#2166AC'
    END_COLOR = '#B2182B'

    def __init__(
            self,
            output_dir: Optional[Union[str, Path]] = None,
            dpi: int = 150,
            figsize: Tuple[float, float] = (10, 8)
    ):
        """
        Initialize the plotter.

        Args:
            output_dir: Directory to store output figures (None to only build figures)
            dpi: Resolution for saved figures
            figsize: Figure size (width, height) in inches
        """
        self.output_dir = Path(output_dir) if output_dir is not None else None
        self.dpi = dpi
        self.figsize = figsize

        # Figure container
        self.fig = None

    @staticmethod
    def voyage_track(start: GeoPosition, end: GeoPosition, steps: int = 50) -> np.ndarray:
        """
        Compute intermediate points of a voyage.

        Args:
            start: Starting position
            end: Final position
            steps: Number of points along the track (including both ends)

        Returns:
            Array of shape (steps, 2) holding (longitude, latitude) pairs in decimal degrees
        """
        start_lat, start_lon = start.to_decimal_degrees()
        end_lat, end_lon = end.to_decimal_degrees()

        lons = np.linspace(start_lon, end_lon, steps)
        lats = np.linspace(start_lat, end_lat, steps)

        return np.column_stack((lons, lats))

    @staticmethod
    def map_extent(track: np.ndarray, buffer: float) -> List[float]:
        """
        Compute a [west, east, south, north] extent around a track.

        Latitudes are clipped to the valid -90..90 range.
        """
        west, south = track.min(axis=0) - buffer
        east, north = track.max(axis=0) + buffer

        return [float(west), float(east),
                float(np.clip(south, -90.0, 90.0)), float(np.clip(north, -90.0, 90.0))]

    def plot_voyage(self,
                    start: GeoPosition,
                    end: GeoPosition,
                    buffer: float = 2.0,
                    show_inset: bool = True) -> plt.Figure:
        """
        Create a map showing a voyage.

        Args:
            start: Position before the maneuver
            end: Position after the maneuver
            buffer: Buffer around the track in degrees for map extent
            show_inset: Whether to show an inset world map

        Returns:
            Matplotlib figure object
        """
        track = self.voyage_track(start, end)
        extent = self.map_extent(track, buffer)

        start_lon, start_lat = track[0]
        end_lon, end_lat = track[-1]

        logger.info(f"Creating voyage map from ({start_lat:.4f}, {start_lon:.4f}) "
                    f"to ({end_lat:.4f}, {end_lon:.4f})")

        fig = plt.figure(figsize=self.figsize)

        # Main map with Plate Carree projection
        ax_main = fig.add_subplot(1, 1, 1, projection=ccrs.PlateCarree())
        ax_main.set_extent(extent, crs=ccrs.PlateCarree())

        ax_main.add_feature(cfeature.OCEAN, facecolor='#DCEBF5')
        ax_main.add_feature(cfeature.COASTLINE, linewidth=1.0)
        ax_main.add_feature(cfeature.BORDERS, linestyle='-', linewidth=0.5, edgecolor='gray')

        gl = ax_main.gridlines(draw_labels=True, linewidth=0.5, color='gray', alpha=0.5, linestyle='--')
        gl.top_labels = False
        gl.right_labels = False

        # Track, then the two end markers
        ax_main.plot(track[:, 0], track[:, 1], '--', linewidth=1.5, color='black',
                     transform=ccrs.PlateCarree(), label='Track')
        ax_main.plot(start_lon, start_lat, 'o', markersize=9, color=self.START_COLOR,
                     transform=ccrs.PlateCarree(), label='Start')
        ax_main.plot(end_lon, end_lat, 'o', markersize=9, color=self.END_COLOR,
                     transform=ccrs.PlateCarree(), label='End')

        for position, lon, lat in ((start, start_lon, start_lat), (end, end_lon, end_lat)):
            _, _, location_str = format_coordinates_cardinal(position)
            ax_main.text(lon + 0.1, lat + 0.1, location_str.replace(", ", "\n"),
                         horizontalalignment='left',
                         transform=ccrs.PlateCarree(),
                         bbox=dict(boxstyle="round,pad=0.3", facecolor='white', alpha=0.8))

        ax_main.legend(loc='lower right')

        if show_inset:
            ax_inset = fig.add_axes((0.62, 0.08, 0.25, 0.25), projection=ccrs.PlateCarree())
            ax_inset.set_global()
            ax_inset.add_feature(cfeature.COASTLINE, linewidth=0.3)

            # Box showing the main map extent
            box_x = [extent[0], extent[1], extent[1], extent[0], extent[0]]
            box_y = [extent[2], extent[2], extent[3], extent[3], extent[2]]
            ax_inset.plot(box_x, box_y, 'r-', linewidth=1, transform=ccrs.PlateCarree())

        fig.suptitle("Voyage of the Thousand Sunny", fontsize=16, weight='bold')

        self.fig = fig

        return fig

    def save(self, filename: str = "voyage", formats: Optional[List[str]] = None) -> List[Path]:
        """
        Save the last plotted figure.

        Args:
            filename: Base filename (without extension)
            formats: List of formats to save in (defaults to PNG)

        Returns:
            List of saved file paths

        Raises:
            ValueError: If no figure has been plotted or no output directory is set
        """
        if self.fig is None:
            raise ValueError("No figure to save. Call plot_voyage() first")
        if self.output_dir is None:
            raise ValueError("No output directory configured")

        saved = export_figure(self.fig, self.output_dir, filename,
                              formats=formats, dpi=self.dpi, close_after=True)
        self.fig = None

        return saved
