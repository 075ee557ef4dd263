"""
Sunny Visualization Package

This package provides voyage charts for the Thousand Sunny's maneuvers.
"""

from .voyage_map import VoyageMapPlotter
from .export import export_figure

__all__ = [
    'VoyageMapPlotter',
    'export_figure'
]
