"""
Export Module

This module provides functions to export voyage charts.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union, List

import matplotlib.pyplot as plt

# Configure logger
logger = logging.getLogger(__name__)

DEFAULT_METADATA = {"Title": "Voyage of the Thousand Sunny"}


def export_figure(fig: plt.Figure,
                  output_dir: Union[str, Path],
                  filename: str,
                  formats: Optional[List[str]] = None,
                  dpi: int = 150,
                  metadata: Optional[Dict[str, str]] = None,
                  close_after: bool = False) -> List[Path]:
    """
    Export a figure to disk in one or more formats.

    A format that fails to save is logged and skipped.

    Args:
        fig: Matplotlib figure to export
        output_dir: Directory to save figure in (created if missing)
        filename: Base filename (without extension)
        formats: List of formats to save in (defaults to PNG only)
        dpi: Resolution for raster formats
        metadata: Metadata embedded in PNG and PDF files
        close_after: Whether to close the figure after saving

    Returns:
        List of saved file paths
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    if formats is None:
        formats = ['png']

    if metadata is None:
        metadata = DEFAULT_METADATA

    saved_files = []

    for fmt in formats:
        output_path = output_dir / f"{filename}.{fmt}"
        logger.info(f"Saving figure to {output_path}")

        try:
            fig.savefig(output_path, dpi=dpi, bbox_inches='tight',
                        metadata=metadata if fmt in ('png', 'pdf') else None)
            saved_files.append(output_path)
        except (OSError, ValueError) as e:
            logger.error(f"Error saving figure to {output_path}: {e}")

    if close_after:
        plt.close(fig)

    return saved_files
