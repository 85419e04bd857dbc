"""Phyllotaxis.

Phyllotaxis generates the spiral arrangements of seeds and leaves found in
plants, by rotating consecutive points with the golden angle, and displays
them as styled scatter plots.
"""

from .patterns import (
    compute_angles,
    initialize_circle,
    initialize_spiral,
    initialize_sunflower,
    initialize_fibonacci_disk,
    to_polar,
)
from .maths import (
    GOLDEN_ANGLE,
    GOLDEN_RATIO,
    compute_angular_gaps,
    compute_nearest_distances,
    compute_voronoi_areas,
)
from .display import displayConfig, display_pattern, remove_decorations

__all__ = [
    # patterns
    "compute_angles",
    "initialize_circle",
    "initialize_spiral",
    "initialize_sunflower",
    "initialize_fibonacci_disk",
    "to_polar",
    # maths
    "GOLDEN_ANGLE",
    "GOLDEN_RATIO",
    "compute_angular_gaps",
    "compute_nearest_distances",
    "compute_voronoi_areas",
    # display
    "displayConfig",
    "display_pattern",
    "remove_decorations",
]

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    # package is not installed
    pass
