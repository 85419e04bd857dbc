"""Utility module for mathematical operations."""

from .constants import CIRCLE_PACKING_DENSITY, GOLDEN_ANGLE, GOLDEN_RATIO
from .fibonacci import (
    generate_fibonacci_circle,
    generate_fibonacci_lattice,
    get_closest_fibonacci_number,
    is_from_fibonacci_sequence,
)
from .spacing import (
    compute_angular_gaps,
    compute_nearest_distances,
    compute_voronoi_areas,
)

__all__ = [
    "CIRCLE_PACKING_DENSITY",
    "GOLDEN_ANGLE",
    "GOLDEN_RATIO",
    "generate_fibonacci_circle",
    "generate_fibonacci_lattice",
    "get_closest_fibonacci_number",
    "is_from_fibonacci_sequence",
    "compute_angular_gaps",
    "compute_nearest_distances",
    "compute_voronoi_areas",
]
