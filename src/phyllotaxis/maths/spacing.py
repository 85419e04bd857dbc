"""Measures of how evenly points are spread."""

import numpy as np
from numpy.typing import NDArray
from scipy.spatial import ConvexHull, Voronoi, cKDTree


def _flat_points(points: NDArray) -> NDArray:
    points = np.asarray(points, dtype=float)
    return points.reshape((-1, points.shape[-1]))


def compute_nearest_distances(points: NDArray) -> NDArray:
    """Compute the distance from each point to its nearest neighbour.

    Parameters
    ----------
    points : NDArray
        Array of shape (N, 2) with the point coordinates.

    Returns
    -------
    NDArray
        Array of shape (N,) with the nearest neighbour distances.

    Raises
    ------
    ValueError
        If less than two points are provided.
    """
    points = _flat_points(points)
    if len(points) < 2:
        raise ValueError("At least two points are needed to compute distances.")
    distances, _ = cKDTree(points).query(points, k=2)
    return distances[:, 1]


def compute_voronoi_areas(points: NDArray) -> NDArray:
    """Compute the area of the Voronoi cell around each point.

    Cells on the outer border are not bounded, their area is set
    to ``np.inf``.

    Parameters
    ----------
    points : NDArray
        Array of shape (N, 2) with the point coordinates.

    Returns
    -------
    NDArray
        Array of shape (N,) with the cell areas.

    Raises
    ------
    ValueError
        If the points are not two-dimensional or not distinct.
    """
    points = _flat_points(points)
    if points.shape[-1] != 2:
        raise ValueError(f"Expected 2D points, got {points.shape[-1]}D.")
    if len(np.unique(points, axis=0)) != len(points):
        raise ValueError("Voronoi areas require distinct points.")

    vor = Voronoi(points)
    areas = np.full(len(points), np.inf)
    for i, region_id in enumerate(vor.point_region):
        region = vor.regions[region_id]
        if len(region) == 0 or -1 in region:
            continue
        # Voronoi cells are convex, so the hull "volume" is the cell area
        areas[i] = ConvexHull(vor.vertices[region]).volume
    return areas


def compute_angular_gaps(angles: NDArray) -> NDArray:
    r"""Compute the gaps between angles once wrapped around the circle.

    With the golden angle, the first :math:`N` multiples split the circle
    into gaps of at most three different lengths (three-gap theorem), the
    largest being the sum of the two others.

    Parameters
    ----------
    angles : NDArray
        Angles in rad, of any shape.

    Returns
    -------
    NDArray
        Gaps in rad between consecutive wrapped angles, in circular order.
        They sum to :math:`2\pi`.

    Raises
    ------
    ValueError
        If no angle is provided.
    """
    wrapped = np.sort(np.mod(np.ravel(angles), 2 * np.pi))
    if wrapped.size == 0:
        raise ValueError("At least one angle is needed to compute gaps.")
    return np.diff(wrapped, append=wrapped[0] + 2 * np.pi)
