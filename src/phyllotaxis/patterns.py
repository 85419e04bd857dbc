"""Functions to initialize 2D phyllotaxis patterns."""

from __future__ import annotations

import numpy as np
import numpy.linalg as nl
from numpy.typing import NDArray

from .maths import generate_fibonacci_circle
from .utils import DEFAULT_NB_POINTS, initialize_algebraic_spiral, initialize_angle


def compute_angles(
    nb_points: int = DEFAULT_NB_POINTS,
    angle: str | float = "golden",
    start: int = 1,
) -> NDArray:
    """Compute the polar angle of every point.

    The angles form the arithmetic progression
    ``t = [start, ..., start + nb_points - 1] * angle``.

    Parameters
    ----------
    nb_points : int, optional
        Number of points, by default 500
    angle : str | float, optional
        Angular step between consecutive points in rad,
        or a name from ``Angles``, by default "golden"
    start : int, optional
        Index of the first point, by default 1

    Returns
    -------
    NDArray
        Angles of shape (nb_points,), in rad.

    Raises
    ------
    ValueError
        If `nb_points` is lower than 1.
    """
    if nb_points < 1:
        raise ValueError(f"At least one point is required (nb_points={nb_points}).")
    step = initialize_angle(angle, nb_points)
    return step * np.arange(start, start + nb_points, dtype=float)


def initialize_circle(
    nb_points: int = DEFAULT_NB_POINTS,
    angle: str | float = "golden",
    radius: float = 1,
) -> NDArray:
    """Initialize points spread over a single circle.

    Parameters
    ----------
    nb_points : int, optional
        Number of points, by default 500
    angle : str | float, optional
        Angular step between consecutive points, by default "golden"
    radius : float, optional
        Radius of the circle, by default 1

    Returns
    -------
    NDArray
        Points of shape (nb_points, 2).
    """
    angles = compute_angles(nb_points, angle)
    return radius * np.stack([np.sin(angles), np.cos(angles)], axis=-1)


def initialize_spiral(
    nb_points: int = DEFAULT_NB_POINTS,
    angle: str | float = "golden",
    spiral: str | float = "archimedes",
    normalize: bool = False,
) -> NDArray:
    r"""Initialize points along an algebraic spiral.

    Each point :math:`i` lies at the polar angle :math:`t_i = i \theta`
    and at the distance :math:`|t_i|^n` from the center, with
    :math:`\theta` the angular step and :math:`n` the spiral power.
    The Archimedes spiral (:math:`n = 1`) gives the usual ``(t sin t, t cos t)``
    pattern while the Fermat spiral (:math:`n = 1/2`) gives a sunflower
    head with a constant density of points.

    Parameters
    ----------
    nb_points : int, optional
        Number of points, by default 500
    angle : str | float, optional
        Angular step between consecutive points, by default "golden"
    spiral : str | float, optional
        Spiral type or algebraic power, by default "archimedes"
    normalize : bool, optional
        Whether to scale the pattern into the unit disk, by default False

    Returns
    -------
    NDArray
        Points of shape (nb_points, 2).

    Raises
    ------
    ValueError
        If `spiral` is not positive.
    """
    spiral_power = initialize_algebraic_spiral(spiral)
    if spiral_power <= 0:
        raise ValueError(f"Negative spiral definition is invalid (spiral={spiral}).")

    angles = compute_angles(nb_points, angle)
    radius = np.abs(angles) ** spiral_power
    points = np.stack([radius * np.sin(angles), radius * np.cos(angles)], axis=-1)

    if normalize:
        max_radius = np.max(nl.norm(points, axis=-1))
        if max_radius > 0:
            points = points / max_radius
    return points


def initialize_sunflower(
    nb_points: int = DEFAULT_NB_POINTS, angle: str | float = "golden"
) -> NDArray:
    """Initialize a sunflower head within the unit disk.

    Shortcut for a normalized Fermat spiral, also known as Vogel's model.

    Parameters
    ----------
    nb_points : int, optional
        Number of points, by default 500
    angle : str | float, optional
        Angular step between consecutive points, by default "golden"

    Returns
    -------
    NDArray
        Points of shape (nb_points, 2).
    """
    return initialize_spiral(nb_points, angle, spiral="fermat", normalize=True)


def initialize_fibonacci_disk(
    nb_points: int = DEFAULT_NB_POINTS, epsilon: float = 0.25
) -> NDArray:
    """Initialize a sunflower head from a warped Fibonacci lattice.

    Parameters
    ----------
    nb_points : int, optional
        Number of points, by default 500
    epsilon : float, optional
        Offset avoiding a point exactly at the center, by default 0.25

    Returns
    -------
    NDArray
        Points of shape (nb_points, 2).
    """
    if nb_points < 1:
        raise ValueError(f"At least one point is required (nb_points={nb_points}).")
    return generate_fibonacci_circle(nb_points, epsilon)


def to_polar(points: NDArray) -> tuple[NDArray, NDArray]:
    r"""Convert points to polar coordinates.

    The angle is measured clockwise from the vertical axis, matching
    the ``(sin t, cos t)`` convention used to create the patterns.

    Parameters
    ----------
    points : NDArray
        Points of shape (N, 2).

    Returns
    -------
    tuple[NDArray, NDArray]
        Radius and angle in :math:`(-\pi, \pi]` of every point.
    """
    points = np.asarray(points)
    return nl.norm(points, axis=-1), np.arctan2(points[..., 0], points[..., 1])
