"""Fibonacci-related functions."""

import math

import numpy as np

from .constants import GOLDEN_RATIO


def is_from_fibonacci_sequence(n: int) -> bool:
    """Check if an integer belongs to the Fibonacci sequence.

    An integer belongs to the Fibonacci sequence if either
    :math:`5*n²+4` or :math:`5*n²-4` is a perfect square
    (`Wikipedia <https://en.wikipedia.org/wiki/Fibonacci_sequence#Recognizing_Fibonacci_numbers>`_).

    Parameters
    ----------
    n : int
        Integer to check.

    Returns
    -------
    bool
        Whether or not ``n`` belongs to the Fibonacci sequence.
    """
    if n < 0:
        return False

    def _is_perfect_square(m: int) -> bool:
        if m < 0:
            return False
        r = math.isqrt(m)
        return r * r == m

    return _is_perfect_square(5 * n**2 + 4) or _is_perfect_square(5 * n**2 - 4)


def get_closest_fibonacci_number(x: float) -> int:
    """Provide the closest Fibonacci number.

    Sunflower heads show spiral counts (parastichies) taken from the
    Fibonacci sequence, which makes these numbers natural point counts.

    Parameters
    ----------
    x : float
        Value to match.

    Returns
    -------
    int
        Closest number from the Fibonacci sequence, the lower one on ties.
    """
    lower, upper = 0, 1
    while upper < x:
        lower, upper = upper, lower + upper
    return lower if (x - lower) <= (upper - x) else upper


def generate_fibonacci_lattice(nb_points: int, epsilon: float = 0.25) -> np.ndarray:
    """Generate 2D Cartesian coordinates using the Fibonacci lattice.

    Place 2D points over a 1x1 square, the first coordinate stepping
    by the inverse golden ratio modulo 1 and the second one linearly.

    Parameters
    ----------
    nb_points : int
        Number of 2D points to generate.
    epsilon : float
        Continuous offset used to reduce initially wrong lattice behavior.

    Returns
    -------
    np.ndarray
        Array of 2D Cartesian coordinates covering a 1x1 square.

    Raises
    ------
    ValueError
        If a single point is requested without a positive offset.
    """
    span = nb_points - 1 + 2 * epsilon
    if span <= 0:
        raise ValueError(
            f"A positive epsilon is required for a single point (epsilon={epsilon})."
        )
    index = np.arange(nb_points)
    return np.stack([(index / GOLDEN_RATIO) % 1, (index + epsilon) / span], axis=-1)


def generate_fibonacci_circle(nb_points: int, epsilon: float = 0.25) -> np.ndarray:
    """Generate 2D Cartesian coordinates shaped as a sunflower head.

    Warp a square Fibonacci lattice onto the unit disk, using the square
    root of the second coordinate as radius so that the area covered by
    each point stays constant.

    Parameters
    ----------
    nb_points : int
        Number of 2D points to generate.
    epsilon : float
        Continuous offset used to reduce initially wrong lattice behavior.

    Returns
    -------
    np.ndarray
        Array of 2D Cartesian coordinates covering a circle of radius 1.
    """
    lattice = generate_fibonacci_lattice(nb_points, epsilon)
    radius = np.sqrt(lattice[:, 1])
    angles = 2 * np.pi * lattice[:, 0]

    circle = np.zeros((nb_points, 2))
    circle[:, 0] = radius * np.sin(angles)
    circle[:, 1] = radius * np.cos(angles)
    return circle
