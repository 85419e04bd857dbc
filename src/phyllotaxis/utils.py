"""Utility functions in general."""

from __future__ import annotations

import warnings
from enum import Enum, EnumMeta
from numbers import Real
from typing import Any

import numpy as np
from matplotlib.markers import MarkerStyle

from .maths.constants import GOLDEN_ANGLE, GOLDEN_RATIO  # noqa: F401

#############
# CONSTANTS #
#############

DEFAULT_NB_POINTS = 500


#########
# ENUMS #
#########


class CaseInsensitiveEnumMeta(EnumMeta):
    """A case-insensitive EnumMeta."""

    def __getitem__(self, name: str) -> Enum:
        """Allow ``MyEnum['Member'] == MyEnum['MEMBER']`` ."""
        return super().__getitem__(name.upper().replace("-", "_"))

    def __getattr__(self, name: str) -> Any:  # noqa ANN401
        """Allow ``MyEnum.Member == MyEnum.MEMBER`` ."""
        return super().__getattribute__(name.upper())


class FloatEnum(float, Enum, metaclass=CaseInsensitiveEnumMeta):
    """An Enum for float that is case insensitive for its attributes."""

    pass


class StrEnum(str, Enum, metaclass=CaseInsensitiveEnumMeta):
    """An Enum for str that is case insensitive for its attributes."""

    pass


class Spirals(FloatEnum):
    """Enumerate algebraic spiral types, as powers of ``r = t ** n``."""

    ARCHIMEDES = 1
    ARITHMETIC = ARCHIMEDES
    GALILEAN = 2
    GALILEO = GALILEAN
    FERMAT = 0.5
    PARABOLIC = FERMAT
    VOGEL = FERMAT


class Angles(StrEnum):
    r"""Enumerate available angular steps between consecutive points.

    Notes
    -----
    The following values are accepted for the angle name, with :math:`N` the
    number of points:

    - "none": no rotation, all points share the same direction
    - "uniform": uniform step :math:`2\pi / N`, closing exactly one turn
    - "golden": golden angle :math:`\pi(3-\sqrt{5})`
    - "golden-complement": :math:`2\pi - \pi(3-\sqrt{5})`, the same spacing
      travelled clockwise

    """

    NONE = "none"
    UNIFORM = "uniform"
    GOLDEN = "golden"
    GOLDEN_COMPLEMENT = "golden-complement"


class Markers(Enum, metaclass=CaseInsensitiveEnumMeta):
    """Enumerate human-readable names for matplotlib markers."""

    CIRCLE = "o"
    POINT = "."
    SQUARE = "s"
    TRIANGLE = "^"
    DIAMOND = "D"
    STAR = "*"
    PLUS = "+"
    CROSS = "x"
    HEXAGON = "h"
    ASTERISK = (8, 2, 0)  # eight branches, unfilled
    DANDELION = ASTERISK


###########
# OPTIONS #
###########


def initialize_angle(angle: str | float | None, nb_points: int = 1) -> float:
    r"""Initialize the angular step between consecutive points.

    Parameters
    ----------
    angle : str | float | None
        Angle in rad or name of the angle.
    nb_points : int, optional
        Number of points, only used by ``"uniform"``. The default is 1.

    Returns
    -------
    float
        Angle in rad.

    Raises
    ------
    NotImplementedError
        If the angle name is unknown.

    See Also
    --------
    Angles
    """
    if isinstance(angle, Real):
        if abs(angle) > 2 * np.pi:
            warnings.warn(
                f"Angle {angle} is larger than 2 pi, "
                "angles are expected in radians, not degrees."
            )
        return float(angle)
    elif angle is None:
        return 0.0
    name = angle.lower() if isinstance(angle, str) else angle
    if name == Angles.NONE:
        return 0.0
    elif name == Angles.UNIFORM:
        return 2 * np.pi / nb_points
    elif name == Angles.GOLDEN:
        return GOLDEN_ANGLE
    elif name == Angles.GOLDEN_COMPLEMENT:
        return 2 * np.pi - GOLDEN_ANGLE
    else:
        raise NotImplementedError(f"Unknown angle name: {angle}")


def initialize_algebraic_spiral(spiral: str | float) -> float:
    """Initialize the algebraic spiral type.

    Parameters
    ----------
    spiral : str | float
        Spiral type or spiral power value.

    Returns
    -------
    float
        Spiral power value.
    """
    if isinstance(spiral, Real):
        return float(spiral)
    try:
        return float(Spirals[spiral])
    except KeyError:
        raise NotImplementedError(f"Unknown spiral name: {spiral}") from None


def initialize_marker(marker: str | tuple | Markers) -> str | tuple:
    """Initialize a matplotlib marker from a name or a raw marker code.

    Parameters
    ----------
    marker : str | tuple | Markers
        Marker name from ``Markers`` (e.g. ``"asterisk"``), or any marker
        accepted by ``matplotlib.markers.MarkerStyle``.

    Returns
    -------
    str | tuple
        Marker usable by ``matplotlib.axes.Axes.scatter``.

    Raises
    ------
    ValueError
        If matplotlib does not know the marker.
    """
    if isinstance(marker, Markers):
        return marker.value
    if isinstance(marker, str) and len(marker) > 1 and not marker.startswith("$"):
        try:
            return Markers[marker].value
        except KeyError:
            pass
    try:
        MarkerStyle(marker)
    except (ValueError, TypeError):
        raise ValueError(f"Unknown marker: {marker!r}") from None
    return marker
