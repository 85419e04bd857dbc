"""Pattern display functions: display_pattern, remove_decorations."""

from __future__ import annotations

import warnings
from numbers import Real

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import is_color_like
from matplotlib.markers import MarkerStyle
from numpy.typing import ArrayLike, NDArray

from phyllotaxis.display.config import displayConfig
from phyllotaxis.utils import initialize_marker


def _setup_2D_axes(
    figsize: float,
    fig: plt.Figure | plt.Axes | None = None,
) -> plt.Axes:
    """Create square 2D axes with grid and labels."""
    if fig is None:
        fig = plt.figure(figsize=(figsize, figsize))
    ax = fig if (isinstance(fig, plt.Axes)) else fig.subplots()
    ax.set_aspect("equal")
    ax.grid(True)
    ax.set_axisbelow(True)
    ax.set_xlabel("x", fontsize=displayConfig.fontsize)
    ax.set_ylabel("y", fontsize=displayConfig.fontsize)
    return ax


def _check_alpha(alpha: float) -> float:
    if not isinstance(alpha, Real) or not 0 <= alpha <= 1:
        raise ValueError(f"Alpha should be a number within [0, 1] (alpha={alpha}).")
    return float(alpha)


def _resolve_sizes(sizes: float | ArrayLike | None, nb_points: int) -> float | NDArray:
    """Turn ``sizes`` into marker areas, mapping arrays onto ``size_range``."""
    if sizes is None:
        sizes = displayConfig.pointsize
    if isinstance(sizes, Real):
        if sizes < 0:
            raise ValueError(f"Point size should not be negative (sizes={sizes}).")
        return float(sizes)

    values = np.asarray(sizes, dtype=float)
    if values.shape != (nb_points,):
        raise ValueError(
            f"Expected {nb_points} sizes to match the points, got {values.shape}."
        )
    low, high = displayConfig.size_range
    if low < 0 or high < low:
        raise ValueError(f"Invalid size range: {displayConfig.size_range}.")
    span = np.ptp(values)
    if span == 0:
        warnings.warn("Constant sizes provided, using displayConfig.pointsize.")
        return np.full(nb_points, float(displayConfig.pointsize))
    return low + (high - low) * (values - np.min(values)) / span


def _resolve_colors(colors: str | ArrayLike | None, nb_points: int) -> dict:
    """Build the color keywords of ``Axes.scatter``.

    A single color (name or RGB(A) tuple) is applied to every point, a list
    of colors is applied point by point, and a list or array of numbers is
    mapped through the palette.
    """
    if colors is None:
        colors = displayConfig.color
    if isinstance(colors, (str, tuple)) and is_color_like(colors):
        return {"color": colors}
    if isinstance(colors, str) or np.ndim(colors) == 0:
        raise ValueError(f"Invalid color: {colors!r}")

    if len(colors) != nb_points:
        raise ValueError(
            f"Expected {nb_points} colors to match the points, got {len(colors)}."
        )
    values = np.asarray(colors)
    if values.ndim == 1 and np.issubdtype(values.dtype, np.number):
        return {"c": values, "cmap": displayConfig.get_colormap()}
    invalid = [c for c in colors if not is_color_like(c)]
    if invalid:
        raise ValueError(f"Invalid colors: {invalid[:5]!r}")
    return {"color": list(colors)}


def remove_decorations(ax: plt.Axes, background: str | None = None) -> plt.Axes:
    """Remove axes, ticks, labels, grid and frame around a pattern.

    Parameters
    ----------
    ax : plt.Axes
        Axes to clean.
    background : str, optional
        Matplotlib color painted behind the pattern.
        The default is `None`, and the value is read from
        ``displayConfig.background``.

    Returns
    -------
    ax : plt.Axes
        The same axes.

    Raises
    ------
    ValueError
        If `background` is not a valid color.
    """
    background = displayConfig.background if background is None else background
    if not is_color_like(background):
        raise ValueError(f"Invalid background color: {background!r}")

    ax.grid(False)
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_xlabel("")
    ax.set_ylabel("")
    ax.set_title("")
    for spine in ax.spines.values():
        spine.set_visible(False)
    ax.set_facecolor(background)
    ax.figure.patch.set_facecolor(background)
    return ax


def display_pattern(
    points: NDArray,
    sizes: float | ArrayLike | None = None,
    colors: str | ArrayLike | None = None,
    alpha: float | None = None,
    marker: str | tuple | None = None,
    subfigure: plt.Figure | plt.Axes | None = None,
    figsize: float | None = None,
    decorations: bool | None = None,
    title: str | None = None,
) -> plt.Axes:
    """Display a 2D pattern as scatter points.

    Every styling argument left to `None` is read from ``displayConfig``.

    Parameters
    ----------
    points : NDArray
        Points of shape (N, 2) to display.
    sizes : float or array_like, optional
        Marker area in points², or N values mapped linearly onto
        ``displayConfig.size_range``.
    colors : str or array_like, optional
        A single matplotlib color, N matplotlib colors, or N numbers
        mapped through ``displayConfig.palette``.
    alpha : float, optional
        Transparency of the points within [0, 1].
    marker : str or tuple, optional
        Marker name (e.g. ``"asterisk"``) or matplotlib marker code.
    subfigure: plt.Figure, plt.SubFigure or plt.Axes, optional
        The figure where the pattern should be displayed.
        The default is `None`.
    figsize : float, optional
        Size of the figure created when `subfigure` is `None`.
    decorations : bool, optional
        Whether to keep axes, ticks, labels and grid.
        If `False`, they are removed with `remove_decorations`.
    title : str, optional
        Title of the axes, kept even without decorations.

    Returns
    -------
    ax : plt.Axes
        Axes of the figure.

    Raises
    ------
    ValueError
        If the points are not 2D or a styling argument is invalid.
    """
    points = np.asarray(points)
    if points.ndim != 2 or points.shape[-1] != 2:
        raise ValueError(f"Expected points of shape (N, 2), got {points.shape}.")
    nb_points = len(points)

    # Check every style argument before drawing anything
    alpha = _check_alpha(displayConfig.alpha if alpha is None else alpha)
    marker = initialize_marker(displayConfig.marker if marker is None else marker)
    sizes = _resolve_sizes(sizes, nb_points)
    color_kwargs = _resolve_colors(colors, nb_points)
    if not is_color_like(displayConfig.edgecolor):
        raise ValueError(f"Invalid edge color: {displayConfig.edgecolor!r}")
    if MarkerStyle(marker).is_filled():
        color_kwargs["edgecolors"] = displayConfig.edgecolor
    decorations = displayConfig.decorations if decorations is None else decorations
    if not decorations and not is_color_like(displayConfig.background):
        raise ValueError(f"Invalid background color: {displayConfig.background!r}")

    ax = _setup_2D_axes(figsize or displayConfig.figsize, subfigure)
    ax.scatter(
        points[:, 0],
        points[:, 1],
        s=sizes,
        alpha=alpha,
        marker=marker,
        **color_kwargs,
    )

    if not decorations:
        remove_decorations(ax)
    if title is not None:
        ax.set_title(title, fontsize=displayConfig.fontsize)
    return ax
