"""Display configuration class."""

from __future__ import annotations

from typing import Any

import matplotlib as mpl
from matplotlib.colors import Colormap, ListedColormap


class displayConfig:
    """
    A container class used to share arguments related to display.

    The values can be updated either directy (and permanently) or temporarily by using
    a context manager.

    Examples
    --------
    >>> from phyllotaxis.display import displayConfig
    >>> displayConfig.alpha
    1.0
    >>> with displayConfig(alpha=0.5):
            print(displayConfig.alpha)
    0.5
    >>> displayConfig.alpha
    1.0
    """

    pointsize: float = 20
    """Marker area of the points in points², by default ``20``."""
    alpha: float = 1.0
    """Transparency of the points, by default ``1.0`` (opaque)."""
    color: str = "k"
    """Matplotlib color of the points without color mapping, by default ``"k"``."""
    palette: str = "viridis"
    """Name of the color palette used to map values to colors,
    by default ``"viridis"``. This can be any of the matplotlib colormaps,
    or a list of colors."""
    marker: str | tuple = "o"
    """Marker name or matplotlib marker code, by default ``"o"``."""
    edgecolor: str = "none"
    """Matplotlib color for the outline of filled markers,
    by default ``"none"``."""
    background: str = "white"
    """Matplotlib color used behind undecorated patterns, by default ``"white"``."""
    figsize: float = 6
    """Size of new square figures in inches, by default ``6``."""
    fontsize: int = 14
    """Font size for labels and titles, by default ``14``."""
    decorations: bool = True
    """Whether to show axes, ticks, labels and grid, by default ``True``."""
    size_range: tuple[float, float] = (2, 60)
    """Range of marker areas used when sizes are mapped from values,
    by default ``(2, 60)``."""

    def __init__(self, **kwargs: Any) -> None:  # noqa ANN401
        """Update the display configuration."""
        self.update(**kwargs)

    def update(self, **kwargs: Any) -> None:  # noqa ANN401
        """Update the display configuration."""
        for key in kwargs:
            if key not in displayConfig.__annotations__:
                raise AttributeError(f"Unknown display option: {key}")
        self._old_values = {}
        for key, value in kwargs.items():
            self._old_values[key] = getattr(displayConfig, key)
            setattr(displayConfig, key, value)

    def reset(self) -> None:
        """Restore the display configuration."""
        for key, value in self._old_values.items():
            setattr(displayConfig, key, value)
        delattr(self, "_old_values")

    def __enter__(self) -> displayConfig:
        """Enter the context manager."""
        return self

    def __exit__(self, *args: Any) -> None:  # noqa ANN401
        """Exit the context manager."""
        self.reset()

    @classmethod
    def get_colormap(cls) -> Colormap:
        """Resolve the palette into a matplotlib colormap.

        Returns
        -------
        Colormap
            Colormap named by ``palette``, built from its list of colors,
            or ``palette`` itself when it already is a colormap.

        Raises
        ------
        ValueError
            If the palette is neither a colormap name, a colormap nor a list.
        """
        if isinstance(cls.palette, str):
            try:
                return mpl.colormaps[cls.palette]
            except KeyError:
                raise ValueError(f"Unknown palette: {cls.palette}") from None
        elif isinstance(cls.palette, Colormap):
            return cls.palette
        elif isinstance(cls.palette, (list, tuple)):
            return ListedColormap(cls.palette)
        raise ValueError(f"Invalid palette: {cls.palette!r}")
