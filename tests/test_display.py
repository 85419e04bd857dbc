"""Test the display of patterns."""

import warnings

import matplotlib.pyplot as plt
import numpy as np
import numpy.testing as npt
import pytest
from matplotlib.colors import same_color, to_rgba
from pytest_cases import parametrize, parametrize_with_cases

from case_patterns import CasesPatterns
from phyllotaxis import (
    compute_angles,
    displayConfig,
    display_pattern,
    initialize_spiral,
    remove_decorations,
)


@pytest.fixture
def spiral():
    """Golden-angle spiral with few points."""
    return initialize_spiral(50)


@parametrize_with_cases("points, nb_points", cases=CasesPatterns)
def test_display_all_points(points, nb_points):
    """Every point is drawn once."""
    ax = display_pattern(points)
    (scatter,) = ax.collections
    npt.assert_allclose(scatter.get_offsets(), points)


def test_display_defaults(spiral):
    """Without arguments the styling comes from the configuration."""
    ax = display_pattern(spiral)
    scatter = ax.collections[0]
    npt.assert_allclose(scatter.get_sizes(), displayConfig.pointsize)
    assert scatter.get_alpha() == displayConfig.alpha
    assert same_color(scatter.get_facecolor()[0], displayConfig.color)
    assert ax.get_xlabel() == "x"
    assert len(ax.get_xticks()) > 0


def test_display_constant_style(spiral):
    """Constant size, alpha and color apply to every point."""
    ax = display_pattern(spiral, sizes=8, alpha=0.5, colors="darkgreen")
    scatter = ax.collections[0]
    npt.assert_allclose(scatter.get_sizes(), 8)
    assert scatter.get_alpha() == 0.5
    npt.assert_allclose(scatter.get_facecolor()[0][:3], to_rgba("darkgreen")[:3])


def test_display_mapped_sizes(spiral):
    """Sizes given per point are rescaled to the configured range."""
    angles = compute_angles(50)
    with displayConfig(size_range=(1, 10)):
        ax = display_pattern(spiral, sizes=angles)
    sizes = ax.collections[0].get_sizes()
    assert sizes.min() == pytest.approx(1)
    assert sizes.max() == pytest.approx(10)
    assert np.all(np.diff(sizes) > 0)


def test_display_constant_mapped_sizes(spiral):
    """A constant array of sizes falls back to the default size."""
    with pytest.warns(UserWarning, match="Constant sizes"):
        ax = display_pattern(spiral, sizes=np.ones(50))
    npt.assert_allclose(ax.collections[0].get_sizes(), displayConfig.pointsize)


def test_display_mapped_colors(spiral):
    """Numbers given per point are mapped through the palette."""
    angles = compute_angles(50)
    with displayConfig(palette="magma"):
        ax = display_pattern(spiral, colors=angles)
    scatter = ax.collections[0]
    npt.assert_allclose(scatter.get_array(), angles)
    assert scatter.get_cmap().name == "magma"


def test_display_list_of_colors():
    """Colors can be given point by point."""
    points = initialize_spiral(3)
    ax = display_pattern(points, colors=["red", "green", "blue"])
    facecolors = ax.collections[0].get_facecolor()
    for facecolor, color in zip(facecolors, ["red", "green", "blue"]):
        assert same_color(facecolor, color)


def test_display_list_of_numbers_is_mapped():
    """A plain list of numbers is mapped like an array."""
    points = initialize_spiral(3)
    ax = display_pattern(points, colors=[0.1, 0.5, 0.9])
    npt.assert_allclose(ax.collections[0].get_array(), [0.1, 0.5, 0.9])


def test_display_rgb_tuple_is_single_color():
    """A tuple of three numbers is one RGB color."""
    points = initialize_spiral(3)
    ax = display_pattern(points, colors=(0.1, 0.5, 0.9))
    scatter = ax.collections[0]
    assert scatter.get_array() is None
    for facecolor in scatter.get_facecolor():
        assert same_color(facecolor, (0.1, 0.5, 0.9))


def test_display_palette_from_list(spiral):
    """A list of colors can be used as palette."""
    with displayConfig(palette=["white", "orange"]):
        ax = display_pattern(spiral, colors=np.arange(50))
    ax.figure.canvas.draw()
    assert same_color(ax.collections[0].get_facecolor()[-1], "orange")


@parametrize("marker", ["asterisk", "plus", "x"])
def test_display_unfilled_markers(spiral, marker):
    """Unfilled markers are drawn with their face color."""
    with warnings.catch_warnings(record=True) as record:
        warnings.simplefilter("always")
        ax = display_pattern(spiral, marker=marker, colors="darkgreen")
    assert not any("edgecolor" in str(w.message) for w in record)
    assert same_color(ax.collections[0].get_facecolor()[0], "darkgreen")


def test_remove_decorations(spiral):
    """Axes, ticks, labels, grid and frame are removed."""
    ax = display_pattern(spiral, title="dandelion")
    remove_decorations(ax, background="black")
    assert len(ax.get_xticks()) == 0
    assert len(ax.get_yticks()) == 0
    assert ax.get_xlabel() == ""
    assert ax.get_title() == ""
    assert not any(spine.get_visible() for spine in ax.spines.values())
    assert not any(line.get_visible() for line in ax.xaxis.get_gridlines())
    assert same_color(ax.get_facecolor(), "black")
    assert same_color(ax.figure.get_facecolor(), "black")


def test_display_without_decorations_keeps_title(spiral):
    """An explicit title survives the removal of decorations."""
    with displayConfig(decorations=False, background="white"):
        ax = display_pattern(spiral, title="sunflower")
    assert ax.get_title() == "sunflower"
    assert len(ax.get_xticks()) == 0
    assert same_color(ax.get_facecolor(), "white")


def test_display_on_existing_axes(spiral):
    """Patterns can be drawn on given axes."""
    fig, axs = plt.subplots(1, 2)
    ax = display_pattern(spiral, subfigure=axs[1])
    assert ax is axs[1]
    assert len(axs[0].collections) == 0


@parametrize(
    "kwargs, match",
    [
        ({"alpha": 1.5}, "Alpha"),
        ({"alpha": -0.1}, "Alpha"),
        ({"sizes": -1}, "size"),
        ({"sizes": np.arange(3)}, "sizes"),
        ({"colors": "not-a-color"}, "color"),
        ({"colors": ["red", "blue"]}, "colors"),
        ({"colors": ["red"] * 49 + ["nope"]}, "Invalid colors"),
        ({"marker": "blob"}, "marker"),
    ],
)
def test_display_invalid_style(spiral, kwargs, match):
    """Invalid styling arguments raise before drawing."""
    with pytest.raises(ValueError, match=match):
        display_pattern(spiral, **kwargs)
    assert len(plt.get_fignums()) == 0


def test_display_invalid_edgecolor(spiral):
    """An invalid edge color raises before drawing."""
    with displayConfig(edgecolor="blorp"):
        with pytest.raises(ValueError, match="edge color"):
            display_pattern(spiral)
    assert len(plt.get_fignums()) == 0


def test_display_invalid_points():
    """Only 2D points can be displayed."""
    with pytest.raises(ValueError, match="shape"):
        display_pattern(np.zeros((10, 3)))


def test_invalid_background(spiral):
    """The background must be a valid color."""
    ax = display_pattern(spiral)
    with pytest.raises(ValueError, match="background"):
        remove_decorations(ax, background="transparent-ish")


def test_config_context_manager():
    """The context manager restores the previous values."""
    alpha, marker = displayConfig.alpha, displayConfig.marker
    with displayConfig(alpha=0.3, marker="asterisk"):
        assert displayConfig.alpha == 0.3
        assert displayConfig.marker == "asterisk"
    assert displayConfig.alpha == alpha
    assert displayConfig.marker == marker


def test_config_unknown_option():
    """Unknown options are rejected without changing anything."""
    alpha = displayConfig.alpha
    with pytest.raises(AttributeError, match="Unknown display option"):
        displayConfig(alpha=0.1, linewidth=3)
    assert displayConfig.alpha == alpha


def test_config_unknown_palette(spiral):
    """Unknown palettes are reported."""
    with displayConfig(palette="not-a-palette"):
        with pytest.raises(ValueError, match="palette"):
            display_pattern(spiral, colors=np.arange(50))


def test_config_methods_are_not_options():
    """Methods of the configuration cannot be overwritten as options."""
    with pytest.raises(AttributeError, match="Unknown display option"):
        displayConfig(reset=1)
    assert callable(displayConfig.reset)
    with displayConfig(alpha=0.4):
        assert displayConfig.alpha == 0.4
