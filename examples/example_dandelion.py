"""
============================
Dandelions and other flowers
============================

Styling points individually, by mapping their angle to sizes and colors,
and changing the marker shape.

"""

# External
import matplotlib.pyplot as plt
import numpy as np
from utils import show_pattern, show_patterns

# Internal
import phyllotaxis as ph

# %%
# Script options
# ==============

nb_points = 500  # Number of points

# Display parameters
figure_size = 6  # Figure size for pattern plots
subfigure_size = 4  # Figure size for subplots

t = ph.compute_angles(nb_points, "golden")
points = ph.initialize_spiral(nb_points, "golden")

# %%
# Mapping sizes
# =============
#
# When ``sizes`` is an array with one value per point, the values are
# rescaled linearly onto ``displayConfig.size_range``. Using the angle
# :math:`t` makes the outer seeds bigger.

show_pattern(points, figure_size, sizes=t, alpha=0.5, colors="black", decorations=False)

# %%
# Dandelion
# =========
#
# ``marker (str, tuple)``
# -----------------------
# Either a name from ``phyllotaxis.utils.Markers`` or any matplotlib marker.
# The eight-branch ``"asterisk"`` turns the pattern into a dandelion.

show_pattern(
    points,
    figure_size,
    sizes=t,
    alpha=0.5,
    colors="black",
    marker="asterisk",
    decorations=False,
)

# %%
# Mapping colors
# ==============
#
# When ``colors`` is an array of numbers, they are mapped through
# ``displayConfig.palette``.

show_pattern(
    points,
    figure_size,
    sizes=t,
    alpha=0.5,
    colors=t,
    marker="asterisk",
    decorations=False,
)

# %%
# The palette can be a matplotlib colormap name or a list of colors.

with ph.displayConfig(palette=["yellow", "darkorange"], background="black"):
    show_pattern(points, figure_size, sizes=t, colors=t, marker="dandelion", decorations=False)

# %%
# Putting it all together
# =======================
#
# Changing the angle gives very different flowers from the same
# styling. With :math:`13°` the points wrap in tight rings, and with
# :math:`2` radians a few straight arms appear.

angle = 13 * np.pi / 180
t_13 = ph.compute_angles(2000, angle)
with ph.displayConfig(palette="magma", background="black"):
    show_pattern(
        ph.initialize_spiral(2000, angle),
        figure_size,
        sizes=t_13,
        colors=t_13,
        alpha=0.5,
        marker="circle",
        decorations=False,
    )

# %%
# Finally the three angles side by side, using the Fermat spiral.

angles = [2.0, 13 * np.pi / 180, "golden"]
with ph.displayConfig(palette="viridis", decorations=False):
    show_patterns(
        [ph.initialize_sunflower(1000, angle) for angle in angles],
        ["2 rad", "13°", "golden"],
        subfigure_size,
        sizes=ph.compute_angles(1000),
        colors=ph.compute_angles(1000),
        alpha=0.7,
    )
plt.close("all")
