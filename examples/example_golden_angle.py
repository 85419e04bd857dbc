"""
================
The golden angle
================

Switching the angle to the golden angle turns the spiral into a sunflower,
then the chart decorations are removed and styling is added step by step.

"""

# %%
# The golden angle :math:`\pi(3 - \sqrt{5}) \approx 137.5°` is the angle
# dividing a full turn following the golden ratio. Plants use it to place
# new seeds and leaves as far as possible from the previous ones.
#

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

print(f"golden angle: {ph.GOLDEN_ANGLE:.5f} rad, {np.degrees(ph.GOLDEN_ANGLE):.2f} deg")

# %%
# Golden spiral
# =============
#
# The same Archimedes spiral as before, only the angle changes.

points = ph.initialize_spiral(nb_points, "golden")
show_pattern(points, figure_size)

# %%
# Removing decorations
# ====================
#
# Axes, ticks, labels and grid are useful to read values but not to
# look at a flower. ``decorations=False`` removes all of them and paints
# the background with ``displayConfig.background``.

show_pattern(points, figure_size, decorations=False)

# %%
# The same can be done afterwards on existing axes.

ax = ph.display_pattern(points, figsize=figure_size)
ph.remove_decorations(ax, background="ivory")
plt.show()

# %%
# Styling the points
# ==================
#
# ``sizes (float)``
# -----------------
# Marker area of every point, in points².
#
# ``alpha (float)``
# -----------------
# Transparency of every point, between 0 and 1.
#
# ``colors (str)``
# ----------------
# Any matplotlib color.

show_pattern(
    points,
    figure_size,
    sizes=80,
    alpha=0.5,
    colors="darkgreen",
    decorations=False,
)

# %%
# Angles close to the golden angle
# ================================
#
# Small deviations from the golden angle immediately create gaps and
# visible arms.

angles = [ph.GOLDEN_ANGLE - 0.01, ph.GOLDEN_ANGLE, ph.GOLDEN_ANGLE + 0.01]
show_patterns(
    [ph.initialize_sunflower(nb_points, angle) for angle in angles],
    [f"{np.degrees(angle):.2f}°" for angle in angles],
    subfigure_size,
    sizes=10,
    decorations=False,
)
