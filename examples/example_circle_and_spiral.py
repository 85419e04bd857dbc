"""
=======================
From circles to spirals
=======================

The first steps of a phyllotaxis pattern: points turning around a circle,
then pushed away from the center to draw a spiral.

"""

# %%
# A phyllotaxis pattern is made of points :math:`i = 1, \dots, N`, each one
# rotated by a constant angle :math:`\theta` from the previous one, so
# that the :math:`i`-th point sits at the polar angle :math:`t_i = i\theta`.
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
# These options are used in the examples below as default values for all patterns.

nb_points = 500  # Number of points
angle = 2.0  # Angle between consecutive points, in radians

# Display parameters
figure_size = 6  # Figure size for pattern plots
subfigure_size = 4  # Figure size for subplots


# %%
# Points on a circle
# ==================
#
# The polar angles form an arithmetic progression, and the Cartesian
# coordinates are simply their sine and cosine.

t = ph.compute_angles(nb_points, angle)
print(t[:5])

points = ph.initialize_circle(nb_points, angle)
show_pattern(points, figure_size)

# %%
# All the points land on the unit circle, and since :math:`2` radians is
# not a rational fraction of a full turn they never overlap exactly.
# With a uniform angle, the points close exactly one turn instead.

show_patterns(
    [ph.initialize_circle(24, "uniform"), ph.initialize_circle(24, angle)],
    ["uniform", f"{angle} rad"],
    subfigure_size,
)

# %%
# Making a spiral
# ===============
#
# Multiplying each point by its own angle :math:`t_i` moves it away from
# the center at a constant rate: this is an Archimedes spiral.

spiral = ph.initialize_spiral(nb_points, angle)
np.testing.assert_allclose(spiral, points * t[:, None])
show_pattern(spiral, figure_size)

# %%
# ``spiral (str, float)``
# -----------------------
#
# Other algebraic spirals are available by changing the power applied
# to :math:`t_i`.
#
# - ``"archimedes"``: the distance grows like :math:`t`
# - ``"fermat"``: the distance grows like :math:`\sqrt{t}`, the area
#   covered grows linearly and the density of points stays constant
# - ``"galilean"``: the distance grows like :math:`t^2`
#

arguments = ["archimedes", "fermat", "galilean"]
show_patterns(
    [ph.initialize_spiral(nb_points, angle, spiral=arg) for arg in arguments],
    arguments,
    subfigure_size,
    sizes=4,
)
plt.close("all")
