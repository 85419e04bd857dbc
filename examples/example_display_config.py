"""
=============================
Pattern display configuration
=============================

The look of the displayed patterns can be tweaked by using :py:class:`displayConfig`

You can tune these parameters to your own taste and needs.
"""

import matplotlib.pyplot as plt

from phyllotaxis import displayConfig, display_pattern, initialize_sunflower

# %%
# Pattern parameters
nb_points = 610  # Number of points

# Display parameters
subfigure_size = 4  # Figure size for subplots


# %%


def show_pattern(points, name, values, **kwargs):
    fig, axs = plt.subplots(
        1,
        len(values),
        figsize=(subfigure_size * len(values), subfigure_size),
    )
    for ax, val in zip(axs, values):
        with displayConfig(**{name: val}):
            display_pattern(points, subfigure=ax, **kwargs)
            ax.set_title(f"{name}={val}", fontsize=3 * subfigure_size)
    plt.show()


# %%
#
# Pattern displays
# ================
# To show case the display parameters of patterns, we will use a sunflower head.

points = initialize_sunflower(nb_points)
values = points[:, 0] ** 2 + points[:, 1] ** 2

# %%
# ``pointsize``
# -------------
# The default area of the points, when no ``sizes`` are given.
show_pattern(points, "pointsize", [2, 10, 40])

# %%
# ``alpha``
# ---------
# The transparency of the points.
show_pattern(points, "alpha", [0.2, 0.5, 1.0], sizes=40)

# %%
# ``palette``
# -----------
# The ``palette`` parameter allows to change the color mapping.
show_pattern(points, "palette", ["viridis", "magma", "jet"], colors=values)

# %%
# ``marker``
# ----------
# Named markers or raw matplotlib markers.
show_pattern(points, "marker", ["circle", "asterisk", "h"], colors="darkgreen")

# %%
# ``size_range``
# --------------
# The range onto which mapped sizes are rescaled.
show_pattern(points, "size_range", [(1, 10), (5, 40), (0, 100)], sizes=values)

# %%
# ``background`` and ``decorations``
# ----------------------------------
# Without decorations, the background color is painted behind the pattern.
with displayConfig(decorations=False):
    show_pattern(points, "background", ["white", "ivory", "black"], colors="orange")

# %%
# ``edgecolor``
# -------------
# Outline of filled markers.
show_pattern(points, "edgecolor", ["none", "black"], colors="gold", sizes=40)
plt.close("all")
