"""
==================
Why the golden one
==================

Measuring how evenly seeds are spread depending on the angle.

"""

# %%
# A good seed arrangement leaves no gap and no crowded region. Three
# measures help compare angles: the distance to the nearest neighbour,
# the area of the Voronoi cell around each seed, and the gaps between
# directions once the angles are wrapped on the circle.
#

# External
import matplotlib.pyplot as plt
import numpy as np

# Internal
import phyllotaxis as ph

nb_points = 500
angles = {"2 rad": 2.0, "13°": 13 * np.pi / 180, "golden": "golden"}

# %%
# Nearest neighbours
# ==================
#
# With the golden angle, the closest seeds are further apart than with
# other angles.

fig, ax = plt.subplots(figsize=(6, 4))
for name, angle in angles.items():
    distances = ph.compute_nearest_distances(ph.initialize_sunflower(nb_points, angle))
    ax.hist(distances, bins=40, alpha=0.5, label=name)
    print(f"{name:>8}: min {np.min(distances):.4f}, mean {np.mean(distances):.4f}")
ax.set_xlabel("Distance to the nearest seed")
ax.legend()
plt.show()

# %%
# Voronoi cells
# =============
#
# Every seed of a golden sunflower gets almost the same share of the disk,
# :math:`\pi / N`.

points = ph.initialize_sunflower(nb_points)
areas = ph.compute_voronoi_areas(points)
finite = np.isfinite(areas)
print(f"median area {np.median(areas[finite]):.5f}, expected {np.pi / nb_points:.5f}")

ax = ph.display_pattern(
    points[finite], colors=areas[finite] * nb_points / np.pi, sizes=30
)
ax.set_title("Relative Voronoi area")
plt.show()

# %%
# Three gaps
# ==========
#
# Whatever the number of points, the golden-angle directions only cut the
# circle into three different gap lengths.

for nb in [10, 50, 500]:
    gaps = ph.compute_angular_gaps(ph.compute_angles(nb, "golden"))
    print(nb, np.unique(np.round(gaps, 6)))
plt.close("all")
