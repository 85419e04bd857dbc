"""Constant values for mathematical purposes."""

import numpy as np

GOLDEN_RATIO = (1 + np.sqrt(5)) / 2
GOLDEN_ANGLE = np.pi * (3 - np.sqrt(5))
CIRCLE_PACKING_DENSITY = np.pi / (2 * np.sqrt(3))
