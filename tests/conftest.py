"""Configuration for pytest."""

import matplotlib as mpl
import matplotlib.pyplot as plt
import pytest

mpl.use("agg")


@pytest.fixture(autouse=True)
def close_figures():
    """Close the figures created by each test."""
    yield
    plt.close("all")
