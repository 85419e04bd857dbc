"""
This module contains visualisation functions only relevant to
the examples.
"""

# External imports
import matplotlib.pyplot as plt

# Internal imports
from phyllotaxis import display_pattern


def show_pattern(points, figure_size, **kwargs):
    display_pattern(points, figsize=figure_size, **kwargs)
    plt.tight_layout()
    plt.show()


def show_patterns(patterns, titles, subfigure_size, **kwargs):
    fig, axs = plt.subplots(
        1, len(patterns), figsize=(subfigure_size * len(patterns), subfigure_size)
    )
    for ax, points, title in zip(axs, patterns, titles):
        display_pattern(points, subfigure=ax, title=title, **kwargs)
    plt.tight_layout()
    plt.show()
