"""Display functions for patterns."""

from phyllotaxis.display.config import displayConfig
from phyllotaxis.display.patterns import display_pattern, remove_decorations

__all__ = [
    "displayConfig",
    "display_pattern",
    "remove_decorations",
]
