"""digraphkit: weighted directed graphs over arbitrary hashable vertices."""

__version__ = "0.1.0"
