"""
Density simulations.

Grow random graphs of increasing density and tabulate how often the
sampled graphs are bipartite in each density range.
"""

from .density import DEFAULT_THRESHOLDS, DensitySimulation, classify_density, make_buckets

__all__ = [
    "DEFAULT_THRESHOLDS",
    "DensitySimulation",
    "classify_density",
    "make_buckets",
]
