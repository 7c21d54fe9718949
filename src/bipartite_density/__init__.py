"""
bipartite-density: Bipartiteness checks and density simulations for graphs.

This package checks undirected graphs for bipartiteness by two-coloring
them breadth-first or depth-first, and simulates how the share of
bipartite graphs drops as random graphs become denser.

Available modules:
- graph: Adjacency-set graph with BFS/DFS bipartiteness checks
- simulation: Random graph growth binned by density
- report: Text rendering of graphs, traces and density tables
- cli: Command line interface (modes A and B)
"""

__version__ = "0.1.0"

# Graph engine
from .graph import Graph, GraphStructureWarning

# Text rendering
from .report import (
    TracePrinter,
    describe_graph,
    format_colors,
    format_density_table,
)

# Density simulation
from .simulation import (
    DEFAULT_THRESHOLDS,
    DensitySimulation,
    classify_density,
    make_buckets,
)

# Shared types
from .types import (
    DensityBucket,
    Event,
    EventType,
    Vertex,
)

# Validation utilities
from .validation import (
    InputFormatError,
    InvalidSizeError,
    InvalidThresholdsError,
    ValidationError,
    VertexOutOfRangeError,
    validate_thresholds,
    validate_vertex_count,
    validate_vertex_id,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Vertex",
    "DensityBucket",
    "EventType",
    "Event",
    # Graph engine
    "Graph",
    "GraphStructureWarning",
    # Density simulation
    "DensitySimulation",
    "DEFAULT_THRESHOLDS",
    "classify_density",
    "make_buckets",
    # Text rendering
    "TracePrinter",
    "describe_graph",
    "format_colors",
    "format_density_table",
    # Validation
    "ValidationError",
    "InvalidSizeError",
    "VertexOutOfRangeError",
    "InvalidThresholdsError",
    "InputFormatError",
    "validate_vertex_count",
    "validate_vertex_id",
    "validate_thresholds",
]
