"""
Common types for bipartiteness checks and density simulations.

This module provides the fundamental types used across the package:
- Vertex: Graph vertex with traversal marks and neighbor indices
- DensityBucket: Density range with total/bipartite counters
- EventType: Traversal and simulation events
- Event: Event payload for callbacks
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional, TypedDict


class EventType(IntEnum):
    """
    Traversal and simulation events.

    - start: Traversal or simulation has begun
    - step: A vertex is taken from the frontier
    - color: A newly discovered vertex received its color
    - conflict: Two adjacent vertices share a color
    - frontier: Frontier contents after a step
    - tick: A simulation sample was recorded
    - end: Traversal or simulation has finished
    """

    start = 0
    step = 1
    color = 2
    conflict = 3
    frontier = 4
    tick = 5
    end = 6


class Event(TypedDict, total=False):
    """Event payload passed to event listeners.

    Vertex fields hold 0-based indices.
    """

    type: EventType
    strategy: str
    step: int
    vertex: int
    neighbor: int
    red: bool
    path: list[int]
    frontier: list[int]
    bipartite: bool
    colors: list[bool]
    # Simulation payload
    sample: int
    vertex_count: int
    density: float
    bucket: int


EventCallback = Callable[[Optional[Event]], None]


class Vertex:
    """
    Graph vertex.

    Attributes:
        index: 0-based position in the owning graph
        visited: Set once the vertex is discovered by a traversal
        red: Two-coloring tag (True = red, False = blue)
        neighbors: Indices of adjacent vertices
    """

    __slots__ = ("index", "visited", "red", "neighbors")

    def __init__(self, index: int) -> None:
        self.index = index
        self.visited = False
        self.red = False
        self.neighbors: set[int] = set()

    @property
    def color(self) -> str:
        """Color name of the vertex."""
        return "red" if self.red else "blue"

    def __repr__(self) -> str:
        return f"Vertex(index={self.index}, degree={len(self.neighbors)})"


@dataclass
class DensityBucket:
    """
    Density range with sample counters.

    The range is [lower, upper) in percent; the last bucket also
    contains its upper bound.
    """

    lower: float
    upper: float
    total: int = 0
    bipartite: int = 0

    def contains(self, percent: float) -> bool:
        """Check if a density percentage falls into this bucket."""
        if self.upper >= 100:
            return self.lower <= percent <= self.upper
        return self.lower <= percent < self.upper

    def record(self, bipartite: bool) -> None:
        """Count one sample, and one bipartite sample if applicable."""
        self.total += 1
        if bipartite:
            self.bipartite += 1

    @property
    def ratio(self) -> float:
        """Fraction of bipartite samples (0 for an empty bucket)."""
        return self.bipartite / self.total if self.total else 0.0

    def as_tuple(self) -> tuple[int, int]:
        return self.total, self.bipartite


__all__ = [
    "EventType",
    "Event",
    "EventCallback",
    "Vertex",
    "DensityBucket",
]
