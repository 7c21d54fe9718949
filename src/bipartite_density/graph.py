"""
Undirected graph with bipartiteness checks.

The graph stores its vertices in a list and keeps adjacency as sets of
vertex indices, so vertices never reference each other directly. Public
methods take 1-based vertex ids; traversal events report 0-based indices.

Bipartiteness is checked by two-coloring from vertex 0, either
breadth-first (FIFO frontier) or depth-first (LIFO frontier). Only the
component containing vertex 0 is checked.
"""

from __future__ import annotations

import warnings
from collections import deque
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from typing_extensions import Self

from .types import Event, EventCallback, EventType, Vertex
from .validation import validate_vertex_count, validate_vertex_id

Strategy = Literal["bfs", "dfs"]


class GraphStructureWarning(UserWarning):
    """Warning for graph structures a check does not fully cover."""

    pass


class Graph:
    """
    Undirected graph with a fixed number of vertices.

    Edges can only be added. Self-loops and duplicate edges are rejected
    by connect() without raising.

    Example:
        graph = Graph(3)
        graph.connect(1, 2)
        graph.connect(2, 3)
        graph.is_bipartite_bfs()  # True

        # Trace a traversal
        graph.on("color", lambda event: print(event))
        graph.is_bipartite_dfs(verbose=True)

    Attributes:
        vertex_count: Number of vertices
        edge_count: Number of distinct connected pairs
        vertices: Vertices in index order
    """

    def __init__(self, vertex_count: int) -> None:
        """
        Create a graph without edges.

        Args:
            vertex_count: Number of vertices

        Raises:
            InvalidSizeError: If vertex_count <= 0
        """
        self._size = validate_vertex_count(vertex_count)
        self._edge_count = 0
        self._vertices = [Vertex(i) for i in range(self._size)]
        self._events: dict[EventType, EventCallback] = {}

    @classmethod
    def path(cls, vertex_count: int) -> Graph:
        """Create a path graph 1-2-...-n."""
        graph = cls(vertex_count)
        for i in range(1, vertex_count):
            graph.connect(i, i + 1)
        return graph

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def vertex_count(self) -> int:
        """Get the number of vertices."""
        return self._size

    @property
    def edge_count(self) -> int:
        """Get the number of edges."""
        return self._edge_count

    @property
    def vertices(self) -> list[Vertex]:
        """Get the vertices in index order."""
        return self._vertices

    # -------------------------------------------------------------------------
    # Edges
    # -------------------------------------------------------------------------

    def connect(self, a: int, b: int) -> bool:
        """
        Add an undirected edge between 1-based vertex ids.

        Args:
            a: First vertex id
            b: Second vertex id

        Returns:
            True if the edge was added, False for a self-loop or an
            existing edge.

        Raises:
            VertexOutOfRangeError: If either id is outside the graph
        """
        i = validate_vertex_id(a, self._size)
        j = validate_vertex_id(b, self._size)
        if i == j:
            return False

        first = self._vertices[i]
        if j in first.neighbors:
            return False

        first.neighbors.add(j)
        self._vertices[j].neighbors.add(i)
        self._edge_count += 1
        return True

    def has_edge(self, a: int, b: int) -> bool:
        """Check if 1-based vertex ids a and b are adjacent."""
        i = validate_vertex_id(a, self._size)
        j = validate_vertex_id(b, self._size)
        return j in self._vertices[i].neighbors

    def neighbors(self, a: int) -> list[int]:
        """Get the sorted 1-based ids adjacent to vertex a."""
        i = validate_vertex_id(a, self._size)
        return sorted(n + 1 for n in self._vertices[i].neighbors)

    def edges(self) -> list[tuple[int, int]]:
        """Get all edges as sorted 0-based (low, high) pairs."""
        return sorted(
            (vertex.index, n)
            for vertex in self._vertices
            for n in vertex.neighbors
            if vertex.index < n
        )

    def density(self) -> float:
        """
        Ratio of edges to the maximum possible edge count.

        Returns:
            2|E| / (|V| (|V| - 1)), or 0.0 for a single vertex
        """
        n = self._size
        if n < 2:
            return 0.0
        return 2.0 * self._edge_count / (n * (n - 1))

    # -------------------------------------------------------------------------
    # Event System
    # -------------------------------------------------------------------------

    def on(self, event: EventType | str, callback: EventCallback) -> Self:
        """
        Subscribe to a traversal event.

        Args:
            event: Event type (EventType enum or string name)
            callback: Function to call when event fires

        Returns:
            self (for chaining)
        """
        if isinstance(event, str):
            event = EventType[event]
        self._events[event] = callback
        return self

    def trigger(self, event: Event) -> None:
        """
        Trigger an event, calling the registered callback.

        Args:
            event: Event payload with type and optional data
        """
        event_type = event.get("type")
        if event_type is not None and event_type in self._events:
            self._events[event_type](event)

    # -------------------------------------------------------------------------
    # Bipartiteness
    # -------------------------------------------------------------------------

    def reset_marks(self) -> None:
        """Clear visited flags and colors on every vertex."""
        for vertex in self._vertices:
            vertex.visited = False
            vertex.red = False

    def colors(self) -> list[bool]:
        """Get the color tag of every vertex (True = red)."""
        return [vertex.red for vertex in self._vertices]

    def is_bipartite_bfs(self, verbose: bool = False) -> bool:
        """
        Check bipartiteness with a breadth-first two-coloring.

        Args:
            verbose: If True, trigger trace events for every step

        Returns:
            True if no coloring conflict was found
        """
        return self._two_color("bfs", verbose)

    def is_bipartite_dfs(self, verbose: bool = False) -> bool:
        """
        Check bipartiteness with a depth-first two-coloring.

        Args:
            verbose: If True, trigger trace events for every step

        Returns:
            True if no coloring conflict was found
        """
        return self._two_color("dfs", verbose)

    def _two_color(self, strategy: Strategy, verbose: bool) -> bool:
        """
        Two-color the component of vertex 0.

        The frontier is drained completely even after a conflict. Once
        a conflict is found no further conflicts are evaluated, so colors
        assigned afterwards are meaningless.
        """
        self.reset_marks()
        vertices = self._vertices

        root = vertices[0]
        root.red = True
        root.visited = True
        frontier: deque[int] = deque([0])
        path: list[int] = []
        bipartite = True
        step = 0

        if verbose:
            self.trigger({"type": EventType.start, "strategy": strategy})

        while frontier:
            step += 1
            index = frontier.popleft() if strategy == "bfs" else frontier.pop()
            current = vertices[index]
            if verbose:
                path.append(index)
                self.trigger(
                    {"type": EventType.step, "strategy": strategy, "step": step, "vertex": index}
                )

            for n in current.neighbors:
                neighbor = vertices[n]
                if not neighbor.visited:
                    neighbor.visited = True
                    neighbor.red = not current.red
                    frontier.append(n)
                    if verbose and bipartite:
                        self.trigger(
                            {
                                "type": EventType.color,
                                "strategy": strategy,
                                "step": step,
                                "vertex": n,
                                "red": neighbor.red,
                            }
                        )
                elif bipartite and neighbor.red == current.red:
                    bipartite = False
                    if verbose:
                        self.trigger(
                            {
                                "type": EventType.conflict,
                                "strategy": strategy,
                                "step": step,
                                "vertex": index,
                                "neighbor": n,
                                "red": neighbor.red,
                            }
                        )

            if verbose:
                self.trigger(
                    {
                        "type": EventType.frontier,
                        "strategy": strategy,
                        "step": step,
                        "path": list(path),
                        "frontier": list(frontier),
                    }
                )

        unreachable = sum(1 for vertex in vertices if not vertex.visited)
        if unreachable:
            warnings.warn(
                f"Found {unreachable} vertex(es) unreachable from vertex 1. "
                "Only the component containing vertex 1 was checked.",
                GraphStructureWarning,
                stacklevel=3,
            )

        if verbose:
            self.trigger(
                {
                    "type": EventType.end,
                    "strategy": strategy,
                    "bipartite": bipartite,
                    "colors": self.colors(),
                }
            )

        return bipartite

    def __repr__(self) -> str:
        return f"Graph(vertices={self._size}, edges={self._edge_count})"


__all__ = ["Graph", "GraphStructureWarning"]
