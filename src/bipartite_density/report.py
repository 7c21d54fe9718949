"""
Text rendering for graphs, traversal traces and density tables.

Vertices are printed with 1-based ids.
"""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from .graph import Graph
from .types import DensityBucket, Event, EventType

FRONTIER_LABELS = {"bfs": "in queue", "dfs": "on stack"}


def color_name(red: bool) -> str:
    return "red" if red else "blue"


def describe_graph(graph: Graph) -> str:
    """
    Render the adjacency listing of a graph.

    Example:
        Vertex 1: 2
        Vertex 2: 1 3
        Vertex 3: 2
    """
    lines = []
    for vertex_id in range(1, graph.vertex_count + 1):
        neighbors = " ".join(str(n) for n in graph.neighbors(vertex_id))
        lines.append(f"Vertex {vertex_id}: {neighbors}".rstrip())
    return "\n".join(lines) + "\n"


def format_colors(colors: Sequence[bool]) -> str:
    """Render one 'Vertex i has color c' line per vertex."""
    return "\n".join(
        f"Vertex {i + 1} has color {color_name(red)}" for i, red in enumerate(colors)
    )


def format_density_table(buckets: Sequence[DensityBucket]) -> str:
    """
    Render per-bucket (total, bipartite) counts.

    Each row is labelled with the bucket's upper bound.
    """
    rows = ["Density:  Total/Bipartite:"]
    for bucket in buckets:
        label = f"<{bucket.upper:g}%"
        rows.append(f"{label:<10}{bucket.total}/{bucket.bipartite}")
    return "\n".join(rows)


class TracePrinter:
    """
    Console sink for traversal events.

    Example:
        printer = TracePrinter()
        printer.attach(graph)
        graph.is_bipartite_bfs(verbose=True)
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so redirected stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def attach(self, graph: Graph) -> Graph:
        """Register this printer for every traversal event of a graph."""
        for event_type in (
            EventType.start,
            EventType.step,
            EventType.color,
            EventType.conflict,
            EventType.frontier,
            EventType.end,
        ):
            graph.on(event_type, self)
        return graph

    def __call__(self, event: Optional[Event]) -> None:
        if not event:
            return
        line = self.format(event)
        if line is not None:
            print(line, file=self.stream)

    def format(self, event: Event) -> Optional[str]:
        """Render a single event, or None for events without output."""
        event_type = event.get("type")
        strategy = event.get("strategy", "bfs")

        if event_type == EventType.start:
            return f"--{strategy.upper()}--\n"
        if event_type == EventType.step:
            return f"Step: {event['step']}"
        if event_type == EventType.color:
            return f"Setting color of vertex {event['vertex'] + 1} to {color_name(event['red'])}"
        if event_type == EventType.conflict:
            return (
                f"Not bipartite at vertex {event['neighbor'] + 1}, "
                f"its color is {color_name(event['red'])}"
            )
        if event_type == EventType.frontier:
            path = " ".join(str(v + 1) for v in event["path"])
            frontier = " ".join(str(v + 1) for v in event["frontier"])
            return f"{path} {FRONTIER_LABELS[strategy]} {frontier}".rstrip() + "\n"
        if event_type == EventType.end and event.get("bipartite"):
            return format_colors(event.get("colors", []))
        return None


__all__ = [
    "TracePrinter",
    "color_name",
    "describe_graph",
    "format_colors",
    "format_density_table",
]
