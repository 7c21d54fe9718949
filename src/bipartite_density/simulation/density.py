"""
Density simulation.

Grows a single random graph edge by edge and tabulates, per density
bucket, how many sampled graphs were bipartite. Samples come from one
continuous growth path rather than independent graphs, so neighbouring
samples are strongly correlated.
"""

from __future__ import annotations

import random
from bisect import bisect_right
from typing import TYPE_CHECKING, Callable, Optional, Sequence

import numpy as np

if TYPE_CHECKING:
    from typing_extensions import Self

from ..graph import Graph
from ..types import DensityBucket, Event, EventCallback, EventType
from ..validation import validate_positive, validate_thresholds

DEFAULT_THRESHOLDS = (14.0, 25.0, 40.0, 65.0)


def classify_density(percent: float, thresholds: Sequence[float] = DEFAULT_THRESHOLDS) -> int:
    """
    Get the bucket index of a density percentage.

    Buckets are half-open: [0, t0), [t0, t1), ..., [t3, 100].

    Args:
        percent: Density in percent
        thresholds: Four increasing bucket boundaries

    Returns:
        Bucket index in [0, len(thresholds)]
    """
    return bisect_right(thresholds, percent)


def make_buckets(thresholds: Sequence[float] = DEFAULT_THRESHOLDS) -> list[DensityBucket]:
    """Create empty buckets covering [0, 100] for the given thresholds."""
    bounds = [0.0, *thresholds, 100.0]
    return [DensityBucket(lower, upper) for lower, upper in zip(bounds, bounds[1:])]


class DensitySimulation:
    """
    Random graph growth simulation.

    Starts from a path graph and adds one random edge per round. When
    no edge can be added the graph is complete: it is replaced by a path
    graph with one more vertex, which is sampled as-is in the next round.
    Every recorded sample is classified by density and checked for
    bipartiteness with a breadth-first two-coloring.

    Example:
        simulation = DensitySimulation(sample_count=1000, random_seed=42)
        simulation.run()

        for bucket in simulation.buckets:
            print(bucket.lower, bucket.total, bucket.bipartite)

    Attributes:
        graph: The live graph
        buckets: Per-bucket counters
        samples: Number of samples recorded so far
    """

    def __init__(
        self,
        *,
        sample_count: int = 1000,
        initial_vertex_count: int = 6,
        edge_attempts: int = 10,
        thresholds: Sequence[float] = DEFAULT_THRESHOLDS,
        random_seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_tick: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
    ) -> None:
        """
        Initialize the simulation.

        Args:
            sample_count: Number of samples to record
            initial_vertex_count: Vertex count of the first path graph
            edge_attempts: Random insertions tried per round before
                scanning for a missing edge
            thresholds: Four increasing density percentages separating
                the five buckets
            random_seed: Seed for the pseudorandom source
            rng: Pseudorandom source (overrides random_seed)
            on_start: Callback for start event
            on_tick: Callback fired for every recorded sample
            on_end: Callback for end event
        """
        self._sample_count = validate_positive("sample_count", sample_count)
        self._initial_vertex_count = validate_positive(
            "initial_vertex_count", initial_vertex_count, minimum=2
        )
        self._edge_attempts = validate_positive("edge_attempts", edge_attempts)
        self._thresholds = validate_thresholds(thresholds)
        self._random_seed = random_seed
        self._rng = rng if rng is not None else random.Random(random_seed)

        self._events: dict[EventType, EventCallback] = {}
        if on_start:
            self._events[EventType.start] = on_start
        if on_tick:
            self._events[EventType.tick] = on_tick
        if on_end:
            self._events[EventType.end] = on_end

        self._buckets: list[DensityBucket] = []
        self._samples = 0
        self._vertex_count = self._initial_vertex_count
        self._graph = Graph(self._vertex_count)
        self._adjacency = np.zeros((self._vertex_count, self._vertex_count), dtype=bool)
        self._fresh = True
        self.reset()

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def sample_count(self) -> int:
        """Get the number of samples to record."""
        return self._sample_count

    @sample_count.setter
    def sample_count(self, value: int) -> None:
        """Set the number of samples to record."""
        self._sample_count = validate_positive("sample_count", value)

    @property
    def initial_vertex_count(self) -> int:
        """Get the vertex count of the first path graph."""
        return self._initial_vertex_count

    @property
    def edge_attempts(self) -> int:
        """Get random insertions tried per round."""
        return self._edge_attempts

    @edge_attempts.setter
    def edge_attempts(self, value: int) -> None:
        """Set random insertions tried per round."""
        self._edge_attempts = validate_positive("edge_attempts", value)

    @property
    def thresholds(self) -> tuple[float, ...]:
        """Get the density bucket boundaries in percent."""
        return self._thresholds

    @property
    def random_seed(self) -> Optional[int]:
        """Get the seed of the pseudorandom source."""
        return self._random_seed

    @property
    def graph(self) -> Graph:
        """Get the live graph."""
        return self._graph

    @property
    def adjacency(self) -> np.ndarray:
        """Get the boolean adjacency mirror of the live graph."""
        return self._adjacency

    @property
    def vertex_count(self) -> int:
        """Get the vertex count of the live graph."""
        return self._vertex_count

    @property
    def buckets(self) -> list[DensityBucket]:
        """Get per-bucket counters."""
        return self._buckets

    @property
    def samples(self) -> int:
        """Get the number of samples recorded so far."""
        return self._samples

    @property
    def done(self) -> bool:
        """Check if all samples have been recorded."""
        return self._samples >= self._sample_count

    # -------------------------------------------------------------------------
    # Event System
    # -------------------------------------------------------------------------

    def on(self, event: EventType | str, callback: EventCallback) -> Self:
        """
        Subscribe to a simulation event.

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
        """Trigger an event, calling the registered callback."""
        event_type = event.get("type")
        if event_type is not None and event_type in self._events:
            self._events[event_type](event)

    # -------------------------------------------------------------------------
    # Graph Management
    # -------------------------------------------------------------------------

    def reset(self) -> Self:
        """Clear counters and start again from the initial path graph."""
        self._buckets = make_buckets(self._thresholds)
        self._samples = 0
        self._prepare_graph(self._initial_vertex_count)
        return self

    def _prepare_graph(self, vertex_count: int) -> None:
        """Replace the live graph with a path graph on vertex_count vertices."""
        self._vertex_count = vertex_count
        self._graph = Graph(vertex_count)
        self._adjacency = np.zeros((vertex_count, vertex_count), dtype=bool)
        for i in range(vertex_count - 1):
            self._make_edge(i, i + 1)
        self._fresh = True

    def _make_edge(self, i: int, j: int) -> bool:
        """Connect 0-based vertices i and j, keeping the mirror in sync."""
        if not self._graph.connect(i + 1, j + 1):
            return False
        self._adjacency[i, j] = True
        self._adjacency[j, i] = True
        return True

    def _add_random_edge(self) -> bool:
        """Try a bounded number of uniformly random insertions."""
        n = self._vertex_count
        for _ in range(self._edge_attempts):
            if self._make_edge(self._rng.randrange(n), self._rng.randrange(n)):
                return True
        return False

    def _add_missing_edge(self) -> bool:
        """Insert the first missing edge in row-major order, if any."""
        missing = np.argwhere(np.triu(~self._adjacency, k=1))
        if missing.size == 0:
            return False
        i, j = missing[0]
        return self._make_edge(int(i), int(j))

    def is_consistent(self) -> bool:
        """Check that the adjacency mirror matches the live graph."""
        expected = np.zeros_like(self._adjacency)
        for i, j in self._graph.edges():
            expected[i, j] = True
            expected[j, i] = True
        return bool(np.array_equal(expected, self._adjacency))

    # -------------------------------------------------------------------------
    # Lifecycle Methods
    # -------------------------------------------------------------------------

    def tick(self) -> bool:
        """
        Perform one simulation round.

        Returns:
            True if all samples have been recorded, False otherwise.
        """
        if self.done:
            return True

        if self._fresh:
            self._fresh = False
        elif not self._add_random_edge() and not self._add_missing_edge():
            # Complete graph: grow and sample the new path graph next round
            self._prepare_graph(self._vertex_count + 1)
            return False

        self._record_sample()
        return self.done

    def kick(self) -> None:
        """Run tick() repeatedly until all samples are recorded."""
        while not self.tick():
            pass

    def run(self) -> Self:
        """
        Run the simulation.

        Fires start event, records sample_count samples, fires end event.

        Returns:
            self (for chaining)
        """
        self.trigger({"type": EventType.start, "sample": self._samples})
        self.kick()
        self.trigger({"type": EventType.end, "sample": self._samples})
        return self

    def _record_sample(self) -> None:
        """Classify the live graph by density and count its bipartiteness."""
        density = self._graph.density()
        index = classify_density(density * 100, self._thresholds)
        bipartite = self._graph.is_bipartite_bfs(False)

        self._buckets[index].record(bipartite)
        self._samples += 1

        self.trigger(
            {
                "type": EventType.tick,
                "sample": self._samples,
                "vertex_count": self._vertex_count,
                "density": density,
                "bucket": index,
                "bipartite": bipartite,
            }
        )

    def results(self) -> list[tuple[int, int]]:
        """Get (total, bipartite) per bucket."""
        return [bucket.as_tuple() for bucket in self._buckets]

    def ratios(self) -> np.ndarray:
        """Get the bipartite fraction per bucket (0 for empty buckets)."""
        totals = np.array([b.total for b in self._buckets], dtype=np.float64)
        hits = np.array([b.bipartite for b in self._buckets], dtype=np.float64)
        out = np.zeros_like(totals)
        np.divide(hits, totals, out=out, where=totals > 0)
        return out


__all__ = [
    "DEFAULT_THRESHOLDS",
    "DensitySimulation",
    "classify_density",
    "make_buckets",
]
