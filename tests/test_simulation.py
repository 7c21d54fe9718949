"""
Tests for the density simulation.
"""

import random

import numpy as np
import pytest

from bipartite_density import (
    DEFAULT_THRESHOLDS,
    DensitySimulation,
    EventType,
    InvalidThresholdsError,
    ValidationError,
    classify_density,
    make_buckets,
)


class TestClassifyDensity:
    """Bucket classification tests."""

    def test_default_buckets(self):
        """Each default range maps to its bucket."""
        assert classify_density(0) == 0
        assert classify_density(13.9) == 0
        assert classify_density(20) == 1
        assert classify_density(30) == 2
        assert classify_density(50) == 3
        assert classify_density(80) == 4
        assert classify_density(100) == 4

    def test_lower_bounds_inclusive(self):
        """Thresholds belong to the bucket above them."""
        assert classify_density(14) == 1
        assert classify_density(25) == 2
        assert classify_density(40) == 3
        assert classify_density(65) == 4

    def test_custom_thresholds(self):
        """Custom thresholds are honoured."""
        assert classify_density(15, (10, 20, 30, 40)) == 1
        assert classify_density(45, (10, 20, 30, 40)) == 4

    def test_make_buckets_covers_range(self):
        """Buckets tile [0, 100]."""
        buckets = make_buckets(DEFAULT_THRESHOLDS)
        assert [(b.lower, b.upper) for b in buckets] == [
            (0.0, 14.0),
            (14.0, 25.0),
            (25.0, 40.0),
            (40.0, 65.0),
            (65.0, 100.0),
        ]
        assert buckets[-1].contains(100.0)
        assert not buckets[0].contains(14.0)


class TestSimulationConfiguration:
    """Configuration tests."""

    def test_defaults(self):
        """Defaults match the documented protocol."""
        simulation = DensitySimulation()
        assert simulation.sample_count == 1000
        assert simulation.initial_vertex_count == 6
        assert simulation.edge_attempts == 10
        assert simulation.thresholds == DEFAULT_THRESHOLDS

    def test_initial_graph_is_path(self):
        """The first graph is a path on initial_vertex_count vertices."""
        simulation = DensitySimulation(initial_vertex_count=5)
        assert simulation.graph.vertex_count == 5
        assert simulation.graph.edges() == [(0, 1), (1, 2), (2, 3), (3, 4)]
        assert simulation.is_consistent()

    def test_invalid_sample_count(self):
        """sample_count must be positive."""
        with pytest.raises(ValidationError, match="sample_count"):
            DensitySimulation(sample_count=0)

    def test_invalid_vertex_count(self):
        """At least two vertices are needed."""
        with pytest.raises(ValidationError, match="initial_vertex_count"):
            DensitySimulation(initial_vertex_count=1)

    def test_invalid_attempts(self):
        """edge_attempts must be positive."""
        with pytest.raises(ValidationError, match="edge_attempts"):
            DensitySimulation(edge_attempts=0)

    def test_invalid_thresholds(self):
        """Thresholds are validated."""
        with pytest.raises(InvalidThresholdsError):
            DensitySimulation(thresholds=(10, 20, 30))

    def test_setters(self):
        """sample_count and edge_attempts are settable."""
        simulation = DensitySimulation()
        simulation.sample_count = 20
        simulation.edge_attempts = 3
        assert simulation.sample_count == 20
        assert simulation.edge_attempts == 3


class TestSimulationRun:
    """Run tests."""

    def test_totals_sum_to_sample_count(self):
        """Every sample lands in exactly one bucket."""
        simulation = DensitySimulation(sample_count=300, random_seed=1).run()
        assert simulation.samples == 300
        assert sum(total for total, _ in simulation.results()) == 300

    def test_bipartite_never_exceeds_total(self):
        """Bipartite counts are bounded by totals."""
        simulation = DensitySimulation(sample_count=300, random_seed=2).run()
        for total, bipartite in simulation.results():
            assert 0 <= bipartite <= total

    def test_dense_bucket_never_bipartite(self):
        """With at least 6 vertices no bipartite graph reaches 65% density."""
        simulation = DensitySimulation(sample_count=500, random_seed=3).run()
        assert simulation.buckets[-1].total > 0
        assert simulation.buckets[-1].bipartite == 0

    def test_reproducible_with_seed(self):
        """The same seed gives the same table."""
        first = DensitySimulation(sample_count=200, random_seed=42).run()
        second = DensitySimulation(sample_count=200, random_seed=42).run()
        assert first.results() == second.results()

    def test_injected_rng(self):
        """An injected random source drives the simulation."""
        first = DensitySimulation(sample_count=100, rng=random.Random(9)).run()
        second = DensitySimulation(sample_count=100, rng=random.Random(9)).run()
        assert first.results() == second.results()

    def test_graph_grows_when_complete(self):
        """Complete graphs are replaced by a larger path graph."""
        simulation = DensitySimulation(
            sample_count=100, initial_vertex_count=3, random_seed=4
        ).run()
        assert simulation.vertex_count > 3
        assert simulation.graph.vertex_count == simulation.vertex_count

    def test_mirror_stays_consistent(self):
        """The adjacency mirror matches the graph after every round."""
        simulation = DensitySimulation(
            sample_count=150, initial_vertex_count=4, random_seed=5
        )
        while not simulation.tick():
            assert simulation.is_consistent()
            assert not simulation.adjacency.diagonal().any()
        assert simulation.is_consistent()

    def test_rebuilt_path_sampled_first(self):
        """After growth, the unmodified path graph is the next sample."""
        events = []
        DensitySimulation(
            sample_count=200, initial_vertex_count=3, random_seed=6, on_tick=events.append
        ).run()

        previous = None
        growths = 0
        for event in events:
            n = event["vertex_count"]
            if n != previous:
                assert event["density"] == pytest.approx(2 / n)
                assert event["bipartite"] is True
                growths += previous is not None
            previous = n
        assert growths > 0

    def test_one_edge_per_round(self):
        """Consecutive samples on the same graph differ by one edge."""
        events = []
        simulation = DensitySimulation(
            sample_count=60, initial_vertex_count=6, random_seed=7, on_tick=events.append
        )
        simulation.run()

        for before, after in zip(events, events[1:]):
            if before["vertex_count"] == after["vertex_count"]:
                n = after["vertex_count"]
                step = 2 / (n * (n - 1))
                assert after["density"] - before["density"] == pytest.approx(step)

    def test_lifecycle_events(self):
        """start and end fire once, tick once per sample."""
        counts = {EventType.start: 0, EventType.tick: 0, EventType.end: 0}

        def count(event):
            counts[event["type"]] += 1

        simulation = DensitySimulation(sample_count=25, random_seed=8)
        simulation.on("start", count).on(EventType.tick, count).on("end", count)
        simulation.run()

        assert counts == {EventType.start: 1, EventType.tick: 25, EventType.end: 1}

    def test_tick_after_done(self):
        """tick() reports completion once all samples exist."""
        simulation = DensitySimulation(sample_count=5, random_seed=0).run()
        assert simulation.done
        assert simulation.tick() is True
        assert simulation.samples == 5

    def test_reset(self):
        """reset() clears counters and restores the initial graph."""
        simulation = DensitySimulation(
            sample_count=50, initial_vertex_count=3, random_seed=10
        ).run()
        simulation.reset()
        assert simulation.samples == 0
        assert simulation.results() == [(0, 0)] * 5
        assert simulation.vertex_count == 3

    def test_ratios(self):
        """Ratios are bipartite/total, 0 for empty buckets."""
        simulation = DensitySimulation(sample_count=200, random_seed=11).run()
        ratios = simulation.ratios()
        assert ratios.shape == (5,)
        for ratio, bucket in zip(ratios, simulation.buckets):
            if bucket.total:
                assert ratio == pytest.approx(bucket.bipartite / bucket.total)
            else:
                assert ratio == 0.0
        assert np.all((ratios >= 0) & (ratios <= 1))
