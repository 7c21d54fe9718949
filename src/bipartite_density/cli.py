"""
Command line interface.

Mode A reads a graph from standard input and traces both bipartiteness
checks. Mode B runs the density simulation and prints the bucket table.

Usage:
    bipartite-density            # asks for the mode on stdin
    bipartite-density A < graph.txt
    bipartite-density B --samples 5000 --seed 42
"""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, Optional, Sequence, TextIO

from . import __version__
from .graph import Graph
from .report import TracePrinter, describe_graph, format_density_table
from .simulation import DEFAULT_THRESHOLDS, DensitySimulation
from .validation import InputFormatError, ValidationError


def _parse_pair(line: str, what: str) -> tuple[int, int]:
    """Parse a line of two space-separated integers."""
    tokens = line.split()
    if len(tokens) != 2:
        raise InputFormatError(f"Expected {what} as two integers, got {line.strip()!r}")
    try:
        return int(tokens[0]), int(tokens[1])
    except ValueError:
        raise InputFormatError(
            f"Expected {what} as two integers, got {line.strip()!r}"
        ) from None


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise InputFormatError(f"Unexpected end of input, expected {what}") from None


def read_graph(lines: Iterable[str]) -> Graph:
    """
    Build a graph from line-based input.

    The first line holds the vertex and edge counts, followed by one
    line per edge with two 1-based vertex ids.

    Args:
        lines: Input lines

    Returns:
        The graph described by the input

    Raises:
        InputFormatError: If a line cannot be parsed or edges are missing
        InvalidSizeError: If the vertex count is not positive
        VertexOutOfRangeError: If an edge references an unknown vertex
    """
    it = iter(lines)
    vertex_count, edge_count = _parse_pair(
        _next_line(it, "vertex and edge counts"), "vertex and edge counts"
    )
    if edge_count < 0:
        raise InputFormatError(f"Edge count must be non-negative, got {edge_count}")

    graph = Graph(vertex_count)
    for i in range(edge_count):
        a, b = _parse_pair(_next_line(it, f"edge {i + 1} of {edge_count}"), "an edge")
        graph.connect(a, b)
    return graph


def run_mode_a(lines: Iterable[str], out: TextIO) -> tuple[bool, bool]:
    """
    Read a graph and trace both bipartiteness checks.

    Returns:
        (BFS result, DFS result)
    """
    print("Enter data: ", file=out)
    graph = read_graph(lines)
    print(describe_graph(graph), file=out)

    TracePrinter(out).attach(graph)
    bfs = graph.is_bipartite_bfs(verbose=True)
    print(f"BFS: {'bipartite' if bfs else 'not bipartite'}\n", file=out)
    dfs = graph.is_bipartite_dfs(verbose=True)
    print(f"DFS: {'bipartite' if dfs else 'not bipartite'}", file=out)
    return bfs, dfs


def run_mode_b(args: argparse.Namespace, out: TextIO) -> DensitySimulation:
    """Run the density simulation and print the bucket table."""
    simulation = DensitySimulation(
        sample_count=args.samples,
        initial_vertex_count=args.vertices,
        edge_attempts=args.attempts,
        thresholds=args.thresholds,
        random_seed=args.seed,
    )
    simulation.run()
    print(format_density_table(simulation.buckets), file=out)
    return simulation


def _thresholds(value: str) -> tuple[float, ...]:
    try:
        return tuple(float(v) for v in value.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"thresholds must be comma-separated numbers, got {value!r}"
        ) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bipartite-density",
        description="Check graphs for bipartiteness and simulate bipartiteness by density",
    )
    parser.add_argument(
        "mode",
        nargs="?",
        help="A: read a graph from stdin, B: run the density simulation (asked if omitted)",
    )
    parser.add_argument("--samples", type=int, default=1000, help="Samples to record (mode B)")
    parser.add_argument(
        "--vertices", type=int, default=6, help="Vertex count of the first graph (mode B)"
    )
    parser.add_argument(
        "--attempts", type=int, default=10, help="Random edge insertions per round (mode B)"
    )
    parser.add_argument(
        "--thresholds",
        type=_thresholds,
        default=DEFAULT_THRESHOLDS,
        help="Density bucket boundaries in percent (mode B), e.g. '14,25,40,65'",
    )
    parser.add_argument("--seed", type=int, help="Random seed (mode B)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    lines = iter(stdin)

    mode = args.mode
    if mode is None:
        print("Choose mode (A|B): ", file=stdout)
        mode = next(lines, "")

    try:
        if mode.strip() == "A":
            run_mode_a(lines, stdout)
        else:
            run_mode_b(args, stdout)
    except ValidationError as e:
        parser.exit(2, f"{parser.prog}: error: {e}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
