"""
Input validation utilities for graphs and density simulations.

Provides centralized validation functions for vertex counts, vertex ids,
density thresholds and simulation parameters. Raises descriptive
exceptions on invalid input.
"""

from __future__ import annotations

from typing import Sequence


class ValidationError(ValueError):
    """Base exception for validation errors."""

    pass


class InvalidSizeError(ValidationError):
    """Raised when a graph is created with a non-positive vertex count."""

    pass


class VertexOutOfRangeError(ValidationError):
    """Raised when a vertex id is outside the graph."""

    pass


class InvalidThresholdsError(ValidationError):
    """Raised when density bucket thresholds are malformed."""

    pass


class InputFormatError(ValidationError):
    """Raised when line-based graph input cannot be parsed."""

    pass


def validate_vertex_count(vertex_count: int) -> int:
    """
    Validate the number of vertices of a graph.

    Args:
        vertex_count: Requested number of vertices

    Returns:
        Validated vertex count

    Raises:
        InvalidSizeError: If vertex_count <= 0
    """
    if vertex_count <= 0:
        raise InvalidSizeError(f"Vertex count must be positive, got {vertex_count}")
    return int(vertex_count)


def validate_vertex_id(vertex_id: int, vertex_count: int) -> int:
    """
    Validate a 1-based vertex id and convert it to a 0-based index.

    Args:
        vertex_id: 1-based vertex id
        vertex_count: Number of vertices in the graph

    Returns:
        0-based vertex index

    Raises:
        VertexOutOfRangeError: If vertex_id is not in [1, vertex_count]
    """
    if vertex_id < 1 or vertex_id > vertex_count:
        raise VertexOutOfRangeError(
            f"Vertex id {vertex_id} out of bounds [1, {vertex_count}]"
        )
    return vertex_id - 1


def validate_thresholds(thresholds: Sequence[float]) -> tuple[float, ...]:
    """
    Validate density bucket thresholds.

    Four strictly increasing percentages inside (0, 100) split the
    density range into five half-open buckets.

    Args:
        thresholds: Sequence of bucket boundaries in percent

    Returns:
        Validated thresholds as a tuple of floats

    Raises:
        InvalidThresholdsError: If thresholds are malformed
    """
    values = tuple(float(t) for t in thresholds)

    if len(values) != 4:
        raise InvalidThresholdsError(
            f"Expected 4 thresholds for 5 density buckets, got {len(values)}"
        )
    for value in values:
        if value <= 0 or value >= 100:
            raise InvalidThresholdsError(f"Thresholds must be in (0, 100), got {value}")
    for lower, upper in zip(values, values[1:]):
        if lower >= upper:
            raise InvalidThresholdsError(
                f"Thresholds must be strictly increasing, got {lower} before {upper}"
            )

    return values


def validate_positive(name: str, value: int, minimum: int = 1) -> int:
    """
    Validate an integer parameter against a lower bound.

    Args:
        name: Parameter name used in the error message
        value: Value to check
        minimum: Smallest accepted value

    Returns:
        Validated value

    Raises:
        ValidationError: If value < minimum
    """
    if value < minimum:
        raise ValidationError(f"{name} must be >= {minimum}, got {value}")
    return int(value)


__all__ = [
    "ValidationError",
    "InvalidSizeError",
    "VertexOutOfRangeError",
    "InvalidThresholdsError",
    "InputFormatError",
    "validate_vertex_count",
    "validate_vertex_id",
    "validate_thresholds",
    "validate_positive",
]
