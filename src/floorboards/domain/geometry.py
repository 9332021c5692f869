"""Extraction of constraining edges and bounds from a room polygon."""

from __future__ import annotations

import math
from typing import Sequence

from floorboards.domain.value_objects import BoundaryEdge, RoomBounds, Vertex


def _pairs(vertices: Sequence[Vertex]):
    """Yield consecutive vertex pairs, closing the polygon."""
    count = len(vertices)
    for i in range(count):
        yield vertices[i], vertices[(i + 1) % count]


def measure(vertices: Sequence[Vertex]) -> tuple[tuple[BoundaryEdge, ...], RoomBounds]:
    """Derive the horizontal edges and bounding box of a room polygon.

    Vertical edges are discarded; they never limit a column because
    columns are only bounded by where they cross the top and bottom of
    the polygon.

    Args:
        vertices: Ordered polygon vertices, implicitly closed.

    Returns:
        Tuple of (horizontal edges, bounding box). An empty vertex list
        gives no edges and an inverted box.
    """
    edges: list[BoundaryEdge] = []
    left = top = math.inf
    right = bottom = -math.inf

    for p1, p2 in _pairs(vertices):
        left = min(left, p1.x)
        right = max(right, p1.x)
        top = min(top, p1.y)
        bottom = max(bottom, p1.y)

        if p1.y == p2.y:
            edges.append(
                BoundaryEdge(left=min(p1.x, p2.x), right=max(p1.x, p2.x), y=p1.y)
            )

    return tuple(edges), RoomBounds(left=left, right=right, top=top, bottom=bottom)


def find_diagonal_edge(
    vertices: Sequence[Vertex],
) -> tuple[int, Vertex, Vertex] | None:
    """Find the first polygon edge that is neither horizontal nor vertical.

    Args:
        vertices: Ordered polygon vertices, implicitly closed.

    Returns:
        (index of the first vertex, first vertex, second vertex) for the
        offending edge, or None if the polygon is rectilinear.
    """
    if len(vertices) < 2:
        return None
    for i, (p1, p2) in enumerate(_pairs(vertices)):
        if p1.x != p2.x and p1.y != p2.y:
            return i, p1, p2
    return None
