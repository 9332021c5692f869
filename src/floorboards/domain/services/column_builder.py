"""Construction of room columns clipped to the polygon boundary."""

from __future__ import annotations

from typing import Iterable

from floorboards.domain.entities import Column
from floorboards.domain.exceptions import GeometryError
from floorboards.domain.value_objects import BoundaryEdge


def build_column(left: float, width: float, edges: Iterable[BoundaryEdge]) -> Column:
    """Create a column and clip its vertical extent against the room edges.

    Args:
        left: X coordinate of the left side of the column.
        width: Column width, the plank width.
        edges: Horizontal edges of the room polygon.

    Returns:
        Column with ``top`` and ``bottom`` set from the edges it overlaps.

    Raises:
        GeometryError: If no edge overlaps the column, which means it lies
            outside the room.
    """
    col = Column(left=left, width=width)
    for edge in edges:
        col.clip(edge)

    if col.top > col.bottom:
        raise GeometryError(
            f"Column at x={left} (width {width}) does not cross the room "
            "boundary; check the room vertices and start offset",
            left=left,
        )
    return col
