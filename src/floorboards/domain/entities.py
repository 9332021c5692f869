"""Domain entities for the floor layout: planks, columns and the room."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from floorboards.domain.exceptions import MalformedRoomError
from floorboards.domain.geometry import find_diagonal_edge, measure
from floorboards.domain.value_objects import (
    BoundaryEdge,
    CutEnd,
    LayoutParameters,
    RoomBounds,
    Vertex,
)


@dataclass
class Plank:
    """One physical board segment, whole or cut.

    Attributes:
        uid: Internal identity, unique for every plank object. Used to
            find a particular plank, since both pieces of a cut share ``id``.
        id: User-facing number. Both pieces of one cut plank share it.
        length: Length of this piece of plank.
        width: Width of the plank, the same as the column it lies in.
        cut_end: Which end of this piece was produced by a saw cut.
        left: Left of the plank, 0 until it is placed.
        top: Top of the plank, 0 until it is placed.
        permanent: True for user-supplied pre-cut stock that has to be
            retained in the partial plank set on re-layout.
    """

    uid: int
    id: int
    length: float
    width: float
    cut_end: CutEnd = CutEnd.NONE
    left: float = 0.0
    top: float = 0.0
    permanent: bool = False

    def __post_init__(self) -> None:
        if not math.isfinite(self.length) or self.length <= 0:
            raise ValueError(f"Plank length must be a positive number, got {self.length}")
        if not math.isfinite(self.width) or self.width <= 0:
            raise ValueError(f"Plank width must be a positive number, got {self.width}")
        self.cut_end = CutEnd(self.cut_end)

    @property
    def bottom(self) -> float:
        return self.top + self.length

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def middle(self) -> float:
        return self.top + self.length / 2

    @property
    def centre(self) -> float:
        return self.left + self.width / 2

    @property
    def label(self) -> str:
        """Plank number annotated with the cut end, e.g. ``<12`` or ``12>``."""
        fore = "<" if self.cut_end is CutEnd.BOTTOM else ""
        aft = ">" if self.cut_end is CutEnd.TOP else ""
        return f"{fore}{self.id}{aft}"

    def place(self, left: float, top: float) -> None:
        self.left = left
        self.top = top

    def __str__(self) -> str:
        return f"{self.id} {self.cut_end.value} {self.length}"


@dataclass
class Column:
    """A fixed-width vertical strip of the room, filled with planks.

    ``top`` and ``bottom`` start at the infinite sentinels and are narrowed
    by every boundary edge that overlaps the column.
    """

    left: float
    width: float
    top: float = math.inf
    bottom: float = -math.inf
    planks: list[Plank] = field(default_factory=list)

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def clip(self, edge: BoundaryEdge) -> bool:
        """Narrow the column's vertical extent if the edge overlaps it.

        Returns:
            True if the edge constrained the column.
        """
        overlaps = (
            # intersects left side
            (edge.left <= self.left and edge.right > self.left)
            # intersects right side
            or (edge.left < self.right and edge.right >= self.right)
            # intersects both sides
            or (edge.left < self.left and edge.right > self.right)
            # contained
            or (edge.left > self.left and edge.right < self.right)
        )
        if overlaps:
            self.top = min(self.top, edge.y)
            self.bottom = max(self.bottom, edge.y)
        return overlaps

    def line_up_planks(self) -> None:
        """Make the left of all planks the same as the left of the column."""
        for plank in self.planks:
            plank.left = self.left

    def __str__(self) -> str:
        return f"Col T{self.top},L{self.left},B{self.bottom},R{self.right}"


@dataclass(frozen=True)
class LayoutResult:
    """Aggregate counters from one layout run.

    Attributes:
        planks_needed: Whole planks consumed, including the planks cut.
        cuts: Number of saw cuts made.
        waste: Plank length bought but not covering floor, including kerf.
        column_count: Number of columns laid.
    """

    planks_needed: int = 0
    cuts: int = 0
    waste: float = 0.0
    column_count: int = 0


@dataclass
class Room:
    """A room, and the planks required to plank it.

    The polygon is measured on construction. Columns, partials and the
    counters are written by the layout engine, or restored from a saved
    document.

    Raises:
        MalformedRoomError: If a vertex is not finite, or two consecutive
            vertices form a diagonal edge.
    """

    vertices: Sequence[Vertex]
    parameters: LayoutParameters = field(default_factory=LayoutParameters)
    columns: list[Column] = field(default_factory=list)
    partials: list[Plank] = field(default_factory=list)
    planks_needed: int = 0
    cuts: int = 0
    edges: tuple[BoundaryEdge, ...] = field(init=False, default=())
    bounds: RoomBounds = field(init=False, default_factory=RoomBounds)

    def __post_init__(self) -> None:
        self.vertices = tuple(self.vertices)
        for i, v in enumerate(self.vertices):
            if not (math.isfinite(v.x) and math.isfinite(v.y)):
                raise MalformedRoomError(
                    f"Vertex {i} at ({v.x}, {v.y}) does not have finite coordinates"
                )
        diagonal = find_diagonal_edge(self.vertices)
        if diagonal is not None:
            index, p1, p2 = diagonal
            raise MalformedRoomError(
                f"Edge {index} from ({p1.x}, {p1.y}) to ({p2.x}, {p2.y}) "
                "is neither horizontal nor vertical"
            )
        self.edges, self.bounds = measure(self.vertices)

    @property
    def is_polygon(self) -> bool:
        """A rectilinear room needs at least 3 vertices."""
        return len(self.vertices) >= 3

    @property
    def waste(self) -> float:
        columnage = sum(col.height for col in self.columns)
        return self.planks_needed * self.parameters.plank_length - columnage

    def placed_planks(self) -> Iterator[Plank]:
        for col in self.columns:
            yield from col.planks

    def permanent_planks(self) -> list[Plank]:
        """User-supplied planks, whether banked or already laid."""
        banked = [p for p in self.partials if p.permanent]
        return banked + [p for p in self.placed_planks() if p.permanent]

    def result(self) -> LayoutResult:
        return LayoutResult(
            planks_needed=self.planks_needed,
            cuts=self.cuts,
            waste=self.waste,
            column_count=len(self.columns),
        )
