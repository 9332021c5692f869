"""Value objects for room geometry and layout parameters."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class CutEnd(str, Enum):
    """Which end of a plank segment is a fresh saw cut.

    The values are the symbols used in saved room documents and in plank
    labels: ``">"`` marks a cut at the top end, ``"<"`` a cut at the bottom.
    """

    NONE = ""
    TOP = ">"
    BOTTOM = "<"


@dataclass(frozen=True)
class Vertex:
    """A corner of the room polygon.

    The top left of the room diagram is at 0,0. Y grows downwards,
    X left to right.
    """

    x: float
    y: float
    label: str = ""


@dataclass(frozen=True)
class BoundaryEdge:
    """A horizontal edge of the room polygon.

    Only horizontal edges are kept, because these are the edges that
    limit the length of a column.

    Attributes:
        left: Left end of the edge.
        right: Right end of the edge.
        y: Level of the edge.
    """

    left: float
    right: float
    y: float

    def __post_init__(self) -> None:
        if self.left > self.right:
            raise ValueError("Edge left must not exceed edge right")

    def __str__(self) -> str:
        return f"{self.left}-{self.right},{self.y}"


@dataclass(frozen=True)
class RoomBounds:
    """Bounding rectangle of the room polygon."""

    left: float = math.inf
    right: float = -math.inf
    top: float = math.inf
    bottom: float = -math.inf

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def is_empty(self) -> bool:
        """True when no vertex has contributed to the bounds."""
        return self.left > self.right or self.top > self.bottom

    def contains(self, vertex: Vertex) -> bool:
        return (
            self.left <= vertex.x <= self.right
            and self.top <= vertex.y <= self.bottom
        )


@dataclass(frozen=True)
class LayoutParameters:
    """Constraints governing how planks are laid.

    Attributes:
        plank_width: Width of every plank, and so of every column.
        plank_length: Length of an uncut plank.
        cut_thickness: Material lost to the saw blade on each cut (kerf).
        min_plank_length: Shortest plank or offcut worth laying or keeping.
        start_left: Horizontal offset of the first column from the left
            of the room. May be negative.
        start_top: Vertical offset of the first plank in the first column.
    """

    plank_width: float = 12.5
    plank_length: float = 91.5
    cut_thickness: float = 0.3
    min_plank_length: float = 25.0
    start_left: float = 0.0
    start_top: float = 0.0

    def __post_init__(self) -> None:
        for name in (
            "plank_width",
            "plank_length",
            "cut_thickness",
            "min_plank_length",
            "start_left",
            "start_top",
        ):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be a finite number")
        if self.plank_width <= 0:
            raise ValueError("Plank width must be positive")
        if self.plank_length <= 0:
            raise ValueError("Plank length must be positive")
        if self.cut_thickness < 0:
            raise ValueError("Cut thickness must be non-negative")
        if self.min_plank_length < 0:
            raise ValueError("Minimum plank length must be non-negative")
        if self.start_top < 0:
            raise ValueError("Start top offset must be non-negative")
