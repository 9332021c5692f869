"""Domain layer - room geometry and plank layout."""

from .entities import Column, LayoutResult, Plank, Room
from .exceptions import (
    FloorboardsError,
    GeometryError,
    MalformedRoomError,
    PlankNotFoundError,
)
from .geometry import find_diagonal_edge, measure
from .services import (
    IdAllocator,
    LayoutEngine,
    PartialPool,
    ScheduleEntry,
    ShuffleEngine,
    build_column,
    cutting_schedule,
    renumber_planks,
)
from .value_objects import (
    BoundaryEdge,
    CutEnd,
    LayoutParameters,
    RoomBounds,
    Vertex,
)

__all__ = [
    "BoundaryEdge",
    "Column",
    "CutEnd",
    "FloorboardsError",
    "GeometryError",
    "IdAllocator",
    "LayoutEngine",
    "LayoutParameters",
    "LayoutResult",
    "MalformedRoomError",
    "PartialPool",
    "Plank",
    "PlankNotFoundError",
    "Room",
    "RoomBounds",
    "ScheduleEntry",
    "ShuffleEngine",
    "Vertex",
    "build_column",
    "cutting_schedule",
    "find_diagonal_edge",
    "measure",
    "renumber_planks",
]
