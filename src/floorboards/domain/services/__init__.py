"""Domain services for laying planks.

This package provides:
- Column construction, clipped to the room polygon
- The partial plank pool and plank numbering
- The greedy layout engine
- Column shuffling and plank renumbering
- The cutting schedule
"""

from .column_builder import build_column
from .cutting_schedule import ScheduleEntry, cutting_schedule
from .inventory import IdAllocator, PartialPool
from .layout_engine import LayoutEngine
from .shuffle import ShuffleEngine, renumber_planks

__all__ = [
    "IdAllocator",
    "LayoutEngine",
    "PartialPool",
    "ScheduleEntry",
    "ShuffleEngine",
    "build_column",
    "cutting_schedule",
    "renumber_planks",
]
