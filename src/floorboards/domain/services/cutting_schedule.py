"""Cutting schedule: which planks to cut, and where."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from floorboards.domain.entities import Column
from floorboards.domain.value_objects import CutEnd


@dataclass(frozen=True)
class ScheduleEntry:
    """The pieces cut from one plank.

    Attributes:
        plank_id: User-facing number of the plank.
        bottom_piece: Length of the piece whose bottom end is cut, or None
            if that piece is not laid.
        top_piece: Length of the piece whose top end is cut, or None if
            that piece is not laid.
    """

    plank_id: int
    bottom_piece: float | None = None
    top_piece: float | None = None

    def __str__(self) -> str:
        bottom = "" if self.bottom_piece is None else f"{self.plank_id}< {self.bottom_piece:.1f}"
        top = "" if self.top_piece is None else f"{self.top_piece:.1f} {self.plank_id}>"
        return f"{bottom} | {top}"


def cutting_schedule(columns: Iterable[Column]) -> list[ScheduleEntry]:
    """List the cut planks laid in the columns, ordered by plank id."""
    pieces: dict[int, dict[CutEnd, float]] = {}
    for col in columns:
        for plank in col.planks:
            if plank.cut_end is not CutEnd.NONE:
                pieces.setdefault(plank.id, {})[plank.cut_end] = plank.length

    return [
        ScheduleEntry(
            plank_id=plank_id,
            bottom_piece=cut.get(CutEnd.BOTTOM),
            top_piece=cut.get(CutEnd.TOP),
        )
        for plank_id, cut in sorted(pieces.items())
    ]
