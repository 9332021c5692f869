"""Floor planning use cases: load, lay out, shuffle and save a room."""

from __future__ import annotations

import logging
import random
from pathlib import Path

from floorboards.application.config import (
    RoomDocument,
    config_to_room,
    load_document,
    room_to_config,
    save_document,
)
from floorboards.domain import (
    CutEnd,
    LayoutEngine,
    LayoutResult,
    Plank,
    Room,
    ScheduleEntry,
    ShuffleEngine,
    cutting_schedule,
)

logger = logging.getLogger(__name__)


class FloorPlanner:
    """Coordinates the layout and shuffle engines for a room.

    Attributes:
        engine: Layout engine used for every layout run.
        shuffler: Shuffle engine used to break up staircases.
    """

    def __init__(
        self,
        engine: LayoutEngine | None = None,
        shuffler: ShuffleEngine | None = None,
        seed: int | None = None,
    ) -> None:
        self.engine = engine or LayoutEngine()
        self.shuffler = shuffler or ShuffleEngine(random.Random(seed))

    def room_from_document(self, document: RoomDocument, recompute: bool = False) -> Room:
        """Build a room from a document, laying it out if needed.

        A document that already holds columns is restored as saved, unless
        ``recompute`` is set.
        """
        room = config_to_room(document)
        if recompute or not document.has_layout:
            self.engine.recompute(room)
        else:
            logger.debug("Restored %d saved columns", len(room.columns))
        return room

    def load(self, path: Path, recompute: bool = False) -> Room:
        return self.room_from_document(load_document(path), recompute=recompute)

    def save(self, room: Room, path: Path) -> None:
        save_document(room_to_config(room), path)

    def recompute(self, room: Room) -> LayoutResult:
        return self.engine.recompute(room)

    def shuffle(self, room: Room) -> LayoutResult:
        """Shuffle equal-height columns and renumber the planks.

        The first column stays put when the layout has a vertical start
        offset, since that column is cut to match it.
        """
        self.shuffler.shuffle(
            room.columns,
            room.partials,
            pin_first=room.parameters.start_top != 0,
        )
        return room.result()

    def add_partial(self, room: Room, length: float, cut_end: CutEnd) -> Plank:
        return self.engine.add_partial(room, length, cut_end)

    def remove_partial(self, room: Room, uid: int) -> Plank:
        return self.engine.remove_partial(room, uid)

    def clear_partials(self, room: Room) -> None:
        self.engine.clear_partials(room)

    def schedule(self, room: Room) -> list[ScheduleEntry]:
        return cutting_schedule(room.columns)
