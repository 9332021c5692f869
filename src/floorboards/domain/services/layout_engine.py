"""Greedy column-by-column plank layout.

Working left to right, the room is divided into columns one plank wide.
Each column is limited by where it crosses the room polygon, then filled
top to bottom:

1. start with the longest banked top-cut partial that fits, if any;
2. lay whole planks while at least a whole plank length remains;
3. cut one new plank for whatever is left, banking the offcut as a
   partial for a later column if it is long enough to use.

If starting with a partial would leave a trailing piece shorter than the
minimum plank length, the column is laid again starting with a whole
plank, which moves the cut to a more useful place.
"""

from __future__ import annotations

import logging
from itertools import chain

from floorboards.domain.entities import Column, LayoutResult, Plank, Room
from floorboards.domain.services.column_builder import build_column
from floorboards.domain.services.inventory import IdAllocator, PartialPool
from floorboards.domain.value_objects import CutEnd

logger = logging.getLogger(__name__)

# Remaining column heights closer than this to zero or to a whole plank
# length are treated as exact.
LENGTH_TOLERANCE = 1e-9


class LayoutEngine:
    """Lays planks into a room and keeps track of the pre-cut stock.

    The engine owns the id allocator, so plank numbering is local to the
    engine and restarts on every layout run.

    Attributes:
        allocator: Source of plank ids and uids.
    """

    def __init__(self, allocator: IdAllocator | None = None) -> None:
        self.allocator = allocator or IdAllocator()

    def recompute(self, room: Room) -> LayoutResult:
        """Lay out the whole room from scratch.

        Only permanent (user-supplied) partials survive from the previous
        layout; every other plank assignment is rebuilt. The room's columns,
        partials and counters are replaced in place.

        Args:
            room: Room to lay out.

        Returns:
            Counters for the new layout.

        Raises:
            GeometryError: If a column does not cross the room polygon.
        """
        params = room.parameters
        pool = PartialPool(room.partials)

        self.allocator.reset(uid_floor=_uid_floor(room))
        pool.collect_permanent(room.columns, self.allocator)

        room.columns = []
        room.planks_needed = 0
        room.cuts = 0

        if not room.is_polygon:
            logger.info("Room has %d vertices, nothing to lay", len(room.vertices))
            return room.result()
        if room.bounds.width < params.plank_width:
            logger.info(
                "Room is %s wide, narrower than one plank; nothing to lay",
                room.bounds.width,
            )
            return room.result()

        x = room.bounds.left + params.start_left
        allow_partial = True

        while x < room.bounds.right:
            col = build_column(x, params.plank_width, room.edges)
            if not room.columns and params.start_top:
                col.top = min(col.top + params.start_top, col.bottom)

            if not self._fill_column(room, col, pool, allow_partial):
                logger.debug("Column at x=%s: short trailing cut, retrying", x)
                allow_partial = False
                continue

            room.columns.append(col)
            x += params.plank_width
            allow_partial = True

        result = room.result()
        logger.info(
            "Laid %d columns: %d planks, %d cuts, %.1f waste, %d partials left",
            result.column_count,
            result.planks_needed,
            result.cuts,
            result.waste,
            len(pool),
        )
        return result

    def _fill_column(
        self, room: Room, col: Column, pool: PartialPool, allow_partial: bool
    ) -> bool:
        """Fill one column with planks.

        Returns:
            False if the column has to be laid again without a starting
            partial. The pool is left as it was in that case.
        """
        params = room.parameters
        y = col.top
        h = col.height

        partial: Plank | None = None
        if allow_partial:
            partial = pool.select(CutEnd.TOP, 0.0, max_length=h)
            if partial is not None:
                h -= partial.length

        full_planks = 0
        while h >= params.plank_length - LENGTH_TOLERANCE:
            full_planks += 1
            h -= params.plank_length
        if abs(h) < LENGTH_TOLERANCE:
            h = 0.0

        if partial is not None and 0 < h < params.min_plank_length:
            pool.add(partial)
            return False

        if partial is not None:
            partial.place(col.left, y)
            col.planks.append(partial)
            y += partial.length

        for _ in range(full_planks):
            col.planks.append(
                self.allocator.new_plank(
                    params.plank_length, params.plank_width, left=col.left, top=y
                )
            )
            y += params.plank_length
        room.planks_needed += full_planks

        if h > 0:
            self._cut_trailing_plank(room, col, pool, y, h)

        logger.debug(
            "Column at x=%s, height %.1f: %s%d whole planks%s",
            col.left,
            col.height,
            f"partial {partial.id} + " if partial is not None else "",
            full_planks,
            f" + cut {h:.1f}" if h > 0 else "",
        )
        return True

    def _cut_trailing_plank(
        self, room: Room, col: Column, pool: PartialPool, y: float, h: float
    ) -> None:
        """Cut a new plank to finish the column and bank the offcut."""
        params = room.parameters
        room.planks_needed += 1
        room.cuts += 1

        cut = self.allocator.new_plank(
            h, params.plank_width, cut_end=CutEnd.BOTTOM, left=col.left, top=y
        )
        col.planks.append(cut)

        leftover = params.plank_length - h - params.cut_thickness
        if leftover > params.min_plank_length:
            pool.add(
                self.allocator.new_plank(
                    leftover,
                    params.plank_width,
                    id=cut.id,
                    cut_end=CutEnd.TOP,
                    left=col.left,
                    top=y + h,
                )
            )
        else:
            logger.debug("Plank %d: %.1f offcut wasted", cut.id, leftover)

    def add_partial(
        self,
        room: Room,
        length: float,
        cut_end: CutEnd,
        recompute: bool = True,
    ) -> Plank:
        """Add a user-supplied pre-cut plank to the room's stock.

        The plank is permanent: it is kept across layout runs until it is
        removed or the partials are cleared.

        Args:
            room: Room to add the plank to.
            length: Length of the pre-cut plank.
            cut_end: Which end of the plank has been cut.
            recompute: Whether to lay the room out again straight away.

        Returns:
            The new plank.
        """
        self.allocator.reserve_uids(_uid_floor(room))
        plank = self.allocator.new_plank(
            length, room.parameters.plank_width, cut_end=cut_end, permanent=True
        )
        PartialPool(room.partials).add(plank)
        logger.debug("Added pre-cut plank uid=%d, length %.1f", plank.uid, length)
        if recompute:
            self.recompute(room)
        return plank

    def remove_partial(self, room: Room, uid: int) -> Plank:
        """Retract a plank by uid, from the stock or from the layout.

        Raises:
            PlankNotFoundError: If no plank has this uid.
        """
        return PartialPool(room.partials).remove_by_uid(uid, room.columns)

    def clear_partials(self, room: Room) -> None:
        """Discard all banked partials, including user-supplied ones."""
        PartialPool(room.partials).clear(room.columns)


def _uid_floor(room: Room) -> int:
    """One more than the highest uid of any plank the room holds."""
    in_use = chain(room.partials, room.placed_planks())
    return max((p.uid for p in in_use), default=-1) + 1
