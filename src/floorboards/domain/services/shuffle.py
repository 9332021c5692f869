"""Column shuffling to break up staircase effects.

Laying columns strictly left to right makes columns of equal height line
up their joints in a repeating diagonal. Swapping equal-height columns
around breaks the pattern without changing the material used, since the
columns are only moved, never refilled.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable

from floorboards.domain.entities import Column, Plank

logger = logging.getLogger(__name__)


class ShuffleEngine:
    """Randomly reorders columns of equal height.

    Attributes:
        rng: Random source. Pass a seeded ``random.Random`` for a
            repeatable shuffle.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def shuffle(
        self,
        columns: list[Column],
        partials: Iterable[Plank] = (),
        pin_first: bool = False,
    ) -> None:
        """Shuffle equal-height columns, then renumber planks.

        The columns list is sorted by ``left`` afterwards. Planks are
        renumbered in reading order: left to right, then top to bottom
        within a column. Both pieces of a cut plank keep sharing an id.

        Args:
            columns: Columns to shuffle, modified in place.
            partials: Banked partial planks, renumbered after the placed
                planks so that ids stay contiguous.
            pin_first: Keep the first column where it is. Used when the
                first column has a vertical start offset.
        """
        bins: dict[float, list[Column]] = {}
        for i, col in enumerate(columns):
            if pin_first and i == 0:
                continue
            bins.setdefault(col.height, []).append(col)

        for height, bin_ in bins.items():
            if len(bin_) > 1:
                logger.debug("Shuffling %d columns of height %s", len(bin_), height)
                self._swap_columns(bin_)

        columns.sort(key=lambda col: col.left)
        renumber_planks(columns, partials)

    def _swap_columns(self, bin_: list[Column]) -> None:
        """Make 2n random transpositions of column positions within a bin."""
        size = len(bin_)
        for i in range(2 * size):
            src = i % size
            dst = src
            while dst == src:
                dst = self.rng.randrange(size)
            bin_[src].left, bin_[dst].left = bin_[dst].left, bin_[src].left
            bin_[src].line_up_planks()
            bin_[dst].line_up_planks()


def renumber_planks(columns: Iterable[Column], partials: Iterable[Plank] = ()) -> int:
    """Renumber planks 1..N in reading order.

    Args:
        columns: Columns in left-to-right order.
        partials: Banked planks, numbered after the placed planks.

    Returns:
        The highest id assigned.
    """
    remap: dict[int, int] = {}

    def assign(plank: Plank) -> None:
        if plank.id not in remap:
            remap[plank.id] = len(remap) + 1
        plank.id = remap[plank.id]

    for col in columns:
        for plank in col.planks:
            assign(plank)
    for plank in partials:
        assign(plank)
    return len(remap)
