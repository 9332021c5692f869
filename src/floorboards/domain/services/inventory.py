"""Plank inventory: the pool of partial planks and plank numbering.

Partial planks are offcuts banked when a plank is cut, plus any pre-cut
stock the user supplies. A pool is an explicit object wrapping the room's
partials list, so columns take material from it and bank leftovers into
it without any shared module state.
"""

from __future__ import annotations

import logging
from typing import Iterable

from floorboards.domain.entities import Column, Plank
from floorboards.domain.exceptions import PlankNotFoundError
from floorboards.domain.value_objects import CutEnd

logger = logging.getLogger(__name__)


class IdAllocator:
    """Issues plank numbers and internal identities.

    User-facing ids restart from 1 on every layout run. Internal uids are
    never reused, so a uid handed out to a caller keeps identifying the same
    plank across runs.
    """

    def __init__(self) -> None:
        self._next_id = 1
        self._next_uid = 0

    def reset(self, uid_floor: int = 0) -> None:
        """Restart plank numbering.

        Args:
            uid_floor: Lowest uid that may be issued from now on. Pass one
                more than the highest uid still in use.
        """
        self._next_id = 1
        self.reserve_uids(uid_floor)

    def reserve_uids(self, uid_floor: int) -> None:
        """Make sure no uid below ``uid_floor`` is issued."""
        self._next_uid = max(self._next_uid, uid_floor)

    def next_id(self) -> int:
        value = self._next_id
        self._next_id += 1
        return value

    def next_uid(self) -> int:
        value = self._next_uid
        self._next_uid += 1
        return value

    def new_plank(self, length: float, width: float, **kwargs) -> Plank:
        """Create a plank with a fresh uid, and a fresh id unless one is given."""
        plank_id = kwargs.pop("id", None)
        return Plank(
            uid=self.next_uid(),
            id=self.next_id() if plank_id is None else plank_id,
            length=length,
            width=width,
            **kwargs,
        )


class PartialPool:
    """Partial planks available for reuse.

    Attributes:
        planks: The pooled planks. This is the room's own list; the pool
            mutates it in place.
    """

    def __init__(self, planks: list[Plank]) -> None:
        self.planks = planks

    def __len__(self) -> int:
        return len(self.planks)

    def __iter__(self):
        return iter(self.planks)

    def select(
        self,
        cut_end: CutEnd,
        min_length: float = 0.0,
        max_length: float | None = None,
    ) -> Plank | None:
        """Take the longest partial with the given cut end out of the pool.

        Args:
            cut_end: Cut end the partial must have.
            min_length: Partials must be strictly longer than this.
            max_length: If given, partials longer than this are skipped.

        Returns:
            The selected plank, removed from the pool, or None if nothing
            matches. Ties go to the first plank found.
        """
        best = -1
        best_length = 0.0
        for i, partial in enumerate(self.planks):
            if partial.cut_end != cut_end or partial.length <= min_length:
                continue
            if max_length is not None and partial.length > max_length:
                continue
            if best < 0 or partial.length > best_length:
                best = i
                best_length = partial.length

        if best < 0:
            return None
        return self.planks.pop(best)

    def add(self, plank: Plank) -> None:
        self.planks.append(plank)

    def collect_permanent(
        self, columns: Iterable[Column], allocator: IdAllocator
    ) -> list[Plank]:
        """Retain only user-supplied planks, wherever they currently are.

        Permanent planks are gathered from the pool and from the placed
        columns into the pool; every other partial is discarded. The
        retained planks are renumbered from the allocator.

        Returns:
            The retained planks.
        """
        kept = [p for p in self.planks if p.permanent]
        for col in columns:
            kept.extend(p for p in col.planks if p.permanent)

        for plank in kept:
            plank.id = allocator.next_id()

        self.planks[:] = kept
        logger.debug("Retained %d permanent partials", len(kept))
        return kept

    def remove_by_uid(self, uid: int, columns: Iterable[Column]) -> Plank:
        """Remove a plank identified by uid.

        The plank may be resting in the pool, or already laid in a column.

        Raises:
            PlankNotFoundError: If no plank has this uid.
        """
        for i, plank in enumerate(self.planks):
            if plank.uid == uid:
                return self.planks.pop(i)

        for col in columns:
            for i, plank in enumerate(col.planks):
                if plank.uid == uid:
                    return col.planks.pop(i)

        raise PlankNotFoundError(uid)

    def clear(self, columns: Iterable[Column]) -> None:
        """Empty the pool and take permanent planks out of the columns."""
        self.planks.clear()
        for col in columns:
            col.planks[:] = [p for p in col.planks if not p.permanent]
