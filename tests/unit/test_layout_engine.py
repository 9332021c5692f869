"""Tests for the LayoutEngine greedy column filling.

Tests cover:
- Whole planks, trailing cuts and banking of offcuts
- Reuse of banked partials in later columns
- The short-trailing-cut retry rule
- Start offsets
- Material accounting (waste identity, kerf)
- Permanent user-supplied planks across relayouts
- No-op and fatal geometry conditions
"""

from __future__ import annotations

from dataclasses import replace

import pytest

from floorboards.domain import (
    CutEnd,
    GeometryError,
    LayoutEngine,
    LayoutParameters,
    Plank,
    PlankNotFoundError,
    Room,
    Vertex,
)


def all_planks(room: Room) -> list[Plank]:
    return list(room.placed_planks()) + list(room.partials)


def assert_waste_identity(room: Room) -> None:
    heights = sum(col.height for col in room.columns)
    assert heights + room.waste == pytest.approx(
        room.planks_needed * room.parameters.plank_length
    )


# =============================================================================
# Whole rooms
# =============================================================================


class TestSquareRoom:
    """100x100 room, 60 long planks, no kerf."""

    def test_offcut_equal_to_minimum_is_wasted(
        self, engine: LayoutEngine, square_room: Room
    ) -> None:
        """Each column needs 60 + 40; the 20 left over is not > 20."""
        result = engine.recompute(square_room)

        assert result.column_count == 10
        assert result.planks_needed == 20
        assert result.cuts == 10
        assert result.waste == pytest.approx(200.0)
        assert square_room.partials == []
        for col in square_room.columns:
            assert col.height == 100
            assert [p.length for p in col.planks] == [60, 40]
            assert [p.cut_end for p in col.planks] == [CutEnd.NONE, CutEnd.BOTTOM]

    def test_ids_are_contiguous(self, engine: LayoutEngine, square_room: Room) -> None:
        engine.recompute(square_room)
        ids = [p.id for p in square_room.placed_planks()]
        assert ids == list(range(1, 21))

    def test_offcuts_are_reused(self, engine: LayoutEngine, square_room: Room) -> None:
        """With a minimum of 15, offcuts cycle 20 -> 40 -> used up."""
        square_room.parameters = replace(square_room.parameters, min_plank_length=15)
        result = engine.recompute(square_room)

        assert result.planks_needed == 17
        assert result.cuts == 7
        assert result.waste == pytest.approx(20.0)
        lengths = [[p.length for p in col.planks] for col in square_room.columns]
        assert lengths[:3] == [[60, 40], [20, 60, 20], [40, 60]]
        assert lengths[3:6] == lengths[:3]
        # The last offcut is left in stock
        assert [(p.length, p.cut_end) for p in square_room.partials] == [(20, CutEnd.TOP)]

    def test_reused_partial_keeps_id_of_its_pair(
        self, engine: LayoutEngine, square_room: Room
    ) -> None:
        square_room.parameters = replace(square_room.parameters, min_plank_length=15)
        engine.recompute(square_room)
        first, second = square_room.columns[:2]

        cut = first.planks[-1]
        reused = second.planks[0]
        assert cut.cut_end is CutEnd.BOTTOM
        assert reused.cut_end is CutEnd.TOP
        assert reused.id == cut.id
        assert reused.uid != cut.uid
        assert (reused.left, reused.top) == (second.left, second.top)

    def test_planks_are_stacked(self, engine: LayoutEngine, square_room: Room) -> None:
        square_room.parameters = replace(square_room.parameters, min_plank_length=15)
        engine.recompute(square_room)

        for col in square_room.columns:
            y = col.top
            for plank in col.planks:
                assert plank.left == col.left
                assert plank.width == col.width
                assert plank.top == pytest.approx(y)
                y = plank.bottom
            assert y == pytest.approx(col.bottom)

    def test_recompute_is_repeatable(self, engine: LayoutEngine, square_room: Room) -> None:
        square_room.parameters = replace(square_room.parameters, min_plank_length=15)
        first = engine.recompute(square_room)
        lengths = [[p.length for p in col.planks] for col in square_room.columns]

        second = engine.recompute(square_room)

        assert second == first
        assert [[p.length for p in col.planks] for col in square_room.columns] == lengths
        assert len(square_room.partials) == 1


class TestExactMultiple:
    def test_no_cut_when_column_is_whole_planks(
        self, engine: LayoutEngine, square_params: LayoutParameters, make_rectangle
    ) -> None:
        room = Room(vertices=make_rectangle(0, 0, 10, 120), parameters=square_params)
        result = engine.recompute(room)

        assert result.column_count == 1
        assert result.planks_needed == 2
        assert result.cuts == 0
        assert result.waste == 0
        assert all(p.cut_end is CutEnd.NONE for p in room.placed_planks())


class TestRetry:
    """A partial start that leaves a too-short trailing cut is undone."""

    @pytest.fixture
    def room(self, make_rectangle) -> Room:
        params = LayoutParameters(
            plank_width=10,
            plank_length=60,
            cut_thickness=0,
            min_plank_length=25,
        )
        return Room(vertices=make_rectangle(0, 0, 30, 70), parameters=params)

    def test_column_relaid_without_partial(self, engine: LayoutEngine, room: Room) -> None:
        """Starting column 2 with the 50 offcut would leave a 20 cut (< 25)."""
        result = engine.recompute(room)

        for col in room.columns:
            assert [p.length for p in col.planks] == [60, 10]
            assert col.planks[0].cut_end is CutEnd.NONE
        assert result.planks_needed == 6
        assert result.cuts == 3

    def test_partial_returned_to_pool(self, engine: LayoutEngine, room: Room) -> None:
        engine.recompute(room)

        assert [p.length for p in room.partials] == [50, 50, 50]
        assert all(p.cut_end is CutEnd.TOP for p in room.partials)

    def test_retry_does_not_skip_ids(self, engine: LayoutEngine, room: Room) -> None:
        engine.recompute(room)
        assert [p.id for p in room.placed_planks()] == [1, 2, 3, 4, 5, 6]


class TestStartOffsets:
    def test_start_top_shortens_first_column(
        self, engine: LayoutEngine, square_room: Room
    ) -> None:
        square_room.parameters = replace(square_room.parameters, start_top=30)
        engine.recompute(square_room)
        first = square_room.columns[0]

        assert first.top == 30
        assert first.height == 70
        assert first.planks[0].top == 30
        assert [col.height for col in square_room.columns[1:]] == [100] * 9
        assert_waste_identity(square_room)

    def test_start_top_larger_than_column(
        self, engine: LayoutEngine, square_room: Room
    ) -> None:
        square_room.parameters = replace(square_room.parameters, start_top=150)
        engine.recompute(square_room)

        assert square_room.columns[0].height == 0
        assert square_room.columns[0].planks == []

    def test_negative_start_left(self, engine: LayoutEngine, square_room: Room) -> None:
        square_room.parameters = replace(square_room.parameters, start_left=-5)
        result = engine.recompute(square_room)

        lefts = [col.left for col in square_room.columns]
        assert lefts[0] == -5
        assert lefts[-1] == 95
        assert result.column_count == 11

    def test_start_left_outside_room_is_fatal(
        self, engine: LayoutEngine, square_room: Room
    ) -> None:
        square_room.parameters = replace(square_room.parameters, start_left=-30)
        with pytest.raises(GeometryError):
            engine.recompute(square_room)


class TestAccounting:
    @pytest.fixture
    def room(self, l_shaped_vertices: list[Vertex]) -> Room:
        params = LayoutParameters(
            plank_width=10,
            plank_length=60,
            cut_thickness=0.5,
            min_plank_length=5,
        )
        return Room(vertices=l_shaped_vertices, parameters=params)

    def test_waste_identity(self, engine: LayoutEngine, room: Room) -> None:
        engine.recompute(room)
        assert_waste_identity(room)

    def test_column_heights_follow_room(self, engine: LayoutEngine, room: Room) -> None:
        engine.recompute(room)
        assert [col.height for col in room.columns] == [120] * 5 + [50] * 5

    def test_cut_pairs_add_up_to_plank_length(
        self, engine: LayoutEngine, room: Room
    ) -> None:
        engine.recompute(room)
        pieces: dict[int, dict[CutEnd, float]] = {}
        for plank in all_planks(room):
            if plank.cut_end is not CutEnd.NONE:
                pieces.setdefault(plank.id, {})[plank.cut_end] = plank.length

        pairs = [p for p in pieces.values() if len(p) == 2]
        assert pairs
        for pair in pairs:
            total = pair[CutEnd.BOTTOM] + pair[CutEnd.TOP] + 0.5
            assert total == pytest.approx(60)

    def test_banked_partials_are_long_enough(
        self, engine: LayoutEngine, room: Room
    ) -> None:
        engine.recompute(room)
        assert all(p.length > 5 for p in room.partials)


class TestNoOp:
    def test_fewer_than_three_vertices(self, engine: LayoutEngine) -> None:
        room = Room(vertices=[Vertex(0, 0), Vertex(100, 0)])
        result = engine.recompute(room)

        assert result.column_count == 0
        assert result.planks_needed == 0
        assert room.columns == []

    def test_room_narrower_than_plank(
        self, engine: LayoutEngine, square_params: LayoutParameters, make_rectangle
    ) -> None:
        room = Room(vertices=make_rectangle(0, 0, 5, 100), parameters=square_params)
        result = engine.recompute(room)

        assert result.column_count == 0
        assert result.waste == 0


class TestPermanentPartials:
    def test_user_plank_is_laid(self, engine: LayoutEngine, square_room: Room) -> None:
        plank = engine.add_partial(square_room, 40, CutEnd.TOP)
        first = square_room.columns[0]

        assert first.planks[0] is plank
        assert plank.permanent
        assert plank.id == 1
        assert [p.length for p in first.planks] == [40, 60]
        # The user plank is stock, not a purchase
        assert square_room.planks_needed == 19
        assert square_room.cuts == 9

    def test_user_plank_survives_relayout(
        self, engine: LayoutEngine, square_room: Room
    ) -> None:
        plank = engine.add_partial(square_room, 40, CutEnd.TOP)
        engine.recompute(square_room)

        assert square_room.columns[0].planks[0] is plank
        assert square_room.planks_needed == 19

    def test_uid_survives_relayout(self, engine: LayoutEngine, square_room: Room) -> None:
        engine.recompute(square_room)
        plank = engine.add_partial(square_room, 40, CutEnd.TOP)
        engine.recompute(square_room)

        uids = [p.uid for p in all_planks(square_room)]
        assert len(uids) == len(set(uids))
        assert engine.remove_partial(square_room, plank.uid) is plank

    def test_remove_user_plank(self, engine: LayoutEngine, square_room: Room) -> None:
        plank = engine.add_partial(square_room, 40, CutEnd.TOP)
        engine.remove_partial(square_room, plank.uid)
        result = engine.recompute(square_room)

        assert result.planks_needed == 20
        assert plank not in all_planks(square_room)

    def test_remove_unknown_plank(self, engine: LayoutEngine, square_room: Room) -> None:
        engine.recompute(square_room)
        with pytest.raises(PlankNotFoundError):
            engine.remove_partial(square_room, 1000)

    def test_bottom_cut_stock_is_not_used_to_start(
        self, engine: LayoutEngine, square_room: Room
    ) -> None:
        plank = engine.add_partial(square_room, 40, CutEnd.BOTTOM)

        assert square_room.partials == [plank]
        assert square_room.planks_needed == 20

    def test_clear_partials(self, engine: LayoutEngine, square_room: Room) -> None:
        engine.add_partial(square_room, 40, CutEnd.TOP)
        engine.clear_partials(square_room)
        result = engine.recompute(square_room)

        assert result.planks_needed == 20
        assert not any(p.permanent for p in all_planks(square_room))
