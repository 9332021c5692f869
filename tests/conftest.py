"""Pytest configuration and shared fixtures for floorboards tests."""

from __future__ import annotations

import pytest

from floorboards.domain import LayoutEngine, LayoutParameters, Room, Vertex


def rectangle(left: float, top: float, right: float, bottom: float) -> list[Vertex]:
    """Vertices of an axis-aligned rectangular room, clockwise from top left."""
    return [
        Vertex(left, top, "a"),
        Vertex(right, top, "b"),
        Vertex(right, bottom, "c"),
        Vertex(left, bottom, "d"),
    ]


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def square_params() -> LayoutParameters:
    """10 wide, 60 long planks with no kerf and a minimum length of 20."""
    return LayoutParameters(
        plank_width=10.0,
        plank_length=60.0,
        cut_thickness=0.0,
        min_plank_length=20.0,
        start_left=0.0,
    )


@pytest.fixture
def square_room(square_params: LayoutParameters) -> Room:
    """A 100x100 room."""
    return Room(vertices=rectangle(0, 0, 100, 100), parameters=square_params)


@pytest.fixture
def l_shaped_vertices() -> list[Vertex]:
    """An L-shaped room: 100 wide at the top, the left half 120 deep,
    the right half 50 deep."""
    return [
        Vertex(0, 0),
        Vertex(100, 0),
        Vertex(100, 50),
        Vertex(50, 50),
        Vertex(50, 120),
        Vertex(0, 120),
    ]


@pytest.fixture
def engine() -> LayoutEngine:
    return LayoutEngine()


@pytest.fixture
def make_rectangle():
    """Factory for rectangular room vertices: ``make_rectangle(l, t, r, b)``."""
    return rectangle
