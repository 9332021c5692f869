"""Conversion between room documents and domain objects.

Each entity has one explicit conversion in each direction, so a saved
layout can be restored exactly and a computed layout written back out.
"""

from __future__ import annotations

from itertools import count
from typing import Iterator

from floorboards.application.config.loader import load_document_from_dict
from floorboards.application.config.schema import (
    ColumnConfig,
    PlankConfig,
    RoomDocument,
    VertexConfig,
)
from floorboards.domain.entities import Column, Plank, Room
from floorboards.domain.value_objects import Vertex


def config_to_room(document: RoomDocument) -> Room:
    """Build a Room from a validated document.

    Columns and partials in the document are restored as they are. Planks
    saved without a uid are given one above the highest uid present.

    Raises:
        MalformedRoomError: If the vertices do not describe a rectilinear room.
    """
    saved_uids = [p.uid for p in _document_planks(document) if p.uid is not None]
    fresh_uids = count(max(saved_uids, default=-1) + 1)

    def to_plank(config: PlankConfig) -> Plank:
        return Plank(
            uid=config.uid if config.uid is not None else next(fresh_uids),
            id=config.id,
            length=config.length,
            width=config.width,
            cut_end=config.cut_end,
            left=config.left,
            top=config.top,
            permanent=config.permanent,
        )

    columns = [
        Column(
            left=col.left,
            width=col.width,
            top=col.top,
            bottom=col.bottom,
            planks=[to_plank(p) for p in col.planks],
        )
        for col in document.columns
    ]

    return Room(
        vertices=[Vertex(x=v.x, y=v.y, label=v.id or "") for v in document.vertices],
        parameters=document.parameters(),
        columns=columns,
        partials=[to_plank(p) for p in document.partials],
        planks_needed=document.planks_needed,
        cuts=document.cuts,
    )


def room_to_config(room: Room) -> RoomDocument:
    """Capture a Room, including its layout, as a document."""
    params = room.parameters
    return RoomDocument(
        vertices=[
            VertexConfig(x=v.x, y=v.y, id=v.label or None) for v in room.vertices
        ],
        plank_width=params.plank_width,
        plank_length=params.plank_length,
        cut_thickness=params.cut_thickness,
        min_plank_length=params.min_plank_length,
        start_left=params.start_left,
        start_top=params.start_top,
        columns=[
            ColumnConfig(
                left=col.left,
                width=col.width,
                top=col.top,
                bottom=col.bottom,
                planks=[_plank_to_config(p) for p in col.planks],
            )
            for col in room.columns
        ],
        partials=[_plank_to_config(p) for p in room.partials],
        planks_needed=room.planks_needed,
        cuts=room.cuts,
        waste=room.waste if room.columns else 0.0,
    )


def merge_parameters_with_cli(
    document: RoomDocument,
    *,
    plank_width: float | None = None,
    plank_length: float | None = None,
    cut_thickness: float | None = None,
    min_plank_length: float | None = None,
    start_left: float | None = None,
    start_top: float | None = None,
) -> RoomDocument:
    """Override document parameters with CLI values.

    Only arguments that are not None override the document. The result is
    validated again, so an out-of-range override is reported like a bad
    document value.

    Returns:
        A new RoomDocument with merged values.

    Raises:
        ConfigError: If a merged value fails validation.
    """
    overrides = {
        "plank_width": plank_width,
        "plank_length": plank_length,
        "cut_thickness": cut_thickness,
        "min_plank_length": min_plank_length,
        "start_left": start_left,
        "start_top": start_top,
    }
    data = document.model_dump()
    data.update({key: value for key, value in overrides.items() if value is not None})
    return load_document_from_dict(data)


def _plank_to_config(plank: Plank) -> PlankConfig:
    return PlankConfig(
        uid=plank.uid,
        id=plank.id,
        cut_end=plank.cut_end,
        left=plank.left,
        top=plank.top,
        width=plank.width,
        length=plank.length,
        permanent=plank.permanent,
    )


def _document_planks(document: RoomDocument) -> Iterator[PlankConfig]:
    yield from document.partials
    for col in document.columns:
        yield from col.planks
