"""Pydantic models for room documents.

A room document describes the room polygon and the layout parameters, and
optionally a previously computed layout (columns and partial planks) so a
saved room can be reloaded without laying it out again. Documents saved by
the browser planner load unchanged; fields it wrote that are derived
here (edges, bounds) are ignored.
"""

from __future__ import annotations

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from floorboards.domain.geometry import find_diagonal_edge
from floorboards.domain.value_objects import CutEnd, LayoutParameters, Vertex

_DEFAULTS = LayoutParameters()


class VertexConfig(BaseModel):
    """A room polygon vertex.

    Attributes:
        x: Horizontal coordinate, growing to the right.
        y: Vertical coordinate, growing downwards.
        id: Optional label tying the vertex to a room feature.
    """

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    x: float
    y: float
    id: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: object) -> object:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class PlankConfig(BaseModel):
    """A laid or banked plank."""

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    uid: int | None = Field(default=None, ge=0)
    id: int = Field(ge=0)
    cut_end: CutEnd = CutEnd.NONE
    left: float = 0.0
    top: float = 0.0
    width: float = Field(gt=0)
    length: float = Field(gt=0)
    permanent: bool = False


class ColumnConfig(BaseModel):
    """A laid column and its planks."""

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    left: float
    width: float = Field(gt=0)
    top: float
    bottom: float
    planks: list[PlankConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_extent(self) -> "ColumnConfig":
        if self.top > self.bottom:
            raise ValueError(
                f"Column top ({self.top}) must not be below its bottom ({self.bottom})"
            )
        return self


class RoomDocument(BaseModel):
    """Root model of a room document.

    Parameter keys use the upper-case names of the saved-room format
    (``PLANK_WIDTH`` and so on). Python field names are accepted as well.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, allow_inf_nan=False)

    vertices: list[VertexConfig]

    plank_width: float = Field(
        default=_DEFAULTS.plank_width, gt=0, alias="PLANK_WIDTH",
        description="Plank width, and so column width",
    )
    plank_length: float = Field(
        default=_DEFAULTS.plank_length, gt=0, alias="PLANK_LENGTH",
        description="Length of an uncut plank",
    )
    cut_thickness: float = Field(
        default=_DEFAULTS.cut_thickness, ge=0, alias="CUT_THICKNESS",
        description="Saw kerf lost on each cut",
    )
    min_plank_length: float = Field(
        default=_DEFAULTS.min_plank_length, ge=0, alias="MIN_PLANK_LENGTH",
        description="Shortest plank or offcut worth laying or keeping",
    )
    start_left: float = Field(
        default=_DEFAULTS.start_left, alias="START_LEFT",
        description="Horizontal offset of the first column",
    )
    start_top: float = Field(
        default=_DEFAULTS.start_top, ge=0, alias="START_TOP",
        description="Vertical offset of the first plank in the first column",
    )

    columns: list[ColumnConfig] = Field(default_factory=list)
    partials: list[PlankConfig] = Field(default_factory=list)
    planks_needed: int = Field(default=0, ge=0, alias="planksNeeded")
    cuts: int = Field(default=0, ge=0)
    waste: float | None = Field(
        default=None, description="Written on save, recomputed on load"
    )

    @model_validator(mode="after")
    def check_rectilinear(self) -> "RoomDocument":
        vertices = [Vertex(x=v.x, y=v.y) for v in self.vertices]
        diagonal = find_diagonal_edge(vertices)
        if diagonal is not None:
            index, p1, p2 = diagonal
            raise ValueError(
                f"vertices[{index}] ({p1.x}, {p1.y}) to ({p2.x}, {p2.y}) "
                "is a diagonal edge; rooms must be rectilinear"
            )
        return self

    @model_validator(mode="after")
    def check_unique_uids(self) -> "RoomDocument":
        uids = [p.uid for p in self.partials if p.uid is not None]
        for col in self.columns:
            uids.extend(p.uid for p in col.planks if p.uid is not None)
        if len(uids) != len(set(uids)):
            raise ValueError("Plank uids must be unique")
        return self

    @property
    def has_layout(self) -> bool:
        """True if the document carries a computed layout."""
        return bool(self.columns)

    def parameters(self) -> LayoutParameters:
        return LayoutParameters(
            plank_width=self.plank_width,
            plank_length=self.plank_length,
            cut_thickness=self.cut_thickness,
            min_plank_length=self.min_plank_length,
            start_left=self.start_left,
            start_top=self.start_top,
        )
