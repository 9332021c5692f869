"""Exceptions raised by the floor layout domain."""


class FloorboardsError(Exception):
    """Base class for all layout errors."""

    pass


class MalformedRoomError(FloorboardsError):
    """Raised when room vertices or layout parameters are unusable."""

    pass


class GeometryError(FloorboardsError):
    """Raised when a column cannot be clipped to the room polygon.

    This happens when the room vertices are inconsistent, or when the
    start offset places a column outside the room.
    """

    def __init__(self, message: str, left: float | None = None) -> None:
        self.left = left
        super().__init__(message)


class PlankNotFoundError(FloorboardsError):
    """Raised when a plank uid is not in the pool or any column."""

    def __init__(self, uid: int) -> None:
        self.uid = uid
        super().__init__(f"No plank with uid {uid}")
