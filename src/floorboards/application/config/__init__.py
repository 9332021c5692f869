"""Room document schema, loading and conversion.

Public API:
    - RoomDocument: Root document model
    - VertexConfig, ColumnConfig, PlankConfig: Nested document models
    - load_document: Load a document from a JSON file
    - load_document_from_dict: Validate an already parsed document
    - save_document: Write a document as JSON
    - ConfigError: Exception for document errors
    - config_to_room: Convert a document to a domain Room
    - room_to_config: Convert a Room, with its layout, to a document
    - merge_parameters_with_cli: Apply CLI parameter overrides

Example:
    >>> from pathlib import Path
    >>> from floorboards.application.config import load_document, ConfigError
    >>>
    >>> try:
    ...     document = load_document(Path("room.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from floorboards.application.config.adapter import (
    config_to_room,
    merge_parameters_with_cli,
    room_to_config,
)
from floorboards.application.config.loader import (
    ConfigError,
    load_document,
    load_document_from_dict,
    save_document,
)
from floorboards.application.config.schema import (
    ColumnConfig,
    PlankConfig,
    RoomDocument,
    VertexConfig,
)

__all__ = [
    "ColumnConfig",
    "ConfigError",
    "PlankConfig",
    "RoomDocument",
    "VertexConfig",
    "config_to_room",
    "load_document",
    "load_document_from_dict",
    "merge_parameters_with_cli",
    "room_to_config",
    "save_document",
]
