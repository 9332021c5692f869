"""Reading and writing room documents.

Every failure, whether the file is missing, unreadable, not JSON or not a
valid room, is raised as a ConfigError. Its ``error_type`` says which, and
for validation failures ``details`` lists one entry per offending field.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from floorboards.application.config.schema import RoomDocument


class ConfigError(Exception):
    """A room document could not be loaded or saved.

    Attributes:
        message: Text shown to the user
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse, validation, file_write_error
        path: Room file involved, if any
        details: For json_parse, the line and column. For validation, one
            ``{path, message, value, error_type}`` entry per field.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _field_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location, e.g. ``vertices[2].x``."""
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path += f".{segment}" if path else str(segment)
    return path or "document"


def _validation_details(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _field_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _validation_message(details: list[dict[str, Any]]) -> str:
    lines = ["Room document validation failed:"]
    for detail in details:
        line = f"  - {detail['path']}: {detail['message']}"
        value = detail.get("value")
        # Room-level errors carry the whole document as their input
        if value is not None and not isinstance(value, (dict, list)):
            line += f" (got: {value!r})"
        lines.append(line)
    return "\n".join(lines)


def load_document(path: Path) -> RoomDocument:
    """Load and validate a room document from a JSON file.

    Args:
        path: Path to the JSON room document

    Returns:
        A validated RoomDocument

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
            ``error_type`` tells which.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Room file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading room file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading room file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in room file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    return _validate(data, path)


def load_document_from_dict(data: dict[str, Any]) -> RoomDocument:
    """Validate a room document already parsed into a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data, None)


def _validate(data: Any, path: Path | None) -> RoomDocument:
    if not isinstance(data, dict):
        raise ConfigError(
            message="Room document must be a JSON object",
            error_type="validation",
            path=path,
        )
    try:
        return RoomDocument.model_validate(data)
    except PydanticValidationError as e:
        details = _validation_details(e)
        raise ConfigError(
            message=_validation_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def save_document(document: RoomDocument, path: Path) -> None:
    """Write a room document as JSON, using the saved-room key names.

    Raises:
        ConfigError: If the file cannot be written.
    """
    content = document.model_dump_json(by_alias=True, indent=2)
    try:
        path.write_text(content + "\n", encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            message=f"Error writing room file: {path}: {e}",
            error_type="file_write_error",
            path=path,
        )
