"""Settings and catalogue file loading with comprehensive error handling.

Handles file system errors, JSON parsing errors and Pydantic validation
errors, turning each into a ``ConfigError`` with an actionable message.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from tabletops.application.config.schema import CatalogueMaterialConfig, ConfiguratorSettings

_CATALOGUE_ADAPTER = TypeAdapter(list[CatalogueMaterialConfig])


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, json_parse, validation)
        path: Path to the file (if applicable)
        details: Additional details (line/column for JSON, validation errors)
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


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("pricing", "timeout_seconds"))
        'pricing.timeout_seconds'
        >>> _format_json_path((0, "maxLength"))
        '[0].maxLength'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in config file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e


def _validation_error(e: PydanticValidationError, path: Path | None) -> ConfigError:
    details = _extract_validation_errors(e)
    return ConfigError(
        message=_format_validation_error_message(details),
        error_type="validation",
        path=path,
        details=details,
    )


def load_settings(path: Path) -> ConfiguratorSettings:
    """Load and validate configurator settings from a JSON file.

    Raises:
        ConfigError: With error_type "file_not_found", "json_parse" or
            "validation".
    """
    data = _read_json(path)
    try:
        return ConfiguratorSettings.model_validate(data)
    except PydanticValidationError as e:
        raise _validation_error(e, path) from e


def load_settings_from_dict(data: dict[str, Any]) -> ConfiguratorSettings:
    """Validate configurator settings supplied as a dictionary."""
    try:
        return ConfiguratorSettings.model_validate(data)
    except PydanticValidationError as e:
        raise _validation_error(e, None) from e


def load_catalogue(path: Path) -> list[CatalogueMaterialConfig]:
    """Load a catalogue file: a JSON array of material records.

    Raises:
        ConfigError: If the file is missing, malformed, or a record is invalid.
    """
    data = _read_json(path)
    try:
        return _CATALOGUE_ADAPTER.validate_python(data)
    except PydanticValidationError as e:
        raise _validation_error(e, path) from e
