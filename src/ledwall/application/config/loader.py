"""Loading of JSON cabinet catalogs.

File system, JSON syntax and schema problems are all reported as
``ConfigError``, whose ``error_type`` tells them apart and whose ``details``
point at the offending part of the file.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ledwall.application.config.schema import CatalogConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """A catalog file or dictionary could not be turned into a catalog.

    Attributes:
        message: Human readable description, one line per problem.
        error_type: One of file_not_found, file_read_error, json_parse, validation.
        path: The catalog file, when loading from disk.
        details: One dict per problem (line/column for JSON, path/message/value
            for validation).
    """

    def __init__(
        self,
        message: str,
        error_type: str,
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)


def _json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location the way it reads in the JSON file.

    Examples:
        >>> _json_path(("cabinets", 0, "width"))
        'cabinets[0].width'
        >>> _json_path(())
        '(root)'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path += f".{segment}" if path else str(segment)
    return path or "(root)"


def _cabinet_name(data: Any, loc: tuple[str | int, ...]) -> str | None:
    """Name of the cabinet entry an error location points into, if any."""
    if len(loc) < 2 or loc[0] != "cabinets" or not isinstance(loc[1], int):
        return None
    try:
        entry = data["cabinets"][loc[1]]
    except (KeyError, IndexError, TypeError):
        return None
    name = entry.get("name") if isinstance(entry, dict) else None
    return name if isinstance(name, str) and name else None


def _validate(data: Any, path: Path | None = None) -> CatalogConfiguration:
    try:
        config = CatalogConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details: list[dict[str, Any]] = []
        lines = ["Catalog validation failed:"]
        for err in e.errors():
            detail = {
                "path": _json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
            details.append(detail)

            where = detail["path"]
            name = _cabinet_name(data, err["loc"])
            if name is not None:
                where += f" (cabinet '{name}')"
            line = f"  - {where}: {detail['message']}"
            if detail["value"] is not None and not isinstance(detail["value"], (dict, list)):
                line += f" (got: {detail['value']!r})"
            lines.append(line)
        raise ConfigError("\n".join(lines), "validation", path=path, details=details) from e

    logger.debug(
        f"Catalog validated: {len(config.cabinets)} cabinet types, "
        f"{'default' if config.ratios is None else len(config.ratios)} ratios"
    )
    return config


def load_catalog_config(path: Path | str) -> CatalogConfiguration:
    """Load and validate a catalog from a JSON file.

    Raises:
        ConfigError: With ``error_type`` file_not_found, file_read_error,
            json_parse or validation.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"Catalog file not found: {path}", "file_not_found", path=path)

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            f"Error reading catalog file {path}: {e}", "file_read_error", path=path
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in catalog file {path} "
            f"(line {e.lineno}, column {e.colno}): {e.msg}",
            "json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    logger.debug(f"Read catalog file {path}")
    return _validate(data, path)


def load_catalog_config_from_dict(data: dict[str, Any]) -> CatalogConfiguration:
    """Validate a catalog given as an already parsed dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data)
