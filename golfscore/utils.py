"""JSON file helpers."""

import dataclasses
import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger('golfscore.utils')


def load_json(
    path: Path | str,
    schema: type[T] | None = None,
) -> Any | T:
    """
    Read a JSON file, optionally validating it against a Pydantic model.

    Args:
        path: Path to the JSON file
        schema: Optional Pydantic model for the file contents

    Returns:
        Parsed JSON, or a schema instance when schema is given

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the JSON is malformed
        ValueError: If schema validation fails

    Example:
        from golfscore.schemas import CompetitionFile
        competition = load_json('data/club_champs.json', schema=CompetitionFile)
    """
    path = Path(path)
    logger.debug(f'Loading JSON from: {path}')

    if not path.exists():
        logger.error(f'File not found: {path}')
        raise FileNotFoundError(f'File not found: {path}')

    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f'Invalid JSON in {path}: {e.msg} at position {e.pos}')
        raise

    if schema is None:
        return data

    try:
        return schema.model_validate(data)
    except ValidationError as e:
        logger.error(f'Schema validation failed for {path}: {e}')
        raise ValueError(f'Schema validation failed for {path}:\n{e}') from e


def to_jsonable(data: Any) -> Any:
    """Convert models, dataclasses and enums into plain JSON values."""
    if isinstance(data, BaseModel):
        return data.model_dump()
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return to_jsonable(dataclasses.asdict(data))
    if isinstance(data, Enum):
        return data.value
    if isinstance(data, dict):
        return {k: to_jsonable(v) for k, v in data.items()}
    if isinstance(data, (list, tuple)):
        return [to_jsonable(v) for v in data]
    return data


def save_json(path: Path | str, data: Any, indent: int = 2) -> Path:
    """
    Write data as JSON, creating parent directories.

    Args:
        path: Output path
        data: JSON-serializable data, Pydantic models or dataclasses
        indent: Indentation level (default: 2 spaces)

    Returns:
        The path written

    Raises:
        TypeError: If data is not JSON-serializable
        OSError: If the file cannot be written
    """
    path = Path(path)
    logger.debug(f'Saving JSON to: {path}')
    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(to_jsonable(data), f, indent=indent, ensure_ascii=False)
    except TypeError as e:
        logger.error(f'Data is not JSON-serializable: {e}')
        raise
    except OSError as e:
        logger.error(f'Failed to write file {path}: {e}')
        raise

    return path
